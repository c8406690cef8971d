"""Tests for the command-line interface."""
import json

import pytest
from conversion_scorer.cli import main


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("SCORER_LANGUAGE", "SCORER_LEXICON", "SCORER_STRICT", "SCORER_MAX_MULTIPLIER"):
        monkeypatch.delenv(name, raising=False)


class TestScoreCommand:
    def test_summary(self, capsys):
        main(["score", "--text", "See our case studies.", "--type", "landing_page"])
        out = capsys.readouterr().out
        assert "Conversion Score: 45/100" in out
        assert "landing_page" in out

    def test_json(self, capsys):
        main(["score", "--text", "learn more or sign up now", "--type", "email", "--json"])
        data = json.loads(capsys.readouterr().out)
        assert data["factors"]["callToAction"] == 85
        assert data["contentType"] == "email"

    def test_file_input(self, tmp_path, capsys):
        path = tmp_path / "copy.txt"
        path.write_text("お客様の声", encoding="utf-8")
        main(["score", "--file", str(path), "--json"])
        data = json.loads(capsys.readouterr().out)
        assert data["factors"]["socialProof"] == 60

    def test_custom_lexicon(self, tmp_path, capsys):
        path = tmp_path / "lex.json"
        path.write_text(json.dumps({"cta_phrases": ["book a call"]}), encoding="utf-8")
        main(["score", "--text", "book a call", "--lexicon", str(path), "--json"])
        data = json.loads(capsys.readouterr().out)
        assert data["factors"]["callToAction"] == 55

    def test_strict_unknown_type(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["score", "--text", "hello", "--type", "podcast", "--strict"])
        assert exc.value.code == 1
        assert "podcast" in capsys.readouterr().out

    def test_strict_empty_text(self, capsys):
        with pytest.raises(SystemExit):
            main(["score", "--text", "", "--strict"])
        assert "empty" in capsys.readouterr().out

    def test_lenient_unknown_type(self, capsys):
        main(["score", "--text", "hello", "--type", "podcast", "--json"])
        assert json.loads(capsys.readouterr().out)["contentType"] == "blog"


class TestCompareCommand:
    def test_ranking(self, tmp_path, capsys):
        weak = tmp_path / "weak.txt"
        strong = tmp_path / "strong.txt"
        weak.write_text("hello", encoding="utf-8")
        strong.write_text("case studies, 90% success, unique benefit, buy now, support", encoding="utf-8")
        main(["compare", "--file", str(weak), "--file", str(strong)])
        out = capsys.readouterr().out
        assert out.index("strong.txt") < out.index("weak.txt")

    def test_ties_keep_argument_order(self, tmp_path, capsys):
        first = tmp_path / "first.txt"
        second = tmp_path / "second.txt"
        for path in (second, first):
            path.write_text("hello", encoding="utf-8")
        main(["compare", "--file", str(first), "--file", str(second)])
        out = capsys.readouterr().out
        assert out.index("first.txt") < out.index("second.txt")

    def test_missing_file(self, tmp_path, capsys):
        with pytest.raises(SystemExit):
            main(["compare", "--file", str(tmp_path / "nope.txt")])


class TestInfoCommands:
    def test_types(self, capsys):
        main(["types"])
        out = capsys.readouterr().out
        for name in ("blog", "email", "social", "landing_page", "youtube"):
            assert name in out

    def test_weights_all(self, capsys):
        main(["weights"])
        lines = capsys.readouterr().out.strip().splitlines()
        assert len(lines) == 6

    def test_weights_single(self, capsys):
        main(["weights", "--type", "social"])
        out = capsys.readouterr().out
        assert "social" in out
        assert "blog" not in out

    def test_weights_unknown(self):
        with pytest.raises(SystemExit):
            main(["weights", "--type", "podcast"])

    def test_lexicon_dump(self, capsys):
        main(["lexicon", "--lang", "ja"])
        data = json.loads(capsys.readouterr().out)
        assert data["language"] == "ja"
        assert "詳細はこちら" in data["cta_phrases"]

    def test_no_command(self):
        with pytest.raises(SystemExit):
            main([])
