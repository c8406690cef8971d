"""CLI tool for Conversion Scorer.

Usage:
    python -m conversion_scorer.cli score --file copy.txt --type email [--product "..."] [--json]
    python -m conversion_scorer.cli score --text "..." --type landing_page [--lang ja] [--strict]
    python -m conversion_scorer.cli compare --file a.txt --file b.txt --type blog
    python -m conversion_scorer.cli weights [--type social]
    python -m conversion_scorer.cli lexicon [--lang ja]
    python -m conversion_scorer.cli types
"""
import argparse
import json
import logging
import sys

from conversion_scorer.config import Config


def _build_scorer(args):
    from conversion_scorer.engine import ConversionScorer

    cfg = Config()
    if getattr(args, "lang", None):
        cfg.LANGUAGE = args.lang
    if getattr(args, "lexicon", None):
        cfg.LEXICON = args.lexicon
    if getattr(args, "strict", False):
        cfg.STRICT = True
    return ConversionScorer.from_config(cfg)


def cmd_score(args):
    """Score a single piece of copy."""
    from conversion_scorer.engine import ScoreRequest

    text = _read_input(args.file, args.text)
    if text is None:
        print("❌ No input. Use --file or --text")
        sys.exit(1)

    scorer = _build_scorer(args)
    report = scorer.score(ScoreRequest(text, args.type, args.audience, args.product))
    if args.json:
        print(json.dumps(report.to_dict(), ensure_ascii=False, indent=2))
    else:
        print(report.summary())


def cmd_compare(args):
    """Rank several pieces of copy by conversion score."""
    from conversion_scorer.engine import ScoreRequest

    scorer = _build_scorer(args)
    ranked = scorer.rank((path, ScoreRequest(_read_input(path), args.type)) for path in args.file)

    print(f"🏆 Ranking ({args.type})")
    for i, (path, report) in enumerate(ranked, 1):
        p = report.predictions
        print(f"  {i}. {path}: {report.conversion_score}/100 ({report.grade}) "
              f"CTR {p.estimated_ctr:.2f}% / CVR {p.estimated_conversion_rate:.2f}%")


def cmd_weights(args):
    """Show weight and baseline tables."""
    from conversion_scorer.content_types import BASELINES, FACTOR_NAMES, WEIGHTS, ContentType

    types = [ContentType.parse(args.type, strict=True)] if args.type else list(ContentType)
    header = "  ".join(f"{n[:10]:>10s}" for n in FACTOR_NAMES)
    print(f"{'type':14s}{header}  {'ctr%':>6s}  {'cvr%':>6s}")
    for ct in types:
        w = WEIGHTS[ct].as_dict()
        b = BASELINES[ct]
        row = "  ".join(f"{w[n]:>10.2f}" for n in FACTOR_NAMES)
        print(f"{ct.value:14s}{row}  {b.ctr:>6.1f}  {b.conversion:>6.1f}")


def cmd_lexicon(args):
    """Dump a built-in lexicon as JSON (a template for --lexicon files)."""
    from conversion_scorer.lexicon import resolve_lexicon

    lexicon = resolve_lexicon("", args.lang)
    print(json.dumps(lexicon.to_dict(), ensure_ascii=False, indent=2))


def cmd_types(args):
    """List content types."""
    from conversion_scorer.content_types import ContentType
    print("📋 Content Types:")
    for ct in ContentType:
        print(f"  • {ct.value}")


def _read_input(file_path=None, text=None):
    """Read input from file or text argument."""
    if file_path:
        with open(file_path, encoding="utf-8") as f:
            return f.read()
    if text is not None:
        return text
    if not sys.stdin.isatty():
        return sys.stdin.read()
    return None


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="conversion-scorer",
        description="Conversion Scorer CLI — Score marketing copy and predict CTR, conversion and revenue",
    )
    sub = parser.add_subparsers(dest="command", help="Command")

    # score
    p = sub.add_parser("score", help="Score a piece of copy")
    p.add_argument("--file", "-f", help="Input file")
    p.add_argument("--text", "-t", help="Input text")
    p.add_argument("--type", default="blog", help="Content type")
    p.add_argument("--product", help="Product name")
    p.add_argument("--audience", help="Target audience")
    p.add_argument("--lang", help="Lexicon language (auto, en, ja)")
    p.add_argument("--lexicon", help="Lexicon JSON file or URL")
    p.add_argument("--strict", action="store_true", help="Reject empty text and unknown types")
    p.add_argument("--json", action="store_true", help="Print the report as JSON")

    # compare
    p = sub.add_parser("compare", help="Rank several pieces of copy")
    p.add_argument("--file", "-f", action="append", required=True, help="Input file (repeatable)")
    p.add_argument("--type", default="blog", help="Content type")
    p.add_argument("--lang", help="Lexicon language (auto, en, ja)")
    p.add_argument("--lexicon", help="Lexicon JSON file or URL")
    p.add_argument("--strict", action="store_true", help="Reject empty text and unknown types")

    # weights
    p = sub.add_parser("weights", help="Show weight and baseline tables")
    p.add_argument("--type", help="Only this content type")

    # lexicon
    p = sub.add_parser("lexicon", help="Dump a built-in lexicon as JSON")
    p.add_argument("--lang", default="en", help="Lexicon language (en, ja)")

    # types
    sub.add_parser("types", help="List content types")

    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        sys.exit(1)

    logging.basicConfig(
        level=getattr(logging, Config().LOG_LEVEL, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    commands = {
        "score": cmd_score,
        "compare": cmd_compare,
        "weights": cmd_weights,
        "lexicon": cmd_lexicon,
        "types": cmd_types,
    }
    try:
        commands[args.command](args)
    except (ValueError, OSError) as e:
        print(f"❌ {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
