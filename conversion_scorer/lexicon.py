"""Keyword lexicons and pattern matchers used by the factor evaluators.

A ``Lexicon`` bundles every keyword list, marker phrase and compiled pattern
the six evaluators look for, plus the language its suggestion messages are
rendered in. Two lexicons ship built in (English and Japanese); others can be
loaded from a JSON file or URL, with missing keys inherited from the built-in
lexicon of the same language.

Pattern grammars (English):
- quantity_limited:   digits + (slot|unit|seat)[s] + "limited"      e.g. "50 slots limited"
- time_limited:       digits + (day|hour)[s]                         e.g. "3 days"
- statistics:         digits + (people|customers|users) | digits + "%" | digits + "x"
- quantified_benefit: digits + "%" + improvement word | digits + "x" | currency amount
"""

from __future__ import annotations

import json
import logging
import re
import time
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Optional

import requests

from conversion_scorer.errors import LexiconError

logger = logging.getLogger(__name__)

PATTERN_FIELDS = ("quantity_limited", "time_limited", "statistics", "quantified_benefit")


@dataclass(frozen=True)
class Lexicon:
    language: str
    # emotional appeal
    positive_words: tuple[str, ...]
    pain_words: tuple[str, ...]
    story_markers: tuple[str, ...]
    # urgency
    urgency_words: tuple[str, ...]
    quantity_limited: re.Pattern
    time_limited: re.Pattern
    # social proof
    testimonial_markers: tuple[str, ...]
    statistics: re.Pattern
    endorsement_markers: tuple[str, ...]
    rating_markers: tuple[str, ...]
    # value proposition
    benefit_words: tuple[str, ...]
    quantified_benefit: re.Pattern
    differentiation_markers: tuple[str, ...]
    # call to action
    cta_phrases: tuple[str, ...]
    # trust building
    guarantee_markers: tuple[str, ...]
    experience_markers: tuple[str, ...]
    contact_markers: tuple[str, ...]
    certification_markers: tuple[str, ...]
    # email postscript
    postscript_marker: str

    def to_dict(self) -> dict:
        data = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, re.Pattern):
                data[f.name] = value.pattern
            elif isinstance(value, tuple):
                data[f.name] = list(value)
            else:
                data[f.name] = value
        return data


def find_terms(terms: tuple[str, ...], text: str) -> list[str]:
    """Distinct terms that occur in text (case-sensitive substring match)."""
    return [t for t in terms if t in text]


def contains_any(terms: tuple[str, ...], text: str) -> bool:
    return any(t in text for t in terms)


# ── Built-in Lexicons ────────────────────────────────────────

ENGLISH = Lexicon(
    language="en",
    positive_words=(
        "success", "achieve", "transform", "boost", "growth", "accomplish",
        "amazing", "incredible", "groundbreaking", "effective",
    ),
    pain_words=(
        "struggling", "worried", "problem", "challenge", "anxiety",
        "failure", "losing money", "missed opportunity",
    ),
    story_markers=("for example", "in practice"),
    urgency_words=(
        " now", "limited", "limited time", " only", "remaining",
        "today only", "special offer", "deadline", "last chance",
    ),
    quantity_limited=re.compile(r"\d+\s*(?:slots?|units?|seats?)\s+limited"),
    time_limited=re.compile(r"\d+\s*(?:days?|hours?)\b"),
    testimonial_markers=("customer testimonials", "case studies"),
    statistics=re.compile(r"\d+\s*(?:people|customers|users)\b|\d+\s*%|\d+x\b"),
    endorsement_markers=("recommended by", "endorsed by", "supervised by"),
    rating_markers=("★", "rating"),
    benefit_words=(
        "effect", "benefit", "profit", "improvement", "upgrade",
        "solve", "reduction", "savings", "increase",
    ),
    quantified_benefit=re.compile(
        r"\d+%\s*(?:improvement|increase|more|faster|better)"
        r"|\d+x\b"
        r"|[$€£¥]\s?\d[\d,]*(?:\.\d+)?"
    ),
    differentiation_markers=("unlike others", "unique"),
    cta_phrases=(
        "learn more", "sign up now", "click here", "try free",
        "download", "register", "buy now", "get started",
    ),
    guarantee_markers=("money-back guarantee", "support"),
    experience_markers=("years of experience", "track record"),
    contact_markers=("contact us", "company profile"),
    certification_markers=("certified", "qualification"),
    postscript_marker="P.S.:",
)

JAPANESE = Lexicon(
    language="ja",
    positive_words=(
        "成功", "実現", "変革", "向上", "成長", "達成",
        "素晴らしい", "驚くべき", "画期的", "効果的",
    ),
    pain_words=("困っている", "悩み", "問題", "課題", "不安", "失敗", "損失", "機会損失"),
    story_markers=("実際に", "例えば"),
    urgency_words=("今すぐ", "限定", "期間限定", "わずか", "残り", "今だけ", "特別", "締切", "最後のチャンス"),
    quantity_limited=re.compile(r"\d+名様限定|\d+個限定"),
    time_limited=re.compile(r"\d+日間|\d+時間"),
    testimonial_markers=("お客様の声", "体験談"),
    statistics=re.compile(r"\d+人|\d+%|\d+倍"),
    endorsement_markers=("推薦", "監修"),
    rating_markers=("★", "評価"),
    benefit_words=("効果", "メリット", "利益", "向上", "改善", "解決", "短縮", "節約", "増加"),
    quantified_benefit=re.compile(r"\d+%向上|\d+倍|\d+万円"),
    differentiation_markers=("他にはない", "独自の"),
    cta_phrases=(
        "詳細はこちら", "今すぐ申し込み", "クリック", "無料で試す",
        "ダウンロード", "登録する", "購入する", "始める",
    ),
    guarantee_markers=("返金保証", "サポート"),
    experience_markers=("年の経験", "実績"),
    contact_markers=("お問い合わせ", "会社概要"),
    certification_markers=("認定", "資格"),
    postscript_marker="PS:",
)

BUILTIN_LEXICONS = {lex.language: lex for lex in (ENGLISH, JAPANESE)}


# ── Language Detection ───────────────────────────────────────

def detect_language(text: str) -> str:
    """Return "ja" when kana/kanji outnumber Latin letters, else "en"."""
    ja_chars = len(re.findall(r'[\u3040-\u30ff\u4e00-\u9fff]', text))
    en_chars = len(re.findall(r'[a-zA-Z]', text))
    return "ja" if ja_chars > en_chars else "en"


def resolve_lexicon(text: str, language: str = "auto") -> Lexicon:
    language = (language or "auto").lower()
    if language == "auto":
        language = detect_language(text)
    lexicon = BUILTIN_LEXICONS.get(language)
    if lexicon is None:
        raise LexiconError(f"No built-in lexicon for language {language!r}")
    return lexicon


# ── Loading ──────────────────────────────────────────────────

def lexicon_from_dict(data: dict) -> Lexicon:
    """Build a lexicon from a mapping; unspecified keys come from the built-in
    lexicon of the declared language (English when undeclared or unknown)."""
    if not isinstance(data, dict):
        raise LexiconError("Lexicon data must be a JSON object")

    language = data.get("language", "en")
    if not isinstance(language, str):
        raise LexiconError("language must be a string")
    base = BUILTIN_LEXICONS.get(language, ENGLISH)
    known = {f.name for f in fields(Lexicon)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise LexiconError(f"Unknown lexicon keys: {', '.join(unknown)}")

    overrides = {}
    for key, value in data.items():
        if key in ("language", "postscript_marker"):
            if not isinstance(value, str):
                raise LexiconError(f"{key} must be a string")
            overrides[key] = value
        elif key in PATTERN_FIELDS:
            if not isinstance(value, str):
                raise LexiconError(f"{key} must be a regular expression string")
            try:
                overrides[key] = re.compile(value)
            except re.error as e:
                raise LexiconError(f"Invalid pattern for {key}: {e}") from e
        else:
            if not isinstance(value, list) or not all(isinstance(v, str) and v for v in value):
                raise LexiconError(f"{key} must be a list of non-empty strings")
            overrides[key] = tuple(value)

    return replace(base, **overrides)


def _fetch_remote(url: str, timeout: float, retries: int = 3) -> str:
    last_err = None
    for attempt in range(retries):
        try:
            r = requests.get(url, timeout=timeout)
            r.raise_for_status()
            return r.text
        except requests.exceptions.Timeout:
            last_err = "request timed out"
            time.sleep(2 ** attempt)
        except requests.exceptions.HTTPError as e:
            status = e.response.status_code if e.response is not None else 0
            if status >= 500 or status == 429:
                last_err = f"server error ({status})"
                time.sleep(2 ** attempt)
            else:
                raise LexiconError(f"Failed to fetch lexicon from {url}: HTTP {status}") from e
        except requests.exceptions.RequestException as e:
            last_err = str(e)
            time.sleep(2 ** attempt)

    raise LexiconError(f"Failed to fetch lexicon from {url} after {retries} attempts: {last_err}")


def load_lexicon(source: str, timeout: float = 10, retries: int = 3) -> Lexicon:
    """Load a lexicon from a JSON file path or an http(s) URL."""
    if source.startswith(("http://", "https://")):
        raw = _fetch_remote(source, timeout, retries)
    else:
        try:
            raw = Path(source).read_text(encoding="utf-8")
        except OSError as e:
            raise LexiconError(f"Cannot read lexicon file {source}: {e}") from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise LexiconError(f"Lexicon {source} is not valid JSON: {e}") from e

    lexicon = lexicon_from_dict(data)
    logger.info("Loaded %s lexicon from %s", lexicon.language, source)
    return lexicon


def get_lexicon(language: str = "auto", source: Optional[str] = None, timeout: float = 10) -> Optional[Lexicon]:
    """Pick a fixed lexicon up front: a loaded one, a named built-in, or None
    when the language should be detected per text."""
    if source:
        return load_lexicon(source, timeout=timeout)
    if language and language.lower() != "auto":
        return resolve_lexicon("", language)
    return None
