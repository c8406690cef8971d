"""Optimization suggestions from factor scores."""

from __future__ import annotations

from typing import Union

from conversion_scorer.content_types import ContentType
from conversion_scorer.factors import FactorScores
from conversion_scorer.lexicon import ENGLISH, Lexicon

# (factor, threshold): a score below the threshold triggers the factor's message.
FACTOR_THRESHOLDS = (
    ("emotional_appeal", 70),
    ("urgency", 60),
    ("social_proof", 70),
    ("value_proposition", 70),
    ("call_to_action", 70),
    ("trust_building", 60),
)

LANDING_PAGE_SOCIAL_PROOF_THRESHOLD = 80

MESSAGES = {
    "en": {
        "emotional_appeal": "Add a stronger emotional appeal (success stories, a transformation narrative)",
        "urgency": "Add elements that create urgency (limited-time or limited-quantity offers)",
        "social_proof": "Strengthen social proof (customer testimonials, hard numbers, ratings)",
        "value_proposition": "Make the value proposition clearer (concrete benefits, quantified results)",
        "call_to_action": "Make the call to action stronger (a clear CTA, multiple touch points)",
        "trust_building": "Add trust signals (guarantees, track record, transparency)",
        "postscript": "Add a postscript (P.S.) to repeat the offer one more time",
        "landing_testimonials": "Place several customer testimonials on the landing page",
    },
    "ja": {
        "emotional_appeal": "より強い感情的な訴求を追加してください（成功事例、変革の物語など）",
        "urgency": "緊急性を高める要素を追加してください（期間限定、数量限定など）",
        "social_proof": "社会的証明を強化してください（お客様の声、実績数値、評価など）",
        "value_proposition": "価値提案をより明確にしてください（具体的なベネフィット、数値化された効果）",
        "call_to_action": "行動喚起をより強力にしてください（明確なCTA、複数のタッチポイント）",
        "trust_building": "信頼性を高める要素を追加してください（保証、実績、透明性）",
        "postscript": "追伸（PS）を追加してもう一度訴求してください",
        "landing_testimonials": "ランディングページには必ず顧客の証言を複数配置してください",
    },
}


def generate_suggestions(
    factors: FactorScores,
    content_type: Union[str, ContentType],
    content: str,
    lexicon: Lexicon = ENGLISH,
) -> list[str]:
    """Apply the suggestion rules in order and return the triggered messages."""
    messages = MESSAGES.get(lexicon.language, MESSAGES["en"])
    content_type = ContentType.parse(content_type)
    scores = factors.as_dict()
    suggestions = []

    for name, threshold in FACTOR_THRESHOLDS:
        if scores[name] < threshold:
            suggestions.append(messages[name])

    if content_type is ContentType.EMAIL and lexicon.postscript_marker not in content:
        suggestions.append(messages["postscript"])

    if (content_type is ContentType.LANDING_PAGE
            and factors.social_proof < LANDING_PAGE_SOCIAL_PROOF_THRESHOLD):
        suggestions.append(messages["landing_testimonials"])

    return suggestions
