"""Factor evaluators.

Six independent heuristics, each scoring one persuasion dimension on 0-100.
Every evaluator starts from a fixed base score, adds a bonus for each signal
it finds in the text and caps the result at 100. No signal found means the
base score; none of them can fail.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Optional, Union

from conversion_scorer.content_types import ContentType
from conversion_scorer.lexicon import ENGLISH, Lexicon, contains_any, find_terms

MAX_SCORE = 100

BASE_SCORES = {
    "emotional_appeal": 50,
    "urgency": 30,
    "social_proof": 40,
    "value_proposition": 45,
    "call_to_action": 35,
    "trust_building": 40,
}


@dataclass(frozen=True)
class FactorScores:
    emotional_appeal: int
    urgency: int
    social_proof: int
    value_proposition: int
    call_to_action: int
    trust_building: int

    def __post_init__(self):
        for name, value in asdict(self).items():
            if not 0 <= value <= MAX_SCORE:
                raise ValueError(f"{name} out of range: {value}")

    def as_dict(self) -> dict[str, int]:
        return asdict(self)


def _cap(score: int) -> int:
    return min(MAX_SCORE, score)


def evaluate_emotional_appeal(content: str, lexicon: Lexicon = ENGLISH) -> int:
    score = BASE_SCORES["emotional_appeal"]
    score += len(find_terms(lexicon.positive_words, content)) * 8
    score += len(find_terms(lexicon.pain_words, content)) * 5

    # storytelling
    if contains_any(lexicon.story_markers, content):
        score += 10

    return _cap(score)


def evaluate_urgency(content: str, lexicon: Lexicon = ENGLISH) -> int:
    score = BASE_SCORES["urgency"]
    score += len(find_terms(lexicon.urgency_words, content)) * 15

    if lexicon.quantity_limited.search(content):
        score += 20
    if lexicon.time_limited.search(content):
        score += 15

    return _cap(score)


def evaluate_social_proof(content: str, lexicon: Lexicon = ENGLISH) -> int:
    score = BASE_SCORES["social_proof"]

    if contains_any(lexicon.testimonial_markers, content):
        score += 20
    if lexicon.statistics.search(content):
        score += 15
    if contains_any(lexicon.endorsement_markers, content):
        score += 15
    if contains_any(lexicon.rating_markers, content):
        score += 10

    return _cap(score)


def evaluate_value_proposition(
    content: str,
    product: Optional[str] = None,
    lexicon: Lexicon = ENGLISH,
) -> int:
    """Score benefit language, quantified results and differentiation.

    ``product`` is accepted so callers can pass the full request through; the
    heuristics only look at the content itself.
    """
    score = BASE_SCORES["value_proposition"]
    score += len(find_terms(lexicon.benefit_words, content)) * 8

    if lexicon.quantified_benefit.search(content):
        score += 20
    if contains_any(lexicon.differentiation_markers, content):
        score += 15

    return _cap(score)


def first_cta_position(content: str, lexicon: Lexicon = ENGLISH) -> int:
    """Offset of the earliest CTA phrase occurrence, or -1 if there is none."""
    positions = [content.find(p) for p in lexicon.cta_phrases]
    positions = [p for p in positions if p >= 0]
    return min(positions) if positions else -1


def evaluate_call_to_action(
    content: str,
    content_type: Union[str, ContentType] = ContentType.BLOG,
    lexicon: Lexicon = ENGLISH,
) -> int:
    score = BASE_SCORES["call_to_action"]

    cta_count = len(find_terms(lexicon.cta_phrases, content))
    score += cta_count * 20

    # CTA placed in the closing 30% of the text
    position = first_cta_position(content, lexicon)
    if position > len(content) * 0.7:
        score += 10

    # emails convert better with several touch points
    if ContentType.parse(content_type) is ContentType.EMAIL and cta_count >= 2:
        score += 10

    return _cap(score)


def evaluate_trust_building(content: str, lexicon: Lexicon = ENGLISH) -> int:
    score = BASE_SCORES["trust_building"]

    if contains_any(lexicon.guarantee_markers, content):
        score += 15
    if contains_any(lexicon.experience_markers, content):
        score += 10
    if contains_any(lexicon.contact_markers, content):
        score += 10
    if contains_any(lexicon.certification_markers, content):
        score += 10

    return _cap(score)


def evaluate_factors(
    content: str,
    content_type: Union[str, ContentType] = ContentType.BLOG,
    product: Optional[str] = None,
    lexicon: Lexicon = ENGLISH,
) -> FactorScores:
    """Run all six evaluators over one piece of content."""
    return FactorScores(
        emotional_appeal=evaluate_emotional_appeal(content, lexicon),
        urgency=evaluate_urgency(content, lexicon),
        social_proof=evaluate_social_proof(content, lexicon),
        value_proposition=evaluate_value_proposition(content, product, lexicon),
        call_to_action=evaluate_call_to_action(content, content_type, lexicon),
        trust_building=evaluate_trust_building(content, lexicon),
    )
