"""Conversion scoring engine.

Estimates how well a piece of marketing/affiliate copy will convert:

1. six factor evaluators score the text (emotional appeal, urgency, social
   proof, value proposition, call to action, trust building)
2. the content type selects a weight vector and the weighted sum becomes the
   composite conversion score
3. the composite scales the content type's baseline CTR / conversion rate into
   predictions
4. threshold rules over the factor scores produce optimization suggestions

Scoring is deterministic and stateless; the same request always yields the
same report.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Optional, Union

from conversion_scorer.config import Config, config
from conversion_scorer.content_types import ContentType
from conversion_scorer.errors import EmptyContent
from conversion_scorer.factors import FactorScores, evaluate_factors
from conversion_scorer.lexicon import Lexicon, get_lexicon, resolve_lexicon
from conversion_scorer.predictor import (
    DEFAULT_REVENUE_PER_CONVERSION,
    Predictions,
    composite_score,
    predict,
    round_half_up,
)
from conversion_scorer.suggestions import generate_suggestions

logger = logging.getLogger(__name__)

FACTOR_LABELS = {
    "emotional_appeal": "💡 Emotional Appeal",
    "urgency": "⏰ Urgency",
    "social_proof": "👥 Social Proof",
    "value_proposition": "💎 Value Proposition",
    "call_to_action": "👉 Call to Action",
    "trust_building": "🛡️ Trust Building",
}


# ── Models ───────────────────────────────────────────────────

@dataclass(frozen=True)
class ScoreRequest:
    content: str
    content_type: Union[str, ContentType] = ContentType.BLOG
    target_audience: Optional[str] = None
    product: Optional[str] = None

    def validate(self, strict: bool = True) -> ContentType:
        """Check the request at the boundary and return its content type.

        In strict mode blank content raises ``EmptyContent`` and unknown
        content types raise ``InvalidContentType``; otherwise unknown types
        fall back to blog.
        """
        if strict and not (self.content or "").strip():
            raise EmptyContent()
        return ContentType.parse(self.content_type, strict=strict)


@dataclass(frozen=True)
class ScoreReport:
    conversion_score: int
    content_type: ContentType
    factors: FactorScores
    predictions: Predictions
    suggestions: tuple[str, ...] = ()

    @property
    def grade(self) -> str:
        s = self.conversion_score
        if s >= 90:
            return "A+"
        if s >= 80:
            return "A"
        if s >= 70:
            return "B"
        if s >= 60:
            return "C"
        if s >= 50:
            return "D"
        return "F"

    def to_dict(self) -> dict:
        f = self.factors
        p = self.predictions
        return {
            "conversionScore": self.conversion_score,
            "contentType": self.content_type.value,
            "factors": {
                "emotionalAppeal": f.emotional_appeal,
                "urgency": f.urgency,
                "socialProof": f.social_proof,
                "valueProposition": f.value_proposition,
                "callToAction": f.call_to_action,
                "trustBuilding": f.trust_building,
            },
            "predictions": {
                "estimatedCTR": p.estimated_ctr,
                "estimatedConversionRate": p.estimated_conversion_rate,
                "revenueProjection": p.revenue_projection,
            },
            "optimizationSuggestions": list(self.suggestions),
        }

    def summary(self) -> str:
        lines = [
            f"📊 Conversion Score: {self.conversion_score}/100 (Grade: {self.grade}) [{self.content_type.value}]",
            "",
            "Factors:",
        ]
        for name, score in self.factors.as_dict().items():
            bar = "█" * int(score / 10) + "░" * (10 - int(score / 10))
            lines.append(f"  {FACTOR_LABELS[name]:24s} {bar} {score:3d}")

        p = self.predictions
        lines += [
            "",
            "Predictions:",
            f"  CTR:        {p.estimated_ctr:.2f}%",
            f"  Conversion: {p.estimated_conversion_rate:.2f}%",
            f"  Revenue:    {p.revenue_projection:,}",
        ]

        if self.suggestions:
            lines.append("\n💡 Suggestions:")
            for i, s in enumerate(self.suggestions, 1):
                lines.append(f"  {i}. {s}")
        return "\n".join(lines)


# ── Scorer ───────────────────────────────────────────────────

class ConversionScorer:
    """Score marketing copy for predicted conversion performance.

    With no fixed ``lexicon`` the keyword set follows ``language``; "auto"
    picks English or Japanese per text.
    """

    def __init__(
        self,
        lexicon: Optional[Lexicon] = None,
        language: str = "auto",
        revenue_per_conversion: float = DEFAULT_REVENUE_PER_CONVERSION,
        max_multiplier: Optional[float] = None,
        strict: bool = False,
    ):
        self.lexicon = lexicon
        self.language = language
        self.revenue_per_conversion = revenue_per_conversion
        self.max_multiplier = max_multiplier
        self.strict = strict

    @classmethod
    def from_config(cls, cfg: Config = config) -> "ConversionScorer":
        cfg.validate()
        lexicon = get_lexicon(cfg.LANGUAGE, cfg.LEXICON or None, cfg.LEXICON_TIMEOUT)
        return cls(
            lexicon=lexicon,
            language=cfg.LANGUAGE,
            revenue_per_conversion=cfg.REVENUE_PER_CONVERSION,
            max_multiplier=cfg.MAX_MULTIPLIER,
            strict=cfg.STRICT,
        )

    def _lexicon_for(self, content: str) -> Lexicon:
        if self.lexicon is not None:
            return self.lexicon
        return resolve_lexicon(content, self.language)

    def score(self, request: ScoreRequest) -> ScoreReport:
        content_type = request.validate(strict=self.strict)
        content = request.content or ""
        lexicon = self._lexicon_for(content)

        factors = evaluate_factors(content, content_type, request.product, lexicon)
        composite = composite_score(factors, content_type)
        predictions = predict(
            composite,
            content_type,
            revenue_per_conversion=self.revenue_per_conversion,
            max_multiplier=self.max_multiplier,
        )
        suggestions = generate_suggestions(factors, content_type, content, lexicon)

        logger.debug(
            "Scored %d chars as %s (%s lexicon): factors=%s composite=%.2f",
            len(content), content_type.value, lexicon.language, factors.as_dict(), composite,
        )
        return ScoreReport(
            conversion_score=int(round_half_up(composite)),
            content_type=content_type,
            factors=factors,
            predictions=predictions,
            suggestions=tuple(suggestions),
        )

    def compare(self, requests: Iterable[ScoreRequest]) -> list[ScoreReport]:
        """Score several requests and return the reports best first."""
        return [report for _, report in self.rank(enumerate(requests))]

    def rank(self, named: Iterable[tuple[Any, ScoreRequest]]) -> list[tuple[Any, ScoreReport]]:
        """Score ``(name, request)`` pairs; returns ``(name, report)`` best first.

        Ties keep their input order.
        """
        scored = [(name, self.score(request)) for name, request in named]
        return sorted(scored, key=lambda item: -item[1].conversion_score)


# ── Module-level convenience ─────────────────────────────────

def score_content(
    content: str,
    content_type: Union[str, ContentType] = ContentType.BLOG,
    target_audience: Optional[str] = None,
    product: Optional[str] = None,
    **kwargs,
) -> ScoreReport:
    """Quick scoring with a default scorer; kwargs go to ``ConversionScorer``."""
    scorer = ConversionScorer(**kwargs)
    return scorer.score(ScoreRequest(content, content_type, target_audience, product))
