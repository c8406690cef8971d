"""Content types and their static weight / baseline tables.

Each content type selects two things: the weight vector used to fold the six
factor scores into one composite, and the baseline CTR / conversion rate the
predictions are scaled from. Unrecognized labels fall back to ``blog`` unless
the caller asks for strict parsing.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Union

from conversion_scorer.errors import InvalidContentType

logger = logging.getLogger(__name__)

FACTOR_NAMES = (
    "emotional_appeal",
    "urgency",
    "social_proof",
    "value_proposition",
    "call_to_action",
    "trust_building",
)


# ── Models ───────────────────────────────────────────────────

class ContentType(str, Enum):
    BLOG = "blog"
    EMAIL = "email"
    SOCIAL = "social"
    LANDING_PAGE = "landing_page"
    YOUTUBE = "youtube"

    @classmethod
    def values(cls) -> list[str]:
        return [ct.value for ct in cls]

    @classmethod
    def parse(cls, label: Union[str, "ContentType", None], strict: bool = False) -> "ContentType":
        """Resolve a label to a content type.

        Labels must match a value exactly ("EMAIL" is not "email"). Anything
        else raises ``InvalidContentType`` when ``strict`` is set and falls
        back to ``BLOG`` otherwise.
        """
        if isinstance(label, ContentType):
            return label
        try:
            return cls(label)
        except ValueError:
            if strict:
                raise InvalidContentType(str(label), cls.values()) from None
            logger.warning("Unknown content type %r, falling back to %s", label, cls.BLOG.value)
            return cls.BLOG


@dataclass(frozen=True)
class WeightVector:
    emotional_appeal: float
    urgency: float
    social_proof: float
    value_proposition: float
    call_to_action: float
    trust_building: float

    def as_dict(self) -> dict[str, float]:
        return {name: getattr(self, name) for name in FACTOR_NAMES}

    @property
    def total(self) -> float:
        return sum(self.as_dict().values())

    def validate(self) -> "WeightVector":
        """Check weights are non-negative and sum to 1.0; returns self."""
        negative = [n for n, w in self.as_dict().items() if w < 0]
        if negative:
            raise ValueError(f"Negative weights: {', '.join(negative)}")
        if not math.isclose(self.total, 1.0, abs_tol=1e-9):
            raise ValueError(f"Weights must sum to 1.0 (got {self.total:.4f})")
        return self


@dataclass(frozen=True)
class Baseline:
    ctr: float          # expected click-through rate, %
    conversion: float   # expected conversion rate, %


# ── Weight Table ─────────────────────────────────────────────

WEIGHTS: MappingProxyType[ContentType, WeightVector] = MappingProxyType({
    ContentType.BLOG: WeightVector(
        emotional_appeal=0.2, urgency=0.1, social_proof=0.2,
        value_proposition=0.25, call_to_action=0.15, trust_building=0.1,
    ).validate(),
    ContentType.EMAIL: WeightVector(
        emotional_appeal=0.25, urgency=0.2, social_proof=0.15,
        value_proposition=0.2, call_to_action=0.15, trust_building=0.05,
    ).validate(),
    ContentType.LANDING_PAGE: WeightVector(
        emotional_appeal=0.15, urgency=0.2, social_proof=0.25,
        value_proposition=0.2, call_to_action=0.15, trust_building=0.05,
    ).validate(),
    ContentType.SOCIAL: WeightVector(
        emotional_appeal=0.3, urgency=0.25, social_proof=0.2,
        value_proposition=0.15, call_to_action=0.1, trust_building=0.0,
    ).validate(),
    ContentType.YOUTUBE: WeightVector(
        emotional_appeal=0.25, urgency=0.15, social_proof=0.2,
        value_proposition=0.25, call_to_action=0.1, trust_building=0.05,
    ).validate(),
})

# ── Baseline Table ───────────────────────────────────────────

BASELINES: MappingProxyType[ContentType, Baseline] = MappingProxyType({
    ContentType.BLOG: Baseline(ctr=2.5, conversion=1.2),
    ContentType.EMAIL: Baseline(ctr=15.0, conversion=3.5),
    ContentType.LANDING_PAGE: Baseline(ctr=5.0, conversion=2.8),
    ContentType.SOCIAL: Baseline(ctr=1.8, conversion=0.8),
    ContentType.YOUTUBE: Baseline(ctr=8.0, conversion=2.0),
})

def _check_complete(*tables) -> None:
    for table in tables:
        missing = set(ContentType) - set(table)
        if missing:
            raise RuntimeError(f"Missing table entries for: {sorted(ct.value for ct in missing)}")


_check_complete(WEIGHTS, BASELINES)


def get_weights(content_type: Union[str, ContentType]) -> WeightVector:
    return WEIGHTS[ContentType.parse(content_type)]


def get_baseline(content_type: Union[str, ContentType]) -> Baseline:
    return BASELINES[ContentType.parse(content_type)]
