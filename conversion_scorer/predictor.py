"""Composite scoring and performance predictions.

The composite is the weighted sum of the six factor scores. Predictions scale
the content type's baseline CTR and conversion rate linearly by
``composite / REFERENCE_SCORE``: a composite of 75 predicts exactly the
baseline, 100 predicts a third above it. The multiplier is unbounded unless a
ceiling is given.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Union

from conversion_scorer.content_types import ContentType, WeightVector, get_baseline, get_weights
from conversion_scorer.factors import FactorScores

REFERENCE_SCORE = 75
DEFAULT_REVENUE_PER_CONVERSION = 50_000


@dataclass(frozen=True)
class Predictions:
    estimated_ctr: float              # %
    estimated_conversion_rate: float  # %
    revenue_projection: int           # currency units


def round_half_up(value: float, digits: int = 0) -> float:
    """Round with halves going up; builtin ``round`` sends them to the even neighbour."""
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def weighted_score(factors: FactorScores, weights: WeightVector) -> float:
    """Unrounded weighted sum of the factor scores."""
    w = weights.as_dict()
    return sum(score * w[name] for name, score in factors.as_dict().items())


def composite_score(
    factors: FactorScores,
    content_type: Union[str, ContentType] = ContentType.BLOG,
) -> float:
    return weighted_score(factors, get_weights(content_type))


def prediction_multiplier(composite: float, max_multiplier: Optional[float] = None) -> float:
    multiplier = composite / REFERENCE_SCORE
    if max_multiplier is not None:
        multiplier = min(multiplier, max_multiplier)
    return multiplier


def predict(
    composite: float,
    content_type: Union[str, ContentType] = ContentType.BLOG,
    revenue_per_conversion: float = DEFAULT_REVENUE_PER_CONVERSION,
    max_multiplier: Optional[float] = None,
) -> Predictions:
    baseline = get_baseline(content_type)
    multiplier = prediction_multiplier(composite, max_multiplier)
    conversion = baseline.conversion * multiplier

    return Predictions(
        estimated_ctr=round_half_up(baseline.ctr * multiplier, 2),
        estimated_conversion_rate=round_half_up(conversion, 2),
        revenue_projection=int(round_half_up(conversion * revenue_per_conversion)),
    )
