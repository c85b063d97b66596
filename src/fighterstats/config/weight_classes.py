"""Weight class breakpoints used to bucket fighters by weight."""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass
from typing import Iterable, Tuple

from fighterstats.models import WeightClass


@dataclass(frozen=True)
class WeightClassRule:
    weight_class: WeightClass
    upper_limit_kg: float | None


# Ordered lightest first. Each bucket covers [previous limit, upper limit);
# the last one is unbounded above.
_WEIGHT_CLASS_RULES: Tuple[WeightClassRule, ...] = (
    WeightClassRule(WeightClass.FLYWEIGHT, 56.7),
    WeightClassRule(WeightClass.BANTAMWEIGHT, 61.2),
    WeightClassRule(WeightClass.FEATHERWEIGHT, 65.8),
    WeightClassRule(WeightClass.LIGHTWEIGHT, 70.3),
    WeightClassRule(WeightClass.WELTERWEIGHT, 77.1),
    WeightClassRule(WeightClass.MIDDLEWEIGHT, 83.9),
    WeightClassRule(WeightClass.LIGHT_HEAVYWEIGHT, 93.0),
    WeightClassRule(WeightClass.HEAVYWEIGHT, None),
)

_BREAKPOINTS: Tuple[float, ...] = tuple(
    rule.upper_limit_kg for rule in _WEIGHT_CLASS_RULES if rule.upper_limit_kg is not None
)


def classify_weight(weight_kg: float) -> WeightClass:
    """Return the weight class whose half-open interval contains ``weight_kg``."""

    index = bisect_right(_BREAKPOINTS, weight_kg)
    return _WEIGHT_CLASS_RULES[index].weight_class


def iter_weight_classes() -> Iterable[WeightClassRule]:
    return iter(_WEIGHT_CLASS_RULES)
