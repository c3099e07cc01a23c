"""
Client-side filters for candidate tables.

A FilterState is an immutable snapshot of what the user picked; applying it
to a list never mutates the list or the state.
"""

import math
from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Optional

ALL = "all"
DEFAULT_SCORE_MIN = 0.0
DEFAULT_SCORE_MAX = 100.0

Predicate = Callable[[Any], bool]


@dataclass(frozen=True)
class FilterState:
    role_code: str = ALL
    score_min: Optional[float] = None
    score_max: Optional[float] = None
    jd_mapping: str = ALL

    def reset(self) -> "FilterState":
        return FilterState()

    @property
    def has_score_bounds(self) -> bool:
        return self.score_min is not None or self.score_max is not None


def parse_score(value: Any) -> Optional[float]:
    """Score text -> float, or None when absent or not a number."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        score = float(value)
    else:
        text = str(value).strip()
        if not text:
            return None
        try:
            score = float(text)
        except ValueError:
            return None
    return None if math.isnan(score) else score


def match_value(attribute: str, selected: str) -> Predicate:
    """Exact match on an attribute, or everything when selected is "all"."""
    if not selected or selected == ALL:
        return lambda item: True
    return lambda item: getattr(item, attribute, None) == selected


def score_in_range(score_min: Optional[float], score_max: Optional[float]) -> Predicate:
    """Inclusive score range. Rows without a usable score fail once any bound is set."""
    if score_min is None and score_max is None:
        return lambda item: True

    low = DEFAULT_SCORE_MIN if score_min is None else score_min
    high = DEFAULT_SCORE_MAX if score_max is None else score_max

    def predicate(item: Any) -> bool:
        score = parse_score(getattr(item, "score", None))
        return score is not None and low <= score <= high

    return predicate


def build_predicates(state: FilterState) -> List[Predicate]:
    return [
        match_value("role_code", state.role_code),
        match_value("jd_mapping", state.jd_mapping),
        score_in_range(state.score_min, state.score_max),
    ]


def apply_filters(items: Iterable[Any], state: FilterState) -> List[Any]:
    """Items passing every filter in state, in their original order."""
    predicates = build_predicates(state)
    return [item for item in items if all(predicate(item) for predicate in predicates)]
