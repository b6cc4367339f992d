from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Tuple


# Ordered individual ratings; the empty tuple means "not yet entered".
RatingList = Tuple[int, ...]


class ScenarioName(str, Enum):
    CURRENT = "current"
    PROPOSED = "proposed"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @property
    def menu_option(self) -> int:
        # Menu option that enters this scenario's ratings.
        return 1 if self is ScenarioName.CURRENT else 2


class PayChange(str, Enum):
    INCREASE = "increase"
    DECREASE = "decrease"
    NO_CHANGE = "no_change"


@dataclass(frozen=True)
class Scenario:
    """
    One named set of ratings for the session.

    Replaced as a whole when the user enters the same scenario again.
    """
    name: ScenarioName
    ratings: RatingList          # each value already clamped to 0-100


@dataclass(frozen=True)
class CompensationRatesConfig:
    """
    Monthly compensation lookup keyed by combined rating.

    The amounts are sample figures used for planning only; they are not
    the official VA compensation tables.
    """
    year_label: str                       # e.g. "sample"
    monthly_rates: Mapping[int, int]      # combined rating -> dollars per month


@dataclass(frozen=True)
class ScenarioSummary:
    ratings: RatingList
    combined_rating: int         # always a multiple of 10, 0-100
    monthly_compensation: int    # whole dollars


@dataclass(frozen=True)
class ScenarioComparison:
    current: ScenarioSummary
    proposed: ScenarioSummary
    pay_difference: int          # proposed - current, signed
    change: PayChange

    @property
    def magnitude(self) -> int:
        return abs(self.pay_difference)
