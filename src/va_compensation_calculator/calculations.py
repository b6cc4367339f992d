import math
from typing import Dict, List, Optional, Sequence

import pandas as pd

from va_compensation_calculator.config import (
    COMBINED_RATING_MAX,
    DEFAULT_COMPENSATION_RATES,
)
from va_compensation_calculator.logging_config import get_logger
from va_compensation_calculator.models import (
    CompensationRatesConfig,
    PayChange,
    ScenarioComparison,
    ScenarioSummary,
)

logger = get_logger(__name__)

BREAKDOWN_COLUMNS = ["Rating", "Remaining before", "Added", "Running total"]


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def round_to_nearest_ten(value: int) -> int:
    """Round to the nearest multiple of 10; a remainder of 5 rounds up."""
    remainder = value % 10
    if remainder >= 5:
        return value + (10 - remainder)
    return value - remainder


def _whole_person_total(ratings: Sequence[int]) -> float:
    combined = 0.0
    for r in sorted(ratings, reverse=True):
        combined = combined + (100 - combined) * (r / 100.0)
    return combined


def combine_ratings(ratings: Optional[Sequence[int]]) -> int:
    """
    Combine individual ratings with the whole-person formula.

    Steps:
      1. Sort ratings from highest to lowest.
      2. Start from 0%. For each rating r:
         combined = combined + (100 - combined) * (r / 100)
      3. Round to a whole percent, then to the nearest 10 (5 rounds up).
      4. Cap at 100.

    Returns 0 for no ratings.
    """
    if not ratings:
        return 0

    total = _whole_person_total(ratings)
    combined = min(round_to_nearest_ten(round_half_up(total)), COMBINED_RATING_MAX)

    logger.debug("Combined %s -> %.2f -> %d%%", list(ratings), total, combined)
    return combined


def combination_breakdown(ratings: Optional[Sequence[int]]) -> pd.DataFrame:
    """
    Show how the whole-person formula reaches its total, one row per rating.

    Rows follow the order the ratings are applied (highest first). The last
    "Running total" is the unrounded value combine_ratings starts rounding from.
    """
    rows: List[Dict[str, float]] = []
    combined = 0.0

    for r in sorted(ratings or (), reverse=True):
        remaining = 100 - combined
        added = remaining * (r / 100.0)
        combined = combined + added

        rows.append(
            {
                "Rating": r,
                "Remaining before": remaining,
                "Added": added,
                "Running total": combined,
            }
        )

    return pd.DataFrame(rows, columns=BREAKDOWN_COLUMNS)


def monthly_compensation(
    combined: int,
    rates: CompensationRatesConfig = DEFAULT_COMPENSATION_RATES,
) -> int:
    """
    Look up the sample monthly compensation for a combined rating.

    0% and anything not in the table pay nothing.
    """
    return rates.monthly_rates.get(combined, 0)


def summarize_scenario(
    ratings: Sequence[int],
    rates: CompensationRatesConfig = DEFAULT_COMPENSATION_RATES,
) -> ScenarioSummary:
    combined = combine_ratings(ratings)
    return ScenarioSummary(
        ratings=tuple(ratings),
        combined_rating=combined,
        monthly_compensation=monthly_compensation(combined, rates),
    )


def compare_summaries(
    current: ScenarioSummary,
    proposed: ScenarioSummary,
) -> ScenarioComparison:
    difference = proposed.monthly_compensation - current.monthly_compensation

    if difference > 0:
        change = PayChange.INCREASE
    elif difference < 0:
        change = PayChange.DECREASE
    else:
        change = PayChange.NO_CHANGE

    return ScenarioComparison(
        current=current,
        proposed=proposed,
        pay_difference=difference,
        change=change,
    )
