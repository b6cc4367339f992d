"""
Text reports for a single scenario and for a current vs proposed comparison.

Everything here returns lines instead of printing, so the menu decides where
the text goes and tests can inspect it directly.
"""
from typing import List, Optional, Sequence

from va_compensation_calculator.calculations import (
    combination_breakdown,
    compare_summaries,
    summarize_scenario,
)
from va_compensation_calculator.config import DEFAULT_COMPENSATION_RATES, DISCLAIMER
from va_compensation_calculator.models import (
    CompensationRatesConfig,
    PayChange,
    ScenarioName,
    ScenarioSummary,
)

_BREAKDOWN_FORMATTERS = {
    "Rating": "{}%".format,
    "Remaining before": "{:.1f}%".format,
    "Added": "{:.1f}%".format,
    "Running total": "{:.1f}%".format,
}


def not_entered_notice(name: ScenarioName) -> str:
    return (
        f"{name.value.upper()} ratings not yet entered. "
        f"Choose option {name.menu_option} to enter them."
    )


def format_breakdown(ratings: Sequence[int]) -> List[str]:
    df = combination_breakdown(ratings)
    table = df.to_string(index=False, formatters=_BREAKDOWN_FORMATTERS)
    return ["  " + line for line in table.splitlines()]


def format_summary(
    name: ScenarioName,
    summary: ScenarioSummary,
    show_breakdown: bool = False,
) -> List[str]:
    label = name.label

    lines = [f"{label} ratings: " + " ".join(f"{r}%" for r in summary.ratings)]
    if show_breakdown:
        lines.append("How the ratings combine (highest first):")
        lines.extend(format_breakdown(summary.ratings))
    lines.append(f"{label} combined rating: {summary.combined_rating}%")
    lines.append(f"{label} estimated monthly compensation: ${summary.monthly_compensation}")
    lines.append(DISCLAIMER)
    return lines


def format_scenario(
    name: ScenarioName,
    ratings: Optional[Sequence[int]],
    rates: CompensationRatesConfig = DEFAULT_COMPENSATION_RATES,
    show_breakdown: bool = False,
) -> List[str]:
    if not ratings:
        return [not_entered_notice(name)]
    return format_summary(name, summarize_scenario(ratings, rates), show_breakdown)


def format_comparison(
    current: Optional[Sequence[int]],
    proposed: Optional[Sequence[int]],
    rates: CompensationRatesConfig = DEFAULT_COMPENSATION_RATES,
) -> List[str]:
    """
    Both scenario reports followed by the change in rating and pay.

    Stops at the first scenario that has not been entered yet; the
    proposed ratings are not looked at when current is missing.
    """
    if not current:
        return [not_entered_notice(ScenarioName.CURRENT)]
    if not proposed:
        return [not_entered_notice(ScenarioName.PROPOSED)]

    comparison = compare_summaries(
        summarize_scenario(current, rates),
        summarize_scenario(proposed, rates),
    )
    before, after = comparison.current, comparison.proposed

    lines = format_summary(ScenarioName.CURRENT, before)
    lines.append("")
    lines.extend(format_summary(ScenarioName.PROPOSED, after))
    lines.append("")

    lines.append("=== Difference ===")
    lines.append(
        f"Change in combined rating: {before.combined_rating}% -> {after.combined_rating}%"
    )
    lines.append(
        f"Change in monthly pay: ${before.monthly_compensation} -> ${after.monthly_compensation}"
    )

    if comparison.change == PayChange.INCREASE:
        lines.append(f"Estimated increase of ${comparison.magnitude} per month")
    elif comparison.change == PayChange.DECREASE:
        lines.append(f"Estimated decrease of ${comparison.magnitude} per month")
    else:
        lines.append("Estimated difference: no change in monthly compensation.")

    return lines
