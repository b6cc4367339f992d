from typing import Dict, Iterable, Optional, Tuple

from va_compensation_calculator.config import RATING_MAX, RATING_MIN
from va_compensation_calculator.exceptions import (
    EmptyRatingsError,
    InvalidRatingError,
    UnknownScenarioError,
)
from va_compensation_calculator.logging_config import get_logger
from va_compensation_calculator.models import RatingList, Scenario, ScenarioName

logger = get_logger(__name__)


def coerce_rating(value: int) -> Tuple[int, bool]:
    """
    Clamp a single entered rating.

    Returns (rating, coerced). Anything outside 0-100 becomes 0 and is
    reported as coerced so the caller can warn the user.
    """
    if value < RATING_MIN or value > RATING_MAX:
        return 0, True
    return value, False


class ScenarioStore:
    """Holds at most one ratings list per scenario name for the session."""

    def __init__(self) -> None:
        self._scenarios: Dict[ScenarioName, Scenario] = {}

    @staticmethod
    def _resolve(name) -> ScenarioName:
        try:
            return ScenarioName(name)
        except ValueError:
            raise UnknownScenarioError(name) from None

    def record_ratings(self, name, ratings: Iterable[int]) -> RatingList:
        """
        Store the ratings for a scenario, replacing anything entered before.

        Ratings must already be clamped with coerce_rating. Returns the
        stored tuple.
        """
        scenario_name = self._resolve(name)
        values = tuple(ratings)

        if not values:
            raise EmptyRatingsError(scenario_name.value)
        for value in values:
            if value < RATING_MIN or value > RATING_MAX:
                raise InvalidRatingError(scenario_name.value, value)

        scenario = Scenario(name=scenario_name, ratings=values)
        self._scenarios[scenario_name] = scenario

        logger.info("Recorded %s ratings: %s", scenario_name.value, list(scenario.ratings))
        return scenario.ratings

    def get(self, name) -> Optional[Scenario]:
        return self._scenarios.get(self._resolve(name))

    def ratings_for(self, name) -> RatingList:
        scenario = self.get(name)
        return scenario.ratings if scenario is not None else ()
