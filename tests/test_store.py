"""Tests for rating coercion and the scenario store."""

import pytest

from va_compensation_calculator.exceptions import (
    EmptyRatingsError,
    InvalidRatingError,
    UnknownScenarioError,
)
from va_compensation_calculator.models import Scenario, ScenarioName
from va_compensation_calculator.store import ScenarioStore, coerce_rating


class TestCoerceRating:
    """Tests for clamping a single rating."""

    @pytest.mark.parametrize("value", [0, 10, 55, 100])
    def test_in_range_kept(self, value: int) -> None:
        assert coerce_rating(value) == (value, False)

    @pytest.mark.parametrize("value", [-5, -1, 101, 150])
    def test_out_of_range_becomes_zero(self, value: int) -> None:
        assert coerce_rating(value) == (0, True)


class TestScenarioStore:
    """Tests for recording and reading scenarios."""

    def test_record_returns_stored_tuple(self, store: ScenarioStore) -> None:
        ratings = store.record_ratings(ScenarioName.CURRENT, [30, 20])

        assert ratings == (30, 20)
        assert store.get(ScenarioName.CURRENT) == Scenario(ScenarioName.CURRENT, (30, 20))

    def test_unclamped_ratings_rejected(self, store: ScenarioStore) -> None:
        with pytest.raises(InvalidRatingError):
            store.record_ratings(ScenarioName.CURRENT, [150])
        with pytest.raises(InvalidRatingError):
            store.record_ratings(ScenarioName.PROPOSED, [40, -5])

        assert store.get(ScenarioName.CURRENT) is None
        assert store.get(ScenarioName.PROPOSED) is None

    def test_boundary_ratings_accepted(self, store: ScenarioStore) -> None:
        assert store.record_ratings(ScenarioName.CURRENT, [0, 100]) == (0, 100)

    def test_reentry_replaces(self, store: ScenarioStore) -> None:
        store.record_ratings(ScenarioName.CURRENT, [10, 20, 30])
        store.record_ratings(ScenarioName.CURRENT, [70])

        assert store.ratings_for(ScenarioName.CURRENT) == (70,)

    def test_scenarios_are_independent(self, store: ScenarioStore) -> None:
        store.record_ratings(ScenarioName.CURRENT, [10])
        store.record_ratings(ScenarioName.PROPOSED, [90])

        assert store.ratings_for(ScenarioName.CURRENT) == (10,)
        assert store.ratings_for(ScenarioName.PROPOSED) == (90,)

    def test_input_list_not_aliased(self, store: ScenarioStore) -> None:
        values = [30, 20]
        store.record_ratings(ScenarioName.CURRENT, values)
        values.append(90)

        assert store.ratings_for(ScenarioName.CURRENT) == (30, 20)

    def test_absent_scenario(self, store: ScenarioStore) -> None:
        assert store.get(ScenarioName.PROPOSED) is None
        assert store.ratings_for(ScenarioName.PROPOSED) == ()

    def test_zero_rating_is_not_absent(self, store: ScenarioStore) -> None:
        store.record_ratings(ScenarioName.CURRENT, [0])
        assert store.ratings_for(ScenarioName.CURRENT) == (0,)

    def test_accepts_plain_names(self, store: ScenarioStore) -> None:
        store.record_ratings("proposed", [50])
        assert store.ratings_for(ScenarioName.PROPOSED) == (50,)

    def test_unknown_name(self, store: ScenarioStore) -> None:
        with pytest.raises(UnknownScenarioError):
            store.record_ratings("future", [10])

    def test_empty_ratings_rejected(self, store: ScenarioStore) -> None:
        with pytest.raises(EmptyRatingsError):
            store.record_ratings(ScenarioName.CURRENT, [])
        assert store.get(ScenarioName.CURRENT) is None
