"""
Unit tests for CellStatus.

Tests the tagged status rules, the guess cycle, and observation conversion.
"""
import pytest
from minefield import (
    COVERED,
    EXPLODED_MINE,
    INCORRECT_GUESS,
    MINE,
    MINE_GUESS,
    QUESTION,
    CellState,
    CellStatus,
)


UNCOVERED_STATUSES = [
    CellStatus.revealed(0),
    CellStatus.revealed(5),
    MINE,
    INCORRECT_GUESS,
    EXPLODED_MINE,
]


# ============================================================================
# Status Construction Tests
# ============================================================================

class TestCellStatusConstruction:
    """Test creation rules of the tagged status."""

    def test_revealed_carries_adjacent_count(self) -> None:
        """Revealed status should keep its adjacent mine count."""
        status = CellStatus.revealed(3)
        assert status.state == CellState.REVEALED
        assert status.adjacent_mines == 3

    def test_covered_has_no_adjacent_count(self) -> None:
        """Covered status should not carry a count."""
        assert COVERED.adjacent_mines is None

    @pytest.mark.parametrize("count", [-1, 9, None])
    def test_revealed_with_bad_count_raises_error(self, count) -> None:
        """Revealed status needs a count in [0, 8]."""
        with pytest.raises(ValueError, match="adjacent mine count"):
            CellStatus(CellState.REVEALED, count)

    def test_count_on_other_state_raises_error(self) -> None:
        """Only revealed cells may carry a count."""
        with pytest.raises(ValueError, match="cannot carry"):
            CellStatus(CellState.MINE, 2)

    def test_statuses_compare_by_value(self) -> None:
        """Equal state and count should compare equal."""
        assert CellStatus.revealed(2) == CellStatus.revealed(2)
        assert CellStatus.revealed(2) != CellStatus.revealed(3)
        assert CellStatus(CellState.MINE_GUESS) == MINE_GUESS


# ============================================================================
# Guess Cycle Tests
# ============================================================================

class TestGuessCycle:
    """Test the covered-state guess cycle."""

    def test_covered_becomes_mine_guess(self) -> None:
        """First cycle flags the cell."""
        assert COVERED.cycled() == MINE_GUESS

    def test_mine_guess_becomes_question(self) -> None:
        """Second cycle turns the flag into a question mark."""
        assert MINE_GUESS.cycled() == QUESTION

    def test_question_becomes_covered(self) -> None:
        """Third cycle returns to covered."""
        assert QUESTION.cycled() == COVERED

    @pytest.mark.parametrize("status", UNCOVERED_STATUSES)
    def test_uncovered_status_is_unchanged(self, status: CellStatus) -> None:
        """Cycling an uncovered status should have no effect."""
        assert status.cycled() == status


# ============================================================================
# Status Predicate Tests
# ============================================================================

class TestStatusPredicates:
    """Test covered/uncovered classification."""

    @pytest.mark.parametrize("status", [COVERED, MINE_GUESS, QUESTION])
    def test_covered_states(self, status: CellStatus) -> None:
        """Pre-reveal states are covered."""
        assert status.is_covered is True
        assert status.is_uncovered is False

    @pytest.mark.parametrize("status", UNCOVERED_STATUSES)
    def test_uncovered_states(self, status: CellStatus) -> None:
        """Post-reveal states are uncovered."""
        assert status.is_uncovered is True
        assert status.is_covered is False

    def test_only_mine_guess_is_flagged(self) -> None:
        """Question marks are not flags."""
        assert MINE_GUESS.is_flagged is True
        assert QUESTION.is_flagged is False
        assert INCORRECT_GUESS.is_flagged is False


# ============================================================================
# Cell Observation Tests
# ============================================================================

class TestCellObservation:
    """Test observation values for ML agent."""

    def test_covered_observations(self) -> None:
        """Covered states map to negative codes."""
        assert COVERED.to_observation() == -1
        assert MINE_GUESS.to_observation() == -2
        assert QUESTION.to_observation() == -3

    @pytest.mark.parametrize("count", range(0, 9))
    def test_revealed_observation_matches_adjacent_count(
        self, count: int
    ) -> None:
        """Revealed cell returns its adjacent mine count."""
        assert CellStatus.revealed(count).to_observation() == count

    def test_end_of_round_observations(self) -> None:
        """End-of-round markers map to 9, 10 and 11."""
        assert MINE.to_observation() == 9
        assert INCORRECT_GUESS.to_observation() == 10
        assert EXPLODED_MINE.to_observation() == 11
