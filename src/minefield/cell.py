"""
Cell status module for Minesweeper.

Represents what the player can see at one location of the field:
covered (possibly with a guess), revealed with its adjacent mine count,
or one of the end-of-round markers.
"""
from enum import Enum, auto
from dataclasses import dataclass
from typing import Optional


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible visible states of a cell."""

    COVERED = auto()
    MINE_GUESS = auto()
    QUESTION = auto()
    REVEALED = auto()
    MINE = auto()
    INCORRECT_GUESS = auto()
    EXPLODED_MINE = auto()


# States a cell can be in before it is uncovered.
COVERED_STATES = frozenset(
    {CellState.COVERED, CellState.MINE_GUESS, CellState.QUESTION}
)

# Next state of the guess cycle for each covered state.
_GUESS_CYCLE = {
    CellState.COVERED: CellState.MINE_GUESS,
    CellState.MINE_GUESS: CellState.QUESTION,
    CellState.QUESTION: CellState.COVERED,
}

_OBSERVATION_CODES = {
    CellState.COVERED: -1,
    CellState.MINE_GUESS: -2,
    CellState.QUESTION: -3,
    CellState.MINE: 9,
    CellState.INCORRECT_GUESS: 10,
    CellState.EXPLODED_MINE: 11,
}


# ============================================================================
# Cell Status Data Class
# ============================================================================

@dataclass(frozen=True)
class CellStatus:
    """
    Visible status of a single cell.

    Attributes:
        state: Which of the visible states the cell is in.
        adjacent_mines: Count of mines in neighboring cells (0-8) for a
            revealed cell, None for every other state.
    """

    state: CellState
    adjacent_mines: Optional[int] = None

    def __post_init__(self) -> None:
        """Check the adjacent count matches the state."""
        if self.state == CellState.REVEALED:
            if self.adjacent_mines is None or not 0 <= self.adjacent_mines <= 8:
                raise ValueError(
                    "Revealed cell needs an adjacent mine count in [0, 8]"
                )
        elif self.adjacent_mines is not None:
            raise ValueError(
                f"{self.state.name} cell cannot carry an adjacent mine count"
            )

    @classmethod
    def revealed(cls, adjacent_mines: int) -> "CellStatus":
        """Status of a safe cell uncovered with the given count."""
        return cls(CellState.REVEALED, adjacent_mines)

    def cycled(self) -> "CellStatus":
        """
        Next status in the guess cycle.

        Returns:
            COVERED -> MINE_GUESS -> QUESTION -> COVERED; any uncovered
            status is returned unchanged.
        """
        next_state = _GUESS_CYCLE.get(self.state)
        if next_state is None:
            return self
        return CellStatus(next_state)

    @property
    def is_covered(self) -> bool:
        """Check if cell is in any covered state, guessed or not."""
        return self.state in COVERED_STATES

    @property
    def is_uncovered(self) -> bool:
        """Check if cell is in any uncovered state."""
        return self.state not in COVERED_STATES

    @property
    def is_revealed(self) -> bool:
        """Check if cell is a safe cell the player uncovered."""
        return self.state == CellState.REVEALED

    @property
    def is_flagged(self) -> bool:
        """Check if cell carries a mine guess."""
        return self.state == CellState.MINE_GUESS

    def to_observation(self) -> int:
        """
        Convert status to observation value for ML agent.

        Returns:
            -1: Covered cell
            -2: Mine guess
            -3: Question mark
            0-8: Revealed cell with adjacent mine count
            9: Unguessed mine (end of lost round)
            10: Incorrect guess (end of lost round)
            11: Exploded mine
        """
        if self.state == CellState.REVEALED:
            return self.adjacent_mines
        return _OBSERVATION_CODES[self.state]


COVERED = CellStatus(CellState.COVERED)
MINE_GUESS = CellStatus(CellState.MINE_GUESS)
QUESTION = CellStatus(CellState.QUESTION)
MINE = CellStatus(CellState.MINE)
INCORRECT_GUESS = CellStatus(CellState.INCORRECT_GUESS)
EXPLODED_MINE = CellStatus(CellState.EXPLODED_MINE)
