"""
Mine layout module for Minesweeper.

Holds the hidden boolean grid of mine positions together with the
target mine count, and answers placement and adjacency queries.
"""
import logging
from typing import List, Sequence, Tuple, Union

import numpy as np

from .config import LayoutConfig


logger = logging.getLogger(__name__)

RandomSource = Union[int, np.random.Generator, None]


# ============================================================================
# Mine Layout Class
# ============================================================================

class MineLayout:
    """
    Hidden mine positions of a rectangular field.

    A layout is built either from an explicit grid, in which case
    num_mines() is the number of mines in that grid, or from dimensions
    and a mine count. In the second case the grid starts empty and
    num_mines() is only the number of mines the layout *will* hold once
    populate() has been called; until then it does not match the grid.

    The random source used by populate() is injected at construction
    time, so a fixed seed always yields the same placement.
    """

    def __init__(
        self,
        mines: np.ndarray,
        mine_count: int,
        rng: RandomSource = None,
    ) -> None:
        """
        Initialize the layout. Prefer the from_* constructors.

        Args:
            mines: 2D boolean array of mine positions (not copied).
            mine_count: Number of mines this layout holds or will hold.
            rng: numpy Generator or integer seed for mine placement.
        """
        self._mines = mines
        self._mine_count = mine_count
        self._rng = np.random.default_rng(rng)

    @classmethod
    def from_grid(
        cls,
        grid: Sequence[Sequence[bool]],
        rng: RandomSource = None,
    ) -> "MineLayout":
        """
        Create a layout that copies the given mine grid.

        Args:
            grid: Rectangular matrix where a true entry marks a mine;
                must have at least one row and one column.
            rng: numpy Generator or integer seed used if the layout
                is later repopulated.

        Returns:
            Layout whose num_mines() is the number of true entries.
        """
        try:
            mines = np.array(grid, dtype=bool)
        except ValueError as exc:
            raise ValueError("Mine grid must be rectangular") from exc
        if mines.ndim != 2 or mines.shape[0] < 1 or mines.shape[1] < 1:
            raise ValueError(
                "Mine grid must have at least one row and one column"
            )
        return cls(mines, int(mines.sum()), rng)

    @classmethod
    def from_dimensions(
        cls,
        rows: int,
        cols: int,
        mine_count: int,
        rng: RandomSource = None,
    ) -> "MineLayout":
        """
        Create an empty layout that may later hold mine_count mines.

        Args:
            rows: Number of rows, must be positive.
            cols: Number of columns, must be positive.
            mine_count: Mines to place when populate() is called.
                Should stay below a third of the cells.
            rng: numpy Generator or integer seed for mine placement.
        """
        if rows < 1 or cols < 1:
            raise ValueError("Layout dimensions must be positive")
        if mine_count < 0:
            raise ValueError("Number of mines cannot be negative")
        return cls(np.zeros((rows, cols), dtype=bool), mine_count, rng)

    @classmethod
    def from_config(
        cls, config: LayoutConfig, rng: RandomSource = None
    ) -> "MineLayout":
        """Create an empty layout sized by a LayoutConfig."""
        return cls.from_dimensions(
            config.rows, config.cols, config.num_mines, rng
        )

    # ========================================================================
    # Mine Placement
    # ========================================================================

    def populate(self, avoid_row: int, avoid_col: int) -> None:
        """
        Replace any current mines with num_mines() random ones.

        No mine is placed at (avoid_row, avoid_col).

        Args:
            avoid_row: Row of the cell to keep mine-free.
            avoid_col: Column of the cell to keep mine-free.
        """
        self._check_position(avoid_row, avoid_col)
        self.reset_empty()

        positions = self._get_valid_mine_positions((avoid_row, avoid_col))
        if self._mine_count > len(positions):
            raise ValueError(
                f"Too many mines (max {len(positions)})"
            )
        if self._mine_count:
            chosen = self._rng.choice(
                len(positions), size=self._mine_count, replace=False
            )
            for index in chosen:
                row, col = positions[index]
                self._mines[row, col] = True

        logger.debug(
            "Placed %d mines on %dx%d layout avoiding (%d, %d)",
            self._mine_count, self.num_rows(), self.num_cols(),
            avoid_row, avoid_col,
        )

    def _get_valid_mine_positions(
        self, exclude: Tuple[int, int]
    ) -> List[Tuple[int, int]]:
        """Get all valid positions for mine placement."""
        positions = []
        for row in range(self.num_rows()):
            for col in range(self.num_cols()):
                if (row, col) != exclude:
                    positions.append((row, col))
        return positions

    def reset_empty(self) -> None:
        """
        Remove every mine.

        num_mines(), num_rows() and num_cols() are unchanged, so
        afterwards num_mines() no longer matches the grid.
        """
        self._mines[:, :] = False

    # ========================================================================
    # Queries
    # ========================================================================

    def in_range(self, row: int, col: int) -> bool:
        """Check if (row, col) is a location inside the field."""
        return 0 <= row < self.num_rows() and 0 <= col < self.num_cols()

    def has_mine(self, row: int, col: int) -> bool:
        """Check if there is a mine at (row, col)."""
        self._check_position(row, col)
        return bool(self._mines[row, col])

    def neighbors(self, row: int, col: int) -> List[Tuple[int, int]]:
        """
        Get valid neighboring cell positions.

        Diagonals count as neighbors; positions outside the field are
        left out.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for valid neighbors.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self.in_range(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    def num_adjacent_mines(self, row: int, col: int) -> int:
        """
        Count mines adjacent to (row, col), not counting the cell itself.

        Returns:
            Number in the range [0, 8].
        """
        self._check_position(row, col)
        count = 0
        for neighbor_row, neighbor_col in self.neighbors(row, col):
            if self._mines[neighbor_row, neighbor_col]:
                count += 1
        return count

    def num_rows(self) -> int:
        return self._mines.shape[0]

    def num_cols(self) -> int:
        return self._mines.shape[1]

    def num_mines(self) -> int:
        """
        Number of mines this layout holds.

        For a layout created from dimensions this is a capacity: it
        matches the grid only after populate() has run.
        """
        return self._mine_count

    def mine_positions(self) -> List[Tuple[int, int]]:
        """Get (row, col) of every cell currently holding a mine."""
        return [
            (int(row), int(col)) for row, col in np.argwhere(self._mines)
        ]

    def to_array(self) -> np.ndarray:
        """Get a copy of the mine grid as a boolean array."""
        return self._mines.copy()

    def _check_position(self, row: int, col: int) -> None:
        if not self.in_range(row, col):
            raise ValueError(
                f"Position ({row}, {col}) out of range for "
                f"{self.num_rows()}x{self.num_cols()} layout"
            )

    def __repr__(self) -> str:
        return (
            f"MineLayout(rows={self.num_rows()}, cols={self.num_cols()}, "
            f"num_mines={self._mine_count})"
        )
