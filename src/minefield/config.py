"""
Configuration for a mine layout.

Holds the dimensions and mine count used to build a randomly
populated minefield.
"""
from dataclasses import dataclass


# ============================================================================
# Layout Configuration
# ============================================================================

@dataclass
class LayoutConfig:
    """
    Configuration for a randomly populated mine layout.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        num_mines: Mines to place once the layout is populated.

    Up to rows * cols - 1 mines are accepted, the most that still
    leaves the first uncovered cell free. Keeping below a third of the
    cells makes for a playable field but is not required.
    """

    rows: int = 9
    cols: int = 9
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.rows < 1 or self.cols < 1:
            raise ValueError("Layout dimensions must be positive")
        if self.num_mines < 0:
            raise ValueError("Number of mines cannot be negative")
        max_mines = self.rows * self.cols - 1
        if self.num_mines > max_mines:
            raise ValueError(f"Too many mines (max {max_mines})")

    @property
    def num_cells(self) -> int:
        """Total number of cells in the layout."""
        return self.rows * self.cols

    @property
    def num_safe_cells(self) -> int:
        """Number of cells without a mine once populated."""
        return self.num_cells - self.num_mines
