"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minefield import LayoutConfig, MineLayout, MinesweeperEnv, RevealState


# ============================================================================
# Layout Fixtures
# ============================================================================

@pytest.fixture
def corner_mine_layout() -> MineLayout:
    """Create a 4x4 layout with a single mine at (3, 3)."""
    grid = [[False] * 4 for _ in range(4)]
    grid[3][3] = True
    return MineLayout.from_grid(grid)


@pytest.fixture
def small_loss_layout() -> MineLayout:
    """Create a 2x2 layout with a single mine at (0, 0)."""
    return MineLayout.from_grid([[True, False], [False, False]])


@pytest.fixture
def mixed_layout() -> MineLayout:
    """Create a 3x4 layout with mines scattered across it."""
    return MineLayout.from_grid([
        [True, False, False, True],
        [False, False, True, False],
        [True, False, False, False],
    ])


@pytest.fixture
def seeded_layout() -> MineLayout:
    """Create an unpopulated 9x9 layout with 10 mines and a fixed seed."""
    return MineLayout.from_dimensions(9, 9, 10, rng=1234)


# ============================================================================
# Reveal State Fixtures
# ============================================================================

@pytest.fixture
def corner_mine_field(corner_mine_layout: MineLayout) -> RevealState:
    """Create a fully covered overlay of the corner mine layout."""
    return RevealState(corner_mine_layout)


@pytest.fixture
def small_loss_field(small_loss_layout: MineLayout) -> RevealState:
    """Create a fully covered overlay of the 2x2 layout."""
    return RevealState(small_loss_layout)


@pytest.fixture
def mixed_field(mixed_layout: MineLayout) -> RevealState:
    """Create a fully covered overlay of the mixed layout."""
    return RevealState(mixed_layout)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> LayoutConfig:
    """Create a valid layout configuration."""
    return LayoutConfig(9, 9, 10)


@pytest.fixture
def small_env() -> MinesweeperEnv:
    """Create a 4x4 environment with 2 mines."""
    return MinesweeperEnv(LayoutConfig(4, 4, 2))
