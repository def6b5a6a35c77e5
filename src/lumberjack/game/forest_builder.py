"""
ForestBuilder for generating random lumberjack forests.
"""

import random
from dataclasses import dataclass
from typing import List, Optional

from .grid import TerrainGrid
from .levels import ForestLevel, LevelMetadata
from .position import FLAT, TRENCH, Position
from .state import valid_height


@dataclass
class ForestConfig:
    """Configuration for forest generation."""

    depth: int = 5
    width: int = 5
    num_trees: int = 6
    max_tree_height: int = 4
    num_trenches: int = 3

    def __post_init__(self):
        """Validate configuration."""
        if self.depth <= 0 or self.width <= 0:
            raise ValueError(
                f"Forest size must be positive, got {self.depth}x{self.width}"
            )
        if self.num_trees < 0 or self.num_trenches < 0:
            raise ValueError("num_trees and num_trenches must be non-negative")
        if self.max_tree_height <= 0:
            raise ValueError("max_tree_height must be positive")
        # Leave at least one flat cell to start on
        if self.num_trees + self.num_trenches >= self.depth * self.width:
            raise ValueError(
                f"{self.num_trees} trees and {self.num_trenches} trenches do not "
                f"fit a {self.depth}x{self.width} forest with a flat start"
            )


class ForestBuilder:
    """Generates forests for the lumberjack solver."""

    def __init__(self, config: ForestConfig, seed: Optional[int] = None):
        """Initialize forest builder with configuration.

        Args:
            config: Forest generation configuration
            seed: Random seed for deterministic generation
        """
        self.config = config
        self.rng = random.Random(seed)

    def generate_grid(self) -> TerrainGrid:
        """Generate the terrain heights.

        Returns:
            TerrainGrid with the configured number of trees and trenches
        """
        depth, width = self.config.depth, self.config.width
        cells = [(row, col) for row in range(depth) for col in range(width)]
        picked = self.rng.sample(
            cells, self.config.num_trees + self.config.num_trenches
        )

        values = [[FLAT] * width for _ in range(depth)]
        for i, (row, col) in enumerate(picked):
            if i < self.config.num_trees:
                values[row][col] = self.rng.randint(1, self.config.max_tree_height)
            else:
                values[row][col] = TRENCH

        return TerrainGrid(values, valid_height)

    def generate_level(self, name: str = "Generated Forest") -> ForestLevel:
        """Generate a forest and a flat starting position.

        Args:
            name: Name for the generated level

        Returns:
            ForestLevel ready for state creation
        """
        grid = self.generate_grid()
        start = self.rng.choice(self.get_flat_cells(grid))

        metadata = LevelMetadata(
            name=name,
            description=(
                f"Generated {self.config.depth}x{self.config.width} forest with "
                f"{self.config.num_trees} trees, {self.config.num_trenches} trenches"
            ),
            author="ForestBuilder",
            tags=["generated"],
        )
        return ForestLevel(metadata, grid, start)

    def get_flat_cells(self, grid: TerrainGrid) -> List[Position]:
        """Get all flat cells of a grid in row-major order."""
        return [cell.position for cell in grid.cells() if cell.is_flat]
