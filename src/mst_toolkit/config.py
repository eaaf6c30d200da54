"""
Module: config

Purpose:
    Configuration dataclass for one generate-and-export run. Immutable
    configuration with validation on construction, so an invalid request
    is rejected before any sampling or file output happens.

Key Classes:
    - RunConfig: Main configuration for a run
    - ConfigurationError: Invalid run configuration

Dependencies:
    - dataclasses (std)
    - pathlib (std)

Used By:
    - controller: Pipeline orchestration
    - cli: Built from command line arguments
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

DEFAULT_NODE_COUNT = 10
DEFAULT_OUTPUT_DIR = Path("generated")
DEFAULT_FILE_STEM = "fully_connected_graph"


class ConfigurationError(ValueError):
    """Run configuration is invalid."""
    pass


@dataclass(frozen=True)
class RunConfig:
    """
    Configuration for generating a graph and exporting its MST (immutable).

    Attributes:
        node_count: Number of nodes to place (>= 1)
        excluded_node_count: Trailing nodes left out of the MST (< node_count)
        seed: Random seed for reproducible coordinates (None = fresh entropy)
        grid_size: Side of the coordinate grid (None = node_count)
        output_dir: Directory receiving the exported files
        file_stem: Filename prefix, completed with a timestamp
        write_text: Export the cost matrix text file
        write_png: Export the raster image
        write_svg: Export the vector image

    Example:
        >>> config = RunConfig(node_count=20, excluded_node_count=5, seed=1)
        >>> config.included_node_count
        15
    """

    node_count: int = DEFAULT_NODE_COUNT
    excluded_node_count: int = 0
    seed: Optional[int] = None
    grid_size: Optional[int] = None

    # Output
    output_dir: Path = DEFAULT_OUTPUT_DIR
    file_stem: str = DEFAULT_FILE_STEM
    write_text: bool = True
    write_png: bool = True
    write_svg: bool = True

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.node_count < 1:
            raise ConfigurationError(f"node_count must be positive: {self.node_count}")
        if self.excluded_node_count < 0:
            raise ConfigurationError(
                f"excluded_node_count must be non-negative: {self.excluded_node_count}"
            )
        if self.excluded_node_count >= self.node_count:
            raise ConfigurationError(
                f"excluded_node_count ({self.excluded_node_count}) must be less than "
                f"node_count ({self.node_count})"
            )
        if self.grid_size is not None and self.grid_size < 1:
            raise ConfigurationError(f"grid_size must be positive: {self.grid_size}")
        if self.grid_size is not None and self.grid_size * self.grid_size < self.node_count:
            raise ConfigurationError(
                f"grid_size {self.grid_size} cannot hold {self.node_count} distinct points"
            )
        if not self.file_stem:
            raise ConfigurationError("file_stem must not be empty")

    @property
    def included_node_count(self) -> int:
        """Number of leading nodes that take part in the MST."""
        return self.node_count - self.excluded_node_count

    @property
    def any_output(self) -> bool:
        """True when at least one exporter is enabled."""
        return self.write_text or self.write_png or self.write_svg
