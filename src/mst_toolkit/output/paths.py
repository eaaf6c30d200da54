"""Output path and canvas helpers.

Provides the timestamped filenames shared by the three exporters and the
grid extent used to size both image canvases.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional

from mst_toolkit.core.models import GraphModel

TIMESTAMP_FORMAT = "%Y-%m-%d-%H-%M-%S"


@dataclass(frozen=True)
class OutputPaths:
    """Destination files for one run."""
    text: Path
    png: Path
    svg: Path


def timestamp_slug(now: Optional[datetime] = None) -> str:
    """Format a timestamp for filenames.

    Examples:
        >>> timestamp_slug(datetime(2024, 3, 5, 14, 7, 9))
        '2024-03-05-14-07-09'
    """
    return (now or datetime.now()).strftime(TIMESTAMP_FORMAT)


def build_output_paths(output_dir: Path, stem: str, timestamp: str) -> OutputPaths:
    """Build the text/PNG/SVG paths ``{output_dir}/{stem}_{timestamp}.{ext}``.

    Examples:
        >>> build_output_paths(Path("generated"), "graph", "2024-03-05-14-07-09").png
        PosixPath('generated/graph_2024-03-05-14-07-09.png')
    """
    name = f"{stem}_{timestamp}"
    output_dir = Path(output_dir)
    return OutputPaths(
        text=output_dir / f"{name}.txt",
        png=output_dir / f"{name}.png",
        svg=output_dir / f"{name}.svg",
    )


def grid_extent(graph: GraphModel) -> int:
    """Side length, in grid units, that contains every node."""
    largest = max(max(x, y) for x, y in graph.coordinates)
    return max(graph.node_count, largest + 1)
