"""Top-level package for the MST Toolkit.

Provides subpackages:
- mst_toolkit.core – immutable graph and spanning tree models
- mst_toolkit.generator – coordinate sampling and cost matrix construction
- mst_toolkit.spanning – union-find and Kruskal's minimum spanning tree
- mst_toolkit.output – text, PNG and SVG exporters
"""

def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        try:
            content = pyproject.read_text()
            for line in content.splitlines():
                if line.strip().startswith("version"):
                    # Parse: version = "0.1.0"
                    return line.split("=")[1].strip().strip('"').strip("'")
        except OSError:
            pass

    # Fallback to importlib.metadata for installed package
    try:
        from importlib.metadata import version as pkg_version
        return pkg_version("mst_toolkit")
    except Exception:
        return "0.0.0"

__version__ = _get_version()
__all__: list[str] = ["__version__"]
