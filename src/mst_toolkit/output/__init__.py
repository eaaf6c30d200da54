"""
Module: output

Purpose:
    Exporters for a generated graph and its spanning tree. Each exporter
    reads a GraphModel and a SpanningTree and writes exactly one file.

Key Functions:
    - write_graph_text(): Text cost matrix file
    - render_png(): Raster image (Pillow)
    - render_svg(): Vector image (svgwrite)
    - build_output_paths(): Timestamped destination files

Dependencies:
    - PIL: Raster drawing
    - svgwrite: Vector drawing

Used By:
    - mst_toolkit.controller
"""

from .errors import ExportError
from .paths import OutputPaths, build_output_paths, timestamp_slug
from .png_renderer import draw_tree_image, render_png
from .svg_renderer import build_svg_document, build_svg_drawing, render_svg
from .text_writer import format_graph_text, write_graph_text

__all__ = [
    "ExportError",
    "OutputPaths",
    "build_output_paths",
    "timestamp_slug",
    "draw_tree_image",
    "render_png",
    "build_svg_document",
    "build_svg_drawing",
    "render_svg",
    "format_graph_text",
    "write_graph_text",
]
