"""Render hosts for cinequote scene batches."""

from .html import HtmlSceneRenderer, render_element_html, render_html_document
from .raster import SceneRasterizer, parse_rgba_u8, save_png

__all__ = [
    "HtmlSceneRenderer",
    "SceneRasterizer",
    "parse_rgba_u8",
    "render_element_html",
    "render_html_document",
    "save_png",
]
