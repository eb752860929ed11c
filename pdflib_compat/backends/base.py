"""Backend protocols for drawing pages and storing documents."""

from __future__ import annotations

from typing import Any, Dict, Optional, Protocol, Tuple, Union

from ..types import ShapeDrawMode


class DrawingSurface(Protocol):
    """Protocol defining the page-level mark-making operations."""

    @property
    def font_name(self) -> Optional[str]:
        """PostScript name of the font currently selected on the page."""

    @property
    def font_size(self) -> Optional[float]:
        """Size of the font currently selected on the page."""

    def draw_rectangle(self, x0: float, y0: float, x1: float, y1: float, mode: ShapeDrawMode) -> None:
        """Paint the rectangle spanned by two opposite corners."""

    def draw_line(self, x0: float, y0: float, x1: float, y1: float) -> None:
        """Stroke a straight line."""

    def clip_rectangle(self, x0: float, y0: float, x1: float, y1: float) -> None:
        """Intersect the clipping path with a rectangle and end the path."""

    def draw_text(self, text: Union[str, bytes], x: float, y: float, encoding: Optional[str] = None) -> None:
        """Draw ``text`` at ``(x, y)`` in the current font."""

    def set_fill_color(self, gray: float) -> None:
        """Set the fill color to a gray level between 0 and 1."""

    def save_graphics_state(self) -> None:
        """Push the graphics state."""

    def restore_graphics_state(self) -> None:
        """Pop the graphics state."""

    def set_font(self, font_name: str, size: float) -> None:
        """Select a font for subsequent text."""

    def set_text_rendering(self, mode: int) -> None:
        """Select the PDF text rendering mode for subsequent text."""

    def translate(self, tx: float, ty: float) -> None:
        """Move the origin of the coordinate system."""

    def string_width(self, text: str) -> float:
        """Width of ``text`` in the current font and size."""

    def finish(self) -> Any:
        """Complete the page and return a backend page object."""


class DocumentStore(Protocol):
    """Protocol defining document-level operations."""

    @property
    def page_count(self) -> int:
        """Number of pages allocated so far."""

    @property
    def properties(self) -> Dict[str, str]:
        """Document information entries to be written on save."""

    def new_page(self, width: float, height: float) -> Tuple[int, DrawingSurface]:
        """Allocate a page and return its index and drawing surface."""

    def end_page(self, index: int, surface: DrawingSurface) -> None:
        """Commit the content drawn on ``surface`` to page ``index``."""

    def add_outline(self, title: str, page_index: int) -> None:
        """Add a top-level outline entry pointing at ``page_index``."""

    def set_property(self, name: str, value: str) -> None:
        """Record a document information entry such as ``/Author``."""

    def save(self, destination: str) -> None:
        """Persist the document to ``destination``."""
