"""reportlab drawing surface for pdflib-compat."""

from __future__ import annotations

import io
from typing import Optional, Union

from pypdf import PageObject, PdfReader
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfgen import canvas

from ..config import DEFAULT_ENCODING
from ..exceptions import NoActivePageError, UnknownFontError
from ..types import ShapeDrawMode
from .base import DrawingSurface


class ReportlabSurface(DrawingSurface):
    """Draws a single page on its own in-memory reportlab canvas.

    The finished page is handed back as a pypdf ``PageObject`` so the document
    store can merge it onto the page slot it allocated.
    """

    def __init__(self, width: float, height: float) -> None:
        self.width = width
        self.height = height
        self._buffer = io.BytesIO()
        self._canvas = canvas.Canvas(self._buffer, pagesize=(width, height))
        self._font_name: Optional[str] = None
        self._font_size: Optional[float] = None
        self._text_render_mode = 0
        self._saved_states = 0
        self._finished = False

    @property
    def font_name(self) -> Optional[str]:
        return self._font_name

    @property
    def font_size(self) -> Optional[float]:
        return self._font_size

    @property
    def finished(self) -> bool:
        return self._finished

    def _require_open(self) -> canvas.Canvas:
        if self._finished:
            raise NoActivePageError("Page has already been finished.")
        return self._canvas

    # ------------------------------------------------------------------
    # Shapes
    # ------------------------------------------------------------------
    def draw_rectangle(self, x0: float, y0: float, x1: float, y1: float, mode: ShapeDrawMode) -> None:
        fill = mode is ShapeDrawMode.FILL
        self._require_open().rect(x0, y0, x1 - x0, y1 - y0, stroke=int(not fill), fill=int(fill))

    def draw_line(self, x0: float, y0: float, x1: float, y1: float) -> None:
        self._require_open().line(x0, y0, x1, y1)

    def clip_rectangle(self, x0: float, y0: float, x1: float, y1: float) -> None:
        page_canvas = self._require_open()
        path = page_canvas.beginPath()
        path.rect(x0, y0, x1 - x0, y1 - y0)
        page_canvas.clipPath(path, stroke=0, fill=0)

    # ------------------------------------------------------------------
    # Text
    # ------------------------------------------------------------------
    def set_font(self, font_name: str, size: float) -> None:
        self._require_open().setFont(font_name, size)
        self._font_name = font_name
        self._font_size = size

    def set_text_rendering(self, mode: int) -> None:
        if mode not in range(8):
            raise ValueError(f"Text rendering mode must be between 0 and 7, got {mode}")
        self._text_render_mode = mode

    def draw_text(self, text: Union[str, bytes], x: float, y: float, encoding: Optional[str] = None) -> None:
        page_canvas = self._require_open()
        if isinstance(text, bytes):
            text = text.decode(encoding or DEFAULT_ENCODING)
        text_object = page_canvas.beginText(x, y)
        text_object.setTextRenderMode(self._text_render_mode)
        text_object.textOut(text)
        page_canvas.drawText(text_object)

    def string_width(self, text: str) -> float:
        if self._font_name is None or self._font_size is None:
            raise UnknownFontError("No font selected on this page.")
        return pdfmetrics.stringWidth(text, self._font_name, self._font_size)

    # ------------------------------------------------------------------
    # Graphics state
    # ------------------------------------------------------------------
    def set_fill_color(self, gray: float) -> None:
        self._require_open().setFillGray(gray)

    def save_graphics_state(self) -> None:
        self._require_open().saveState()
        self._saved_states += 1

    def restore_graphics_state(self) -> None:
        page_canvas = self._require_open()
        # an unmatched Q would pop the state wrapping the page when it is merged
        if self._saved_states == 0:
            raise ValueError("restore without a matching save")
        page_canvas.restoreState()
        self._saved_states -= 1

    def translate(self, tx: float, ty: float) -> None:
        self._require_open().translate(tx, ty)

    # ------------------------------------------------------------------
    def finish(self) -> PageObject:
        page_canvas = self._require_open()
        page_canvas.showPage()
        page_canvas.save()
        self._finished = True
        reader = PdfReader(io.BytesIO(self._buffer.getvalue()))
        return reader.pages[0]


__all__ = ["ReportlabSurface"]
