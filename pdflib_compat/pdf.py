"""PDFlib-style procedural API on top of pypdf and reportlab.

Every public method follows the legacy soft-fail convention: it returns
``True`` on success and ``False`` on failure and never raises. Backend errors
are logged at debug level. The kind of the last path failure is available as
:attr:`PDF.last_error`.

Example:
    >>> pdf = PDF.open_file("hello.pdf")
    >>> pdf.begin_page(595, 842)
    True
    >>> pdf.set_font("Helvetica-Bold", 24, "winansi")
    True
    >>> pdf.show_xy("Hello", 50, 780)
    True
    >>> pdf.rect(50, 700, 200, 40)
    True
    >>> pdf.stroke()
    True
    >>> pdf.end_page()
    True
    >>> pdf.close()
    True
"""

from __future__ import annotations

import logging
from numbers import Real
from pathlib import Path
from typing import Callable, Optional, Tuple, Union

from .backends.base import DocumentStore, DrawingSurface
from .backends.pypdf_backend import PypdfDocumentStore
from .config import DEFAULT_OPTIONS, ShimOptions
from .exceptions import PDFLibCompatException, UnknownFontError
from .fonts import resolve_encoding, resolve_font
from .page import PageContext
from .path_state import PathState
from .types import OperationResult, PathError
from .utils import time_block

LOGGER = logging.getLogger(__name__)


class PDF:
    """A PDF document written through PDFlib-style procedural calls."""

    def __init__(
        self,
        filename: Union[str, Path],
        options: Optional[ShimOptions] = None,
        *,
        store: Optional[DocumentStore] = None,
    ) -> None:
        self.filename = str(filename)
        self.options = options or DEFAULT_OPTIONS
        self._store: DocumentStore = store or PypdfDocumentStore.open(
            self.filename, producer=self.options.producer
        )
        self._font: Optional[Tuple[str, float]] = None
        self._encoding: Optional[str] = None
        self._text_rendering = 0
        self._page: Optional[PageContext] = None
        self._detached = PathState(None, clear_after_terminal_op=self.options.clear_pending_shape_after_terminal_op)
        self._path = self._detached
        self._closed = False
        self.last_error: Optional[PathError] = None

    @classmethod
    def open_file(cls, filename: Union[str, Path], options: Optional[ShimOptions] = None) -> Union["PDF", bool]:
        """
        Create a PDF file.

        An existing readable PDF at ``filename`` is extended, anything else is
        replaced when the document is closed.

        Returns:
            The PDF instance, or False when the document cannot be set up
        """
        try:
            return cls(filename, options)
        except (PDFLibCompatException, OSError) as exc:
            LOGGER.error("Unable to open %s: %s", filename, exc)
            return False

    # ------------------------------------------------------------------
    # State helpers
    # ------------------------------------------------------------------
    @property
    def page(self) -> Optional[PageContext]:
        return self._page

    @property
    def path(self) -> PathState:
        return self._path

    @property
    def page_count(self) -> int:
        return self._store.page_count

    def _detach_path(self) -> None:
        # geometry recorded without a page never reaches the next one
        self._detached.reset()
        self._path = self._detached

    def _with_page(self, operation: str, action: Callable[[DrawingSurface], object]) -> bool:
        if self._page is None:
            LOGGER.debug("%s ignored: no page is open", operation)
            return False
        try:
            action(self._page.surface)
        except Exception as exc:
            LOGGER.debug("%s failed on page %d: %s", operation, self._page.index, exc)
            return False
        return True

    def _path_call(self, operation: str, action: Callable[[], OperationResult]) -> bool:
        try:
            result = action()
        except Exception as exc:
            LOGGER.debug("%s failed: %s", operation, exc)
            self.last_error = None
            return False
        self.last_error = result.error
        return result.success

    # ------------------------------------------------------------------
    # Document information
    # ------------------------------------------------------------------
    def _set_info(self, key: str, value: str) -> bool:
        self._store.set_property(key, value)
        return True

    def set_info_author(self, author: str) -> bool:
        """Fill the author document info field."""
        return self._set_info("/Author", author)

    def set_info_creator(self, creator: str) -> bool:
        """Fill the creator document info field."""
        return self._set_info("/Creator", creator)

    def set_info_subject(self, subject: str) -> bool:
        """Fill the subject document info field."""
        return self._set_info("/Subject", subject)

    def set_info_title(self, title: str) -> bool:
        """Fill the title document info field."""
        return self._set_info("/Title", title)

    def set_info_keywords(self, keywords: str) -> bool:
        """Fill the keywords document info field."""
        return self._set_info("/Keywords", keywords)

    # ------------------------------------------------------------------
    # Text
    # ------------------------------------------------------------------
    def set_font(self, font: str, size: float, encoding: Optional[str] = None) -> bool:
        """
        Set the current font.

        The font is remembered and applied to every page begun afterwards.

        Args:
            font: One of the standard PDF font names, case-insensitive
            size: Font size in points
            encoding: PDFlib encoding keyword (``winansi``, ``macroman`` ...) or
                Python codec used to decode ``bytes`` passed to :meth:`show_xy`
        """
        try:
            font_name = resolve_font(font)
        except UnknownFontError as exc:
            LOGGER.debug("set_font failed: %s", exc)
            return False

        self._font = (font_name, size)
        self._encoding = resolve_encoding(encoding)
        if self._page is None:
            return True
        return self._with_page("set_font", lambda surface: surface.set_font(font_name, size))

    def show_xy(self, text: Union[str, bytes], x: float, y: float) -> bool:
        """Output text in the current font at the given position."""
        encoding = self._encoding or self.options.default_encoding
        return self._with_page("show_xy", lambda surface: surface.draw_text(text, x, y, encoding))

    def stringwidth(self, text: Union[str, bytes]) -> Union[float, bool]:
        """Return the width of ``text`` in the current font and size, or False.

        ``bytes`` are decoded with the encoding selected in :meth:`set_font`,
        the same way :meth:`show_xy` draws them.
        """
        if self._page is None:
            return False
        try:
            if isinstance(text, bytes):
                text = text.decode(self._encoding or self.options.default_encoding)
            return self._page.surface.string_width(text)
        except Exception as exc:
            LOGGER.debug("stringwidth failed: %s", exc)
            return False

    def set_text_rendering(self, mode: int) -> bool:
        """Select the PDF text rendering mode (0 fill ... 7 clip)."""
        if isinstance(mode, bool) or not isinstance(mode, int) or not 0 <= mode <= 7:
            return False
        self._text_rendering = mode
        if self._page is None:
            return True
        return self._with_page("set_text_rendering", lambda surface: surface.set_text_rendering(mode))

    # ------------------------------------------------------------------
    # Color and graphics state
    # ------------------------------------------------------------------
    def setgray_fill(self, gray: float) -> bool:
        """Set the fill color to a gray value between 0 and 1 inclusive."""
        if isinstance(gray, bool) or not isinstance(gray, Real) or not 0 <= gray <= 1:
            return False
        return self._with_page("setgray_fill", lambda surface: surface.set_fill_color(gray))

    def save(self) -> bool:
        """Save the current graphics state."""
        return self._with_page("save", lambda surface: surface.save_graphics_state())

    def restore(self) -> bool:
        """Restore the most recently saved graphics state."""
        return self._with_page("restore", lambda surface: surface.restore_graphics_state())

    def translate(self, tx: float, ty: float) -> bool:
        """Translate the origin of the coordinate system."""
        return self._with_page("translate", lambda surface: surface.translate(tx, ty))

    # ------------------------------------------------------------------
    # Path construction and painting
    # ------------------------------------------------------------------
    def rect(self, x: float, y: float, width: float, height: float) -> bool:
        """Describe a rectangle as the current path."""
        return self._path_call("rect", lambda: self._path.describe_rectangle(x, y, width, height))

    def moveto(self, x: float, y: float) -> bool:
        """Set the current point."""
        return self._path_call("moveto", lambda: self._path.move_to(x, y))

    def lineto(self, x: float, y: float) -> bool:
        """Describe a line from the current point to ``(x, y)``."""
        return self._path_call("lineto", lambda: self._path.line_to(x, y))

    def fill(self) -> bool:
        """Fill the current path with the current fill color."""
        return self._path_call("fill", self._path.fill)

    def stroke(self) -> bool:
        """Stroke the current path."""
        return self._path_call("stroke", self._path.stroke)

    def clip(self) -> bool:
        """Use the current path as clipping path."""
        return self._path_call("clip", self._path.clip)

    # ------------------------------------------------------------------
    # Pages and outlines
    # ------------------------------------------------------------------
    def begin_page(self, width: float, height: float) -> bool:
        """Start a new page of the given size in points."""
        if self._closed:
            return False
        if self._page is not None:
            LOGGER.debug("Page %d still open, ending it before starting a new one", self._page.index)
            self.end_page()

        try:
            index, surface = self._store.new_page(width, height)
        except Exception as exc:
            LOGGER.debug("begin_page(%s, %s) failed: %s", width, height, exc)
            return False

        self._page = PageContext(
            index,
            width,
            height,
            surface,
            clear_after_terminal_op=self.options.clear_pending_shape_after_terminal_op,
        )
        self._detached.reset()
        self._path = self._page.path
        self.last_error = None

        font = self._font or self.options.default_font
        if font is not None:
            self._with_page("set_font", lambda page_surface: page_surface.set_font(*font))
        if self._text_rendering:
            self._with_page("set_text_rendering", lambda page_surface: page_surface.set_text_rendering(self._text_rendering))
        return True

    def end_page(self) -> bool:
        """Finish the current page."""
        if self._page is None:
            return False

        page = self._page
        self._page = None
        self._detach_path()
        try:
            self._store.end_page(page.index, page.surface)
        except Exception as exc:
            LOGGER.debug("end_page failed on page %d: %s", page.index, exc)
            return False
        return True

    def add_outline(self, text: str) -> bool:
        """Add a bookmark for the current page."""
        if self._page is None:
            return False
        index = self._page.index
        try:
            self._store.add_outline(text, index)
        except Exception as exc:
            LOGGER.debug("add_outline failed on page %d: %s", index, exc)
            return False
        return True

    # ------------------------------------------------------------------
    def close(self) -> bool:
        """Write the document to its file name and release the open page."""
        if self._closed:
            return False
        if self._page is not None:
            self.end_page()

        try:
            with time_block(LOGGER, f"writing {self.filename}"):
                self._store.save(self.filename)
        except Exception as exc:
            LOGGER.error("Failed to write PDF to %s: %s", self.filename, exc)
            return False

        self._closed = True
        LOGGER.info("Wrote %d pages to %s", self._store.page_count, self.filename)
        return True


__all__ = ["PDF"]
