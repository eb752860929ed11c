from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple
import sys

import pytest
from pypdf import PdfWriter

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from pdflib_compat.types import ShapeDrawMode


class RecordingSurface:
    """Drawing surface that records every call instead of drawing."""

    def __init__(self, width: float = 200, height: float = 200) -> None:
        self.width = width
        self.height = height
        self.calls: List[Tuple[Any, ...]] = []
        self.font_name: Optional[str] = None
        self.font_size: Optional[float] = None
        self.finished = False

    def draw_rectangle(self, x0, y0, x1, y1, mode: ShapeDrawMode) -> None:
        self.calls.append(("draw_rectangle", x0, y0, x1, y1, mode))

    def draw_line(self, x0, y0, x1, y1) -> None:
        self.calls.append(("draw_line", x0, y0, x1, y1))

    def clip_rectangle(self, x0, y0, x1, y1) -> None:
        self.calls.append(("clip_rectangle", x0, y0, x1, y1))

    def draw_text(self, text, x, y, encoding=None) -> None:
        self.calls.append(("draw_text", text, x, y, encoding))

    def set_fill_color(self, gray) -> None:
        self.calls.append(("set_fill_color", gray))

    def save_graphics_state(self) -> None:
        self.calls.append(("save_graphics_state",))

    def restore_graphics_state(self) -> None:
        self.calls.append(("restore_graphics_state",))

    def set_font(self, font_name, size) -> None:
        self.font_name = font_name
        self.font_size = size
        self.calls.append(("set_font", font_name, size))

    def set_text_rendering(self, mode) -> None:
        self.calls.append(("set_text_rendering", mode))

    def translate(self, tx, ty) -> None:
        self.calls.append(("translate", tx, ty))

    def string_width(self, text) -> float:
        return float(len(text) * 10)

    def finish(self) -> None:
        self.finished = True


class RecordingStore:
    """In-memory document store handing out :class:`RecordingSurface` pages."""

    def __init__(self) -> None:
        self.pages: List[RecordingSurface] = []
        self.ended: List[int] = []
        self.outlines: List[Tuple[str, int]] = []
        self._properties: Dict[str, str] = {}
        self.saved_to: List[str] = []

    @property
    def page_count(self) -> int:
        return len(self.pages)

    @property
    def properties(self) -> Dict[str, str]:
        return dict(self._properties)

    def new_page(self, width, height):
        surface = RecordingSurface(width, height)
        self.pages.append(surface)
        return len(self.pages) - 1, surface

    def end_page(self, index, surface) -> None:
        surface.finish()
        self.ended.append(index)

    def add_outline(self, title, page_index) -> None:
        self.outlines.append((title, page_index))

    def set_property(self, name, value) -> None:
        self._properties[name] = value

    def save(self, destination) -> None:
        self.saved_to.append(destination)


@pytest.fixture()
def surface() -> RecordingSurface:
    return RecordingSurface()


@pytest.fixture()
def store() -> RecordingStore:
    return RecordingStore()


@pytest.fixture()
def output_pdf(tmp_path: Path) -> Path:
    return tmp_path / "out" / "document.pdf"


@pytest.fixture()
def pdf_factory(tmp_path: Path) -> Callable[..., Path]:
    def _create(filename: str, pages: int = 1, title: Optional[str] = None) -> Path:
        path = tmp_path / filename
        writer = PdfWriter()
        for _ in range(pages):
            writer.add_blank_page(width=72, height=72)
        if title is not None:
            writer.add_metadata({"/Title": title})
        with path.open("wb") as handle:
            writer.write(handle)
        return path

    return _create


@pytest.fixture()
def corrupt_pdf(tmp_path: Path) -> Path:
    path = tmp_path / "corrupt.pdf"
    path.write_bytes(b"this is not a pdf at all")
    return path
