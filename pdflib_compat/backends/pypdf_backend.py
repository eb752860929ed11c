"""pypdf document store for pdflib-compat."""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple

from pypdf import PdfReader, PdfWriter
from pypdf.errors import PdfReadError
from pypdf.generic import Destination, Fit

from ..exceptions import DocumentWriteError, InvalidPDFError, NoActivePageError
from ..types import DocumentInfo
from .base import DocumentStore, DrawingSurface
from .reportlab_backend import ReportlabSurface

LOGGER = logging.getLogger(__name__)

SurfaceFactory = Callable[[float, float], DrawingSurface]


def load_writer(pdf_path: str) -> PdfWriter:
    """Read an existing PDF into a writer that new pages can be appended to."""

    path = Path(pdf_path)
    if not path.exists() or not path.is_file():
        raise InvalidPDFError(f"PDF file not found: {pdf_path}")

    try:
        raw_bytes = path.read_bytes()
    except OSError as exc:
        raise InvalidPDFError(f"Unable to read PDF file: {pdf_path}. Error: {exc}") from exc

    try:
        reader = PdfReader(io.BytesIO(raw_bytes))
    except PdfReadError as exc:
        raise InvalidPDFError(f"Corrupted or invalid PDF file: {pdf_path}. Error: {exc}") from exc
    except Exception as exc:
        raise InvalidPDFError(f"Unexpected error reading PDF: {pdf_path}. Error: {exc}") from exc

    if reader.is_encrypted:
        raise InvalidPDFError(f"PDF is encrypted and cannot be extended: {pdf_path}")

    return PdfWriter(clone_from=reader)


class PypdfDocumentStore(DocumentStore):
    """Document store that keeps the whole document in a ``PdfWriter``.

    Pages are allocated as blank slots when they begin, so outline entries can
    point at a page while it is still being drawn. The drawn content is merged
    onto the slot when the page ends.
    """

    def __init__(
        self,
        writer: Optional[PdfWriter] = None,
        *,
        producer: str = "pdflib-compat",
        surface_factory: Optional[SurfaceFactory] = None,
    ) -> None:
        self.writer = writer if writer is not None else PdfWriter()
        self.producer = producer
        self._surface_factory: SurfaceFactory = surface_factory or ReportlabSurface
        self._properties: Dict[str, str] = {}

    @classmethod
    def open(cls, pdf_path: str, **kwargs) -> "PypdfDocumentStore":
        """Load ``pdf_path`` when it holds a readable PDF, otherwise start empty."""

        if not Path(pdf_path).exists():
            LOGGER.debug("Creating new document for %s", pdf_path)
            return cls(**kwargs)

        try:
            writer = load_writer(pdf_path)
        except InvalidPDFError as exc:
            LOGGER.warning("Ignoring unreadable existing file %s: %s", pdf_path, exc)
            return cls(**kwargs)

        LOGGER.debug("Loaded %d existing pages from %s", len(writer.pages), pdf_path)
        return cls(writer, **kwargs)

    @property
    def page_count(self) -> int:
        return len(self.writer.pages)

    @property
    def properties(self) -> Dict[str, str]:
        return dict(self._properties)

    def new_page(self, width: float, height: float) -> Tuple[int, DrawingSurface]:
        self.writer.add_blank_page(width=width, height=height)
        index = len(self.writer.pages) - 1
        LOGGER.debug("Allocated page %d (%sx%s)", index, width, height)
        return index, self._surface_factory(width, height)

    def end_page(self, index: int, surface: DrawingSurface) -> None:
        if index < 0 or index >= len(self.writer.pages):
            raise NoActivePageError(f"Page index out of range: {index}")
        drawn = surface.finish()
        self.writer.pages[index].merge_page(drawn)
        LOGGER.debug("Committed page %d", index)

    def add_outline(self, title: str, page_index: int) -> None:
        if page_index < 0 or page_index >= len(self.writer.pages):
            raise NoActivePageError(f"Page index out of range: {page_index}")
        self.writer.add_outline_item(title, page_index, fit=Fit.fit())

    def set_property(self, name: str, value: str) -> None:
        if not name.startswith("/"):
            name = f"/{name}"
        self._properties[name] = value

    def save(self, destination: str) -> None:
        metadata = dict(self._properties)
        metadata.setdefault("/Producer", self.producer)
        self.writer.add_metadata(metadata)

        path = Path(destination)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with path.open("wb") as handle:
                self.writer.write(handle)
        except OSError as exc:
            raise DocumentWriteError(f"Unable to write PDF file: {destination}. Error: {exc}") from exc


def _outline_titles(outline: list) -> List[str]:
    titles: List[str] = []
    for item in outline:
        # nested lists hold the children of the preceding entry
        if isinstance(item, Destination):
            titles.append(str(item.title))
    return titles


def describe_pdf(pdf_path: str) -> DocumentInfo:
    """Read ``pdf_path`` back and summarise pages, metadata and outlines."""

    path = Path(pdf_path)
    if not path.exists() or not path.is_file():
        raise InvalidPDFError(f"PDF file not found: {pdf_path}")

    try:
        reader = PdfReader(str(path))
    except PdfReadError as exc:
        raise InvalidPDFError(f"Corrupted or invalid PDF file: {pdf_path}. Error: {exc}") from exc
    except Exception as exc:
        raise InvalidPDFError(f"Unexpected error reading PDF: {pdf_path}. Error: {exc}") from exc

    metadata = reader.metadata or {}
    return DocumentInfo(
        num_pages=len(reader.pages),
        file_size=path.stat().st_size,
        title=metadata.get("/Title"),
        author=metadata.get("/Author"),
        subject=metadata.get("/Subject"),
        creator=metadata.get("/Creator"),
        keywords=metadata.get("/Keywords"),
        producer=metadata.get("/Producer"),
        outlines=_outline_titles(reader.outline),
        page_sizes=[(float(page.mediabox.width), float(page.mediabox.height)) for page in reader.pages],
    )


__all__ = ["PypdfDocumentStore", "describe_pdf", "load_writer"]
