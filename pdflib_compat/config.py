"""Configuration options for the procedural PDF facade."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

DEFAULT_ENCODING = "latin-1"


@dataclass(frozen=True)
class ShimOptions:
    """Options controlling facade behaviour.

    ``clear_pending_shape_after_terminal_op`` opts into PDFlib's documented
    contract where ``fill``/``stroke``/``clip`` end the current path. The
    default keeps the legacy behaviour of redrawing the same shape on every
    call.
    """

    clear_pending_shape_after_terminal_op: bool = False
    default_encoding: str = DEFAULT_ENCODING
    producer: str = "pdflib-compat"
    default_font: Optional[Tuple[str, float]] = None


DEFAULT_OPTIONS = ShimOptions()
