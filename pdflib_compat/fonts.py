"""Mapping from legacy font names to the standard 14 PDF fonts."""

from __future__ import annotations

from typing import Dict, Optional

from .exceptions import UnknownFontError

STANDARD_FONTS: Dict[str, str] = {
    "courier": "Courier",
    "courier-bold": "Courier-Bold",
    "courier-oblique": "Courier-Oblique",
    "courier-italic": "Courier-Oblique",
    "courier-bold-italic": "Courier-BoldOblique",
    "courier-boldoblique": "Courier-BoldOblique",
    "times": "Times-Roman",
    "times-bold": "Times-Bold",
    "times-italic": "Times-Italic",
    "times-bold-italic": "Times-BoldItalic",
    "times-bolditalic": "Times-BoldItalic",
    "times-roman": "Times-Roman",
    "times-roman-bold": "Times-Bold",
    "times-roman-italic": "Times-Italic",
    "times-roman-bold-italic": "Times-BoldItalic",
    "helvetica": "Helvetica",
    "helvetica-bold": "Helvetica-Bold",
    "helvetica-italic": "Helvetica-Oblique",
    "helvetica-oblique": "Helvetica-Oblique",
    "helvetica-bold-italic": "Helvetica-BoldOblique",
    "helvetica-boldoblique": "Helvetica-BoldOblique",
    "symbol": "Symbol",
    "zapfdingbats": "ZapfDingbats",
}


# PDFlib encoding keywords -> Python codecs
ENCODINGS: Dict[str, Optional[str]] = {
    "winansi": "cp1252",
    "macroman": "mac_roman",
    "iso8859-1": "latin-1",
    "pdfdoc": "latin-1",
    "unicode": "utf-8",
    "host": None,
    "auto": None,
    "builtin": None,
}


def resolve_font(name: str) -> str:
    """Return the PostScript name for a case-insensitive legacy font name."""

    try:
        return STANDARD_FONTS[name.strip().lower()]
    except (KeyError, AttributeError) as exc:
        raise UnknownFontError(f"Unknown font: {name!r}") from exc


def resolve_encoding(name: Optional[str]) -> Optional[str]:
    """Return the Python codec for a PDFlib encoding keyword.

    Keywords that mean "use the default" map to None, anything else is taken
    to be a Python codec name already.
    """
    if not name:
        return None
    key = name.strip().lower()
    if key in ENCODINGS:
        return ENCODINGS[key]
    return key


__all__ = ["ENCODINGS", "STANDARD_FONTS", "resolve_encoding", "resolve_font"]
