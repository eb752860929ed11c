from __future__ import annotations

import pytest

from pdflib_compat.exceptions import UnknownFontError
from pdflib_compat.fonts import STANDARD_FONTS, resolve_encoding, resolve_font


@pytest.mark.parametrize(
    "name, expected",
    [
        ("Helvetica", "Helvetica"),
        ("HELVETICA-BOLDOBLIQUE", "Helvetica-BoldOblique"),
        ("helvetica-italic", "Helvetica-Oblique"),
        ("times", "Times-Roman"),
        ("Times-Roman-Bold-Italic", "Times-BoldItalic"),
        ("courier-italic", "Courier-Oblique"),
        ("ZapfDingbats", "ZapfDingbats"),
    ],
)
def test_resolve_font_aliases(name: str, expected: str) -> None:
    assert resolve_font(name) == expected


def test_every_alias_maps_to_a_standard_font() -> None:
    assert len(set(STANDARD_FONTS.values())) == 14


def test_unknown_font() -> None:
    with pytest.raises(UnknownFontError):
        resolve_font("Arial")


def test_resolve_encoding() -> None:
    assert resolve_encoding("WinAnsi") == "cp1252"
    assert resolve_encoding("host") is None
    assert resolve_encoding(None) is None
    assert resolve_encoding("utf-8") == "utf-8"
