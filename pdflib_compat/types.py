"""
Type definitions and dataclasses for pdflib-compat.

This module defines the pending path geometry, the path error taxonomy and
the reporting structures used throughout the library.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple, Union

Point = Tuple[float, float]


@dataclass(frozen=True)
class Rectangle:
    """
    Rectangle described by its origin and extent.

    Attributes:
        x: Lower-left x coordinate
        y: Lower-left y coordinate
        width: Horizontal extent
        height: Vertical extent
    """
    x: float
    y: float
    width: float
    height: float

    def corners(self) -> Tuple[float, float, float, float]:
        """Return ``(x0, y0, x1, y1)`` as expected by the drawing backends."""
        return self.x, self.y, self.x + self.width, self.y + self.height


@dataclass(frozen=True)
class Segment:
    """Straight line from ``start`` to ``end``."""
    start: Point
    end: Point


PendingShape = Optional[Union[Rectangle, Segment]]


class ShapeDrawMode(Enum):
    """How a closed shape is painted."""

    FILL = "fill"
    STROKE = "stroke"


class PathError(Enum):
    """Reasons a path operation can fail."""

    NO_ACTIVE_CONTEXT = "no active page"
    NO_PENDING_SHAPE = "no pending shape"
    UNSUPPORTED_SHAPE_FOR_OPERATION = "shape not supported by operation"
    NO_CURRENT_POINT = "no current point"


@dataclass(frozen=True)
class OperationResult:
    """
    Outcome of a path operation.

    Truthiness follows ``success`` so results can be handed straight to
    callers expecting the legacy boolean convention.

    Attributes:
        success: Whether the operation took effect
        error: Failure reason when ``success`` is False
    """
    success: bool
    error: Optional[PathError] = None

    @classmethod
    def ok(cls) -> "OperationResult":
        return cls(True)

    @classmethod
    def failed(cls, error: PathError) -> "OperationResult":
        return cls(False, error)

    def __bool__(self) -> bool:
        return self.success

    def __str__(self) -> str:
        if self.success:
            return "OperationResult(success=True)"
        return f"OperationResult(success=False, error='{self.error.value}')"


@dataclass
class DocumentInfo:
    """
    Information about a written PDF document.

    Attributes:
        num_pages: Number of pages in the PDF
        file_size: File size in bytes
        title: PDF title metadata
        author: PDF author metadata
        subject: PDF subject metadata
        creator: PDF creator application
        keywords: PDF keywords metadata
        producer: PDF producer application
        outlines: Titles of the top-level outline entries
        page_sizes: ``(width, height)`` of every page in points
    """
    num_pages: int
    file_size: int
    title: Optional[str] = None
    author: Optional[str] = None
    subject: Optional[str] = None
    creator: Optional[str] = None
    keywords: Optional[str] = None
    producer: Optional[str] = None
    outlines: List[str] = field(default_factory=list)
    page_sizes: List[Tuple[float, float]] = field(default_factory=list)
