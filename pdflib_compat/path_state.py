"""Deferred path construction for the procedural drawing API.

The legacy API describes geometry first (``rect``, ``moveto``/``lineto``) and
paints it later (``fill``, ``stroke``, ``clip``). :class:`PathState` keeps the
single pending shape plus the current point and turns each terminal operation
into one immediate call on a :class:`~pdflib_compat.backends.base.DrawingSurface`.

There is exactly one pending-shape slot. Describing a new shape replaces the
previous one, and terminal operations leave it in place unless the state was
created with ``clear_after_terminal_op=True``.

No method raises. Failures come back as an :class:`OperationResult` carrying a
:class:`PathError`.
"""

from __future__ import annotations

from typing import Optional

from .backends.base import DrawingSurface
from .types import OperationResult, PathError, PendingShape, Point, Rectangle, Segment, ShapeDrawMode


class PathState:
    """Pending shape and current point of one page."""

    def __init__(
        self,
        surface: Optional[DrawingSurface] = None,
        *,
        clear_after_terminal_op: bool = False,
    ) -> None:
        self._surface = surface
        self.clear_after_terminal_op = clear_after_terminal_op
        self._pending_shape: PendingShape = None
        self._current_point: Optional[Point] = None

    @property
    def surface(self) -> Optional[DrawingSurface]:
        return self._surface

    @property
    def pending_shape(self) -> PendingShape:
        return self._pending_shape

    @property
    def current_point(self) -> Optional[Point]:
        return self._current_point

    def reset(self) -> None:
        self._pending_shape = None
        self._current_point = None

    # ------------------------------------------------------------------
    # Shape description
    # ------------------------------------------------------------------
    def describe_rectangle(self, x: float, y: float, width: float, height: float) -> OperationResult:
        if self._surface is None:
            return OperationResult.failed(PathError.NO_ACTIVE_CONTEXT)
        self._pending_shape = Rectangle(x, y, width, height)
        return OperationResult.ok()

    def move_to(self, x: float, y: float) -> OperationResult:
        self._current_point = (x, y)
        return OperationResult.ok()

    def line_to(self, x: float, y: float) -> OperationResult:
        """Describe a segment from the current point to ``(x, y)``.

        The current point is left where it is, so consecutive ``line_to``
        calls all start from the last ``move_to``.
        """
        if self._current_point is None:
            return OperationResult.failed(PathError.NO_CURRENT_POINT)
        self._pending_shape = Segment(self._current_point, (x, y))
        return OperationResult.ok()

    # ------------------------------------------------------------------
    # Terminal operations
    # ------------------------------------------------------------------
    def _check_ready(self) -> Optional[OperationResult]:
        if self._surface is None:
            return OperationResult.failed(PathError.NO_ACTIVE_CONTEXT)
        if self._pending_shape is None:
            return OperationResult.failed(PathError.NO_PENDING_SHAPE)
        return None

    def _finish(self) -> OperationResult:
        if self.clear_after_terminal_op:
            self._pending_shape = None
        return OperationResult.ok()

    def fill(self) -> OperationResult:
        failure = self._check_ready()
        if failure is not None:
            return failure

        shape = self._pending_shape
        if isinstance(shape, Rectangle):
            self._surface.draw_rectangle(*shape.corners(), ShapeDrawMode.FILL)
            return self._finish()
        # a segment has no interior
        return OperationResult.failed(PathError.UNSUPPORTED_SHAPE_FOR_OPERATION)

    def stroke(self) -> OperationResult:
        failure = self._check_ready()
        if failure is not None:
            return failure

        shape = self._pending_shape
        if isinstance(shape, Rectangle):
            self._surface.draw_rectangle(*shape.corners(), ShapeDrawMode.STROKE)
            return self._finish()
        if isinstance(shape, Segment):
            self._surface.draw_line(shape.start[0], shape.start[1], shape.end[0], shape.end[1])
            return self._finish()
        return OperationResult.failed(PathError.UNSUPPORTED_SHAPE_FOR_OPERATION)

    def clip(self) -> OperationResult:
        failure = self._check_ready()
        if failure is not None:
            return failure

        shape = self._pending_shape
        if isinstance(shape, Rectangle):
            self._surface.clip_rectangle(*shape.corners())
            return self._finish()
        return OperationResult.failed(PathError.UNSUPPORTED_SHAPE_FOR_OPERATION)


__all__ = ["PathState"]
