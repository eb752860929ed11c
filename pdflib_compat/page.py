"""Per-page drawing context."""

from __future__ import annotations

from dataclasses import dataclass, field

from .backends.base import DrawingSurface
from .path_state import PathState


@dataclass
class PageContext:
    """The page currently being drawn.

    Each page owns a fresh :class:`PathState` bound to its surface, so pending
    geometry never carries over from one page to the next.
    """

    index: int
    width: float
    height: float
    surface: DrawingSurface
    clear_after_terminal_op: bool = False
    path: PathState = field(init=False)

    def __post_init__(self) -> None:
        self.path = PathState(self.surface, clear_after_terminal_op=self.clear_after_terminal_op)


__all__ = ["PageContext"]
