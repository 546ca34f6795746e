"""Auto-scrolling window over the tall course."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tracewiz.session import TraceSession


@dataclass
class Viewport:
    """Vertical scroll position of a ``height`` tall window.

    ``follow`` keeps the revealed tip and the trail tip on screen: once
    either passes ``trigger_margin`` above the bottom edge, the window jumps
    so the lower of the two sits at ``anchor`` of the window height.
    """

    height: float
    content_height: float
    offset: float = 0.0
    trigger_margin: float = 100.0
    anchor: float = 0.7
    min_jump: float = 30.0

    @property
    def max_offset(self) -> float:
        return max(0.0, self.content_height - self.height)

    def reset(self) -> None:
        self.offset = 0.0

    def to_screen(self, y: float) -> float:
        return y - self.offset

    def to_world(self, y: float) -> float:
        return y + self.offset

    def follow(self, session: TraceSession) -> float | None:
        """Scroll if needed. Returns the new offset, or None if it stayed put."""
        trigger = self.offset + self.height - self.trigger_margin
        candidates = []
        tip = session.revealed_tip
        if tip is not None:
            candidates.append(tip.y)
        if session.trail:
            candidates.append(session.trail[-1].y)
        if not candidates or max(candidates) < trigger:
            return None

        target = max(candidates) - self.height * self.anchor
        target = max(0.0, min(target, self.max_offset))
        if abs(self.offset - target) <= self.min_jump:
            return None
        self.offset = target
        return target
