"""Fixed-rate update gate decoupling simulation ticks from frames."""

from __future__ import annotations


class TickGate:
    """Accumulates elapsed wall time and releases it in fixed intervals.

    Call :meth:`accumulate` once per frame with the frame's duration, then
    loop on :meth:`check`; each ``True`` consumes one interval. Time short of
    a full interval carries over to the next frame, so a slow frame yields
    several ticks and a fast one may yield none.
    """

    def __init__(self, fps: int) -> None:
        if fps < 1:
            raise ValueError("fps must be at least 1.")
        self.fps = fps
        self.interval = 1.0 / fps
        self._residual = 0.0

    @property
    def residual(self) -> float:
        """Accumulated time not yet consumed by a tick, in seconds."""
        return self._residual

    def accumulate(self, seconds: float) -> None:
        if seconds < 0:
            raise ValueError("elapsed time cannot be negative.")
        self._residual += seconds

    def check(self) -> bool:
        """Consume one interval if enough time has accumulated."""
        if self._residual >= self.interval:
            self._residual -= self.interval
            return True
        return False

    def reset(self) -> None:
        self._residual = 0.0
