"""On-balance volume."""

from __future__ import annotations


class OBV:
    """Running total of volume, signed by the direction of each bar."""

    def __init__(self) -> None:
        self.value = 0.0
        self.ready = False

    def push(self, open: float, close: float, volume: float) -> None:
        """Add one bar: volume is subtracted on a falling bar, added otherwise."""
        if open > close:
            self.value -= volume
        else:
            self.value += volume
        self.ready = True