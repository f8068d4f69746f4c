"""Edge detection and pulse timing helpers for control signals."""

from dataclasses import dataclass


@dataclass
class SchmittTrigger:
    """Detects rising edges of a boolean control signal.

    The trigger starts in the high state so that a signal which is already
    high when processing begins does not fire.
    """

    state: bool = True

    def process(self, high: bool) -> bool:
        """Feed the current level; return True on a low-to-high transition."""
        high = bool(high)
        fired = high and not self.state
        self.state = high
        return fired

    def reset(self) -> None:
        self.state = True


@dataclass
class PulseGenerator:
    """Holds an output high for a given duration after being triggered."""

    remaining: float = 0.0

    def trigger(self, duration: float = 1e-3) -> None:
        """Start a pulse; a shorter trigger never cuts a running pulse short."""
        if duration > self.remaining:
            self.remaining = duration

    def process(self, delta_time: float) -> bool:
        """Advance by ``delta_time``; return whether the pulse is high."""
        if self.remaining > 0.0:
            self.remaining -= delta_time
            return True
        return False

    def reset(self) -> None:
        self.remaining = 0.0