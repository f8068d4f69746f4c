"""Ribbon controller state mapped to pitch, gate and modulation values."""

from dataclasses import dataclass
from enum import IntEnum


class RibbonMode(IntEnum):
    KEY = 0
    NARROW = 1
    WIDE = 2


@dataclass
class Ribbon:
    """Touch strip with a position in [0, 1]."""

    touching: bool = False
    mode: RibbonMode = RibbonMode.KEY
    octave: float = 0.0
    position: float = 0.0

    def set_mode(self, mode: int) -> None:
        self.mode = RibbonMode(min(max(int(mode), 0), 2))

    def set_octave(self, octave: float) -> None:
        self.octave = octave

    def set_position(self, position: float) -> None:
        self.position = min(max(position, 0.0), 1.0)

    def cv(self) -> float:
        """Pitch voltage for the current position and mode."""
        if self.mode is RibbonMode.KEY:
            step = int(self.position * 12.0)
            return step / 12.0 + self.octave
        if self.mode is RibbonMode.NARROW:
            return self.position * 2.0 + self.octave - 1.0
        return self.position * 5.0 + self.octave - 2.5

    def gate(self) -> float:
        return 10.0 if self.touching else 0.0

    def gate_time_mod(self) -> float:
        """Gate-time scale from 0 (short) to 1 (long)."""
        return self.position

    def volume_automation(self) -> float:
        """Volume offset from -1 to +1."""
        return (self.position - 0.5) * 2.0

    def drum_roll_intensity(self) -> float:
        return self.position