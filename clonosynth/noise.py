"""Linear congruential white-noise source."""

from dataclasses import dataclass

_DEFAULT_SEED = 12345
_MASK = 0xFFFFFFFF


@dataclass
class NoiseGenerator:
    """32-bit LCG producing noise samples in [-1, 1)."""

    state: int = _DEFAULT_SEED

    def set_seed(self, seed: int) -> None:
        self.state = seed & _MASK

    def process(self) -> float:
        """Advance the generator and return the next sample."""
        self.state = (self.state * 1664525 + 1013904223) & _MASK
        return (self.state % 65536) / 32768.0 - 1.0

    def process_stereo(self) -> tuple[float, float]:
        """Return a (left, right) pair of consecutive samples."""
        left = self.process()
        right = self.process()
        return left, right

    def reset(self) -> None:
        self.state = _DEFAULT_SEED