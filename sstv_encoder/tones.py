"""Tone segment model.

A tone segment is one (frequency, duration) pair of the encoded signal.
Every encoding step produces them; only the renderer consumes them.
"""

from __future__ import annotations

from dataclasses import dataclass

from .constants import FREQ_PIXEL_HIGH, FREQ_PIXEL_LOW, PIXEL_MAX


@dataclass(frozen=True)
class ToneSegment:
    """Transmit ``frequency`` (Hz) for ``duration`` (milliseconds)."""
    frequency: float
    duration: float

    def sample_count(self, sample_rate: int) -> int:
        """Number of samples this segment occupies at ``sample_rate``.

        Rounded to nearest so timing error stays within half a sample
        per segment.
        """
        return int(round(self.duration / 1000.0 * sample_rate))


def segment(frequency: float, duration: float) -> ToneSegment:
    """Build a tone segment. No validation is performed."""
    return ToneSegment(frequency, duration)


def color_to_freq(value: float) -> float:
    """Convert a channel intensity (0-255) to an SSTV tone frequency.

    Linear mapping: 0 = 1500 Hz (black), 255 = 2300 Hz (white).
    """
    return FREQ_PIXEL_LOW + float(value) * (FREQ_PIXEL_HIGH - FREQ_PIXEL_LOW) / PIXEL_MAX
