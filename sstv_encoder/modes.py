"""SSTV transmission mode specification.

Dataclass describing the geometry and line timing of the transmitted mode.
Only the Scottie 1 framing is produced; the dataclass keeps its numbers in
one place for the header, line encoder and frame assembler.
"""

from __future__ import annotations

from dataclasses import dataclass

from .constants import PORCH_MS, SYNC_MS


@dataclass(frozen=True)
class TransmitMode:
    """Complete description of the transmitted SSTV mode.

    Attributes:
        name: Human-readable mode name (e.g. 'Scottie1').
        vis_code: 7-bit VIS code sent in the header.
        width: Image width in pixels (scan segments per channel).
        height: Image height in lines.
        pixel_ms: Duration of one pixel tone (ms).
        sync_duration_ms: Horizontal sync pulse duration (ms).
        porch_ms: Porch / separator duration (ms).
    """
    name: str
    vis_code: int
    width: int
    height: int
    pixel_ms: float
    sync_duration_ms: float = SYNC_MS
    porch_ms: float = PORCH_MS

    @property
    def channel_ms(self) -> float:
        """Duration of one colour channel's scan data (ms)."""
        return self.pixel_ms * self.width

    @property
    def line_duration_ms(self) -> float:
        """Duration of one framed scanline: 3 porches, sync and 3 channels."""
        return 3 * self.porch_ms + self.sync_duration_ms + 3 * self.channel_ms


SCOTTIE_1 = TransmitMode(
    name='Scottie1',
    vis_code=60,
    width=320,
    height=256,
    pixel_ms=0.432,
)
