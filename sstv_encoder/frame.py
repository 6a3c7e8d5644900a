"""Whole-image tone stream assembly.

Scottie line order: porch -> G -> porch -> B -> sync -> porch -> R.
A single sync pulse follows the VIS header so the first line is framed
the same way as every other line.
"""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

import numpy as np

from .constants import FRAMING_SEGMENTS_PER_ROW, FREQ_PORCH, FREQ_SYNC
from .header import build_header, even_parity
from .line_encoder import LineEncoder
from .modes import SCOTTIE_1, TransmitMode
from .tones import ToneSegment, segment

logger = logging.getLogger('sstv_encoder.frame')


class FrameAssembler:
    """Build the ordered tone stream for a whole image."""

    def __init__(self, mode: TransmitMode = SCOTTIE_1,
                 parity_even: bool | None = None):
        self._mode = mode
        if parity_even is None:
            parity_even = even_parity(mode.vis_code)
        self._parity_even = parity_even
        self._line = LineEncoder(mode.pixel_ms)
        self._sync = segment(FREQ_SYNC, mode.sync_duration_ms)
        self._porch = segment(FREQ_PORCH, mode.porch_ms)

    @property
    def mode(self) -> TransmitMode:
        return self._mode

    def expected_length(self, rows: int, cols: int) -> int:
        """Number of segments produced for a rows x cols image."""
        header_len = len(build_header(self._mode.vis_code, self._parity_even))
        return header_len + 1 + rows * (FRAMING_SEGMENTS_PER_ROW + 3 * cols)

    def assemble(self, rows: Iterable[Iterable[Sequence[int]]]) -> list[ToneSegment]:
        """Encode rows top to bottom into a single tone stream.

        Args:
            rows: Iterable of rows, each an iterable of RGB(A) pixels.

        Returns:
            Header, first sync, then each framed scanline.
        """
        stream = build_header(self._mode.vis_code, self._parity_even)
        stream.append(self._sync)

        count = 0
        for row in rows:
            try:
                self._line.push_row(row)
                self._append_line(stream)
            finally:
                self._line.clear()
            count += 1

        logger.debug(f"Assembled {count} lines into {len(stream)} segments")
        return stream

    def assemble_image(self, image) -> list[ToneSegment]:
        """Encode a Pillow image or (H, W, 3) array already at mode size."""
        pixels = np.asarray(image)
        if pixels.ndim != 3 or pixels.shape[2] < 3:
            raise ValueError(f"Expected an RGB image array, got shape {pixels.shape}")
        if pixels.shape[:2] != (self._mode.height, self._mode.width):
            logger.warning(
                f"Image is {pixels.shape[1]}x{pixels.shape[0]}, "
                f"{self._mode.name} expects {self._mode.width}x{self._mode.height}")
        return self.assemble(pixels.tolist())

    def _append_line(self, stream: list[ToneSegment]) -> None:
        line = self._line
        stream.append(self._porch)
        stream.extend(line.green)
        stream.append(self._porch)
        stream.extend(line.blue)
        stream.append(self._sync)
        stream.append(self._porch)
        stream.extend(line.red)


def stream_duration_ms(stream: Sequence[ToneSegment]) -> float:
    """Total nominal duration of a tone stream (ms)."""
    return sum(seg.duration for seg in stream)
