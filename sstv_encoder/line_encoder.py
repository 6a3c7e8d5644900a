"""Per-row colour scan encoding.

Each pixel contributes one tone to each of the red, green and blue scan
buffers. The buffers are reused across rows and must be cleared once the
row has been framed.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from .tones import ToneSegment, color_to_freq, segment


class LineEncoder:
    """Accumulate one scanline's red/green/blue tone sequences.

    Usage::

        encoder = LineEncoder(pixel_ms=0.432)
        encoder.push_row(row)
        stream.extend(encoder.green)
        ...
        encoder.clear()
    """

    def __init__(self, pixel_ms: float):
        self.pixel_ms = pixel_ms
        self.red: list[ToneSegment] = []
        self.green: list[ToneSegment] = []
        self.blue: list[ToneSegment] = []

    def __len__(self) -> int:
        return len(self.red)

    def push_pixel(self, pixel: Sequence[int]) -> None:
        """Append one pixel's three channel tones.

        Args:
            pixel: Red, green, blue intensities (0-255). Extra channels
                such as alpha are ignored.
        """
        red, green, blue = (color_to_freq(pixel[0]), color_to_freq(pixel[1]),
                            color_to_freq(pixel[2]))
        self.red.append(segment(red, self.pixel_ms))
        self.green.append(segment(green, self.pixel_ms))
        self.blue.append(segment(blue, self.pixel_ms))

    def push_row(self, row: Iterable[Sequence[int]]) -> None:
        """Append every pixel of a row, left to right."""
        for pixel in row:
            self.push_pixel(pixel)

    def clear(self) -> None:
        self.red.clear()
        self.green.clear()
        self.blue.clear()
