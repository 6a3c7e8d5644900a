"""VIS header construction.

The header lets a receiver detect the carrier, calibrate on the leader
tone and read the 7-bit mode code, which is frequency-shift keyed LSB
first, followed by a parity bit and a stop bit.
"""

from __future__ import annotations

from typing import Sequence

from .constants import (
    CALIBRATION_MS,
    FREQ_BREAK,
    FREQ_CALIBRATION,
    FREQ_LEADER,
    FREQ_VIS_BIT_0,
    FREQ_VIS_BIT_1,
    FREQ_VIS_STOP,
    VIS_BIT_MS,
    VIS_BREAK_MS,
    VIS_DATA_BITS,
    VIS_LEADER_MS,
    VIS_STOP_BIT_MS,
)
from .tones import ToneSegment, segment

# Calibration table. Only the first PREAMBLE_LENGTH entries are sent; the
# trailing break is covered by the data bits that follow.
CALIBRATION_PREAMBLE: tuple[ToneSegment, ...] = (
    segment(FREQ_CALIBRATION, CALIBRATION_MS),
    segment(FREQ_LEADER, VIS_LEADER_MS),
    segment(FREQ_BREAK, VIS_BREAK_MS),
    segment(FREQ_LEADER, VIS_LEADER_MS),
    segment(FREQ_BREAK, VIS_BREAK_MS),
)
PREAMBLE_LENGTH = 4


def bit_segment(bit: bool) -> ToneSegment:
    """Encode a single VIS bit (1 = 1100 Hz, 0 = 1300 Hz, 30 ms)."""
    if bit:
        return segment(FREQ_VIS_BIT_1, VIS_BIT_MS)
    return segment(FREQ_VIS_BIT_0, VIS_BIT_MS)


def even_parity(vis_code: int) -> bool:
    """Even-parity bit over the 7 VIS data bits."""
    ones = bin(vis_code & ((1 << VIS_DATA_BITS) - 1)).count('1')
    return ones % 2 == 1


def build_header(vis_code: int, parity_even: bool) -> list[ToneSegment]:
    """Build the 13-segment VIS header.

    Args:
        vis_code: Mode code; bits 0-6 are transmitted, LSB first.
        parity_even: Parity flag sent after the data bits.

    Returns:
        Calibration preamble (4), data bits (7), parity (1), stop (1).
    """
    header = list(CALIBRATION_PREAMBLE[:PREAMBLE_LENGTH])
    for i in range(VIS_DATA_BITS):
        header.append(bit_segment(bool((vis_code >> i) & 1)))
    header.append(bit_segment(parity_even))
    header.append(segment(FREQ_VIS_STOP, VIS_STOP_BIT_MS))
    return header


def decode_header_bits(header: Sequence[ToneSegment]) -> tuple[int, bool]:
    """Recover (vis_code, parity flag) from a header built by build_header.

    Raises:
        ValueError: If a bit segment carries neither bit frequency.
    """
    bits = header[PREAMBLE_LENGTH:PREAMBLE_LENGTH + VIS_DATA_BITS + 1]
    values = []
    for seg in bits:
        if seg.frequency == FREQ_VIS_BIT_1:
            values.append(1)
        elif seg.frequency == FREQ_VIS_BIT_0:
            values.append(0)
        else:
            raise ValueError(f"Not a VIS bit tone: {seg.frequency} Hz")

    code = 0
    for i, bit in enumerate(values[:VIS_DATA_BITS]):
        code |= bit << i
    return code, bool(values[VIS_DATA_BITS])
