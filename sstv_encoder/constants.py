"""SSTV transmitter constants.

VIS header tones, pixel frequency range, line framing tones and audio
output parameters for the single supported transmission format.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Audio output
# ---------------------------------------------------------------------------
SAMPLE_RATE = 11025 * 4   # Hz - 44.1 kHz mono output
BASEBAND_FREQ = 400.0     # Hz - low-amplitude tone mixed into every sample

# Mix levels; CARRIER_LEVEL + BASEBAND_LEVEL must not exceed 1.0
CARRIER_LEVEL = 0.8
BASEBAND_LEVEL = 0.2

DEFAULT_OUTPUT_PATH = './out.wav'

# ---------------------------------------------------------------------------
# SSTV tone frequencies (Hz)
# ---------------------------------------------------------------------------
FREQ_VIS_BIT_1 = 1100     # VIS logic 1
FREQ_SYNC = 1200          # Horizontal sync pulse
FREQ_VIS_BIT_0 = 1300     # VIS logic 0
FREQ_BREAK = 1200         # Break tone in VIS header (same as sync)
FREQ_VIS_STOP = 1200      # VIS stop bit
FREQ_LEADER = 1900        # Leader / calibration tone
FREQ_CALIBRATION = 500    # Carrier-detect tone ahead of the leader
FREQ_PORCH = 1500         # Porch / channel separator

# Pixel luminance mapping range
FREQ_PIXEL_LOW = 1500     # 0 intensity
FREQ_PIXEL_HIGH = 2300    # 255 intensity
PIXEL_MAX = 255

# ---------------------------------------------------------------------------
# VIS header timing (milliseconds)
# ---------------------------------------------------------------------------
CALIBRATION_MS = 1000.0
VIS_LEADER_MS = 300.0
VIS_BREAK_MS = 10.0
VIS_BIT_MS = 30.0
VIS_STOP_BIT_MS = 30.0

VIS_DATA_BITS = 7
HEADER_LENGTH = 13        # preamble (4) + data bits (7) + parity + stop

# ---------------------------------------------------------------------------
# Line framing timing (milliseconds)
# ---------------------------------------------------------------------------
SYNC_MS = 9.0
PORCH_MS = 1.5

# Segments added per row on top of the scan data: porch, porch, sync, porch
FRAMING_SEGMENTS_PER_ROW = 4
