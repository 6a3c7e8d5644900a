"""SSTV (Slow-Scan Television) image encoder package.

Turns a still image into Scottie 1 SSTV audio: a VIS header, per-line
sync/porch framing around G, B and R scans, rendered to a continuous
44.1 kHz float waveform with numpy and written with soundfile.
"""

from .constants import SAMPLE_RATE
from .encoder import EncodeResult, encode_image_file
from .frame import FrameAssembler, stream_duration_ms
from .header import build_header, decode_header_bits, even_parity
from .line_encoder import LineEncoder
from .modes import SCOTTIE_1, TransmitMode
from .renderer import RenderState, render, render_array, render_to_sink
from .tones import ToneSegment, color_to_freq, segment
from .wav_sink import WavSink

__all__ = [
    'EncodeResult',
    'FrameAssembler',
    'LineEncoder',
    'RenderState',
    'SAMPLE_RATE',
    'SCOTTIE_1',
    'ToneSegment',
    'TransmitMode',
    'WavSink',
    'build_header',
    'color_to_freq',
    'decode_header_bits',
    'encode_image_file',
    'even_parity',
    'render',
    'render_array',
    'render_to_sink',
    'segment',
    'stream_duration_ms',
]
