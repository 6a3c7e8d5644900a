"""Tone stream to PCM waveform rendering.

Every sample is ``0.8 * sin(2*pi*f*t) + 0.2 * sin(2*pi*B*t)`` where ``f``
is the current segment's frequency, ``B`` the baseband mix frequency and
``t`` a time accumulator that starts at half a sample period and is never
reset between segments.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Protocol

import numpy as np

from .constants import BASEBAND_FREQ, BASEBAND_LEVEL, CARRIER_LEVEL, SAMPLE_RATE
from .tones import ToneSegment

logger = logging.getLogger('sstv_encoder.renderer')


class SampleSink(Protocol):
    def write(self, samples: np.ndarray) -> None: ...


class RenderState:
    """Time accumulator for one full render pass.

    Time is kept as an integer sample count so the accumulator advances by
    exactly one sample period per sample with no floating-point creep.
    """

    def __init__(self, sample_rate: int = SAMPLE_RATE):
        self.sample_rate = sample_rate
        self.samples_emitted = 0

    @property
    def time(self) -> float:
        """Time (s) of the next sample to be emitted."""
        return (self.samples_emitted + 0.5) / self.sample_rate

    def advance(self, count: int) -> np.ndarray:
        """Return the sample times for the next ``count`` samples and advance."""
        start = self.samples_emitted
        self.samples_emitted += count
        return (np.arange(start, start + count, dtype=np.float64) + 0.5) / self.sample_rate


def render_segment(seg: ToneSegment, state: RenderState,
                   baseband_hz: float = BASEBAND_FREQ) -> np.ndarray:
    """Render one segment, advancing the shared accumulator.

    Args:
        seg: Tone segment to render.
        state: Accumulator shared across the whole stream.
        baseband_hz: Baseband mix frequency (Hz).

    Returns:
        Float32 samples, ``seg.sample_count(rate)`` long.
    """
    t = state.advance(seg.sample_count(state.sample_rate))
    samples = (CARRIER_LEVEL * np.sin(2.0 * np.pi * seg.frequency * t)
               + BASEBAND_LEVEL * np.sin(2.0 * np.pi * baseband_hz * t))
    return samples.astype(np.float32)


def render(stream: Iterable[ToneSegment], sample_rate: int = SAMPLE_RATE,
           baseband_hz: float = BASEBAND_FREQ,
           state: RenderState | None = None) -> Iterator[np.ndarray]:
    """Yield one block of samples per segment, in stream order.

    A fresh RenderState is created unless one is passed in; either way it
    is initialised once and carried across every segment.
    """
    if state is None:
        state = RenderState(sample_rate)
    for seg in stream:
        yield render_segment(seg, state, baseband_hz)


def render_array(stream: Iterable[ToneSegment], sample_rate: int = SAMPLE_RATE,
                 baseband_hz: float = BASEBAND_FREQ) -> np.ndarray:
    """Render a whole stream into one float32 array."""
    blocks = list(render(stream, sample_rate, baseband_hz))
    if not blocks:
        return np.zeros(0, dtype=np.float32)
    return np.concatenate(blocks)


def render_to_sink(stream: Iterable[ToneSegment], sink: SampleSink,
                   sample_rate: int = SAMPLE_RATE,
                   baseband_hz: float = BASEBAND_FREQ) -> int:
    """Render a stream into ``sink`` in emission order.

    Returns:
        Total number of samples written.
    """
    state = RenderState(sample_rate)
    segments = 0
    for block in render(stream, sample_rate, baseband_hz, state):
        sink.write(block)
        segments += 1

    logger.info(
        f"Rendered {segments} segments into {state.samples_emitted} samples "
        f"({state.samples_emitted / sample_rate:.1f} s at {sample_rate} Hz)")
    return state.samples_emitted
