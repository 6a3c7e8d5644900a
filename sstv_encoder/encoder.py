"""End-to-end image to SSTV audio pipeline."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .constants import BASEBAND_FREQ, DEFAULT_OUTPUT_PATH, SAMPLE_RATE
from .frame import FrameAssembler, stream_duration_ms
from .image_source import load_image
from .modes import SCOTTIE_1, TransmitMode
from .renderer import render_to_sink
from .wav_sink import WavSink

logger = logging.getLogger('sstv_encoder.encoder')


@dataclass
class EncodeResult:
    """Summary of one encoding run."""
    output_path: Path
    segments: int
    samples: int
    sample_rate: int = SAMPLE_RATE

    @property
    def duration_s(self) -> float:
        return self.samples / self.sample_rate


def encode_image_file(image_path: str | Path,
                      output_path: str | Path = DEFAULT_OUTPUT_PATH,
                      mode: TransmitMode = SCOTTIE_1,
                      sample_rate: int = SAMPLE_RATE,
                      baseband_hz: float = BASEBAND_FREQ) -> EncodeResult:
    """Encode an image file into an SSTV WAV file.

    Image decode and file write errors propagate to the caller unchanged.
    """
    pixels = load_image(image_path, mode.width, mode.height)

    stream = FrameAssembler(mode).assemble_image(pixels)
    logger.info(
        f"{mode.name}: {len(stream)} tone segments, "
        f"{stream_duration_ms(stream) / 1000.0:.1f} s nominal")

    with WavSink(output_path, sample_rate) as sink:
        samples = render_to_sink(stream, sink, sample_rate, baseband_hz)

    return EncodeResult(
        output_path=Path(output_path),
        segments=len(stream),
        samples=samples,
        sample_rate=sample_rate,
    )
