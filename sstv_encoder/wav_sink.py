"""Streaming mono 32-bit float WAV output."""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np
import soundfile as sf

from .constants import SAMPLE_RATE

logger = logging.getLogger('sstv_encoder.wav_sink')

# Samples buffered by write_sample() before they are handed to libsndfile
WRITE_CHUNK_SAMPLES = 4096


class WavSink:
    """Write samples to a mono IEEE-float WAV file as they are produced.

    Usage::

        with WavSink('out.wav') as sink:
            sink.write_sample(0.5)
            sink.write(block)

    The WAV header is only complete once finalize() (or the context
    manager exit) has run.
    """

    def __init__(self, path: str | Path, sample_rate: int = SAMPLE_RATE):
        self.path = Path(path)
        self.sample_rate = sample_rate
        self.samples_written = 0
        self._pending: list[float] = []
        self._file = sf.SoundFile(
            str(self.path), mode='w', samplerate=sample_rate,
            channels=1, format='WAV', subtype='FLOAT')
        logger.debug(f"Opened {self.path} for writing at {sample_rate} Hz")

    @property
    def closed(self) -> bool:
        return self._file.closed

    def write_sample(self, sample: float) -> None:
        """Append a single sample."""
        self._pending.append(sample)
        if len(self._pending) >= WRITE_CHUNK_SAMPLES:
            self._flush_pending()

    def write(self, samples: np.ndarray) -> None:
        """Append a block of samples."""
        self._flush_pending()
        if len(samples) == 0:
            return
        self._file.write(np.asarray(samples, dtype=np.float32))
        self.samples_written += len(samples)

    def finalize(self) -> None:
        """Flush buffered samples and close the file."""
        if self._file.closed:
            return
        self._flush_pending()
        self._file.close()
        logger.info(f"Wrote {self.samples_written} samples to {self.path}")

    def _flush_pending(self) -> None:
        if not self._pending:
            return
        block = np.array(self._pending, dtype=np.float32)
        self._pending.clear()
        self._file.write(block)
        self.samples_written += len(block)

    def __enter__(self) -> WavSink:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.finalize()
