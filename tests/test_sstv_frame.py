"""Unit tests for whole-image tone stream assembly."""

import numpy as np
import pytest
from PIL import Image

from sstv_encoder.frame import FrameAssembler, stream_duration_ms
from sstv_encoder.header import build_header
from sstv_encoder.image_source import prepare_image
from sstv_encoder.modes import SCOTTIE_1, TransmitMode
from sstv_encoder.tones import segment

PORCH = segment(1500, 1.5)
SYNC = segment(1200, 9)


@pytest.fixture
def small_mode():
    """Scottie timing on a tiny raster."""
    return TransmitMode(name='Tiny', vis_code=60, width=2, height=1, pixel_ms=0.432)


class TestStreamPrefix:
    """Tests for the header and first sync."""

    def test_header_then_sync(self, small_mode):
        """Test the stream opens with the VIS header and one sync pulse."""
        stream = FrameAssembler(small_mode).assemble([])
        assert stream[:13] == build_header(60, False)
        assert stream[13] == SYNC
        assert len(stream) == 14

    def test_explicit_parity_flag(self, small_mode):
        """Test an explicit parity flag overrides the computed one."""
        stream = FrameAssembler(small_mode, parity_even=True).assemble([])
        assert stream[11].frequency == 1100


class TestLineFraming:
    """Tests for per-row framing order."""

    def test_two_pixel_row(self, small_mode):
        """Test order is porch, G, porch, B, sync, porch, R."""
        row = [(255, 0, 0), (0, 0, 255)]
        stream = FrameAssembler(small_mode).assemble([row])
        line = stream[14:]

        assert len(line) == 4 + 3 * 2
        assert [seg.frequency for seg in line] == [
            1500,               # porch
            1500, 1500,         # green
            1500,               # porch
            1500, 2300,         # blue
            1200,               # sync
            1500,               # porch
            2300, 1500,         # red
        ]
        assert line[0] == PORCH and line[3] == PORCH and line[7] == PORCH
        assert line[6] == SYNC
        for i in (1, 2, 4, 5, 8, 9):
            assert line[i].duration == 0.432

    def test_rows_do_not_carry_over(self, small_mode):
        """Test each row only contains its own pixels."""
        rows = [
            [(255, 255, 255), (255, 255, 255)],
            [(0, 0, 0), (0, 0, 0)],
        ]
        stream = FrameAssembler(small_mode).assemble(rows)
        second = stream[14 + 10:]
        assert len(second) == 10
        scan = [seg for i, seg in enumerate(second) if i not in (0, 3, 6, 7)]
        assert all(seg.frequency == 1500 for seg in scan)

    def test_rows_top_to_bottom(self, small_mode):
        """Test rows are emitted in input order."""
        rows = [[(0, 0, 0)] * 2, [(255, 0, 0)] * 2]
        stream = FrameAssembler(small_mode).assemble(rows)
        first_red = stream[14 + 8]
        second_red = stream[14 + 10 + 8]
        assert first_red.frequency == 1500
        assert second_red.frequency == 2300

    def test_uint8_array_rows(self, small_mode):
        """Test a uint8 (H, W, 3) array can be passed straight to assemble."""
        pixels = np.array([[[255, 0, 0], [0, 0, 255]]], dtype=np.uint8)
        line = FrameAssembler(small_mode).assemble(pixels)[14:]
        assert [seg.frequency for seg in line] == [
            1500, 1500, 1500, 1500, 1500, 2300, 1200, 1500, 2300, 1500,
        ]

    def test_failed_row_does_not_leak(self, small_mode):
        """Test a row that raises leaves nothing behind for the next call."""
        assembler = FrameAssembler(small_mode)
        with pytest.raises(IndexError):
            assembler.assemble([[(1, 2, 3), (4, 5)]])

        stream = assembler.assemble([[(0, 0, 0), (0, 0, 0)]])
        assert len(stream) == 13 + 1 + (4 + 3 * 2)

    def test_segment_count_formula(self):
        """Test the stream length is 13 + 1 + rows * (4 + 3 * cols)."""
        mode = TransmitMode(name='Grid', vis_code=60, width=5, height=3, pixel_ms=0.432)
        pixels = np.zeros((3, 5, 3), dtype=np.uint8)
        assembler = FrameAssembler(mode)
        stream = assembler.assemble_image(pixels)
        assert len(stream) == 13 + 1 + 3 * (4 + 3 * 5)
        assert len(stream) == assembler.expected_length(3, 5)

    def test_assemble_image_rejects_grayscale(self, small_mode):
        """Test a 2-D array is rejected."""
        with pytest.raises(ValueError):
            FrameAssembler(small_mode).assemble_image(np.zeros((1, 2), dtype=np.uint8))


class TestSolidRedImage:
    """End-to-end stream for a solid red source image."""

    @pytest.fixture(scope='class')
    def stream(self):
        pixels = prepare_image(Image.new('RGB', (1, 1), (255, 0, 0)))
        return FrameAssembler(SCOTTIE_1).assemble_image(pixels)

    def test_segment_count(self, stream):
        """Test the full-size raster produces the expected number of segments."""
        rows, cols = SCOTTIE_1.height, SCOTTIE_1.width
        assert len(stream) == 13 + 1 + rows * (4 + 3 * cols)

    def test_channel_frequencies(self, stream):
        """Test green/blue scans sit at 1500 Hz and red scans at 2300 Hz."""
        cols = SCOTTIE_1.width
        line_len = 4 + 3 * cols
        for row in range(SCOTTIE_1.height):
            line = stream[14 + row * line_len:14 + (row + 1) * line_len]
            green = line[1:1 + cols]
            blue = line[2 + cols:2 + 2 * cols]
            red = line[4 + 2 * cols:]
            assert {seg.frequency for seg in green} == {1500}
            assert {seg.frequency for seg in blue} == {1500}
            assert {seg.frequency for seg in red} == {2300}
            assert line[2 + 2 * cols] == SYNC

    def test_nominal_duration(self, stream):
        """Test the stream duration equals header, first sync and lines."""
        header_ms = 1000 + 300 + 10 + 300 + 9 * 30
        expected = header_ms + 9 + SCOTTIE_1.height * SCOTTIE_1.line_duration_ms
        assert stream_duration_ms(stream) == pytest.approx(expected)
