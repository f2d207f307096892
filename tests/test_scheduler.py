"""Tests for row partitioning and scan order."""

import pytest

from src.whitted.core.scheduler import partition_rows, scan_order


class TestPartitionRows:
    """Tests for partition_rows."""

    def test_even_split(self):
        """Test rows that divide evenly."""
        assert partition_rows(12, 4) == [range(0, 3), range(3, 6), range(6, 9), range(9, 12)]

    def test_earlier_bands_take_extra_rows(self):
        """Test an uneven split."""
        assert partition_rows(10, 3) == [range(0, 4), range(4, 7), range(7, 10)]

    def test_more_workers_than_rows(self):
        """Test that no empty bands are produced."""
        bands = partition_rows(3, 8)
        assert bands == [range(0, 1), range(1, 2), range(2, 3)]

    def test_single_worker(self):
        """Test that one worker gets every row."""
        assert partition_rows(7, 1) == [range(0, 7)]

    @pytest.mark.parametrize(("height", "workers"), [(1, 1), (5, 2), (576, 4), (97, 13)])
    def test_covers_every_row_once(self, height, workers):
        """Test that bands are contiguous and disjoint."""
        rows = [row for band in partition_rows(height, workers) for row in band]
        assert rows == list(range(height))

    @pytest.mark.parametrize(("height", "workers"), [(0, 1), (5, 0), (-1, -1)])
    def test_invalid_arguments(self, height, workers):
        """Test that empty images and empty pools are rejected."""
        with pytest.raises(ValueError):
            partition_rows(height, workers)


class TestScanOrder:
    """Tests for scan_order."""

    def test_left_to_right_top_to_bottom(self):
        """Test the pixel order within a band."""
        assert list(scan_order(3, range(1, 3))) == [
            (0, 1),
            (1, 1),
            (2, 1),
            (0, 2),
            (1, 2),
            (2, 2),
        ]

    def test_empty_band(self):
        """Test that an empty row range yields nothing."""
        assert list(scan_order(4, range(0))) == []
