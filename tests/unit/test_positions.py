"""Unit tests for SimpleWritePositions."""

import pytest

from kv_batch import SimpleWritePositions


def test_positions_append_and_last():
    """Test append grows the list and last returns the newest position."""
    positions = SimpleWritePositions([0])
    positions.append(3)
    positions.append(7)

    assert positions.last() == 7
    assert len(positions) == 3
    assert positions.get() == [0, 3, 7]


def test_positions_indexed_access():
    """Test indexed access, including negative indices."""
    positions = SimpleWritePositions([4, 5, 6])

    assert positions[0] == 4
    assert positions[2] == 6
    assert positions[-1] == 6
    with pytest.raises(IndexError):
        positions[3]


def test_positions_pop():
    """Test pop drops the last position."""
    positions = SimpleWritePositions([1, 2, 3])
    positions.pop()

    assert positions.get() == [1, 2]
    assert positions.last() == 2


def test_positions_reset():
    """Test reset collapses to a single zero."""
    positions = SimpleWritePositions([9, 8, 7])
    positions.reset()

    assert positions.get() == [0]
    assert len(positions) == 1


def test_positions_reset_empty():
    """Test reset on an empty list still leaves one element."""
    positions = SimpleWritePositions()
    positions.reset()

    assert positions.get() == [0]


def test_positions_empty_errors():
    """Test pop and last on an empty list raise IndexError."""
    positions = SimpleWritePositions()

    with pytest.raises(IndexError):
        positions.last()
    with pytest.raises(IndexError):
        positions.pop()


def test_positions_copy_semantics():
    """Test the constructor and get() copy rather than alias."""
    source = [1, 2]
    positions = SimpleWritePositions(source)
    source.append(3)
    snapshot = positions.get()
    snapshot.append(4)

    assert positions.get() == [1, 2]
