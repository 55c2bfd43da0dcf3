"""Write-position list for batch-log bookkeeping.

Records, per key, the positions at which writes landed in a batch log.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


class SimpleWritePositions:
    """Growable list of integer positions.

    Args:
        positions: Initial positions (copied)

    Invariants:
        - After reset() the list is exactly [0]
    """

    def __init__(self, positions: Iterable[int] = ()):
        self._positions: list[int] = list(positions)

    def append(self, position: int) -> None:
        self._positions.append(position)

    def pop(self) -> None:
        """Drop the last position. Raises IndexError when empty."""
        self._positions.pop()

    def last(self) -> int:
        """Return the last position. Raises IndexError when empty."""
        return self._positions[-1]

    def reset(self) -> None:
        """Collapse to a single zero position."""
        self._positions = [0]

    def get(self) -> list[int]:
        """Return a copy of all positions."""
        return list(self._positions)

    def __getitem__(self, index: int) -> int:
        return self._positions[index]

    def __len__(self) -> int:
        return len(self._positions)

    def __repr__(self) -> str:
        return f"SimpleWritePositions({self._positions!r})"
