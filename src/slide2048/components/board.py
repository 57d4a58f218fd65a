from dataclasses import dataclass, field
from typing import Dict, Tuple

@dataclass(slots=True)
class Board:
    """Grid dimensions plus the occupancy map of live tiles.

    ``cells`` maps a packed ``row * cols + col`` key to the tile entity that
    occupies that cell. Keys are only ever changed through board_ops so that a
    tile's BoardPosition and its key move together.
    """
    rows: int
    cols: int
    cells: Dict[int, int] = field(default_factory=dict)

    def key_for(self, row: int, col: int) -> int:
        return row * self.cols + col

    def position_for(self, key: int) -> Tuple[int, int]:
        return divmod(key, self.cols)

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    @property
    def capacity(self) -> int:
        return self.rows * self.cols

    @property
    def is_full(self) -> bool:
        return len(self.cells) >= self.capacity
