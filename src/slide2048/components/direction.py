from enum import Enum
from typing import Tuple


class Direction(Enum):
    """Cardinal move directions as (d_row, d_col); row 0 is the top of the board."""
    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def delta(self) -> Tuple[int, int]:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> "Direction":
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(
                f"Invalid direction: {name!r}. Must be 'up', 'down', 'left', or 'right'"
            ) from None
