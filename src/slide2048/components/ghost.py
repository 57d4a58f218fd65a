from dataclasses import dataclass

@dataclass(slots=True)
class Ghost:
    """Sprite-only stand-in for an absorbed tile.

    It keeps sliding toward the cell of the tile that absorbed it and is
    deleted by the animation system once it arrives. Ghosts are never keyed
    on the board.
    """
    row: int
    col: int
    value: int
