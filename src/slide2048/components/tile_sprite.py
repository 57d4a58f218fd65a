from dataclasses import dataclass

@dataclass(slots=True)
class TileSprite:
    """Cosmetic pixel rectangle of a tile.

    Coordinates grow rightwards and downwards from the top-left corner of the
    board, so row 0 sits at y == 0. The renderer flips y for arcade.
    """
    x: float
    y: float
    width: float
    height: float
