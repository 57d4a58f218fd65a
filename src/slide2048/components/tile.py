from dataclasses import dataclass

@dataclass(slots=True)
class Tile:
    """Numbered tile; value is a power of two, never below 2."""
    value: int
