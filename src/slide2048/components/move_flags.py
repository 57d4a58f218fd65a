from dataclasses import dataclass

@dataclass(slots=True)
class MoveFlags:
    """Transient state of a tile during one move resolution.

    ``merged`` tiles do not merge again, ``frozen`` tiles stop advancing and
    ``dead`` tiles were absorbed by a neighbour and are deleted once the
    resolution finishes. All three are cleared before the next move.
    """
    merged: bool = False
    frozen: bool = False
    dead: bool = False

    def reset(self) -> None:
        self.merged = False
        self.frozen = False
        self.dead = False
