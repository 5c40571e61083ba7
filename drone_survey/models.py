# models.py
from dataclasses import dataclass, field as dc_field
from typing import Dict, Iterable, Iterator, Optional, Tuple

Coord = Tuple[int, int]


def tree_key(x: int, y: int) -> Coord:
    return (x, y)


@dataclass(frozen=True)
class Field:
    length: int   # east-west, x in [1, length]
    width: int    # north-south, y in [1, width]

    @property
    def n_plots(self) -> int:
        return self.length * self.width

    def contains(self, x: int, y: int) -> bool:
        return 1 <= x <= self.length and 1 <= y <= self.width


@dataclass(frozen=True)
class Tree:
    x: int
    y: int
    height: int


@dataclass
class TreeMap:
    """Tree height per plot. Planting twice on one plot keeps the last height."""
    heights: Dict[Coord, int] = dc_field(default_factory=dict)

    @classmethod
    def from_trees(cls, trees: Iterable[Tree]) -> "TreeMap":
        tm = cls()
        for t in trees:
            tm.plant(t)
        return tm

    def plant(self, tree: Tree) -> None:
        self.heights[tree_key(tree.x, tree.y)] = tree.height

    def height_at(self, x: int, y: int) -> Optional[int]:
        return self.heights.get(tree_key(x, y))

    def __len__(self) -> int:
        return len(self.heights)

    def __iter__(self) -> Iterator[Tree]:
        for (x, y), h in self.heights.items():
            yield Tree(x, y, h)


@dataclass(frozen=True)
class FlightStep:
    x: int
    y: int
    altitude: int
    climb: int    # |altitude change| charged on arrival at (x, y)
