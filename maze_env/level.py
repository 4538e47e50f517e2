"""
Camp Maze level
===============
The fixed 20x20 wall map plus the starting layout of pellets ('.') and
trident power-ups ('o'). A Level never changes once built; the game state
keeps its own shrinking copies of the pellet and power-up sets.
"""

W, H = 20, 20

WALL, PELLET, POWER = "#", ".", "o"

# right, left, down, up: neighbour enumeration always uses this order
DIRECTIONS = ((1, 0), (-1, 0), (0, 1), (0, -1))

CAMP_ROWS = (
    "####################",
    "#........##........#",
    "#.####...##...####.#",
    "#o#..#........#..#o#",
    "#.####.######.####.#",
    "#..................#",
    "###.##.######.##.###",
    "#......#....#......#",
    "#.####.#.##.#.####.#",
    "#......#....#......#",
    "###.##.######.##.###",
    "#..................#",
    "#.####.######.####.#",
    "#o#..#........#..#o#",
    "#.####...##...####.#",
    "#........##........#",
    "#.######.##.######.#",
    "#..................#",
    "#........##........#",
    "####################",
)


class Level:
    __slots__ = ("rows", "width", "height")

    def __init__(self, rows):
        self.rows = tuple(rows)
        self.height = len(self.rows)
        self.width = len(self.rows[0]) if self.rows else 0

    @classmethod
    def from_rows(cls, rows) -> "Level":
        """Builds a level from text rows, rejecting empty or ragged layouts."""
        rows = tuple(rows)
        if not rows or not rows[0]:
            raise ValueError("a level needs at least one non-empty row")
        widths = {len(r) for r in rows}
        if len(widths) != 1:
            raise ValueError(f"level rows have different widths: {sorted(widths)}")
        return cls(rows)

    def is_wall(self, x: int, y: int) -> bool:
        if x < 0 or y < 0 or x >= self.width or y >= self.height:
            return True
        return self.rows[y][x] == WALL

    def open_directions(self, x: int, y: int) -> list:
        return [(dx, dy) for dx, dy in DIRECTIONS if not self.is_wall(x + dx, y + dy)]

    def is_intersection(self, x: int, y: int) -> bool:
        return len(self.open_directions(x, y)) >= 3

    def cells_of(self, kind: str) -> frozenset:
        return frozenset(
            (x, y)
            for y, row in enumerate(self.rows)
            for x, c in enumerate(row)
            if c == kind
        )

    def pellet_cells(self) -> frozenset:
        return self.cells_of(PELLET)

    def power_cells(self) -> frozenset:
        return self.cells_of(POWER)

    def __repr__(self):
        return f"Level({self.width}x{self.height})"


CAMP_LEVEL = Level.from_rows(CAMP_ROWS)
