"""
Player and monster tokens.

Entities hold position and velocity only. Whether a move is legal is decided
by the caller through the Level, so the same "attempt, commit if free" rule
applies to everybody (see try_move).
"""

STOP = (0, 0)


class Entity:
    def __init__(self, x: int, y: int, dx: int = 0, dy: int = 0):
        self.x, self.y = x, y
        self.dx, self.dy = dx, dy

    @property
    def position(self) -> tuple:
        return (self.x, self.y)

    @property
    def velocity(self) -> tuple:
        return (self.dx, self.dy)

    def set_position(self, x: int, y: int):
        self.x, self.y = x, y

    def set_velocity(self, dx: int, dy: int):
        self.dx, self.dy = dx, dy

    def is_moving(self) -> bool:
        return self.dx != 0 or self.dy != 0


class Player(Entity):
    def __init__(self, x: int, y: int):
        super().__init__(x, y)
        self.next_dx, self.next_dy = STOP

    @property
    def queued(self) -> tuple:
        return (self.next_dx, self.next_dy)

    def queue_velocity(self, dx: int, dy: int):
        self.next_dx, self.next_dy = dx, dy

    def __repr__(self):
        return f"Player(pos={self.position}, vel={self.velocity}, queued={self.queued})"


class Monster(Entity):
    def __init__(self, x: int, y: int, dx: int, dy: int, color: str):
        super().__init__(x, y, dx, dy)
        self.color = color
        self.scared = 0

    @property
    def is_scared(self) -> bool:
        return self.scared > 0

    def __repr__(self):
        return f"Monster({self.color}, pos={self.position}, vel={self.velocity}, scared={self.scared})"


def try_move(entity: Entity, level) -> bool:
    """Moves the entity one cell along its velocity unless a wall is in the way."""
    nx, ny = entity.x + entity.dx, entity.y + entity.dy
    if level.is_wall(nx, ny):
        return False
    entity.set_position(nx, ny)
    return True
