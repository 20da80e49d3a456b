"""The tile map the player runs over, with collision queries."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Union

from .csvreader import CsvReader
from .objects import Canvas, ObjectManager
from .sprites import END_X, END_Y, START_X, START_Y, Object2D, Vector2, _frame_name

BACKGROUND_IMAGE = "data/image/Sora2.jpg"
TILE_IMAGE = "data/image/parts.png"
SPAWN = 9

_OPEN_TILES = frozenset({0, 8, SPAWN})
_TILE_FRAMES = {1: (3, 1), 2: (0, 1), 3: (3, 0)}


class Stage(Object2D):
    """A grid of tile codes; 0, 8 and 9 are open, everything else is wall."""

    def __init__(self, manager: ObjectManager, grid: Iterable[Iterable[int]]):
        super().__init__(manager)
        self.map: list[list[int]] = [[int(c) for c in row] for row in grid]
        self.background = BACKGROUND_IMAGE
        self.image = TILE_IMAGE
        self.image_size = Vector2(64, 64)
        self.anim = 3
        self.anim_y = 1
        self.scroll_x = 0.0

    @classmethod
    def from_csv(cls, manager: ObjectManager,
                 filename: Union[str, Path]) -> "Stage":
        csv = CsvReader(filename)
        grid = [
            [csv.get_int(line, column) for column in range(csv.columns(line))]
            for line in range(csv.lines)
        ]
        return cls(manager, grid)

    def spawn_points(self) -> list[Vector2]:
        """Centres of the cells that mark where a player starts."""
        w, h = self.image_size.x, self.image_size.y
        return [
            Vector2(int(x * w + w / 2.0), int(y * h + h / 2.0))
            for y, row in enumerate(self.map)
            for x, c in enumerate(row)
            if c == SPAWN
        ]

    def draw(self, canvas: Canvas) -> None:
        canvas.draw_image(self.background, START_X, START_Y, END_X, END_Y)
        w = int(self.image_size.x)
        h = int(self.image_size.y)
        for y, row in enumerate(self.map):
            for x, c in enumerate(row):
                draw_x = int(x * w - self.scroll_x + START_X)
                draw_y = y * h + START_Y
                if draw_x < START_X - w or draw_x > END_X:
                    continue
                if draw_y < START_Y - h or draw_y > END_Y - h:
                    continue
                frame = _TILE_FRAMES.get(c)
                if frame is not None:
                    canvas.draw_image(_frame_name(self.image, *frame),
                                      draw_x, draw_y, draw_x + w, draw_y + h)

    def _cell(self, pos: Vector2) -> tuple[int, int]:
        return int(pos.x / self.image_size.x), int(pos.y / self.image_size.y)

    def is_wall(self, pos: Vector2) -> bool:
        x, y = self._cell(pos)
        if not 0 <= y < len(self.map):
            return False
        if not 0 <= x < len(self.map[y]):
            return False
        return self.map[y][x] not in _OPEN_TILES

    def _inside_x(self, pos: Vector2) -> int:
        x = int(pos.x / self.image_size.x)
        return int(pos.x - x * self.image_size.x)

    def _inside_y(self, pos: Vector2) -> int:
        y = int(pos.y / self.image_size.y)
        return int(pos.y - y * self.image_size.y)

    def check_right(self, pos: Vector2) -> int:
        """How far to push left to leave a wall hit at ``pos``; 0 if none."""
        if not self.is_wall(pos):
            return 0
        return self._inside_x(pos) + 1

    def check_left(self, pos: Vector2) -> int:
        """How far to push right to leave a wall hit at ``pos``; 0 if none."""
        if not self.is_wall(pos):
            return 0
        return int(self.image_size.x) - self._inside_x(pos)

    def check_down(self, pos: Vector2) -> int:
        """How far to push up to leave a wall hit at ``pos``; 0 if none."""
        if not self.is_wall(pos):
            return 0
        return self._inside_y(pos) + 1

    def check_up(self, pos: Vector2) -> int:
        """How far to push down to leave a wall hit at ``pos``; 0 if none."""
        if not self.is_wall(pos):
            return 0
        return int(self.image_size.y) - self._inside_y(pos)