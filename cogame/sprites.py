"""Screen layout, 2D vectors and sprite objects."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from .objects import Canvas, GameObject, ObjectManager

WIDTH = 1920
HEIGHT = 1080
WIDTH_SMALL = 1360
HEIGHT_SMALL = 765
WINDOW_NAME = "project"
WINDOW_EXTEND = 1.0

BOX_WIDTH = WIDTH_SMALL
BOX_HEIGHT = HEIGHT_SMALL
START_X = 0
START_Y = 0
END_X = START_X + BOX_WIDTH
END_Y = START_Y + BOX_HEIGHT
MAX_STRESS = 40


@dataclass
class Vector2:
    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x - other.x, self.y - other.y)

    def size(self) -> float:
        return math.hypot(self.x, self.y)


def _frame_name(image: str, column: int, row: int) -> str:
    """Name of one cell of a sprite sheet, as handed to the canvas."""
    return f"{image}#{column},{row}"


class Object2D(GameObject):
    """A sprite drawn centred on ``position``, shifted by the stage scroll."""

    def __init__(self, manager: ObjectManager):
        super().__init__(manager)
        self.image: Optional[str] = None
        self.anim = 0
        self.anim_y = 0
        self.position = Vector2(0, 0)
        self.image_size = Vector2(1, 1)

    def draw(self, canvas: Canvas) -> None:
        if not self.image:
            return
        from .stage import Stage

        x = int(self.position.x - self.image_size.x / 2.0)
        y = int(self.position.y - self.image_size.y / 2.0)
        stage = self.manager.find(Stage)
        if stage is not None:
            x = int(x - stage.scroll_x)
        w = int(self.image_size.x)
        h = int(self.image_size.y)
        canvas.draw_image(_frame_name(self.image, self.anim, self.anim_y),
                          x, y, x + w, y + h)