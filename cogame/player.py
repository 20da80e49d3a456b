"""The player character, steered by keys and by viewer comments."""

from __future__ import annotations

import math
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Union

from .avatar import Avatar
from .comments import CommentSelect, Direction, Level, State
from .csvreader import CsvReader
from .input import Input, Key
from .objects import Canvas, ObjectManager
from .sprites import Object2D, Vector2
from .stage import Stage

IMAGE = "data/image/tamadot.png"
RETRY_SCENE = "RETRY"
RIGHT_LIMIT = 700
LEFT_LIMIT = 24
FALL_LIMIT = 710
FALL_STRESS = 10
RED = (255, 0, 0)

_RIGHT_PROBES = (Vector2(24, -31), Vector2(24, 31))
_LEFT_PROBES = (Vector2(-24, -31), Vector2(-24, 31))
_UP_PROBES = (Vector2(-24, -31), Vector2(24, -31))
_DOWN_PROBES = (Vector2(-24, 32), Vector2(24, 32))

_LEVEL_STRESS = {Level.KIND: 1, Level.NORMAL: 5, Level.SEVERE: 10}

_PARAM_FIELDS = {
    "Gravity": "gravity",
    "JumpHeight": "jump_height",
    "MoveSpeed": "move_speed",
    "DashSpeed": "dash_speed",
}


@dataclass
class PlayerParams:
    """Movement tuning for the player."""

    gravity: float = 0.0
    jump_height: float = 0.0
    move_speed: float = 0.0
    dash_speed: float = 0.0

    @property
    def jump_v0(self) -> float:
        """Upward start speed that reaches ``jump_height`` under ``gravity``."""
        square = 2.0 * self.gravity * self.jump_height
        return -math.sqrt(square) if square >= 0 else math.nan

    @classmethod
    def from_csv(cls, filename: Union[str, Path]) -> "PlayerParams":
        """Read ``name,value`` lines; unknown names are ignored."""
        csv = CsvReader(filename)
        values = {}
        for line in range(csv.lines):
            field = _PARAM_FIELDS.get(csv.get_string(line, 0))
            if field is not None:
                values[field] = csv.get_float(line, 1)
        return cls(**values)


class Player(Object2D):
    """Runs right on its own; comments make it walk, run, jump or stop."""

    def __init__(self, manager: ObjectManager, input: Input, scenes: Any,
                 position: Optional[Vector2] = None,
                 params: Optional[PlayerParams] = None):
        super().__init__(manager)
        self.input = input
        self.scenes = scenes
        self.params = params if params is not None else PlayerParams()
        self.jump_v0 = self.params.jump_v0

        self.image = IMAGE
        self.image_size = Vector2(64, 64)
        self.anim = 0
        self.anim_y = 3
        start = position if position is not None else Vector2(100, 300)
        self.position = Vector2(start.x, start.y)

        self.velocity_y = 0.0
        self.on_ground = False
        self.prev_pushed = False
        self.auto_moving_right = True
        self.direction_right = True
        self.comment_move_speed = 0.0
        self.air_move_speed = 0.0
        self.walk_by_comment_active = False
        self.walk_by_comment_dir = 0
        self.jump_move_active = False
        self.jump_move_dir = 0
        self.stop_after_landing = False

    def _move_right(self, stage: Optional[Stage], speed: float) -> None:
        self.position.x += speed
        if stage is not None:
            for probe in _RIGHT_PROBES:
                self.position.x -= stage.check_right(self.position + probe)

    def _move_left(self, stage: Optional[Stage], speed: float) -> None:
        self.position.x -= speed
        if stage is not None:
            for probe in _LEFT_PROBES:
                self.position.x += stage.check_left(self.position + probe)

    def _start_walk(self, direction: int, speed: float) -> None:
        self.comment_move_speed = speed
        self.walk_by_comment_active = True
        if direction == Direction.RIGHT:
            self.walk_by_comment_dir = 1
            self.direction_right = True
        elif direction == Direction.LEFT:
            self.walk_by_comment_dir = -1
            self.direction_right = False
        else:
            self.walk_by_comment_dir = 1 if self.direction_right else -1

    def _comment_jump(self, direction: int) -> None:
        idle = not self.walk_by_comment_active and not self.auto_moving_right
        if not self.on_ground:
            return
        if not self.prev_pushed:
            self.velocity_y = self.jump_v0
            if direction == Direction.NONE:
                horizontal = 0
            elif direction == Direction.RIGHT:
                horizontal = 1
            elif direction == Direction.LEFT:
                horizontal = -1
            else:
                horizontal = 1 if self.direction_right else -1
            if idle and horizontal:
                self.jump_move_active = True
                self.jump_move_dir = horizontal
                self.air_move_speed = self.params.move_speed
                self.direction_right = horizontal > 0
                self.stop_after_landing = True
        self.prev_pushed = True

    def _follow_comment(self, select: CommentSelect, avatar: Optional[Avatar]) -> None:
        direction = int(select.direction)
        state = int(select.state)
        if state == State.WALK:
            self._start_walk(direction, self.params.move_speed)
        elif state == State.STOP:
            self.walk_by_comment_active = False
            self.walk_by_comment_dir = 0
            self.auto_moving_right = False
        elif state == State.RUN:
            self._start_walk(direction, self.params.dash_speed)
        elif state == State.JUMP:
            self._comment_jump(direction)
        else:
            self.auto_moving_right = False

        stress = _LEVEL_STRESS.get(int(select.level))
        if stress is not None and avatar is not None:
            avatar.stress_set(stress)

    def _landed(self) -> None:
        if not self.jump_move_active:
            return
        self.jump_move_active = False
        self.jump_move_dir = 0
        if self.stop_after_landing:
            self.walk_by_comment_active = False
            self.walk_by_comment_dir = 0
            self.auto_moving_right = False
            self.stop_after_landing = False

    def _move_horizontally(self, stage: Optional[Stage]) -> None:
        if self.jump_move_active:
            speed = self.air_move_speed if self.air_move_speed > 0.0 else self.params.move_speed
            if self.jump_move_dir == 1:
                self._move_right(stage, speed)
            elif self.jump_move_dir == -1:
                self._move_left(stage, speed)

        if self.walk_by_comment_active:
            if self.walk_by_comment_dir == 1:
                self._move_right(stage, self.comment_move_speed)
            elif self.walk_by_comment_dir == -1:
                self._move_left(stage, self.comment_move_speed)
            return

        speed = self.params.move_speed
        if self.auto_moving_right:
            self._move_right(stage, speed)
        if not self.auto_moving_right and self.input.is_key(Key.D):
            self._move_right(stage, speed)
            self.auto_moving_right = True
        if self.input.is_key(Key.A):
            self._move_left(stage, speed)
            self.auto_moving_right = False

    def _move_vertically(self, stage: Optional[Stage]) -> None:
        if self.on_ground:
            if self.input.is_key(Key.SPACE):
                if not self.prev_pushed:
                    self.velocity_y = self.jump_v0
                self.prev_pushed = True
            else:
                self.prev_pushed = False

        self.position.y += self.velocity_y
        self.velocity_y += self.params.gravity
        self.on_ground = False
        if stage is None:
            return
        if self.velocity_y < 0.0:
            for probe in _UP_PROBES:
                push = stage.check_up(self.position + probe)
                if push > 0:
                    self.velocity_y = 0.0
                    self.position.y += push
        else:
            for probe in _DOWN_PROBES:
                push = stage.check_down(self.position + probe)
                if push > 0:
                    self.velocity_y = 0.0
                    self.on_ground = True
                    self.position.y -= push - 1
                    self._landed()

    def _scroll(self, stage: Optional[Stage]) -> None:
        if stage is None:
            return
        draw_x = self.position.x - stage.scroll_x
        if draw_x > RIGHT_LIMIT:
            stage.scroll_x = self.position.x - RIGHT_LIMIT
        elif draw_x < LEFT_LIMIT:
            self.position.x = LEFT_LIMIT + stage.scroll_x

    def update(self) -> None:
        stage = self.manager.find(Stage)
        avatar = self.manager.find(Avatar)

        if self.input.is_key_down(Key.RETURN):
            select = self.manager.find(CommentSelect)
            if select is not None:
                self._follow_comment(select, avatar)

        self._move_horizontally(stage)
        self._move_vertically(stage)
        self._scroll(stage)

        if self.position.y >= FALL_LIMIT:
            if avatar is not None:
                avatar.stress_set(FALL_STRESS)
            self.scenes.change_scene(RETRY_SCENE)

    def draw(self, canvas: Canvas) -> None:
        super().draw(canvas)
        stage = self.manager.find(Stage)
        scroll = stage.scroll_x if stage is not None else 0.0
        x = self.position.x - scroll
        y = self.position.y
        canvas.draw_box(int(x - 24), int(y - 32), int(x + 24), int(y + 32), RED, False)