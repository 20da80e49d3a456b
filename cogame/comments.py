"""Choosing, wording and showing the viewer comments that steer the player."""

from __future__ import annotations

import random
from enum import IntEnum
from typing import Optional

from .input import Input, Key
from .objects import Canvas, GameObject, ObjectManager

AREA_WIDTH = 1920
AREA_HEIGHT = 122
AREA_X = 0
AREA_Y = 958
BOX_WIDTH = 1220
BOX_HEIGHT = 48
BOX_X = 20
BOX_Y = 995
SEND_BUTTON_WIDTH = 80
SEND_BUTTON_HEIGHT = 48
SEND_BUTTON_X = BOX_X + BOX_WIDTH
SEND_BUTTON_Y = BOX_Y

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
BLUE = (0, 0, 255)
RED = (255, 0, 0)


class Direction(IntEnum):
    NONE = 0
    RIGHT = 1
    LEFT = 2


class State(IntEnum):
    STOP = 0
    WALK = 1
    RUN = 2
    JUMP = 3


class Level(IntEnum):
    KIND = 0
    NORMAL = 1
    SEVERE = 2


class Focus(IntEnum):
    DIRECTION = 0
    STATE = 1
    LEVEL = 2


_HEADS = {
    Direction.NONE: ("そのまま", "今のまま"),
    Direction.RIGHT: ("右へ", "右方向に"),
    Direction.LEFT: ("左へ", "左方向に"),
}

_BODIES = {
    (State.STOP, Level.KIND): ("止まってください", "いったん止まって"),
    (State.STOP, Level.NORMAL): ("止まって", "そこで止まれ"),
    (State.STOP, Level.SEVERE): ("止まれ!!!", "止まれ、バカ"),
    (State.WALK, Level.KIND): ("歩いて", "少しずつ進んで"),
    (State.WALK, Level.NORMAL): ("歩け", "進め"),
    (State.WALK, Level.SEVERE): ("歩け!!!", "歩け、バカ"),
    (State.RUN, Level.KIND): ("走って", "急いで"),
    (State.RUN, Level.NORMAL): ("走れ", "ダッシュ"),
    (State.RUN, Level.SEVERE): ("全力で走れ", "走れ!!!"),
    (State.JUMP, Level.KIND): ("ジャンプして", "飛び越えて"),
    (State.JUMP, Level.NORMAL): ("ジャンプしろ", "飛び越えろ"),
    (State.JUMP, Level.SEVERE): ("ジャンプしろ!!!",),
}

_STATE_LABELS = {
    State.STOP: "STOP",
    State.WALK: "WARK",
    State.RUN: "RUN",
    State.JUMP: "JUMP",
}


def _as(enum_type, value):
    try:
        return enum_type(value)
    except ValueError:
        return None


def get_comment(direction, state, level, rng=None) -> str:
    """A random comment wording for the direction, state and level."""
    chooser = rng if rng is not None else random
    heads = _HEADS.get(_as(Direction, direction))
    head = chooser.choice(heads) if heads else "不明な方向"

    state_value = _as(State, state)
    if state_value is None:
        body = "不明な状態"
    else:
        bodies = _BODIES.get((state_value, _as(Level, level)))
        body = chooser.choice(bodies) if bodies else ""

    return " ".join(part for part in (head, body) if part) or "コメント未定義"


def _step(value, delta):
    members = list(type(value))
    return members[(members.index(value) + delta) % len(members)]


class CommentOutput(GameObject):
    """A comment that scrolls leftwards across the stream view."""

    START_X = 1360

    def __init__(self, manager: ObjectManager):
        super().__init__(manager)
        self.text = ""
        self.x = self.START_X
        self.y = 100
        self.vx = 2
        self.vy = 0

    def set_comment_text(self, comment: str) -> None:
        """Show ``comment`` from the right edge again."""
        self.text = comment
        self.x = self.START_X

    def update(self) -> None:
        self.x -= self.vx
        self.y += self.vy

    def draw(self, canvas: Canvas) -> None:
        if self.text:
            canvas.draw_string(self.x, self.y, self.text, BLACK)


class CommentSelect(GameObject):
    """Three-field selector for direction, state and level, sent with Return.

    The ``input`` is expected to be refreshed once per frame by its owner.
    """

    def __init__(self, manager: ObjectManager, input: Input,
                 rng: Optional[random.Random] = None):
        super().__init__(manager)
        self.input = input
        self.rng = rng
        self.focus = Focus.DIRECTION
        self.direction = Direction.NONE
        self.state = State.STOP
        self.level = Level.KIND
        self.output = CommentOutput(manager)

    def _pressed(self, key: Key) -> bool:
        return self.input.is_key_down(key)

    def update(self) -> None:
        if self._pressed(Key.RIGHT):
            self.focus = _step(self.focus, 1)
        if self._pressed(Key.LEFT):
            self.focus = _step(self.focus, -1)

        delta = (1 if self._pressed(Key.UP) else 0) - (1 if self._pressed(Key.DOWN) else 0)
        if self._pressed(Key.UP) or self._pressed(Key.DOWN):
            for d in ([1] if self._pressed(Key.UP) else []) + ([-1] if self._pressed(Key.DOWN) else []):
                if self.focus is Focus.DIRECTION:
                    self.direction = _step(self.direction, d)
                elif self.focus is Focus.STATE:
                    self.state = _step(self.state, d)
                else:
                    self.level = _step(self.level, d)
        del delta

        if self._pressed(Key.RETURN):
            if self.state is State.STOP:
                self.direction = Direction.NONE
            self.output.set_comment_text(
                get_comment(self.direction, self.state, self.level, self.rng))

        self.output.update()

    def draw(self, canvas: Canvas) -> None:
        third = BOX_WIDTH // 3
        bottom = BOX_Y + BOX_HEIGHT
        for i in range(1, 4):
            canvas.draw_box(BOX_X, BOX_Y, BOX_X + third * i, bottom, BLUE, False)

        left = BOX_X + third * int(self.focus)
        right = BOX_X + BOX_WIDTH if self.focus is Focus.LEVEL else left + third
        canvas.draw_box(left, BOX_Y, right, bottom, RED, False)

        text_y = BOX_Y + 20
        if self.direction is not Direction.NONE:
            canvas.draw_string(BOX_X + 20, text_y, self.direction.name, WHITE)
        canvas.draw_string(BOX_X + third + 20, text_y, _STATE_LABELS[self.state], WHITE)
        canvas.draw_string(BOX_X + third * 2 + 20, text_y, self.level.name, WHITE)

        self.output.draw(canvas)


class CommentArea(GameObject):
    """The comment input strip with its selector and send button."""

    def __init__(self, manager: ObjectManager, input: Input,
                 rng: Optional[random.Random] = None):
        super().__init__(manager)
        self.select = CommentSelect(manager, input, rng)
        self.output = CommentOutput(manager)

    def draw(self, canvas: Canvas) -> None:
        canvas.draw_box(BOX_X, BOX_Y, BOX_X + BOX_WIDTH, BOX_Y + BOX_HEIGHT,
                        (200, 200, 200), True)
        canvas.draw_box(SEND_BUTTON_X, SEND_BUTTON_Y,
                        SEND_BUTTON_X + SEND_BUTTON_WIDTH,
                        SEND_BUTTON_Y + SEND_BUTTON_HEIGHT,
                        (100, 100, 255), True)