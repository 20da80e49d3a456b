import random

import pytest

from cogame.comments import (
    BOX_HEIGHT,
    BOX_WIDTH,
    BOX_X,
    BOX_Y,
    CommentArea,
    CommentOutput,
    CommentSelect,
    Direction,
    Focus,
    Level,
    State,
    get_comment,
)
from cogame.input import Input, Key
from cogame.objects import ObjectManager, RecordingCanvas


@pytest.fixture
def rig():
    held = set()
    inp = Input(lambda: held)
    manager = ObjectManager()
    sel = CommentSelect(manager, inp, random.Random(1))
    return held, inp, manager, sel


def press(rig, key):
    held, inp, _, sel = rig
    held.clear()
    held.add(key)
    inp.update()
    sel.update()
    held.clear()
    inp.update()


def test_comment_parts():
    text = get_comment(Direction.RIGHT, State.RUN, Level.KIND, random.Random(3))
    head, body = text.split(" ")
    assert head in ("右へ", "右方向に")
    assert body in ("走って", "急いで")


def test_single_choice_body():
    text = get_comment(Direction.NONE, State.JUMP, Level.SEVERE, random.Random(0))
    assert text.endswith(" ジャンプしろ!!!")


def test_same_seed_same_comment():
    a = get_comment(Direction.LEFT, State.WALK, Level.NORMAL, random.Random(9))
    b = get_comment(Direction.LEFT, State.WALK, Level.NORMAL, random.Random(9))
    assert a == b


@pytest.mark.parametrize("direction", list(Direction))
@pytest.mark.parametrize("state", list(State))
@pytest.mark.parametrize("level", list(Level))
def test_every_combination_has_two_parts(direction, state, level):
    text = get_comment(direction, state, level, random.Random(0))
    assert len(text.split(" ")) == 2


def test_unknown_values():
    assert get_comment(7, 9, 0, random.Random(0)) == "不明な方向 不明な状態"


def test_focus_cycles(rig):
    sel = rig[3]
    press(rig, Key.RIGHT)
    assert sel.focus is Focus.STATE
    press(rig, Key.LEFT)
    press(rig, Key.LEFT)
    assert sel.focus is Focus.LEVEL


def test_direction_cycles_up(rig):
    sel = rig[3]
    seen = []
    for _ in range(3):
        press(rig, Key.UP)
        seen.append(sel.direction)
    assert seen == [Direction.RIGHT, Direction.LEFT, Direction.NONE]


def test_state_down_and_level_up(rig):
    sel = rig[3]
    press(rig, Key.RIGHT)
    press(rig, Key.DOWN)
    assert sel.state is State.JUMP
    press(rig, Key.RIGHT)
    press(rig, Key.UP)
    assert sel.level is Level.NORMAL
    assert sel.direction is Direction.NONE


def test_held_key_counts_once(rig):
    held, inp, _, sel = rig
    held.add(Key.UP)
    inp.update()
    sel.update()
    inp.update()
    sel.update()
    assert sel.direction is Direction.RIGHT


def test_return_with_stop_clears_direction(rig):
    sel = rig[3]
    press(rig, Key.UP)
    assert sel.direction is Direction.RIGHT
    press(rig, Key.RETURN)
    assert sel.direction is Direction.NONE
    head, body = sel.output.text.split(" ")
    assert head in ("そのまま", "今のまま")
    assert body in ("止まってください", "いったん止まって")
    assert sel.output.x == 1358


def test_output_draws_only_with_text():
    manager = ObjectManager()
    out = CommentOutput(manager)
    canvas = RecordingCanvas()
    out.draw(canvas)
    assert canvas.calls == []
    out.set_comment_text("右へ 歩け")
    out.draw(canvas)
    assert canvas.calls == [("string", 1360, 100, "右へ 歩け", (0, 0, 0))]


def test_select_draw(rig):
    sel = rig[3]
    canvas = RecordingCanvas()
    sel.draw(canvas)
    strings = [c[3] for c in canvas.calls if c[0] == "string"]
    assert strings == ["STOP", "KIND"]
    red = [c for c in canvas.calls if c[0] == "box" and c[5] == (255, 0, 0)]
    assert len(red) == 1
    assert red[0][1] == BOX_X


def test_area_builds_children_and_draws():
    manager = ObjectManager()
    area = CommentArea(manager, Input(), random.Random(0))
    assert len(manager.find_all(CommentSelect)) == 1
    assert len(manager.find_all(CommentOutput)) == 2
    canvas = RecordingCanvas()
    area.draw(canvas)
    assert canvas.calls[0] == ("box", BOX_X, BOX_Y, BOX_X + BOX_WIDTH,
                               BOX_Y + BOX_HEIGHT, (200, 200, 200), True)
    assert len(canvas.calls) == 2