import pytest

from cogame.input import Input, Key


def make(pressed):
    return Input(lambda: pressed)


def test_no_edge_on_first_frame_after_initialize():
    pressed = {Key.SPACE}
    inp = make(pressed)
    inp.initialize()
    assert inp.is_key(Key.SPACE)
    assert not inp.is_key_down(Key.SPACE)


def test_key_down_only_on_press_frame():
    pressed = set()
    inp = make(pressed)
    inp.initialize()
    pressed.add(Key.RETURN)
    inp.update()
    assert inp.is_key_down(Key.RETURN)
    inp.update()
    assert inp.is_key(Key.RETURN)
    assert not inp.is_key_down(Key.RETURN)


def test_key_up_only_on_release_frame():
    pressed = {Key.LEFT}
    inp = make(pressed)
    inp.initialize()
    pressed.clear()
    inp.update()
    assert inp.is_key_up(Key.LEFT)
    assert not inp.is_key(Key.LEFT)
    inp.update()
    assert not inp.is_key_up(Key.LEFT)


def test_default_poll_has_no_keys():
    inp = Input()
    inp.initialize()
    inp.update()
    assert not inp.is_key(Key.ESCAPE)


def test_out_of_range_key_raises():
    inp = Input()
    with pytest.raises(ValueError):
        inp.is_key(256)
    with pytest.raises(ValueError):
        inp.is_key_down(-1)


def test_return_key_code_matches_raw_code():
    pressed = set()
    inp = make(pressed)
    inp.initialize()
    pressed.add(0x1C)
    inp.update()
    assert inp.is_key(Key.RETURN)
    assert inp.is_key_down(Key.RETURN)
    assert not inp.is_key(Key.ESCAPE)