from cogame.objects import ObjectManager, RecordingCanvas
from cogame.sprites import Object2D, Vector2
from cogame.stage import Stage


def test_vector_arithmetic():
    assert Vector2(1, 2) + Vector2(3, 5) == Vector2(4, 7)
    assert Vector2(4, 7) - Vector2(3, 5) == Vector2(1, 2)
    assert Vector2(3, 4).size() == 5.0


def test_no_image_draws_nothing():
    manager = ObjectManager()
    obj = Object2D(manager)
    canvas = RecordingCanvas()
    obj.draw(canvas)
    assert canvas.calls == []
    assert obj in manager


def _sprite(manager):
    obj = Object2D(manager)
    obj.image = "hero.png"
    obj.position = Vector2(100, 200)
    obj.image_size = Vector2(64, 64)
    obj.anim = 2
    obj.anim_y = 3
    return obj


def test_sprite_centred_on_position():
    manager = ObjectManager()
    obj = _sprite(manager)
    canvas = RecordingCanvas()
    obj.draw(canvas)
    (kind, name, x1, y1, x2, y2), = canvas.calls
    assert kind == "image"
    assert name.startswith("hero.png") and name.endswith("#2,3")
    assert x2 - x1 == 64 and y2 - y1 == 64
    assert (x1 + x2) / 2 == 100
    assert (y1 + y2) / 2 == 200


def test_stage_scroll_shifts_sprite():
    manager = ObjectManager()
    obj = _sprite(manager)
    stage = Stage(manager, [[0]])
    before = RecordingCanvas()
    obj.draw(before)
    stage.scroll_x = 50
    after = RecordingCanvas()
    obj.draw(after)
    assert before.calls[0][2] - after.calls[0][2] == 50
    assert before.calls[0][3] == after.calls[0][3]