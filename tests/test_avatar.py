import pytest

from cogame.avatar import IMAGE, VOICES, Avatar
from cogame.objects import ObjectManager, RecordingCanvas


class FakeScenes:
    def __init__(self):
        self.changes = []

    def change_scene(self, name):
        self.changes.append(name)


@pytest.fixture
def rig():
    manager = ObjectManager()
    scenes = FakeScenes()
    voices = []
    Avatar(manager, scenes).stress = 0
    avatar = Avatar(manager, scenes, voices.append)
    return avatar, scenes, voices, manager


def test_stress_is_shared_between_avatars(rig):
    avatar, scenes, _, manager = rig
    avatar.stress_set(5)
    other = Avatar(manager, scenes)
    assert other.stress == 5
    other.stress_set(1)
    assert avatar.stress == 6


def test_new_face_plays_voice(rig):
    avatar, scenes, voices, _ = rig
    avatar.stress_set(10)
    avatar.update()
    assert voices == ["data/voice/AngryLevel1.mp3"]
    assert scenes.changes == []


def test_same_face_is_silent(rig):
    avatar, _, voices, _ = rig
    avatar.stress_set(3)
    avatar.update()
    avatar.update()
    assert voices == []
    assert avatar.anim_x == 0


def test_below_max_keeps_scene(rig):
    avatar, scenes, voices, _ = rig
    avatar.stress_set(39)
    avatar.update()
    assert scenes.changes == []
    assert voices == [VOICES[2]]
    assert avatar.stress == 39


def test_max_stress_resets_and_ends_stream(rig):
    avatar, scenes, voices, _ = rig
    avatar.stress_set(40)
    avatar.update()
    assert scenes.changes == ["GAMEOVER"]
    assert avatar.stress == 0
    assert voices == ["data/voice/AngryLevel4.mp3"]


def test_initial_face_follows_existing_stress(rig):
    avatar, scenes, voices, manager = rig
    avatar.stress = 20
    fresh = Avatar(manager, scenes, voices.append)
    fresh.update()
    assert fresh.anim_x == 2
    assert voices == []


def test_draw_uses_fixed_rectangle(rig):
    avatar, _, _, _ = rig
    avatar.stress_set(20)
    avatar.update()
    canvas = RecordingCanvas()
    avatar.draw(canvas)
    assert len(canvas.calls) == 1
    kind, name, *rect = canvas.calls[0]
    assert kind == "image"
    assert name.startswith(IMAGE)
    assert rect == [1040, 500, 1380, 765]