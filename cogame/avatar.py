"""The streamer's avatar, whose face shows how stressed the comments made it."""

from __future__ import annotations

from typing import Any, Callable, Optional

from .objects import Canvas, ObjectManager
from .sprites import MAX_STRESS, Object2D, _frame_name

IMAGE = "data/image/AvaterChip.png"
VOICES = (
    "data/voice/AngryLevel1.mp3",
    "data/voice/AngryLevel2.mp3",
    "data/voice/AngryLevel3.mp3",
    "data/voice/AngryLevel4.mp3",
)
STRESS_PER_FACE = 10
GAME_OVER_SCENE = "GAMEOVER"

_DRAW_RECT = (1040, 500, 1380, 765)


class Avatar(Object2D):
    """Shows one of several faces for the current stress and voices each change.

    The stress is shared by every avatar, so it survives scene changes.
    ``on_voice`` is called with the path of the voice clip to play.
    """

    _stress = 0

    def __init__(self, manager: ObjectManager, scenes: Any,
                 on_voice: Optional[Callable[[str], None]] = None):
        super().__init__(manager)
        self.scenes = scenes
        self.on_voice = on_voice
        self.image = IMAGE
        self.anim_x = self.stress // STRESS_PER_FACE
        self._prev_anim = self.anim_x

    @property
    def stress(self) -> int:
        return Avatar._stress

    @stress.setter
    def stress(self, value: int) -> None:
        Avatar._stress = int(value)

    def update(self) -> None:
        self.anim_x = self.stress // STRESS_PER_FACE
        if (self.anim_x != self._prev_anim
                and 1 <= self.anim_x <= len(VOICES)
                and self.on_voice is not None):
            self.on_voice(VOICES[self.anim_x - 1])
        if self.stress >= MAX_STRESS:
            self.stress = 0
            self.scenes.change_scene(GAME_OVER_SCENE)
        self._prev_anim = self.anim_x

    def draw(self, canvas: Canvas) -> None:
        canvas.draw_image(_frame_name(self.image, self.anim_x, 0), *_DRAW_RECT)

    def stress_set(self, s: int) -> None:
        """Add ``s`` to the stress."""
        self.stress += s