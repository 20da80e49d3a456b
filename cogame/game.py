"""The game's scenes, the stream-view background and the scene factory."""

from __future__ import annotations

import unicodedata
from typing import Any

from .avatar import Avatar
from .comments import CommentArea
from .input import Key
from .objects import Canvas, ObjectManager
from .scenes import SceneBase, SceneFactory
from .sprites import HEIGHT, WIDTH, Object2D

WHITE = (255, 255, 255)
TITLE_FONT_SIZE = 64
GAME_OVER_TEXT = "配信が終了しました"


def _text_width(text: str, size: int) -> int:
    """Width of ``text`` with full-width glyphs ``size`` wide, others half that."""
    return sum(size if unicodedata.east_asian_width(ch) in "WF" else size // 2
               for ch in text)


class BootScene(SceneBase):
    """Goes straight on to the title."""

    def update(self) -> None:
        self.context.scenes.change_scene("TITLE")


class TitleScene(SceneBase):
    def update(self) -> None:
        keys = self.context.input
        if keys.is_key(Key.P):
            self.context.scenes.change_scene("PLAY")
        if keys.is_key(Key.ESCAPE):
            self.context.scenes.exit()

    def draw(self, canvas: Canvas) -> None:
        canvas.draw_string(0, 0, "TITLE SCENE", WHITE)
        canvas.draw_string(100, 400, "Push [P]Key To Play", WHITE)


class ClearScene(SceneBase):
    def update(self) -> None:
        keys = self.context.input
        if keys.is_key(Key.T):
            self.context.scenes.change_scene("TITLE")
        if keys.is_key(Key.ESCAPE):
            self.context.scenes.exit()

    def draw(self, canvas: Canvas) -> None:
        canvas.draw_string(0, 0, "CLEAR SCENE", WHITE)
        canvas.draw_string(100, 400, "Push [T]Key To Title", WHITE)


class GameOverScene(SceneBase):
    def update(self) -> None:
        keys = self.context.input
        if keys.is_key(Key.T):
            self.context.scenes.change_scene("TITLE")
        if keys.is_key(Key.ESCAPE):
            self.context.scenes.exit()

    def draw(self, canvas: Canvas) -> None:
        width = _text_width(GAME_OVER_TEXT, TITLE_FONT_SIZE)
        canvas.draw_string((WIDTH - width) // 2, HEIGHT // 3, GAME_OVER_TEXT, WHITE)
        canvas.draw_string(0, 0, "GAMEOVER SCENE", WHITE)
        canvas.draw_string(100, 400, "Push [T]Key To Title", WHITE)


class BackGround(Object2D):
    """The stream page around the game view, with the avatar and comment strip."""

    WHITE_IMAGE = "data/image/white.jpg"
    LOGO_IMAGE = "data/image/Rogo1.png"
    TAB_IMAGE = "data/image/Tab.png"
    CHAT_IMAGE = "data/image/chat.jpg"
    ICON_IMAGE = "data/image/Icon2.png"

    def __init__(self, manager: ObjectManager, context: Any):
        super().__init__(manager)
        self.avatar = Avatar(manager, context.scenes)
        self.comments = CommentArea(manager, context.input)

    def draw(self, canvas: Canvas) -> None:
        canvas.draw_image(self.CHAT_IMAGE, 1360, 72, 1920, 765)
        canvas.draw_image(self.WHITE_IMAGE, 0, 0, 1920, 72)
        canvas.draw_image(self.LOGO_IMAGE, 100, 0, 280, 72)
        canvas.draw_image(self.TAB_IMAGE, 0, 0, 72, 72)
        canvas.draw_image(self.ICON_IMAGE, 1720, 0, 1820, 72)
        canvas.draw_image(self.WHITE_IMAGE, 0, 765, 1920, 1080)


class RetryScene(SceneBase):
    """Offers to play again or give up, over the stream background."""

    def __init__(self, context: Any):
        super().__init__(context)
        self.background = BackGround(context.objects, context)

    def update(self) -> None:
        keys = self.context.input
        if keys.is_key(Key.P):
            self.context.scenes.change_scene("PLAY")
        if keys.is_key(Key.G):
            self.context.scenes.change_scene("GAMEOVER")
        if keys.is_key(Key.ESCAPE):
            self.context.scenes.exit()

    def draw(self, canvas: Canvas) -> None:
        canvas.draw_string(0, 0, "RETRY SCENE", WHITE)
        canvas.draw_string(100, 400, "Push [P]Key To Play", WHITE)
        canvas.draw_string(100, 500, "Push [G]Key To GameOver", WHITE)


def make_factory() -> SceneFactory:
    """A factory starting at the boot scene, with every scene defined here.

    The "PLAY" scene is registered by the caller.
    """
    factory = SceneFactory(BootScene)
    factory.register("TITLE", TitleScene)
    factory.register("GAMEOVER", GameOverScene)
    factory.register("CLEAR", ClearScene)
    factory.register("RETRY", RetryScene)
    return factory