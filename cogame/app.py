"""Top-level application: owns the objects, input and scenes."""

from __future__ import annotations

from typing import Callable, Iterable, Optional

from .input import Input
from .objects import Canvas, ObjectManager
from .scenes import SceneFactory, SceneManager


class App:
    """Drives one frame at a time; scenes receive the app as their context.

    The first scene is created while the app is being built, so it must not
    reach for ``context.scenes`` in its constructor.
    """

    def __init__(self, factory: SceneFactory,
                 poll: Optional[Callable[[], Iterable[int]]] = None):
        self.objects = ObjectManager()
        self.input = Input(poll)
        self.input.initialize()
        self.scenes = SceneManager(factory, self.objects, self)

    def update(self) -> None:
        """Refresh the keyboard, then update the scene and the objects."""
        self.input.update()
        self.scenes.update()
        self.objects.update()

    def draw(self, canvas: Canvas) -> None:
        self.scenes.draw(canvas)
        self.objects.draw(canvas)

    def release(self) -> None:
        self.objects.release()
        self.scenes.release()

    def is_exit(self) -> bool:
        return self.scenes.exit_requested