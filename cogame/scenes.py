"""Scenes and the manager that switches between them."""

from __future__ import annotations

from typing import Any, Callable, Optional

from .objects import Canvas, ObjectManager


class UnknownSceneError(LookupError):
    """Raised when a scene name has no registered class."""

    def __init__(self, name: str):
        super().__init__(f"no scene named {name!r}")
        self.name = name


class SceneBase:
    """Base class of a scene; ``context`` is whatever the manager was given."""

    def __init__(self, context: Any):
        self.context = context

    def update(self) -> None:
        """Called once per frame before the objects update."""

    def draw(self, canvas: Canvas) -> None:
        """Called once per frame before the objects draw."""

    def keep_previous_scene(self) -> bool:
        return False


SceneClass = Callable[[Any], SceneBase]


class SceneFactory:
    """Creates scenes by name; ``first`` is the scene run at start-up."""

    def __init__(self, first: SceneClass):
        self._first = first
        self._scenes: dict[str, SceneClass] = {}

    def register(self, name: str, scene_class: SceneClass) -> SceneClass:
        self._scenes[name] = scene_class
        return scene_class

    def create_first(self, context: Any) -> SceneBase:
        return self._first(context)

    def create(self, name: str, context: Any) -> SceneBase:
        try:
            scene_class = self._scenes[name]
        except KeyError:
            raise UnknownSceneError(name) from None
        return scene_class(context)


class SceneManager:
    """Runs the current scene; a change takes effect on the next update."""

    def __init__(self, factory: SceneFactory, objects: ObjectManager,
                 context: Any = None):
        self._factory = factory
        self._objects = objects
        self._context = context
        self.current_name = ""
        self._next_name = ""
        self._exit = False
        self.current: Optional[SceneBase] = factory.create_first(context)

    def update(self) -> None:
        if self._next_name != self.current_name:
            if self.current is not None:
                self._objects.delete_all()
                self.current = None
            self.current = self._factory.create(self._next_name, self._context)
            self.current_name = self._next_name
        if self.current is not None:
            self.current.update()

    def draw(self, canvas: Canvas) -> None:
        if self.current is not None:
            self.current.draw(canvas)

    def release(self) -> None:
        self.current = None

    def change_scene(self, name: str) -> None:
        """Switch to ``name`` at the start of the next update."""
        self._next_name = name

    def exit(self) -> None:
        self._exit = True

    @property
    def exit_requested(self) -> bool:
        return self._exit