"""Game objects and the manager that updates and draws them each frame."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional, Protocol, TypeVar

Color = tuple[int, int, int]

T = TypeVar("T", bound="GameObject")


class Canvas(Protocol):
    """Drawing surface handed to every ``draw`` call."""

    def draw_box(self, x1: float, y1: float, x2: float, y2: float,
                 color: Color, fill: bool) -> None: ...

    def draw_string(self, x: float, y: float, text: str, color: Color) -> None: ...

    def draw_image(self, name: str, x1: float, y1: float, x2: float, y2: float) -> None: ...


@dataclass
class RecordingCanvas:
    """Canvas that keeps every drawing call as a tuple in ``calls``."""

    calls: list[tuple] = field(default_factory=list)

    def draw_box(self, x1, y1, x2, y2, color, fill):
        self.calls.append(("box", x1, y1, x2, y2, color, fill))

    def draw_string(self, x, y, text, color):
        self.calls.append(("string", x, y, text, color))

    def draw_image(self, name, x1, y1, x2, y2):
        self.calls.append(("image", name, x1, y1, x2, y2))


class GameObject:
    """Base class of everything the object manager updates and draws.

    An object registers itself with its manager on construction.
    """

    def __init__(self, manager: "ObjectManager"):
        self.manager = manager
        self.tag = ""
        self._destroy = False
        self._dont_destroy = False
        self._draw_order = 0
        manager.push(self)

    def update(self) -> None:
        """Called once per frame."""

    def draw(self, canvas: Canvas) -> None:
        """Called once per frame after every update."""

    def destroy_me(self) -> None:
        """Ask to be removed right after this object's next update."""
        self._destroy = True

    @property
    def destroy_requested(self) -> bool:
        return self._destroy

    def stay_on_scene_change(self, sw: bool = True) -> None:
        """Keep (or stop keeping) this object alive across scene changes."""
        self._dont_destroy = sw

    @property
    def stays_on_scene_change(self) -> bool:
        return self._dont_destroy

    def set_draw_order(self, order: int) -> None:
        """Higher orders are drawn first, i.e. further back in 2D."""
        self._draw_order = order
        self.manager.sort_by_draw_order()

    @property
    def draw_order(self) -> int:
        return self._draw_order

    def is_tag(self, tag: str) -> bool:
        return self.tag == tag


class ObjectManager:
    """Holds every live game object and drives its update and draw."""

    def __init__(self):
        self._objects: list[GameObject] = []
        self._need_sort = False
        self._running: Optional[GameObject] = None

    def __len__(self) -> int:
        return len(self._objects)

    def __iter__(self) -> Iterator[GameObject]:
        return iter(list(self._objects))

    def __contains__(self, obj: object) -> bool:
        return any(o is obj for o in self._objects)

    def update(self) -> None:
        """Update every object once; objects added meanwhile wait a frame."""
        for obj in list(self._objects):
            if obj not in self:
                continue
            self._running = obj
            try:
                obj.update()
            finally:
                self._running = None
            if obj.destroy_requested:
                self.pop(obj)

    def draw(self, canvas: Canvas) -> None:
        if self._need_sort:
            self._objects.sort(key=lambda o: o.draw_order, reverse=True)
            self._need_sort = False
        for obj in list(self._objects):
            self._running = obj
            try:
                obj.draw(canvas)
            finally:
                self._running = None

    def release(self) -> None:
        """Drop every object."""
        self._objects.clear()
        self._need_sort = False

    def push(self, obj: GameObject) -> None:
        self._objects.append(obj)
        self._need_sort = True

    def pop(self, obj: GameObject) -> None:
        self._objects = [o for o in self._objects if o is not obj]

    def sort_by_draw_order(self) -> None:
        """Re-sort by draw order before the next draw."""
        self._need_sort = True

    def delete_all(self) -> None:
        """Remove every object not marked to stay on scene change."""
        if self._running is not None:
            raise RuntimeError("cannot delete all objects while one is running")
        self._objects = [o for o in self._objects if o.stays_on_scene_change]

    def find(self, cls: type[T], tag: Optional[str] = None) -> Optional[T]:
        """First object of ``cls`` (with ``tag``, if given), or None."""
        return next(iter(self.find_all(cls, tag)), None)

    def find_all(self, cls: type[T], tag: Optional[str] = None) -> list[T]:
        return [
            o for o in self._objects
            if isinstance(o, cls) and (tag is None or o.is_tag(tag))
        ]