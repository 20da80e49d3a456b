"""Keyboard state with edge detection between frames."""

from __future__ import annotations

from enum import IntEnum
from typing import Callable, Iterable, Optional

KEY_COUNT = 256


class Key(IntEnum):
    """Key codes used by the game (keyboard scan codes)."""

    ESCAPE = 0x01
    T = 0x14
    P = 0x19
    RETURN = 0x1C
    A = 0x1E
    D = 0x20
    G = 0x22
    SPACE = 0x39
    UP = 0xC8
    LEFT = 0xCB
    RIGHT = 0xCD
    DOWN = 0xD0


def _no_keys() -> Iterable[int]:
    return ()


class Input:
    """Keeps the current and previous key state.

    ``poll`` returns the codes of the keys held down right now.
    """

    def __init__(self, poll: Optional[Callable[[], Iterable[int]]] = None):
        self._poll = poll if poll is not None else _no_keys
        self._now: frozenset[int] = frozenset()
        self._prev: frozenset[int] = frozenset()

    def _read(self) -> frozenset[int]:
        return frozenset(int(k) for k in self._poll())

    def initialize(self) -> None:
        """Read the state once so the first frame sees no edges."""
        self._now = self._read()
        self._prev = self._now

    def update(self) -> None:
        """Move the current state to previous and read a new one."""
        self._prev = self._now
        self._now = self._read()

    @staticmethod
    def _check(key: int) -> int:
        if not 0 <= key < KEY_COUNT:
            raise ValueError(f"key code out of range: {key}")
        return int(key)

    def is_key(self, key: int) -> bool:
        """True while the key is held."""
        return self._check(key) in self._now

    def is_key_down(self, key: int) -> bool:
        """True only on the frame the key was pressed."""
        key = self._check(key)
        return key in self._now and key not in self._prev

    def is_key_up(self, key: int) -> bool:
        """True only on the frame the key was released."""
        key = self._check(key)
        return key not in self._now and key in self._prev