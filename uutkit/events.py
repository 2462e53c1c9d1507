"""Input event listeners and a source that dispatches window messages to them."""

from __future__ import annotations

import enum
from typing import Any, List, Optional, Tuple

__all__ = ["EventListener", "Message", "EventSource", "WHEEL_DELTA"]

WHEEL_DELTA = 120
_KEY_LIMIT = 256
_CHAR_LIMIT = 0x10000


class EventListener:
    """Receives input events.

    Subclasses override the handlers they care about. The default handlers
    only remember the most recent event as ``last_event``.
    """

    last_event: Optional[Tuple[str, Any]] = None

    def _record(self, name: str, argument: Any) -> None:
        self.last_event = (name, argument)

    def on_key_down(self, code: int) -> None:
        self._record("key_down", code)

    def on_key_up(self, code: int) -> None:
        self._record("key_up", code)

    def on_char(self, char: int) -> None:
        self._record("char", char)

    def on_mouse_down(self, button: int) -> None:
        self._record("mouse_down", button)

    def on_mouse_up(self, button: int) -> None:
        self._record("mouse_up", button)

    def on_mouse_move(self, pos: Tuple[int, int]) -> None:
        self._record("mouse_move", pos)

    def on_mouse_wheel(self, delta: float) -> None:
        self._record("mouse_wheel", delta)


class Message(enum.Enum):
    """Window messages understood by :class:`EventSource`."""

    DESTROY = enum.auto()
    KEY_DOWN = enum.auto()
    KEY_UP = enum.auto()
    LBUTTON_DOWN = enum.auto()
    LBUTTON_UP = enum.auto()
    RBUTTON_DOWN = enum.auto()
    RBUTTON_UP = enum.auto()
    MBUTTON_DOWN = enum.auto()
    MBUTTON_UP = enum.auto()
    MOUSE_MOVE = enum.auto()
    MOUSE_WHEEL = enum.auto()
    CHAR = enum.auto()


_BUTTONS = {
    Message.LBUTTON_DOWN: ("on_mouse_down", 0),
    Message.LBUTTON_UP: ("on_mouse_up", 0),
    Message.RBUTTON_DOWN: ("on_mouse_down", 1),
    Message.RBUTTON_UP: ("on_mouse_up", 1),
    Message.MBUTTON_DOWN: ("on_mouse_down", 2),
    Message.MBUTTON_UP: ("on_mouse_up", 2),
}


class EventSource:
    """Holds listeners and translates window messages into listener calls."""

    def __init__(self) -> None:
        self._listeners: List[EventListener] = []
        self.closed = False

    def add_listener(self, listener: EventListener) -> None:
        """Append ``listener``; None is ignored and duplicates are allowed."""
        if listener is None:
            return
        self._listeners.append(listener)

    def remove_listener(self, listener: EventListener) -> None:
        """Remove the first registration of ``listener``, if any."""
        if listener is None:
            return
        for index, registered in enumerate(self._listeners):
            if registered is listener:
                del self._listeners[index]
                return

    def listeners(self) -> Tuple[EventListener, ...]:
        """Return the registered listeners in order."""
        return tuple(self._listeners)

    def begin_frame(self) -> bool:
        """Reset the wheel for every listener; return False once destroyed."""
        self._notify("on_mouse_wheel", 0)
        return not self.closed

    def handle(self, message: Message, param: Any = None) -> bool:
        """Dispatch ``message`` to listeners; return True if it was consumed.

        Keys take an int code below 256, characters an int code point in
        1..0xFFFF, mouse moves an ``(x, y)`` pair and the wheel a raw delta in
        units of :data:`WHEEL_DELTA`.
        """
        message = Message(message)
        if message is Message.DESTROY:
            self.closed = True
            return True
        if message in (Message.KEY_DOWN, Message.KEY_UP):
            if not 0 <= param < _KEY_LIMIT:
                return False
            name = "on_key_down" if message is Message.KEY_DOWN else "on_key_up"
            self._notify(name, param)
            return True
        if message in _BUTTONS:
            name, button = _BUTTONS[message]
            self._notify(name, button)
            return True
        if message is Message.MOUSE_MOVE:
            x, y = param
            self._notify("on_mouse_move", (int(x), int(y)))
            return True
        if message is Message.MOUSE_WHEEL:
            self._notify("on_mouse_wheel", float(param) / WHEEL_DELTA)
            return True
        if message is Message.CHAR:
            if not 0 < param < _CHAR_LIMIT:
                return False
            self._notify("on_char", param)
            return True
        return False

    def _notify(self, name: str, argument: Any) -> None:
        for listener in list(self._listeners):
            getattr(listener, name)(argument)