"""Input events and the mouse listener that forwards them to the engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Protocol


class EventType(Enum):
    QUIT = auto()
    MOUSE_BUTTON_DOWN = auto()
    MOUSE_BUTTON_UP = auto()
    MOUSE_MOTION = auto()
    MOUSE_WHEEL = auto()


@dataclass(frozen=True)
class InputEvent:
    """One input event; ``button`` for clicks, ``wheel_y`` for scrolling."""

    type: EventType
    button: int = 0
    wheel_y: int = 0


class MouseReceiver(Protocol):
    def exit_game(self) -> None: ...

    def notify_mouse_pressed(self, x: int, y: int) -> None: ...

    def notify_mouse_released(self, x: int, y: int, button_type: int) -> None: ...

    def notify_mouse_move(self, x: int, y: int) -> None: ...

    def notify_mouse_scroll(self, y: int) -> None: ...


class MouseListener:
    """Tracks the mouse position and dispatches input events to an engine.

    ``mouse_state`` returns the pointer position in window coordinates
    (origin at the top left); positions are stored with y flipped so the
    origin is at the bottom left.
    """

    def __init__(
        self,
        screen_height: float,
        mouse_state: Callable[[], tuple[int, int]],
        engine: MouseReceiver | None = None,
    ) -> None:
        self.screen_height = screen_height
        self.mouse_state = mouse_state
        self.engine = engine
        self.mouse_x = 0
        self.mouse_y = 0
        self.prev_mouse_x = 0
        self.prev_mouse_y = 0
        self.first_update = False

    @property
    def position(self) -> tuple[int, int]:
        return (self.mouse_x, self.mouse_y)

    @property
    def previous_position(self) -> tuple[int, int]:
        return (self.prev_mouse_x, self.prev_mouse_y)

    def offset(self) -> tuple[int, int]:
        """Movement since the previous position; y grows upwards."""
        return (self.mouse_x - self.prev_mouse_x, self.prev_mouse_y - self.mouse_y)

    def handle(self, event: InputEvent) -> None:
        """Dispatch one event; a quit event asks the engine to exit."""
        if event.type is EventType.QUIT:
            if self.engine is not None:
                self.engine.exit_game()
        elif event.type is EventType.MOUSE_BUTTON_DOWN:
            self._update_position()
            if self.engine is not None:
                self.engine.notify_mouse_pressed(self.mouse_x, self.mouse_y)
        elif event.type is EventType.MOUSE_BUTTON_UP:
            self._update_position()
            if self.engine is not None:
                self.engine.notify_mouse_released(self.mouse_x, self.mouse_y, event.button)
        elif event.type is EventType.MOUSE_MOTION:
            self._update_position()
            if self.engine is not None:
                self.engine.notify_mouse_move(self.mouse_x, self.mouse_y)
        elif event.type is EventType.MOUSE_WHEEL:
            if self.engine is not None:
                self.engine.notify_mouse_scroll(event.wheel_y)

    def _update_position(self) -> None:
        x, y = self.mouse_state()
        y = int(self.screen_height - y)
        if self.first_update:
            self.prev_mouse_x = self.mouse_x = x
            self.prev_mouse_y = self.mouse_y = y
            self.first_update = False
        elif x != self.mouse_x or y != self.mouse_y:
            self.prev_mouse_x, self.prev_mouse_y = self.mouse_x, self.mouse_y
            self.mouse_x, self.mouse_y = x, y