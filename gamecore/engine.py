"""The core engine: owns the game, the input listener and the frame loop."""

from __future__ import annotations

import inspect
import time
from abc import ABC, abstractmethod
from typing import Callable, Iterable, Sequence

from gamecore.assets import MaterialLibrary, TextureLibrary
from gamecore.camera import Camera
from gamecore.collision import CollisionHandler
from gamecore.debug import Debug, MessageType
from gamecore.mouse import InputEvent, MouseListener
from gamecore.timer import Timer

_LOG_NAME = "engine.py"
_SHADER_NAMES = ("colourShader", "BasicShader")


def _line() -> int:
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    return caller.f_lineno if caller is not None else 0


class GameInterface(ABC):
    """A game driven by the engine; the engine sets ``engine`` on it."""

    engine: CoreEngine | None = None

    @abstractmethod
    def on_create(self) -> bool: ...

    @abstractmethod
    def update(self, delta_time: float) -> None: ...

    @abstractmethod
    def render(self) -> None: ...

    @abstractmethod
    def on_destroy(self) -> None: ...


class Scene(ABC):
    """One scene of a game."""

    @abstractmethod
    def on_create(self) -> bool: ...

    @abstractmethod
    def update(self, delta_time: float) -> None: ...

    @abstractmethod
    def render(self) -> None: ...

    @abstractmethod
    def on_destroy(self) -> None: ...


class CoreEngine:
    """Runs a game: startup, the update/render loop and input dispatch.

    ``pointer`` holds the mouse position in window coordinates (origin at
    the top left); it starts at the window centre. ``last_press`` holds
    the position of the most recent mouse press, or None before any.
    """

    def __init__(
        self,
        game: GameInterface | None = None,
        screen_size: Sequence[float] = (800, 600),
        debug: Debug | None = None,
        clock: Callable[[], int] | None = None,
    ) -> None:
        width, height = screen_size
        self.game = game
        self.screen_size = (float(width), float(height))
        self.debug = debug if debug is not None else Debug()
        self.timer = Timer(clock)
        self.fps = 120
        self.is_running = False
        self.current_scene = 0
        self.camera: Camera | None = None
        self.collision_handler: CollisionHandler | None = None
        self.shader_programs: dict[str, int] = {}
        self.textures = TextureLibrary()
        self.materials = MaterialLibrary()
        self.pointer = (int(width) // 2, int(height) // 2)
        self.last_press: tuple[int, int] | None = None
        self.mouse = MouseListener(self.screen_size[1], lambda: self.pointer, None)
        if game is not None:
            game.engine = self

    def on_create(self) -> bool:
        """Start logging and input, then create the game.

        Returns False (and logs a fatal error) if the game fails to start.
        """
        self.debug.init()
        self.debug.set_severity(MessageType.INFO)
        self.mouse.engine = self
        for name in _SHADER_NAMES:
            self.shader_programs.setdefault(name, len(self.shader_programs) + 1)

        if self.game is None or not self.game.on_create():
            self.debug.fatal_error("Game Interface Creation Failed", _LOG_NAME, _line())
            self.is_running = False
            return False

        self.debug.info("CORE ENGINE STARTED", _LOG_NAME, _line())
        self.timer.start()
        self.is_running = True
        return True

    def run(
        self,
        event_source: Callable[[], Iterable[InputEvent]] | None = None,
        max_frames: int | None = None,
    ) -> int:
        """Run frames until the engine stops or ``max_frames`` have run.

        ``event_source`` is polled once per frame for pending events.
        The engine is shut down afterwards; returns the number of frames.
        """
        frames = 0
        while self.is_running and (max_frames is None or frames < max_frames):
            if event_source is not None:
                for event in event_source():
                    self.mouse.handle(event)
            self.timer.update_frame_ticks()
            self.update(self.timer.delta_time())
            self.render()
            frames += 1
            time.sleep(self.timer.sleep_time(self.fps) / 1000.0)
        self.on_destroy()
        return frames

    def exit_game(self) -> None:
        self.is_running = False

    def update(self, delta_time: float) -> None:
        if self.game is not None:
            self.game.update(delta_time)

    def render(self) -> None:
        if self.game is not None:
            self.game.render()

    def on_destroy(self) -> None:
        self.camera = None
        if self.game is not None:
            self.game.on_destroy()
        self.game = None
        self.is_running = False

    def notify_mouse_pressed(self, x: int, y: int) -> None:
        """Record where the press happened; picking happens on release."""
        self.last_press = (x, y)

    def notify_mouse_released(self, x: int, y: int, button_type: int) -> None:
        if self.collision_handler is not None and self.camera is not None:
            self.collision_handler.update((x, y), button_type, self.screen_size, self.camera)

    def notify_mouse_move(self, x: int, y: int) -> None:
        if self.camera is not None:
            dx, dy = self.mouse.offset()
            self.camera.process_mouse_movement(dx, dy)

    def notify_mouse_scroll(self, y: int) -> None:
        if self.camera is not None:
            self.camera.process_mouse_zoom(y)