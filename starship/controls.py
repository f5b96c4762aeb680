"""
Keyboard input as a polled snapshot

Host key events are queued as edges and folded into an ``InputSnapshot``
once per tick, so the game loop never sees the host event system.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Set, Tuple


class Action(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    FIRE = "fire"
    RESTART = "restart"


# Arrow keys and WASD aliases, space fires, R restarts
KEY_BINDINGS: Dict[str, Action] = {
    "ArrowUp": Action.UP,
    "KeyW": Action.UP,
    "ArrowDown": Action.DOWN,
    "KeyS": Action.DOWN,
    "ArrowLeft": Action.LEFT,
    "KeyA": Action.LEFT,
    "ArrowRight": Action.RIGHT,
    "KeyD": Action.RIGHT,
    "Space": Action.FIRE,
    "KeyR": Action.RESTART,
}


@dataclass(frozen=True)
class InputSnapshot:
    """Logical input state sampled at the start of an update"""
    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False
    fire: bool = False
    restart: bool = False


NO_INPUT = InputSnapshot()


class InputQueue:
    """Records key edges between ticks and folds them on ``poll``"""

    def __init__(self, bindings: Dict[str, Action] = None):
        self.bindings = dict(KEY_BINDINGS if bindings is None else bindings)
        self._held: Set[str] = set()
        self._events: List[Tuple[str, bool]] = []

    def press(self, key: str):
        if key in self.bindings:
            self._events.append((key, True))

    def release(self, key: str):
        if key in self.bindings:
            self._events.append((key, False))

    def clear(self):
        self._held.clear()
        self._events.clear()

    def poll(self) -> InputSnapshot:
        restart = False
        for key, pressed in self._events:
            if pressed:
                self._held.add(key)
                if self.bindings[key] is Action.RESTART:
                    restart = True
            else:
                self._held.discard(key)
        self._events.clear()

        actions = {self.bindings[key] for key in self._held}
        return InputSnapshot(
            up=Action.UP in actions,
            down=Action.DOWN in actions,
            left=Action.LEFT in actions,
            right=Action.RIGHT in actions,
            fire=Action.FIRE in actions,
            restart=restart,
        )
