"""
Audio cues emitted by the game core

The core only emits cues; playback lives behind a sink so that the loop
never waits on it. See ``starship.sound`` for the arcade-backed sink.
"""

from enum import Enum
from typing import List, Protocol


class Cue(Enum):
    SHOT = "shot"
    HIT = "hit"
    GAME_OVER = "game_over"


class AudioSink(Protocol):
    def emit(self, cue: Cue) -> None:
        ...


class NullAudio:
    """Drops every cue"""

    def emit(self, cue: Cue) -> None:
        pass


class CueRecorder:
    """Keeps every emitted cue in order"""

    def __init__(self):
        self.cues: List[Cue] = []

    def emit(self, cue: Cue) -> None:
        self.cues.append(cue)

    def count(self, cue: Cue) -> int:
        return sum(1 for c in self.cues if c is cue)

    def clear(self):
        self.cues.clear()
