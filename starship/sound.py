"""
Arcade-backed audio sink

Playback is best effort: a sound that fails to load or play is skipped
and never interrupts the game loop.
"""

import os
import warnings
from typing import Dict, Optional

import arcade

from .audio import Cue
from .configs import SOUND_CONFIG


class ArcadeAudio:
    """Plays game cues with arcade sounds"""

    def __init__(self, sounds: Dict[Cue, "arcade.Sound"], volume: float = 1.0):
        self.sounds = sounds
        self.volume = volume
        self._shot_player = None

    @classmethod
    def from_config(cls, config: Optional[dict] = None) -> "ArcadeAudio":
        config = {**SOUND_CONFIG, **(config or {})}
        files = {
            Cue.SHOT: config["shot"],
            Cue.HIT: config["hit"],
            Cue.GAME_OVER: config["game_over"],
        }
        sounds = {}
        for cue, name in files.items():
            path = os.path.join(config["sound_dir"], name)
            if not os.path.exists(path):
                warnings.warn(f"Sound file not found, {cue.value} cue will be silent: {path}")
                continue
            try:
                sounds[cue] = arcade.load_sound(path)
            except Exception as exc:
                warnings.warn(f"Could not load sound {path}: {exc}")
        return cls(sounds, volume=config["volume"])

    def emit(self, cue: Cue) -> None:
        sound = self.sounds.get(cue)
        if sound is None:
            return
        try:
            if cue is Cue.SHOT:
                # Single shot playback, restarted from the beginning
                if self._shot_player is not None:
                    arcade.stop_sound(self._shot_player)
                self._shot_player = arcade.play_sound(sound, volume=self.volume)
            else:
                # Hits overlap; each one gets its own playback
                arcade.play_sound(sound, volume=self.volume)
        except Exception:
            pass
