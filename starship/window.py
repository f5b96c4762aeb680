"""
Arcade window driving the game loop

``on_update`` samples the input queue and advances the game one frame;
``on_draw`` executes the frame's draw commands. Arcade draws with the
origin at the bottom-left, so every y coordinate is flipped here.
"""

from typing import Iterable, Optional

import arcade

from .audio import AudioSink
from .configs import GameConfig
from .controls import InputQueue
from .game import Game
from .renderer import (
    BACKGROUND,
    DrawCommand,
    DrawText,
    FillCircle,
    FillPolygon,
    FillRect,
    build_frame,
)

TITLE = "Starship"

ARCADE_KEYS = {
    arcade.key.UP: "ArrowUp",
    arcade.key.DOWN: "ArrowDown",
    arcade.key.LEFT: "ArrowLeft",
    arcade.key.RIGHT: "ArrowRight",
    arcade.key.W: "KeyW",
    arcade.key.S: "KeyS",
    arcade.key.A: "KeyA",
    arcade.key.D: "KeyD",
    arcade.key.SPACE: "Space",
    arcade.key.R: "KeyR",
}


def draw_commands(commands: Iterable[DrawCommand], height: int):
    """Execute draw commands given in top-left screen coordinates"""
    for cmd in commands:
        if isinstance(cmd, FillRect):
            arcade.draw_lrbt_rectangle_filled(
                cmd.x, cmd.x + cmd.w, height - (cmd.y + cmd.h), height - cmd.y, cmd.color
            )
        elif isinstance(cmd, FillCircle):
            arcade.draw_circle_filled(cmd.x, height - cmd.y, cmd.radius, cmd.color)
        elif isinstance(cmd, FillPolygon):
            arcade.draw_polygon_filled([(x, height - y) for x, y in cmd.points], cmd.color)
        elif isinstance(cmd, DrawText):
            arcade.draw_text(
                cmd.text, cmd.x, height - cmd.y, cmd.color, cmd.size,
                anchor_x=cmd.anchor_x, anchor_y="baseline",
            )


class StarshipWindow(arcade.Window):
    """Window that owns the game and its keyboard queue"""

    def __init__(
        self,
        game: Optional[Game] = None,
        audio: Optional[AudioSink] = None,
        config: Optional[GameConfig] = None,
        seed: Optional[int] = None,
    ):
        config = game.config if game is not None else (config or GameConfig())
        super().__init__(config.width, config.height, TITLE, update_rate=1 / config.fps)
        self.controls = InputQueue()
        if game is None:
            game = Game(config, audio=audio, seed=seed)
        self.attach(game)
        self.background_color = BACKGROUND

    def attach(self, game: Game):
        """Drive ``game`` and show its score in the caption"""
        if game.on_score is None:
            game.on_score = self.show_score
        self.game = game
        self.show_score(game.score)

    def show_score(self, score: int):
        self.set_caption(f"{TITLE} - Score: {score}")

    def on_key_press(self, key, modifiers):
        name = ARCADE_KEYS.get(key)
        if name is not None:
            self.controls.press(name)

    def on_key_release(self, key, modifiers):
        name = ARCADE_KEYS.get(key)
        if name is not None:
            self.controls.release(name)

    def on_update(self, delta_time: float):
        # Speeds are per frame, delta_time is ignored
        self.game.tick(self.controls.poll())

    def on_draw(self):
        self.clear()
        draw_commands(build_frame(self.game.snapshot()), self.height)
