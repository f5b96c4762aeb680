"""
Play the game in an arcade window

    starship --seed 7
    python -m starship.play --width 640 --height 800 --mute
"""

import argparse

from .configs import GAME_CONFIG, SOUND_CONFIG, GameConfig


def main():
    parser = argparse.ArgumentParser(description="Starship arcade shooter")
    parser.add_argument(
        "--width",
        type=int,
        default=GAME_CONFIG["width"],
        help=f"Viewport width in pixels (default: {GAME_CONFIG['width']})",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=GAME_CONFIG["height"],
        help=f"Viewport height in pixels (default: {GAME_CONFIG['height']})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for spawns and the starfield",
    )
    parser.add_argument(
        "--sound-dir",
        type=str,
        default=SOUND_CONFIG["sound_dir"],
        help=f"Directory holding the sound files (default: {SOUND_CONFIG['sound_dir']})",
    )
    parser.add_argument(
        "--mute",
        action="store_true",
        help="Disable sound",
    )

    args = parser.parse_args()

    import arcade

    from .audio import NullAudio
    from .sound import ArcadeAudio
    from .window import StarshipWindow

    config = GameConfig.from_dict({**GAME_CONFIG, "width": args.width, "height": args.height})
    audio = NullAudio() if args.mute else ArcadeAudio.from_config({"sound_dir": args.sound_dir})

    print("Arrows/WASD move, Space fires, R restarts.")
    StarshipWindow(audio=audio, config=config, seed=args.seed)
    arcade.run()


if __name__ == "__main__":
    main()
