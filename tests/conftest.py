"""Shared fixtures for the starship tests"""

import random

import pytest

from starship.audio import CueRecorder
from starship.configs import GameConfig
from starship.game import Game

# Large enough that the spawner never fires during a test
NO_SPAWN = 10 ** 9


@pytest.fixture
def config():
    return GameConfig()


@pytest.fixture
def quiet_config():
    """Default config with timed spawning switched off"""
    return GameConfig(spawn_interval=NO_SPAWN)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def cues():
    return CueRecorder()


@pytest.fixture
def scores():
    return []


@pytest.fixture
def game(quiet_config, cues, scores):
    return Game(quiet_config, audio=cues, on_score=scores.append, seed=7)


def place_enemy(game, x, y, w=30.0, h=30.0, vy=0.0):
    e = game.enemies.acquire()
    e.active = True
    e.x, e.y, e.w, e.h, e.vy = x, y, w, h, vy
    e.rotation = 0.0
    e.rotation_speed = 0.0
    return e


def place_projectile(game, x, y, vy=-7.0):
    p = game.projectiles.acquire()
    p.active = True
    p.x, p.y, p.vy = x, y, vy
    return p
