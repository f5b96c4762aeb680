"""Tests for the Gymnasium environment"""

import random

import numpy as np
import pytest

from starship import StarshipEnv
from starship.configs import GameConfig

from conftest import NO_SPAWN, place_enemy, place_projectile


@pytest.fixture
def env():
    env = StarshipEnv(max_steps=50, game_config=GameConfig(spawn_interval=NO_SPAWN))
    yield env
    env.close()


class TestSpaces:
    def test_reset_observation(self, env):
        obs, info = env.reset(seed=0)
        assert obs.shape == env.observation_space.shape
        assert obs.dtype == np.float32
        assert env.observation_space.contains(obs)
        assert info["score"] == 0
        assert info["step"] == 0

    def test_action_space(self, env):
        assert list(env.action_space.nvec) == [5, 2]

    def test_observation_bounds_over_episode(self):
        env = StarshipEnv(max_steps=400)
        obs, _ = env.reset(seed=1)
        env.action_space.seed(1)
        done = False
        while not done:
            obs, _, terminated, truncated, _ = env.step(env.action_space.sample())
            assert env.observation_space.contains(obs)
            done = terminated or truncated

    def test_unknown_render_mode(self):
        with pytest.raises(ValueError):
            StarshipEnv(render_mode="ascii")


class TestStep:
    def test_move_actions(self, env):
        env.reset(seed=0)
        x0 = env.game.player.x
        env.step([3, 0])
        assert env.game.player.x < x0
        env.step([4, 0])
        env.step([4, 0])
        assert env.game.player.x > x0

    def test_shot_cost(self, env):
        env.reset(seed=0)
        _, reward, *_ = env.step([0, 1])
        assert reward == pytest.approx(env.rewards["R_ALIVE"] - env.rewards["R_SHOT"])
        _, reward, *_ = env.step([0, 1])
        assert reward == pytest.approx(env.rewards["R_ALIVE"])

    def test_kill_reward(self, env):
        env.reset(seed=0)
        place_projectile(env.game, x=200, y=300)
        place_enemy(env.game, x=190, y=280)
        _, reward, _, _, info = env.step([0, 0])
        assert info["score"] == 10
        assert reward == pytest.approx(env.rewards["R_KILL"] + env.rewards["R_ALIVE"])

    def test_enemy_in_observation(self, env):
        env.reset(seed=0)
        place_enemy(env.game, x=100, y=100)
        obs, *_ = env.step([0, 0])
        assert np.any(obs[3:7] != 0)
        assert np.all(obs[7:] == 0)

    def test_death_terminates(self, env):
        env.reset(seed=0)
        place_enemy(env.game, x=env.game.player.x, y=env.game.player.y)
        _, reward, terminated, truncated, _ = env.step([0, 0])
        assert terminated
        assert not truncated
        assert reward == pytest.approx(-env.rewards["R_DEATH"])

    def test_truncation(self, env):
        env.reset(seed=0)
        for _ in range(49):
            *_, truncated, _ = env.step([0, 0])
            assert not truncated
        *_, truncated, _ = env.step([0, 0])
        assert truncated

    def test_reset_restarts_game(self, env):
        env.reset(seed=0)
        place_enemy(env.game, x=env.game.player.x, y=env.game.player.y)
        env.step([0, 0])
        pool_size = len(env.game.enemies)
        env.reset()
        assert not env.game.ctx.game_over
        assert env.game.enemies.count_active() == 0
        assert len(env.game.enemies) == pool_size

    def test_seeded_resets_repeat(self):
        def run():
            env = StarshipEnv(max_steps=300)
            env.reset(seed=5)
            infos = [env.step([0, 1])[4] for _ in range(300)]
            return [(i["score"], i["num_enemies"]) for i in infos]

        assert run() == run()

    def test_seeded_reset_ignores_global_random(self):
        def run(global_seed):
            random.seed(global_seed)
            np.random.seed(global_seed)
            env = StarshipEnv(max_steps=200)
            env.reset(seed=11)
            infos = [env.step([0, 1])[4] for _ in range(200)]
            return [(i["score"], i["num_enemies"]) for i in infos]

        assert run(1) == run(2)


class TestRender:
    def test_rgb_array(self):
        env = StarshipEnv(render_mode="rgb_array", game_config=GameConfig(width=160, height=120))
        env.reset(seed=0)
        frame = env.render()
        assert frame.shape == (120, 160, 3)
        assert frame.dtype == np.uint8
        assert frame.any()

    def test_no_render_mode(self, env):
        env.reset(seed=0)
        assert env.render() is None
