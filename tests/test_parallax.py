"""Tests for the starfield"""

import pytest

from starship.configs import GameConfig
from starship.entities import ParallaxLayer, Star
from starship.parallax import advance_parallax, init_parallax


class TestInitParallax:
    def test_layer_speeds_and_counts(self, config, rng):
        layers = init_parallax(config, rng)
        assert [layer.speed for layer in layers] == [0.2, 0.6, 1.2]
        assert [len(layer.stars) for layer in layers] == [60, 40, 20]

    def test_star_bounds(self, config, rng):
        for i, layer in enumerate(init_parallax(config, rng)):
            for s in layer.stars:
                assert 0 <= s.x < config.width
                assert 0 <= s.y < config.height
                assert 0.3 <= s.size < i + 1.3

    def test_custom_layers(self, rng):
        config = GameConfig(parallax_speeds=(0.5,), parallax_base_count=5)
        layers = init_parallax(config, rng)
        assert len(layers) == 1
        assert len(layers[0].stars) == 5


class TestAdvanceParallax:
    def test_scrolls_by_layer_speed(self):
        slow = ParallaxLayer(0.2, [Star(10, 100, 1)])
        fast = ParallaxLayer(1.2, [Star(20, 100, 2)])
        advance_parallax([slow, fast], 600)
        assert slow.stars[0].y == pytest.approx(100.2)
        assert fast.stars[0].y == pytest.approx(101.2)

    def test_wraps_to_top(self):
        layer = ParallaxLayer(1.2, [Star(33, 599.5, 1)])
        advance_parallax([layer], 600)
        assert layer.stars[0].y == 0.0
        assert layer.stars[0].x == 33

    def test_exact_height_does_not_wrap(self):
        layer = ParallaxLayer(1.0, [Star(0, 599.0, 1)])
        advance_parallax([layer], 600)
        assert layer.stars[0].y == 600.0
