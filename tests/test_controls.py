"""Tests for the polled keyboard queue"""

from starship.controls import InputQueue, InputSnapshot


class TestInputQueue:
    def test_empty_poll(self):
        assert InputQueue().poll() == InputSnapshot()

    def test_held_until_released(self):
        q = InputQueue()
        q.press("ArrowLeft")
        assert q.poll().left
        assert q.poll().left
        q.release("ArrowLeft")
        assert not q.poll().left

    def test_aliases(self):
        q = InputQueue()
        for key, attr in [("KeyW", "up"), ("KeyS", "down"), ("KeyA", "left"), ("KeyD", "right")]:
            q.press(key)
            assert getattr(q.poll(), attr)
            q.release(key)
            assert not getattr(q.poll(), attr)

    def test_alias_release_keeps_other_held(self):
        q = InputQueue()
        q.press("ArrowUp")
        q.press("KeyW")
        q.release("KeyW")
        assert q.poll().up

    def test_press_and_release_between_polls(self):
        q = InputQueue()
        q.press("Space")
        q.release("Space")
        assert not q.poll().fire

    def test_restart_is_edge_triggered(self):
        q = InputQueue()
        q.press("KeyR")
        assert q.poll().restart
        # Still physically held, but no new press
        assert not q.poll().restart

    def test_fire_is_held_level(self):
        q = InputQueue()
        q.press("Space")
        assert all(q.poll().fire for _ in range(3))

    def test_unmapped_keys_ignored(self):
        q = InputQueue()
        q.press("KeyQ")
        q.release("Escape")
        assert q.poll() == InputSnapshot()

    def test_clear(self):
        q = InputQueue()
        q.press("ArrowDown")
        q.poll()
        q.clear()
        assert q.poll() == InputSnapshot()
