import pygame
import pytest

from ripple.input.pointer import PointerTracker
from ripple.types import Vector2


@pytest.fixture
def pointer():
    tracker = PointerTracker(debounce=0.02)
    tracker.resize(800, 600)
    return tracker


def test_idle_pointer_is_not_activating(pointer):
    state = pointer.sample(now=10.0)

    assert state.cursor == Vector2.zero()
    assert not state.activating


def test_motion_activates_until_debounce_expires(pointer):
    assert pointer.move(100.0, 50.0, now=10.0)

    assert pointer.sample(10.0).activating
    assert pointer.sample(10.01).activating
    assert not pointer.sample(10.03).activating
    assert not pointer.sample(11.0).activating

    # The cursor stays where the pointer came to rest
    assert pointer.sample(11.0).cursor == Vector2(100.0, 50.0)


def test_continuous_motion_keeps_activating(pointer):
    now = 0.0
    for step in range(10):
        now = step * 0.015
        pointer.move(10.0 + step, 10.0, now)
        assert pointer.sample(now + 0.01).activating


def test_points_outside_canvas_are_ignored(pointer):
    pointer.move(100.0, 100.0, now=1.0)

    assert not pointer.move(-5.0, 100.0, now=2.0)
    assert not pointer.move(100.0, 600.0, now=2.0)
    assert not pointer.move(0.0, 100.0, now=2.0)

    state = pointer.sample(2.0)
    assert state.cursor == Vector2(100.0, 100.0)
    assert not state.activating


def test_pixel_ratio_scales_cursor():
    pointer = PointerTracker()
    pointer.resize(400, 300, pixel_ratio=2.0)
    pointer.move(100.0, 50.0, now=0.0)

    assert pointer.position == Vector2(200.0, 100.0)


def test_mouse_motion_event(pointer):
    event = pygame.event.Event(pygame.MOUSEMOTION, pos=(120, 80), rel=(1, 1), buttons=(0, 0, 0))
    pointer.process_event(event, now=5.0)

    state = pointer.sample(5.0)
    assert state.cursor == Vector2(120.0, 80.0)
    assert state.activating


def test_finger_motion_is_normalized(pointer):
    event = pygame.event.Event(pygame.FINGERMOTION, x=0.5, y=0.25, dx=0.0, dy=0.0)
    pointer.process_event(event, now=5.0)

    assert pointer.position == Vector2(400.0, 150.0)


def test_other_events_are_ignored(pointer):
    pointer.process_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a), now=1.0)
    assert not pointer.sample(1.0).activating


def test_reset_clears_pending_activation(pointer):
    pointer.move(100.0, 100.0, now=1.0)
    pointer.reset()

    state = pointer.sample(1.0)
    assert not state.activating
    assert state.cursor == Vector2.zero()
