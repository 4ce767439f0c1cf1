import os

os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame
from flappy_poles.controls import Action, apply_action, map_event
from flappy_poles.session import Session, SessionState

RUNNING = SessionState.RUNNING
IDLE = SessionState.IDLE
ENDED = SessionState.ENDED


def key(k: int) -> pygame.event.Event:
    return pygame.event.Event(pygame.KEYDOWN, key=k)


def test_flap_gestures_flap_while_running() -> None:
    events = [
        key(pygame.K_SPACE),
        key(pygame.K_UP),
        pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(10, 10)),
        pygame.event.Event(pygame.FINGERDOWN, x=0.5, y=0.5, touch_id=0, finger_id=0),
    ]
    for event in events:
        assert map_event(event, RUNNING) is Action.FLAP


def test_flap_gestures_start_otherwise() -> None:
    for state in (IDLE, ENDED):
        assert map_event(key(pygame.K_SPACE), state) is Action.START
        assert map_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(0, 0)), state) is Action.START


def test_enter_starts_only_when_not_running() -> None:
    assert map_event(key(pygame.K_RETURN), IDLE) is Action.START
    assert map_event(key(pygame.K_RETURN), ENDED) is Action.START
    assert map_event(key(pygame.K_RETURN), RUNNING) is None


def test_quit_events() -> None:
    assert map_event(pygame.event.Event(pygame.QUIT), RUNNING) is Action.QUIT
    assert map_event(key(pygame.K_ESCAPE), IDLE) is Action.QUIT


def test_unmapped_events_are_ignored() -> None:
    assert map_event(key(pygame.K_a), RUNNING) is None
    assert map_event(pygame.event.Event(pygame.KEYUP, key=pygame.K_SPACE), RUNNING) is None
    assert map_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=3, pos=(0, 0)), RUNNING) is None


def test_apply_action_drives_session() -> None:
    session = Session(1200, 600)
    assert apply_action(session, Action.FLAP) is False
    assert apply_action(session, Action.START) is True
    assert session.running
    assert apply_action(session, Action.FLAP) is True
    assert apply_action(session, Action.START) is False
    assert apply_action(session, Action.QUIT) is False
