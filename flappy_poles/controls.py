"""Translate pygame input events into game actions."""

from __future__ import annotations

from enum import Enum

import pygame

from .session import Session, SessionState

FLAP_KEYS = (pygame.K_SPACE, pygame.K_UP)
START_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER)
QUIT_KEYS = (pygame.K_ESCAPE,)


class Action(Enum):
    FLAP = "flap"
    START = "start"
    QUIT = "quit"


def map_event(event: pygame.event.Event, state: SessionState) -> Action | None:
    """Map one event to an action.

    Key press, left click and touch all mean "flap" while running and
    "start" otherwise, so the same gesture begins a new run after a crash.
    """
    if event.type == pygame.QUIT:
        return Action.QUIT
    pressed = False
    if event.type == pygame.KEYDOWN:
        if event.key in QUIT_KEYS:
            return Action.QUIT
        if event.key in START_KEYS:
            return None if state is SessionState.RUNNING else Action.START
        pressed = event.key in FLAP_KEYS
    elif event.type == pygame.MOUSEBUTTONDOWN:
        pressed = event.button == 1
    elif event.type == pygame.FINGERDOWN:
        pressed = True
    if not pressed:
        return None
    return Action.FLAP if state is SessionState.RUNNING else Action.START


def apply_action(session: Session, action: Action) -> bool:
    """Forward a flap or start to the session. QUIT is left to the caller."""
    if action is Action.FLAP:
        return session.flap()
    if action is Action.START:
        return session.start()
    return False
