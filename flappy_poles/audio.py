"""Sound cues and background music on top of pygame.mixer.

Cues are fire-and-forget: the game never waits on playback, and a missing
mixer or a broken sound file only costs the sound.
"""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pygame

from .config import ASSET_FILES, CRASH_VOLUME, MUSIC_VOLUME, PASS_VOLUME
from .logger import get_logger

log = get_logger("audio")


def synth_tone(
    start_hz: float, end_hz: float, duration: float, sample_rate: int, channels: int
) -> np.ndarray:
    """A frequency sweep with a linear fade-out, as int16 samples for sndarray.

    The result has shape (n,) for mono and (n, channels) otherwise.
    """
    n = max(1, int(sample_rate * duration))
    freq = np.linspace(start_hz, end_hz, n)
    phase = 2.0 * np.pi * np.cumsum(freq) / sample_rate
    envelope = np.linspace(1.0, 0.0, n)
    wave = (np.sin(phase) * envelope * 0.5 * 32767).astype(np.int16)
    if channels > 1:
        wave = np.repeat(wave[:, np.newaxis], channels, axis=1)
    return np.ascontiguousarray(wave)


class PygameAudio:
    def __init__(self, assets_dir: Path | None = None) -> None:
        self.enabled = False
        self.pass_sound: pygame.mixer.Sound | None = None
        self.crash_sound: pygame.mixer.Sound | None = None
        self.music_path: Path | None = None
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init()
        except pygame.error as exc:
            log.warning("audio disabled: %s", exc)
            return
        self.enabled = True
        self.pass_sound = self._load(assets_dir, "pass", (660.0, 990.0, 0.18), PASS_VOLUME)
        self.crash_sound = self._load(assets_dir, "crash", (330.0, 80.0, 0.6), CRASH_VOLUME)
        if assets_dir is not None and (assets_dir / ASSET_FILES["music"]).is_file():
            self.music_path = assets_dir / ASSET_FILES["music"]

    def _load(
        self,
        assets_dir: Path | None,
        name: str,
        fallback: tuple[float, float, float],
        volume: float,
    ) -> pygame.mixer.Sound | None:
        sound = None
        if assets_dir is not None:
            path = assets_dir / ASSET_FILES[name]
            if path.is_file():
                try:
                    sound = pygame.mixer.Sound(str(path))
                except pygame.error as exc:
                    log.warning("could not load %s: %s", path, exc)
        if sound is None:
            rate, _fmt, channels = pygame.mixer.get_init()
            try:
                sound = pygame.sndarray.make_sound(synth_tone(*fallback, rate, channels))
            except (pygame.error, ValueError) as exc:
                log.warning("could not synthesize %s cue: %s", name, exc)
                return None
        sound.set_volume(volume)
        return sound

    @staticmethod
    def _play(sound: pygame.mixer.Sound | None) -> None:
        if sound is None:
            return
        try:
            sound.stop()
            sound.play()
        except pygame.error as exc:
            log.warning("sound playback failed: %s", exc)

    def on_start(self) -> None:
        if not self.enabled or self.music_path is None:
            return
        try:
            pygame.mixer.music.load(str(self.music_path))
            pygame.mixer.music.set_volume(MUSIC_VOLUME)
            pygame.mixer.music.play(loops=-1)
        except pygame.error as exc:
            log.warning("music playback failed: %s", exc)
            self.music_path = None

    def on_pass(self) -> None:
        if self.enabled:
            self._play(self.pass_sound)

    def on_crash(self) -> None:
        if not self.enabled:
            return
        self._play(self.crash_sound)
        if self.music_path is not None:
            try:
                pygame.mixer.music.pause()
            except pygame.error as exc:
                log.warning("could not pause music: %s", exc)
