# snakegame/viz/sound_pygame.py
from __future__ import annotations
import math
import os
from array import array
from typing import Dict, Optional
import pygame as pg
from ..config import AppConfig
from ..core.interfaces import GameEvent

SAMPLE_RATE = 44100
SOUND_FILES = {
    GameEvent.MOVED: "move",
    GameEvent.ATE: "eat",
    GameEvent.GAME_OVER: "gameover",
}
EXTENSIONS = (".mp3", ".ogg", ".wav")


def create_tone(frequency_hz, duration_ms, volume=0.3, end_frequency_hz=None, attack_ms=6, release_ms=60):
    """Mono 16-bit chirp with a linear attack/release envelope."""
    sample_count = max(1, int(SAMPLE_RATE * duration_ms / 1000.0))
    amplitude = int(32767 * max(0.0, min(volume, 1.0)))
    attack = int(SAMPLE_RATE * attack_ms / 1000.0)
    release = int(SAMPLE_RATE * release_ms / 1000.0)
    release_start = max(0, sample_count - release)
    end_frequency_hz = frequency_hz if end_frequency_hz is None else end_frequency_hz

    pcm = array("h")
    phase = 0.0
    for i in range(sample_count):
        progress = i / max(1, sample_count - 1)
        freq = frequency_hz + (end_frequency_hz - frequency_hz) * progress
        phase += 2.0 * math.pi * freq / SAMPLE_RATE
        env = 1.0
        if attack and i < attack:
            env = i / attack
        if release and i >= release_start:
            env *= max(0.0, (sample_count - i) / release)
        pcm.append(int(amplitude * env * math.sin(phase)))
    return pg.mixer.Sound(buffer=pcm.tobytes())


def _synth_defaults() -> Dict[GameEvent, pg.mixer.Sound]:
    return {
        GameEvent.MOVED: create_tone(560, 38, 0.14, end_frequency_hz=500, attack_ms=4, release_ms=24),
        GameEvent.ATE: create_tone(720, 95, 0.26, end_frequency_hz=520, release_ms=70),
        GameEvent.GAME_OVER: create_tone(420, 420, 0.2, end_frequency_hz=110, attack_ms=16, release_ms=220),
    }


class NullSound:
    def play(self, event: GameEvent) -> None:
        pass


class PygameSound:
    """Plays one clip per game event. Audio problems disable sound, never the game."""

    def __init__(self, cfg: AppConfig):
        self.enabled = False
        self.sounds: Dict[GameEvent, pg.mixer.Sound] = {}
        if not cfg.sound_enabled:
            return
        try:
            if pg.mixer.get_init() is None:
                pg.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=1, buffer=512)
            self.sounds = _synth_defaults()
            for event, stem in SOUND_FILES.items():
                clip = self._load(cfg.sound_dir, stem)
                if clip is not None:
                    self.sounds[event] = clip
            self.enabled = True
        except pg.error as e:
            print(f"[sound] audio disabled: {e}")
            self.sounds = {}

    @staticmethod
    def _load(sound_dir: Optional[str], stem: str) -> Optional[pg.mixer.Sound]:
        if not sound_dir:
            return None
        for ext in EXTENSIONS:
            path = os.path.join(sound_dir, stem + ext)
            if os.path.isfile(path):
                return pg.mixer.Sound(path)
        return None

    def play(self, event: GameEvent) -> None:
        if not self.enabled or event not in self.sounds:
            return
        try:
            self.sounds[event].play()
        except pg.error as e:
            print(f"[sound] {event.value} failed: {e}")
