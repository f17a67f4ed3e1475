# audio_manager.py - Audio Feedback
"""
Plays short synthesized tones for game events using pygame.mixer.
Runs silently when no audio device is available.
"""

import logging
import math
from array import array

import pygame  # Audio library

from session import FeedbackEvent

logger = logging.getLogger(__name__)

SAMPLE_RATE = 44100


def _sweep(start_hz: float, end_hz: float, duration_s: float, wave: str = "sine",
           volume: float = 0.3, exponential: bool = False, channels: int = 2) -> array:
    """Frequency sweep with a decaying envelope, as signed 16-bit samples."""
    n = int(SAMPLE_RATE * duration_s)
    samples = array("h")
    phase = 0.0
    for i in range(n):
        t = i / n
        if exponential:
            freq = start_hz * (end_hz / start_hz) ** t
        else:
            freq = start_hz + (end_hz - start_hz) * t
        phase += freq / SAMPLE_RATE
        if wave == "sawtooth":
            value = 2.0 * (phase - math.floor(phase + 0.5))
        else:
            value = math.sin(2 * math.pi * phase)
        env = volume * (1.0 - t)  # Fade out
        sample = int(32767 * max(-1.0, min(1.0, value * env)))
        for _ in range(channels):  # Interleaved frames
            samples.append(sample)
    return samples


class AudioManager:
    """Feedback sink: maps FeedbackEvent values to sounds."""

    def __init__(self) -> None:
        """Initialize audio system and synthesize sound effects."""
        self.sound_enabled: bool = True  # Global sound on/off toggle
        self.sounds: dict[FeedbackEvent, pygame.mixer.Sound] = {}

        try:
            pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=2, buffer=512)
            _, _, channels = pygame.mixer.get_init()
        except Exception:
            logger.warning("audio unavailable, running without sound")
            self.sound_enabled = False
            return

        self.sounds = {
            FeedbackEvent.BONUS_COLLECTED: self._make_sound(880, 1760, 0.1, exponential=True, channels=channels),
            FeedbackEvent.OBSTACLE_HIT: self._make_sound(150, 50, 0.3, wave="sawtooth", channels=channels),
            FeedbackEvent.HAZARD_HIT: self._make_sound(400, 100, 0.5, wave="sawtooth", channels=channels),
            FeedbackEvent.LEVEL_UP: self._make_sound(660, 1320, 0.25, channels=channels),
        }

    def _make_sound(self, start_hz, end_hz, duration_s, **kwargs):
        """Build a pygame Sound from a sweep, None if the mixer rejects it."""
        try:
            return pygame.mixer.Sound(buffer=_sweep(start_hz, end_hz, duration_s, **kwargs).tobytes())
        except Exception:
            logger.exception("could not synthesize %.0f->%.0f Hz tone", start_hz, end_hz)
            return None

    # --------- Sound Effects --------- #
    def handle_event(self, event: FeedbackEvent) -> None:
        """Play the sound for a game event. Never raises."""
        if not self.sound_enabled:
            return
        snd = self.sounds.get(event)
        if snd is None:
            return  # SESSION_ENDED has its sound on the hit that caused it
        try:
            snd.play()  # Non-blocking playback
        except Exception:
            logger.exception("playback failed for %s", event.value)

    # --------- Global Sound Control --------- #
    def toggle_sound(self) -> bool:
        """
        Toggle sound on/off globally.

        Returns:
            bool: True if sound is enabled after toggle, False if disabled.
        """
        self.sound_enabled = not self.sound_enabled and bool(self.sounds)
        if not self.sound_enabled and self.sounds:
            pygame.mixer.stop()  # Cut anything still playing
        return self.sound_enabled

    def shutdown(self) -> None:
        try:
            pygame.mixer.quit()  # Stop pygame audio
        except Exception:
            logger.debug("mixer already closed")
