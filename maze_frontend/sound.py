"""
Synthesized sound cues
======================
No audio files: every cue is a handful of short oscillator tones mixed into
one 16-bit mono buffer and handed to pygame.mixer.Sound(buffer=...).

SoundBoard subscribes to GameState events and owns the "sound on/off" flag,
which is a presentation setting, not game state.
"""

import array
import logging
import math

import pygame

logger = logging.getLogger(__name__)

SAMPLE_RATE = 22050
MIXER_FORMAT = (SAMPLE_RATE, -16, 1)     # (frequency, size, channels) the cue buffers are written for

# (waveform, frequency Hz, duration s, volume 0..1, start offset s)
CUES = {
    "blip":    [("triangle", 660, 0.07, 0.06, 0.0), ("triangle", 880, 0.06, 0.05, 0.0)],
    "pellet":  [("sine", 740, 0.05, 0.05, 0.0)],
    "power":   [("square", 220, 0.09, 0.06, 0.0), ("square", 330, 0.10, 0.05, 0.0)],
    "bonk":    [("sawtooth", 140, 0.12, 0.07, 0.0)],
    "monster": [("triangle", 520, 0.08, 0.06, 0.0)],
    "win":     [("triangle", 660, 0.07, 0.06, 0.0), ("triangle", 880, 0.06, 0.05, 0.0),
                ("triangle", 990, 0.10, 0.05, 0.09), ("triangle", 1320, 0.12, 0.05, 0.19)],
}

EVENT_CUES = {
    "pellet":       "pellet",
    "power-up":     "power",
    "bonk":         "bonk",
    "bonk-monster": "monster",
    "win":          "win",
}


def pre_init():
    """Asks for the cue format before pygame.init() opens the mixer."""
    pygame.mixer.pre_init(SAMPLE_RATE, -16, 1, 512, allowedchanges=0)


def oscillator(wave: str, phase: float) -> float:
    """One sample of a unit-amplitude waveform; phase is in cycles."""
    frac = phase % 1.0
    if wave == "sine":
        return math.sin(2 * math.pi * frac)
    if wave == "square":
        return 1.0 if frac < 0.5 else -1.0
    if wave == "sawtooth":
        return 2.0 * frac - 1.0
    if wave == "triangle":
        return 4.0 * frac - 1.0 if frac < 0.5 else 3.0 - 4.0 * frac
    raise ValueError(f"unknown waveform {wave!r}")


def render_cue(tones, sample_rate: int = SAMPLE_RATE) -> array.array:
    end = max(offset + dur for _, _, dur, _, offset in tones)
    mix = [0.0] * int(sample_rate * end)
    for wave, freq, dur, vol, offset in tones:
        start = int(sample_rate * offset)
        for i in range(int(sample_rate * dur)):
            if start + i >= len(mix):
                break
            mix[start + i] += vol * oscillator(wave, freq * i / sample_rate)

    buf = array.array("h", [0] * len(mix))
    for i, v in enumerate(mix):
        buf[i] = int(max(-1.0, min(1.0, v)) * 32767)
    return buf


class SoundBoard:
    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self.available = False
        self.sounds = {}

    def load(self):
        """Opens the mixer and renders the cues. Without an audio device the board stays silent."""
        try:
            # pygame.init() may already have opened the mixer at 44.1 kHz stereo
            if pygame.mixer.get_init() != MIXER_FORMAT:
                pygame.mixer.quit()
                pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=1, allowedchanges=0)
            self.sounds = {name: pygame.mixer.Sound(buffer=render_cue(tones)) for name, tones in CUES.items()}
        except pygame.error as exc:
            logger.warning("Audio unavailable, continuing without sound: %s", exc)
            self.available = False
            return self
        self.available = True
        return self

    def cues_for(self, events) -> list:
        return [EVENT_CUES[e] for e in events if e in EVENT_CUES]

    def play(self, name: str):
        if self.enabled and self.available:
            self.sounds[name].play()

    def on_events(self, events, snapshot):
        for name in self.cues_for(events):
            self.play(name)

    def toggle(self) -> bool:
        self.enabled = not self.enabled
        logger.info("Sound %s", "on" if self.enabled else "off")
        if self.enabled:
            self.play("blip")
        return self.enabled

    @property
    def label(self) -> str:
        return "Sound: On" if self.enabled else "Sound: Off"
