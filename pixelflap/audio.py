"""In-memory synthesised sound cues and the adapter that plays them."""

from __future__ import annotations

import math
import random
from array import array
from typing import Callable, Dict, Optional

import pygame

from .effects import LOOPING_CUES, Cue, Effect, PlayCue, RewindCue, StopCue
from .log import get_logger
from .modes import ModeConfig

logger = get_logger("audio")

VOLUMES = {
    Cue.MUSIC: 0.3,
    Cue.SCORE: 0.6,
    Cue.RAIN: 0.1,
    Cue.GAME_OVER: 0.6,
}


def midi_to_freq(note: int) -> float:
    return 440.0 * 2 ** ((note - 69) / 12)


def _render(sample_rate: int, seconds: float, voice: Callable[[float, float], float]) -> array:
    """Sample ``voice(t, progress)`` into interleaved stereo int16."""

    total = max(1, int(sample_rate * seconds))
    audio = array("h")
    for index in range(total):
        t = index / sample_rate
        value = max(-1.0, min(1.0, voice(t, index / total)))
        sample = int(value * 32767)
        audio.append(sample)
        audio.append(sample)
    return audio


def synth_music(sample_rate: int) -> array:
    tempo = 120  # beats per minute
    seconds_per_beat = 60.0 / tempo
    beat_resolution = 2  # eighth-notes
    samples_per_subbeat = max(1, int(sample_rate * seconds_per_beat / beat_resolution))

    chords = [
        ([60, 64, 67], 8),  # C major
        ([57, 60, 64], 8),  # A minor
        ([62, 65, 69], 8),  # D minor
        ([55, 59, 62], 8),  # G major
    ]
    melody = [60, 62, 64, 65, 67, 69, 71, 72]

    audio = array("h")
    sample_index = 0
    melody_step = 0
    for chord_notes, subbeats in chords:
        chord_freqs = [midi_to_freq(note) for note in chord_notes]
        for _ in range(subbeats):
            melody_freq = midi_to_freq(melody[melody_step % len(melody)])
            for _ in range(samples_per_subbeat):
                t = sample_index / sample_rate
                chord_sample = sum(math.sin(2 * math.pi * freq * t) for freq in chord_freqs)
                melody_sample = math.sin(2 * math.pi * melody_freq * t)
                value = max(-1.0, min(1.0, 0.18 * chord_sample + 0.12 * melody_sample))
                sample = int(value * 32767)
                audio.append(sample)
                audio.append(sample)
                sample_index += 1
            melody_step += 1
    return audio


def synth_score(sample_rate: int) -> array:
    low, high = midi_to_freq(84), midi_to_freq(91)

    def voice(t: float, progress: float) -> float:
        freq = low if progress < 0.4 else high
        return 0.5 * math.sin(2 * math.pi * freq * t) * (1.0 - progress)

    return _render(sample_rate, 0.18, voice)


def synth_rain(sample_rate: int) -> array:
    rng = random.Random(7)
    state = {"last": 0.0}

    def voice(t: float, progress: float) -> float:
        # one-pole low-pass over white noise
        state["last"] += 0.08 * (rng.uniform(-1.0, 1.0) - state["last"])
        return 2.5 * state["last"]

    return _render(sample_rate, 2.0, voice)


def synth_game_over(sample_rate: int) -> array:
    start, end = 440.0, 110.0
    seconds = 0.9

    def voice(t: float, progress: float) -> float:
        # the phase of an exponential sweep from start to end
        ratio = end / start
        phase = start * seconds * (ratio ** progress - 1) / math.log(ratio)
        return 0.45 * math.sin(2 * math.pi * phase) * (1.0 - progress)

    return _render(sample_rate, seconds, voice)


SYNTHS = {
    Cue.MUSIC: synth_music,
    Cue.SCORE: synth_score,
    Cue.RAIN: synth_rain,
    Cue.GAME_OVER: synth_game_over,
}


class AudioPlayer:
    """Plays the four cues; goes silent when there is no audio device."""

    def __init__(self, modes: ModeConfig, sounds: Optional[Dict[Cue, object]] = None) -> None:
        self.modes = modes
        self.channels: Dict[Cue, object] = {}
        if sounds is None:
            sounds = self._setup_audio()
        self.sounds = sounds

    @property
    def available(self) -> bool:
        return bool(self.sounds)

    def _setup_audio(self) -> Dict[Cue, object]:
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init(frequency=44100, size=-16, channels=2)
        except pygame.error as exc:
            logger.warning("audio disabled: %s", exc)
            return {}

        init_args = pygame.mixer.get_init()
        if init_args is None:
            logger.warning("audio disabled: mixer did not initialise")
            return {}
        sample_rate = init_args[0]

        sounds: Dict[Cue, object] = {}
        for cue, synth in SYNTHS.items():
            try:
                sound = pygame.mixer.Sound(buffer=synth(sample_rate).tobytes())
            except pygame.error as exc:
                logger.warning("could not build %s cue: %s", cue.value, exc)
                continue
            sound.set_volume(VOLUMES[cue])
            sounds[cue] = sound
        return sounds

    def _enabled(self, cue: Cue) -> bool:
        if cue is Cue.MUSIC:
            return self.modes.music_enabled
        return self.modes.sfx_enabled

    def _busy(self, cue: Cue) -> bool:
        channel = self.channels.get(cue)
        return channel is not None and channel.get_busy()

    def play(self, cue: Cue) -> None:
        sound = self.sounds.get(cue)
        if sound is None or not self._enabled(cue):
            return
        if cue in LOOPING_CUES:
            if self._busy(cue):
                return
            loops = -1
        else:
            sound.stop()
            loops = 0
        try:
            channel = sound.play(loops=loops)
        except pygame.error as exc:
            logger.warning("could not play %s cue: %s", cue.value, exc)
            return
        if channel is not None:
            self.channels[cue] = channel

    def stop(self, cue: Cue) -> None:
        sound = self.sounds.get(cue)
        if sound is not None:
            sound.stop()
        self.channels.pop(cue, None)

    def apply(self, effect: Effect) -> None:
        if isinstance(effect, PlayCue):
            self.play(effect.cue)
        elif isinstance(effect, (StopCue, RewindCue)):
            # a stopped sound starts over on the next play
            self.stop(effect.cue)
