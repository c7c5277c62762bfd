import pytest

from pixelflap.audio import AudioPlayer, midi_to_freq, synth_game_over, synth_score
from pixelflap.effects import Cue, PlayCue, RewindCue, SetPrompt, StopCue
from pixelflap.modes import ModeConfig


class FakeChannel:
    def __init__(self):
        self.busy = True

    def get_busy(self):
        return self.busy


class FakeSound:
    def __init__(self):
        self.plays = []
        self.stops = 0
        self.channel = None

    def play(self, loops=0):
        self.plays.append(loops)
        self.channel = FakeChannel()
        return self.channel

    def stop(self):
        self.stops += 1
        if self.channel is not None:
            self.channel.busy = False


@pytest.fixture
def sounds():
    return {cue: FakeSound() for cue in Cue}


def test_music_loops_and_does_not_restart_while_playing(sounds):
    player = AudioPlayer(ModeConfig(), sounds)
    player.apply(PlayCue(Cue.MUSIC))
    player.apply(PlayCue(Cue.MUSIC))
    assert sounds[Cue.MUSIC].plays == [-1]


def test_rewind_then_play_starts_over(sounds):
    player = AudioPlayer(ModeConfig(), sounds)
    player.apply(PlayCue(Cue.MUSIC))
    player.apply(RewindCue(Cue.MUSIC))
    player.apply(PlayCue(Cue.MUSIC))
    assert sounds[Cue.MUSIC].plays == [-1, -1]


def test_one_shot_cues_rewind_before_playing(sounds):
    player = AudioPlayer(ModeConfig(), sounds)
    player.apply(PlayCue(Cue.SCORE))
    player.apply(PlayCue(Cue.SCORE))
    assert sounds[Cue.SCORE].plays == [0, 0]
    assert sounds[Cue.SCORE].stops == 2


def test_flags_gate_cues(sounds):
    player = AudioPlayer(ModeConfig(music_enabled=False, sfx_enabled=False), sounds)
    for cue in Cue:
        player.apply(PlayCue(cue))
    assert all(sound.plays == [] for sound in sounds.values())


def test_music_flag_does_not_mute_effects(sounds):
    player = AudioPlayer(ModeConfig(music_enabled=False), sounds)
    player.apply(PlayCue(Cue.GAME_OVER))
    player.apply(PlayCue(Cue.MUSIC))
    assert sounds[Cue.GAME_OVER].plays == [0]
    assert sounds[Cue.MUSIC].plays == []


def test_stop_and_unrelated_effects(sounds):
    player = AudioPlayer(ModeConfig(), sounds)
    player.apply(PlayCue(Cue.RAIN))
    player.apply(StopCue(Cue.RAIN))
    player.apply(SetPrompt("ignored"))
    assert sounds[Cue.RAIN].stops == 1
    assert Cue.RAIN not in player.channels


def test_silent_player_ignores_everything():
    player = AudioPlayer(ModeConfig(), {})
    assert not player.available
    player.apply(PlayCue(Cue.MUSIC))
    player.apply(StopCue(Cue.MUSIC))


def test_synthesised_buffers_are_stereo_and_in_range():
    for synth in (synth_score, synth_game_over):
        samples = synth(8000)
        assert len(samples) > 0
        assert len(samples) % 2 == 0
        assert max(abs(s) for s in samples) <= 32767


def test_midi_a4_is_440():
    assert midi_to_freq(69) == pytest.approx(440.0)
    assert midi_to_freq(81) == pytest.approx(880.0)
