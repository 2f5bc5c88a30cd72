import random

import pytest

from splkit.resample_48khz import (
    Resampler8To48,
    Resampler16To48,
    Resampler48To8,
    Resampler48To16,
)


def _random_frame(length, seed):
    rng = random.Random(seed)
    return [rng.randint(-32768, 32767) for _ in range(length)]


def _check_length_and_range(resampler, n_in, n_out):
    out = resampler.process(_random_frame(n_in, 1))
    assert len(out) == n_out
    assert all(-32768 <= v <= 32767 for v in out)


def _check_agree(first, second, n_in):
    frames = [_random_frame(n_in, seed) for seed in range(3)]
    assert [first.process(f) for f in frames] == [second.process(f) for f in frames]


def _check_reset(resampler, n_in):
    frame = _random_frame(n_in, 7)
    first = resampler.process(frame)
    resampler.process(_random_frame(n_in, 8))
    resampler.reset()
    assert resampler.process(frame) == first


def _check_state_carries(primed, fresh, n_in):
    primed.process(_random_frame(n_in, 3))
    silent = [0] * n_in
    assert primed.process(silent) != fresh.process(silent)


def _check_level(resampler, n_in, n_out):
    level = 10000
    out = []
    for _ in range(4):
        out = resampler.process([level] * n_in)
    tail = out[n_out // 2:]
    assert all(abs(v - level) < 500 for v in tail)


def test_output_length_and_range():
    _check_length_and_range(Resampler48To16(), 480, 160)
    _check_length_and_range(Resampler16To48(), 160, 480)
    _check_length_and_range(Resampler48To8(), 480, 80)
    _check_length_and_range(Resampler8To48(), 80, 480)


def test_wrong_frame_length_raises():
    with pytest.raises(ValueError):
        Resampler48To16().process([0] * 481)
    with pytest.raises(ValueError):
        Resampler16To48().process([0] * 161)
    with pytest.raises(ValueError):
        Resampler48To8().process([0] * 481)
    with pytest.raises(ValueError):
        Resampler8To48().process([0] * 81)


def test_fresh_instances_agree():
    _check_agree(Resampler48To16(), Resampler48To16(), 480)
    _check_agree(Resampler16To48(), Resampler16To48(), 160)
    _check_agree(Resampler48To8(), Resampler48To8(), 480)
    _check_agree(Resampler8To48(), Resampler8To48(), 80)


def test_reset_restores_initial_behaviour():
    _check_reset(Resampler48To16(), 480)
    _check_reset(Resampler16To48(), 160)
    _check_reset(Resampler48To8(), 480)
    _check_reset(Resampler8To48(), 80)


def test_state_carries_between_frames():
    _check_state_carries(Resampler48To16(), Resampler48To16(), 480)
    _check_state_carries(Resampler16To48(), Resampler16To48(), 160)
    _check_state_carries(Resampler48To8(), Resampler48To8(), 480)
    _check_state_carries(Resampler8To48(), Resampler8To48(), 80)


def test_constant_signal_keeps_its_level():
    _check_level(Resampler48To16(), 480, 160)
    _check_level(Resampler16To48(), 160, 480)
    _check_level(Resampler48To8(), 480, 80)
    _check_level(Resampler8To48(), 80, 480)