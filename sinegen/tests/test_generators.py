import numpy as np
import pytest
from sinegen.errors import InvalidParameter
from sinegen.generators import AmSpec, FmSpec, SineSpec, time_axis

def test_sine_spec():
    spec = SineSpec(freq=50, amp=0.5, sample_rate=8000, frame=256)
    duration = 0.1
    generator = spec.generator(duration)

    chunks = [chunk for chunk, info in generator]
    audio = np.concatenate(chunks)

    assert audio.shape == (int(8000 * duration),)
    assert audio.dtype == np.float64
    assert np.max(np.abs(audio)) <= 0.5
    assert all(len(c) <= 256 for c in chunks)

def test_chunk_info():
    spec = FmSpec(freq=100, index=3, message_freq=5, sample_rate=1000)
    infos = [info for chunk, info in spec.generator(0.5)]

    assert infos
    assert infos[0] == {"type": "fm", "freq": 100, "amp": 1.0, "index": 3, "message_freq": 5}

def test_frames_line_up_with_time_axis():
    spec = SineSpec(freq=3, phase=0.25, sample_rate=1000, frame=7)
    audio = np.concatenate([chunk for chunk, info in spec.generator(1.0)])
    t = time_axis(1.0, 1000)

    np.testing.assert_allclose(audio, np.sin(2 * np.pi * 3 * t + 0.25), atol=1e-12)

def test_am_spec_envelope():
    spec = AmSpec(amp=1.0, freq=200, message_amp=0.5, message_freq=5, sample_rate=8000)
    audio = np.concatenate([chunk for chunk, info in spec.generator(1.0)])

    # carrier amplitude times (1 + message) never exceeds 1.5
    assert np.max(np.abs(audio)) <= 1.5 + 1e-9
    assert np.max(np.abs(audio)) > 1.4

def test_fm_spec_constant_envelope():
    spec = FmSpec(amp=0.8, freq=200, index=4, message_freq=5, sample_rate=8000)
    audio = np.concatenate([chunk for chunk, info in spec.generator(1.0)])

    assert np.max(np.abs(audio)) <= 0.8 + 1e-12

def test_zero_duration_yields_nothing():
    assert list(SineSpec().generator(0)) == []

@pytest.mark.parametrize("rate", [0, -1, 44.1, True, "8000"])
def test_bad_sample_rate(rate):
    with pytest.raises(InvalidParameter):
        SineSpec(sample_rate=rate)

def test_bad_frame():
    with pytest.raises(InvalidParameter):
        SineSpec(frame=0)

@pytest.mark.parametrize("duration", [-0.1, float("nan"), float("inf")])
def test_bad_duration(duration):
    with pytest.raises(InvalidParameter):
        list(SineSpec().generator(duration))

def test_time_axis():
    np.testing.assert_allclose(time_axis(1.0, 4), [0, 0.25, 0.5, 0.75])
    assert len(time_axis(0.5, 1000)) == 500
    assert len(time_axis(0, 1000)) == 0
