import numpy as np
import pytest
from sinegen.engine import SignalGenerator
from sinegen.iq import quadrature_mix

def test_points_fit_constellation():
    gen = SignalGenerator()
    t = gen.generate_time_array(1.0, 1000)
    s = gen.generate_frequency_modulated(3.0, 50.0, 2.0, 2.0, 1.0, 1000)
    i, q = quadrature_mix(s, t, 50.0)

    assert len(i) == len(q) == 1000
    assert np.max(np.hypot(i, q)) == pytest.approx(1.0)

def test_mixing_formula():
    t = np.array([0.0, 0.25])
    i, q = quadrature_mix([1.0, 1.0], t, 1.0)

    np.testing.assert_allclose(i, [1.0, 0.0], atol=1e-12)
    np.testing.assert_allclose(q, [0.0, -1.0], atol=1e-12)

def test_empty_and_silent():
    i, q = quadrature_mix([], [], 10.0)
    assert len(i) == len(q) == 0

    i, q = quadrature_mix([0.0, 0.0], [0.0, 0.1], 10.0)
    np.testing.assert_array_equal(i, [0.0, 0.0])

def test_shape_mismatch():
    with pytest.raises(ValueError):
        quadrature_mix([1.0, 2.0], [0.0], 1.0)
