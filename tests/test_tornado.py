import math

import pytest

from spacetensor.tornado import EmSource, TornadoArray


def make_array():
    return TornadoArray.ring(4, 1.0, 0.0, 0.0, 0.0, 0.3, 1.0, 4.0)


def test_tornado_active_index():
    arr = make_array()
    assert arr.active_index(0.0) == 0
    assert arr.active_index(1.0) == 1
    assert arr.active_index(2.0) == 2
    assert arr.active_index(3.0) == 3
    assert arr.active_index(4.0) == 0


def test_active_index_negative_time_wraps():
    arr = make_array()
    assert arr.active_index(-1.0) == 3


def test_tornado_potential_at_source_centre():
    src0 = make_array().sources[0]
    pot = src0.potential_at([src0.cx, src0.cy, src0.cz])
    for v in pot:
        assert abs(v) < 1e-14


def test_tornado_potential_nonzero_offcenter():
    src0 = make_array().sources[0]
    pot = src0.potential_at([src0.cx, src0.cy + 0.1, 0.0])
    mag = math.sqrt(sum(v * v for v in pot))
    assert mag > 1e-6


def test_ring_positions():
    arr = make_array()
    assert len(arr.sources) == 4
    assert arr.sources[0].cx == pytest.approx(1.0)
    assert arr.sources[0].cy == pytest.approx(0.0)
    assert arr.sources[1].cx == pytest.approx(0.0, abs=1e-12)
    assert arr.sources[1].cy == pytest.approx(1.0)
    assert arr.sources[2].cx == pytest.approx(-1.0)
    assert all(s.sigma == 0.3 and s.amplitude == 1.0 for s in arr.sources)


def test_ring_requires_two_sources():
    with pytest.raises(ValueError):
        TornadoArray.ring(1, 1.0, 0.0, 0.0, 0.0, 0.3, 1.0, 4.0)


def test_source_potential_values():
    src = EmSource(cx=0.0, cy=0.0, cz=0.0, amplitude=2.0, sigma=1.0)
    pot = src.potential_at([1.0, 0.0, 0.0])
    gauss = math.exp(-0.5)
    assert pot[0] == pytest.approx(0.0)
    assert pot[1] == pytest.approx(gauss)
    assert pot[2] == 0.0
    assert pot[3] == 0.0


def test_array_potential_uses_active_source():
    arr = make_array()
    x = [0.5, 0.2, 0.0]
    assert arr.potential_at(x, 1.0) == list(arr.sources[1].potential_at(x))
    assert arr.potential_at(x, 2.5) == list(arr.sources[2].potential_at(x))


def test_zero_amplitude_gives_zero_potential():
    arr = TornadoArray.ring(4, 0.3, 0.0, 0.0, 0.0, 0.1, 0.0, 1.0)
    assert all(v == 0.0 for v in arr.potential_at([0.1, 0.2, 0.0], 0.0))