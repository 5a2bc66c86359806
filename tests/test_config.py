# tests/test_config.py
import pytest

from pcgmap.config import DEFAULT_RANGES, CellularParams, ParamRanges, sample_cellular, sample_drunk
from pcgmap.rng import MapRandom


def test_cellular_params_validation():
    assert CellularParams(0, -1.0).in_place is False
    with pytest.raises(ValueError):
        CellularParams(-1, 3.0)


def test_default_ranges():
    r = DEFAULT_RANGES
    assert (r.rows, r.cols) == (20, 40)
    assert r.radius == (1, 2)
    assert r.iterations == (2, 5)


def test_bad_ranges():
    with pytest.raises(ValueError):
        ParamRanges(rows=0)
    with pytest.raises(ValueError):
        ParamRanges(steps=(7, 3))


def test_sampled_cellular_in_range():
    rng = MapRandom(12)
    for _ in range(100):
        ca, iterations = sample_cellular(rng)
        assert ca.radius in (1, 2)
        lo, hi = (2.0, 5.0) if ca.radius == 1 else (4.0, 8.0)
        assert lo <= ca.threshold < hi
        assert 2 <= iterations <= 5
        assert not ca.in_place


def test_sampled_drunk_in_range():
    rng = MapRandom(12)
    for _ in range(100):
        d = sample_drunk(rng)
        assert 10 <= d.excursions <= 30
        assert 3 <= d.steps <= 7
        assert 3 <= d.room_size_x <= 7
        assert 2 <= d.room_size_y <= 5
        assert 0.2 <= d.prob_room < 0.6 and 0.2 <= d.prob_turn < 0.6
        assert 0.05 <= d.prob_room_increase < 0.2 and 0.05 <= d.prob_turn_increase < 0.2


def test_sampling_reproducible():
    assert sample_drunk(MapRandom(4)) == sample_drunk(MapRandom(4))
    assert sample_cellular(MapRandom(4)) == sample_cellular(MapRandom(4))
