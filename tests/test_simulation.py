# tests/test_simulation.py
from pcgmap.config import ParamRanges
from pcgmap.mapgen.cellular import step, step_in_place
from pcgmap.rng import MapRandom
from pcgmap.simulation import run_simulation

SMALL = ParamRanges(rows=8, cols=12)


def test_simulation_reproducible():
    a = run_simulation(MapRandom(2024), SMALL)
    b = run_simulation(MapRandom(2024), SMALL)
    assert a == b


def test_simulation_frames():
    res = run_simulation(MapRandom(31), SMALL)
    ca = res.cellular
    assert (res.initial.width, res.initial.height) == (12, 8)
    assert len(res.buffered_frames) == res.iterations
    assert len(res.in_place_frames) == res.iterations

    expect = res.initial
    for f in res.buffered_frames:
        expect = step(expect, ca.radius, ca.threshold)
        assert f == expect

    expect = res.initial.copy()
    for f in res.in_place_frames:
        step_in_place(expect, ca.radius, ca.threshold)
        assert f == expect
    # snapshots, not one shared grid
    assert len({id(f) for f in res.in_place_frames}) == res.iterations


def test_simulation_drunk_stage():
    for seed in range(10):
        res = run_simulation(MapRandom(seed), SMALL)
        start, end = res.agent_start, res.agent_end
        assert res.drunk_start_map.count_filled() == 1
        assert res.drunk_start_map.get(start.row, start.col) == 1
        assert res.drunk_map.in_bounds(end.row, end.col)
        assert res.drunk_map.get(end.row, end.col) == 1
        assert res.drunk_map.get(start.row, start.col) == 1
        assert 10 <= res.drunk.excursions <= 30
