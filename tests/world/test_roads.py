import random

import pytest

from citygrid.world.roads import Axis, RoadLine, RoadLineSet, select_road_lines
from citygrid.world.settings import LayoutSettings


def test_add_rejects_adjacent_lines():
    roads = RoadLineSet(10)
    assert roads.add(Axis.ROW, 4)
    assert not roads.add(Axis.ROW, 5)
    assert not roads.add(Axis.ROW, 3)
    # Other axis is independent.
    assert roads.add(Axis.COL, 5)
    assert roads.add(Axis.ROW, 6)

    assert roads.rows() == [4, 6]
    assert roads.cols() == [5]


@pytest.mark.parametrize("index", [0, 1, 8, 9])
def test_add_rejects_edge_margin(index):
    roads = RoadLineSet(10)
    assert not roads.add(Axis.COL, index)
    assert len(roads) == 0


def test_is_road_includes_grid_edge():
    roads = RoadLineSet(6)
    roads.add(Axis.COL, 2)

    assert roads.is_road(0, 3)
    assert roads.is_road(3, 5)
    assert roads.is_road(3, 2)
    assert not roads.is_road(3, 3)


def test_membership_and_iteration():
    roads = RoadLineSet(10)
    roads.add(Axis.COL, 6)
    roads.add(Axis.ROW, 2)

    assert RoadLine(Axis.ROW, 2) in roads
    assert list(roads) == [RoadLine(Axis.COL, 6), RoadLine(Axis.ROW, 2)]


@pytest.mark.parametrize("seed", range(20))
@pytest.mark.parametrize("n", [5, 6, 9, 16, 40])
def test_selected_lines_respect_invariants(seed, n):
    settings = LayoutSettings(world_length=n, road_probability=1.0)
    roads = select_road_lines(settings, random.Random(seed))

    for axis_indices in (roads.rows(), roads.cols()):
        for a, b in zip(axis_indices, axis_indices[1:]):
            assert b - a != 1
        for idx in axis_indices:
            assert idx not in (0, 1, n - 2, n - 1)


def test_zero_probability_selects_nothing():
    settings = LayoutSettings(world_length=30, road_probability=0.0)
    assert len(select_road_lines(settings, random.Random(1))) == 0


def test_road_count_is_an_upper_bound():
    settings = LayoutSettings(world_length=12, road_probability=1.0)
    roads = select_road_lines(settings, random.Random(3))
    assert 0 < len(roads) <= settings.road_count


def test_small_grid_draws_nothing():
    rng = random.Random(5)
    state = rng.getstate()
    roads = select_road_lines(LayoutSettings(world_length=3), rng)

    assert len(roads) == 0
    assert rng.getstate() == state
