"""Tests for the elbow normalization layer."""

from __future__ import annotations

import random

import pytest

from elbow_routing.metrics import has_duplicate_points, is_orthogonal
from elbow_routing.normalize import (
    DegenerateConnectorWarning,
    Orientation,
    calculate_elbow,
    normalize_endpoints,
)
from elbow_routing.types import Direction, ElbowCase, Endpoint, Point
from elbow_routing.validation import InvalidCoordinateError, InvalidOvershootError

ALL_FACINGS = [None, "x+", "x-", "y+", "y-"]


def _random_endpoint(rng: random.Random) -> Endpoint:
    return Endpoint(rng.randint(-20, 20) * 5, rng.randint(-20, 20) * 5, rng.choice(ALL_FACINGS))


def _assert_points_close(actual, expected) -> None:
    assert len(actual) == len(expected)
    for got, want in zip(actual, expected):
        assert got[0] == pytest.approx(want[0], abs=1e-5)
        assert got[1] == pytest.approx(want[1], abs=1e-5)


# ---------------------------------------------------------------------------
# Orientation
# ---------------------------------------------------------------------------


class TestOrientation:
    @pytest.mark.parametrize(
        "direction", [Direction.POS_X, Direction.NEG_X, Direction.POS_Y, Direction.NEG_Y]
    )
    def test_facing_becomes_pos_x(self, direction: Direction) -> None:
        orientation = Orientation.facing_pos_x(direction)
        assert orientation.apply_direction(direction) is Direction.POS_X

    def test_none_is_identity(self) -> None:
        orientation = Orientation.facing_pos_x(Direction.NONE)
        assert orientation.apply(Point(3, -7)) == (3, -7)
        assert orientation.apply_direction(Direction.NONE) is Direction.NONE

    @pytest.mark.parametrize("direction", list(Direction))
    def test_round_trip_is_exact(self, direction: Direction) -> None:
        orientation = Orientation.facing_pos_x(direction)
        pt = Point(-1.1500000000000004, 0.30000000000000004)
        assert orientation.unapply(orientation.apply(pt)) == pt

    @pytest.mark.parametrize("direction", list(Direction))
    def test_inverse_matches_unapply(self, direction: Direction) -> None:
        orientation = Orientation.facing_pos_x(direction)
        pt = Point(12.5, -4)
        assert orientation.inverse().apply(pt) == orientation.unapply(pt)

    def test_unapply_quarter_turn(self) -> None:
        orientation = Orientation.facing_pos_x(Direction.POS_Y)
        assert orientation.apply(Point(100, 200)) == (200, -100)
        assert orientation.unapply(Point(200, -100)) == (100, 200)

    def test_neg_y_rotation(self) -> None:
        orientation = Orientation.facing_pos_x(Direction.NEG_Y)
        assert orientation.apply(Point(100, 200)) == (-200, 100)
        assert orientation.apply_direction(Direction.POS_Y) is Direction.NEG_X


# ---------------------------------------------------------------------------
# normalize_endpoints
# ---------------------------------------------------------------------------


class TestNormalizeEndpoints:
    def test_directed_start_kept_first(self) -> None:
        start, end, _, swapped = normalize_endpoints(
            Endpoint(100, 100, "y-"), Endpoint(300, 200, "y-")
        )
        assert not swapped
        assert start.direction is Direction.POS_X
        assert end.direction is Direction.POS_X

    def test_undirected_start_swapped_behind_directed_end(self) -> None:
        start, end, _, swapped = normalize_endpoints(Endpoint(0, 0), Endpoint(10, 10, "x-"))
        assert swapped
        assert start.direction is Direction.POS_X
        assert end.direction is Direction.NONE

    def test_undirected_pair_ordered_by_x_then_y(self) -> None:
        start, end, _, swapped = normalize_endpoints(Endpoint(5, 9), Endpoint(5, 1))
        assert swapped
        assert start.point == (5, 1)
        assert end.point == (5, 9)


# ---------------------------------------------------------------------------
# calculate_elbow fixtures
# ---------------------------------------------------------------------------


class TestCalculateElbow:
    def test_both_facing_neg_y(self) -> None:
        path = calculate_elbow((100, 100, "y-"), (300, 200, "y-"), overshoot=50)
        assert list(path) == [(100, 100), (100, 50), (300, 50), (300, 200)]

    def test_neg_y_to_pos_y(self) -> None:
        path = calculate_elbow((150, 100, "y-"), (450, 200, "y+"), overshoot=50)
        assert list(path) == [
            (150, 100),
            (150, 50),
            (300, 50),
            (300, 250),
            (450, 250),
            (450, 200),
        ]

    def test_both_facing_neg_x_nearly_level(self) -> None:
        p1 = Endpoint(-3.5512907000000005, 0.0002732499999993365, "x-")
        p2 = Endpoint(2.4487906999999995, -0.00027334999999961695, "x-")
        o = 0.2
        path = calculate_elbow(p1, p2, overshoot=o)
        _assert_points_close(
            path,
            [
                (p1.x, p1.y),
                (p1.x - o, p1.y),
                (p1.x - o, p1.y + o),
                (p2.x - o, p1.y + o),
                (p2.x - o, p2.y),
                (p2.x, p2.y),
            ],
        )

    def test_neg_x_to_neg_y_nearly_vertical(self) -> None:
        path = calculate_elbow(
            (-1.15, 0.30000000000000004, "x-"),
            (-1.1500000000000004, 1.15, "y-"),
            overshoot=0.2,
        )
        _assert_points_close(
            path,
            [
                (-1.15, 0.30000000000000004),
                (-1.35, 0.30000000000000004),
                (-1.35, 0.725),
                (-1.1500000000000004, 0.725),
                (-1.1500000000000004, 1.15),
            ],
        )
        assert path[0] == (-1.15, 0.30000000000000004)
        assert path[-1] == (-1.1500000000000004, 1.15)

    def test_pos_x_to_neg_x_level(self) -> None:
        path = calculate_elbow((0, 0, "x+"), (2, 0, "x-"), overshoot=0.5)
        assert list(path) == [(0, 0), (0.5, 0), (0.5, 0.5), (1.5, 0.5), (1.5, 0), (2, 0)]

    def test_pos_x_to_pos_y_has_no_duplicates(self) -> None:
        path = calculate_elbow((0, 0, "x+"), (1, 1, "y+"), overshoot=0.1)
        assert len(path) > 1
        assert not has_duplicate_points(path)

    def test_tiny_connector(self) -> None:
        with pytest.warns(DegenerateConnectorWarning):
            path = calculate_elbow((0, 0, "x+"), (0.0000001, 0.0000001, "y+"), overshoot=0.1)
        assert len(path) > 1
        assert path[0] == (0, 0)
        assert path[-1] == (0.0000001, 0.0000001)

    def test_swapped_result_runs_from_point1(self) -> None:
        path = calculate_elbow((0, 0), (100, 50, "y-"), overshoot=10)
        assert list(path) == [(0, 0), (0, 25), (100, 25), (100, 40), (100, 50)]

    def test_undirected_pair_in_reverse_order(self) -> None:
        path = calculate_elbow((100, 50), (0, 0), overshoot=10)
        assert list(path) == [(100, 50), (50, 50), (50, 0), (0, 0)]

    def test_default_overshoot(self) -> None:
        path = calculate_elbow((0, 0, "x+"), (1, 1, "x-"))
        assert list(path) == [(0, 0), (0.1, 0), (0.5, 0), (0.5, 1), (0.9, 1), (1, 1)]

    def test_observer_sees_oriented_case(self) -> None:
        seen: list[ElbowCase] = []
        calculate_elbow((100, 100, "y-"), (300, 200, "y-"), overshoot=50, on_case=seen.append)
        assert seen == [ElbowCase.POS_X_TO_POS_X]

    def test_mapping_endpoints(self) -> None:
        path = calculate_elbow(
            {"x": 0, "y": 0, "facing": "x+"},
            {"x": 100, "y": 50, "facing": "y-"},
        )
        assert list(path) == [(0, 0), (100, 0), (100, 50)]


class TestCalculateElbowErrors:
    def test_negative_overshoot(self) -> None:
        with pytest.raises(InvalidOvershootError, match="must be non-negative"):
            calculate_elbow((0, 0), (1, 1), overshoot=-1)

    def test_non_numeric_overshoot(self) -> None:
        with pytest.raises(InvalidOvershootError, match="must be a number"):
            calculate_elbow((0, 0), (1, 1), overshoot="abc")

    def test_infinite_coordinate(self) -> None:
        with pytest.raises(InvalidCoordinateError, match="All coordinates must be finite"):
            calculate_elbow((float("inf"), 0), (1, 1))

    def test_coincident_points_warn(self) -> None:
        with pytest.warns(DegenerateConnectorWarning, match="coincide"):
            path = calculate_elbow((5, 5, "x+"), (5, 5, "y-"), overshoot=1)
        assert path[0] == (5, 5)
        assert path[-1] == (5, 5)


# ---------------------------------------------------------------------------
# invariants over every facing combination
# ---------------------------------------------------------------------------


class TestCalculateElbowInvariants:
    def _sweep(self, seed: int, count: int = 400):
        rng = random.Random(seed)
        for _ in range(count):
            p1 = _random_endpoint(rng)
            p2 = _random_endpoint(rng)
            if p1.point == p2.point:
                continue
            yield p1, p2, rng.choice([0, 1, 5, 10, 25])

    def test_endpoints_exact(self) -> None:
        for p1, p2, overshoot in self._sweep(11):
            path = calculate_elbow(p1, p2, overshoot)
            assert path[0] == p1.point
            assert path[-1] == p2.point

    def test_orthogonal_without_duplicates(self) -> None:
        for p1, p2, overshoot in self._sweep(12):
            path = calculate_elbow(p1, p2, overshoot)
            assert is_orthogonal(path), (p1, p2, overshoot, path)
            assert not has_duplicate_points(path), (p1, p2, overshoot, path)

    def test_deterministic(self) -> None:
        for p1, p2, overshoot in self._sweep(13, count=50):
            assert calculate_elbow(p1, p2, overshoot) == calculate_elbow(p1, p2, overshoot)
