"""Tests for the coverage registry and the novelty filter stage."""

from __future__ import annotations

from track_coords.models import STATUS_KEPT, STATUS_REDUNDANT, STATUS_UNTYPED, Coordinate
from track_coords.stages import NoveltyRegistry, filter_novel_tracks


def test_registry_claims_coarse_cells_once() -> None:
    registry = NoveltyRegistry(digits=4)
    assert registry.claim(Coordinate(51.48001, -3.18002)) is True
    # Same 4-decimal cell.
    assert registry.claim(Coordinate(51.48004, -3.18001)) is False
    assert registry.claim(Coordinate(51.48001, -3.18012)) is True
    assert len(registry) == 2
    assert Coordinate(51.4800, -3.1800) in registry
    assert Coordinate(51.4810, -3.1800) not in registry


def test_registry_size_is_monotonic(track_factory) -> None:
    registry = NoveltyRegistry()
    sizes = [len(registry)]
    for points in ([(1, 1), (2, 2)], [(1, 1)], [(3, 3), (2, 2)], []):
        registry.claim_track(track_factory("t", points))
        sizes.append(len(registry))
    assert sizes == sorted(sizes)
    assert sizes[-1] == 3


def test_first_track_with_new_cells_is_kept(track_factory) -> None:
    tracks = [track_factory("a", [(1, 1), (2, 2)])]
    outcome = filter_novel_tracks(tracks)
    assert [t.name for t in tracks] == ["a"]
    assert outcome.removed == 0
    assert tracks[0].status == STATUS_KEPT


def test_track_covered_by_earlier_tracks_is_dropped(track_factory) -> None:
    a = track_factory("a", [(1, 1), (2, 2)])
    b = track_factory("b", [(3, 3)])
    c = track_factory("c", [(3.00001, 3.00001), (1, 1), (2, 2)])
    tracks = [a, b, c]

    outcome = filter_novel_tracks(tracks)

    assert tracks == [a, b]
    assert outcome.redundant == [c]
    assert c.status == STATUS_REDUNDANT
    assert outcome.claimed_cells == {None: 3}


def test_partially_new_track_is_kept(track_factory) -> None:
    a = track_factory("a", [(1, 1), (2, 2)])
    b = track_factory("b", [(1, 1), (2, 2), (4, 4)])
    tracks = [a, b]
    filter_novel_tracks(tracks)
    assert tracks == [a, b]


def test_order_decides_which_track_survives(track_factory) -> None:
    short = track_factory("short", [(1, 1)])
    long = track_factory("long", [(1, 1), (2, 2)])

    tracks = [long, short]
    filter_novel_tracks(tracks)
    assert tracks == [long]

    short2 = track_factory("short", [(1, 1)])
    long2 = track_factory("long", [(1, 1), (2, 2)])
    tracks = [short2, long2]
    filter_novel_tracks(tracks)
    assert tracks == [short2, long2]


def test_empty_track_is_dropped(track_factory) -> None:
    empty = track_factory("empty", [])
    tracks = [empty]
    outcome = filter_novel_tracks(tracks)
    assert tracks == []
    assert outcome.redundant == [empty]


def test_split_by_type_uses_separate_registries(track_factory) -> None:
    ride = track_factory("ride", [(1, 1), (2, 2)], activity_type="cycling")
    run = track_factory("run", [(1, 1), (2, 2)], activity_type="running")
    run_again = track_factory("run2", [(2, 2)], activity_type="running")
    tracks = [ride, run, run_again]

    outcome = filter_novel_tracks(tracks, split_by_type=True)

    assert tracks == [ride, run]
    assert outcome.redundant == [run_again]
    assert outcome.claimed_cells == {"cycling": 2, "running": 2}


def test_split_by_type_drops_missing_and_unknown_types(track_factory) -> None:
    unlabeled = track_factory("none", [(1, 1)])
    swim = track_factory("swim", [(2, 2)], activity_type="swimming")
    walk = track_factory("walk", [(1, 1)], activity_type="walking")
    tracks = [unlabeled, swim, walk]

    outcome = filter_novel_tracks(tracks, split_by_type=True)

    assert tracks == [walk]
    assert outcome.untyped == [unlabeled, swim]
    assert unlabeled.status == STATUS_UNTYPED
    assert "missing" in unlabeled.reason
    assert "swimming" in swim.reason


def test_without_split_types_share_one_registry(track_factory) -> None:
    ride = track_factory("ride", [(1, 1)], activity_type="cycling")
    run = track_factory("run", [(1, 1)], activity_type="running")
    swim = track_factory("swim", [(5, 5)], activity_type="swimming")
    tracks = [ride, run, swim]

    filter_novel_tracks(tracks)

    assert tracks == [ride, swim]


def test_known_types_can_be_overridden(track_factory) -> None:
    swim = track_factory("swim", [(2, 2)], activity_type="swimming")
    tracks = [swim]
    filter_novel_tracks(tracks, split_by_type=True, known_types={"swimming"})
    assert tracks == [swim]
