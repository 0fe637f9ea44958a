from __future__ import annotations

import asyncio

import pytest

from careerhub.db.gateway import DataAccessError, TableGateway, eq
from careerhub.schemas.user import CurrentUser
from careerhub.services.recommendation_board import BoardStatus, RecommendationBoard
from factories import add_career_path, add_course, add_recommendation, enroll


class FlakyGateway(TableGateway):
    """Fails the first ``failures`` calls of one operation on the recommendations table."""

    def __init__(self, inner: TableGateway, op: str, failures: int) -> None:
        super().__init__()
        self.inner = inner
        self.op = op
        self.failures = failures
        self.calls = 0

    def _maybe_fail(self, op: str, table: str) -> None:
        if op == self.op and table == "recommendations":
            self.calls += 1
            if self.calls <= self.failures:
                raise DataAccessError(f"{op} failed")

    async def select(self, table, **kwargs):
        self._maybe_fail("select", table)
        return await self.inner.select(table, **kwargs)

    async def insert(self, table, rows):
        return await self.inner.insert(table, rows)

    async def update(self, table, values, **kwargs):
        self._maybe_fail("update", table)
        return await self.inner.update(table, values, **kwargs)


def _seed_catalog(user_id: str) -> None:
    for cid in ["C1", "C2", "C3", "C4", "C5"]:
        add_course(cid)
    for pid in ["P1", "P2", "P3"]:
        add_career_path(pid)
    enroll(user_id, "C1")


def test_first_load_generates_then_enriches(gateway, user_id) -> None:
    _seed_catalog(user_id)
    board = RecommendationBoard(gateway, CurrentUser(id=user_id))
    assert board.status is BoardStatus.IDLE

    items = asyncio.run(board.load())

    assert board.status is BoardStatus.POPULATED
    assert len(items) == 5
    assert {i.target_id for i in items if i.recommendation_type == "course"} == {"C2", "C3", "C4"}
    assert {i.target_id for i in items if i.recommendation_type == "career_path"} == {"P1", "P2"}
    assert all(i.target is not None for i in items)
    scores = [i.confidence_score for i in items]
    assert scores == sorted(scores, reverse=True)


def test_existing_recommendations_are_not_regenerated(gateway, user_id) -> None:
    _seed_catalog(user_id)
    add_recommendation(user_id, "course", "C5", 90)

    items = asyncio.run(RecommendationBoard(gateway, CurrentUser(id=user_id)).load())

    assert [i.target_id for i in items] == ["C5"]
    assert len(asyncio.run(gateway.select("recommendations", where=[eq("user_id", user_id)]))) == 1


def test_empty_catalog_leaves_board_empty(gateway, user_id) -> None:
    board = RecommendationBoard(gateway, CurrentUser(id=user_id))
    assert asyncio.run(board.load()) == []
    assert board.status is BoardStatus.EMPTY


def test_load_error_falls_back_to_generation(gateway, user_id) -> None:
    _seed_catalog(user_id)
    flaky = FlakyGateway(gateway, op="select", failures=1)

    board = RecommendationBoard(flaky, CurrentUser(id=user_id))
    items = asyncio.run(board.load())

    assert board.status is BoardStatus.POPULATED
    assert len(items) == 5


def test_reload_failure_after_generation_ends_empty(gateway, user_id) -> None:
    _seed_catalog(user_id)
    flaky = FlakyGateway(gateway, op="select", failures=2)

    board = RecommendationBoard(flaky, CurrentUser(id=user_id))
    assert asyncio.run(board.load()) == []
    assert board.status is BoardStatus.EMPTY


def test_filtering_is_non_destructive(gateway, user_id) -> None:
    _seed_catalog(user_id)
    board = RecommendationBoard(gateway, CurrentUser(id=user_id))
    original = asyncio.run(board.load())

    only_paths = board.filtered("career_path")
    assert {i.recommendation_type for i in only_paths} == {"career_path"}
    assert len(only_paths) == 2
    assert board.filtered("mentor") == []

    restored = board.filtered("all")
    assert [(i.id, i.confidence_score) for i in restored] == [(i.id, i.confidence_score) for i in original]
    assert board.filtered() == restored


def test_mark_viewed_persists_then_patches(gateway, user_id) -> None:
    add_course("C1")
    rec_id = add_recommendation(user_id, "course", "C1", 80)
    board = RecommendationBoard(gateway, CurrentUser(id=user_id))
    asyncio.run(board.load())

    item = asyncio.run(board.mark_viewed(rec_id))
    assert item.is_viewed is True
    assert board.items[0].is_viewed is True
    assert board.status is BoardStatus.POPULATED

    row = asyncio.run(gateway.select_one("recommendations", where=[eq("id", rec_id)]))
    assert row["is_viewed"] is True

    # Monotonic: marking again keeps it viewed, and a fresh load agrees.
    asyncio.run(board.mark_viewed(rec_id))
    reloaded = asyncio.run(RecommendationBoard(gateway, CurrentUser(id=user_id)).load())
    assert reloaded[0].is_viewed is True


def test_mark_viewed_retries_transient_failure(gateway, user_id) -> None:
    add_course("C1")
    rec_id = add_recommendation(user_id, "course", "C1", 80)
    flaky = FlakyGateway(gateway, op="update", failures=1)
    board = RecommendationBoard(flaky, CurrentUser(id=user_id), mark_viewed_retries=1)
    asyncio.run(board.load())

    assert asyncio.run(board.mark_viewed(rec_id)).is_viewed is True
    assert flaky.calls == 2


def test_mark_viewed_failure_leaves_local_copy_untouched(gateway, user_id) -> None:
    add_course("C1")
    rec_id = add_recommendation(user_id, "course", "C1", 80)
    flaky = FlakyGateway(gateway, op="update", failures=5)
    board = RecommendationBoard(flaky, CurrentUser(id=user_id), mark_viewed_retries=2)
    asyncio.run(board.load())

    with pytest.raises(DataAccessError):
        asyncio.run(board.mark_viewed(rec_id))

    assert flaky.calls == 3
    assert board.items[0].is_viewed is False
    assert board.status is BoardStatus.POPULATED


def test_mark_viewed_unknown_or_foreign_id(gateway, user_id) -> None:
    add_course("C1")
    add_recommendation(user_id, "course", "C1", 80)
    other = add_recommendation("someone-else", "course", "C1", 70)
    board = RecommendationBoard(gateway, CurrentUser(id=user_id))
    asyncio.run(board.load())

    with pytest.raises(LookupError):
        asyncio.run(board.mark_viewed("missing"))
    with pytest.raises(LookupError):
        asyncio.run(board.mark_viewed(other))


def test_load_without_generation_leaves_new_user_empty(gateway, user_id) -> None:
    _seed_catalog(user_id)
    board = RecommendationBoard(gateway, CurrentUser(id=user_id))

    assert asyncio.run(board.load(generate=False)) == []
    assert board.status is BoardStatus.EMPTY
    assert asyncio.run(gateway.select("recommendations", where=[eq("user_id", user_id)])) == []
