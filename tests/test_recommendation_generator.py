from __future__ import annotations

import asyncio
import random

from careerhub.db.gateway import DataAccessError, TableGateway, eq
from careerhub.services.recommendation_generator import (
    CAREER_PATH_REASON,
    RecommendationGenerator,
    course_reason,
)
from factories import add_career_path, add_course, enroll


class FailingGateway(TableGateway):
    def __init__(self, inner: TableGateway, fail_on: set[str]) -> None:
        super().__init__()
        self.inner = inner
        self.fail_on = fail_on

    async def select(self, table, **kwargs):
        if table in self.fail_on:
            raise DataAccessError(f"boom: {table}")
        return await self.inner.select(table, **kwargs)

    async def insert(self, table, rows):
        if table in self.fail_on:
            raise DataAccessError(f"boom: {table}")
        return await self.inner.insert(table, rows)


def _seed_scenario(user_id: str) -> None:
    for cid in ["C1", "C2", "C3", "C4", "C5"]:
        add_course(cid, difficulty_level="intermediate")
    for pid in ["P1", "P2", "P3"]:
        add_career_path(pid)
    enroll(user_id, "C1")


def test_generation_skips_enrolled_course_and_takes_catalog_order(gateway, user_id) -> None:
    _seed_scenario(user_id)

    generated = asyncio.run(RecommendationGenerator(gateway, rng=random.Random(7)).generate(user_id))

    courses = [r["target_id"] for r in generated if r["recommendation_type"] == "course"]
    paths = [r["target_id"] for r in generated if r["recommendation_type"] == "career_path"]
    assert courses == ["C2", "C3", "C4"]
    assert paths == ["P1", "P2"]
    assert "C1" not in courses

    stored = asyncio.run(gateway.select("recommendations", where=[eq("user_id", user_id)]))
    assert len(stored) == 5
    assert all(row["is_viewed"] is False for row in stored)


def test_generated_scores_and_reasons_follow_their_bands(gateway, user_id) -> None:
    _seed_scenario(user_id)

    for seed in range(20):
        generated = asyncio.run(RecommendationGenerator(gateway, rng=random.Random(seed)).generate(f"{user_id}-{seed}"))
        for row in generated:
            if row["recommendation_type"] == "course":
                assert 75 <= row["confidence_score"] < 95
                assert row["reason"] == course_reason("intermediate")
                assert "intermediate course" in row["reason"]
            else:
                assert 70 <= row["confidence_score"] < 85
                assert row["reason"] == CAREER_PATH_REASON


def test_generation_caps_at_five_rows(gateway, user_id) -> None:
    for i in range(25):
        add_course(f"course-{i:02d}")
    for i in range(6):
        add_career_path(f"path-{i}")

    generated = asyncio.run(RecommendationGenerator(gateway).generate(user_id))

    assert len(generated) == 5
    assert sum(1 for r in generated if r["recommendation_type"] == "course") == 3
    assert sum(1 for r in generated if r["recommendation_type"] == "career_path") == 2


def test_generating_twice_duplicates_the_batch(gateway, user_id) -> None:
    _seed_scenario(user_id)
    generator = RecommendationGenerator(gateway)

    asyncio.run(generator.generate(user_id))
    asyncio.run(generator.generate(user_id))

    stored = asyncio.run(gateway.select("recommendations", where=[eq("user_id", user_id)]))
    assert len(stored) == 10


def test_empty_catalog_inserts_nothing(gateway, user_id) -> None:
    generated = asyncio.run(RecommendationGenerator(gateway).generate(user_id))
    assert generated == []
    assert asyncio.run(gateway.select("recommendations")) == []


def test_only_enrolled_courses_leaves_career_paths(gateway, user_id) -> None:
    add_course("C1")
    enroll(user_id, "C1")
    add_career_path("P1")

    generated = asyncio.run(RecommendationGenerator(gateway).generate(user_id))
    assert [(r["recommendation_type"], r["target_id"]) for r in generated] == [("career_path", "P1")]


def test_data_access_failure_aborts_quietly(gateway, user_id) -> None:
    _seed_scenario(user_id)

    failing_read = FailingGateway(gateway, fail_on={"career_paths"})
    assert asyncio.run(RecommendationGenerator(failing_read).generate(user_id)) == []

    failing_write = FailingGateway(gateway, fail_on={"recommendations"})
    assert asyncio.run(RecommendationGenerator(failing_write).generate(user_id)) == []

    assert asyncio.run(gateway.select("recommendations")) == []
