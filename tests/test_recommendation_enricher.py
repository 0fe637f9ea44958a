from __future__ import annotations

import asyncio

from careerhub.database import SessionLocal
from careerhub.db.gateway import DataAccessError, TableGateway
from careerhub.models import CareerPath
from careerhub.schemas.recommendation import CareerPathTarget, CourseTarget, JobTarget, MentorTarget, Recommendation
from careerhub.services.recommendation_enricher import RecommendationEnricher
from factories import add_career_path, add_course, add_job, add_mentor


def _rec(rec_id: str, kind: str, target_id: str, score: int = 80) -> Recommendation:
    return Recommendation(
        id=rec_id,
        user_id="u1",
        recommendation_type=kind,
        target_id=target_id,
        reason="r",
        confidence_score=score,
    )


class SlowFirstGateway(TableGateway):
    """Delays early lookups longest so completion order is the reverse of input order."""

    def __init__(self, inner: TableGateway, delays: dict[str, float]) -> None:
        super().__init__()
        self.inner = inner
        self.delays = delays
        self.completed: list[str] = []

    async def select(self, table, **kwargs):
        target_id = kwargs["where"][0].value
        await asyncio.sleep(self.delays.get(target_id, 0))
        rows = await self.inner.select(table, **kwargs)
        self.completed.append(target_id)
        return rows


class BrokenTableGateway(TableGateway):
    def __init__(self, inner: TableGateway, broken: str) -> None:
        super().__init__()
        self.inner = inner
        self.broken = broken

    async def select(self, table, **kwargs):
        if table == self.broken:
            raise DataAccessError("connection reset")
        return await self.inner.select(table, **kwargs)


def test_enrichment_resolves_each_type(gateway) -> None:
    add_course("c1", title="Python Foundations")
    add_career_path("p1", title="Data Analyst")
    add_job("j1", recruiter_id=None, title="ML Engineer")
    add_mentor("m1", "mentor-user", full_name="Ada Park")

    recs = [_rec("r1", "course", "c1"), _rec("r2", "career_path", "p1"), _rec("r3", "job", "j1"), _rec("r4", "mentor", "m1")]
    enriched = asyncio.run(RecommendationEnricher(gateway).enrich(recs))

    assert isinstance(enriched[0].target, CourseTarget)
    assert enriched[0].target.title == "Python Foundations"
    assert isinstance(enriched[1].target, CareerPathTarget)
    assert enriched[1].target.title == "Data Analyst"
    assert isinstance(enriched[2].target, JobTarget)
    assert enriched[2].target.title == "ML Engineer"
    assert isinstance(enriched[3].target, MentorTarget)
    assert enriched[3].target.title == "Ada Park"
    assert enriched[3].target.expertise_areas == ["Python"]


def test_enrichment_preserves_input_order_despite_completion_order(gateway) -> None:
    ids = [f"c{i}" for i in range(5)]
    for cid in ids:
        add_course(cid)

    delays = {cid: 0.05 * (len(ids) - i) for i, cid in enumerate(ids)}
    slow = SlowFirstGateway(gateway, delays)
    recs = [_rec(f"r{i}", "course", cid, score=90 - i) for i, cid in enumerate(ids)]

    enriched = asyncio.run(RecommendationEnricher(slow).enrich(recs))

    assert slow.completed == list(reversed(ids))
    assert [e.id for e in enriched] == [r.id for r in recs]
    assert [e.target.id for e in enriched] == ids
    assert [e.confidence_score for e in enriched] == [r.confidence_score for r in recs]


def test_deleted_career_path_enriches_to_no_target(gateway) -> None:
    add_career_path("p-gone")
    with SessionLocal() as db:
        db.query(CareerPath).filter(CareerPath.id == "p-gone").delete()
        db.commit()

    enriched = asyncio.run(RecommendationEnricher(gateway).enrich([_rec("r1", "career_path", "p-gone")]))

    assert len(enriched) == 1
    assert enriched[0].target is None
    assert enriched[0].id == "r1"


def test_unknown_type_and_failed_lookup_yield_no_target(gateway) -> None:
    add_course("c1")
    add_career_path("p1")
    recs = [_rec("r1", "webinar", "w1"), _rec("r2", "career_path", "p1"), _rec("r3", "course", "c1")]

    enriched = asyncio.run(RecommendationEnricher(BrokenTableGateway(gateway, "career_paths")).enrich(recs))

    assert [e.id for e in enriched] == ["r1", "r2", "r3"]
    assert enriched[0].target is None
    assert enriched[1].target is None
    assert isinstance(enriched[2].target, CourseTarget)


def test_enrichment_accepts_raw_rows_and_empty_input(gateway) -> None:
    add_course("c1")
    row = _rec("r1", "course", "c1").model_dump()

    assert asyncio.run(RecommendationEnricher(gateway).enrich([])) == []
    enriched = asyncio.run(RecommendationEnricher(gateway).enrich([row]))
    assert enriched[0].target.id == "c1"
