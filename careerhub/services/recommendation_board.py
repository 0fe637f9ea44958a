from __future__ import annotations

import logging
from enum import Enum

from careerhub.config import settings
from careerhub.db.gateway import DataAccessError, TableGateway, eq
from careerhub.schemas.recommendation import EnrichedRecommendation
from careerhub.schemas.user import CurrentUser
from careerhub.services.recommendation_enricher import RecommendationEnricher
from careerhub.services.recommendation_generator import RecommendationGenerator


logger = logging.getLogger(__name__)

ALL_TYPES = "all"


class BoardStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    POPULATED = "populated"
    EMPTY = "empty"
    UPDATING = "updating"


class RecommendationBoard:
    """In-memory recommendation list for one user.

    ``idle -> loading -> populated | empty``; filtering is a pure view over
    the loaded list and mark-viewed moves through ``updating`` for one item.
    """

    def __init__(
        self,
        gateway: TableGateway,
        user: CurrentUser,
        *,
        generator: RecommendationGenerator | None = None,
        enricher: RecommendationEnricher | None = None,
        mark_viewed_retries: int | None = None,
    ) -> None:
        self.gateway = gateway
        self.user = user
        self.generator = generator or RecommendationGenerator(gateway)
        self.enricher = enricher or RecommendationEnricher(gateway)
        self.mark_viewed_retries = (
            settings.mark_viewed_retries if mark_viewed_retries is None else max(0, mark_viewed_retries)
        )
        self.status = BoardStatus.IDLE
        self._items: list[EnrichedRecommendation] = []

    @property
    def items(self) -> list[EnrichedRecommendation]:
        return list(self._items)

    async def _fetch(self) -> list[dict]:
        return await self.gateway.select(
            "recommendations",
            where=[eq("user_id", self.user.id)],
            order_by=["-confidence_score", "-created_at"],
        )

    async def load(self, *, generate: bool = True) -> list[EnrichedRecommendation]:
        """Fetch and enrich the user's recommendations.

        With ``generate=False`` an empty or unreadable list stays empty; the
        generator only runs for the recommendations page itself.
        """

        self.status = BoardStatus.LOADING

        rows: list[dict] = []
        try:
            rows = await self._fetch()
        except DataAccessError:
            # A failed read is handled like a first-time user.
            logger.warning("recommendations.load failed user_id=%s generate=%s", self.user.id, generate)

        if not rows and generate:
            generated = await self.generator.generate(self.user.id)
            if generated:
                try:
                    rows = await self._fetch()
                except DataAccessError:
                    logger.exception("recommendations.reload failed user_id=%s", self.user.id)
                    rows = []

        self._items = await self.enricher.enrich(rows) if rows else []
        self.status = BoardStatus.POPULATED if self._items else BoardStatus.EMPTY
        return self.items

    def filtered(self, kind: str | None = None) -> list[EnrichedRecommendation]:
        if not kind or kind == ALL_TYPES:
            return list(self._items)
        return [item for item in self._items if item.recommendation_type == kind]

    async def mark_viewed(self, recommendation_id: str) -> EnrichedRecommendation:
        """Persist ``is_viewed=True`` first, then patch the in-memory copy.

        The local patch only happens after a successful write. Failed writes
        are retried ``mark_viewed_retries`` times before the error propagates
        with the local copy left untouched.
        """

        index = self._index_of(recommendation_id)
        previous = self.status
        self.status = BoardStatus.UPDATING
        try:
            await self._persist_viewed(recommendation_id)
        finally:
            self.status = previous

        patched = self._items[index].model_copy(update={"is_viewed": True})
        self._items[index] = patched
        return patched

    def _index_of(self, recommendation_id: str) -> int:
        for idx, item in enumerate(self._items):
            if item.id == recommendation_id:
                return idx
        raise LookupError(f"Recommendation {recommendation_id} not found")

    async def _persist_viewed(self, recommendation_id: str) -> None:
        attempts = 1 + self.mark_viewed_retries
        for attempt in range(1, attempts + 1):
            try:
                updated = await self.gateway.update(
                    "recommendations",
                    {"is_viewed": True},
                    where=[eq("id", recommendation_id), eq("user_id", self.user.id)],
                )
            except DataAccessError:
                if attempt < attempts:
                    logger.warning(
                        "recommendations.mark_viewed retry id=%s attempt=%d/%d",
                        recommendation_id,
                        attempt,
                        attempts,
                    )
                    continue
                raise
            if updated == 0:
                raise LookupError(f"Recommendation {recommendation_id} not found")
            return
