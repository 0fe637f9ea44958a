# recommendations.py
from fastapi import APIRouter, Depends, HTTPException, Query, status

from careerhub.db.gateway import TableGateway
from careerhub.routers.dependencies import get_current_user, get_gateway
from careerhub.schemas.recommendation import (
    RECOMMENDATION_TYPES,
    EnrichedRecommendation,
    GenerateRecommendationsResponse,
    Recommendation,
    RecommendationBoardResponse,
)
from careerhub.schemas.user import CurrentUser
from careerhub.services.recommendation_board import ALL_TYPES, RecommendationBoard
from careerhub.services.recommendation_generator import RecommendationGenerator


router = APIRouter(prefix="/recommendations", tags=["recommendations"])


def _validate_filter(kind: str) -> str:
    if kind != ALL_TYPES and kind not in RECOMMENDATION_TYPES:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"type must be one of: {', '.join((ALL_TYPES,) + RECOMMENDATION_TYPES)}",
        )
    return kind


@router.get("", response_model=RecommendationBoardResponse)
async def list_recommendations(
    kind: str = Query(default=ALL_TYPES, alias="type"),
    gateway: TableGateway = Depends(get_gateway),
    current_user: CurrentUser = Depends(get_current_user),
) -> RecommendationBoardResponse:
    kind = _validate_filter(kind)
    board = RecommendationBoard(gateway, current_user)
    await board.load()
    return RecommendationBoardResponse(
        status=board.status.value,
        filter=kind,
        total=len(board.items),
        items=board.filtered(kind),
    )


@router.post("/{recommendation_id}/viewed", response_model=EnrichedRecommendation)
async def mark_recommendation_viewed(
    recommendation_id: str,
    gateway: TableGateway = Depends(get_gateway),
    current_user: CurrentUser = Depends(get_current_user),
) -> EnrichedRecommendation:
    board = RecommendationBoard(gateway, current_user)
    await board.load(generate=False)
    try:
        return await board.mark_viewed(recommendation_id)
    except LookupError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc


@router.post("/generate", response_model=GenerateRecommendationsResponse, status_code=status.HTTP_201_CREATED)
async def generate_recommendations(
    gateway: TableGateway = Depends(get_gateway),
    current_user: CurrentUser = Depends(get_current_user),
) -> GenerateRecommendationsResponse:
    # Runs a generation pass unconditionally; repeated calls insert another batch.
    rows = await RecommendationGenerator(gateway).generate(current_user.id)
    return GenerateRecommendationsResponse(generated=[Recommendation.model_validate(row) for row in rows])
