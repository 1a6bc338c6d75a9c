"""Recommendation route."""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from bookwise.api.deps import get_recommendation_service
from bookwise.api.schemas import ErrorResponse, RecommendationRequest, RecommendationsResponse
from bookwise.domain.errors import InvalidQueryError
from bookwise.services.recommendation import RecommendationService, parse_query

router = APIRouter(tags=["Recommendations"])

RESPONSE_HEADERS = {"Access-Control-Allow-Origin": "*"}


@router.post(
    "/recommendations",
    responses={
        200: {"model": RecommendationsResponse},
        400: {"model": ErrorResponse},
    },
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {"schema": RecommendationRequest.model_json_schema()}
            },
        }
    },
)
async def get_recommendations(
    request: Request,
    service: RecommendationService = Depends(get_recommendation_service),
) -> JSONResponse:
    """
    Recommend catalog books for a free-text query.

    Always answers 200 once a query is present; ``"source": "fallback"``
    flags answers produced by the keyword recommender.
    """
    try:
        query = parse_query(await request.body())
    except InvalidQueryError as exc:
        return JSONResponse(status_code=400, content={"error": str(exc)}, headers=RESPONSE_HEADERS)

    outcome = await service.recommend(query)
    return JSONResponse(status_code=200, content=outcome.as_payload(), headers=RESPONSE_HEADERS)
