import logging

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse

from talent_api.core import SMART_SEARCH_CORS_HEADERS, get_settings, limiter
from talent_api.dependencies import get_smart_search_service
from talent_api.schemas import ErrorResponse, SmartSearchRequest, SmartSearchResponse
from talent_api.serializers import search_result_to_response
from talent_api.services import InvalidSearchRequestError, ProfileStoreError, SmartSearchService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["search"])


def _search_rate_limit() -> str:
    return get_settings().search_rate_limit


@router.options("/smart-search", include_in_schema=False)
async def smart_search_preflight() -> Response:
    return Response(status_code=status.HTTP_204_NO_CONTENT, headers=SMART_SEARCH_CORS_HEADERS)


@router.post(
    "/smart-search",
    response_model=SmartSearchResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
@limiter.limit(_search_rate_limit)
async def smart_search(
    request: Request,
    body: SmartSearchRequest,
    service: SmartSearchService = Depends(get_smart_search_service),
):
    """Natural-language profile search. Model failures degrade to keyword matching, never to an error."""
    try:
        result = await service.search(body.query)
    except InvalidSearchRequestError as e:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": str(e)},
        )
    except ProfileStoreError as e:
        logger.error("smart_search: store unavailable: %s", e)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Failed to fetch profiles"},
        )
    return search_result_to_response(result)
