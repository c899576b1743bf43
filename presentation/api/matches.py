"""HTTP listing of the season's match ids."""
import logging

from fastapi import APIRouter, Query, Request
from fastapi.responses import JSONResponse

from application.services import MatchIdLister
from domain.enums import Region
from domain.errors import AuthError, HTTPStatusError, NotFoundError, RateLimitedError, RiotAPIError

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["Matches"])


def error_response(error: RiotAPIError) -> JSONResponse:
    """Map a Riot API failure to the status and body clients expect."""
    logger.error(f"Riot API Error: {error}")
    if isinstance(error, NotFoundError):
        return JSONResponse(status_code=404, content={"error": "User not found"})
    if isinstance(error, RateLimitedError):
        return JSONResponse(status_code=429, content={"error": "Rate limited"})
    if isinstance(error, AuthError):
        return JSONResponse(status_code=403, content={"error": "Invalid API key"})
    if isinstance(error, HTTPStatusError):
        return JSONResponse(status_code=error.status_code, content={"error": "An error occurred"})
    return JSONResponse(status_code=500, content={"error": "An internal server error occurred"})


@router.get("/matches")
async def list_matches(request: Request, puuid: str = Query(min_length=1), region: str = Query(...)):
    try:
        parsed_region = Region.from_string(region)
    except ValueError as e:
        return JSONResponse(status_code=400, content={"error": str(e)})

    lister = MatchIdLister(request.app.state.repository)
    try:
        return await lister.list_match_ids(puuid, parsed_region)
    except RiotAPIError as e:
        return error_response(e)
