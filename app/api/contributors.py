# app/api/contributors.py

import logging
from typing import Any, List, Union

import requests
from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from app.config import CONTRIBUTORS_UPSTREAM_URL, UPSTREAM_TIMEOUT_SECONDS
from app.models.contributors import ContributorOut, ErrorOut, parse_contributors

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/contributors", tags=["contributors"])

INVALID_DATA_MESSAGE = "Invalid data format"
FETCH_FAILED_MESSAGE = "Failed to fetch contributors"


def fetch_upstream_users() -> Any:
    """
    Make the single upstream call and return the decoded JSON body.

    Raises requests exceptions for transport problems and error statuses,
    and a ValueError subclass when the body is not JSON.
    """
    logger.debug("Fetching contributors from %s", CONTRIBUTORS_UPSTREAM_URL)
    response = requests.get(CONTRIBUTORS_UPSTREAM_URL, timeout=UPSTREAM_TIMEOUT_SECONDS)
    response.raise_for_status()
    return response.json()


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorOut(error=message).model_dump(),
    )


@router.get(
    "",
    response_model=List[ContributorOut],
    response_model_exclude_none=True,
    responses={400: {"model": ErrorOut}, 500: {"model": ErrorOut}},
)
def list_contributors() -> Union[List[ContributorOut], JSONResponse]:
    """
    Proxy the upstream user list, validated as contributors.

    400 if any record breaks the schema, 500 for every other failure.
    """
    try:
        payload = fetch_upstream_users()
        contributors = parse_contributors(payload)
    except ValidationError as e:
        logger.warning(
            "Upstream contributors failed validation (%s errors): %s",
            e.error_count(),
            e,
        )
        return _error(400, INVALID_DATA_MESSAGE)
    except Exception:
        logger.exception("Failed to fetch contributors from upstream")
        return _error(500, FETCH_FAILED_MESSAGE)

    logger.info("Returning %s contributors", len(contributors))
    return contributors
