"""Blocklist lookup endpoint."""

from fastapi import APIRouter, Depends, HTTPException, status

from analyzers.url import ParseError
from api.dependencies import get_blocklist
from api.schemas import BlocklistCheckRequest, BlocklistVerdictResponse
from blocklist import BlocklistChecker

router = APIRouter(prefix="/blocklist", tags=["Blocklist"])


@router.post(
    "/check",
    response_model=BlocklistVerdictResponse,
    summary="Check a URL against the blocklist",
    description="Validate a URL, then look it up in the static blocklist.",
)
async def check_blocklist(
    request: BlocklistCheckRequest,
    checker: BlocklistChecker = Depends(get_blocklist),
) -> BlocklistVerdictResponse:
    """Check whether a URL is blocked."""
    try:
        verdict = checker.check(request.url)
    except ParseError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        )

    message = "The URL is blocked." if verdict.blocked else "The URL is valid and accessible."
    return BlocklistVerdictResponse(**verdict.as_dict(), message=message)
