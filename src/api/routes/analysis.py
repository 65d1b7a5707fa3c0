"""URL analysis endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from api.dependencies import get_inspector
from api.latency import simulated_latency
from api.schemas import (
    AnalysisResultResponse,
    AnalyzeRequest,
    BulkAnalysisResponse,
    BulkAnalyzeRequest,
)
from config import Settings, get_settings
from engine import AnalysisResult, URLInspector, split_bulk_input

router = APIRouter(prefix="/analyze", tags=["Analysis"])


def to_response(result: AnalysisResult) -> AnalysisResultResponse:
    """Convert an engine result into its API schema."""
    return AnalysisResultResponse.model_validate(result.as_dict())


@router.post(
    "",
    response_model=AnalysisResultResponse,
    summary="Analyze a URL",
    description="Score a URL for security, performance, SEO, accessibility and best practices.",
)
@simulated_latency
async def analyze_url(
    request: AnalyzeRequest,
    inspector: URLInspector = Depends(get_inspector),
    settings: Settings = Depends(get_settings),
) -> AnalysisResultResponse:
    """
    Analyze a single URL.

    Invalid URLs return 200 with is_valid=false and the parse error, so
    clients only need to branch on is_valid.
    """
    return to_response(inspector.analyze(request.url))


@router.post(
    "/bulk",
    response_model=BulkAnalysisResponse,
    summary="Analyze several URLs",
    description="Score a list of URLs, or newline-separated text, in input order.",
)
@simulated_latency
async def analyze_bulk(
    request: BulkAnalyzeRequest,
    inspector: URLInspector = Depends(get_inspector),
    settings: Settings = Depends(get_settings),
) -> BulkAnalysisResponse:
    """Analyze every non-blank URL in the request."""
    urls = list(request.urls or [])
    if request.text:
        urls.extend(split_bulk_input(request.text))

    if len(urls) > settings.bulk_max_urls:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Too many URLs: {len(urls)}. At most {settings.bulk_max_urls} are allowed.",
        )

    results = [to_response(result) for result in inspector.analyze_many(urls)]

    return BulkAnalysisResponse(
        results=results,
        count=len(results),
        valid_count=sum(1 for result in results if result.is_valid),
    )
