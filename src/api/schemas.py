"""Pydantic schemas for API request/response validation."""

from pydantic import BaseModel, Field, model_validator


# =============================================================================
# Request Schemas (what clients send to us)
# =============================================================================


class AnalyzeRequest(BaseModel):
    """Request body for analyzing a single URL."""

    url: str = Field(
        ...,
        description="The URL to analyze. Invalid URLs are reported, not rejected.",
        examples=["https://example.com/products/blue-widget"],
    )


class BulkAnalyzeRequest(BaseModel):
    """Request body for analyzing several URLs at once."""

    urls: list[str] | None = Field(
        default=None,
        description="URLs to analyze",
        examples=[["https://example.com", "http://test.tk/Path_One/"]],
    )
    text: str | None = Field(
        default=None,
        description="Newline-separated URLs, as pasted by a user",
    )

    @model_validator(mode="after")
    def _require_input(self) -> "BulkAnalyzeRequest":
        if self.urls is None and self.text is None:
            raise ValueError("Provide either 'urls' or 'text'")
        return self


class BlocklistCheckRequest(BaseModel):
    """Request body for a blocklist lookup."""

    url: str = Field(..., examples=["https://malicioussite.com"])


# =============================================================================
# Response Schemas (what we send back to clients)
# =============================================================================


class URLComponentsResponse(BaseModel):
    """Decomposed parts of a parsed URL."""

    protocol: str
    hostname: str
    port: int | None
    path: str
    query: str
    fragment: str
    origin: str
    username: str
    password: str  # "***" when present, never the real value
    href: str


class CategoryReportResponse(BaseModel):
    """Score, issues and recommendations for one category."""

    score: int = Field(..., ge=0, le=100)
    issues: list[str] = []
    recommendations: list[str] = []
    metrics: dict = {}


class AnalysisResultResponse(BaseModel):
    """Full analysis of one URL."""

    original: str
    is_valid: bool
    timestamp: str
    components: URLComponentsResponse | None
    security: CategoryReportResponse | None
    performance: CategoryReportResponse | None
    seo: CategoryReportResponse | None
    accessibility: CategoryReportResponse | None
    best_practices: CategoryReportResponse | None
    overall_score: int = Field(..., ge=0, le=100)
    rating: str
    error: str | None


class BulkAnalysisResponse(BaseModel):
    """Response for bulk analysis."""

    results: list[AnalysisResultResponse]
    count: int
    valid_count: int


class BlocklistVerdictResponse(BaseModel):
    """Response for a blocklist lookup."""

    url: str
    normalized: str
    blocked: bool
    matched_entry: str | None
    message: str


# =============================================================================
# Health Check
# =============================================================================


class HealthResponse(BaseModel):
    """Response for health check endpoint."""

    status: str = "healthy"
    service: str = "lantern"
    version: str = "0.1.0"
    blocklist_entries: int = 0
    allowed_schemes: list[str] = []
