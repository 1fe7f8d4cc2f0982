from app.schemas.responses import ScrapeFailureResponse, ScrapeSuccessResponse
from app.schemas.scrape import ScrapeFailure, ScrapeResult

NOT_FOUND = "Not found"


def present_result(result: ScrapeResult) -> ScrapeSuccessResponse | ScrapeFailureResponse:
    """Map an internal result to its wire record, filling empty fields with NOT_FOUND."""
    if isinstance(result, ScrapeFailure):
        return ScrapeFailureResponse(website=result.website, error=result.error)

    return ScrapeSuccessResponse(
        website=result.website,
        emails=list(result.emails) or [NOT_FOUND],
        phones=list(result.phones) or [NOT_FOUND],
        social=dict(result.social) or {NOT_FOUND: ""},
        domain=result.domain,
    )


def present_results(
    results: list[ScrapeResult],
) -> list[ScrapeSuccessResponse | ScrapeFailureResponse]:
    return [present_result(r) for r in results]
