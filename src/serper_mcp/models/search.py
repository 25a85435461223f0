"""Search-related Pydantic models."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from serper_mcp.utils.query_builder import build_advanced_query

TimeRange = Literal["qdr:h", "qdr:d", "qdr:w", "qdr:m", "qdr:y"]

# Fields folded into the query string by build_advanced_query
OPERATOR_FIELDS = (
    "site",
    "filetype",
    "inurl",
    "intitle",
    "related",
    "cache",
    "before",
    "after",
    "exact",
    "exclude",
    "or_",
)


class SearchParams(BaseModel):
    """Input parameters for a Serper search request."""

    q: str = Field(..., description="Search query string")
    gl: str | None = Field(default=None, description="Region code (ISO 3166-1 alpha-2, e.g. 'us')")
    hl: str | None = Field(default=None, description="Language code (ISO 639-1, e.g. 'en')")
    location: str | None = Field(
        default=None, description="Location string (e.g. 'SoHo, New York, United States')"
    )
    num: int | None = Field(default=None, ge=1, description="Number of results to return")
    page: int | None = Field(default=None, ge=1, description="Page number of results")
    tbs: TimeRange | None = Field(default=None, description="Time-based search filter")
    autocorrect: bool | None = Field(default=None, description="Autocorrect spelling in query")

    # ─── Advanced operators ──────────────────────────────────────
    site: str | None = Field(default=None, description="Limit results to a domain")
    filetype: str | None = Field(default=None, description="Limit results to a file type")
    inurl: str | None = Field(default=None, description="Word that must appear in the URL")
    intitle: str | None = Field(default=None, description="Word that must appear in the title")
    related: str | None = Field(default=None, description="Find sites related to a domain")
    cache: str | None = Field(default=None, description="Cached version of a URL")
    before: str | None = Field(default=None, description="Results before a date (YYYY-MM-DD)")
    after: str | None = Field(default=None, description="Results after a date (YYYY-MM-DD)")
    exact: str | None = Field(default=None, description="Exact phrase to match")
    exclude: str | None = Field(default=None, description="Comma-separated terms to exclude")
    or_: str | None = Field(
        default=None, alias="or", description="Comma-separated alternative terms"
    )

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    def to_request_body(self) -> dict[str, Any]:
        """
        Build the JSON body sent to the Serper search endpoint.

        The advanced operator fields are folded into ``q`` and not sent on
        their own; unset fields are omitted.
        """
        body = self.model_dump(exclude=set(OPERATOR_FIELDS), exclude_none=True)
        body["q"] = build_advanced_query(self)
        return body


SearchParamsBatch = list[SearchParams]

# Serper responses are passed through untouched
SearchResult = dict[str, Any]
SearchResultBatch = list[SearchResult]
