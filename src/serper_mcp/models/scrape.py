"""Scraping-related Pydantic models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ScrapeParams(BaseModel):
    """Input parameters for a Serper scrape request."""

    url: str = Field(..., description="The URL of the webpage to scrape")
    include_markdown: bool | None = Field(
        default=None, alias="includeMarkdown", description="Include markdown content"
    )

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    def to_request_body(self) -> dict[str, Any]:
        """Build the JSON body sent to the Serper scrape endpoint."""
        return self.model_dump(by_alias=True, exclude_none=True)


# Text, optional markdown, JSON-LD and head metadata, passed through untouched
ScrapeResult = dict[str, Any]
