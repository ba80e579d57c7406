# ABOUTME: Pydantic models for feed items and API error payloads.
# ABOUTME: Defines NewsItem (card data) and ErrorResponse schemas.

from pydantic import BaseModel, ConfigDict, Field


class NewsItem(BaseModel):
    """Single news entry extracted from an RSS item block."""

    model_config = ConfigDict(populate_by_name=True)

    title: str
    link: str
    description: str = ""
    pub_date: str = Field(alias="pubDate")
    image_url: str | None = Field(default=None, alias="imageUrl")

    def to_json_dict(self) -> dict[str, str]:
        """Serialize with camelCase keys, leaving out a missing image URL."""
        return self.model_dump(by_alias=True, exclude_none=True)


class ErrorResponse(BaseModel):
    """Error body returned when the feed cannot be served."""

    error: str
    details: str
