from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class ScrapeRequest(BaseModel):
    urls: list[str] = Field(min_length=1)


class FetchedPage(BaseModel):
    model_config = ConfigDict(frozen=True)

    requested_url: str  # normalized, scheme-prefixed
    final_url: str  # after redirects
    domain: str  # host without leading "www."
    html: str


class ScrapeSuccess(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["success"] = "success"
    website: str
    domain: str
    emails: list[str] = []
    phones: list[str] = []
    social: dict[str, str] = {}  # platform -> profile URL


class ScrapeFailure(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["failed"] = "failed"
    website: str  # as submitted
    error: str


ScrapeResult = Annotated[ScrapeSuccess | ScrapeFailure, Field(discriminator="status")]
