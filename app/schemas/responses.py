from typing import Literal

from pydantic import BaseModel


class ScrapeSuccessResponse(BaseModel):
    website: str
    emails: list[str]  # ["Not found"] when empty
    phones: list[str]  # ["Not found"] when empty
    social: dict[str, str]  # {"Not found": ""} when empty
    domain: str
    status: Literal["success"] = "success"


class ScrapeFailureResponse(BaseModel):
    website: str
    error: str
    status: Literal["failed"] = "failed"


class ErrorResponse(BaseModel):
    detail: str
    error: str | None = None
