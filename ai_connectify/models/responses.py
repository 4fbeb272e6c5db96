"""Response envelopes returned by the HTTP layer."""

from typing import Any, Dict

from pydantic import BaseModel, Field


class FullResponse(BaseModel):
    """Status, decoded body and headers of a response."""

    status: int
    data: Any = None
    headers: Dict[str, str] = Field(default_factory=dict)

    @property
    def content_type(self) -> str:
        return self.headers.get("content-type", "")
