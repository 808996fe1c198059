from typing import Optional

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None
    message: Optional[str] = None

    def to_body(self) -> dict:
        return self.model_dump(exclude_none=True)
