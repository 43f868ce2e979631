from typing import Any, Literal, Optional

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    status: Literal["error"] = "error"
    message: str
    errors: Optional[dict[str, Any]] = None
