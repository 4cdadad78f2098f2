"""
Common API schemas.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Body of every error response produced by the error handlers."""

    error: str
    message: Any
    type: str
    details: Optional[Dict[str, Any]] = None
