from pydantic import BaseModel, Field
from typing import Optional


class Identity(BaseModel):
    """Signed-in user as resolved by the upstream authentication layer."""
    id: str = Field(..., min_length=1, description="Opaque user identifier")


class RequestContext(BaseModel):
    """Explicit per-request context handed to every service operation."""
    user: Optional[Identity] = None
