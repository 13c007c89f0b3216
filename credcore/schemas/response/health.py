from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Liveness probe body."""

    ok: bool = Field(default=True, description="Always true while the process serves")
