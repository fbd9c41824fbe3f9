from typing import Dict

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = Field(..., description="'ok' or 'degraded'")
    version: str
    services: Dict[str, str] = Field(default_factory=dict)
