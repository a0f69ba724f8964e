"""Health check schemas."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(..., description="Health status")
    version: str = Field(..., description="Application version")
    environment: str = Field(..., description="Environment name")
    rewrite_passes: int = Field(..., description="Number of rewrite passes in the pipeline")
    models: int = Field(..., description="Number of models in the limit catalog")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "status": "healthy",
                    "version": "0.1.0",
                    "environment": "development",
                    "rewrite_passes": 6,
                    "models": 4,
                }
            ]
        }
    }
