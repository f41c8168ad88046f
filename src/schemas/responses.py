from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Body of every failed request."""

    error: str = Field(..., description="Error message")


class ServiceInfo(BaseModel):
    """Static service descriptor served at the root path."""

    message: str = Field(..., description="Service name")
    endpoints: list[str] = Field(..., description="Supported endpoint signatures")
