"""
Kubesandbox API data models.

These models define the JSON envelopes exchanged over HTTP.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

ALLOWED_METHODS = ["POST", "GET", "OPTIONS"]


# Request Models (API Input)


class KubectlRequest(BaseModel):
    """Request to run a simulated kubectl command."""

    command: Optional[str] = Field(
        None, description='kubectl command (e.g., "kubectl get pods")'
    )
    namespace: Optional[str] = Field(
        None, description="Namespace used when the command does not specify one"
    )


# Response Models (API Output)


class KubectlResponse(BaseModel):
    """Response after a successful command."""

    success: bool = True
    output: str
    command: str


class KubectlErrorResponse(BaseModel):
    """Response after a failed command."""

    success: bool = False
    error: str
    output: str = ""


class MethodNotAllowedResponse(BaseModel):
    """Response for HTTP methods the endpoint does not serve."""

    error: str = "Method not allowed"
    message: str = "This endpoint only accepts POST requests."
    allowedMethods: List[str] = Field(default_factory=lambda: list(ALLOWED_METHODS))
