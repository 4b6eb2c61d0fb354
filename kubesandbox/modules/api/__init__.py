"""
API Module - Black Box Interface

Purpose: HTTP transport for the kubectl simulator
Interface: create_kubectl_router(executor)
Hidden: Method handling, status-code mapping, JSON envelopes

The API module only orchestrates - it contains no simulation logic.
All logic is delegated to the executor module.
"""

from .models import (
    KubectlErrorResponse,
    KubectlRequest,
    KubectlResponse,
    MethodNotAllowedResponse,
)
from .router import KUBECTL_PATH, create_kubectl_router

__all__ = [
    "KUBECTL_PATH",
    "create_kubectl_router",
    "KubectlRequest",
    "KubectlResponse",
    "KubectlErrorResponse",
    "MethodNotAllowedResponse",
]
