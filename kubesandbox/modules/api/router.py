"""
kubectl endpoint for the Kubesandbox API.

POST runs a command, GET documents the endpoint, OPTIONS answers with an
empty body and every other method is rejected with 405.
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Response
from fastapi.responses import JSONResponse

from kubesandbox.modules.executor import KubectlExecutor

from .models import (
    KubectlErrorResponse,
    KubectlRequest,
    KubectlResponse,
    MethodNotAllowedResponse,
)

logger = logging.getLogger("kubesandbox.api")

KUBECTL_PATH = "/api/kubectl"

CAPABILITIES: Dict[str, Any] = {
    "message": "Kubernetes Explorer kubectl API (Simulated)",
    "status": "active",
    "description": (
        "This is a simulated kubectl API for learning purposes. It returns realistic "
        "responses without requiring a real Kubernetes cluster."
    ),
    "endpoints": {
        "kubectl": f"POST {KUBECTL_PATH}",
        "description": "Execute kubectl commands in a simulated environment",
    },
    "usage": {
        "method": "POST",
        "body": {
            "command": 'string (required) - kubectl command (e.g., "kubectl get pods")',
            "namespace": "string (optional) - namespace to use",
        },
    },
    "supportedCommands": [
        "kubectl get pods",
        "kubectl get services",
        "kubectl get deployments",
        "kubectl get nodes",
        "kubectl describe pod <name>",
        "kubectl apply -f <file>",
        "kubectl delete pod <name>",
        "kubectl cluster-info",
        "kubectl version",
        "kubectl api-resources",
    ],
}


def create_kubectl_router(executor: KubectlExecutor) -> APIRouter:
    """
    Create kubectl router with injected executor.

    Args:
        executor: Executor that answers the commands

    Returns:
        FastAPI router serving the kubectl endpoint
    """
    router = APIRouter(tags=["kubectl"])

    @router.options(KUBECTL_PATH)
    async def kubectl_options() -> Response:
        return Response(status_code=200)

    @router.get(KUBECTL_PATH)
    async def kubectl_info() -> Dict[str, Any]:
        """Describe the endpoint and the commands it understands."""
        return CAPABILITIES

    @router.post(
        KUBECTL_PATH,
        response_model=KubectlResponse,
        responses={400: {"model": KubectlErrorResponse}},
    )
    async def run_kubectl(request: KubectlRequest):
        """
        Run a simulated kubectl command.

        Returns:
            200: Command succeeded
            400: Command missing or rejected by the simulator
            500: Unexpected failure
        """
        if not request.command:
            return JSONResponse(status_code=400, content={"error": "Command is required"})

        try:
            result = executor.execute(request.command, namespace=request.namespace)
        except Exception as e:
            logger.exception("Kubectl API error")
            return JSONResponse(
                status_code=500,
                content={"error": "Internal server error", "message": str(e)},
            )

        if not result.success:
            body = KubectlErrorResponse(
                error=result.error or "Command execution failed", output=result.output
            )
            return JSONResponse(status_code=400, content=body.model_dump())

        return KubectlResponse(output=result.output, command=request.command.strip())

    @router.api_route(KUBECTL_PATH, methods=["PUT", "PATCH", "DELETE"])
    async def method_not_allowed() -> JSONResponse:
        return JSONResponse(status_code=405, content=MethodNotAllowedResponse().model_dump())

    return router
