#!/usr/bin/env python3
"""
Kubesandbox - Main Entry Point

This is the thin orchestration layer that:
1. Loads configuration
2. Wires the catalog into the executor
3. Runs the API server

All simulation logic is in the modules, following black box principles.
"""

import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from kubesandbox import __version__
from kubesandbox.config.provider import ConfigProvider, EnvConfigProvider
from kubesandbox.logging_config import configure_logging, get_logging_config
from kubesandbox.modules.api import create_kubectl_router
from kubesandbox.modules.catalog import DEFAULT_CATALOG, Catalog
from kubesandbox.modules.executor import KubectlExecutor

logger = logging.getLogger(__name__)

CORS_ALLOW_HEADERS = [
    "X-CSRF-Token",
    "X-Requested-With",
    "Accept",
    "Accept-Version",
    "Content-Length",
    "Content-MD5",
    "Content-Type",
    "Date",
    "X-Api-Version",
]


def create_app(
    config_provider: Optional[ConfigProvider] = None,
    catalog: Catalog = DEFAULT_CATALOG,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        config_provider: Configuration source, environment by default
        catalog: Resource snapshot served by the simulator

    Returns:
        Configured FastAPI application
    """
    api_config = (config_provider or EnvConfigProvider()).get_api_config()
    executor = KubectlExecutor(catalog)

    app = FastAPI(
        title="Kubesandbox API",
        description="Kubesandbox - Simulated kubectl for learning Kubernetes",
        version=__version__,
        debug=api_config.debug,
    )
    app.state.executor = executor

    app.add_middleware(
        CORSMiddleware,
        allow_origins=api_config.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "OPTIONS", "PATCH", "DELETE", "POST", "PUT"],
        allow_headers=CORS_ALLOW_HEADERS,
    )

    app.include_router(create_kubectl_router(executor))

    @app.get("/healthz")
    async def healthz():
        """
        Minimal health check endpoint for readiness/liveness probes.

        Returns:
            200: Service is running
        """
        return {"status": "ok"}

    @app.get("/health")
    async def health_check():
        """Health check with the size of the simulated catalog."""
        return {
            "status": "healthy",
            "version": __version__,
            "catalog": {kind.name: catalog.count(kind.name) for kind in catalog.kinds},
        }

    logger.info(f"Kubesandbox API {__version__} initialized with {len(catalog.kinds)} resource kinds")
    return app


app = create_app()


def run() -> None:
    """Run the API server with uvicorn."""
    api_config = EnvConfigProvider().get_api_config()
    configure_logging(api_config.log_level)
    uvicorn.run(
        app,
        host=api_config.host,
        port=api_config.port,
        log_config=get_logging_config(api_config.log_level),
    )


if __name__ == "__main__":
    run()
