"""
Shared pytest fixtures for Kubesandbox tests.

This module provides common fixtures including:
- The default catalog and an executor bound to it
- A small alternate catalog for dependency-injection tests
- FastAPI test client built with a stub config provider
"""

import os
import sys

import pytest
from fastapi.testclient import TestClient

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from kubesandbox.config.provider import APIConfig
from kubesandbox.main import create_app
from kubesandbox.modules.catalog import DEFAULT_CATALOG, DEFAULT_KINDS, Catalog, Pod
from kubesandbox.modules.executor import KubectlExecutor


class StubConfigProvider:
    """Config provider that ignores the environment."""

    def __init__(self, **overrides):
        self._config = APIConfig(
            port=8080,
            host="127.0.0.1",
            debug=False,
            cors_origins=["*"],
        )
        for key, value in overrides.items():
            setattr(self._config, key, value)

    def get_api_config(self) -> APIConfig:
        return self._config


@pytest.fixture
def catalog():
    """The built-in catalog."""
    return DEFAULT_CATALOG


@pytest.fixture
def executor(catalog):
    """Executor bound to the built-in catalog."""
    return KubectlExecutor(catalog)


@pytest.fixture
def single_pod_catalog():
    """Catalog holding only the pods kind with one pod."""
    pods_kind = DEFAULT_KINDS[0]
    return Catalog(
        [pods_kind],
        {"pods": [Pod(name="solo", namespace="lab", status="Pending", age="5m", ready="0/1")]},
    )


@pytest.fixture
def config_provider():
    return StubConfigProvider()


@pytest.fixture
def client(config_provider):
    """Test client for the full application."""
    return TestClient(create_app(config_provider))
