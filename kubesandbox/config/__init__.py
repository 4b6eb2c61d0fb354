"""Configuration for the Kubesandbox API."""

from .provider import APIConfig, ConfigProvider, EnvConfigProvider

__all__ = ["APIConfig", "ConfigProvider", "EnvConfigProvider"]
