"""API routers."""

from . import config, credentials, devices, errors, interfaces, metrics, sites

__all__ = ["config", "credentials", "devices", "errors", "interfaces", "metrics", "sites"]
