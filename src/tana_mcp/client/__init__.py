"""Tana API client."""

from .api_client import TanaClient
from .api_client_core import TanaClientCore, log_event

__all__ = ["TanaClient", "TanaClientCore", "log_event"]
