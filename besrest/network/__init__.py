"""
Network operations module for HTTP client setup and server addressing.
"""

from besrest.network.client import build_session, normalize_root_server

__all__ = ["build_session", "normalize_root_server"]
