"""
HTTP client configuration for BES REST API communication.

Provides session setup with retry logic and root-server normalisation.
"""

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from besrest.config import DEFAULT_PORT, MAX_RETRIES, USER_AGENT


def build_session(verify_ssl: bool = True) -> requests.Session:
    """
    Return a requests.Session with retry logic pre-configured.

    Every BESConnection builds its own session so that cookies for
    different servers never mix.

    Args:
        verify_ssl: Whether to verify TLS certificates

    Returns:
        Configured requests.Session instance
    """
    session = requests.Session()
    retry = Retry(
        total=MAX_RETRIES,
        backoff_factor=0.5,
        status_forcelist=[500, 502, 503, 504],
        raise_on_status=False,          # hand the last 5xx back as a response
    )
    adapter = HTTPAdapter(max_retries=retry)
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    session.verify = verify_ssl
    session.headers.update({
        "User-Agent": USER_AGENT,
        "Connection": "keep-alive",
    })
    return session


def normalize_root_server(root_server: str) -> str:
    """
    Build the root URL for the BES server.

    'bes.example.com'        → 'https://bes.example.com:52311'
    'https://bes:8080'       → 'https://bes:8080'
    'http://bes'             → 'http://bes:52311'

    The port check counts colons across the whole string, so IPv6
    literals or values with a path containing ':' always get the
    default port appended.
    """
    if not root_server.startswith("http"):
        root_server = "https://" + root_server

    if root_server.count(":") != 2:
        root_server = f"{root_server}:{DEFAULT_PORT}"

    return root_server
