"""
Authenticated connection to a BES REST API server.

Every HTTP verb returns a :class:`~besrest.result.RESTResult`.  Requests
carry Basic auth and share one cookie-bearing ``requests.Session`` that
belongs to the connection alone.
"""

import os
import urllib.parse
from pathlib import Path

import requests
import urllib3

from besrest.config import (
    API_PREFIX,
    DEFAULT_PASSWORD,
    DEFAULT_ROOT_SERVER,
    DEFAULT_USER,
    DEFAULT_VERIFY_SSL,
    REQUEST_TIMEOUT,
)
from besrest.logging_setup import log
from besrest.network.client import build_session, normalize_root_server
from besrest.result import RESTResult


class BESConnection:
    """
    Session against one BES server.

    Login is attempted on construction; a failed login is logged and the
    connection is still returned so the caller can retry with login().
    """

    def __init__(
        self,
        username: str,
        password: str,
        root_server: str,
        verify: bool = False,
        timeout: float | None = REQUEST_TIMEOUT,
    ) -> None:
        self.username = username
        self.root_server = normalize_root_server(root_server)
        self.verify = verify
        self.timeout = timeout
        self._auth = (username, password)

        if not verify:
            urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)
            log.debug("TLS certificate verification is disabled for %s", self.root_server)

        self.session = build_session(verify_ssl=verify)
        self.login()

    @classmethod
    def from_env(cls, **kwargs) -> "BESConnection":
        """Build a connection from the BES_* environment variables.

        Keyword arguments override the environment values.
        """
        params = {
            "username": DEFAULT_USER,
            "password": DEFAULT_PASSWORD,
            "root_server": DEFAULT_ROOT_SERVER,
            "verify": DEFAULT_VERIFY_SSL,
        }
        params.update(kwargs)
        if not params["root_server"]:
            raise ValueError("No root server given and BES_ROOT_SERVER is not set")
        return cls(**params)

    def __repr__(self) -> str:
        return f"<BESConnection {self.username}@{self.root_server}>"

    # ------------------------------------------------------------------
    # Requests
    # ------------------------------------------------------------------

    def url(self, path: str) -> str:
        """Absolute URL for an API *path*; absolute URLs pass through."""
        if path.startswith(self.root_server):
            return path
        return self.root_server + API_PREFIX + path

    def _request(self, method: str, path: str, data=None, **kwargs) -> RESTResult:
        options = {
            "auth": self._auth,
            "verify": self.verify,
            "timeout": self.timeout,
        }
        headers = kwargs.pop("headers", None)
        options.update(kwargs)
        if headers:
            options["headers"] = {**options.get("headers", {}), **headers}

        url = self.url(path)
        log.debug("%s %s", method, url)
        response = self.session.request(method, url, data=data, **options)
        return RESTResult(response)

    def get(self, path: str = "help", **kwargs) -> RESTResult:
        return self._request("GET", path, **kwargs)

    def post(self, path: str, data=None, **kwargs) -> RESTResult:
        return self._request("POST", path, data=data, **kwargs)

    def put(self, path: str, data=None, **kwargs) -> RESTResult:
        return self._request("PUT", path, data=data, **kwargs)

    def delete(self, path: str, data=None, **kwargs) -> RESTResult:
        return self._request("DELETE", path, data=data, **kwargs)

    # ------------------------------------------------------------------
    # Authentication
    # ------------------------------------------------------------------

    def connected(self) -> bool:
        """Return True when ``GET login`` answers HTTP 200."""
        try:
            return self.get("login").status_code == 200
        except requests.RequestException as exc:
            log.debug("[LOGIN] Probe of %s failed: %s", self.root_server, exc)
            return False

    def login(self) -> bool:
        """
        Make sure the session is authenticated.

        Probes the server, tries ``GET login`` once if the probe fails,
        then probes again.  Failures are logged, never raised.
        """
        if not self.connected():
            try:
                self.get("login").request.raise_for_status()
            except requests.RequestException as exc:
                log.error("[LOGIN] Login to %s as %s failed: %s",
                          self.root_server, self.username, exc)

        is_connected = self.connected()
        if is_connected:
            log.info("[LOGIN] Connected to %s as %s", self.root_server, self.username)
        return is_connected

    def logout(self) -> None:
        """Drop the session cookies; later requests re-authenticate via Basic auth."""
        self.session.cookies.clear()

    # ------------------------------------------------------------------
    # Session relevance
    # ------------------------------------------------------------------

    def session_relevance_xml(self, relevance: str, **kwargs) -> RESTResult:
        """POST *relevance* to the query endpoint and return the raw result."""
        body = "relevance=" + urllib.parse.quote(relevance, safe="")
        headers = {"Content-Type": "application/x-www-form-urlencoded"}
        headers.update(kwargs.pop("headers", None) or {})
        log.debug("[QUERY] %s", relevance)
        return self.post("query", body, headers=headers, **kwargs)

    def session_relevance_array(self, relevance: str, **kwargs) -> list[str]:
        """
        Evaluate *relevance* and return its answers as strings.

        A query error comes back as a single ``"ERROR: <message>"`` item;
        an unparseable response gives an empty list.
        """
        result = self.session_relevance_xml(relevance, **kwargs)
        root = result.xml
        if root is None:
            log.error("[QUERY] Could not parse query response: %s", result.text[:200])
            return []

        answers = root.findall(".//Answer")
        if answers:
            return [answer.text or "" for answer in answers]

        error = root.find(".//Error")
        if error is not None:
            log.warning("[QUERY] Relevance error: %s", error.text)
            return ["ERROR: " + (error.text or "")]

        return []

    def session_relevance_string(self, relevance: str, **kwargs) -> str:
        return "\n".join(self.session_relevance_array(relevance, **kwargs))

    # ------------------------------------------------------------------
    # Uploads
    # ------------------------------------------------------------------

    def upload(self, file_path: str | Path, file_name: str | None = None) -> RESTResult:
        """
        Upload a local file to the server's upload store.

        Raises FileNotFoundError before any request is made when
        *file_path* is not a readable file.
        """
        path = Path(file_path)
        if not path.is_file() or not os.access(path, os.R_OK):
            raise FileNotFoundError(f"No readable file at {file_path}")

        if not file_name:
            file_name = path.name

        headers = {
            "Content-Disposition": f'attachment; filename="{file_name}"',
            "Content-Type": "application/octet-stream",
        }
        log.info("[UPLOAD] %s as %s", path, file_name)
        return self.post("upload", path.read_bytes(), headers=headers)

    def get_upload(self, file_name: str, file_hash: str) -> RESTResult | None:
        """Return the server's record of an already uploaded file, if any."""
        result = self.get(f"upload/{file_hash}/{file_name}")
        if result.status_code == 200:
            return result
        return None
