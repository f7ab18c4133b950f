"""vCenter Server Appliance health collector.

Logs in to the appliance REST API (VAPI) with basic credentials, then
reads the appliance health resources one at a time.
"""

from __future__ import annotations

import sys
from typing import Any, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .. import __version__
from ..data.models import Endpoint, EndpointHealth, HealthReport, select_endpoints
from .base import BaseCollector, CollectorError


SESSION_PATH = "/rest/com/vmware/cis/session"
SESSION_HEADER = "vmware-api-session-id"


class VAPICollector(BaseCollector):
    """Collector for appliance health over the VAPI REST surface.

    One instance serves one probe run: a single session token is obtained
    on first use and sent on every health request.
    """

    def __init__(
        self,
        host: str,
        username: str,
        password: str,
        verbose: bool = False,
    ):
        self.host = host
        self.username = username
        self.password = password
        self.verbose = verbose
        self._session: Optional[requests.Session] = None
        self._token: Optional[str] = None

    @property
    def name(self) -> str:
        return "vapi"

    @property
    def display_name(self) -> str:
        return f"VCSA {self.host}"

    @property
    def token(self) -> Optional[str]:
        return self._token

    def collect(self, subcommand: str) -> HealthReport:
        """Authenticate and query every endpoint the subcommand selects.

        The first failing request aborts the run; no partial report is
        returned.

        Raises:
            CollectorError: On transport, HTTP status or decode failure.
        """
        token = self._token or self.authenticate()
        report = HealthReport()
        endpoints = select_endpoints(subcommand)
        if not endpoints:
            self._log(f"no endpoint matches subcommand {subcommand!r}")
        for endpoint in endpoints:
            report.add(self.get_health(endpoint, token))
        return report

    def authenticate(self) -> str:
        """Create an API session and return its token.

        Raises:
            CollectorError: If the login fails or returns no token.
        """
        self._log(f"creating session on {self.host} as {self.username}")
        resp = self._request(
            "POST",
            SESSION_PATH,
            "session",
            auth=(self.username, self.password),
        )
        value = self._decode_value(resp, "session")
        if not isinstance(value, str) or not value:
            raise CollectorError(self.name, "session: response carries no session token")
        self._token = value
        return value

    def get_health(self, endpoint: Endpoint, token: Optional[str] = None) -> EndpointHealth:
        """Read one health resource.

        An absent value is reported as an empty string.

        Raises:
            CollectorError: If the request fails or the value is not a string.
        """
        token = token or self._token
        if not token:
            raise CollectorError(self.name, f"{endpoint.name}: not authenticated")
        resp = self._request("GET", endpoint.path, endpoint.name, headers={SESSION_HEADER: token})
        value = self._decode_value(resp, endpoint.name)
        if value is None:
            value = ""
        if not isinstance(value, str):
            raise CollectorError(
                self.name,
                f"{endpoint.name}: expected a string value, got {type(value).__name__}",
            )
        self._log(f"{endpoint.name} ({endpoint.path}) -> {value!r}")
        return EndpointHealth(endpoint=endpoint, value=value)

    def close(self) -> None:
        """Close the HTTP session."""
        if self._session is not None:
            self._session.close()
            self._session = None

    # Transport helpers

    def url(self, path: str) -> str:
        return f"https://{self.host}{path}"

    def _get_session(self) -> requests.Session:
        """Get or create the requests session for this run.

        Retries are disabled so every failure surfaces immediately.
        """
        if self._session is None:
            session = requests.Session()
            adapter = HTTPAdapter(
                max_retries=Retry(total=0, raise_on_status=False),
                pool_connections=1,
                pool_maxsize=1,
            )
            session.mount("https://", adapter)
            session.headers.update({
                "User-Agent": f"vcsa-health/{__version__}",
                "Accept": "application/json",
            })
            self._session = session
        return self._session

    def _request(self, method: str, path: str, label: str, **kwargs: Any) -> requests.Response:
        session = self._get_session()
        try:
            resp = session.request(method, self.url(path), **kwargs)
            resp.raise_for_status()
        except requests.exceptions.SSLError as e:
            raise CollectorError(
                self.name,
                f"{label}: TLS/SSL error: certificate verify failed: {e}",
                e,
            )
        except requests.exceptions.RequestException as e:
            raise CollectorError(self.name, f"{label}: {e}", e)
        return resp

    def _decode_value(self, resp: requests.Response, what: str) -> Any:
        """Return the "value" field of a JSON object response."""
        try:
            data = resp.json()
        except ValueError as e:
            raise CollectorError(self.name, f"{what}: invalid JSON response: {e}", e)
        if not isinstance(data, dict):
            raise CollectorError(self.name, f"{what}: expected a JSON object, got {type(data).__name__}")
        return data.get("value")

    def _log(self, msg: str) -> None:
        if self.verbose:
            print(f"[{self.name}] {msg}", file=sys.stderr, flush=True)
