"""
Firebase Realtime Database Adapter.

This adapter talks to a Firebase Realtime Database through its REST interface:
every logical path maps to ``{database_url}/{path}.json``. Reads are a single
``GET`` (a JSON ``null`` body means nothing is stored there) and writes are a
``PUT`` that replaces the whole value at the path.
"""

import logging
import os
from typing import Any, Optional
from urllib.parse import quote

import requests

from ..base import RemoteStore, StoreAuthError, StoreConnectionError, StoreError, split_path
from ..retry import retry_with_backoff

logger = logging.getLogger(__name__)

# Constants
DEFAULT_TIMEOUT_SECONDS = 10
DEFAULT_MAX_RETRIES = 3


class TransientServerError(Exception):
    """Raised for 5xx responses so the retry decorator can try again."""

    pass


class FirebaseStore(RemoteStore):
    """
    Store backed by the Firebase Realtime Database REST API.

    Environment Variables:
        FIREBASE_DATABASE_URL: Database URL
                              (e.g., https://my-project-default-rtdb.firebaseio.com)
        FIREBASE_AUTH_TOKEN: Optional database secret or ID token, sent as the
                            ``auth`` query parameter
    """

    def __init__(
        self,
        database_url: Optional[str] = None,
        auth_token: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        max_retries: int = DEFAULT_MAX_RETRIES,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the Firebase store.

        Args:
            database_url: Database URL (defaults to FIREBASE_DATABASE_URL env var)
            auth_token: Credential for the ``auth`` query parameter
                        (defaults to FIREBASE_AUTH_TOKEN env var)
            timeout: Per-request timeout in seconds
            max_retries: Retries on connection errors, timeouts and 5xx responses
            session: Optional requests session (a new one is created if omitted)
        """
        super().__init__(store_name="firebase")

        self.database_url = (database_url or os.getenv("FIREBASE_DATABASE_URL") or "").rstrip("/")
        self.auth_token = auth_token or os.getenv("FIREBASE_AUTH_TOKEN")
        self.timeout = timeout
        self.max_retries = max_retries
        self.session = session or requests.Session()

        if not self.database_url:
            raise ValueError(
                "FIREBASE_DATABASE_URL must be set in environment or passed as parameter"
            )

        self.request_count = 0

        # Retry budget is per instance, so the decorator is applied here.
        self._send = retry_with_backoff(
            max_retries=self.max_retries,
            initial_delay=0.5,
            backoff_factor=2.0,
            exceptions=(
                requests.exceptions.ConnectionError,
                requests.exceptions.Timeout,
                TransientServerError,
            ),
        )(self._send_once)

        logger.info(
            "Firebase store initialized",
            extra={
                "store": self.store_name,
                "database_url": self.database_url,
                "authenticated": bool(self.auth_token),
            },
        )

    def url_for(self, path: str) -> str:
        """Build the REST URL for a logical store path.

        Each segment is percent-encoded, so "New Jersey" becomes "New%20Jersey".
        """
        encoded = "/".join(quote(segment, safe="") for segment in split_path(path))
        return f"{self.database_url}/{encoded}.json"

    def _params(self, **extra: str) -> dict[str, str]:
        params = dict(extra)
        if self.auth_token:
            params["auth"] = self.auth_token
        return params

    def _send_once(self, method: str, path: str, payload: Any = None, **params: str) -> requests.Response:
        """Issue one HTTP request and classify the response status."""
        url = self.url_for(path)
        self.request_count += 1

        logger.debug(
            "Sending Firebase request",
            extra={"method": method, "path": path, "request_count": self.request_count},
        )

        response = self.session.request(
            method,
            url,
            params=self._params(**params),
            json=payload if method == "PUT" else None,
            timeout=self.timeout,
        )

        if response.status_code in (401, 403):
            raise StoreAuthError(
                f"Permission denied for '{path}' - check FIREBASE_AUTH_TOKEN"
            )
        if response.status_code >= 500:
            raise TransientServerError(
                f"Firebase error {response.status_code}: {response.text}"
            )
        if response.status_code >= 400:
            raise StoreError(f"Firebase error {response.status_code}: {response.text}")

        return response

    def _request(self, method: str, path: str, payload: Any = None, **params: str) -> requests.Response:
        try:
            return self._send(method, path, payload, **params)
        except (requests.exceptions.ConnectionError, requests.exceptions.Timeout) as e:
            raise StoreConnectionError(f"Unable to reach Firebase for '{path}': {e}") from e
        except TransientServerError as e:
            raise StoreConnectionError(str(e)) from e
        except requests.exceptions.RequestException as e:
            raise StoreConnectionError(f"Firebase request failed for '{path}': {e}") from e

    def get(self, path: str) -> Optional[Any]:
        """Read the value at a path; None when the path holds no data."""
        response = self._request("GET", path)

        try:
            value = response.json()
        except ValueError as e:
            raise StoreError(f"Invalid JSON returned for '{path}': {e}") from e

        logger.info(
            "Firebase read completed",
            extra={"path": path, "exists": value is not None},
        )
        return value

    def set(self, path: str, value: Any) -> None:
        """Overwrite the value at a path; writing None deletes it."""
        if value is None:
            self._request("DELETE", path)
        else:
            self._request("PUT", path, value, print="silent")

        logger.info(
            "Firebase write completed",
            extra={"path": path, "deleted": value is None},
        )
