"""Core DigitalOcean client with a raw-request escape hatch."""

from __future__ import annotations

import logging
import os
from typing import Any, Optional

import requests

from .errors import APIError, ResponseError
from .resources.images import Images

DEFAULT_API_URL = os.environ.get("DIGITALOCEAN_API_URL", "https://api.digitalocean.com")
DEFAULT_TOKEN = os.environ.get("DIGITALOCEAN_TOKEN", "")


class DigitalOcean:
    """Resource-grouped client for the DigitalOcean v2 API."""

    images: Images

    def __init__(
        self,
        *,
        token: Optional[str] = None,
        api_url: Optional[str] = None,
        default_timeout: int = 20,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Create a client bound to one API account.

        Parameters
        ----------
        token
            Personal access token sent as a bearer token.
        api_url
            Base URL of the API, without the ``/v2`` prefix.
        default_timeout
            Default request timeout in seconds.
        session
            Optional requests session to reuse connections.
        """
        self.token = token or DEFAULT_TOKEN
        self.api_url = (api_url or DEFAULT_API_URL).rstrip("/")
        self.default_timeout = default_timeout
        self._logger = logging.getLogger(__name__)
        self._session = session

        self.images: Images = Images(self)

    def request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[dict[str, Any]] = None,
        json: Optional[dict[str, Any]] = None,
        timeout: Optional[int] = None,
    ) -> Optional[dict[str, Any]]:
        """Send a raw request to the DigitalOcean API.

        Parameters
        ----------
        method
            HTTP method (GET, POST, PUT, DELETE).
        path
            Endpoint path, with or without a leading `/v2`.
        params
            Query parameters for the request.
        json
            JSON payload for the request.
        timeout
            Timeout in seconds for this request.

        Returns
        -------
        dict | None
            Parsed JSON payload, or None if the response body is empty.

        Raises
        ------
        APIError
            The server answered with an error status, or the request never
            completed.
        ResponseError
            The response body was not a JSON object.
        """
        if not path.startswith("/"):
            path = "/" + path
        if not path.startswith("/v2/"):
            path = "/v2" + path
        url = f"{self.api_url}{path}"
        headers = {
            "Authorization": f"Bearer {self.token}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

        requester = self._session or requests
        response = None
        try:
            response = requester.request(
                method,
                url,
                params=params,
                json=json,
                headers=headers,
                timeout=timeout or self.default_timeout,
            )
            response.raise_for_status()
        except requests.HTTPError as exc:
            # raise_for_status attaches the response; fall back for bare errors
            error_response = exc.response if exc.response is not None else response
            status = getattr(error_response, "status_code", None)
            # Extract error message from response body if available
            server_msg = str(exc)
            error_id = None
            try:
                error_body = error_response.json()
                if isinstance(error_body, dict):
                    error_id = error_body.get("id")
                    # Try common error message fields
                    for key in ("message", "error", "detail"):
                        if key in error_body:
                            server_msg = str(error_body[key])
                            break
            except (ValueError, AttributeError, KeyError):
                pass  # Response wasn't JSON or didn't have expected fields
            error_msg = f"{method} {url}: {status} {server_msg}"
            self._logger.warning("Request failed for %s %s: %s", method, url, error_msg)
            raise APIError(error_msg, status=status, error_id=error_id) from exc
        except requests.RequestException as exc:
            self._logger.warning("Request failed for %s %s: %s", method, url, exc)
            raise APIError(f"{method} {url}: {exc}") from exc

        if not response.content:
            return None
        try:
            payload = response.json()
        except ValueError as exc:
            self._logger.warning("Response from %s %s was not JSON", method, url)
            raise ResponseError(f"{method} {url}: response was not JSON") from exc
        if isinstance(payload, dict):
            return payload
        self._logger.warning("Response from %s %s was not a JSON object", method, url)
        raise ResponseError(f"{method} {url}: response was not a JSON object")
