"""
BACKEND API CLIENT

Thin wrapper over requests for the portal backend.

Requirements:
• Base URL and timeout from config
• Bearer token attached when one is available
• Errors raised as ApiError carrying the backend response
• 401 triggers the on_unauthorized hook (signs the session out)
• No retries here; callers decide
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

import requests

from portal.config import API_TIMEOUT, PORTAL_API_URL
from portal.errors import ApiError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ApiResponse:
    data: Any
    status_code: int


class ApiClient:
    """get/post/put/delete against the portal backend."""

    def __init__(
        self,
        base_url: str = PORTAL_API_URL,
        timeout: int = API_TIMEOUT,
        token_provider: Optional[Callable[[], Optional[str]]] = None,
        on_unauthorized: Optional[Callable[[], None]] = None,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.token_provider = token_provider
        self.on_unauthorized = on_unauthorized
        self.http = session or requests.Session()

    def _headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        token = self.token_provider() if self.token_provider else None
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    @staticmethod
    def _decode(response: requests.Response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text

    def request(self, method: str, path: str, body: Any = None) -> ApiResponse:
        url = self._url(path)

        try:
            response = self.http.request(
                method,
                url,
                json=body,
                headers=self._headers(),
                timeout=self.timeout,
            )
        except requests.exceptions.Timeout as e:
            logger.error(f"API timeout: {method} {url}")
            raise ApiError(f"Request to {path} timed out") from e
        except requests.exceptions.RequestException as e:
            logger.error(f"API transport error: {method} {url}: {e}")
            raise ApiError(f"Could not reach the server: {e}") from e

        payload = self._decode(response)

        if response.status_code == 401 and self.on_unauthorized is not None:
            logger.warning("API returned 401, signing out")
            self.on_unauthorized()

        if not response.ok:
            message = None
            if isinstance(payload, dict):
                message = payload.get("error") or payload.get("message")
            message = message or f"{method} {path} failed with status {response.status_code}"
            logger.error(f"API error {response.status_code}: {method} {url}")
            raise ApiError(message, status_code=response.status_code, payload=payload)

        return ApiResponse(data=payload, status_code=response.status_code)

    def get(self, path: str) -> ApiResponse:
        return self.request("GET", path)

    def post(self, path: str, body: Any = None) -> ApiResponse:
        return self.request("POST", path, body)

    def put(self, path: str, body: Any = None) -> ApiResponse:
        return self.request("PUT", path, body)

    def delete(self, path: str) -> ApiResponse:
        return self.request("DELETE", path)
