import logging
import time
from typing import Any, List, Optional
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from presentations.config import Settings, get_settings
from presentations.errors import (
    CONNECTION_ERROR_MESSAGE,
    INVALID_PASSWORD_MESSAGE,
    AuthError,
    DeleteError,
    FetchError,
    UploadError,
)
from presentations.schemas.auth import AuthRequest
from presentations.schemas.files import FileEntry

logger = logging.getLogger("presentations.api_client")


def _is_success(payload: Any) -> bool:
    # JSON falsy values: empty objects and arrays still count as success
    if not isinstance(payload, dict):
        return False
    return payload.get("success") not in (None, False, 0, "")


class PresentationApiClient:
    """Async client for the presentation backend.

    A fresh ``httpx.AsyncClient`` is opened per call so an instance can be kept
    in the Streamlit session and reused across ``asyncio.run`` invocations.
    ``transport`` is only passed in by tests.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        token: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings or get_settings()
        self.base_url = self.settings.API_URL.rstrip("/")
        self.token = token
        self._transport = transport

    def _headers(self) -> dict:
        if self.token:
            return {"Authorization": f"Bearer {self.token}"}
        return {}

    async def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        logger.debug(">>> %s %s", method, path)
        start = time.perf_counter()
        async with httpx.AsyncClient(
            base_url=self.base_url,
            headers=self._headers(),
            timeout=self.settings.REQUEST_TIMEOUT,
            transport=self._transport,
        ) as client:
            response = await client.request(method, path, **kwargs)
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.debug(
            "<<< %s %s | status=%d | %.1fms",
            method, path, response.status_code, elapsed_ms,
        )
        return response

    # --- Auth ---

    async def verify_password(self, password: str) -> Optional[str]:
        """Returns the bearer token issued by the backend, if any.

        Raises AuthError when the backend does not report success.
        """
        try:
            response = await self._request(
                "POST", "/auth", json=AuthRequest(password=password).model_dump()
            )
            payload = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("Auth request failed: %s", e)
            raise AuthError(CONNECTION_ERROR_MESSAGE, reason="connection") from e

        if not _is_success(payload):
            logger.info("Backend rejected password (status=%d)", response.status_code)
            raise AuthError(INVALID_PASSWORD_MESSAGE, reason="rejected")

        token = payload.get("token")
        return token if isinstance(token, str) and token else None

    # --- Listing ---

    async def list_files(self) -> List[FileEntry]:
        try:
            response = await self._request("GET", "/presentations")
            payload = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("Listing request failed: %s", e)
            raise FetchError("Failed to load presentations", reason="connection") from e

        raw_files = payload.get("files") if isinstance(payload, dict) else None
        if not raw_files:
            logger.debug("Listing returned no files")
            return []
        try:
            files = [FileEntry.model_validate(item) for item in raw_files]
        except (ValidationError, TypeError) as e:
            logger.error("Malformed listing payload: %s", e)
            raise FetchError("Failed to load presentations", reason="malformed") from e
        logger.debug("Listing returned %d files", len(files))
        return files

    # --- Upload ---

    async def upload_file(self, name: str, content: bytes, content_type: Optional[str] = None):
        files = {"file": (name, content, content_type or "application/octet-stream")}
        try:
            response = await self._request("POST", "/upload", files=files)
            payload = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("Upload of '%s' failed in transit: %s", name, e)
            raise UploadError(f"Error uploading {name}", reason="connection") from e

        if not _is_success(payload):
            logger.warning("Backend rejected upload of '%s' (status=%d)", name, response.status_code)
            raise UploadError(f"Failed to upload {name}", reason="rejected")
        logger.info("Uploaded '%s' (%d bytes)", name, len(content))

    # --- Delete ---

    async def delete_file(self, name: str):
        try:
            response = await self._request("DELETE", f"/delete/{quote(name, safe='')}")
            payload = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("Delete of '%s' failed in transit: %s", name, e)
            raise DeleteError("Error deleting file", reason="connection") from e

        if not _is_success(payload):
            logger.warning("Backend rejected delete of '%s' (status=%d)", name, response.status_code)
            raise DeleteError("Failed to delete", reason="rejected")
        logger.info("Deleted '%s'", name)

    # --- Retrieval ---

    def download_url(self, name: str) -> str:
        return f"{self.base_url}/download/{quote(name, safe='')}"
