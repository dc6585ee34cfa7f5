"""POEditor API client.

Exports are a two-step protocol: ``projects/export`` returns a temporary
download URL, and the catalog itself is downloaded from that URL.

See https://poeditor.com/docs/api
"""

import re
from typing import Any, Dict, Optional, Sequence

import requests

from infrastructure.configuration import settings
from infrastructure.logging import get_module_logger
from modules.export.errors import RemoteError

logger = get_module_logger()

SIMPLIFIED_CHINESE_PATTERN = re.compile(r"zh.+(hans|cn)")
TRADITIONAL_CHINESE_PATTERN = re.compile(r"zh.+(hant|tw)")


def convert_to_poeditor_language(language: str) -> str:
    """Map platform-specific Chinese codes to POEditor's codes.

    ``zh-Hans`` and ``zh-rCN`` become ``zh-CN``; ``zh-Hant`` and ``zh-rTW``
    become ``zh-TW``. Other codes are passed through.
    """
    lowered = language.lower()
    if SIMPLIFIED_CHINESE_PATTERN.search(lowered):
        return "zh-CN"
    if TRADITIONAL_CHINESE_PATTERN.search(lowered):
        return "zh-TW"
    return language


class PoEditorClient:
    """Fetches translation catalogs from POEditor.

    Attributes:
        api_key: POEditor API token
        project_id: POEditor project ID
        api_url: API base URL
        timeout: Timeout in seconds for each HTTP request
    """

    def __init__(
        self,
        api_key: str,
        project_id: str,
        api_url: Optional[str] = None,
        timeout: Optional[int] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.api_key = api_key
        self.project_id = project_id
        self.api_url = api_url or settings.poeditor.POEDITOR_API_URL
        self.timeout = timeout or settings.poeditor.POEDITOR_REQUEST_TIMEOUT
        self._session = session or requests.Session()
        self._session.headers.update({"User-Agent": "poeditor-pull/1.0"})

    def api(self, action: str, options: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """POST an API action and return the decoded JSON body.

        Args:
            action: API action path (e.g., "projects/export")
            options: Form fields; the API token is added automatically

        Returns:
            Decoded response body.

        Raises:
            RemoteError: On transport failure, a non-JSON body or a
                response status other than "success".
        """
        data = dict(options or {})
        data["api_token"] = self.api_key
        url = f"{self.api_url}/{action}"

        try:
            response = self._session.post(url, data=data, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error("poeditor_request_failed", action=action, error=str(e))
            raise RemoteError(f"Failed to reach POEditor: {e}") from e

        try:
            body = response.json()
        except ValueError as e:
            logger.error(
                "poeditor_invalid_response",
                action=action,
                status_code=response.status_code,
            )
            raise RemoteError(
                f"Invalid response from POEditor (HTTP {response.status_code})"
            ) from e

        status = (body.get("response") or {}) if isinstance(body, dict) else {}
        if status.get("status") != "success":
            message = status.get("message") or "Unknown POEditor error"
            code = status.get("code")
            logger.error(
                "poeditor_request_rejected",
                action=action,
                message=message,
                code=code,
            )
            raise RemoteError(message, None if code is None else str(code))

        return body

    def download(self, url: str) -> str:
        """Download an exported file.

        Raises:
            RemoteError: On transport failure or a non-2xx status.
        """
        try:
            response = self._session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error("poeditor_download_failed", error=str(e))
            raise RemoteError(f"Failed to download export: {e}") from e

        # JSON exports are UTF-8 regardless of the declared charset
        try:
            return response.content.decode("utf-8")
        except UnicodeDecodeError as e:
            raise RemoteError(f"Export is not valid UTF-8: {e}") from e

    def fetch(
        self,
        language: str,
        tags: Optional[Sequence[str]] = None,
        filters: Optional[Sequence[str]] = None,
    ) -> str:
        """Export a language as JSON and download it.

        Args:
            language: Language code as configured (converted for POEditor)
            tags: Tag filters
            filters: Status filters

        Returns:
            Raw JSON text of the catalog.

        Raises:
            RemoteError: If either step fails.
        """
        options = {
            "id": self.project_id,
            "language": convert_to_poeditor_language(language),
            "type": "json",
            "tags": ",".join(tags or []),
            "filters": ",".join(filters or []),
        }
        logger.info(
            "poeditor_export_requested",
            language=options["language"],
            tags=list(tags or []),
            filters=list(filters or []),
        )
        body = self.api("projects/export", options)

        url = (body.get("result") or {}).get("url")
        if not url:
            raise RemoteError("POEditor export response has no download URL")
        return self.download(url)

