import json
import logging
from collections.abc import Mapping
from typing import Any

from httpx import AsyncClient, HTTPError, HTTPStatusError

from mipush.core.config import settings
from mipush.core.exceptions import InvalidMessageError, PushRequestError

logger = logging.getLogger(__name__)

TOPIC_SEPARATOR = ";$;"


def encode_params(params: Mapping[str, Any]) -> dict[str, str]:
    """
    Flatten a message field mapping into the form fields the push API expects.

    Raises:
        InvalidMessageError: `extras` is not a mapping
    """
    form = {}
    for key, value in params.items():
        if value is None:
            continue
        if key == "extras":
            if not isinstance(value, Mapping):
                raise InvalidMessageError(
                    f"extras must be a mapping, got {type(value).__name__}"
                )
            for extra_key, extra_value in value.items():
                if extra_value is not None:
                    form[f"extra.{extra_key}"] = _encode_value(extra_value)
            continue
        form[key] = _encode_value(value)
    return form


def _encode_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, list | tuple):
        return TOPIC_SEPARATOR.join(str(item) for item in value)
    if isinstance(value, Mapping):
        return json.dumps(value, separators=(",", ":"))
    return str(value)


class PushClient:
    def __init__(
        self,
        app_secret: str | None = None,
        sandbox: bool | None = None,
        timeout: float | None = None,
    ):
        self.app_secret = app_secret if app_secret is not None else settings.APP_SECRET
        use_sandbox = settings.USE_SANDBOX if sandbox is None else sandbox
        self.host = settings.SANDBOX_HOST if use_sandbox else settings.PRODUCTION_HOST
        self.timeout = timeout if timeout is not None else settings.REQUEST_TIMEOUT

    def build_uri(self, path: str, version: str | None = None) -> str:
        return f"{self.host}/{version or settings.API_VERSION}/{path}"

    def _headers(self) -> dict[str, str]:
        return {"Authorization": f"key={self.app_secret}", "Accept": "application/json"}

    async def post(self, path: str, params: Mapping[str, Any], version: str | None = None) -> dict:
        return await self._request("POST", self.build_uri(path, version), params)

    async def get(self, path: str, params: Mapping[str, Any], version: str | None = None) -> dict:
        return await self._request("GET", self.build_uri(path, version), params)

    async def _request(self, method: str, url: str, params: Mapping[str, Any]) -> dict:
        form = encode_params(params)
        async with AsyncClient(timeout=self.timeout) as client:
            try:
                if method == "GET":
                    response = await client.get(url, params=form, headers=self._headers())
                else:
                    response = await client.post(url, data=form, headers=self._headers())
                response.raise_for_status()
                result = response.json()
            except HTTPStatusError as e:
                logger.error(f"Push service returned {e.response.status_code} for {url}")
                raise PushRequestError(
                    f"Push service error: {e.response.status_code}",
                    status_code=e.response.status_code,
                ) from e
            except (HTTPError, ValueError) as e:
                logger.error(f"Error calling push service {url}: {e}")
                raise PushRequestError(f"Push service error: {str(e)}") from e

        if not isinstance(result, dict):
            logger.error(f"Unexpected response from push service {url}: {result!r}")
            raise PushRequestError("Push service error: unexpected response format")

        if result.get("result") == "error":
            reason = result.get("reason") or result.get("description") or "Unknown error"
            logger.error(f"Push request to {url} failed: {reason}")
            raise PushRequestError(
                f"Push request failed: {reason}", status_code=400, code=result.get("code")
            )
        return result
