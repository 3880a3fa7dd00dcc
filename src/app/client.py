"""AtlasClient — async HTTP client for the FRA Atlas API.

``demo_message`` mirrors the landing page: a failed greeting fetch is
logged and swallowed. Every other call raises ``httpx.HTTPStatusError``
on a non-2xx response.
"""

from __future__ import annotations

import httpx
from loguru import logger

_USER_AGENT = "FRA-Atlas-Client/0.1.0"


class AtlasClient:
    """Thin async wrapper over the FRA Atlas HTTP API."""

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            transport=transport,
            headers={"User-Agent": _USER_AGENT},
        )

    async def __aenter__(self) -> "AtlasClient":
        return self

    async def __aexit__(self, *exc) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def demo_message(self) -> str:
        """Landing-page greeting, or an empty string if it cannot be fetched."""
        try:
            resp = await self._client.get("/api/demo")
            resp.raise_for_status()
            return str(resp.json().get("message", ""))
        except (httpx.HTTPError, ValueError, AttributeError) as e:
            logger.warning(f"Error fetching demo: {e}")
            return ""

    async def list_layers(self) -> list[dict]:
        resp = await self._client.get("/api/layers")
        resp.raise_for_status()
        return resp.json()["layers"]

    async def upload_layer(self, filename: str, content: bytes | str) -> dict:
        if isinstance(content, str):
            content = content.encode("utf-8")
        resp = await self._client.post(
            "/api/layers",
            files={"file": (filename, content, "application/geo+json")},
        )
        resp.raise_for_status()
        return resp.json()

    async def remove_layer(self, layer_id: str) -> bool:
        resp = await self._client.delete(f"/api/layers/{layer_id}")
        resp.raise_for_status()
        return bool(resp.json()["removed"])

    async def select(self, primary_id: str | None, secondary_id: str | None = None) -> dict:
        resp = await self._client.put(
            "/api/rules/selection",
            json={"primary_id": primary_id, "secondary_id": secondary_id},
        )
        resp.raise_for_status()
        return resp.json()

    async def land_use(self) -> str:
        resp = await self._client.post("/api/rules/land-use")
        resp.raise_for_status()
        return resp.json()["output"]

    async def detect_changes(self) -> str:
        resp = await self._client.post("/api/rules/changes")
        resp.raise_for_status()
        return resp.json()["output"]

    async def focus(self, region_name: str) -> dict:
        resp = await self._client.post(f"/api/map/focus/{region_name}")
        resp.raise_for_status()
        return resp.json()
