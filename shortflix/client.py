import httpx
import logging
from typing import Any, Dict, List, Mapping, Optional, Union

from .config import get_settings
from .models import Short, ShortCreate

logger = logging.getLogger("shortflix.client")


class CatalogClient:
    """Async wrapper around the shorts endpoints.

    HTTP and transport errors are raised to the caller as httpx exceptions.
    """

    def __init__(self, base_url: Optional[str] = None, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base = (base_url or get_settings().api_base_url).rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self.base,
            headers={"Content-Type": "application/json"},
            transport=transport,
        )

    async def __aenter__(self) -> "CatalogClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def get_shorts(self, query: Optional[str] = None, tag: Optional[str] = None) -> List[Short]:
        params: Dict[str, str] = {}
        if query and query.strip():
            params["q"] = query.strip()
        if tag:
            params["tag"] = tag
        resp = await self._client.get("/shorts", params=params)
        resp.raise_for_status()
        return [Short.model_validate(item) for item in resp.json()]

    async def create_short(self, payload: Union[ShortCreate, Mapping[str, Any]]) -> Short:
        if isinstance(payload, ShortCreate):
            body = payload.model_dump(by_alias=True)
        else:
            body = dict(payload)
        resp = await self._client.post("/shorts", json=body)
        resp.raise_for_status()
        short = Short.model_validate(resp.json())
        logger.debug("Created short %s", short.id)
        return short
