from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from app.core.config import settings

logger = logging.getLogger(__name__)


class NWSClient:
    """
    Thin wrapper over api.weather.gov.

    Every failure mode (transport error, non-2xx status, undecodable body)
    collapses to ``None``; callers only see presence or absence of data.
    """

    def __init__(
        self,
        base_url: str | None = None,
        user_agent: str | None = None,
        accept: str | None = None,
        timeout_seconds: float | None = None,
    ):
        self.base_url = (base_url or settings.nws_base_url).rstrip("/")
        self.headers = {
            "User-Agent": user_agent or settings.nws_user_agent,
            "Accept": accept or settings.nws_accept,
        }
        self.timeout = timeout_seconds

    def alerts_url(self, state: str) -> str:
        return f"{self.base_url}/alerts?area={state}"

    def points_url(self, latitude: float, longitude: float) -> str:
        return f"{self.base_url}/points/{latitude:.4f},{longitude:.4f}"

    async def fetch_json(self, url: str) -> Optional[Dict[str, Any]]:
        try:
            async with httpx.AsyncClient(timeout=self.timeout, follow_redirects=True) as client:
                r = await client.get(url, headers=self.headers)
                r.raise_for_status()
                data = r.json()
        except httpx.HTTPStatusError as e:
            logger.warning("NWS %s returned %d", url, e.response.status_code)
            return None
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning("NWS request error for %r: %s", url, e)
            return None
        except ValueError as e:
            logger.warning("NWS %s returned a non-JSON body: %s", url, e)
            return None

        if not isinstance(data, dict):
            logger.warning("NWS %s returned unexpected JSON (%s)", url, type(data).__name__)
            return None
        return data
