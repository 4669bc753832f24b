"""IP geolocation client for the report header."""
import ipaddress
import logging
from typing import Any, Dict, Optional

import httpx

from domain.entities import ClientInfo
from config import settings

logger = logging.getLogger(__name__)


def is_local_address(ip: Optional[str]) -> bool:
    """Private, loopback and unknown addresses resolve to the caller's own public IP."""
    if not ip or ip == "Unknown":
        return True
    try:
        addr = ipaddress.ip_address(ip)
    except ValueError:
        return True
    return addr.is_private or addr.is_loopback or addr.is_link_local


class GeoLocationClient:
    """Looks up ISP and location for an IP via an ip-api.com compatible endpoint."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout_s: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = (base_url or settings.GEO_LOOKUP_URL).rstrip("/") + "/"
        self.timeout = timeout_s if timeout_s is not None else settings.GEO_TIMEOUT_S
        self._transport = transport

    async def lookup(self, ip: Optional[str] = None) -> ClientInfo:
        """Never raises; on any failure returns a ClientInfo with Unknown fields."""
        url = self.base_url if is_local_address(ip) else f"{self.base_url}{ip}"
        fallback = ClientInfo(ip=ip or "Unknown")
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.get(url)
                response.raise_for_status()
                data: Dict[str, Any] = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"geo-lookup-failed: {e}")
            return fallback

        if not isinstance(data, dict) or data.get("status") == "fail":
            logger.warning(f"geo-lookup-failed: {data.get('message') if isinstance(data, dict) else 'bad payload'}")
            return fallback

        try:
            return ClientInfo(
                ip=data.get("query") or ip or "Unknown",
                isp=data.get("isp") or "Unknown",
                country=data.get("country") or "Unknown",
                city=data.get("city") or "Unknown",
                country_code=data.get("countryCode") or "",
                region=data.get("regionName") or "",
                lat=float(data.get("lat") or 0.0),
                lon=float(data.get("lon") or 0.0),
            )
        except (TypeError, ValueError) as e:
            logger.warning(f"geo-lookup-failed: {e}")
            return fallback
