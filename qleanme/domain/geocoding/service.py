"""
Geocoding via Nominatim (OpenStreetMap)
Address autocomplete, reverse lookup and coordinates for the order review map
"""

import logging
from typing import Optional

import httpx
from fastapi import HTTPException

from ...cache import cached
from ...config import (
    DEFAULT_LATITUDE,
    DEFAULT_LONGITUDE,
    GEOCODING_CACHE_SECONDS,
    NOMINATIM_BASE_URL,
    NOMINATIM_COUNTRY_CODES,
    NOMINATIM_USER_AGENT,
)

logger = logging.getLogger(__name__)

MAX_SEARCH_RESULTS = 10
REQUEST_TIMEOUT_SECONDS = 10.0


async def _nominatim_get(path: str, params: dict):
    # Nominatim's usage policy requires an identifying User-Agent
    headers = {"User-Agent": NOMINATIM_USER_AGENT, "Accept-Language": "en"}
    async with httpx.AsyncClient(timeout=REQUEST_TIMEOUT_SECONDS) as client:
        response = await client.get(f"{NOMINATIM_BASE_URL}{path}", params=params, headers=headers)
        response.raise_for_status()
        return response.json()


def _to_place(item: dict) -> dict:
    display_name = item.get("display_name", "")
    return {
        "title": item.get("name") or display_name.split(",")[0].strip(),
        "full_address": display_name,
        "latitude": float(item["lat"]),
        "longitude": float(item["lon"]),
    }


@cached(key_prefix="geocode_search", ttl=GEOCODING_CACHE_SECONDS)
async def search_addresses(query: str) -> list[dict]:
    """Address suggestions for a free-text query"""
    params = {
        "q": query.strip(),
        "format": "jsonv2",
        "addressdetails": 1,
        "limit": MAX_SEARCH_RESULTS,
        "countrycodes": NOMINATIM_COUNTRY_CODES,
    }
    try:
        results = await _nominatim_get("/search", params)
    except (httpx.HTTPError, ValueError) as e:
        logger.error(f"❌ Address search failed: {e}")
        raise HTTPException(status_code=502, detail="Geocoding service unavailable") from e

    places = [_to_place(item) for item in results[:MAX_SEARCH_RESULTS]]
    logger.debug(f"🔍 Address search returned {len(places)} results")
    return places


async def reverse_geocode(latitude: float, longitude: float) -> dict:
    params = {"lat": latitude, "lon": longitude, "format": "jsonv2"}
    try:
        result = await _nominatim_get("/reverse", params)
    except (httpx.HTTPError, ValueError) as e:
        logger.error(f"❌ Reverse geocoding failed for {latitude},{longitude}: {e}")
        raise HTTPException(status_code=404, detail="Address not found") from e

    if not result or "error" in result or not result.get("display_name"):
        raise HTTPException(status_code=404, detail="Address not found")
    return _to_place(result)


@cached(key_prefix="geocode", ttl=GEOCODING_CACHE_SECONDS)
async def _lookup_coordinates(address: str) -> Optional[dict]:
    params = {"q": address, "format": "jsonv2", "limit": 1, "countrycodes": NOMINATIM_COUNTRY_CODES}
    try:
        results = await _nominatim_get("/search", params)
    except (httpx.HTTPError, ValueError) as e:
        logger.warning(f"⚠️ Geocoding failed for order address: {e}")
        return None

    if not results:
        return None
    return {"latitude": float(results[0]["lat"]), "longitude": float(results[0]["lon"])}


async def geocode_address(address: str) -> dict:
    """Coordinates for an address, downtown Vancouver when it cannot be resolved"""
    coordinates = await _lookup_coordinates(address) if address and address.strip() else None
    if coordinates is None:
        logger.info("📍 Using default map location")
        return {"latitude": DEFAULT_LATITUDE, "longitude": DEFAULT_LONGITUDE}
    return coordinates
