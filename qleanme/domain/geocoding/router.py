"""Geocoding router - address search for the booking screens"""

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from ...auth import get_current_phone
from .service import reverse_geocode, search_addresses

router = APIRouter(prefix="/geocoding", tags=["Geocoding"], dependencies=[Depends(get_current_phone)])


class Place(BaseModel):
    title: str
    full_address: str
    latitude: float
    longitude: float


@router.get("/search", response_model=list[Place])
async def search(q: str = Query(..., min_length=3)):
    return await search_addresses(q)


@router.get("/reverse", response_model=Place)
async def reverse(lat: float = Query(..., ge=-90, le=90), lon: float = Query(..., ge=-180, le=180)):
    return await reverse_geocode(lat, lon)
