"""
Distance API routes.
Formats the distance between two instants as a locale-aware relative time.
"""

from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from intl_distance.dependencies import get_distance_service
from intl_distance.exceptions import IntlDistanceError
from intl_distance.models.distance import (
    DistanceResponse,
    LocaleMatcher,
    Numeric,
    Style,
    Unit,
)
from intl_distance.services.distance_service import DistanceService

router = APIRouter()


@router.get("/api/distance", response_model=DistanceResponse)
async def get_distance(
    date: datetime = Query(..., description="Instant being described (ISO 8601)"),
    base_date: datetime = Query(..., description="Instant to compare with (ISO 8601)"),
    unit: Optional[Unit] = Query(None, description="Force this unit"),
    locale: Optional[List[str]] = Query(None, description="BCP 47 tags in preference order"),
    locale_matcher: Optional[LocaleMatcher] = Query(None, description="Locale matching algorithm"),
    numeric: Optional[Numeric] = Query(None, description="Output message format"),
    style: Optional[Style] = Query(None, description="Length of the message"),
    service: DistanceService = Depends(get_distance_service),
):
    """
    Get the distance from base_date to date with its formatted text.
    """
    options = {
        "unit": unit,
        "locale": locale,
        "locale_matcher": locale_matcher,
        "numeric": numeric,
        "style": style,
    }

    try:
        distance, text = service.format_distance(
            date, base_date, {k: v for k, v in options.items() if v is not None}
        )
    except IntlDistanceError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return DistanceResponse(value=distance.value, unit=distance.unit, text=text)
