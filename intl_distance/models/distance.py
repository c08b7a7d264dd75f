"""
Distance models for relative-time classification and formatting.
"""

from enum import Enum
from typing import List, Literal, NamedTuple, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class Unit(str, Enum):
    """Calendar unit, ordered from finest to coarsest"""

    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    QUARTER = "quarter"
    YEAR = "year"


LocaleMatcher = Literal["lookup", "best fit"]
Numeric = Literal["always", "auto"]
Style = Literal["long", "short", "narrow"]


class DistanceOptions(BaseModel):
    """Options for intl_format_distance"""

    unit: Optional[Unit] = Field(None, description="Force this unit instead of picking one")
    locale: Optional[Union[str, List[str]]] = Field(
        None, description="BCP 47 language tag or list of tags in preference order"
    )
    locale_matcher: Optional[LocaleMatcher] = Field(
        None, alias="localeMatcher", description="Locale matching algorithm"
    )
    numeric: Optional[Numeric] = Field(None, description="Output message format")
    style: Optional[Style] = Field(None, description="Length of the message")

    model_config = ConfigDict(
        populate_by_name=True,
        extra="forbid",
        json_schema_extra={
            "example": {
                "unit": "minute",
                "locale": "es",
                "localeMatcher": "best fit",
                "numeric": "always",
                "style": "long",
            }
        },
    )


class Distance(NamedTuple):
    """Signed magnitude and the unit it is counted in"""

    value: int
    unit: Unit


class DistanceResponse(BaseModel):
    """Distance API response"""

    value: int = Field(..., description="Signed number of units")
    unit: Unit = Field(..., description="Unit the value is counted in")
    text: str = Field(..., description="Locale-formatted relative time")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "value": 1,
                "unit": "hour",
                "text": "in 1 hour",
            }
        },
    )
