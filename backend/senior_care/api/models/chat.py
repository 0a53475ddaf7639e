"""
Request and response models for the chat relay endpoints.

Optional user-state fields are coerced at the boundary: a value with the
wrong shape is treated as absent instead of failing the request.
"""
import math
from collections.abc import Mapping
from numbers import Real
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_WATER_GOAL = 8


def _text(value: Any) -> Optional[str]:
    if isinstance(value, str):
        return value
    if isinstance(value, Real) and not isinstance(value, bool):
        return str(value) if _number(value) is not None else None
    return None


def _number(value: Any) -> Optional[float]:
    """Finite float or None; huge integers, NaN and infinities count as absent."""
    if isinstance(value, bool) or not isinstance(value, Real):
        return None
    try:
        result = float(value)
    except OverflowError:
        return None
    return result if math.isfinite(result) else None


def _records(value: Any) -> List[Mapping]:
    """Keep only mapping entries that carry a name."""
    if not isinstance(value, (list, tuple)):
        return []
    return [item for item in value if isinstance(item, Mapping) and _text(item.get("name"))]


class Medication(BaseModel):
    name: str
    time: str = ""
    taken: bool = False

    @field_validator("time", mode="before")
    @classmethod
    def coerce_time(cls, value: Any) -> str:
        return _text(value) or ""

    @field_validator("taken", mode="before")
    @classmethod
    def coerce_taken(cls, value: Any) -> bool:
        return value is True


class EmergencyContact(BaseModel):
    name: str
    phone: str = ""

    @field_validator("phone", mode="before")
    @classmethod
    def coerce_phone(cls, value: Any) -> str:
        return _text(value) or ""


class UserData(BaseModel):
    """Session context supplied by the front-end alongside a message."""

    model_config = ConfigDict(populate_by_name=True)

    location: Optional[str] = None
    medications: List[Medication] = Field(default_factory=list)
    item_locations: Dict[str, str] = Field(default_factory=dict, alias="itemLocations")
    water_intake: Optional[float] = Field(default=None, alias="waterIntake")
    water_goal: Optional[float] = Field(default=None, alias="waterGoal")
    emergency_contacts: List[EmergencyContact] = Field(
        default_factory=list, alias="emergencyContacts"
    )

    @field_validator("location", mode="before")
    @classmethod
    def coerce_location(cls, value: Any) -> Optional[str]:
        return _text(value)

    @field_validator("medications", "emergency_contacts", mode="before")
    @classmethod
    def coerce_records(cls, value: Any) -> List[Dict[str, Any]]:
        return [dict(item, name=_text(item.get("name"))) for item in _records(value)]

    @field_validator("item_locations", mode="before")
    @classmethod
    def coerce_item_locations(cls, value: Any) -> Dict[str, str]:
        if not isinstance(value, Mapping):
            return {}
        return {
            str(item): _text(place)
            for item, place in value.items()
            if _text(place) is not None
        }

    @field_validator("water_intake", "water_goal", mode="before")
    @classmethod
    def coerce_number(cls, value: Any) -> Optional[float]:
        return _number(value)

    @property
    def effective_water_goal(self) -> float:
        if self.water_goal is None or self.water_goal <= 0:
            return DEFAULT_WATER_GOAL
        return self.water_goal


class ChatRequest(BaseModel):
    """Payload for the chat relay.

    - message: the user's text; checked by the controller so that a missing or
      non-string value is reported as a 400 rather than a schema error
    - userData: optional session context, see UserData
    """

    model_config = ConfigDict(populate_by_name=True)

    message: Any = None
    user_data: UserData = Field(default_factory=UserData, alias="userData")

    @field_validator("user_data", mode="before")
    @classmethod
    def coerce_user_data(cls, value: Any) -> Any:
        if isinstance(value, (Mapping, UserData)):
            return value
        return {}


class ChatResponse(BaseModel):
    response: str
    timestamp: str


class ProbeResponse(BaseModel):
    status: str
    message: str
    response: Optional[str] = None
    error: Optional[str] = None
