"""OpenDataSoft Schemas - Pydantic models of the remote search response.

Invariants:
    - SearchPayload requires a `records` list; elements are validated one by one
    - CityFields: name non-empty, population >= 0, coordinates serialized to "lat, lon"
    - Unknown fields are ignored (the dataset carries many more columns)

Design Decisions:
    - records typed list[Any] at page level: a bad element must not fail the page
    - coordinates accepts "lat, lon" strings or [lat, lon] pairs (the API returns pairs)
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SearchPayload(BaseModel):
    """Top-level search response body."""
    model_config = ConfigDict(extra="ignore")

    records: list[Any]


class CityFields(BaseModel):
    """The `fields` object of one record."""
    model_config = ConfigDict(extra="ignore")

    name: str = Field(min_length=1)
    cou_name_en: str
    population: int = Field(ge=0)
    timezone: str
    coordinates: str

    @field_validator("coordinates", mode="before")
    @classmethod
    def serialize_coordinates(cls, v: Any) -> Any:
        if isinstance(v, (list, tuple)):
            if len(v) != 2 or not all(
                isinstance(c, (int, float)) and not isinstance(c, bool) for c in v
            ):
                raise ValueError("coordinates must be a [lat, lon] pair")
            return f"{v[0]}, {v[1]}"
        if isinstance(v, str):
            return v.strip()
        return v


class CityRecord(BaseModel):
    """One element of `records`."""
    model_config = ConfigDict(extra="ignore")

    recordid: str = Field(min_length=1)
    fields: CityFields
