from __future__ import annotations

from enum import Enum

from pydantic import AliasChoices, BaseModel, Field, field_validator

PRICE_INDICATORS = ("$", "$$", "$$$", "$$$$")


class VendorCategoryName(str, Enum):
    venue = "venue"
    photographer = "photographer"
    catering = "catering"
    florist = "florist"
    music = "music"
    decoration = "decoration"


class Vendor(BaseModel):
    id: str
    name: str
    category: str
    description: str = ""
    location: str
    address: str | None = None
    phone: str | None = None
    website: str | None = None
    email: str | None = None
    rating: float = Field(..., ge=0.0, le=5.0)
    review_count: int = Field(default=0, ge=0)
    price_range: str = ""
    price_indicator: str = Field(default="$$", pattern=r"^\${1,4}$")
    images: list[str] = Field(default_factory=list)
    features: list[str] = Field(default_factory=list)
    business_hours: dict[str, str] = Field(default_factory=dict)
    social_media: dict[str, str] = Field(default_factory=dict)
    verified: bool = False
    specialties: list[str] = Field(default_factory=list)
    availability: bool = True
    response_time: str | None = None
    languages: list[str] = Field(default_factory=list)
    is_real: bool = False


class VendorSearchRequest(BaseModel):
    category: str = Field(..., min_length=1)
    location: str = Field(..., min_length=1)
    budget_range: str | None = Field(
        default=None,
        validation_alias=AliasChoices("budget_range", "budgetRange"),
        description='Budget bucket, e.g. "£1,000 - £2,500" or "Over £10,000"',
    )
    guest_count: int | None = Field(
        default=None, ge=1, validation_alias=AliasChoices("guest_count", "guestCount")
    )
    wedding_date: str | None = Field(
        default=None, validation_alias=AliasChoices("wedding_date", "date")
    )
    search_radius: int | None = Field(
        default=None, ge=1, validation_alias=AliasChoices("search_radius", "radius")
    )
    preferences: list[str] = Field(default_factory=list)

    @field_validator("budget_range", "guest_count", "wedding_date", "search_radius", mode="before")
    @classmethod
    def blank_is_none(cls, value):
        # Form inputs send "" for untouched optional fields.
        if isinstance(value, str) and not value.strip():
            return None
        return value


class SearchMetadata(BaseModel):
    total_results: int
    search_time: str
    cache_used: bool
    ai_ranking_applied: bool
    sources: list[str]


class VendorSearchResponse(BaseModel):
    success: bool = True
    message: str = "Vendor search completed successfully"
    search_id: str
    vendors: list[Vendor]
    search_metadata: SearchMetadata
