"""Pricing schemas - the selections a customer makes on each booking screen"""

from decimal import Decimal

from pydantic import BaseModel, Field, field_serializer, field_validator, model_validator

from .catalog import (
    LAUNDRY_ADDON_SERVICES,
    MAX_ROOMS,
    MIN_ROOMS,
    AdditionalCleaningService,
    AdditionalService,
    CarDetailingAddon,
    CarType,
    CleaningAreaSize,
    CleaningDepth,
    DetailingScope,
    HomeCleaningType,
    LaundryAddonType,
    LaundryLoadSize,
    LaundryServiceType,
    PropertySize,
    RecurringServiceOption,
)


def _unique(values: list) -> list:
    """Selections behave like a set; keep first-seen order"""
    return list(dict.fromkeys(values))


class HomeCleaningOptions(BaseModel):
    cleaning_type: HomeCleaningType = HomeCleaningType.REGULAR
    bedrooms: int = Field(1, ge=MIN_ROOMS, le=MAX_ROOMS)
    bathrooms: int = Field(1, ge=MIN_ROOMS, le=MAX_ROOMS)
    rooms: int = Field(1, ge=MIN_ROOMS, le=MAX_ROOMS)
    property_size: PropertySize = PropertySize.SMALL
    additional_services: list[AdditionalService] = Field(default_factory=list)

    @field_validator("additional_services")
    @classmethod
    def dedupe_services(cls, v):
        return _unique(v)


class BaseCleaningOptions(BaseModel):
    bedrooms: int = Field(2, ge=0)
    bathrooms: int = Field(2, ge=0)
    area_size: CleaningAreaSize = CleaningAreaSize.SMALL
    additional_services: list[AdditionalCleaningService] = Field(default_factory=list)
    bring_cleaning_products: bool = True
    recurring_option: RecurringServiceOption = RecurringServiceOption.NONE

    @field_validator("additional_services")
    @classmethod
    def dedupe_services(cls, v):
        return _unique(v)


class LaundryOptions(BaseModel):
    service: LaundryServiceType = LaundryServiceType.WASHING
    load_size: LaundryLoadSize = LaundryLoadSize.SMALL
    clothes_amount: int = Field(1, ge=1)  # only priced for dry cleaning
    addons: list[LaundryAddonType] = Field(default_factory=list)

    @field_validator("addons")
    @classmethod
    def dedupe_addons(cls, v):
        return _unique(v)

    @model_validator(mode="after")
    def addons_need_washing(self):
        if self.addons and self.service not in LAUNDRY_ADDON_SERVICES:
            allowed = ", ".join(s.value for s in LAUNDRY_ADDON_SERVICES)
            raise ValueError(f"Add-ons are only available for: {allowed}")
        return self


class CarDetailingOptions(BaseModel):
    car_type: CarType = CarType.CAR
    scope: DetailingScope = DetailingScope.BOTH
    depth: CleaningDepth = CleaningDepth.MEDIUM
    addons: list[CarDetailingAddon] = Field(default_factory=list)

    @field_validator("addons")
    @classmethod
    def dedupe_addons(cls, v):
        return _unique(v)


class PriceBreakdown(BaseModel):
    """How a total was reached. Amounts are dollars, total rounded to cents"""

    base_price: Decimal
    rooms_price: Decimal = Decimal("0")
    multiplier: Decimal = Decimal("1")
    surcharge: Decimal = Decimal("0")
    addons_price: Decimal = Decimal("0")
    discount: Decimal = Decimal("0")
    total: Decimal
    addons: list[str] = Field(default_factory=list)

    @field_serializer(
        "base_price", "rooms_price", "multiplier", "surcharge", "addons_price", "discount", "total"
    )
    def as_number(self, value: Decimal) -> float:
        return float(value)
