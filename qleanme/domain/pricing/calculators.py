"""Order price calculators.

Every formula is base price + per-unit add-ons, optionally scaled by a
multiplier or reduced by a recurring discount. Totals are rounded to cents.
"""

from decimal import ROUND_HALF_UP, Decimal

from .catalog import (
    ADDITIONAL_CLEANING_SERVICE_PRICE,
    ADDITIONAL_SERVICE_PRICE,
    BASE_CLEANING_PRICE,
    BASE_CLEANING_ROOM_PRICE,
    BRING_CLEANING_PRODUCTS_PRICE,
    CAR_DETAILING_ADDON_PRICE,
    CLEANING_AREA_SURCHARGE,
    CLEANING_DEPTH_PRICE,
    EXTRA_BATHROOM_PRICE,
    EXTRA_BEDROOM_PRICE,
    EXTRA_ROOM_PRICE,
    HOME_CLEANING_BASE_PRICE,
    LAUNDRY_ADDON_PRICE,
    LAUNDRY_BASE_PRICE,
    LAUNDRY_LOAD_MULTIPLIER,
    PROPERTY_SIZE_MULTIPLIER,
    RECURRING_DISCOUNT,
    LaundryServiceType,
)
from .schemas import (
    BaseCleaningOptions,
    CarDetailingOptions,
    HomeCleaningOptions,
    LaundryOptions,
    PriceBreakdown,
)

CENTS = Decimal("0.01")


def to_cents(amount: Decimal) -> Decimal:
    return amount.quantize(CENTS, rounding=ROUND_HALF_UP)


def home_cleaning_rooms_price(options: HomeCleaningOptions) -> Decimal:
    """The first bedroom, bathroom and other room are included in the base"""
    return (
        (options.bedrooms - 1) * EXTRA_BEDROOM_PRICE
        + (options.bathrooms - 1) * EXTRA_BATHROOM_PRICE
        + (options.rooms - 1) * EXTRA_ROOM_PRICE
    )


def calculate_home_cleaning(options: HomeCleaningOptions) -> PriceBreakdown:
    base = HOME_CLEANING_BASE_PRICE[options.cleaning_type]
    rooms = home_cleaning_rooms_price(options)
    multiplier = PROPERTY_SIZE_MULTIPLIER[options.property_size]
    addons = sum((ADDITIONAL_SERVICE_PRICE[s] for s in options.additional_services), Decimal("0"))

    # Size scales the labour, not the fixed-price extras
    total = (base + rooms) * multiplier + addons

    return PriceBreakdown(
        base_price=base,
        rooms_price=rooms,
        multiplier=multiplier,
        addons_price=addons,
        total=to_cents(total),
        addons=[s.value for s in options.additional_services],
    )


def calculate_base_cleaning(options: BaseCleaningOptions) -> PriceBreakdown:
    rooms = (options.bedrooms + options.bathrooms) * BASE_CLEANING_ROOM_PRICE
    surcharge = CLEANING_AREA_SURCHARGE[options.area_size]
    if options.bring_cleaning_products:
        surcharge += BRING_CLEANING_PRODUCTS_PRICE
    addons = sum(
        (ADDITIONAL_CLEANING_SERVICE_PRICE[s] for s in options.additional_services), Decimal("0")
    )

    subtotal = BASE_CLEANING_PRICE + rooms + surcharge + addons
    discount = subtotal * RECURRING_DISCOUNT[options.recurring_option]

    return PriceBreakdown(
        base_price=BASE_CLEANING_PRICE,
        rooms_price=rooms,
        surcharge=surcharge,
        addons_price=addons,
        discount=to_cents(discount),
        total=to_cents(subtotal - discount),
        addons=[s.value for s in options.additional_services],
    )


def calculate_laundry(options: LaundryOptions) -> PriceBreakdown:
    unit_price = LAUNDRY_BASE_PRICE[options.service]
    if options.service == LaundryServiceType.DRY_CLEANING:
        # Dry cleaning is charged per garment, load size does not apply
        multiplier = Decimal(options.clothes_amount)
    else:
        multiplier = LAUNDRY_LOAD_MULTIPLIER[options.service][options.load_size]
    addons = sum((LAUNDRY_ADDON_PRICE[a] for a in options.addons), Decimal("0"))

    return PriceBreakdown(
        base_price=unit_price,
        multiplier=multiplier,
        addons_price=addons,
        total=to_cents(unit_price * multiplier + addons),
        addons=[a.value for a in options.addons],
    )


def calculate_car_detailing(options: CarDetailingOptions) -> PriceBreakdown:
    base = CLEANING_DEPTH_PRICE[options.depth]
    addons = sum((CAR_DETAILING_ADDON_PRICE[a] for a in options.addons), Decimal("0"))

    return PriceBreakdown(
        base_price=base,
        addons_price=addons,
        total=to_cents(base + addons),
        addons=[a.value for a in options.addons],
    )
