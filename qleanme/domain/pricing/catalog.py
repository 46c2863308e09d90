"""Static rate tables for every bookable service.

Prices are Decimal dollars. Enum values are the display names the mobile
client shows and sends back, so they double as the stored order/add-on names.
"""

from decimal import Decimal
from enum import Enum


class ServiceCategory(str, Enum):
    CLEANING = "Cleaning"
    FUR_REMOVAL = "Fur Removal"
    LAUNDRY = "Laundry"
    PRESSURE_WASHING = "Pressure Washing"
    ECO_CLEANING = "Eco Cleaning"
    JUNK_REMOVAL = "Junk Removal"
    CAR_DETAILING = "Car Detailing"
    BOAT_CLEANING = "Boat Cleaning"


SERVICE_CATEGORY_DESCRIPTIONS: dict[ServiceCategory, str] = {
    ServiceCategory.CLEANING: "Tailored cleaning services to fit every need—standard, deep, move-in/out, and more",
    ServiceCategory.FUR_REMOVAL: "Say goodbye to stubborn pet hair with expert fur removal for all surfaces",
    ServiceCategory.LAUNDRY: "Fresh, clean laundry delivered with care—washing, drying, and folding included",
    ServiceCategory.PRESSURE_WASHING: "High-powered pressure washing to restore the sparkle to your exterior surfaces",
    ServiceCategory.ECO_CLEANING: "Green cleaning solutions for a spotless home without harming the environment",
    ServiceCategory.JUNK_REMOVAL: "Fast and hassle-free junk removal services to clear out your unwanted items",
    ServiceCategory.CAR_DETAILING: "Premium car detailing that leaves your vehicle spotless inside and out",
    ServiceCategory.BOAT_CLEANING: "Specialized boat cleaning services to keep your vessel looking shipshape",
}


# ============================================================================
# HOME CLEANING
# ============================================================================


class HomeCleaningType(str, Enum):
    REGULAR = "Regular Cleaning"
    DEEP = "Deep Cleaning"
    MOVE_IN_OUT = "Move In/Out Cleaning"


HOME_CLEANING_BASE_PRICE: dict[HomeCleaningType, Decimal] = {
    HomeCleaningType.REGULAR: Decimal("129.99"),
    HomeCleaningType.DEEP: Decimal("199.99"),
    HomeCleaningType.MOVE_IN_OUT: Decimal("249.99"),
}

HOME_CLEANING_DESCRIPTIONS: dict[HomeCleaningType, str] = {
    HomeCleaningType.REGULAR: "Standard cleaning service for maintaining a tidy home",
    HomeCleaningType.DEEP: "Thorough cleaning including hard-to-reach areas and detailed attention",
    HomeCleaningType.MOVE_IN_OUT: "Comprehensive cleaning for moving transitions",
}


class PropertySize(str, Enum):
    SMALL = "Small"
    MEDIUM = "Medium"
    LARGE = "Large"


PROPERTY_SIZE_MULTIPLIER: dict[PropertySize, Decimal] = {
    PropertySize.SMALL: Decimal("1.0"),
    PropertySize.MEDIUM: Decimal("1.3"),
    PropertySize.LARGE: Decimal("1.6"),
}

PROPERTY_SIZE_DESCRIPTIONS: dict[PropertySize, str] = {
    PropertySize.SMALL: "Up to 1,000 sq ft",
    PropertySize.MEDIUM: "1,000 - 2,000 sq ft",
    PropertySize.LARGE: "2,000+ sq ft",
}

# Each room beyond the first of its kind
EXTRA_BEDROOM_PRICE = Decimal("20.00")
EXTRA_BATHROOM_PRICE = Decimal("25.00")
EXTRA_ROOM_PRICE = Decimal("15.00")
MIN_ROOMS = 1
MAX_ROOMS = 10


class AdditionalService(str, Enum):
    REFRIGERATOR_REVIVAL = "Refrigerator Revival"
    OVEN_TRANSFORMATION = "Oven Transformation"
    CABINET_REFRESH = "Cabinet Refresh"
    CRYSTAL_CLEAR_WINDOWS = "Crystal Clear Windows"
    CARPET_CARE_PLUS = "Carpet Care Plus"
    DISH_AND_CUTLERY_CARE = "Dish & Cutlery Care"
    MICROWAVE_MAKEOVER = "Microwave Makeover"
    CLOSET_ORGANIZATION = "Closet Organization"
    BATHROOM_BRILLIANCE = "Bathroom Brilliance"
    TOILET_DEEP_CLEAN = "Toilet Deep Clean"


ADDITIONAL_SERVICE_PRICE: dict[AdditionalService, Decimal] = {
    AdditionalService.REFRIGERATOR_REVIVAL: Decimal("35.00"),
    AdditionalService.OVEN_TRANSFORMATION: Decimal("45.00"),
    AdditionalService.CABINET_REFRESH: Decimal("40.00"),
    AdditionalService.CRYSTAL_CLEAR_WINDOWS: Decimal("50.00"),
    AdditionalService.CARPET_CARE_PLUS: Decimal("60.00"),
    AdditionalService.DISH_AND_CUTLERY_CARE: Decimal("20.00"),
    AdditionalService.MICROWAVE_MAKEOVER: Decimal("20.00"),
    AdditionalService.CLOSET_ORGANIZATION: Decimal("45.00"),
    AdditionalService.BATHROOM_BRILLIANCE: Decimal("35.00"),
    AdditionalService.TOILET_DEEP_CLEAN: Decimal("25.00"),
}

ADDITIONAL_SERVICE_DESCRIPTIONS: dict[AdditionalService, str] = {
    AdditionalService.REFRIGERATOR_REVIVAL: "Deep cleaning and organizing your fridge, making it sparkle inside and out",
    AdditionalService.OVEN_TRANSFORMATION: "Thorough cleaning of your oven, removing tough grease and baked-on residue",
    AdditionalService.CABINET_REFRESH: "Detailed cleaning of cabinet interiors and exteriors, including organization",
    AdditionalService.CRYSTAL_CLEAR_WINDOWS: "Interior window cleaning, including frames and sills",
    AdditionalService.CARPET_CARE_PLUS: "Deep carpet cleaning and stain removal for high-traffic areas",
    AdditionalService.DISH_AND_CUTLERY_CARE: "Washing, drying, and organizing dishes and cutlery",
    AdditionalService.MICROWAVE_MAKEOVER: "Detailed cleaning of your microwave inside and out",
    AdditionalService.CLOSET_ORGANIZATION: "Professional organizing and cleaning of your closet space",
    AdditionalService.BATHROOM_BRILLIANCE: "Intensive cleaning of bathtub, shower, and surrounding areas",
    AdditionalService.TOILET_DEEP_CLEAN: "Thorough sanitization and cleaning of toilet and surrounding area",
}


class CleaningSupplies(str, Enum):
    OWN = "own"
    BRING = "bring"


CLEANING_SUPPLIES_LABELS: dict[CleaningSupplies, str] = {
    CleaningSupplies.OWN: "Customer's supplies",
    CleaningSupplies.BRING: "Bring supplies",
}


# ============================================================================
# BASE CLEANING (quick booking flow)
# ============================================================================

BASE_CLEANING_PRICE = Decimal("55.00")
BASE_CLEANING_ROOM_PRICE = Decimal("10.00")  # per bedroom and per bathroom
BRING_CLEANING_PRODUCTS_PRICE = Decimal("10.00")


class CleaningAreaSize(str, Enum):
    SMALL = "Small"
    MEDIUM = "Medium"
    LARGE = "Large"


CLEANING_AREA_SURCHARGE: dict[CleaningAreaSize, Decimal] = {
    CleaningAreaSize.SMALL: Decimal("0"),
    CleaningAreaSize.MEDIUM: Decimal("20"),
    CleaningAreaSize.LARGE: Decimal("40"),
}

CLEANING_AREA_DESCRIPTIONS: dict[CleaningAreaSize, str] = {
    CleaningAreaSize.SMALL: "< 500 sqft",
    CleaningAreaSize.MEDIUM: "501-1000 sqft",
    CleaningAreaSize.LARGE: "> 1001 sqft",
}


class AdditionalCleaningService(str, Enum):
    FRIDGE_CLEANING = "Fridge cleaning"
    OVEN_CLEANING = "Oven cleaning"
    WINDOWS_WASHING = "Windows washing"
    CARPET_CLEANING = "Carpet cleaning"
    PET_CLEANING = "I have pets"
    DISHWASHING = "Dishwashing"
    BRING_VACUUM = "Bring your vacuum"
    INSIDE_MICROWAVE = "Inside microwave"
    CLOSET_CLEANING = "Closet cleaning"
    BATH_CLEANING = "Bath cleaning"
    TOILET_CLEANING = "Toilet cleaning"
    KEYS_PICKUP_DELIVERY = "Keys pickup / delivery"


ADDITIONAL_CLEANING_SERVICE_PRICE: dict[AdditionalCleaningService, Decimal] = {
    AdditionalCleaningService.FRIDGE_CLEANING: Decimal("15"),
    AdditionalCleaningService.OVEN_CLEANING: Decimal("20"),
    AdditionalCleaningService.WINDOWS_WASHING: Decimal("25"),
    AdditionalCleaningService.CARPET_CLEANING: Decimal("30"),
    AdditionalCleaningService.PET_CLEANING: Decimal("15"),
    AdditionalCleaningService.DISHWASHING: Decimal("10"),
    AdditionalCleaningService.BRING_VACUUM: Decimal("5"),
    AdditionalCleaningService.INSIDE_MICROWAVE: Decimal("5"),
    AdditionalCleaningService.CLOSET_CLEANING: Decimal("15"),
    AdditionalCleaningService.BATH_CLEANING: Decimal("20"),
    AdditionalCleaningService.TOILET_CLEANING: Decimal("10"),
    AdditionalCleaningService.KEYS_PICKUP_DELIVERY: Decimal("10"),
}


class RecurringServiceOption(str, Enum):
    NONE = "One-time service"
    EVERY_WEEK = "Every week"
    EVERY_SECOND_WEEK = "Every second week"
    EVERY_MONTH = "Every month"


RECURRING_DISCOUNT: dict[RecurringServiceOption, Decimal] = {
    RecurringServiceOption.NONE: Decimal("0"),
    RecurringServiceOption.EVERY_WEEK: Decimal("0.15"),
    RecurringServiceOption.EVERY_SECOND_WEEK: Decimal("0.10"),
    RecurringServiceOption.EVERY_MONTH: Decimal("0.05"),
}


# ============================================================================
# LAUNDRY
# ============================================================================


class LaundryServiceType(str, Enum):
    WASHING = "Washing"
    DRY_CLEANING = "Dry Clean"
    IRONING = "Ironing"


LAUNDRY_BASE_PRICE: dict[LaundryServiceType, Decimal] = {
    LaundryServiceType.WASHING: Decimal("28.23"),
    LaundryServiceType.DRY_CLEANING: Decimal("16.93"),  # per item
    LaundryServiceType.IRONING: Decimal("14.12"),
}

LAUNDRY_SERVICE_DESCRIPTIONS: dict[LaundryServiceType, str] = {
    LaundryServiceType.WASHING: "Standard washing service",
    LaundryServiceType.DRY_CLEANING: "Professional dry cleaning",
    LaundryServiceType.IRONING: "Professional pressing",
}

# Dry cleaning is prepared off-site and needs more lead time
LAUNDRY_MIN_LEAD_DAYS: dict[LaundryServiceType, int] = {
    LaundryServiceType.WASHING: 1,
    LaundryServiceType.DRY_CLEANING: 3,
    LaundryServiceType.IRONING: 1,
}
LAUNDRY_BOOKING_WINDOW_MONTHS = 2


class LaundryLoadSize(str, Enum):
    SMALL = "Small"
    MEDIUM = "Medium"
    LARGE = "Large"


LAUNDRY_LOAD_DESCRIPTIONS: dict[LaundryLoadSize, str] = {
    LaundryLoadSize.SMALL: "< 4 lb",
    LaundryLoadSize.MEDIUM: "4-8 lb",
    LaundryLoadSize.LARGE: "> 8 lb",
}

LAUNDRY_LOAD_MULTIPLIER: dict[LaundryServiceType, dict[LaundryLoadSize, Decimal]] = {
    LaundryServiceType.WASHING: {
        LaundryLoadSize.SMALL: Decimal("1.0"),
        LaundryLoadSize.MEDIUM: Decimal("1.57"),
        LaundryLoadSize.LARGE: Decimal("2.14"),
    },
    LaundryServiceType.DRY_CLEANING: {
        LaundryLoadSize.SMALL: Decimal("1.0"),
        LaundryLoadSize.MEDIUM: Decimal("1.57"),
        LaundryLoadSize.LARGE: Decimal("2.14"),
    },
    LaundryServiceType.IRONING: {
        LaundryLoadSize.SMALL: Decimal("1.0"),
        LaundryLoadSize.MEDIUM: Decimal("1.64"),
        LaundryLoadSize.LARGE: Decimal("2.15"),
    },
}


class LaundryAddonType(str, Enum):
    STAIN_REMOVAL = "Stain Removal"
    DELICATES_CARE = "Delicates Care"
    ECO_FRIENDLY = "Eco-Friendly Detergent"
    FABRIC_SOFTENER = "Fabric Softener"
    EXTRA_RINSE = "Extra Rinse"


LAUNDRY_ADDON_PRICE: dict[LaundryAddonType, Decimal] = {
    LaundryAddonType.STAIN_REMOVAL: Decimal("5.30"),
    LaundryAddonType.DELICATES_CARE: Decimal("7.20"),
    LaundryAddonType.ECO_FRIENDLY: Decimal("3.10"),
    LaundryAddonType.FABRIC_SOFTENER: Decimal("2.40"),
    LaundryAddonType.EXTRA_RINSE: Decimal("4.60"),
}

# Add-ons only make sense for a machine wash
LAUNDRY_ADDON_SERVICES = {LaundryServiceType.WASHING}


# ============================================================================
# CAR DETAILING
# ============================================================================


class CarType(str, Enum):
    CAR = "Car"
    SUV = "SUV"
    TRUCK = "Truck"
    LORRY = "Lorry"


CAR_TYPE_DESCRIPTIONS: dict[CarType, str] = {
    CarType.CAR: "Standard size passenger vehicle",
    CarType.SUV: "Sport utility vehicle or minivan",
    CarType.TRUCK: "Pickup truck or similar",
    CarType.LORRY: "Commercial truck or large vehicle",
}


class DetailingScope(str, Enum):
    EXTERIOR = "Exterior"
    INTERIOR = "Interior"
    BOTH = "Full Service"


DETAILING_SCOPE_DESCRIPTIONS: dict[DetailingScope, str] = {
    DetailingScope.EXTERIOR: "Professional exterior cleaning",
    DetailingScope.INTERIOR: "Thorough interior detailing",
    DetailingScope.BOTH: "Complete interior & exterior service",
}


class CleaningDepth(str, Enum):
    LIGHT = "Light"
    MEDIUM = "Medium"
    FULL = "Full"


CLEANING_DEPTH_PRICE: dict[CleaningDepth, Decimal] = {
    CleaningDepth.LIGHT: Decimal("242.36"),
    CleaningDepth.MEDIUM: Decimal("361.42"),
    CleaningDepth.FULL: Decimal("483.17"),
}

CLEANING_DEPTH_FEATURES: dict[CleaningDepth, list[str]] = {
    CleaningDepth.LIGHT: [
        "Exterior wash and dry",
        "Basic interior vacuum",
        "Windows cleaning",
        "Tire dressing",
    ],
    CleaningDepth.MEDIUM: [
        "All Light features",
        "Clay bar treatment",
        "Carpet shampooing",
        "Leather conditioning",
        "Paint sealant",
    ],
    CleaningDepth.FULL: [
        "All Medium features",
        "Paint correction",
        "Ceramic coating",
        "Headlight restoration",
        "Premium wax",
        "Complete sanitization",
    ],
}


class CarDetailingAddon(str, Enum):
    PET_HAIR_REMOVAL = "Pet Hair Removal"
    ENGINE_BAY_CLEANING = "Engine Bay Cleaning"
    ALGAE_REMOVAL = "Algae Removal"


CAR_DETAILING_ADDON_PRICE: dict[CarDetailingAddon, Decimal] = {
    CarDetailingAddon.PET_HAIR_REMOVAL: Decimal("108.23"),
    CarDetailingAddon.ENGINE_BAY_CLEANING: Decimal("67.11"),
    CarDetailingAddon.ALGAE_REMOVAL: Decimal("138.84"),
}


def build_catalog() -> dict:
    """Every rate table in one JSON-friendly document for the client"""

    def priced(table: dict, descriptions: dict | None = None) -> list[dict]:
        entries = []
        for key, price in table.items():
            entry = {"name": key.value, "price": float(price)}
            if descriptions:
                entry["description"] = descriptions[key]
            entries.append(entry)
        return entries

    return {
        "categories": [
            {"name": c.value, "description": SERVICE_CATEGORY_DESCRIPTIONS[c]} for c in ServiceCategory
        ],
        "home_cleaning": {
            "types": priced(HOME_CLEANING_BASE_PRICE, HOME_CLEANING_DESCRIPTIONS),
            "property_sizes": [
                {
                    "name": s.value,
                    "description": PROPERTY_SIZE_DESCRIPTIONS[s],
                    "multiplier": float(PROPERTY_SIZE_MULTIPLIER[s]),
                }
                for s in PropertySize
            ],
            "extra_room_prices": {
                "bedroom": float(EXTRA_BEDROOM_PRICE),
                "bathroom": float(EXTRA_BATHROOM_PRICE),
                "other": float(EXTRA_ROOM_PRICE),
            },
            "room_limits": {"min": MIN_ROOMS, "max": MAX_ROOMS},
            "additional_services": priced(ADDITIONAL_SERVICE_PRICE, ADDITIONAL_SERVICE_DESCRIPTIONS),
        },
        "base_cleaning": {
            "base_price": float(BASE_CLEANING_PRICE),
            "room_price": float(BASE_CLEANING_ROOM_PRICE),
            "bring_products_price": float(BRING_CLEANING_PRODUCTS_PRICE),
            "area_sizes": [
                {
                    "name": a.value,
                    "description": CLEANING_AREA_DESCRIPTIONS[a],
                    "surcharge": float(CLEANING_AREA_SURCHARGE[a]),
                }
                for a in CleaningAreaSize
            ],
            "additional_services": priced(ADDITIONAL_CLEANING_SERVICE_PRICE),
            "recurring_options": [
                {"name": r.value, "discount": float(RECURRING_DISCOUNT[r])} for r in RecurringServiceOption
            ],
        },
        "laundry": {
            "services": priced(LAUNDRY_BASE_PRICE, LAUNDRY_SERVICE_DESCRIPTIONS),
            "load_sizes": [
                {
                    "name": size.value,
                    "description": LAUNDRY_LOAD_DESCRIPTIONS[size],
                    "multipliers": {
                        service.value: float(LAUNDRY_LOAD_MULTIPLIER[service][size])
                        for service in LaundryServiceType
                    },
                }
                for size in LaundryLoadSize
            ],
            "addons": priced(LAUNDRY_ADDON_PRICE),
            "addon_services": [s.value for s in LAUNDRY_ADDON_SERVICES],
        },
        "car_detailing": {
            "car_types": [{"name": c.value, "description": CAR_TYPE_DESCRIPTIONS[c]} for c in CarType],
            "scopes": [{"name": s.value, "description": DETAILING_SCOPE_DESCRIPTIONS[s]} for s in DetailingScope],
            "depths": [
                {
                    "name": d.value,
                    "price": float(CLEANING_DEPTH_PRICE[d]),
                    "features": CLEANING_DEPTH_FEATURES[d],
                }
                for d in CleaningDepth
            ],
            "addons": priced(CAR_DETAILING_ADDON_PRICE),
        },
    }
