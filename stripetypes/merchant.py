"""Merchant details attached to issuing authorizations and transactions."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any

__all__ = ["MerchantCategory", "MerchantData"]


class MerchantCategory(enum.StrEnum):
    """The industry category of a merchant."""

    AC_REFRIGERATION_REPAIR = enum.auto()
    ACCOUNTING_BOOKKEEPING_SERVICES = enum.auto()
    ADVERTISING_SERVICES = enum.auto()
    AGRICULTURAL_COOPERATIVE = enum.auto()
    AIRLINES_AIR_CARRIERS = enum.auto()
    AIRPORTS_FLYING_FIELDS = enum.auto()
    AMBULANCE_SERVICES = enum.auto()
    AMUSEMENT_PARKS_CARNIVALS = enum.auto()
    ANTIQUE_REPRODUCTIONS = enum.auto()
    ANTIQUE_SHOPS = enum.auto()
    AQUARIUMS = enum.auto()
    ARCHITECTURAL_SURVEYING_SERVICES = enum.auto()
    ART_DEALERS_AND_GALLERIES = enum.auto()
    ARTISTS_SUPPLY_AND_CRAFT_SHOPS = enum.auto()
    AUTO_AND_HOME_SUPPLY_STORES = enum.auto()
    AUTO_BODY_REPAIR_SHOPS = enum.auto()
    AUTO_PAINT_SHOPS = enum.auto()
    AUTO_SERVICE_SHOPS = enum.auto()
    AUTOMATED_CASH_DISBURSE = enum.auto()
    AUTOMATED_FUEL_DISPENSERS = enum.auto()
    AUTOMOBILE_ASSOCIATIONS = enum.auto()
    AUTOMOTIVE_PARTS_AND_ACCESSORIES_STORES = enum.auto()
    AUTOMOTIVE_TIRE_STORES = enum.auto()
    BAIL_AND_BOND_PAYMENTS = enum.auto()
    BAKERIES = enum.auto()
    BANDS_ORCHESTRAS = enum.auto()
    BARBER_AND_BEAUTY_SHOPS = enum.auto()
    BETTING_CASINO_GAMBLING = enum.auto()
    BICYCLE_SHOPS = enum.auto()
    BILLIARD_POOL_ESTABLISHMENTS = enum.auto()
    BOAT_DEALERS = enum.auto()
    BOAT_RENTALS_AND_LEASES = enum.auto()
    BOOK_STORES = enum.auto()
    BOOKS_PERIODICALS_AND_NEWSPAPERS = enum.auto()
    BOWLING_ALLEYS = enum.auto()
    BUS_LINES = enum.auto()
    BUSINESS_SECRETARIAL_SCHOOLS = enum.auto()
    BUYING_SHOPPING_SERVICES = enum.auto()
    CABLE_SATELLITE_AND_OTHER_PAY_TELEVISION_AND_RADIO = enum.auto()
    CAMERA_AND_PHOTOGRAPHIC_SUPPLY_STORES = enum.auto()
    CANDY_NUT_AND_CONFECTIONERY_STORES = enum.auto()
    CAR_AND_TRUCK_DEALERS_NEW_USED = enum.auto()
    CAR_AND_TRUCK_DEALERS_USED_ONLY = enum.auto()
    CAR_RENTAL_AGENCIES = enum.auto()
    CAR_WASHES = enum.auto()
    CARPENTRY_SERVICES = enum.auto()
    CARPET_UPHOLSTERY_CLEANING = enum.auto()
    CATERERS = enum.auto()
    CHARITABLE_AND_SOCIAL_SERVICE_ORGANIZATIONS_FUNDRAISING = enum.auto()
    CHEMICALS_AND_ALLIED_PRODUCTS = enum.auto()
    CHIDRENS_AND_INFANTS_WEAR_STORES = enum.auto()
    CHILD_CARE_SERVICES = enum.auto()
    CHIROPODISTS_PODIATRISTS = enum.auto()
    CHIROPRACTORS = enum.auto()
    CIGAR_STORES_AND_STANDS = enum.auto()
    CIVIC_SOCIAL_FRATERNAL_ASSOCIATIONS = enum.auto()
    CLEANING_AND_MAINTENANCE = enum.auto()
    CLOTHING_RENTAL = enum.auto()
    COLLEGES_UNIVERSITIES = enum.auto()
    COMMERCIAL_EQUIPMENT = enum.auto()
    COMMERCIAL_FOOTWEAR = enum.auto()
    COMMERCIAL_PHOTOGRAPHY_ART_AND_GRAPHICS = enum.auto()
    COMMUTER_TRANSPORT_AND_FERRIES = enum.auto()
    COMPUTER_NETWORK_SERVICES = enum.auto()
    COMPUTER_PROGRAMMING = enum.auto()
    COMPUTER_REPAIR = enum.auto()
    COMPUTER_SOFTWARE_STORES = enum.auto()
    COMPUTERS_PERIPHERALS_AND_SOFTWARE = enum.auto()
    CONCRETE_WORK_SERVICES = enum.auto()
    CONSTRUCTION_MATERIALS = enum.auto()
    CONSULTING_PUBLIC_RELATIONS = enum.auto()
    CORRESPONDENCE_SCHOOLS = enum.auto()
    COSMETIC_STORES = enum.auto()
    COUNSELING_SERVICES = enum.auto()
    COUNTRY_CLUBS = enum.auto()
    COURIER_SERVICES = enum.auto()
    COURT_COSTS = enum.auto()
    CREDIT_REPORTING_AGENCIES = enum.auto()
    CRUISE_LINES = enum.auto()
    DAIRY_PRODUCTS_STORES = enum.auto()
    DANCE_HALL_STUDIOS_SCHOOLS = enum.auto()
    DATING_ESCORT_SERVICES = enum.auto()
    DENTISTS_ORTHODONTISTS = enum.auto()
    DEPARTMENT_STORES = enum.auto()
    DETECTIVE_AGENCIES = enum.auto()
    DIRECT_MARKETING_CATALOG_MERCHANT = enum.auto()
    DIRECT_MARKETING_COMBINATION_CATALOG_AND_RETAIL_MERCHANT = enum.auto()
    DIRECT_MARKETING_INBOUND_TELEMARKETING = enum.auto()
    DIRECT_MARKETING_INSURANCE_SERVICES = enum.auto()
    DIRECT_MARKETING_OTHER = enum.auto()
    DIRECT_MARKETING_OUTBOUND_TELEMARKETING = enum.auto()
    DIRECT_MARKETING_SUBSCRIPTION = enum.auto()
    DIRECT_MARKETING_TRAVEL = enum.auto()
    DISCOUNT_STORES = enum.auto()
    DOCTORS = enum.auto()
    DOOR_TO_DOOR_SALES = enum.auto()
    DRAPERY_WINDOW_COVERING_AND_UPHOLSTERY_STORES = enum.auto()
    DRINKING_PLACES = enum.auto()
    DRUG_STORES_AND_PHARMACIES = enum.auto()
    DRUGS_DRUG_PROPRIETARIES_AND_DRUGGIST_SUNDRIES = enum.auto()
    DRY_CLEANERS = enum.auto()
    DURABLE_GOODS = enum.auto()
    DUTY_FREE_STORES = enum.auto()
    EATING_PLACES_RESTAURANTS = enum.auto()
    EDUCATIONAL_SERVICES = enum.auto()
    ELECTRIC_RAZOR_STORES = enum.auto()
    ELECTRICAL_PARTS_AND_EQUIPMENT = enum.auto()
    ELECTRICAL_SERVICES = enum.auto()
    ELECTRONICS_REPAIR_SHOPS = enum.auto()
    ELECTRONICS_STORES = enum.auto()
    ELEMENTARY_SECONDARY_SCHOOLS = enum.auto()
    EMPLOYMENT_TEMP_AGENCIES = enum.auto()
    EQUIPMENT_RENTAL = enum.auto()
    EXTERMINATING_SERVICES = enum.auto()
    FAMILY_CLOTHING_STORES = enum.auto()
    FAST_FOOD_RESTAURANTS = enum.auto()
    FINANCIAL_INSTITUTIONS = enum.auto()
    FINES_GOVERNMENT_ADMINISTRATIVE_ENTITIES = enum.auto()
    FIREPLACE_FIREPLACE_SCREENS_AND_ACCESSORIES_STORES = enum.auto()
    FLOOR_COVERING_STORES = enum.auto()
    FLORISTS = enum.auto()
    FLORISTS_SUPPLIES_NURSERY_STOCK_AND_FLOWERS = enum.auto()
    FREEZER_AND_LOCKER_MEAT_PROVISIONERS = enum.auto()
    FUEL_DEALERS_NON_AUTOMOTIVE = enum.auto()
    FUNERAL_SERVICES_CREMATORIES = enum.auto()
    FURNITURE_HOME_FURNISHINGS_AND_EQUIPMENT_STORES_EXCEPT_APPLIANCES = enum.auto()
    FURNITURE_REPAIR_REFINISHING = enum.auto()
    FURRIERS_AND_FUR_SHOPS = enum.auto()
    GENERAL_SERVICES = enum.auto()
    GIFT_CARD_NOVELTY_AND_SOUVENIR_SHOPS = enum.auto()
    GLASS_PAINT_AND_WALLPAPER_STORES = enum.auto()
    GLASSWARE_CRYSTAL_STORES = enum.auto()
    GOLF_COURSES_PUBLIC = enum.auto()
    GOVERNMENT_SERVICES = enum.auto()
    GROCERY_STORES_SUPERMARKETS = enum.auto()
    HARDWARE_EQUIPMENT_AND_SUPPLIES = enum.auto()
    HARDWARE_STORES = enum.auto()
    HEALTH_AND_BEAUTY_SPAS = enum.auto()
    HEARING_AIDS_SALES_AND_SUPPLIES = enum.auto()
    HEATING_PLUMBING_A_C = "heating_plumbing_a_c"
    HOBBY_TOY_AND_GAME_SHOPS = enum.auto()
    HOME_SUPPLY_WAREHOUSE_STORES = enum.auto()
    HOSPITALS = enum.auto()
    HOTELS_MOTELS_AND_RESORTS = enum.auto()
    HOUSEHOLD_APPLIANCE_STORES = enum.auto()
    INDUSTRIAL_SUPPLIES = enum.auto()
    INFORMATION_RETRIEVAL_SERVICES = enum.auto()
    INSURANCE_DEFAULT = enum.auto()
    INSURANCE_UNDERWRITING_PREMIUMS = enum.auto()
    INTRA_COMPANY_PURCHASES = enum.auto()
    JEWELRY_STORES_WATCHES_CLOCKS_AND_SILVERWARE_STORES = enum.auto()
    LANDSCAPING_SERVICES = enum.auto()
    LAUNDRIES = enum.auto()
    LAUNDRY_CLEANING_SERVICES = enum.auto()
    LEGAL_SERVICES_ATTORNEYS = enum.auto()
    LUGGAGE_AND_LEATHER_GOODS_STORES = enum.auto()
    LUMBER_BUILDING_MATERIALS_STORES = enum.auto()
    MANUAL_CASH_DISBURSE = enum.auto()
    MARINAS_SERVICE_AND_SUPPLIES = enum.auto()
    MASONRY_STONEWORK_AND_PLASTER = enum.auto()
    MASSAGE_PARLORS = enum.auto()
    MEDICAL_AND_DENTAL_LABS = enum.auto()
    MEDICAL_DENTAL_OPHTHALMIC_AND_HOSPITAL_EQUIPMENT_AND_SUPPLIES = enum.auto()
    MEDICAL_SERVICES = enum.auto()
    MEMBERSHIP_ORGANIZATIONS = enum.auto()
    MENS_AND_BOYS_CLOTHING_AND_ACCESSORIES_STORES = enum.auto()
    MENS_WOMENS_CLOTHING_STORES = enum.auto()
    METAL_SERVICE_CENTERS = enum.auto()
    MISCELLANEOUS = enum.auto()
    MISCELLANEOUS_APPAREL_AND_ACCESSORY_SHOPS = enum.auto()
    MISCELLANEOUS_AUTO_DEALERS = enum.auto()
    MISCELLANEOUS_BUSINESS_SERVICES = enum.auto()
    MISCELLANEOUS_FOOD_STORES = enum.auto()
    MISCELLANEOUS_GENERAL_MERCHANDISE = enum.auto()
    MISCELLANEOUS_GENERAL_SERVICES = enum.auto()
    MISCELLANEOUS_HOME_FURNISHING_SPECIALTY_STORES = enum.auto()
    MISCELLANEOUS_PUBLISHING_AND_PRINTING = enum.auto()
    MISCELLANEOUS_RECREATION_SERVICES = enum.auto()
    MISCELLANEOUS_REPAIR_SHOPS = enum.auto()
    MISCELLANEOUS_SPECIALTY_RETAIL = enum.auto()
    MOBILE_HOME_DEALERS = enum.auto()
    MOTION_PICTURE_THEATERS = enum.auto()
    MOTOR_FREIGHT_CARRIERS_AND_TRUCKING = enum.auto()
    MOTOR_HOMES_DEALERS = enum.auto()
    MOTOR_VEHICLE_SUPPLIES_AND_NEW_PARTS = enum.auto()
    MOTORCYCLE_SHOPS_AND_DEALERS = enum.auto()
    MOTORCYCLE_SHOPS_DEALERS = enum.auto()
    MUSIC_STORES_MUSICAL_INSTRUMENTS_PIANOS_AND_SHEET_MUSIC = enum.auto()
    NEWS_DEALERS_AND_NEWSSTANDS = enum.auto()
    NON_FI_MONEY_ORDERS = enum.auto()
    NON_FI_STORED_VALUE_CARD_PURCHASE_LOAD = enum.auto()
    NONDURABLE_GOODS = enum.auto()
    NURSERIES_LAWN_AND_GARDEN_SUPPLY_STORES = enum.auto()
    NURSING_PERSONAL_CARE = enum.auto()
    OFFICE_AND_COMMERCIAL_FURNITURE = enum.auto()
    OPTICIANS_EYEGLASSES = enum.auto()
    OPTOMETRISTS_OPHTHALMOLOGIST = enum.auto()
    ORTHOPEDIC_GOODS_PROSTHETIC_DEVICES = enum.auto()
    OSTEOPATHS = enum.auto()
    PACKAGE_STORES_BEER_WINE_AND_LIQUOR = enum.auto()
    PAINTS_VARNISHES_AND_SUPPLIES = enum.auto()
    PARKING_LOTS_GARAGES = enum.auto()
    PASSENGER_RAILWAYS = enum.auto()
    PAWN_SHOPS = enum.auto()
    PET_SHOPS_PET_FOOD_AND_SUPPLIES = enum.auto()
    PETROLEUM_AND_PETROLEUM_PRODUCTS = enum.auto()
    PHOTO_DEVELOPING = enum.auto()
    PHOTOGRAPHIC_PHOTOCOPY_MICROFILM_EQUIPMENT_AND_SUPPLIES = enum.auto()
    PHOTOGRAPHIC_STUDIOS = enum.auto()
    PICTURE_VIDEO_PRODUCTION = enum.auto()
    PIECE_GOODS_NOTIONS_AND_OTHER_DRY_GOODS = enum.auto()
    PLUMBING_HEATING_EQUIPMENT_AND_SUPPLIES = enum.auto()
    POLITICAL_ORGANIZATIONS = enum.auto()
    POSTAL_SERVICES_GOVERNMENT_ONLY = enum.auto()
    PRECIOUS_STONES_AND_METALS_WATCHES_AND_JEWELRY = enum.auto()
    PROFESSIONAL_SERVICES = enum.auto()
    PUBLIC_WAREHOUSING_AND_STORAGE = enum.auto()
    QUICK_COPY_REPRO_AND_BLUEPRINT = enum.auto()
    RAILROADS = enum.auto()
    REAL_ESTATE_AGENTS_AND_MANAGERS_RENTALS = enum.auto()
    RECORD_STORES = enum.auto()
    RECREATIONAL_VEHICLE_RENTALS = enum.auto()
    RELIGIOUS_GOODS_STORES = enum.auto()
    RELIGIOUS_ORGANIZATIONS = enum.auto()
    ROOFING_SIDING_SHEET_METAL = enum.auto()
    SECRETARIAL_SUPPORT_SERVICES = enum.auto()
    SECURITY_BROKERS_DEALERS = enum.auto()
    SERVICE_STATIONS = enum.auto()
    SEWING_NEEDLEWORK_FABRIC_AND_PIECE_GOODS_STORES = enum.auto()
    SHOE_REPAIR_HAT_CLEANING = enum.auto()
    SHOE_STORES = enum.auto()
    SMALL_APPLIANCE_REPAIR = enum.auto()
    SNOWMOBILE_DEALERS = enum.auto()
    SPECIAL_TRADE_SERVICES = enum.auto()
    SPECIALTY_CLEANING = enum.auto()
    SPORTING_GOODS_STORES = enum.auto()
    SPORTING_RECREATION_CAMPS = enum.auto()
    SPORTS_AND_RIDING_APPAREL_STORES = enum.auto()
    SPORTS_CLUBS_FIELDS = enum.auto()
    STAMP_AND_COIN_STORES = enum.auto()
    STATIONARY_OFFICE_SUPPLIES_PRINTING_AND_WRITING_PAPER = enum.auto()
    STATIONERY_STORES_OFFICE_AND_SCHOOL_SUPPLY_STORES = enum.auto()
    SWIMMING_POOLS_SALES = enum.auto()
    T_UI_TRAVEL_GERMANY = enum.auto()
    TAILORS_ALTERATIONS = enum.auto()
    TAX_PAYMENTS_GOVERNMENT_AGENCIES = enum.auto()
    TAX_PREPARATION_SERVICES = enum.auto()
    TAXICABS_LIMOUSINES = enum.auto()
    TELECOMMUNICATION_EQUIPMENT_AND_TELEPHONE_SALES = enum.auto()
    TELECOMMUNICATION_SERVICES = enum.auto()
    TELEGRAPH_SERVICES = enum.auto()
    TENT_AND_AWNING_SHOPS = enum.auto()
    TESTING_LABORATORIES = enum.auto()
    THEATRICAL_TICKET_AGENCIES = enum.auto()
    TIMESHARES = enum.auto()
    TIRE_RETREADING_AND_REPAIR = enum.auto()
    TOLLS_BRIDGE_FEES = enum.auto()
    TOURIST_ATTRACTIONS_AND_EXHIBITS = enum.auto()
    TOWING_SERVICES = enum.auto()
    TRAILER_PARKS_CAMPGROUNDS = enum.auto()
    TRANSPORTATION_SERVICES = enum.auto()
    TRAVEL_AGENCIES_TOUR_OPERATORS = enum.auto()
    TRUCK_STOP_ITERATION = enum.auto()
    TRUCK_UTILITY_TRAILER_RENTALS = enum.auto()
    TYPESETTING_PLATE_MAKING_AND_RELATED_SERVICES = enum.auto()
    TYPEWRITER_STORES = enum.auto()
    U_S_FEDERAL_GOVERNMENT_AGENCIES_OR_DEPARTMENTS = (
        "u_s_federal_government_agencies_or_departments"
    )
    UNIFORMS_COMMERCIAL_CLOTHING = enum.auto()
    USED_MERCHANDISE_AND_SECONDHAND_STORES = enum.auto()
    UTILITIES = enum.auto()
    VARIETY_STORES = enum.auto()
    VETERINARY_SERVICES = enum.auto()
    VIDEO_AMUSEMENT_GAME_SUPPLIES = enum.auto()
    VIDEO_GAME_ARCADES = enum.auto()
    VIDEO_TAPE_RENTAL_STORES = enum.auto()
    VOCATIONAL_TRADE_SCHOOLS = enum.auto()
    WATCH_JEWELRY_REPAIR = enum.auto()
    WELDING_REPAIR = enum.auto()
    WHOLESALE_CLUBS = enum.auto()
    WIG_AND_TOUPEE_STORES = enum.auto()
    WIRES_MONEY_ORDERS = enum.auto()
    WOMENS_ACCESSORY_AND_SPECIALTY_SHOPS = enum.auto()
    WOMENS_READY_TO_WEAR_STORES = enum.auto()
    WRECKING_AND_SALVAGE_YARDS = enum.auto()

    @classmethod
    def default(cls) -> MerchantCategory:
        """The category assumed when none is given."""
        return cls.MISCELLANEOUS


_OPTIONAL_FIELDS = ("name", "city", "state", "country", "postal_code")


@dataclass
class MerchantData:
    """The seller involved in an issuing authorization."""

    network_id: str = ""
    category: MerchantCategory = field(default_factory=MerchantCategory.default)
    name: str | None = None
    city: str | None = None
    state: str | None = None
    country: str | None = None
    postal_code: str | None = None

    def to_dict(self) -> dict[str, str]:
        """The record as a JSON-ready mapping, leaving out unset optional fields."""
        data = {"network_id": self.network_id, "category": str(self.category)}
        for key in _OPTIONAL_FIELDS:
            value = getattr(self, key)
            if value is not None:
                data[key] = value
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MerchantData:
        """Build a record from a decoded JSON object; unknown keys are ignored."""
        for key in ("network_id", "category"):
            if key not in data:
                raise ValueError(f"missing field {key!r}")
        network_id = data["network_id"]
        if not isinstance(network_id, str):
            raise ValueError(f"invalid network_id: {network_id!r}")
        category = data["category"]
        if not isinstance(category, str):
            raise ValueError(f"invalid category: {category!r}")
        try:
            parsed_category = MerchantCategory(category)
        except ValueError:
            raise ValueError(f"unknown merchant category: {category!r}") from None
        optional: dict[str, str | None] = {}
        for key in _OPTIONAL_FIELDS:
            value = data.get(key)
            if value is not None and not isinstance(value, str):
                raise ValueError(f"invalid {key}: {value!r}")
            optional[key] = value
        return cls(network_id=network_id, category=parsed_category, **optional)