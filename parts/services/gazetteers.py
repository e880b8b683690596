"""
Parts Gazetteers

Hardcoded entity tables for parts-query understanding.
These tables are used for fast lookup during query parsing and filtering.

Entity Types:
- VEHICLE_BRANDS: vehicle makes (what a part *fits*)
- PARTS_BRANDS: parts manufacturers (who *made* the part)
- VEHICLE_MODELS: model names, resolved back to their make
- CATEGORY_PHRASES: part-type phrases mapped to a closed category tag set
- CATEGORY_KEYWORDS: related keywords each category expands into
- ORIGINS: country codes with their names and adjectives
- FUEL_TYPES / VEHICLE_TYPES / APPLICATIONS / SUPPLIER_TYPES

The two brand tables are disjoint; a name appears in exactly one of them.
"""

import re
from functools import lru_cache
from typing import Dict, Iterable, Optional, Tuple

# =============================================================================
# VEHICLE MAKES (canonical -> aliases)
# =============================================================================
VEHICLE_BRANDS = {
    # Japan
    "TOYOTA": ("toyota",),
    "LEXUS": ("lexus",),
    "HONDA": ("honda",),
    "ACURA": ("acura",),
    "NISSAN": ("nissan", "datsun"),
    "INFINITI": ("infiniti",),
    "MAZDA": ("mazda",),
    "MITSUBISHI": ("mitsubishi",),
    "SUBARU": ("subaru",),
    "SUZUKI": ("suzuki",),
    "ISUZU": ("isuzu",),
    # Korea
    "HYUNDAI": ("hyundai",),
    "KIA": ("kia",),
    # Germany
    "BMW": ("bmw",),
    "MERCEDES": ("mercedes", "mercedes-benz", "mercedes benz", "benz"),
    "AUDI": ("audi",),
    "VOLKSWAGEN": ("volkswagen", "vw"),
    "PORSCHE": ("porsche",),
    "OPEL": ("opel", "vauxhall"),
    # USA
    "FORD": ("ford",),
    "CHEVROLET": ("chevrolet", "chevy"),
    "GMC": ("gmc",),
    "CADILLAC": ("cadillac",),
    "CHRYSLER": ("chrysler",),
    "DODGE": ("dodge",),
    "JEEP": ("jeep",),
    "TESLA": ("tesla",),
    # Europe
    "VOLVO": ("volvo",),
    "RENAULT": ("renault",),
    "PEUGEOT": ("peugeot",),
    "CITROEN": ("citroen", "citroën"),
    "FIAT": ("fiat",),
    "ALFA ROMEO": ("alfa romeo", "alfa"),
    "SKODA": ("skoda", "škoda"),
    "DACIA": ("dacia",),
    "LAND ROVER": ("land rover", "landrover", "range rover"),
    "JAGUAR": ("jaguar",),
    "MASERATI": ("maserati",),
    "FERRARI": ("ferrari",),
    "LAMBORGHINI": ("lamborghini",),
    "BENTLEY": ("bentley",),
    "ROLLS ROYCE": ("rolls royce", "rolls-royce"),
    "ASTON MARTIN": ("aston martin",),
    "MCLAREN": ("mclaren",),
    "LADA": ("lada",),
    # China
    "GEELY": ("geely",),
    "CHERY": ("chery",),
    "BYD": ("byd",),
    "GREAT WALL": ("great wall", "haval"),
    # Commercial / heavy equipment
    "SCANIA": ("scania",),
    "IVECO": ("iveco",),
    "DAF": ("daf",),
    "CATERPILLAR": ("caterpillar",),
    "KOMATSU": ("komatsu",),
    "JOHN DEERE": ("john deere", "deere"),
}

# =============================================================================
# PARTS MANUFACTURERS (canonical -> aliases)
# =============================================================================
PARTS_BRANDS = {
    # Brakes
    "BOSCH": ("bosch",),
    "BREMBO": ("brembo",),
    "ATE": ("ate",),
    "TRW": ("trw",),
    "FERODO": ("ferodo",),
    "TEXTAR": ("textar",),
    "PAGID": ("pagid",),
    "MINTEX": ("mintex",),
    "EBC": ("ebc",),
    "AKEBONO": ("akebono",),
    # Bearings
    "SKF": ("skf",),
    "FAG": ("fag",),
    "TIMKEN": ("timken",),
    "NSK": ("nsk",),
    "NTN": ("ntn",),
    "KOYO": ("koyo",),
    "INA": ("ina",),
    # Filters
    "MANN": ("mann", "mann-filter", "mann filter"),
    "MAHLE": ("mahle", "knecht"),
    "K&N": ("k&n", "k and n"),
    "HENGST": ("hengst",),
    "PURFLUX": ("purflux",),
    "FRAM": ("fram",),
    "WIX": ("wix",),
    # Engine / electrical
    "DENSO": ("denso",),
    "NGK": ("ngk",),
    "VALEO": ("valeo",),
    "DELPHI": ("delphi",),
    "HELLA": ("hella",),
    "BERU": ("beru",),
    "MAGNETI MARELLI": ("magneti marelli", "marelli"),
    "PIERBURG": ("pierburg",),
    "ELRING": ("elring",),
    "VICTOR REINZ": ("victor reinz", "reinz"),
    "CORTECO": ("corteco",),
    "ACDELCO": ("acdelco", "ac delco"),
    "MOTORCRAFT": ("motorcraft",),
    "MOPAR": ("mopar",),
    # Suspension / steering
    "SACHS": ("sachs",),
    "BILSTEIN": ("bilstein",),
    "KYB": ("kyb", "kayaba"),
    "MONROE": ("monroe",),
    "KONI": ("koni",),
    "LEMFORDER": ("lemforder", "lemförder"),
    "MEYLE": ("meyle",),
    "FEBI": ("febi", "febi bilstein"),
    "ZF": ("zf",),
    # Transmission / belts
    "LUK": ("luk",),
    "AISIN": ("aisin",),
    "EXEDY": ("exedy",),
    "GATES": ("gates",),
    "DAYCO": ("dayco",),
    "CONTITECH": ("contitech",),
    "GKN": ("gkn",),
    # Cooling
    "BEHR": ("behr",),
    "NISSENS": ("nissens",),
    # Batteries / lighting
    "VARTA": ("varta",),
    "EXIDE": ("exide",),
    "OSRAM": ("osram",),
    "PHILIPS": ("philips",),
}

# =============================================================================
# VEHICLE MODELS (alias -> (model, make))
# =============================================================================
VEHICLE_MODELS = {
    "camry": ("CAMRY", "TOYOTA"),
    "corolla": ("COROLLA", "TOYOTA"),
    "land cruiser": ("LAND CRUISER", "TOYOTA"),
    "landcruiser": ("LAND CRUISER", "TOYOTA"),
    "prado": ("PRADO", "TOYOTA"),
    "hilux": ("HILUX", "TOYOTA"),
    "rav4": ("RAV4", "TOYOTA"),
    "yaris": ("YARIS", "TOYOTA"),
    "civic": ("CIVIC", "HONDA"),
    "accord": ("ACCORD", "HONDA"),
    "cr-v": ("CR-V", "HONDA"),
    "crv": ("CR-V", "HONDA"),
    "patrol": ("PATROL", "NISSAN"),
    "altima": ("ALTIMA", "NISSAN"),
    "navara": ("NAVARA", "NISSAN"),
    "x-trail": ("X-TRAIL", "NISSAN"),
    "elantra": ("ELANTRA", "HYUNDAI"),
    "sonata": ("SONATA", "HYUNDAI"),
    "tucson": ("TUCSON", "HYUNDAI"),
    "santa fe": ("SANTA FE", "HYUNDAI"),
    "sportage": ("SPORTAGE", "KIA"),
    "sorento": ("SORENTO", "KIA"),
    "golf": ("GOLF", "VOLKSWAGEN"),
    "passat": ("PASSAT", "VOLKSWAGEN"),
    "tiguan": ("TIGUAN", "VOLKSWAGEN"),
    "jetta": ("JETTA", "VOLKSWAGEN"),
    "3 series": ("3 SERIES", "BMW"),
    "5 series": ("5 SERIES", "BMW"),
    "x5": ("X5", "BMW"),
    "x3": ("X3", "BMW"),
    "c-class": ("C-CLASS", "MERCEDES"),
    "e-class": ("E-CLASS", "MERCEDES"),
    "s-class": ("S-CLASS", "MERCEDES"),
    "sprinter": ("SPRINTER", "MERCEDES"),
    "a4": ("A4", "AUDI"),
    "a6": ("A6", "AUDI"),
    "q5": ("Q5", "AUDI"),
    "q7": ("Q7", "AUDI"),
    "f-150": ("F-150", "FORD"),
    "f150": ("F-150", "FORD"),
    "ranger": ("RANGER", "FORD"),
    "mustang": ("MUSTANG", "FORD"),
    "transit": ("TRANSIT", "FORD"),
    "silverado": ("SILVERADO", "CHEVROLET"),
    "tahoe": ("TAHOE", "CHEVROLET"),
    "wrangler": ("WRANGLER", "JEEP"),
    "cherokee": ("CHEROKEE", "JEEP"),
    "cayenne": ("CAYENNE", "PORSCHE"),
    "911": ("911", "PORSCHE"),
    "outback": ("OUTBACK", "SUBARU"),
    "forester": ("FORESTER", "SUBARU"),
    "cx-5": ("CX-5", "MAZDA"),
    "pajero": ("PAJERO", "MITSUBISHI"),
    "lancer": ("LANCER", "MITSUBISHI"),
}

# =============================================================================
# PART CATEGORIES (phrase -> tag), plural forms matched automatically
# =============================================================================
CATEGORY_PHRASES = {
    # brake
    "brake pad": "brake", "brake disc": "brake", "brake disk": "brake",
    "brake rotor": "brake", "brake caliper": "brake", "brake shoe": "brake",
    "brake drum": "brake", "brake hose": "brake", "brake line": "brake",
    "brake fluid": "brake", "brake kit": "brake", "rotor": "brake",
    "caliper": "brake", "brake": "brake",
    # filter
    "oil filter": "filter", "air filter": "filter", "fuel filter": "filter",
    "cabin filter": "filter", "pollen filter": "filter",
    "hydraulic filter": "filter", "filter": "filter",
    # engine
    "piston ring": "engine", "piston": "engine", "camshaft": "engine",
    "crankshaft": "engine", "cylinder head": "engine", "engine mount": "engine",
    "oil pump": "engine", "turbocharger": "engine", "turbo": "engine",
    "timing chain": "engine", "valve": "engine", "engine": "engine",
    # belt
    "timing belt": "belt", "serpentine belt": "belt", "drive belt": "belt",
    "v-belt": "belt", "timing kit": "belt", "belt tensioner": "belt",
    "tensioner": "belt", "belt": "belt",
    # suspension
    "shock absorber": "suspension", "coil spring": "suspension",
    "control arm": "suspension", "ball joint": "suspension",
    "stabilizer link": "suspension", "sway bar": "suspension",
    "strut": "suspension", "shock": "suspension", "bushing": "suspension",
    "spring": "suspension", "suspension": "suspension",
    # steering
    "tie rod end": "steering", "tie rod": "steering",
    "rack and pinion": "steering", "steering rack": "steering",
    "power steering pump": "steering", "steering": "steering",
    # electrical
    "starter motor": "electrical", "wiring harness": "electrical",
    "alternator": "electrical", "starter": "electrical", "relay": "electrical",
    "fuse": "electrical", "electrical": "electrical",
    # ignition
    "spark plug": "ignition", "glow plug": "ignition",
    "ignition coil": "ignition", "ignition": "ignition",
    # cooling
    "water pump": "cooling", "cooling fan": "cooling", "thermostat": "cooling",
    "radiator": "cooling", "intercooler": "cooling", "coolant": "cooling",
    "cooling": "cooling",
    # transmission
    "cv joint": "transmission", "cv axle": "transmission",
    "drive shaft": "transmission", "driveshaft": "transmission",
    "differential": "transmission", "gearbox": "transmission",
    "transmission": "transmission", "axle": "transmission",
    # clutch
    "clutch kit": "clutch", "clutch disc": "clutch", "clutch plate": "clutch",
    "flywheel": "clutch", "clutch": "clutch",
    # exhaust
    "catalytic converter": "exhaust", "exhaust manifold": "exhaust",
    "muffler": "exhaust", "silencer": "exhaust", "dpf": "exhaust",
    "exhaust": "exhaust",
    # fuel
    "fuel injector": "fuel", "fuel pump": "fuel", "fuel tank": "fuel",
    "injector": "fuel", "carburetor": "fuel",
    # wheel / bearing
    "wheel bearing": "bearing", "bearing": "bearing",
    "hub assembly": "wheel", "wheel hub": "wheel", "tire": "wheel",
    "tyre": "wheel", "rim": "wheel", "wheel": "wheel",
    # lighting
    "tail light": "lighting", "taillight": "lighting", "fog light": "lighting",
    "headlight": "lighting", "headlamp": "lighting", "bulb": "lighting",
    "lamp": "lighting", "lighting": "lighting",
    # body / interior
    "side mirror": "body", "door handle": "body", "body panel": "body",
    "bumper": "body", "fender": "body", "mirror": "body", "bonnet": "body",
    "grille": "body",
    "seat cover": "interior", "floor mat": "interior", "dashboard": "interior",
    "interior": "interior",
    # battery
    "car battery": "battery", "battery": "battery", "batteries": "battery",
    # sensor
    "oxygen sensor": "sensor", "o2 sensor": "sensor", "lambda sensor": "sensor",
    "abs sensor": "sensor", "map sensor": "sensor", "maf sensor": "sensor",
    "sensor": "sensor",
    # gasket
    "head gasket": "gasket", "oil seal": "gasket", "o-ring": "gasket",
    "gasket": "gasket", "seal": "gasket",
    # wiper
    "wiper blade": "wiper", "windshield wiper": "wiper", "wiper": "wiper",
    # hvac
    "ac compressor": "hvac", "a/c compressor": "hvac", "blower motor": "hvac",
    "heater core": "hvac", "compressor": "hvac", "condenser": "hvac",
    "evaporator": "hvac",
}

CATEGORY_KEYWORDS = {
    "brake": ("brake", "pad", "disc", "rotor", "caliper"),
    "filter": ("filter", "oil filter", "air filter", "fuel filter"),
    "engine": ("engine", "piston", "gasket", "valve"),
    "belt": ("belt", "timing", "tensioner"),
    "suspension": ("shock", "strut", "spring", "control arm"),
    "steering": ("steering", "tie rod", "rack"),
    "electrical": ("alternator", "starter", "relay", "electrical"),
    "ignition": ("spark plug", "ignition coil", "glow plug"),
    "cooling": ("radiator", "water pump", "thermostat", "coolant"),
    "transmission": ("transmission", "gearbox", "cv joint", "driveshaft"),
    "clutch": ("clutch", "flywheel", "pressure plate"),
    "exhaust": ("exhaust", "muffler", "catalytic"),
    "fuel": ("fuel pump", "injector", "fuel"),
    "wheel": ("wheel", "hub", "tire", "tyre"),
    "bearing": ("bearing", "wheel bearing", "hub"),
    "lighting": ("headlight", "lamp", "bulb", "light"),
    "body": ("bumper", "fender", "mirror", "panel"),
    "interior": ("seat", "mat", "dashboard", "interior"),
    "battery": ("battery", "accumulator"),
    "sensor": ("sensor", "oxygen", "lambda", "abs"),
    "gasket": ("gasket", "seal", "o-ring"),
    "wiper": ("wiper", "blade"),
    "hvac": ("compressor", "condenser", "a/c", "blower"),
}

# =============================================================================
# ORIGINS (ISO country code -> names and adjectives)
# =============================================================================
ORIGINS = {
    "DE": ("germany", "german"),
    "JP": ("japan", "japanese"),
    "CN": ("china", "chinese"),
    "US": ("usa", "u.s.", "united states", "america", "american"),
    "KR": ("south korea", "korea", "korean"),
    "IT": ("italy", "italian"),
    "FR": ("france", "french"),
    "GB": ("united kingdom", "uk", "britain", "british", "england"),
    "TR": ("turkey", "turkish"),
    "IN": ("india", "indian"),
    "AE": ("uae", "united arab emirates", "emirates", "emirati", "dubai"),
    "TW": ("taiwan", "taiwanese"),
    "ES": ("spain", "spanish"),
    "SE": ("sweden", "swedish"),
    "PL": ("poland", "polish"),
    "CZ": ("czech republic", "czechia", "czech"),
    "BR": ("brazil", "brazilian"),
    "TH": ("thailand", "thai"),
}

# =============================================================================
# SMALL CLOSED VOCABULARIES (alias -> canonical)
# =============================================================================
FUEL_TYPES = {
    "diesel": "diesel", "tdi": "diesel", "crdi": "diesel",
    "petrol": "petrol", "gasoline": "petrol", "benzin": "petrol",
    "hybrid": "hybrid",
    "electric": "electric", "ev": "electric", "bev": "electric",
    "lpg": "lpg", "autogas": "lpg",
    "cng": "cng",
}

VEHICLE_TYPES = {
    "car": "car", "cars": "car", "sedan": "car", "hatchback": "car", "coupe": "car",
    "suv": "suv", "4x4": "suv", "crossover": "suv",
    "truck": "truck", "trucks": "truck", "lorry": "truck", "hgv": "truck",
    "pickup": "pickup", "pick-up": "pickup",
    "van": "van", "minivan": "van",
    "bus": "bus", "coach": "bus",
    "motorcycle": "motorcycle", "motorbike": "motorcycle", "scooter": "motorcycle",
    "tractor": "tractor",
    "forklift": "forklift",
    "excavator": "construction", "bulldozer": "construction", "loader": "construction",
}

APPLICATIONS = {
    "heavy duty": "heavy-duty", "heavy-duty": "heavy-duty",
    "racing": "performance", "performance": "performance", "motorsport": "performance",
    "off road": "off-road", "off-road": "off-road", "offroad": "off-road",
    "towing": "towing",
    "commercial": "commercial", "fleet": "commercial",
    "industrial": "industrial",
    "agricultural": "agricultural", "agriculture": "agricultural", "farm": "agricultural",
    "marine": "marine",
    "mining": "mining",
}

SUPPLIER_TYPES = {
    "manufacturer": "manufacturer", "manufacturers": "manufacturer",
    "factory direct": "manufacturer", "factory": "manufacturer", "maker": "manufacturer",
    "distributor": "distributor", "distributors": "distributor",
    "wholesaler": "wholesaler", "wholesalers": "wholesaler",
    "dealer": "dealer", "dealers": "dealer", "dealership": "dealer",
}


# =============================================================================
# Lookup helpers
# =============================================================================

def alias_pattern(aliases: Iterable[str], plural: bool = False) -> re.Pattern:
    """
    Compile one alternation over ``aliases``, longest alias first, bounded
    so that an alias never matches inside a longer word.
    """
    ordered = sorted(set(aliases), key=len, reverse=True)
    body = "|".join(re.escape(a) for a in ordered)
    suffix = r"(?:s|es)?" if plural else ""
    return re.compile(rf"(?<![\w&])({body}){suffix}(?![\w&])", re.IGNORECASE)


def _invert(table: Dict[str, Tuple[str, ...]]) -> Dict[str, str]:
    return {alias: canonical for canonical, aliases in table.items() for alias in aliases}


VEHICLE_BRAND_ALIASES = _invert(VEHICLE_BRANDS)
PARTS_BRAND_ALIASES = _invert(PARTS_BRANDS)
ORIGIN_ALIASES = _invert(ORIGINS)

VEHICLE_BRAND_PATTERN = alias_pattern(VEHICLE_BRAND_ALIASES)
PARTS_BRAND_PATTERN = alias_pattern(PARTS_BRAND_ALIASES)
VEHICLE_MODEL_PATTERN = alias_pattern(VEHICLE_MODELS)
CATEGORY_PATTERN = alias_pattern(CATEGORY_PHRASES, plural=True)
ORIGIN_PATTERN = alias_pattern(ORIGIN_ALIASES)
FUEL_PATTERN = alias_pattern(FUEL_TYPES)
VEHICLE_TYPE_PATTERN = alias_pattern(VEHICLE_TYPES)
APPLICATION_PATTERN = alias_pattern(APPLICATIONS)
SUPPLIER_TYPE_PATTERN = alias_pattern(SUPPLIER_TYPES)


def get_vehicle_brand_canonical(name: str) -> Optional[str]:
    """Canonical make for an alias or canonical name, else None."""
    key = name.strip().lower()
    if key.upper() in VEHICLE_BRANDS:
        return key.upper()
    return VEHICLE_BRAND_ALIASES.get(key)


def get_parts_brand_canonical(name: str) -> Optional[str]:
    """Canonical manufacturer for an alias or canonical name, else None."""
    key = name.strip().lower()
    if key.upper() in PARTS_BRANDS:
        return key.upper()
    return PARTS_BRAND_ALIASES.get(key)


def get_brand_canonical(name: str) -> Optional[str]:
    """Resolve against both tables; vehicle makes take precedence."""
    return get_vehicle_brand_canonical(name) or get_parts_brand_canonical(name)


def get_origin_code(name: str) -> Optional[str]:
    key = name.strip().lower()
    if key.upper() in ORIGINS:
        return key.upper()
    return ORIGIN_ALIASES.get(key)


def get_category_tag(phrase: str) -> Optional[str]:
    key = phrase.strip().lower()
    if key in CATEGORY_PHRASES:
        return CATEGORY_PHRASES[key]
    for suffix in ("es", "s"):
        if key.endswith(suffix) and key[: -len(suffix)] in CATEGORY_PHRASES:
            return CATEGORY_PHRASES[key[: -len(suffix)]]
    return None


@lru_cache(maxsize=256)
def brand_match_terms(canonical: str) -> Tuple[str, ...]:
    """Lowercase strings that identify ``canonical`` inside record text."""
    aliases = VEHICLE_BRANDS.get(canonical) or PARTS_BRANDS.get(canonical) or ()
    return tuple(sorted({canonical.lower(), *aliases}, key=len, reverse=True))
