# Hard-Cem pricing, freight and lifecycle constants, all money values in CAD

# Downtime cost per hour by industry (CAD/hr)
INDUSTRY_DOWNTIME_COST_PER_HOUR = {
    "manufacturing": 260000.0,
    "automotive": 3000000.0,
    "datacenter": 600000.0,
    "hydro": 20000.0,
    "custom": 0.0,  # Caller supplies their own hourly figure
}

# Markup profiles (%) by business relationship
MARKUP_PROFILES = {
    "distributor": 15,
    "readymix": 25,
    "enduser": 40,
}

# Tiered pricing: pre-markup $/sq ft by slab thickness (inches, upper bound inclusive)
TIERED_PRICE_PER_SQFT = [
    (4.0, 0.95),
    (6.0, 0.63),
]
TIERED_PRICE_PER_SQFT_THICK = 0.47  # > 6"

# Volumetric pricing
BASE_COST_PER_LB = 0.32
DEFAULT_LBS_PER_YD3 = 66.0  # Standard dosage, 2 bags/yd³
CUBIC_FEET_PER_YD3 = 27.0

# Dosage slider bounds (% of standard)
DOSAGE_MIN_PCT = 50.0
DOSAGE_MAX_PCT = 125.0
DOSAGE_STEP_PCT = 5.0

# Conventional floor resurfacing
RESURFACING_COST_PER_SQFT = 6.0

# Freight: truck rates from Calgary (CAD per truck)
FREIGHT_RATES_CAD = {
    "Toronto": 3800.0,
    "Vancouver": 1550.0,
    "Montreal": 4200.0,
    "Edmonton": 1000.0,
    "Winnipeg": 1800.0,
    "Seattle": 2432.43,
    "New York": 7297.30,
    "Chicago": 4594.59,
    "Dallas": 4594.59,
}
FALLBACK_FREIGHT_RATE_CAD = 4500.0
KG_PER_LB = 0.4536
KG_PER_PALLET = 1200.0
PALLETS_PER_TRUCK = 16.0


def inches_to_feet(inches: float) -> float:
    """Convert inches to feet."""
    return inches / 12.0


def cubic_feet_to_yards(volume_ft3: float) -> float:
    """Convert cubic feet to cubic yards."""
    return volume_ft3 / CUBIC_FEET_PER_YD3


def lbs_to_kg(mass_lbs: float) -> float:
    """Convert pounds to kilograms."""
    return mass_lbs * KG_PER_LB


def slab_volume_yd3(area_sq_ft: float, thickness_in: float) -> float:
    """Slab volume in cubic yards from floor area (sq ft) and thickness (inches)."""
    return cubic_feet_to_yards(area_sq_ft * inches_to_feet(thickness_in))


def adjusted_lbs_per_yd3(dosage_pct: float) -> float:
    """Additive loading (lb/yd³) at a dosage expressed as % of standard."""
    return DEFAULT_LBS_PER_YD3 * (dosage_pct / 100.0)


def tiered_price_per_sqft(thickness_in: float) -> float:
    """Pre-markup $/sq ft for a slab thickness under tiered pricing."""
    for upper_in, price in TIERED_PRICE_PER_SQFT:
        if thickness_in <= upper_in:
            return price
    return TIERED_PRICE_PER_SQFT_THICK


def apply_markup(cost: float, markup_pct: float) -> float:
    """Apply a percentage markup to a raw cost."""
    return cost * (1 + markup_pct / 100.0)


def clamp_dosage(dosage_pct: float) -> float:
    """Clamp a dosage percentage into the supported slider range."""
    return max(DOSAGE_MIN_PCT, min(DOSAGE_MAX_PCT, dosage_pct))
