"""
Derived business metrics.

Weighted combinations of the computed traits that the operations team
uses for segmentation: spend propensity (SPI), upsell receptiveness (URS),
predicted NPS, churn risk (CRS), group friction (GFI), content generation
potential (CGS), and the element alignment index (EAI) for the flagship
fire/stone/desert itineraries.
"""
from core.components import BusinessMetrics
from core.utils import clamp


def _tier(value: float, high: float, medium: float) -> str:
    if value >= high:
        return "High"
    if value >= medium:
        return "Medium"
    return "Low"


def _nps_tier(value: float) -> str:
    if value >= 9:
        return "Promoter"
    if value >= 7:
        return "Passive"
    return "Detractor"


def element_alignment_index(fire: float, stone: float, desert: float, openness: float, transformation: float) -> float:
    core_align = 0.4 * (fire / 100) + 0.4 * (stone / 100) + 0.2 * (desert / 100)
    o_bonus = max(0.0, (openness - 50) / 50 * 0.03)
    tr_bonus = max(0.0, (transformation - 50) / 50 * 0.03)
    return min(core_align + o_bonus + tr_bonus, 1.0) * 100


def classify_tribe(extraversion: float, openness: float, agreeableness: float, stability: float) -> tuple[str, str]:
    if extraversion >= 60 and stability >= 60:
        tribe = "A_Hunters"
    elif openness >= 60 and stability < 50:
        tribe = "B_Observers"
    elif agreeableness >= 60:
        tribe = "C_Connectors"
    else:
        tribe = "Mixed"

    if tribe == "Mixed":
        confidence = "Low"
    elif extraversion >= 75 or openness >= 75 or agreeableness >= 75:
        confidence = "High"
    else:
        confidence = "Medium"

    return tribe, confidence


def compute_business_metrics(profile) -> tuple[BusinessMetrics, dict]:
    """Returns the metric scores and their categorical tiers/flags."""
    E = profile.score("big_five", "extraversion")
    O = profile.score("big_five", "openness")
    C = profile.score("big_five", "conscientiousness")
    A = profile.score("big_five", "agreeableness")
    ES = profile.score("big_five", "emotional_stability")
    SF = profile.score("travel_behaviour", "spontaneity_flexibility")
    EA = profile.score("travel_behaviour", "environmental_adaptation")
    TR = profile.score("motivations", "transformation")
    AL = profile.score("motivations", "aliveness")
    CON = profile.score("motivations", "connection")
    EBI = profile.score("burdens", "emotional_burden_index")

    eai = element_alignment_index(
        profile.score("elements", "fire"),
        profile.score("elements", "stone"),
        profile.score("elements", "desert"),
        O,
        TR,
    )

    spi = 0.35 * O + 0.25 * AL + 0.20 * TR + 0.10 * (100 - C) + 0.10 * SF
    urs = 0.30 * A + 0.25 * SF + 0.25 * ES + 0.20 * (100 - EBI)
    nps = 5 + (eai / 100) * 3 + (TR / 100) * 1.5 + ((100 - EBI) / 100) * 0.5
    crs = 0.40 * (100 - ES) + 0.30 * (100 - EA) + 0.20 * EBI + 0.10 * (100 - A)
    gfi = 0.35 * abs(E - 50) + 0.25 * (100 - A) + 0.25 * abs(SF - 50) + 0.15 * (100 - CON)
    cgs = 0.40 * E + 0.30 * profile.score("elements", "urban") + 0.20 * O + 0.10 * AL

    metrics = BusinessMetrics({
        "spi": round(clamp(spi), 2),
        "urs": round(clamp(urs), 2),
        "crs": round(clamp(crs), 2),
        "gfi": round(clamp(gfi), 2),
        "cgs": round(clamp(cgs), 2),
        "element_alignment_index": round(clamp(eai), 2),
        "nps_predicted": round(nps, 2),
    })

    tribe, tribe_confidence = classify_tribe(E, O, A, ES)

    if spi >= 60 and urs >= 60:
        upsell = "Priority 1"
    elif spi >= 60 or urs >= 60:
        upsell = "Priority 2"
    else:
        upsell = "Priority 3"

    if crs >= 50:
        risk_flag = "HIGH RISK"
    elif crs >= 30:
        risk_flag = "Monitor"
    else:
        risk_flag = "OK"

    labels = {
        "spi_tier": _tier(spi, 70, 40),
        "urs_tier": _tier(urs, 70, 40),
        "nps_tier": _nps_tier(nps),
        "crs_tier": _tier(crs, 60, 30),
        "gfi_tier": _tier(gfi, 50, 25),
        "cgs_tier": _tier(cgs, 70, 40),
        "tribe": tribe,
        "tribe_confidence": tribe_confidence,
        "upsell_priority": upsell,
        "risk_flag": risk_flag,
        "content_flag": cgs >= 70,
    }

    return metrics, labels
