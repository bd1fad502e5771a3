from dataclasses import dataclass
from typing import Optional

from core.profile import SoulPrintProfile


@dataclass
class TravelerProfile:
    """
    Wraps a SoulPrintProfile with the respondent it belongs to and the
    trip-context intake used to narrow the destination catalog.
    """

    soulprint: SoulPrintProfile
    respondent_id: Optional[str] = None
    user_id: Optional[str] = None

    # From the context intake: anywhere | country | region | flight_radius
    geographic_constraint: str = "anywhere"
    geographic_value: str = ""
    context_intake_id: Optional[str] = None
