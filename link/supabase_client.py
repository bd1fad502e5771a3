"""
Supabase persistence over the PostgREST REST API.

Tables:
    respondents            raw questionnaire answers
    computed_scores        one row per respondent (upserted)
    echoprint_destinations curated destination catalog
    context_intake         geographic preference per user
    destination_matches    ranked matches (replaced on every re-run)
    narrative_insights     generated SoulPrint narratives
"""
import logging
from typing import Any, Optional

import httpx

import config
from models.destination_profile import DestinationProfile

logger = logging.getLogger(__name__)

REST_PATH = "/rest/v1"
TIMEOUT_S = 15.0


class PersistenceError(Exception):
    """A Supabase read or write failed."""


class RespondentNotFound(PersistenceError):
    pass


class SupabaseClient:

    def __init__(
        self,
        url: str = config.SUPABASE_URL,
        key: str = config.SUPABASE_SECRET_KEY,
        http: Optional[httpx.AsyncClient] = None,
    ):
        self.url = url.rstrip("/")
        self.key = key
        self._http = http

    @property
    def http(self) -> httpx.AsyncClient:
        if self._http is None:
            self._http = httpx.AsyncClient(
                base_url=f"{self.url}{REST_PATH}",
                headers={
                    "apikey": self.key,
                    "Authorization": f"Bearer {self.key}",
                    "Content-Type": "application/json",
                },
                timeout=TIMEOUT_S,
            )
        return self._http

    async def close(self):
        if self._http is not None:
            await self._http.aclose()
            self._http = None

    async def _request(
        self,
        method: str,
        table: str,
        params: Optional[dict] = None,
        json: Any = None,
        prefer: Optional[str] = None,
    ) -> Any:
        headers = {"Prefer": prefer} if prefer else None
        try:
            response = await self.http.request(method, f"/{table}", params=params, json=json, headers=headers)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error("[Supabase] %s %s -> %d: %s", method, table, e.response.status_code, e.response.text)
            raise PersistenceError(f"{method} {table} failed with status {e.response.status_code}") from e
        except httpx.HTTPError as e:
            logger.error("[Supabase] %s %s failed: %s", method, table, e)
            raise PersistenceError(f"{method} {table} failed: {e}") from e

        if not response.content:
            return None
        return response.json()

    # --------------------------------------------------
    # Reads
    # --------------------------------------------------

    async def get_respondent(self, respondent_id: str) -> dict:
        rows = await self._request(
            "GET",
            "respondents",
            params={"select": "id,user_id,name,raw_responses", "id": f"eq.{respondent_id}"},
        )
        if not rows:
            raise RespondentNotFound(f"Respondent {respondent_id} not found")
        return rows[0]

    async def get_raw_responses(self, respondent_id: str) -> dict:
        respondent = await self.get_respondent(respondent_id)
        return respondent.get("raw_responses") or {}

    async def get_destinations(self, active_only: bool = True) -> list[DestinationProfile]:
        params = {"select": "*"}
        if active_only:
            params["is_active"] = "eq.true"
        rows = await self._request("GET", "echoprint_destinations", params=params) or []
        return [DestinationProfile.from_row(row) for row in rows]

    async def get_geographic_preference(self, user_id: Optional[str]) -> dict:
        """Latest completed context intake; "anywhere" when there is none."""
        preference = {"geographic_constraint": "anywhere", "geographic_value": "", "context_intake_id": None}
        if not user_id:
            return preference

        rows = await self._request(
            "GET",
            "context_intake",
            params={
                "select": "id,geographic_constraint,geographic_value",
                "user_id": f"eq.{user_id}",
                "completed": "eq.true",
                "order": "created_at.desc",
                "limit": "1",
            },
        )
        if rows:
            intake = rows[0]
            preference["geographic_constraint"] = intake.get("geographic_constraint") or "anywhere"
            preference["geographic_value"] = intake.get("geographic_value") or ""
            preference["context_intake_id"] = intake.get("id")
        return preference

    # --------------------------------------------------
    # Writes
    # --------------------------------------------------

    async def upsert_computed_scores(self, respondent_id: str, record: dict) -> dict:
        row = dict(record, respondent_id=respondent_id)
        rows = await self._request(
            "POST",
            "computed_scores",
            params={"on_conflict": "respondent_id"},
            json=row,
            prefer="resolution=merge-duplicates,return=representation",
        )
        logger.info("[Supabase] Stored computed scores for %s", respondent_id)
        return rows[0] if rows else row

    async def replace_matches(self, respondent_id: str, records: list[dict]) -> None:
        """Delete the respondent's previous matches, then insert the new set."""
        await self._request("DELETE", "destination_matches", params={"respondent_id": f"eq.{respondent_id}"})
        if records:
            await self._request("POST", "destination_matches", json=records, prefer="return=minimal")
        logger.info("[Supabase] Replaced matches for %s (%d rows)", respondent_id, len(records))

    async def insert_narrative(self, respondent_id: str, narrative: dict, computed_scores_id: Optional[str] = None) -> None:
        row = dict(narrative, respondent_id=respondent_id, computed_scores_id=computed_scores_id)
        await self._request("POST", "narrative_insights", json=row, prefer="return=minimal")
