"""
Runtime configuration, read from the environment (.env in local dev).
"""
import logging
import os

from dotenv import load_dotenv

load_dotenv()

SUPABASE_URL = os.getenv("SUPABASE_URL", "")
SUPABASE_SECRET_KEY = os.getenv("SUPABASE_SECRET_KEY", "")

GROQ_API_KEY = os.getenv("GROQ_API_KEY")
GROQ_BACKUP_API_KEY = os.getenv("GROQ_BACKUP_API_KEY")
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")

NARRATIVE_MODEL = os.getenv("NARRATIVE_MODEL", "llama-3.3-70b-versatile")
EXPLANATION_MODEL = os.getenv("EXPLANATION_MODEL", "gpt-4o-mini")

# How many ranked matches are persisted per respondent
MATCH_LIMIT = int(os.getenv("MATCH_LIMIT", "3"))

CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def configure_logging():
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
