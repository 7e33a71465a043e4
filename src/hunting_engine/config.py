"""Environment-driven settings for the hunting engine."""
from __future__ import annotations

import logging
import os
from typing import List

from dotenv import load_dotenv

load_dotenv()


MONGO_URI = os.getenv("MONGO_URI", "mongodb://localhost:27017")
MONGO_HUNTING_DB_NAME = os.getenv("MONGO_HUNTING_DB_NAME", "afh_hunting")

# Synthesis (LLM) collaborator
HUNTING_LLM_MODEL = os.getenv("HUNTING_LLM_MODEL", "gpt-4.1")
HUNTING_LLM_TEMPERATURE = float(os.getenv("HUNTING_LLM_TEMPERATURE", "0.2"))

# Entity discovery collaborator: "stub" | "tavily"
DISCOVERY_BACKEND = os.getenv("DISCOVERY_BACKEND", "stub").strip().lower()
DISCOVERY_MAX_RESULTS = int(os.getenv("DISCOVERY_MAX_RESULTS", "5"))
TAVILY_API_KEY = os.getenv("TAVILY_API_KEY")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_DIR = os.getenv("LOG_DIR") or None

API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("PORT", "3001"))


def get_log_level() -> int:
    return getattr(logging, LOG_LEVEL, logging.INFO)


def get_cors_origins() -> List[str]:
    raw = os.getenv("CORS_ORIGINS", "*")
    return [origin.strip() for origin in raw.split(",") if origin.strip()] or ["*"]
