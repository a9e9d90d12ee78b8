import os
from dotenv import load_dotenv

load_dotenv()  # Load from .env file

# Database (prompt cache store)
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./prompt_cache.db")
PROMPT_CACHE_BACKEND = os.getenv("PROMPT_CACHE_BACKEND", "sql").strip().lower()  # sql | memory

# OpenAI
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY", "")
OPENAI_CHAT_MODEL = os.getenv("OPENAI_CHAT_MODEL", "gpt-4o")

# Clock used to pick morning or evening prompts (IANA zone name)
PROMPT_TIMEZONE = os.getenv("PROMPT_TIMEZONE", "UTC").strip() or "UTC"

# Connectivity
NETWORK_AVAILABLE = os.getenv("NETWORK_AVAILABLE", "true").strip().lower() in ("1", "true", "yes", "on")

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# CORS
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
