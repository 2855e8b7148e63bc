import os

# Deterministic, offline-friendly tests
os.environ.setdefault("OFFLINE_MODE", "1")
os.environ.setdefault("LANGFUSE_ENABLED", "0")
os.environ.setdefault("APP_ENV", "production")
os.environ.setdefault("LOG_PROMPTS", "1")
