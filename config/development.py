import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

ROSTER_FILE = os.getenv("ROSTER_FILE") or None

DEBUG = True

# Demo orders are loaded on startup so the dashboards are not empty
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "1")))

SESSION_DAYS = int(os.getenv("SESSION_DAYS", "7"))
