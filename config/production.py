import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

ROSTER_FILE = os.getenv("ROSTER_FILE") or None

DEBUG = False

AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))

SESSION_DAYS = int(os.getenv("SESSION_DAYS", "7"))
