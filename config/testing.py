SECRET_KEY = "test-secret"

ROSTER_FILE = None

DEBUG = False
TESTING = True

AUTO_SEED_DB = True

SESSION_DAYS = 1
