import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "childcare_test"),
}
DB_POOL_SIZE = 1
DB_POOL_TIMEOUT = 2.0

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

TIMEZONE = "America/Mexico_City"

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))

OPENAI_API_KEY = ""
ASSISTANT_MODEL = "gpt-4o-mini"

REPORT_BRAND = "NEMI NAVIGATOR"
