import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "childcare_db"),
}
DB_POOL_SIZE = int(os.getenv("DB_POOL_SIZE", "5"))
# Seconds a request waits for a free pooled connection before failing.
DB_POOL_TIMEOUT = float(os.getenv("DB_POOL_TIMEOUT", "10"))

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

TIMEZONE = os.getenv("TIMEZONE", "America/Mexico_City")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed demo data on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))

OPENAI_API_KEY = os.getenv("OPENAI_API_KEY", "")
ASSISTANT_MODEL = os.getenv("ASSISTANT_MODEL", "gpt-4o-mini")

REPORT_BRAND = os.getenv("REPORT_BRAND", "NEMI NAVIGATOR")
