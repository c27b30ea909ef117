"""Load database/seed.sql and (re)create the demo accounts."""
from __future__ import annotations

import importlib
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.childcare_admin.childcare_admin.database.bootstrap import DEMO_USERS, apply_seed_sql, ensure_demo_users

log = logging.getLogger("seed_db")


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    apply_seed_sql(db_config, seed_path=REPO_ROOT / "database" / "seed.sql")
    ensure_demo_users(db_config)

    log.info("Seeded %s on %s", db_config.get("database"), db_config.get("host"))
    for username, password, _, _, role in DEMO_USERS:
        log.info("Demo login (%s): %s / %s", role, username, password)


if __name__ == "__main__":
    main()
