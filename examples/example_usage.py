"""Example: use the service layer directly (no Flask).

Prints the dashboard numbers and writes the programs report next to this file.
"""

import importlib
from pathlib import Path

from config import get_settings_module

from src.childcare_admin.childcare_admin.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        db_config=settings.DB_CONFIG,
        tz_name=settings.TIMEZONE,
        report_brand=settings.REPORT_BRAND,
    )
    try:
        stats = container.dashboard_service.stats()
        print(stats.to_dict())

        document = container.report_service.build("programs")
        out = Path(__file__).resolve().parent / document.filename
        out.write_bytes(document.content)
        print(f"Wrote {out} ({document.row_count} programs)")
    finally:
        container.conn.close()


if __name__ == "__main__":
    main()
