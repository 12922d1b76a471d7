from __future__ import annotations

import argparse
import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for p in (REPO_ROOT, REPO_ROOT / "src"):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))

from dotenv import load_dotenv

from config import get_settings_module

from siswa_admin.database.bootstrap import ensure_admin_user


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    parser = argparse.ArgumentParser(description="Create or reset the admin login.")
    parser.add_argument("--username", default=getattr(settings, "ADMIN_USERNAME", "admin"))
    parser.add_argument("--password", default=getattr(settings, "ADMIN_PASSWORD", None))
    args = parser.parse_args()

    if not args.password:
        parser.error("no password given (use --password or ADMIN_PASSWORD)")

    ensure_admin_user(db_config, username=args.username, password=args.password)
    print(
        f"OK: Admin '{args.username}' ready -> "
        f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}"
    )


if __name__ == "__main__":
    main()
