from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.employee_contributions.employee_contributions.main import create_app


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    app = create_app()
    app.run(host="0.0.0.0", port=int(getattr(settings, "APP_PORT", 3000)))


if __name__ == "__main__":
    main()
