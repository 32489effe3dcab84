from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import Container, build_container
from .database.bootstrap import apply_schema, list_tables
from .employees.controller import register as register_employees
from .logging_config import setup_logging
from .payroll.controller import register as register_payroll

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parents[3] / "database" / "schema.sql"


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["DEFAULT_SHIFT_HOURS"] = float(getattr(settings, "DEFAULT_SHIFT_HOURS", 8))

    setup_logging(
        getattr(settings, "LOG_DIR", "logs"),
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        console=bool(getattr(settings, "LOG_TO_CONSOLE", True)),
    )

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=SCHEMA_PATH)
            logger.info("Schema ready (tables=%d)", len(list_tables(db_config)))
        container = build_container(db_config=db_config, default_shift_hours=app.config["DEFAULT_SHIFT_HOURS"])

    register_employees(app, container)
    register_attendance(app, container)
    register_payroll(app, container)

    return app


def main() -> None:
    app = create_app()
    # One request at a time: the roster is not shared across threads.
    app.run(debug=app.config["DEBUG"], threaded=False)


if __name__ == "__main__":
    main()
