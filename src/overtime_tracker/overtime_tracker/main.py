from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import load_settings

from .container import Container, build_container, build_records_repo
from .core.enums import StorageBackend
from .dashboard.controller import register as register_dashboard
from .database.bootstrap import apply_schema, list_tables
from .payroll.controller import register as register_payroll
from .records.controller import register as register_records

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parents[3] / "database" / "schema.sql"


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings = load_settings()
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    if container is None:
        backend = str(getattr(settings, "STORAGE_BACKEND", StorageBackend.JSON.value))
        db_config = dict(getattr(settings, "DB_CONFIG", {}))
        data_file = getattr(settings, "DATA_FILE", None)

        if backend == StorageBackend.MYSQL.value:
            logger.info(
                "settings=%s db=%s@%s:%s/%s",
                settings.__name__,
                db_config.get("user"),
                db_config.get("host"),
                db_config.get("port", 3306),
                db_config.get("database"),
            )
            if bool(getattr(settings, "AUTO_INIT_DB", False)):
                apply_schema(db_config, schema_path=SCHEMA_PATH)
                logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
        else:
            logger.info("settings=%s data_file=%s", settings.__name__, data_file)

        records_repo = build_records_repo(storage_backend=backend, data_file=data_file, db_config=db_config)
        container = build_container(
            records_repo=records_repo,
            default_wage=getattr(settings, "DEFAULT_WAGE", 10000),
        )

    register_payroll(app, container)
    register_records(app, container)
    register_dashboard(app, container)

    return app
