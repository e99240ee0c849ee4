"""Command that starts the people API server."""

from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path

from dotenv import dotenv_values
from flask import Flask, jsonify

from peopleapi.config import Config, load_config
from peopleapi.docs import swagger_spec
from peopleapi.enrichment import ApiEnricher
from peopleapi.handler import create_app
from peopleapi.repository import new_people_repository, run_migrations
from peopleapi.service import PeopleService

logger = logging.getLogger(__name__)


def build_app(config: Config) -> Flask:
    """Connect to the database, migrate it and assemble the application."""
    repo = new_people_repository(config.db)
    run_migrations(repo.engine)
    service = PeopleService(repo, ApiEnricher())
    app = create_app(service)
    app.add_url_rule("/swagger/doc.json", "swagger_doc", lambda: jsonify(swagger_spec()))
    return app


def main(argv: list[str] | None = None) -> int:
    """Load settings from the env file and serve the API."""
    logging.basicConfig(level=logging.INFO)
    parser = argparse.ArgumentParser(prog="peopleapi", description="People API server")
    parser.add_argument("--env-file", default=".env", help="file of environment settings")
    args = parser.parse_args(argv)

    env_file = Path(args.env_file)
    if not env_file.is_file():
        logger.error("Error loading .env file")
        return 1
    file_values = {k: v for k, v in dotenv_values(env_file).items() if v is not None}
    config = load_config({**file_values, **os.environ})

    try:
        app = build_app(config)
    except Exception as exc:
        logger.error("Failed to initialize: %s", exc)
        return 1

    try:
        port = int(config.port) if config.port else 0
    except ValueError:
        logger.error("Failed to run server: invalid port %r", config.port)
        return 1

    logger.info("Server starting on port %s", config.port)
    try:
        app.run(host="0.0.0.0", port=port)
    except Exception as exc:
        logger.error("Failed to run server: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())