# file: services/firebase_app.py

import json
import logging

import firebase_admin
from firebase_admin import credentials

from utils.config import ConfigurationError, Settings

logger = logging.getLogger(__name__)


def load_service_account(path: str) -> dict:
    """Reads and parses the service-account JSON file."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError as e:
        raise ConfigurationError(f"Service account file not found: {path}") from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Service account file is not valid JSON: {path}") from e


def init_firebase(settings: Settings) -> firebase_admin.App:
    """
    Initializes the default Firebase Admin app once per process.
    Later calls return the already initialized app.
    """
    if firebase_admin._apps:
        logger.info("Firebase Admin SDK already initialized.")
        return firebase_admin.get_app()

    service_account = load_service_account(settings.service_account)
    try:
        cred = credentials.Certificate(service_account)
    except ValueError as e:
        raise ConfigurationError(f"Invalid service account credential: {e}") from e

    options = {}
    if settings.database_url:
        options["databaseURL"] = settings.database_url

    app = firebase_admin.initialize_app(cred, options)
    logger.info(f"Firebase Admin SDK initialized for project {service_account.get('project_id')}.")
    return app
