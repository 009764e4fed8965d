# ========================================
# app/config.py - ENVIRONMENT CONFIGURATION
# ========================================

import json
import os
from pathlib import Path
from typing import Dict, List, Optional

from dotenv import load_dotenv

# Load .env from the project root (falls back to the working directory)
backend_dir = Path(__file__).resolve().parent.parent
env_path = backend_dir / ".env"

if env_path.exists():
    load_dotenv(dotenv_path=env_path)
else:
    load_dotenv()

DEFAULT_DATABASE_NAME = "praetorian"
SESSION_COOKIE_NAME = "admin-auth-token"
SESSION_MAX_AGE_SECONDS = 60 * 60 * 24  # 1 day


def get_mongo_uri() -> Optional[str]:
    return os.getenv("MONGO_URI")


def get_database_name() -> str:
    return os.getenv("DATABASE_NAME", DEFAULT_DATABASE_NAME)


def get_jwt_secret() -> Optional[str]:
    return os.getenv("JWT_SECRET")


def is_development() -> bool:
    return os.getenv("APP_ENV", "production").lower() == "development"


def get_allowed_origins() -> List[str]:
    raw_origins = os.getenv("ALLOWED_ORIGINS", "")
    return [o.strip() for o in raw_origins.split(",") if o.strip()]


def get_admin_credentials() -> Dict[str, str]:
    """Admin e-mail -> password hash map from ADMIN_CREDENTIALS (JSON)."""
    raw = os.getenv("ADMIN_CREDENTIALS")
    if not raw:
        return {}
    data = json.loads(raw)
    if not isinstance(data, dict):
        raise ValueError("ADMIN_CREDENTIALS must be a JSON object of email -> password hash")
    return {str(email): str(secret) for email, secret in data.items()}


def get_cloudinary_credentials() -> Optional[Dict[str, str]]:
    cloud_name = os.getenv("CLOUDINARY_CLOUD_NAME")
    api_key = os.getenv("CLOUDINARY_API_KEY")
    api_secret = os.getenv("CLOUDINARY_API_SECRET")
    if not (cloud_name and api_key and api_secret):
        return None
    return {"cloud_name": cloud_name, "api_key": api_key, "api_secret": api_secret}


def get_resume_storage_backend() -> str:
    """'cloudinary' when credentials are present, otherwise 'gridfs'."""
    backend = os.getenv("RESUME_STORAGE")
    if backend:
        return backend.lower()
    return "cloudinary" if get_cloudinary_credentials() else "gridfs"


def get_public_base_url() -> str:
    return os.getenv("PUBLIC_BASE_URL", "").rstrip("/")


def get_log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()
