import logging
import sys
from functools import lru_cache
from typing import Dict, Optional, Tuple

from passlib.context import CryptContext

from app.config import get_admin_credentials

logger = logging.getLogger(__name__)

# Admin passwords are stored as argon2 hashes
pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")


def verify_password(plain_password, hashed_password):
    """Checks if the typed password matches the saved hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password):
    """Converts a plain password into an argon2 hash."""
    return pwd_context.hash(password)


@lru_cache(maxsize=1)
def _dummy_hash() -> str:
    return get_password_hash("praetorian-unknown-admin")


@lru_cache(maxsize=8)
def _hash_credentials(items: Tuple[Tuple[str, str], ...]) -> Dict[str, str]:
    hashed = {}
    for email, secret in items:
        if pwd_context.identify(secret) is None:
            logger.warning("Admin %s is configured with a plaintext password; store an argon2 hash instead", email)
            secret = get_password_hash(secret)
        hashed[email] = secret
    return hashed


def load_admin_credentials() -> Dict[str, str]:
    """E-mail -> argon2 hash for every configured admin."""
    return _hash_credentials(tuple(sorted(get_admin_credentials().items())))


def authenticate_admin(email: str, password: str) -> Optional[str]:
    """
    Return the admin e-mail when the credentials match, otherwise None.

    Unknown e-mails still pay for one hash verification so the response
    time does not reveal which addresses are admins.
    """
    hashed = load_admin_credentials().get(email)
    if hashed is None:
        verify_password(password, _dummy_hash())
        return None
    if not verify_password(password, hashed):
        return None
    return email


if __name__ == "__main__":
    if len(sys.argv) != 2:
        sys.exit("usage: python -m app.utils.security <password>")
    print(get_password_hash(sys.argv[1]))
