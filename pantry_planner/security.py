import hashlib
import hmac
import secrets
from dataclasses import dataclass

from pantry_planner.settings import settings


API_KEY_PREFIX = "pp_"


@dataclass(frozen=True)
class IssuedKey:
    raw: str
    hashed: str
    prefix: str


def _require_api_key_secret() -> str:
    secret = settings.API_KEY_SECRET
    if not secret:
        raise RuntimeError("API_KEY_SECRET is required to hash API keys")
    return secret


def hash_api_key(raw_key: str) -> str:
    secret = _require_api_key_secret()
    return hmac.new(secret.encode("utf-8"), raw_key.encode("utf-8"), hashlib.sha256).hexdigest()


def issue_api_key(prefix_length: int = 8) -> IssuedKey:
    raw = f"{API_KEY_PREFIX}{secrets.token_urlsafe(32)}"
    return IssuedKey(raw=raw, hashed=hash_api_key(raw), prefix=raw[:prefix_length])
