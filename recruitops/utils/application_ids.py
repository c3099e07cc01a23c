"""Application ID generation."""

import time
import uuid
from typing import Optional

TOKEN_LENGTH = 8


def new_id_token() -> str:
    """Short random token that keeps IDs made in the same second apart."""
    return uuid.uuid4().hex[:TOKEN_LENGTH]


def generate_application_id(
    role_code: Optional[str],
    prefix: str,
    counter: Optional[int] = None,
    timestamp: Optional[int] = None,
    token: Optional[str] = None,
) -> str:
    """Build an application ID: <prefix>_<role code>_<unix seconds>_<token>[_<counter>].

    Every single create gets a fresh token. A bulk import shares one token
    across the batch and passes a per-row counter instead.
    """
    seconds = int(time.time()) if timestamp is None else timestamp
    role_part = role_code.strip() if role_code and role_code.strip() else "UNKNOWN"
    token = new_id_token() if token is None else token
    suffix = f"_{counter}" if counter is not None else ""
    return f"{prefix}_{role_part}_{seconds}_{token}{suffix}"
