# ledger_api/api/deps.py

import uuid
from typing import Optional

from fastapi import Header, HTTPException


def get_current_user_id(
    x_user_id: Optional[str] = Header(
        default=None,
        description="UUID of the user whose ledger is being read or written",
    ),
) -> str:
    """
    Resolve the calling user from the ``X-User-Id`` header.

    Authentication happens upstream; this only insists on a well-formed id
    so every query can be scoped to its owner.
    """
    if not x_user_id:
        raise HTTPException(status_code=401, detail="Missing X-User-Id header")
    try:
        return str(uuid.UUID(x_user_id))
    except ValueError:
        raise HTTPException(status_code=401, detail="Invalid X-User-Id header")
