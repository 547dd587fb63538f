from __future__ import annotations

import uuid


def new_record_id() -> str:
    """Opaque, system-generated identifier (32 hex chars)."""
    return uuid.uuid4().hex
