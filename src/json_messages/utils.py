"""Shared utility helpers."""

from __future__ import annotations

import uuid


def generate_message_id() -> str:
    """Return a random UUID v4 in canonical 36-character form."""

    return str(uuid.uuid4())
