"""
Identifier generation for stored records.
"""

from __future__ import annotations

import uuid
from typing import Protocol


class IdGenerator(Protocol):
    def generate_id(self) -> str: ...


class UUIDGenerator:
    """
    Random UUIDv4 strings; collisions are treated as impossible.
    """

    def generate_id(self) -> str:
        return str(uuid.uuid4())
