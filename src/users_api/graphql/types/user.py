"""
User GraphQL type definitions
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

if TYPE_CHECKING:
    from ...store import UserRecord


@strawberry.type
class User:
    """User type for GraphQL API."""

    id: strawberry.ID
    username: str
    email: str

    @classmethod
    def from_record(cls, record: UserRecord) -> User:
        return cls(id=strawberry.ID(record.id), username=record.username, email=record.email)
