from __future__ import annotations

import strawberry

from ...logging import get_logger
from ...store import UserStore, get_user_store
from ..types.user import User

logger = get_logger(__name__)


def get_store_from_info(info: strawberry.Info) -> UserStore:
    """Return the store placed in the GraphQL context, or the shared one."""
    context = info.context
    store = context.get("store") if isinstance(context, dict) else None
    return store if store is not None else get_user_store()


# Query resolvers
async def resolve_users(info: strawberry.Info) -> list[User]:
    store = get_store_from_info(info)
    return [User.from_record(record) for record in store.list()]


async def resolve_user_by_id(info: strawberry.Info, id: str) -> User | None:
    store = get_store_from_info(info)
    record = store.get(id)
    if record is None:
        logger.debug("User not found", user_id=id)
        return None
    return User.from_record(record)


# Mutation resolvers
async def create_user(info: strawberry.Info, username: str, email: str) -> User:
    store = get_store_from_info(info)
    return User.from_record(store.create(username, email))


async def delete_user(info: strawberry.Info, id: str) -> User:
    """
    Delete a user and return the removed entry.

    Raises UserNotFoundError ("User not found") when no user has ``id``;
    Strawberry reports it as a GraphQL error.
    """
    store = get_store_from_info(info)
    return User.from_record(store.delete(id))
