"""
Root GraphQL mutation definitions
"""

import strawberry

from ..types.user import User


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation(name="createUser")
    async def create_user(self, info: strawberry.Info, username: str, email: str) -> User:
        """Create a new user."""
        from ..resolvers.user import create_user

        return await create_user(info, username, email)

    @strawberry.mutation(name="deleteUser")
    async def delete_user(self, info: strawberry.Info, id: strawberry.ID) -> User | None:
        """Delete a user, returning the removed entry."""
        from ..resolvers.user import delete_user

        return await delete_user(info, str(id))
