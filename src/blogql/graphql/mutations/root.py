"""
Root GraphQL mutation definitions
"""

from typing import Annotated

import strawberry

from ..types.user import User


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation(name="createUser")
    async def create_user(
        self,
        info: strawberry.Info,
        name: str,
        password: str,
        email: str,
        posts: list[strawberry.ID] | None = None,
        comments: list[strawberry.ID] | None = None,
        liked_posts: list[strawberry.ID] | None = None,
        id: Annotated[
            strawberry.ID | None,
            strawberry.argument(
                deprecation_reason="Ignored: user IDs are assigned by the server."
            ),
        ] = None,
    ) -> User:
        """Create a new user. Fails with ALREADY_EXISTS if the email is taken."""
        from ..resolvers.user import create_user

        return await create_user(
            info,
            id=id,
            name=name,
            password=password,
            email=email,
            posts=posts,
            comments=comments,
            liked_posts=liked_posts,
        )
