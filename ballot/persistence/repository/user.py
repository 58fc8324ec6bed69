"""PostgreSQL implementations of the User and Profile repositories."""

from typing import List, Optional, Sequence

from sqlalchemy import desc, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from ballot.domain.model import Profile, User
from ballot.domain.repository import ProfileRepository, UserRepository
from ballot.domain.value import UserId
from ballot.persistence.mappers import (
    profile_to_dict,
    row_to_profile,
    row_to_user,
    user_to_dict,
)
from ballot.persistence.tables import profiles_table, users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> List[User]:
        """Find several users at once."""
        if not user_ids:
            return []

        stmt = select(users_table).where(users_table.c.id.in_(user_ids))
        result = await self.session.execute(stmt)
        return [row_to_user(dict(row)) for row in result.mappings().all()]

    async def upsert(self, user: User) -> User:
        """Insert the user, or refresh the email of an existing record."""
        stmt = insert(users_table).values(**user_to_dict(user))
        stmt = stmt.on_conflict_do_update(
            index_elements=[users_table.c.id],
            set_={"email": stmt.excluded.email},
        ).returning(users_table)
        result = await self.session.execute(stmt)
        row = result.mappings().one()
        await self.session.flush()
        return row_to_user(dict(row))


class PostgresProfileRepository(ProfileRepository):
    """PostgreSQL implementation of ProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_user_id(self, user_id: UserId) -> Optional[Profile]:
        """Find the profile that belongs to a user."""
        stmt = select(profiles_table).where(profiles_table.c.user_id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_profile(dict(row)) if row else None

    async def find_active(self) -> List[Profile]:
        """List active profiles, newest first."""
        stmt = (
            select(profiles_table)
            .where(profiles_table.c.is_active.is_(True))
            .order_by(desc(profiles_table.c.created_at))
        )
        result = await self.session.execute(stmt)
        return [row_to_profile(dict(row)) for row in result.mappings().all()]

    async def find_by_user_ids(self, user_ids: Sequence[UserId]) -> List[Profile]:
        """Find the profiles of several users (batch query)."""
        if not user_ids:
            return []

        stmt = select(profiles_table).where(profiles_table.c.user_id.in_(user_ids))
        result = await self.session.execute(stmt)
        return [row_to_profile(dict(row)) for row in result.mappings().all()]

    async def save(self, profile: Profile) -> Profile:
        """Create or replace a profile keyed by user_id.

        Runs in a savepoint so a username conflict leaves the request
        transaction usable.
        """
        values = profile_to_dict(profile)
        stmt = insert(profiles_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[profiles_table.c.user_id],
            set_={k: v for k, v in values.items() if k not in ("user_id", "created_at")},
        ).returning(profiles_table)

        async with self.session.begin_nested():
            result = await self.session.execute(stmt)
            row = result.mappings().one()
        return row_to_profile(dict(row))
