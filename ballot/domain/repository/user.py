"""User and profile repository interfaces."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from ballot.domain.model.user import Profile, User
from ballot.domain.value import UserId


class UserRepository(ABC):
    """Repository for identity records mirrored from the identity provider."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Sequence[UserId]) -> List[User]:
        """Find several users at once.

        Args:
            user_ids: IDs to look up

        Returns:
            Users that exist, in no particular order
        """
        pass

    @abstractmethod
    async def upsert(self, user: User) -> User:
        """Insert the user, or refresh the email of an existing record.

        Args:
            user: Identity taken from verified token claims

        Returns:
            The stored user
        """
        pass


class ProfileRepository(ABC):
    """Repository for application-owned profiles."""

    @abstractmethod
    async def find_by_user_id(self, user_id: UserId) -> Optional[Profile]:
        """Find the profile that belongs to a user.

        Args:
            user_id: The user's ID

        Returns:
            The profile if one exists, None otherwise
        """
        pass

    @abstractmethod
    async def find_active(self) -> List[Profile]:
        """List active profiles, newest first."""
        pass

    @abstractmethod
    async def find_by_user_ids(self, user_ids: Sequence[UserId]) -> List[Profile]:
        """Find the profiles of several users (batch query).

        Args:
            user_ids: IDs to look up

        Returns:
            Profiles that exist for the given users
        """
        pass

    @abstractmethod
    async def save(self, profile: Profile) -> Profile:
        """Create or replace a profile keyed by ``user_id``.

        Args:
            profile: Profile to store

        Returns:
            The stored profile

        Raises:
            IntegrityError: If the username is already taken
        """
        pass
