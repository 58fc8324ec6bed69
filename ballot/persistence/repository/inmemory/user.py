"""In-memory user and profile repositories for testing."""

from typing import List, Optional, Sequence

from sqlalchemy.exc import IntegrityError

from ballot.domain.model.user import Profile, User
from ballot.domain.repository.user import ProfileRepository, UserRepository
from ballot.domain.value import UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> List[User]:
        """Find several users at once."""
        return [self._users[uid] for uid in user_ids if uid in self._users]

    async def upsert(self, user: User) -> User:
        """Insert the user, or refresh the email of an existing record."""
        existing = self._users.get(user.id)
        stored = existing.model_copy(update={"email": user.email}) if existing else user
        self._users[user.id] = stored
        return stored


class InMemoryProfileRepository(ProfileRepository):
    """In-memory implementation of ProfileRepository for testing."""

    def __init__(self) -> None:
        self._profiles: dict[UserId, Profile] = {}

    async def find_by_user_id(self, user_id: UserId) -> Optional[Profile]:
        """Find the profile that belongs to a user."""
        return self._profiles.get(user_id)

    async def find_active(self) -> List[Profile]:
        """List active profiles, newest first."""
        active = [p for p in self._profiles.values() if p.is_active]
        return sorted(active, key=lambda p: p.created_at, reverse=True)

    async def find_by_user_ids(self, user_ids: Sequence[UserId]) -> List[Profile]:
        """Find the profiles of several users."""
        return [self._profiles[uid] for uid in user_ids if uid in self._profiles]

    async def save(self, profile: Profile) -> Profile:
        """Create or replace a profile.

        Raises:
            IntegrityError: If another profile already uses the username
        """
        if profile.username is not None:
            for other in self._profiles.values():
                if other.user_id != profile.user_id and other.username == profile.username:
                    raise IntegrityError("Duplicate username", None, Exception())

        existing = self._profiles.get(profile.user_id)
        if existing:
            profile = profile.model_copy(update={"created_at": existing.created_at})
        self._profiles[profile.user_id] = profile
        return profile
