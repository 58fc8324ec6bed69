"""Profile and role domain service."""

import secrets
from datetime import datetime
from typing import Optional

import logfire
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError

from ballot.config import AuthSettings
from ballot.domain.error import InvalidInputError, NotAuthorizedError, NotFoundError
from ballot.domain.model.user import Profile, User
from ballot.domain.repository import ProfileRepository, UserRepository
from ballot.domain.value import Role, UserId, Username

from .base import Service


class ProfileService(Service):
    """Domain service for identities, profiles and roles.

    The profile row is the only place a role is read from. Users without
    a profile, and users whose profile is inactive, have the ``user`` role.
    """

    def __init__(
        self,
        profile_repository: ProfileRepository,
        user_repository: UserRepository,
        auth_settings: AuthSettings,
    ) -> None:
        """Initialize profile service.

        Args:
            profile_repository: Profile repository
            user_repository: User repository
            auth_settings: Authentication settings (admin claim secret)
        """
        self.profile_repository = profile_repository
        self.user_repository = user_repository
        self.auth_settings = auth_settings

    async def get_profile(self, user_id: UserId) -> Optional[Profile]:
        """Get a user's profile.

        Args:
            user_id: User ID

        Returns:
            Profile if found, None otherwise
        """
        return await self.profile_repository.find_by_user_id(user_id)

    async def get_role(self, user_id: UserId) -> Role:
        """Resolve a user's effective role.

        Args:
            user_id: User ID

        Returns:
            Profile role, or ``Role.USER`` when there is no active profile
        """
        with logfire.span("profile_service.get_role", user_id=str(user_id)):
            profile = await self.profile_repository.find_by_user_id(user_id)
            role = profile.effective_role if profile else Role.USER
            logfire.info("Role resolved", user_id=str(user_id), role=role.value)
            return role

    async def require_admin(self, user_id: UserId) -> None:
        """Ensure the user is an admin.

        Raises:
            NotAuthorizedError: If the user's role is not admin
        """
        role = await self.get_role(user_id)
        if role != Role.ADMIN:
            logfire.warn("Admin access denied", user_id=str(user_id), role=role.value)
            raise NotAuthorizedError("users", "(admin only)", str(user_id))

    async def sync_identity(self, user_id: UserId, email: str) -> User:
        """Mirror the identity from verified token claims.

        Args:
            user_id: User ID from the token
            email: Email from the token

        Returns:
            The stored identity record
        """
        with logfire.span("profile_service.sync_identity", user_id=str(user_id)):
            return await self.user_repository.upsert(
                User(id=user_id, email=email, created_at=datetime.now())
            )

    async def ensure_profile(self, user_id: UserId) -> Profile:
        """Return the user's profile, creating a default one if missing.

        Args:
            user_id: User ID

        Returns:
            Existing or newly created profile
        """
        with logfire.span("profile_service.ensure_profile", user_id=str(user_id)):
            profile = await self.profile_repository.find_by_user_id(user_id)
            if profile:
                return profile

            now = datetime.now()
            profile = await self.profile_repository.save(
                Profile(user_id=user_id, role=Role.USER, created_at=now, updated_at=now)
            )
            logfire.info("Profile created", user_id=str(user_id))
            return profile

    async def update_profile(
        self,
        user_id: UserId,
        username: str | None = None,
        display_name: str | None = None,
    ) -> Profile:
        """Update the caller's own username and display name.

        Args:
            user_id: User ID (the caller)
            username: New username, if changing
            display_name: New display name, if changing

        Returns:
            Updated profile

        Raises:
            InvalidInputError: If a value is malformed or the username is taken
        """
        with logfire.span("profile_service.update_profile", user_id=str(user_id)):
            profile = await self.ensure_profile(user_id)

            updates: dict = {"updated_at": datetime.now()}
            try:
                if username is not None:
                    updates["username"] = Username(username.strip())
                if display_name is not None:
                    cleaned = display_name.strip()
                    updates["display_name"] = cleaned or None
                updated = Profile.model_validate(
                    {**profile.model_dump(), **updates}
                )
            except ValidationError as e:
                raise InvalidInputError(e.errors()[0]["msg"])

            try:
                saved = await self.profile_repository.save(updated)
            except IntegrityError:
                logfire.warn("Username already taken", user_id=str(user_id))
                raise InvalidInputError("Username is already taken")

            logfire.info("Profile updated", user_id=str(user_id))
            return saved

    async def set_role(self, user_id: UserId, role: Role) -> Profile:
        """Change the role on an existing profile.

        Args:
            user_id: Target user ID
            role: New role

        Returns:
            Updated profile

        Raises:
            NotFoundError: If the user has no profile
        """
        with logfire.span(
            "profile_service.set_role", user_id=str(user_id), role=role.value
        ):
            profile = await self.profile_repository.find_by_user_id(user_id)
            if not profile:
                raise NotFoundError("Profile", str(user_id))

            saved = await self.profile_repository.save(
                profile.model_copy(update={"role": role, "updated_at": datetime.now()})
            )
            logfire.info("Role updated", user_id=str(user_id), role=role.value)
            return saved

    async def claim_admin(self, user_id: UserId, operator_token: str) -> Profile:
        """Promote the caller to admin when they present the operator secret.

        The claim is disabled unless ``auth.admin_claim_token`` is configured.

        Args:
            user_id: User ID (the caller)
            operator_token: Secret supplied by the caller

        Returns:
            The caller's profile with the admin role

        Raises:
            NotAuthorizedError: If the claim is disabled or the secret is wrong
        """
        with logfire.span("profile_service.claim_admin", user_id=str(user_id)):
            expected = self.auth_settings.admin_claim_token
            if not expected or not secrets.compare_digest(
                operator_token.encode(), expected.encode()
            ):
                logfire.warn("Admin claim rejected", user_id=str(user_id))
                raise NotAuthorizedError("role", "admin", str(user_id))

            profile = await self.ensure_profile(user_id)
            saved = await self.profile_repository.save(
                profile.model_copy(
                    update={
                        "role": Role.ADMIN,
                        "is_active": True,
                        "updated_at": datetime.now(),
                    }
                )
            )
            logfire.info("Admin role claimed", user_id=str(user_id))
            return saved

    async def list_active_users(self) -> list[tuple[Profile, Optional[User]]]:
        """List active profiles merged with their identity records.

        Returns:
            (profile, identity) pairs, newest profile first; identity is None
            when no record has been mirrored yet
        """
        with logfire.span("profile_service.list_active_users"):
            profiles = await self.profile_repository.find_active()
            users = await self.user_repository.find_by_ids(
                [p.user_id for p in profiles]
            )
            users_by_id = {u.id: u for u in users}
            logfire.info("Active users listed", count=len(profiles))
            return [(p, users_by_id.get(p.user_id)) for p in profiles]

    async def get_profiles(self, user_ids: list[UserId]) -> dict[UserId, Profile]:
        """Batch-load profiles keyed by user ID."""
        if not user_ids:
            return {}
        profiles = await self.profile_repository.find_by_user_ids(user_ids)
        return {p.user_id: p for p in profiles}
