"""User identity and profile entities.

Identities are mirrored from the external identity provider. The profile
holds everything the application owns about a user, including the role,
and is the single source of truth for authorization.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from ballot.domain.model.common import DomainModel
from ballot.domain.value import Role, UserId, Username


class User(DomainModel):
    """Identity record copied from verified token claims."""

    id: UserId
    email: str
    created_at: datetime = Field(default_factory=datetime.now)


class Profile(DomainModel):
    """Application-owned user profile.

    Created lazily on first sign-in, on an admin claim or on the first
    profile update. Never hard-deleted; deactivation flips ``is_active``.
    """

    user_id: UserId
    username: Optional[Username] = None
    display_name: Optional[str] = Field(default=None, max_length=100)
    role: Role = Role.USER
    is_active: bool = True
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def effective_role(self) -> Role:
        """Role used for authorization; inactive profiles carry no privileges."""
        return self.role if self.is_active else Role.USER
