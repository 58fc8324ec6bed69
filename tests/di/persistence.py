"""In-memory persistence component for tests."""

from dishka import Scope, provide

from ballot.domain.repository import (
    AdminActionRepository,
    CommentRepository,
    CommentVoteRepository,
    PollRepository,
    ProfileRepository,
    UserRepository,
    VoteRepository,
)
from ballot.persistence.repository.inmemory import (
    InMemoryAdminActionRepository,
    InMemoryCommentRepository,
    InMemoryCommentVoteRepository,
    InMemoryPollRepository,
    InMemoryProfileRepository,
    InMemoryUserRepository,
    InMemoryVoteRepository,
)
from ballot.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """In-memory repositories.

    Repositories are APP-scoped so state survives across requests served by
    one container, the way rows survive in a database. Every test builds its
    own container, so tests stay isolated.
    """

    __is_mock__ = True

    scope = Scope.APP

    users = provide(InMemoryUserRepository, provides=UserRepository)
    profiles = provide(InMemoryProfileRepository, provides=ProfileRepository)
    polls = provide(InMemoryPollRepository, provides=PollRepository)
    votes = provide(InMemoryVoteRepository, provides=VoteRepository)
    comment_votes = provide(
        InMemoryCommentVoteRepository, provides=CommentVoteRepository
    )
    comments = provide(InMemoryCommentRepository, provides=CommentRepository)
    admin_actions = provide(
        InMemoryAdminActionRepository, provides=AdminActionRepository
    )
