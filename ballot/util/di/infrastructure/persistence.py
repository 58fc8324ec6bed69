"""Persistence component: PostgreSQL in production."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from ballot.config import Settings
from ballot.domain.repository import (
    AdminActionRepository,
    CommentRepository,
    CommentVoteRepository,
    PollRepository,
    ProfileRepository,
    UserRepository,
    VoteRepository,
)
from ballot.persistence.database import create_engine, create_session_factory
from ballot.persistence.repository import (
    PostgresAdminActionRepository,
    PostgresCommentRepository,
    PostgresCommentVoteRepository,
    PostgresPollRepository,
    PostgresProfileRepository,
    PostgresUserRepository,
    PostgresVoteRepository,
)
from ballot.util.di.base import ProviderBase
from ballot.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Repositories behind the domain's repository interfaces."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """One engine per process, one session and transaction per request."""

    __is_mock__ = False

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Yield the request's session.

        Commits when the request scope closes cleanly and rolls back when
        the scope closes with an exception.
        """
        async with session_factory() as session:
            try:
                yield session
            except Exception as e:
                await session.rollback()
                logfire.warn("Request transaction rolled back", error=str(e))
                raise
            else:
                await session.commit()

    # Every Postgres repository takes the request session as its only argument
    users = provide(PostgresUserRepository, provides=UserRepository)
    profiles = provide(PostgresProfileRepository, provides=ProfileRepository)
    polls = provide(PostgresPollRepository, provides=PollRepository)
    votes = provide(PostgresVoteRepository, provides=VoteRepository)
    comment_votes = provide(
        PostgresCommentVoteRepository, provides=CommentVoteRepository
    )
    comments = provide(PostgresCommentRepository, provides=CommentRepository)
    admin_actions = provide(
        PostgresAdminActionRepository, provides=AdminActionRepository
    )
