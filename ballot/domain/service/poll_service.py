"""Poll domain service."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire

from ballot.config import PollSettings
from ballot.domain.error import InvalidInputError, NotAuthorizedError, NotFoundError
from ballot.domain.model.poll import Option, OptionResult, Poll, PollResults
from ballot.domain.repository import PollRepository, VoteRepository
from ballot.domain.value import PollId, Role, UserId

from .base import Service

TITLE_MIN_LENGTH = 5
TITLE_MAX_LENGTH = 200
DESCRIPTION_MAX_LENGTH = 1000
OPTION_MAX_LENGTH = 200
MIN_OPTIONS = 2
MAX_OPTIONS = 10


def rank_options(
    options: list[Option], counts: dict
) -> tuple[list[OptionResult], int]:
    """Attach vote counts to options and order them by count, highest first.

    The sort is stable, so tied options keep their creation order.

    Args:
        options: Options in creation order
        counts: Vote count per option ID

    Returns:
        Ranked option results and the total number of votes
    """
    results = [
        OptionResult(option=option, vote_count=counts.get(option.id, 0))
        for option in options
    ]
    results.sort(key=lambda r: r.vote_count, reverse=True)
    return results, sum(r.vote_count for r in results)


class PollService(Service):
    """Domain service for poll lifecycle and results."""

    def __init__(
        self,
        poll_repository: PollRepository,
        vote_repository: VoteRepository,
        poll_settings: PollSettings,
    ) -> None:
        """Initialize poll service.

        Args:
            poll_repository: Poll repository
            vote_repository: Vote repository (for counts)
            poll_settings: Poll rules and the bootstrap poll definition
        """
        self.poll_repository = poll_repository
        self.vote_repository = vote_repository
        self.poll_settings = poll_settings

    async def get_poll(self, poll_id: PollId) -> Optional[Poll]:
        """Get a poll by ID.

        Args:
            poll_id: Poll ID

        Returns:
            Poll if found, None otherwise
        """
        with logfire.span("poll_service.get_poll", poll_id=str(poll_id)):
            poll = await self.poll_repository.find_by_id(poll_id)
            if not poll:
                logfire.warn("Poll not found", poll_id=str(poll_id))
            return poll

    async def get_or_bootstrap_poll(
        self, poll_id: PollId, user_id: UserId
    ) -> Optional[Poll]:
        """Get a poll, creating the well-known bootstrap poll on first use.

        Args:
            poll_id: Poll ID
            user_id: Caller, who becomes owner of a bootstrapped poll

        Returns:
            The poll, or None if it doesn't exist and isn't the bootstrap poll
        """
        poll = await self.poll_repository.find_by_id(poll_id)
        if poll or poll_id != self.poll_settings.bootstrap_poll_id:
            return poll

        with logfire.span("poll_service.bootstrap_poll", poll_id=str(poll_id)):
            now = datetime.now()
            poll = await self.poll_repository.save(
                Poll(
                    id=poll_id,
                    title=self.poll_settings.bootstrap_poll_title,
                    description=self.poll_settings.bootstrap_poll_description,
                    is_active=True,
                    user_id=user_id,
                    created_at=now,
                    updated_at=now,
                )
            )
            logfire.info(
                "Bootstrap poll created", poll_id=str(poll_id), user_id=str(user_id)
            )
            return poll

    async def get_results(self, poll: Poll) -> PollResults:
        """Aggregate vote counts for a poll.

        Args:
            poll: The poll

        Returns:
            Poll with ranked options and total votes
        """
        with logfire.span("poll_service.get_results", poll_id=str(poll.id)):
            options = await self.poll_repository.find_options(poll.id)
            counts = await self.vote_repository.count_by_option(poll.id)
            ranked, total = rank_options(options, counts)
            return PollResults(poll=poll, options=ranked, total_votes=total)

    async def list_polls(self) -> list[PollResults]:
        """List all polls with their results, newest first."""
        with logfire.span("poll_service.list_polls"):
            polls = await self.poll_repository.find_all()
            results = [await self.get_results(poll) for poll in polls]
            logfire.info("Polls listed", count=len(results))
            return results

    async def create_poll(
        self,
        user_id: UserId,
        title: str,
        description: str | None,
        options: list[str],
    ) -> PollResults:
        """Create a poll with its initial options.

        Args:
            user_id: Creator
            title: Poll title (5-200 characters)
            description: Optional description (up to 1000 characters)
            options: 2-10 distinct, non-blank option texts

        Returns:
            The created poll with zero-vote results

        Raises:
            InvalidInputError: If any field breaks the rules above
        """
        with logfire.span(
            "poll_service.create_poll", user_id=str(user_id), option_count=len(options)
        ):
            title = self._validate_title(title)
            description = self._validate_description(description)
            option_texts = self._validate_options(options)

            now = datetime.now()
            poll = await self.poll_repository.save(
                Poll(
                    id=PollId(uuid4()),
                    title=title,
                    description=description,
                    is_active=True,
                    user_id=user_id,
                    created_at=now,
                    updated_at=now,
                )
            )
            for text in option_texts:
                await self.poll_repository.get_or_create_option(poll.id, text)

            logfire.info(
                "Poll created",
                poll_id=str(poll.id),
                user_id=str(user_id),
                option_count=len(option_texts),
            )
            return await self.get_results(poll)

    async def update_poll(
        self,
        poll_id: PollId,
        user_id: UserId,
        role: Role,
        title: str | None = None,
        description: str | None = None,
        is_active: bool | None = None,
    ) -> tuple[Poll, Poll]:
        """Update a poll's editable fields.

        Args:
            poll_id: Poll ID
            user_id: Caller
            role: Caller's role
            title: New title, if changing
            description: New description, if changing (blank clears it)
            is_active: New active flag, if changing

        Returns:
            (poll before the update, poll after the update)

        Raises:
            NotFoundError: If the poll doesn't exist
            NotAuthorizedError: If the caller is neither creator nor admin
            InvalidInputError: If a field breaks the creation rules
        """
        with logfire.span(
            "poll_service.update_poll", poll_id=str(poll_id), user_id=str(user_id)
        ):
            poll = await self._get_manageable_poll(poll_id, user_id, role)

            updates: dict = {"updated_at": datetime.now()}
            if title is not None:
                updates["title"] = self._validate_title(title)
            if description is not None:
                updates["description"] = self._validate_description(description)
            if is_active is not None:
                updates["is_active"] = is_active

            updated = await self.poll_repository.save(poll.model_copy(update=updates))
            logfire.info(
                "Poll updated",
                poll_id=str(poll_id),
                user_id=str(user_id),
                fields=sorted(k for k in updates if k != "updated_at"),
            )
            return poll, updated

    async def delete_poll(self, poll_id: PollId, user_id: UserId, role: Role) -> Poll:
        """Hard delete a poll.

        Args:
            poll_id: Poll ID
            user_id: Caller
            role: Caller's role

        Returns:
            The poll as it was before deletion

        Raises:
            NotFoundError: If the poll doesn't exist
            NotAuthorizedError: If the caller is neither creator nor admin
        """
        with logfire.span(
            "poll_service.delete_poll", poll_id=str(poll_id), user_id=str(user_id)
        ):
            poll = await self._get_manageable_poll(poll_id, user_id, role)
            await self.poll_repository.delete(poll_id)
            logfire.info("Poll deleted", poll_id=str(poll_id), user_id=str(user_id))
            return poll

    async def _get_manageable_poll(
        self, poll_id: PollId, user_id: UserId, role: Role
    ) -> Poll:
        poll = await self.poll_repository.find_by_id(poll_id)
        if not poll:
            raise NotFoundError("Poll", str(poll_id))
        if poll.user_id != user_id and role != Role.ADMIN:
            logfire.warn(
                "Unauthorized poll modification attempt",
                poll_id=str(poll_id),
                user_id=str(user_id),
                role=role.value,
            )
            raise NotAuthorizedError("poll", str(poll_id), str(user_id))
        return poll

    @staticmethod
    def _validate_title(title: str) -> str:
        title = title.strip()
        if not TITLE_MIN_LENGTH <= len(title) <= TITLE_MAX_LENGTH:
            raise InvalidInputError(
                f"Title must be {TITLE_MIN_LENGTH}-{TITLE_MAX_LENGTH} characters"
            )
        return title

    @staticmethod
    def _validate_description(description: str | None) -> str | None:
        if description is None:
            return None
        description = description.strip()
        if len(description) > DESCRIPTION_MAX_LENGTH:
            raise InvalidInputError(
                f"Description must be less than {DESCRIPTION_MAX_LENGTH} characters"
            )
        return description or None

    @staticmethod
    def _validate_options(options: list[str]) -> list[str]:
        if not MIN_OPTIONS <= len(options) <= MAX_OPTIONS:
            raise InvalidInputError(
                f"A poll needs {MIN_OPTIONS}-{MAX_OPTIONS} options"
            )
        texts = [option.strip() for option in options]
        if any(not text for text in texts):
            raise InvalidInputError("All options must be non-empty")
        if any(len(text) > OPTION_MAX_LENGTH for text in texts):
            raise InvalidInputError(
                f"Options must be at most {OPTION_MAX_LENGTH} characters"
            )
        if len(set(texts)) != len(texts):
            raise InvalidInputError("All options must be unique")
        return texts
