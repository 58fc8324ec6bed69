"""In-memory poll repository for testing."""

from datetime import datetime
from typing import List, Optional
from uuid import uuid4

from ballot.domain.model.poll import Option, Poll
from ballot.domain.repository.poll import PollRepository
from ballot.domain.value import OptionId, PollId


class InMemoryPollRepository(PollRepository):
    """In-memory implementation of PollRepository for testing."""

    def __init__(self) -> None:
        self._polls: dict[PollId, Poll] = {}
        self._options: list[Option] = []

    async def find_by_id(self, poll_id: PollId) -> Optional[Poll]:
        """Find a poll by ID."""
        return self._polls.get(poll_id)

    async def find_all(self) -> List[Poll]:
        """List all polls, newest first."""
        return sorted(self._polls.values(), key=lambda p: p.created_at, reverse=True)

    async def save(self, poll: Poll) -> Poll:
        """Save a poll (create or update)."""
        self._polls[poll.id] = poll
        return poll

    async def delete(self, poll_id: PollId) -> bool:
        """Delete a poll and its options."""
        if poll_id not in self._polls:
            return False
        del self._polls[poll_id]
        self._options = [o for o in self._options if o.poll_id != poll_id]
        return True

    async def find_options(self, poll_id: PollId) -> List[Option]:
        """List the options of a poll in creation order."""
        return [o for o in self._options if o.poll_id == poll_id]

    async def get_or_create_option(self, poll_id: PollId, text: str) -> Option:
        """Resolve an option by (poll_id, text), creating it if absent."""
        for option in self._options:
            if option.poll_id == poll_id and option.text == text:
                return option

        option = Option(
            id=OptionId(uuid4()), poll_id=poll_id, text=text, created_at=datetime.now()
        )
        self._options.append(option)
        return option
