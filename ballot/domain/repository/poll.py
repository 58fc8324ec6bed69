"""Poll repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ballot.domain.model.poll import Option, Poll
from ballot.domain.value import PollId


class PollRepository(ABC):
    """Repository for the poll aggregate (polls and their options)."""

    @abstractmethod
    async def find_by_id(self, poll_id: PollId) -> Optional[Poll]:
        """Find a poll by ID.

        Args:
            poll_id: The poll's unique identifier

        Returns:
            The poll if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Poll]:
        """List all polls, newest first."""
        pass

    @abstractmethod
    async def save(self, poll: Poll) -> Poll:
        """Save a poll (create or update).

        Args:
            poll: The poll to save

        Returns:
            The saved poll
        """
        pass

    @abstractmethod
    async def delete(self, poll_id: PollId) -> bool:
        """Hard delete a poll.

        Options, votes and comment links are removed by the store.

        Args:
            poll_id: The poll to delete

        Returns:
            True if a poll was deleted
        """
        pass

    @abstractmethod
    async def find_options(self, poll_id: PollId) -> List[Option]:
        """List the options of a poll in creation order.

        Args:
            poll_id: The poll's ID

        Returns:
            Options of the poll
        """
        pass

    @abstractmethod
    async def get_or_create_option(self, poll_id: PollId, text: str) -> Option:
        """Resolve an option by ``(poll_id, text)``, creating it if absent.

        Implementations must be safe under concurrent calls with the same
        key: exactly one row exists afterwards and every caller gets it.

        Args:
            poll_id: The poll's ID
            text: Option text (already trimmed)

        Returns:
            The existing or newly created option
        """
        pass
