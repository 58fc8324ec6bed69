"""Response models shared by comment use cases."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from ballot.domain.model.comment import Comment
from ballot.domain.service import ProfileService, VoteService
from ballot.domain.value import UserId, VoteTally


class AuthorItem(BaseModel):
    """Public profile fields of a comment author."""

    username: str | None
    display_name: str | None


class VotesItem(BaseModel):
    """Vote tally of a comment."""

    upvotes: int
    downvotes: int
    user_vote: int | None

    @classmethod
    def from_tally(cls, tally: VoteTally) -> "VotesItem":
        """Build the response item from a domain tally."""
        return cls(
            upvotes=tally.upvotes,
            downvotes=tally.downvotes,
            user_vote=int(tally.user_vote) if tally.user_vote is not None else None,
        )


class CommentItem(BaseModel):
    """Comment with its author and votes."""

    id: str
    poll_id: str | None
    parent_id: str | None
    content: str
    user_id: str
    is_deleted: bool
    is_edited: bool
    reply_count: int
    created_at: datetime
    updated_at: datetime
    author: AuthorItem | None
    votes: VotesItem


async def build_comment_items(
    comments: list[Comment],
    vote_service: VoteService,
    profile_service: ProfileService,
    viewer_id: Optional[UserId] = None,
) -> list[CommentItem]:
    """Attach authors and vote tallies to comments.

    Args:
        comments: Comments to render
        vote_service: Vote service for tallies
        profile_service: Profile service for author names
        viewer_id: Authenticated caller, whose own vote is included

    Returns:
        Response items in the same order as ``comments``
    """
    comment_ids = [c.id for c in comments]
    tallies = await vote_service.get_tallies(comment_ids, viewer_id)
    profiles = await profile_service.get_profiles(
        list(dict.fromkeys(c.user_id for c in comments))
    )

    items = []
    for comment in comments:
        profile = profiles.get(comment.user_id)
        items.append(
            CommentItem(
                id=str(comment.id),
                poll_id=str(comment.poll_id) if comment.poll_id else None,
                parent_id=str(comment.parent_id) if comment.parent_id else None,
                content=comment.content,
                user_id=str(comment.user_id),
                is_deleted=comment.is_deleted,
                is_edited=comment.is_edited,
                reply_count=comment.reply_count,
                created_at=comment.created_at,
                updated_at=comment.updated_at,
                author=AuthorItem(
                    username=str(profile.username) if profile.username else None,
                    display_name=profile.display_name,
                )
                if profile
                else None,
                votes=VotesItem.from_tally(tallies.get(comment.id, VoteTally())),
            )
        )
    return items
