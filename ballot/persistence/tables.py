"""SQLAlchemy table definitions for ballot.

Repositories use SQLAlchemy Core against these tables. They match the
schema created by the Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    SmallInteger,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP, UUID

metadata = MetaData()

# ============================================================================
# USERS TABLE (mirror of the external identity provider)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("email", String(255), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_users_email", users_table.c.email)

# ============================================================================
# PROFILES TABLE (roles live here)
# ============================================================================
profiles_table = Table(
    "profiles",
    metadata,
    Column("user_id", UUID, primary_key=True),
    Column("username", String(30), nullable=True, unique=True),
    Column("display_name", String(100), nullable=True),
    Column(
        "role",
        postgresql.ENUM(
            "user", "moderator", "admin", name="user_role", create_type=False
        ),
        nullable=False,
        server_default="user",
    ),
    Column("is_active", Boolean, nullable=False, server_default="true"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_profiles_created_at", profiles_table.c.created_at.desc())

# ============================================================================
# POLLS TABLE
# ============================================================================
polls_table = Table(
    "polls",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("title", String(200), nullable=False),
    Column("description", Text, nullable=True),
    Column("is_active", Boolean, nullable=False, server_default="true"),
    Column("user_id", UUID, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_polls_created_at", polls_table.c.created_at.desc())
Index("idx_polls_user_id", polls_table.c.user_id)

# ============================================================================
# OPTIONS TABLE
# ============================================================================
options_table = Table(
    "options",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("poll_id", UUID, ForeignKey("polls.id", ondelete="CASCADE"), nullable=False),
    Column("text", String(200), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("poll_id", "text", name="uq_option_poll_text"),
)

Index("idx_options_poll_id", options_table.c.poll_id)

# ============================================================================
# VOTES TABLE (one per user per poll)
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("poll_id", UUID, ForeignKey("polls.id", ondelete="CASCADE"), nullable=False),
    Column(
        "option_id", UUID, ForeignKey("options.id", ondelete="CASCADE"), nullable=False
    ),
    Column("user_id", UUID, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("poll_id", "user_id", name="uq_vote_poll_user"),
)

Index("idx_votes_option_id", votes_table.c.option_id)

# ============================================================================
# COMMENTS TABLE (poll_id NULL is the community discussion board)
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("poll_id", UUID, ForeignKey("polls.id", ondelete="CASCADE"), nullable=True),
    Column(
        "parent_id", UUID, ForeignKey("comments.id", ondelete="CASCADE"), nullable=True
    ),
    Column("content", Text, nullable=False),
    Column("user_id", UUID, nullable=False),
    Column("is_deleted", Boolean, nullable=False, server_default="false"),
    Column("is_edited", Boolean, nullable=False, server_default="false"),
    Column("reply_count", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("reply_count >= 0", name="reply_count_non_negative"),
)

Index("idx_comments_poll_id", comments_table.c.poll_id)
Index("idx_comments_parent_id", comments_table.c.parent_id)
Index("idx_comments_created_at", comments_table.c.created_at.desc())

# ============================================================================
# COMMENT VOTES TABLE (one per user per comment)
# ============================================================================
comment_votes_table = Table(
    "comment_votes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "comment_id",
        UUID,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("user_id", UUID, nullable=False),
    Column("vote_type", SmallInteger, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("comment_id", "user_id", name="uq_comment_vote_user"),
    CheckConstraint("vote_type IN (1, -1)", name="vote_type_direction"),
)

# ============================================================================
# ADMIN ACTIONS TABLE (append-only audit log)
# ============================================================================
admin_actions_table = Table(
    "admin_actions",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("admin_id", UUID, nullable=False),
    Column("action_type", String(50), nullable=False),
    Column("target_id", UUID, nullable=False),
    Column("target_type", String(20), nullable=False),
    Column("action_details", JSONB, nullable=False, server_default="{}"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_admin_actions_target_id", admin_actions_table.c.target_id)
Index("idx_admin_actions_admin_id", admin_actions_table.c.admin_id)
