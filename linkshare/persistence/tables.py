"""SQLAlchemy table definitions for LinkShare.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("email", String(255), nullable=False),
    Column("password_hash", String(255), nullable=False),
    Column("name", String(255), nullable=False),
    UniqueConstraint("email", name="uq_users_email"),
)

# ============================================================================
# LINKS TABLE
# ============================================================================
links_table = Table(
    "links",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("url", Text, nullable=False),
    Column("description", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "author_id",
        Integer,
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,  # Anonymous links
    ),
)

Index("idx_links_author_id", links_table.c.author_id)
Index("idx_links_created_at", links_table.c.created_at)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("body", Text, nullable=False),
    Column(
        "link_id", Integer, ForeignKey("links.id", ondelete="CASCADE"), nullable=False
    ),
)

Index("idx_comments_link_id", comments_table.c.link_id)

# ============================================================================
# VOTES TABLE
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "user_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "link_id", Integer, ForeignKey("links.id", ondelete="CASCADE"), nullable=False
    ),
    # Authoritative guard for one vote per user per link
    UniqueConstraint("user_id", "link_id", name="uq_vote_user_link"),
)

Index("idx_votes_link_id", votes_table.c.link_id)
