"""Initial schema for Wallpaper Hub

Revision ID: 20260301_000000
Revises: None
Create Date: 2026-03-01 00:00:00.000000

Creates the catalogue tables (categories, wallpapers, collections and their
junction tables, slug redirects), user profiles, the download tables
(download sessions, downloads, countdown settings) and the admin tables
(cache invalidations, performance logs, dashboard snapshots, actions log),
and seeds the default countdown durations.

Revision format: YYYYMMDD_HHMMSS_description

"""

from datetime import datetime, timezone
from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "20260301_000000"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create all tables and seed the countdown settings."""

    op.create_table(
        "categories",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("slug", sa.String(120), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("sort_order", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("is_premium", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("parent_id", sa.Integer(), nullable=True),
        sa.Column("level", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("preview_wallpaper_id", sa.Integer(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["parent_id"], ["categories.id"]),
    )
    op.create_index("ix_categories_slug", "categories", ["slug"], unique=True)

    op.create_table(
        "wallpapers",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("slug", sa.String(220), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("image_url", sa.Text(), nullable=False),
        sa.Column("thumbnail_url", sa.Text(), nullable=True),
        sa.Column("download_url", sa.Text(), nullable=True),
        sa.Column("storage_key", sa.Text(), nullable=True),
        sa.Column("asset_4k_url", sa.Text(), nullable=True),
        sa.Column("asset_8k_url", sa.Text(), nullable=True),
        sa.Column("show_4k", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("show_8k", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("live_video_url", sa.Text(), nullable=True),
        sa.Column("live_poster_url", sa.Text(), nullable=True),
        sa.Column("live_enabled", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("width", sa.Integer(), nullable=True),
        sa.Column("height", sa.Integer(), nullable=True),
        sa.Column("download_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("is_premium", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("is_published", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("visibility", sa.String(20), nullable=False, server_default="public"),
        sa.Column("is_mobile", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("device_type", sa.String(20), nullable=False, server_default="desktop"),
        sa.Column("tags", sa.JSON(), nullable=False),
        sa.Column("category_id", sa.Integer(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["category_id"], ["categories.id"]),
    )
    op.create_index("ix_wallpapers_slug", "wallpapers", ["slug"], unique=True)
    op.create_index("ix_wallpapers_is_premium", "wallpapers", ["is_premium"])
    op.create_index("ix_wallpapers_category_id", "wallpapers", ["category_id"])
    op.create_index("ix_wallpapers_created_at", "wallpapers", ["created_at"])

    op.create_table(
        "wallpapers_categories",
        sa.Column("wallpaper_id", sa.Integer(), nullable=False),
        sa.Column("category_id", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("wallpaper_id", "category_id"),
        sa.ForeignKeyConstraint(["wallpaper_id"], ["wallpapers.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["category_id"], ["categories.id"], ondelete="CASCADE"),
    )
    op.create_index("ix_wallpapers_categories_category_id", "wallpapers_categories", ["category_id"])

    op.create_table(
        "slug_redirects",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("old_slug", sa.String(220), nullable=False),
        sa.Column("new_slug", sa.String(220), nullable=False),
        sa.Column("wallpaper_id", sa.Integer(), nullable=True),
        sa.Column("redirect_type", sa.String(3), nullable=False, server_default="301"),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["wallpaper_id"], ["wallpapers.id"], ondelete="SET NULL"),
    )
    op.create_index("ix_slug_redirects_old_slug", "slug_redirects", ["old_slug"], unique=True)

    op.create_table(
        "collections",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("slug", sa.String(120), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("icon_name", sa.String(50), nullable=True),
        sa.Column("cover_image_url", sa.Text(), nullable=True),
        sa.Column("color_theme", sa.JSON(), nullable=True),
        sa.Column("is_seasonal", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("season_start_month", sa.Integer(), nullable=True),
        sa.Column("season_end_month", sa.Integer(), nullable=True),
        sa.Column("is_featured", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("sort_order", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("view_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_collections_slug", "collections", ["slug"], unique=True)

    op.create_table(
        "collection_wallpapers",
        sa.Column("collection_id", sa.Integer(), nullable=False),
        sa.Column("wallpaper_id", sa.Integer(), nullable=False),
        sa.Column("sort_order", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("added_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("collection_id", "wallpaper_id"),
        sa.ForeignKeyConstraint(["collection_id"], ["collections.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["wallpaper_id"], ["wallpapers.id"], ondelete="CASCADE"),
    )

    op.create_table(
        "profiles",
        sa.Column("user_id", sa.String(64), nullable=False),
        sa.Column("email", sa.String(320), nullable=True),
        sa.Column("display_name", sa.String(100), nullable=True),
        sa.Column("plan_type", sa.String(20), nullable=False, server_default="free"),
        sa.Column("premium_expires_at", sa.DateTime(), nullable=True),
        sa.Column("is_admin", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("admin_role", sa.String(20), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("user_id"),
    )
    op.create_index("ix_profiles_email", "profiles", ["email"])
    op.create_index("ix_profiles_created_at", "profiles", ["created_at"])

    op.create_table(
        "download_sessions",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("token", sa.String(64), nullable=False),
        sa.Column("wallpaper_id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.String(64), nullable=True),
        sa.Column("resolution", sa.String(10), nullable=False),
        sa.Column("download_url", sa.Text(), nullable=False),
        sa.Column("storage_key", sa.Text(), nullable=True),
        sa.Column("is_external_url", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("expires_at", sa.DateTime(), nullable=False),
        sa.Column("is_premium_user", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("ip_address", sa.String(64), nullable=True),
        sa.Column("user_agent", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["wallpaper_id"], ["wallpapers.id"], ondelete="CASCADE"),
    )
    op.create_index("ix_download_sessions_token", "download_sessions", ["token"], unique=True)
    op.create_index("ix_download_sessions_wallpaper_id", "download_sessions", ["wallpaper_id"])
    op.create_index("ix_download_sessions_expires_at", "download_sessions", ["expires_at"])

    op.create_table(
        "downloads",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.String(64), nullable=True),
        sa.Column("wallpaper_id", sa.Integer(), nullable=False),
        sa.Column("resolution", sa.String(10), nullable=False),
        sa.Column("download_type", sa.String(10), nullable=False, server_default="guest"),
        sa.Column("ip_address", sa.String(64), nullable=True),
        sa.Column("user_agent", sa.Text(), nullable=True),
        sa.Column("download_token", sa.String(64), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["wallpaper_id"], ["wallpapers.id"], ondelete="CASCADE"),
    )
    op.create_index("ix_downloads_user_id", "downloads", ["user_id"])
    op.create_index("ix_downloads_wallpaper_id", "downloads", ["wallpaper_id"])
    op.create_index("ix_downloads_created_at", "downloads", ["created_at"])

    ad_settings = op.create_table(
        "ad_settings",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("guest_timer_duration", sa.Integer(), nullable=False),
        sa.Column("logged_in_timer_duration", sa.Integer(), nullable=False),
        sa.Column("updated_by", sa.String(320), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "cache_invalidations",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("path", sa.String(500), nullable=False),
        sa.Column("invalidation_type", sa.String(50), nullable=False),
        sa.Column("processed", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("processed_at", sa.DateTime(), nullable=True),
        sa.Column("admin_email", sa.String(320), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_cache_invalidations_path", "cache_invalidations", ["path"])
    op.create_index("ix_cache_invalidations_processed", "cache_invalidations", ["processed"])
    op.create_index("ix_cache_invalidations_created_at", "cache_invalidations", ["created_at"])

    op.create_table(
        "performance_logs",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("endpoint", sa.String(500), nullable=True),
        sa.Column("response_time", sa.Float(), nullable=True),
        sa.Column("log_level", sa.String(10), nullable=False, server_default="info"),
        sa.Column("log_message", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_performance_logs_created_at", "performance_logs", ["created_at"])

    op.create_table(
        "admin_dashboard_stats",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("cache_key", sa.String(100), nullable=False),
        sa.Column("stats_data", sa.Text(), nullable=False),
        sa.Column("generated_by", sa.String(320), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_admin_dashboard_stats_cache_key", "admin_dashboard_stats", ["cache_key"])
    op.create_index("ix_admin_dashboard_stats_created_at", "admin_dashboard_stats", ["created_at"])

    op.create_table(
        "admin_actions_log",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("admin_id", sa.String(64), nullable=False),
        sa.Column("admin_email", sa.String(320), nullable=True),
        sa.Column("user_id", sa.String(64), nullable=True),
        sa.Column("user_email", sa.String(320), nullable=True),
        sa.Column("action_type", sa.String(100), nullable=False),
        sa.Column("action_details", sa.JSON(), nullable=False),
        sa.Column("duration_days", sa.Integer(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("timestamp", sa.DateTime(), nullable=False),
        sa.Column("ip_address", sa.String(64), nullable=True),
        sa.Column("user_agent", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_admin_actions_log_admin_email", "admin_actions_log", ["admin_email"])
    op.create_index("ix_admin_actions_log_action_type", "admin_actions_log", ["action_type"])
    op.create_index("ix_admin_actions_log_timestamp", "admin_actions_log", ["timestamp"])

    # Default countdown durations
    op.bulk_insert(
        ad_settings,
        [
            {
                "guest_timer_duration": 30,
                "logged_in_timer_duration": 15,
                "updated_by": "migration",
                "created_at": datetime.now(timezone.utc).replace(tzinfo=None),
            }
        ],
    )


def downgrade() -> None:
    """Drop all tables in reverse dependency order."""
    for table in (
        "admin_actions_log",
        "admin_dashboard_stats",
        "performance_logs",
        "cache_invalidations",
        "ad_settings",
        "downloads",
        "download_sessions",
        "profiles",
        "collection_wallpapers",
        "collections",
        "slug_redirects",
        "wallpapers_categories",
        "wallpapers",
        "categories",
    ):
        op.drop_table(table)
