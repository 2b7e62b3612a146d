# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Table definitions for lists and members."""
from sqlalchemy import (
    JSON, Boolean, Column, DateTime, ForeignKey, Integer, MetaData, String, Table, Text, func,
)

metadata = MetaData()

lists_table = Table(
    "mailchimp_lists", metadata,
    Column("id", String(36), primary_key=True),
    Column("mail_chimp_id", String(64), nullable=True),
    Column("name", Text, nullable=False),
    Column("permission_reminder", Text, nullable=False),
    Column("use_archive_bar", Boolean, nullable=True),
    Column("campaign_defaults", JSON, nullable=False),
    Column("notify_on_subscribe", Text, nullable=True),
    Column("notify_on_unsubscribe", Text, nullable=True),
    Column("email_type_option", Boolean, nullable=False),
    Column("visibility", String(3), nullable=True),
    Column("contact", JSON, nullable=False),
    Column("version", Integer, nullable=False, default=1),
    Column("created_at", DateTime, server_default=func.now()),
    Column("updated_at", DateTime, server_default=func.now(), onupdate=func.now()),
)

members_table = Table(
    "mailchimp_members", metadata,
    Column("id", String(36), primary_key=True),
    Column("list_id", String(36), ForeignKey("mailchimp_lists.id", ondelete="CASCADE"),
           nullable=False, index=True),
    Column("mail_chimp_id", String(64), nullable=True),
    Column("email_address", Text, nullable=False),
    Column("email_type", Text, nullable=True),
    Column("status", String(16), nullable=False),
    Column("merge_fields", JSON, nullable=True),
    Column("interests", JSON, nullable=True),
    Column("language", Text, nullable=True),
    Column("vip", Boolean, nullable=True),
    Column("location", JSON, nullable=True),
    Column("marketing_permissions", JSON, nullable=True),
    Column("ip_signup", String(15), nullable=True),
    Column("timestamp_signup", DateTime, nullable=True),
    Column("ip_opt", String(15), nullable=True),
    Column("timestamp_opt", DateTime, nullable=True),
    Column("tags", JSON, nullable=True),
    Column("version", Integer, nullable=False, default=1),
    Column("created_at", DateTime, server_default=func.now()),
    Column("updated_at", DateTime, server_default=func.now(), onupdate=func.now()),
)


def create_schema(engine) -> None:
    metadata.create_all(engine)
