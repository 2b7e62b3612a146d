# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Repository package — re-exports the list and member repositories."""
from mailchimp_proxy.repositories.list_repository import ListRepository
from mailchimp_proxy.repositories.member_repository import MemberRepository
from mailchimp_proxy.repositories.tables import create_schema, metadata

__all__ = ["ListRepository", "MemberRepository", "create_schema", "metadata"]
