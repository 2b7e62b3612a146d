# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Data-access layer for list members."""
from typing import Optional

from mailchimp_proxy.models.member import MailChimpMember
from mailchimp_proxy.repositories.entity_repository import EntityRepository
from mailchimp_proxy.repositories.tables import members_table


class MemberRepository(EntityRepository):
    table = members_table
    entity_cls = MailChimpMember
    id_field = "member_id"

    def find_in_list(self, list_id: str, member_id: str) -> Optional[MailChimpMember]:
        member = self.find_by_id(member_id)
        if member is None or member.list_id != list_id:
            return None
        return member
