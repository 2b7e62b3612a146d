# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Business logic for list members.

Create persists locally before calling MailChimp so the member has a local id
even when the remote call fails; remove calls MailChimp first so a failed
remote delete never orphans a live subscription. Neither direction is rolled
back: a remote failure after a local write leaves the local row as written.
"""
from typing import Any, Dict

from mailchimp_proxy.core.errors import EntityNotFoundError, InvalidDataError
from mailchimp_proxy.core.logging import get_logger
from mailchimp_proxy.core.validation import validate, validate_or_raise
from mailchimp_proxy.models.member import MailChimpMember
from mailchimp_proxy.repositories.member_repository import MemberRepository
from mailchimp_proxy.services.list_service import ListService
from mailchimp_proxy.services.mailchimp_client import MailChimpClient
from mailchimp_proxy.services.sync_service import SyncService

logger = get_logger(__name__)


class MemberService(SyncService):
    ENTITY = "member"

    def __init__(self, repo: MemberRepository, lists: ListService, mailchimp: MailChimpClient):
        super().__init__(mailchimp)
        self._repo = repo
        self._lists = lists

    def get_member(self, list_id: str, member_id: str) -> MailChimpMember:
        member = self._repo.find_in_list(list_id, member_id)
        if member is None:
            raise EntityNotFoundError("MailChimpMember", member_id)
        return member

    def create(self, list_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        mailing_list = self._lists.get_list(list_id)
        validate_or_raise(data, MailChimpMember.VALIDATION_RULES)
        remote_list_id = self._remote_list_id(mailing_list)

        member = self._repo.save(MailChimpMember.from_payload(list_id, data))
        response = self._mirror("create", member.member_id, self._mailchimp.post,
                                f"lists/{remote_list_id}/members", member.to_mailchimp_payload())
        member.mail_chimp_id = response.get("id")
        self._repo.save(member)

        logger.info("Member created id=%s list=%s mail_chimp_id=%s",
                    member.member_id, list_id, member.mail_chimp_id)
        return member.to_dict()

    def show(self, list_id: str, member_id: str) -> Dict[str, Any]:
        self._lists.get_list(list_id)
        return self.get_member(list_id, member_id).to_dict()

    def update(self, list_id: str, member_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        mailing_list = self._lists.get_list(list_id)
        member = self.get_member(list_id, member_id)

        data = data or {}
        errors = validate(data, MailChimpMember.VALIDATION_RULES, partial=True)
        # the subscriber hash is derived from the address, so it cannot move
        if ("email_address" in data and "email_address" not in errors
                and data["email_address"] != member.email_address):
            errors["email_address"] = ["The email address cannot be changed."]
        if errors:
            raise InvalidDataError(errors)
        remote_list_id = self._remote_list_id(mailing_list)

        member.fill(data)
        self._repo.save(member)
        self._mirror("update", member_id, self._mailchimp.patch,
                     f"lists/{remote_list_id}/members/{member.subscriber_hash}",
                     member.to_mailchimp_payload())

        logger.info("Member updated id=%s list=%s", member_id, list_id)
        return member.to_dict()

    def remove(self, list_id: str, member_id: str) -> Dict[str, Any]:
        mailing_list = self._lists.get_list(list_id)
        member = self.get_member(list_id, member_id)

        if member.mail_chimp_id:
            self._mirror("delete", member_id, self._mailchimp.delete,
                         f"lists/{self._remote_list_id(mailing_list)}/members/{member.subscriber_hash}")
        else:
            self._skip("delete", member_id)

        self._repo.delete(member_id)
        logger.info("Member removed id=%s list=%s", member_id, list_id)
        return {}
