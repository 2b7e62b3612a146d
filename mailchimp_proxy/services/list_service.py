# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Business logic for lists: local persistence mirrored to MailChimp."""
from typing import Any, Dict

from mailchimp_proxy.core.errors import EntityNotFoundError
from mailchimp_proxy.core.logging import get_logger
from mailchimp_proxy.core.validation import validate_or_raise
from mailchimp_proxy.models.mailing_list import MailChimpList
from mailchimp_proxy.repositories.list_repository import ListRepository
from mailchimp_proxy.services.mailchimp_client import MailChimpClient
from mailchimp_proxy.services.sync_service import SyncService

logger = get_logger(__name__)


class ListService(SyncService):
    ENTITY = "list"

    def __init__(self, repo: ListRepository, mailchimp: MailChimpClient):
        super().__init__(mailchimp)
        self._repo = repo

    def get_list(self, list_id: str) -> MailChimpList:
        mailing_list = self._repo.find_by_id(list_id)
        if mailing_list is None:
            raise EntityNotFoundError("MailChimpList", list_id)
        return mailing_list

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        validate_or_raise(data, MailChimpList.VALIDATION_RULES)
        mailing_list = self._repo.save(MailChimpList.from_payload(data))

        response = self._mirror("create", mailing_list.list_id,
                                self._mailchimp.post, "lists", mailing_list.to_mailchimp_payload())
        mailing_list.mail_chimp_id = response.get("id")
        self._repo.save(mailing_list)

        logger.info("List created id=%s mail_chimp_id=%s",
                    mailing_list.list_id, mailing_list.mail_chimp_id)
        return mailing_list.to_dict()

    def show(self, list_id: str) -> Dict[str, Any]:
        return self.get_list(list_id).to_dict()

    def update(self, list_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        mailing_list = self.get_list(list_id)
        validate_or_raise(data, MailChimpList.VALIDATION_RULES, partial=True)
        remote_id = self._remote_list_id(mailing_list)

        mailing_list.fill(data)
        self._repo.save(mailing_list)
        self._mirror("update", list_id, self._mailchimp.patch,
                     f"lists/{remote_id}", mailing_list.to_mailchimp_payload())

        logger.info("List updated id=%s", list_id)
        return mailing_list.to_dict()

    def remove(self, list_id: str) -> Dict[str, Any]:
        mailing_list = self.get_list(list_id)
        if mailing_list.mail_chimp_id:
            self._mirror("delete", list_id, self._mailchimp.delete,
                         f"lists/{mailing_list.mail_chimp_id}")
        else:
            self._skip("delete", list_id)

        self._repo.delete(list_id)
        logger.info("List removed id=%s", list_id)
        return {}
