# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Shared plumbing for services that mirror local writes to MailChimp."""
from typing import Any, Callable, Dict

from mailchimp_proxy.core.errors import MailChimpError
from mailchimp_proxy.core.logging import get_logger
from mailchimp_proxy.metrics import SYNC_OPERATIONS
from mailchimp_proxy.models.mailing_list import MailChimpList
from mailchimp_proxy.services.mailchimp_client import MailChimpClient

logger = get_logger(__name__)


class SyncService:
    ENTITY = "entity"

    def __init__(self, mailchimp: MailChimpClient):
        self._mailchimp = mailchimp

    def _mirror(self, operation: str, entity_id: str,
                call: Callable[..., Dict[str, Any]], *args) -> Dict[str, Any]:
        """Run one MailChimp call; failures are counted, logged and re-raised untouched."""
        try:
            result = call(*args)
        except MailChimpError as exc:
            SYNC_OPERATIONS.labels(entity=self.ENTITY, operation=operation, outcome="failed").inc()
            logger.warning("%s %s id=%s not mirrored to MailChimp: %s",
                           self.ENTITY, operation, entity_id, exc.message)
            raise
        SYNC_OPERATIONS.labels(entity=self.ENTITY, operation=operation, outcome="synced").inc()
        return result

    def _skip(self, operation: str, entity_id: str) -> None:
        SYNC_OPERATIONS.labels(entity=self.ENTITY, operation=operation, outcome="skipped").inc()
        logger.info("%s %s id=%s has no MailChimp copy, remote call skipped",
                    self.ENTITY, operation, entity_id)

    @staticmethod
    def _remote_list_id(mailing_list: MailChimpList) -> str:
        if not mailing_list.mail_chimp_id:
            raise MailChimpError(
                f"MailChimpList[{mailing_list.list_id}] is not synchronised with MailChimp"
            )
        return mailing_list.mail_chimp_id
