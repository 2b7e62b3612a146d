# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Data-access layer for lists."""
from sqlalchemy import delete

from mailchimp_proxy.models.mailing_list import MailChimpList
from mailchimp_proxy.repositories.entity_repository import EntityRepository
from mailchimp_proxy.repositories.tables import lists_table, members_table


class ListRepository(EntityRepository):
    table = lists_table
    entity_cls = MailChimpList
    id_field = "list_id"

    def delete(self, entity_id: str) -> bool:
        # members go first; SQLite does not enforce ON DELETE CASCADE by default
        with self._engine.begin() as conn:
            conn.execute(delete(members_table).where(members_table.c.list_id == entity_id))
            result = conn.execute(delete(self.table).where(self.table.c.id == entity_id))
        return result.rowcount > 0
