# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""FastAPI dependency injection wiring."""
from mailchimp_proxy.core.database import engine
from mailchimp_proxy.repositories import ListRepository, MemberRepository
from mailchimp_proxy.services.list_service import ListService
from mailchimp_proxy.services.mailchimp_client import MailChimpClient
from mailchimp_proxy.services.member_service import MemberService

_list_repo = ListRepository(engine)
_member_repo = MemberRepository(engine)
_mailchimp_client = MailChimpClient()
_list_service = ListService(_list_repo, _mailchimp_client)
_member_service = MemberService(_member_repo, _list_service, _mailchimp_client)


def get_list_repo() -> ListRepository:
    return _list_repo


def get_list_service() -> ListService:
    return _list_service


def get_member_service() -> MemberService:
    return _member_service
