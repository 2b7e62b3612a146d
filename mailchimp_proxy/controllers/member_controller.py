# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Controller: list member CRUD, nested under a list."""
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends

from mailchimp_proxy.core.dependencies import get_member_service
from mailchimp_proxy.schemas import ERROR_RESPONSES, MemberOut
from mailchimp_proxy.services.member_service import MemberService

router = APIRouter(prefix="/mailchimp/lists/{list_id}/members", tags=["Members"],
                   responses=ERROR_RESPONSES)


@router.post("", response_model=MemberOut)
def create_member(list_id: str, payload: Optional[Dict[str, Any]] = Body(default=None),
                  service: MemberService = Depends(get_member_service)):
    return service.create(list_id, payload)


@router.get("/{member_id}", response_model=MemberOut)
def show_member(list_id: str, member_id: str,
                service: MemberService = Depends(get_member_service)):
    return service.show(list_id, member_id)


@router.put("/{member_id}", response_model=MemberOut)
def update_member(list_id: str, member_id: str,
                  payload: Optional[Dict[str, Any]] = Body(default=None),
                  service: MemberService = Depends(get_member_service)):
    return service.update(list_id, member_id, payload)


@router.delete("/{member_id}")
def remove_member(list_id: str, member_id: str,
                  service: MemberService = Depends(get_member_service)):
    return service.remove(list_id, member_id)
