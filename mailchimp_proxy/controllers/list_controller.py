# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Controller: MailChimp list CRUD."""
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends

from mailchimp_proxy.core.dependencies import get_list_service
from mailchimp_proxy.schemas import ERROR_RESPONSES, ListOut
from mailchimp_proxy.services.list_service import ListService

router = APIRouter(prefix="/mailchimp/lists", tags=["Lists"], responses=ERROR_RESPONSES)


@router.post("", response_model=ListOut)
def create_list(payload: Optional[Dict[str, Any]] = Body(default=None),
                service: ListService = Depends(get_list_service)):
    return service.create(payload)


@router.get("/{list_id}", response_model=ListOut)
def show_list(list_id: str, service: ListService = Depends(get_list_service)):
    return service.show(list_id)


@router.put("/{list_id}", response_model=ListOut)
def update_list(list_id: str, payload: Optional[Dict[str, Any]] = Body(default=None),
                service: ListService = Depends(get_list_service)):
    return service.update(list_id, payload)


@router.delete("/{list_id}")
def remove_list(list_id: str, service: ListService = Depends(get_list_service)):
    return service.remove(list_id)
