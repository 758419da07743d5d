from __future__ import annotations
from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import Field

from ..dependencies import get_store
from ..errors import NotFoundError, ValidationError
from ..schemas import IntakeData
from ..store import DocumentStore
from .common import RequestBody, require_uid


router = APIRouter(prefix="/users", tags=["users"])


class IntakeRequest(RequestBody):
	user_uid: Optional[str] = Field(default=None, alias="userUid")
	user_data: Optional[IntakeData] = Field(default=None, alias="userData")


@router.post("/intake")
def save_intake(req: IntakeRequest, store: DocumentStore = Depends(get_store)):
	uid = require_uid(req.user_uid)
	if req.user_data is None:
		raise ValidationError("User data is required")
	store.set("users", uid, req.user_data.to_document())
	return {"ok": True}


@router.get("/{uid}")
def get_intake(uid: str, store: DocumentStore = Depends(get_store)):
	doc = store.get("users", uid)
	if doc is None:
		raise NotFoundError("User not found")
	return IntakeData.model_validate(doc).to_document()
