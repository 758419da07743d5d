from __future__ import annotations
import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends
from pydantic import Field

from ..careers import CareerPathGenerator
from ..dependencies import get_career_generator, get_store
from ..errors import NotFoundError
from ..schemas import CareerAdvice, utcnow
from ..store import DocumentStore
from .common import RequestBody, require_profile, require_uid


router = APIRouter(prefix="/careers", tags=["careers"])
logger = logging.getLogger(__name__)


class CareerRequest(RequestBody):
	user_uid: Optional[str] = Field(default=None, alias="userUid")
	user_profile: Optional[Dict[str, Any]] = Field(default=None, alias="userProfile")


@router.post("/generate")
async def generate_career_advice(
	req: CareerRequest,
	generator: CareerPathGenerator = Depends(get_career_generator),
	store: DocumentStore = Depends(get_store),
):
	uid = require_uid(req.user_uid)
	profile = require_profile(req.user_profile)
	logger.info("generating career advice for user %s", uid)
	advice = await generator.generate(profile)
	store.set("careerAdvice", uid, {"advice": advice.to_document(), "generatedAt": utcnow().isoformat()})
	return advice.to_document()


@router.get("/{uid}")
def get_career_advice(uid: str, store: DocumentStore = Depends(get_store)):
	doc = store.get("careerAdvice", uid)
	if doc is None:
		raise NotFoundError("Career advice not found")
	return CareerAdvice.model_validate(doc["advice"]).to_document()
