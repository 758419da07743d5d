from __future__ import annotations
import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends
from pydantic import Field

from ..dependencies import get_oracle, get_store
from ..errors import NotFoundError
from ..oracle import OracleClient
from ..skills import SkillAnalysisCache, SkillGapAnalyzer
from ..store import DocumentStore
from .common import RequestBody, require_path, require_profile


router = APIRouter(prefix="/skills", tags=["skills"])
logger = logging.getLogger(__name__)


class SkillRequest(RequestBody):
	# Without a user id the analysis is computed but not cached
	user_uid: Optional[str] = Field(default=None, alias="userUid")
	user_profile: Optional[Dict[str, Any]] = Field(default=None, alias="userProfile")
	career_path: Optional[Dict[str, Any]] = Field(default=None, alias="careerPath")


@router.post("/analyze")
async def analyze_skill_gap(
	req: SkillRequest,
	oracle: OracleClient = Depends(get_oracle),
	store: DocumentStore = Depends(get_store),
):
	profile = require_profile(req.user_profile)
	path = require_path(req.career_path)
	uid = (req.user_uid or "").strip() or None
	cache = SkillAnalysisCache.from_document(store.get("skillAnalysis", uid)) if uid else SkillAnalysisCache()
	was_cached = path.title in cache
	logger.info("skill analysis for path %r (cached=%s)", path.title, was_cached)
	analysis = await SkillGapAnalyzer(oracle, cache).analyze(profile, path)
	if uid and not was_cached:
		store.set("skillAnalysis", uid, cache.to_document())
	return analysis.to_document()


@router.get("/{uid}")
def get_cached_analyses(uid: str, store: DocumentStore = Depends(get_store)):
	doc = store.get("skillAnalysis", uid)
	if doc is None:
		raise NotFoundError("No skill analyses cached for this user")
	return SkillAnalysisCache.from_document(doc).to_document()
