from __future__ import annotations
import logging

from fastapi import APIRouter, Depends

from ..dependencies import get_oracle, get_store
from ..errors import NotFoundError, ValidationError
from ..oracle import OracleClient
from ..profile import ProfileSynthesizer
from ..schemas import TraitProfile, utcnow
from ..store import DocumentStore
from .common import require_transcript, require_uid
from .game import HistoryRequest, transcript_document


router = APIRouter(prefix="/profile", tags=["profile"])
logger = logging.getLogger(__name__)


@router.post("/generate")
async def generate_profile(
	req: HistoryRequest,
	oracle: OracleClient = Depends(get_oracle),
	store: DocumentStore = Depends(get_store),
):
	uid = require_uid(req.user_uid)
	transcript = require_transcript(req.conversation_history)
	if not transcript:
		raise ValidationError("Conversation history must not be empty")
	logger.info("generating profile for user %s", uid)
	profile = await ProfileSynthesizer(oracle).synthesize(transcript)
	store.set("gameTranscripts", uid, transcript_document(transcript))
	store.set(
		"userProfiles",
		uid,
		{"profile": profile.to_document(), "generatedAt": utcnow().isoformat(), "transcriptLength": len(transcript)},
	)
	return profile.to_document()


@router.get("/{uid}")
def get_profile(uid: str, store: DocumentStore = Depends(get_store)):
	doc = store.get("userProfiles", uid)
	if doc is None:
		raise NotFoundError("Profile not found")
	return TraitProfile.model_validate(doc["profile"]).to_document()
