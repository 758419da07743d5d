from __future__ import annotations
import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends
from pydantic import Field

from ..dependencies import get_state_machine, get_store
from ..errors import NotFoundError, ValidationError
from ..game import ConversationStateMachine, is_complete, turn_number
from ..schemas import IntakeData, TranscriptEntry, utcnow
from ..store import DocumentStore
from .common import RequestBody, require_transcript, require_uid


router = APIRouter(prefix="/game", tags=["game"])
logger = logging.getLogger(__name__)


class StartRequest(RequestBody):
	user_uid: Optional[str] = Field(default=None, alias="userUid")
	# Falls back to the stored users/{uid} document when omitted
	user_data: Optional[IntakeData] = Field(default=None, alias="userData")


class HistoryRequest(RequestBody):
	user_uid: Optional[str] = Field(default=None, alias="userUid")
	conversation_history: Optional[List[Dict[str, Any]]] = Field(default=None, alias="conversationHistory")


def transcript_document(transcript: List[TranscriptEntry]) -> Dict[str, Any]:
	completed = is_complete(transcript)
	return {
		"conversationHistory": [e.to_document() for e in transcript],
		"completed": completed,
		"turnCount": turn_number(transcript) - 1,
		"completedAt": utcnow().isoformat() if completed else None,
	}


@router.post("/start")
async def start_game(
	req: StartRequest,
	machine: ConversationStateMachine = Depends(get_state_machine),
	store: DocumentStore = Depends(get_store),
):
	uid = require_uid(req.user_uid)
	intake = req.user_data
	if intake is None:
		doc = store.get("users", uid)
		if doc is None:
			raise NotFoundError("User not found")
		intake = IntakeData.model_validate(doc)
	entry = await machine.start(intake)
	return entry.to_document()


@router.post("/continue")
async def continue_game(req: HistoryRequest, machine: ConversationStateMachine = Depends(get_state_machine)):
	require_uid(req.user_uid)
	transcript = require_transcript(req.conversation_history)
	entry = await machine.advance(transcript)
	return entry.to_document()


@router.post("/transcript")
def save_transcript(req: HistoryRequest, store: DocumentStore = Depends(get_store)):
	uid = require_uid(req.user_uid)
	transcript = require_transcript(req.conversation_history)
	if not transcript:
		raise ValidationError("Conversation history must not be empty")
	doc = transcript_document(transcript)
	store.set("gameTranscripts", uid, doc)
	logger.info("saved transcript for %s (%d entries, completed=%s)", uid, len(transcript), doc["completed"])
	return {"ok": True, "completed": doc["completed"]}
