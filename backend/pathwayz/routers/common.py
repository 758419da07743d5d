from __future__ import annotations
from typing import Any, Dict, List, Optional

import pydantic
from pydantic import BaseModel, ConfigDict

from ..errors import ValidationError
from ..schemas import REQUIRED_PROFILE_FIELDS, CareerPath, TraitProfile, TranscriptEntry


class RequestBody(BaseModel):
	# Bodies are camelCase on the wire (userUid, conversationHistory, ...)
	model_config = ConfigDict(populate_by_name=True)


def _first_error(err: pydantic.ValidationError) -> str:
	e = err.errors()[0]
	where = ".".join(str(p) for p in e.get("loc", ())) or "value"
	return f"{where}: {e.get('msg', 'invalid')}"


def require_uid(uid: Optional[str]) -> str:
	uid = (uid or "").strip()
	if not uid:
		raise ValidationError("User UID is required")
	return uid


def require_transcript(raw: Optional[List[Dict[str, Any]]]) -> List[TranscriptEntry]:
	if raw is None:
		raise ValidationError("Conversation history is required and must be an array")
	entries: List[TranscriptEntry] = []
	for i, item in enumerate(raw):
		try:
			entries.append(TranscriptEntry.model_validate(item))
		except pydantic.ValidationError as err:
			raise ValidationError(f"Invalid conversation entry {i}: {_first_error(err)}") from err
	return entries


def require_profile(raw: Optional[Dict[str, Any]]) -> TraitProfile:
	if not raw:
		raise ValidationError("User profile is required")
	for field in REQUIRED_PROFILE_FIELDS:
		if not raw.get(field):
			raise ValidationError(f"Missing required profile field: {field}")
	try:
		return TraitProfile.model_validate(raw)
	except pydantic.ValidationError as err:
		raise ValidationError(f"Invalid user profile: {_first_error(err)}") from err


def require_path(raw: Optional[Dict[str, Any]]) -> CareerPath:
	if not raw:
		raise ValidationError("Career path is required")
	try:
		return CareerPath.model_validate(raw)
	except pydantic.ValidationError as err:
		raise ValidationError(f"Invalid career path: {_first_error(err)}") from err
