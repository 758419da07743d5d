from __future__ import annotations
import logging
from typing import Sequence

from .errors import OracleError
from .fallbacks import FALLBACK_PROFILE
from .gemini_client import CONVERSATION_CONFIG
from .oracle import OracleClient
from .prompts import build_profile_prompt
from .schemas import TraitProfile, TranscriptEntry, is_trait_profile

logger = logging.getLogger(__name__)


def format_transcript(transcript: Sequence[TranscriptEntry]) -> str:
	return "\n\n".join(
		f"GAME: {entry.content}" if entry.is_prompt else f"USER CHOICE: {entry.answer_text()}"
		for entry in transcript
	)


class ProfileSynthesizer:
	def __init__(self, oracle: OracleClient) -> None:
		self.oracle = oracle

	async def synthesize(self, transcript: Sequence[TranscriptEntry]) -> TraitProfile:
		transcript_text = format_transcript(transcript)
		logger.info("profile: transcript of %d entries, %d chars", len(transcript), len(transcript_text))
		try:
			data = await self.oracle.invoke(
				build_profile_prompt(transcript_text),
				is_trait_profile,
				config=CONVERSATION_CONFIG,
				label="profile",
			)
		except OracleError as err:
			logger.warning("profile: using fallback profile (%s)", err.error)
			return FALLBACK_PROFILE.model_copy(deep=True)
		return TraitProfile.model_validate(data)
