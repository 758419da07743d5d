from __future__ import annotations
import logging
from typing import Any, List, Sequence

from .errors import OracleError, ValidationError
from .fallbacks import fallback_for
from .gemini_client import CONVERSATION_CONFIG
from .oracle import OracleClient
from .prompts import build_continue_prompt, build_start_prompt
from .schemas import IntakeData, PromptEntry, TranscriptEntry, is_prompt_entry
from .script import FINAL_TURN, FIRST_TURN, turn_definition

logger = logging.getLogger(__name__)


def turn_number(transcript: Sequence[TranscriptEntry]) -> int:
	"""Number of the turn about to be produced: prompt entries so far + 1."""
	return sum(1 for entry in transcript if entry.is_prompt) + 1


def format_history(transcript: Sequence[TranscriptEntry]) -> str:
	lines: List[str] = []
	for entry in transcript:
		if entry.is_prompt:
			lines.append(f"AI: {entry.content}")
		else:
			lines.append(f"USER: {entry.answer_text()}")
	return "\n\n".join(lines)


def is_complete(transcript: Sequence[TranscriptEntry]) -> bool:
	return any(entry.is_prompt and entry.question_type == "finale" for entry in transcript)


def validate_transcript(transcript: Sequence[TranscriptEntry]) -> int:
	"""Check a caller-supplied transcript can be advanced; returns the next turn number."""
	if not transcript:
		raise ValidationError("Conversation history must not be empty")
	if not transcript[0].is_prompt:
		raise ValidationError("Conversation history must start with a game prompt")
	if transcript[-1].is_prompt:
		raise ValidationError("The last game prompt has not been answered yet")
	if is_complete(transcript):
		raise ValidationError("The adventure is already complete")
	turn = turn_number(transcript)
	if turn > FINAL_TURN:
		raise ValidationError(f"Conversation history has more than {FINAL_TURN} turns")
	return turn


def _expects(question_type: str):
	def check(data: Any) -> bool:
		return is_prompt_entry(data) and data.get("questionType") == question_type
	return check


class ConversationStateMachine:
	"""Drives the fixed nine-turn script; always hands back a playable turn."""

	def __init__(self, oracle: OracleClient, *, script_via_oracle: bool = True) -> None:
		self.oracle = oracle
		self.script_via_oracle = script_via_oracle

	async def start(self, intake: IntakeData) -> PromptEntry:
		expected = turn_definition(FIRST_TURN)
		prompt = build_start_prompt(intake)
		return await self._resolve(FIRST_TURN, prompt, expected.question_type)

	async def advance(self, transcript: Sequence[TranscriptEntry]) -> PromptEntry:
		turn = validate_transcript(transcript)
		expected = turn_definition(turn)
		if not self.script_via_oracle:
			logger.info("turn %d: served from script", turn)
			return expected.render()
		prompt = build_continue_prompt(format_history(transcript), turn)
		return await self._resolve(turn, prompt, expected.question_type)

	async def _resolve(self, turn: int, prompt: str, question_type: str) -> PromptEntry:
		try:
			data = await self.oracle.invoke(
				prompt,
				_expects(question_type),
				config=CONVERSATION_CONFIG,
				label=f"turn {turn}",
			)
		except OracleError as err:
			logger.warning("turn %d: using fallback (%s)", turn, err.error)
			return fallback_for(turn)
		return PromptEntry.model_validate(data)
