"""
Oracle client: turns free-form Gemini text into trusted JSON.

One attempt per call. Retrying, falling back or surfacing the error is the
caller's decision; every failure is raised as an ``OracleError`` subclass.
"""

from __future__ import annotations
import json
import logging
import re
from typing import Any, Callable, Optional

from .errors import MalformedOutputError, OracleError, SchemaError
from .gemini_client import CONVERSATION_CONFIG, GeminiClient, GenerationConfig

logger = logging.getLogger(__name__)

ShapeCheck = Callable[[Any], bool]

_FENCE_RE = re.compile(r"```(?:json)?[ \t]*\n?|\n?```", re.IGNORECASE)


def strip_code_fences(text: str) -> str:
	return _FENCE_RE.sub("", text).strip()


def parse_json_text(text: str) -> Any:
	cleaned = strip_code_fences(text)
	try:
		return json.loads(cleaned)
	except ValueError:
		pass
	# Chatty models sometimes wrap the object in prose
	first = cleaned.find("{")
	last = cleaned.rfind("}")
	if first != -1 and last > first:
		try:
			return json.loads(cleaned[first : last + 1])
		except ValueError:
			pass
	raise MalformedOutputError(f"Oracle did not return valid JSON: {cleaned[:200]!r}")


class OracleClient:
	def __init__(self, gemini: GeminiClient) -> None:
		self._gemini = gemini

	async def invoke(
		self,
		prompt: str,
		check: ShapeCheck,
		*,
		config: GenerationConfig = CONVERSATION_CONFIG,
		label: str = "oracle",
		attempt: Optional[int] = None,
	) -> Any:
		where = f"{label} attempt {attempt}" if attempt is not None else label
		logger.info("%s: calling oracle (prompt %d chars)", where, len(prompt))
		try:
			text = await self._gemini.generate(prompt, generation_config=config)
			data = parse_json_text(text)
			if not check(data):
				raise SchemaError(f"{label}: response failed shape check")
		except OracleError as err:
			logger.warning("%s: failed: %s: %s", where, err.error, err.message)
			raise
		logger.info("%s: ok", where)
		return data

	async def aclose(self) -> None:
		await self._gemini.aclose()
