from __future__ import annotations
import asyncio
import logging
from typing import Awaitable, Callable

from .errors import OracleError
from .fallbacks import FALLBACK_CAREER_ADVICE
from .gemini_client import ADVISORY_CONFIG
from .oracle import OracleClient
from .prompts import build_career_prompt
from .schemas import CareerAdvice, TraitProfile, is_career_advice

logger = logging.getLogger(__name__)

Sleep = Callable[[float], Awaitable[None]]


def backoff_delay(attempt: int, initial: float = 2.0) -> float:
	"""Wait after failed attempt N (1-based): initial, 2*initial, 4*initial, ..."""
	return initial * 2 ** (attempt - 1)


class CareerPathGenerator:
	"""Direction plus exactly five invented paths. Never raises oracle errors."""

	def __init__(
		self,
		oracle: OracleClient,
		*,
		max_attempts: int = 3,
		initial_backoff: float = 2.0,
		sleep: Sleep = asyncio.sleep,
	) -> None:
		self.oracle = oracle
		self.max_attempts = max_attempts
		self.initial_backoff = initial_backoff
		self._sleep = sleep

	async def generate(self, profile: TraitProfile) -> CareerAdvice:
		prompt = build_career_prompt(profile)
		for attempt in range(1, self.max_attempts + 1):
			try:
				data = await self.oracle.invoke(
					prompt,
					is_career_advice,
					config=ADVISORY_CONFIG,
					label="career advice",
					attempt=attempt,
				)
				return CareerAdvice.model_validate(data)
			except OracleError as err:
				logger.warning("career advice attempt %d/%d failed: %s", attempt, self.max_attempts, err.message)
			if attempt < self.max_attempts:
				delay = backoff_delay(attempt, self.initial_backoff)
				logger.info("career advice: waiting %.1fs before retry", delay)
				await self._sleep(delay)
		logger.error("career advice: all %d attempts failed, using fallback", self.max_attempts)
		return FALLBACK_CAREER_ADVICE.model_copy(deep=True)
