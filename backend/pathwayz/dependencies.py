from __future__ import annotations
from typing import AsyncIterator

from fastapi import Depends
from sqlalchemy.orm import Session

from .careers import CareerPathGenerator
from .db import get_db
from .game import ConversationStateMachine
from .gemini_client import GeminiClient
from .oracle import OracleClient
from .settings import settings
from .store import DocumentStore


async def get_oracle() -> AsyncIterator[OracleClient]:
	oracle = OracleClient(GeminiClient())
	try:
		yield oracle
	finally:
		await oracle.aclose()


def get_store(db: Session = Depends(get_db)) -> DocumentStore:
	return DocumentStore(db)


def get_state_machine(oracle: OracleClient = Depends(get_oracle)) -> ConversationStateMachine:
	return ConversationStateMachine(oracle, script_via_oracle=settings.script_via_oracle)


def get_career_generator(oracle: OracleClient = Depends(get_oracle)) -> CareerPathGenerator:
	return CareerPathGenerator(
		oracle,
		max_attempts=settings.career_max_attempts,
		initial_backoff=settings.career_initial_backoff_seconds,
	)
