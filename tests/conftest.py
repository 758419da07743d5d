"""
Shared fixtures.

The Gemini transport is replaced by ``FakeGemini``: it records every prompt and
answers either from a queue of canned replies or from a responder function, so
the real ``OracleClient`` (fence stripping, JSON parsing, shape checks) is still
exercised. ``calls`` is the oracle call counter the caching tests rely on.
"""

import json
import re
from typing import Any, Callable, List, Optional

import pytest
from fastapi.testclient import TestClient

from pathwayz.careers import CareerPathGenerator
from pathwayz.db import create_tables, get_db, make_engine, make_sessionmaker
from pathwayz.dependencies import get_career_generator, get_oracle, get_state_machine
from pathwayz.game import ConversationStateMachine
from pathwayz.gemini_client import CONVERSATION_CONFIG
from pathwayz.oracle import OracleClient
from pathwayz.schemas import IntakeData
from pathwayz.script import turn_definition


SAMPLE_PROFILE = {
    "coreMotivators": ["Intellectual Challenge", "Building Things That Last"],
    "problemSolvingStyle": "Analytical & Methodical",
    "preferredWorkEnvironment": "Team-Oriented & Communicative",
    "keyAptitudes": ["Pattern Recognition", "Logical Reasoning", "Hands-on Building"],
    "interestsAndPassions": ["Technology & Gadgets", "Science"],
    "personalitySummary": "You are a curious builder who enjoys cracking puzzles and turning ideas into working things.",
}

SAMPLE_ADVICE = {
    "direction": "Engineer the tools that help India's next billion users learn and build.",
    "paths": [
        {"title": "Vernacular AI Tutor Designer", "description": "Designs regional-language learning agents riding NEP 2020."},
        {"title": "Agritech Robotics Integrator", "description": "Builds field robots for small farms under Digital Agriculture missions."},
        {"title": "Grid-Edge Energy Analyst", "description": "Models rooftop solar networks as the National Solar Mission scales."},
        {"title": "Public Health Data Storyteller", "description": "Turns ABDM health records into insight for district planners."},
        {"title": "Semiconductor Test Strategist", "description": "Plans validation for fabs coming up under the India Semiconductor Mission."},
    ],
}

SAMPLE_SKILLS = {
    "brief": "Vernacular AI tutor designers build learning agents that teach in a student's own language.",
    "totalSkills": ["Instructional design", "Conversational AI", "Learning analytics", "Regional language fluency"],
    "skillGap": [
        "Systems Thinking: your pattern recognition is strong, but tutors must balance pedagogy, data and culture at once.",
        "Empathetic Communication: your analytical style needs a partner skill for reading how learners feel.",
    ],
}


class FakeGemini:
    """Drop-in for GeminiClient.generate."""

    def __init__(self, replies: Optional[List[Any]] = None, responder: Optional[Callable[[str], Any]] = None):
        self.replies = list(replies or [])
        self.responder = responder
        self.calls = 0
        self.prompts: List[str] = []
        self.configs: List[Any] = []
        self.closed = False

    async def generate(self, prompt: str, *, generation_config=CONVERSATION_CONFIG) -> str:
        self.calls += 1
        self.prompts.append(prompt)
        self.configs.append(generation_config)
        reply = self.responder(prompt) if self.responder is not None else self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        if not isinstance(reply, str):
            reply = json.dumps(reply)
        return reply

    async def aclose(self) -> None:
        self.closed = True


def scripted_reply(prompt: str) -> str:
    """Answer every pipeline prompt the way a well-behaved model would."""
    if "USER DATA FROM WELCOME FORM" in prompt:
        raw = prompt.split("USER DATA FROM WELCOME FORM:\n", 1)[1].split("\n\nNow start", 1)[0]
        entry = turn_definition(1).render(IntakeData.model_validate(json.loads(raw)))
        return "```json\n" + json.dumps(entry.to_document()) + "\n```"
    match = re.search(r"CURRENT TURN: (\d+)", prompt)
    if match:
        return json.dumps(turn_definition(int(match.group(1))).render().to_document())
    if "GAME TRANSCRIPT TO ANALYZE" in prompt:
        return "```json\n" + json.dumps(SAMPLE_PROFILE) + "\n```"
    if "USER PROFILE TO ANALYZE" in prompt:
        return json.dumps(SAMPLE_ADVICE)
    if "INPUT DATA:" in prompt:
        return json.dumps(SAMPLE_SKILLS)
    raise AssertionError(f"unexpected prompt: {prompt[:120]!r}")


async def no_sleep(seconds: float) -> None:
    return None


@pytest.fixture
def sample_profile():
    return json.loads(json.dumps(SAMPLE_PROFILE))


@pytest.fixture
def sample_advice():
    return json.loads(json.dumps(SAMPLE_ADVICE))


@pytest.fixture
def sample_skills():
    return json.loads(json.dumps(SAMPLE_SKILLS))


@pytest.fixture
def make_oracle():
    """Build (OracleClient, FakeGemini) from canned replies or a responder."""

    def _make(replies=None, responder=None):
        gemini = FakeGemini(replies=replies, responder=responder)
        return OracleClient(gemini), gemini

    return _make


@pytest.fixture
def scripted_gemini():
    return FakeGemini(responder=scripted_reply)


@pytest.fixture
def db_session():
    engine = make_engine("sqlite://")
    create_tables(engine)
    session = make_sessionmaker(engine)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def api(db_session, scripted_gemini):
    """TestClient wired to an in-memory database and the scripted fake model."""
    from pathwayz.main import app

    oracle = OracleClient(scripted_gemini)

    def _db():
        yield db_session

    app.dependency_overrides[get_db] = _db
    app.dependency_overrides[get_oracle] = lambda: oracle
    app.dependency_overrides[get_state_machine] = lambda: ConversationStateMachine(oracle)
    app.dependency_overrides[get_career_generator] = lambda: CareerPathGenerator(oracle, sleep=no_sleep)
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
