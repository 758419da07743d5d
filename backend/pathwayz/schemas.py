"""
Pipeline data model.

Every oracle response is untrusted: it is only admitted into the pipeline after it
validates against one of the models below. Wire names are camelCase (questionType,
coreMotivators, totalSkills, ...); Python attributes are snake_case.

The ``is_*`` predicates are the shape checks handed to ``OracleClient.invoke``.
"""

from __future__ import annotations
from datetime import datetime, timezone
from typing import Annotated, Any, Dict, List, Literal, Optional

import pydantic
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, StringConstraints, field_validator, model_validator
from pydantic.alias_generators import to_camel


QuestionType = Literal["single-choice", "multi-choice", "finale"]
Label = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

CAREER_PATH_COUNT = 5

# Legacy transcript tags sent by older clients
_ENTRY_TYPE_ALIASES: Dict[str, str] = {"ai": "prompt", "user": "response"}


def utcnow() -> datetime:
	return datetime.now(timezone.utc)


def _option_text(option: Any) -> Any:
	# Options occasionally come back as {"id": "1", "text": "..."}
	if isinstance(option, dict) and "text" in option:
		return option["text"]
	return option


class _CamelModel(BaseModel):
	model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

	def to_document(self) -> Dict[str, Any]:
		"""JSON-safe dict with wire (camelCase) keys."""
		return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class IntakeData(_CamelModel):
	"""Welcome-form data used to personalise the opening scenario."""

	model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

	name: Optional[str] = None
	age: Optional[str] = None
	gender: Optional[str] = None
	academic_status: Optional[str] = Field(
		default=None,
		validation_alias=AliasChoices("academicStatus", "academic_status", "stage"),
		serialization_alias="academicStatus",
	)
	place: Optional[str] = Field(
		default=None,
		validation_alias=AliasChoices("place", "locale"),
		serialization_alias="place",
	)
	language: Optional[str] = None
	email: Optional[str] = None

	@field_validator("age", mode="before")
	@classmethod
	def _age_as_text(cls, v: Any) -> Any:
		if isinstance(v, (int, float)):
			return str(v)
		return v


class PromptEntry(_CamelModel):
	narrative: Label
	question_type: QuestionType
	options: List[Label] = Field(default_factory=list)
	question: Optional[str] = None

	@field_validator("options", mode="before")
	@classmethod
	def _flatten_options(cls, v: Any) -> Any:
		if isinstance(v, list):
			return [_option_text(o) for o in v]
		return v

	@model_validator(mode="after")
	def _options_match_kind(self) -> "PromptEntry":
		if self.question_type == "finale" and self.options:
			raise ValueError("finale turns carry no options")
		if self.question_type != "finale" and not self.options:
			raise ValueError(f"{self.question_type} turns need at least one option")
		return self

	@property
	def is_finale(self) -> bool:
		return self.question_type == "finale"


class TranscriptEntry(_CamelModel):
	type: Literal["prompt", "response"]
	content: str = ""
	question_type: Optional[QuestionType] = None
	options: List[str] = Field(default_factory=list)
	selected_options: List[str] = Field(default_factory=list)
	timestamp: datetime = Field(default_factory=utcnow)

	@model_validator(mode="before")
	@classmethod
	def _accept_legacy_shapes(cls, data: Any) -> Any:
		if not isinstance(data, dict):
			return data
		data = dict(data)
		kind = data.get("type")
		if isinstance(kind, str):
			data["type"] = _ENTRY_TYPE_ALIASES.get(kind.lower(), kind.lower())
		# Prompt entries were sometimes stored with the whole turn object as content
		content = data.get("content")
		if isinstance(content, dict):
			data["content"] = content.get("narrative", "")
			if "questionType" in content:
				data.setdefault("questionType", content["questionType"])
			if "options" in content:
				data.setdefault("options", content["options"])
		for key in ("options", "selectedOptions", "selected_options"):
			if isinstance(data.get(key), list):
				data[key] = [_option_text(o) for o in data[key]]
		return data

	@classmethod
	def from_prompt(cls, entry: PromptEntry) -> "TranscriptEntry":
		return cls(type="prompt", content=entry.narrative, question_type=entry.question_type, options=list(entry.options))

	@classmethod
	def from_response(cls, selected: List[str]) -> "TranscriptEntry":
		return cls(type="response", content=", ".join(selected), selected_options=list(selected))

	@property
	def is_prompt(self) -> bool:
		return self.type == "prompt"

	def answer_text(self) -> str:
		if self.selected_options:
			return ", ".join(self.selected_options)
		return self.content


class TraitProfile(_CamelModel):
	core_motivators: List[Label] = Field(min_length=1)
	problem_solving_style: Label
	preferred_work_environment: Label
	key_aptitudes: List[Label] = Field(min_length=1)
	interests_and_passions: List[Label] = Field(min_length=1)
	personality_summary: Label


REQUIRED_PROFILE_FIELDS = tuple(to_camel(name) for name in TraitProfile.model_fields)


class CareerPath(_CamelModel):
	title: Label
	description: Label


class CareerAdvice(_CamelModel):
	direction: Label
	paths: List[CareerPath] = Field(min_length=CAREER_PATH_COUNT, max_length=CAREER_PATH_COUNT)


class SkillAnalysis(_CamelModel):
	brief: Label
	total_skills: List[Label] = Field(min_length=1)
	skill_gap: List[Label] = Field(min_length=1)


class CachedSkillAnalysis(_CamelModel):
	analysis: SkillAnalysis
	created_at: datetime = Field(default_factory=utcnow)


# ---- Shape checks ----

def _conforms(model: type[BaseModel], data: Any) -> bool:
	try:
		model.model_validate(data)
	except pydantic.ValidationError:
		return False
	return True


def is_prompt_entry(data: Any) -> bool:
	return _conforms(PromptEntry, data)


def is_trait_profile(data: Any) -> bool:
	return _conforms(TraitProfile, data)


def is_career_advice(data: Any) -> bool:
	return _conforms(CareerAdvice, data)


def is_skill_analysis(data: Any) -> bool:
	return _conforms(SkillAnalysis, data)
