from __future__ import annotations
import logging
from typing import Any, Dict, Iterator, Optional

from .gemini_client import ADVISORY_CONFIG
from .oracle import OracleClient
from .prompts import build_skills_prompt
from .schemas import CachedSkillAnalysis, CareerPath, SkillAnalysis, TraitProfile, is_skill_analysis

logger = logging.getLogger(__name__)

TOTAL_SKILLS_RANGE = (3, 5)
SKILL_GAP_SIZE = 2


class SkillAnalysisCache:
	"""Per-user map of career path title -> analysis. Additive only.

	The store document at ``skillAnalysis/{uid}`` is the source of truth; this
	object is loaded from it and written back by the caller.
	"""

	def __init__(self, entries: Optional[Dict[str, CachedSkillAnalysis]] = None) -> None:
		self._entries: Dict[str, CachedSkillAnalysis] = dict(entries or {})

	@classmethod
	def from_document(cls, document: Optional[Dict[str, Any]]) -> "SkillAnalysisCache":
		entries: Dict[str, CachedSkillAnalysis] = {}
		for title, raw in (document or {}).items():
			entries[title] = CachedSkillAnalysis.model_validate(raw)
		return cls(entries)

	def to_document(self) -> Dict[str, Any]:
		return {title: cached.to_document() for title, cached in self._entries.items()}

	def get(self, title: str) -> Optional[SkillAnalysis]:
		cached = self._entries.get(title)
		return cached.analysis if cached is not None else None

	def put(self, title: str, analysis: SkillAnalysis) -> CachedSkillAnalysis:
		# Re-inserting a known title keeps the first entry
		if title not in self._entries:
			self._entries[title] = CachedSkillAnalysis(analysis=analysis)
		return self._entries[title]

	def __contains__(self, title: object) -> bool:
		return title in self._entries

	def __iter__(self) -> Iterator[str]:
		return iter(self._entries)

	def __len__(self) -> int:
		return len(self._entries)


class SkillGapAnalyzer:
	"""Cache-first skill breakdown for one chosen path.

	Oracle failures propagate: a made-up skill gap is worse than an error.
	"""

	def __init__(self, oracle: OracleClient, cache: Optional[SkillAnalysisCache] = None) -> None:
		self.oracle = oracle
		self.cache = cache if cache is not None else SkillAnalysisCache()

	async def analyze(self, profile: TraitProfile, path: CareerPath) -> SkillAnalysis:
		cached = self.cache.get(path.title)
		if cached is not None:
			logger.info("skill analysis: cache hit for %r", path.title)
			return cached
		data = await self.oracle.invoke(
			build_skills_prompt(profile, path),
			is_skill_analysis,
			config=ADVISORY_CONFIG,
			label="skill analysis",
		)
		analysis = SkillAnalysis.model_validate(data)
		low, high = TOTAL_SKILLS_RANGE
		if not low <= len(analysis.total_skills) <= high or len(analysis.skill_gap) != SKILL_GAP_SIZE:
			logger.warning(
				"skill analysis for %r: %d total skills, %d gap skills",
				path.title,
				len(analysis.total_skills),
				len(analysis.skill_gap),
			)
		self.cache.put(path.title, analysis)
		return analysis
