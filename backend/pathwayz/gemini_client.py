from __future__ import annotations
import httpx
from dataclasses import dataclass
from typing import Any, Dict, Optional
from .errors import EmptyOutputError, TransportError
from .settings import settings


@dataclass(frozen=True)
class GenerationConfig:
	temperature: float
	top_k: int
	top_p: float
	max_output_tokens: int

	def to_payload(self) -> Dict[str, Any]:
		return {
			"temperature": self.temperature,
			"topK": self.top_k,
			"topP": self.top_p,
			"maxOutputTokens": self.max_output_tokens,
		}


# Turn generation and profile synthesis
CONVERSATION_CONFIG = GenerationConfig(temperature=0.7, top_k=40, top_p=0.95, max_output_tokens=1000)
# Career paths and skill analysis
ADVISORY_CONFIG = GenerationConfig(temperature=0.8, top_k=40, top_p=0.95, max_output_tokens=2000)


class GeminiClient:
	"""One generateContent request per call; no retries, no fallback provider."""

	def __init__(
		self,
		api_key: Optional[str] = None,
		*,
		base_url: Optional[str] = None,
		model: Optional[str] = None,
		transport: Optional[httpx.AsyncBaseTransport] = None,
	) -> None:
		self.api_key = api_key or settings.gemini_api_key
		self.model = model or settings.gemini_model
		self.provider = settings.gemini_provider
		if self.provider == "vertex":
			region = settings.vertex_region
			project = settings.vertex_project or "placeholder-project"
			# Vertex AI Generative REST endpoint (API key via header)
			self.base_url = base_url or (
				f"https://{region}-aiplatform.googleapis.com/v1/projects/{project}/locations/{region}/publishers/google/models/{self.model}:generateContent"
			)
			self._auth_in_query = False
		else:
			# Google AI Studio (Generative Language API)
			self.base_url = base_url or f"https://generativelanguage.googleapis.com/v1beta/models/{self.model}:generateContent"
			self._auth_in_query = True
		self._client = httpx.AsyncClient(timeout=settings.gemini_timeout_seconds, transport=transport)

	@property
	def configured(self) -> bool:
		return bool(self.api_key)

	async def generate(self, prompt: str, *, generation_config: GenerationConfig = CONVERSATION_CONFIG) -> str:
		if not self.api_key:
			raise TransportError("GEMINI_API_KEY is not configured")
		payload: Dict[str, Any] = {
			"contents": [{"parts": [{"text": prompt}]}],
			"generationConfig": generation_config.to_payload(),
		}
		params: Dict[str, Any] = {}
		headers: Dict[str, str] = {}
		if self._auth_in_query:
			params["key"] = self.api_key
		else:
			headers["x-goog-api-key"] = self.api_key
		try:
			r = await self._client.post(self.base_url, params=params, headers=headers, json=payload)
			r.raise_for_status()
		except httpx.HTTPStatusError as http_err:
			status = http_err.response.status_code
			raise TransportError(f"Gemini API error: {status}. Response: {http_err.response.text[:500]}") from http_err
		except httpx.RequestError as net_err:
			raise TransportError(f"Gemini request failed: {net_err!r}") from net_err
		try:
			data = r.json()
		except ValueError as err:
			raise TransportError(f"Unexpected Gemini response: {r.text[:500]}") from err
		text = _first_candidate_text(data)
		if not text or not text.strip():
			raise EmptyOutputError("No content generated from Gemini API")
		return text

	async def aclose(self) -> None:
		await self._client.aclose()


def _first_candidate_text(data: Any) -> Optional[str]:
	try:
		parts = data["candidates"][0]["content"]["parts"]
	except (KeyError, IndexError, TypeError):
		return None
	if not isinstance(parts, list):
		return None
	# Parts without string text (null, function calls, inline data) carry nothing to parse
	texts = [p["text"] for p in parts if isinstance(p, dict) and isinstance(p.get("text"), str)]
	return "".join(texts) or None
