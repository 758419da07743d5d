from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

class Settings(BaseSettings):
	gemini_api_key: str | None = Field(default=None, validation_alias="GEMINI_API_KEY")
	# Provider can be "vertex" (Vertex AI Express) or "ai_studio" (Generative Language API)
	gemini_provider: str = Field(default="ai_studio", validation_alias="GEMINI_PROVIDER")
	gemini_model: str = Field(default="gemini-2.5-flash-lite", validation_alias="GEMINI_MODEL")
	# Vertex configuration
	vertex_region: str = Field(default="us-central1", validation_alias="GEMINI_VERTEX_REGION")
	vertex_project: str | None = Field(default=None, validation_alias="GEMINI_VERTEX_PROJECT")
	# Per-call HTTP timeout; the only bound on an in-flight oracle call
	gemini_timeout_seconds: float = Field(default=30.0, validation_alias="GEMINI_TIMEOUT_SECONDS")

	# Career path generation retry policy (2s, 4s, 8s between attempts)
	career_max_attempts: int = Field(default=3, ge=1, validation_alias="CAREER_MAX_ATTEMPTS")
	career_initial_backoff_seconds: float = Field(default=2.0, ge=0, validation_alias="CAREER_INITIAL_BACKOFF_SECONDS")

	# When false, turns 2-9 are served from the fixed script without an oracle round-trip
	script_via_oracle: bool = Field(default=True, validation_alias="SCRIPT_VIA_ORACLE")

	log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

	# Database
	database_url: str | None = Field(default=None, validation_alias="DATABASE_URL")

	# pydantic-settings v2 style config
	model_config = SettingsConfigDict(env_file=".env", extra="ignore")

settings = Settings()
