from typing import Optional

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    # ════════════════════════════════════════
    # LLM
    # ════════════════════════════════════════
    llm_model: str = Field(
        default="llama-3.1-8b-instant",
        description="Groq model used to answer allowed questions"
    )
    llm_max_tokens: int = Field(
        default=1024,
        description="Maximum tokens generated per answer"
    )
    llm_temperature: float = Field(
        default=0.7,
        description="Sampling temperature for generation"
    )

    # ════════════════════════════════════════
    # API Configuration
    # ════════════════════════════════════════
    groq_api_key: str = Field(
        default="",
        description="Groq API key for LLM access (checked lazily, on first generation)"
    )
    cors_origins: str = Field(
        default="*",
        description="CORS origins"
    )
    environment: str = Field(
        default="production",
        description="Deployment environment; 'development' exposes error details in 500 responses"
    )

    # ════════════════════════════════════════
    # Knowledge Base
    # ════════════════════════════════════════
    knowledge_base_path: Optional[str] = Field(
        default=None,
        description="Optional markdown file replacing the built-in knowledge base"
    )

    # ════════════════════════════════════════
    # Debug and Logging
    # ════════════════════════════════════════
    debug_mode: bool = Field(
        default=False,
        description="Enable debug logging"
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)"
    )
    log_dir: Optional[str] = Field(
        default=None,
        description="Directory for log files; console only when unset"
    )

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

    @property
    def cors_origins_list(self) -> list:
        """Convert comma-separated CORS origins to list"""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    @property
    def is_development(self) -> bool:
        return self.environment.strip().lower() == "development"


settings = Settings()
