## Application settings configuration

from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    env: str = "dev"
    log_level: str = "INFO"
    database_url: str = "sqlite:///./learnpath.db"
    cors_origins: list[str] = ["*"]

    session_absolute_days: int = 7
    session_idle_minutes: int = 60
    reset_code_ttl_minutes: int = 60

    # LLM provider: gemini | groq | ollama
    llm_provider: str = "gemini"
    llm_timeout_seconds: float = 120

    gemini_api_key: str = ""
    gemini_model: str = "gemini-1.5-flash"

    groq_api_key: str = ""
    groq_base_url: str = "https://api.groq.com/openai/v1"
    groq_model: str = "llama-3.1-8b-instant"

    ollama_base_url: str = "http://localhost:11434/v1"
    ollama_model: str = "llama3.1"

    # Outbound mail (password reset codes)
    smtp_host: str = ""
    smtp_port: int = 587
    smtp_username: str = ""
    smtp_password: str = ""
    mail_from: str = ""


settings = Settings()
