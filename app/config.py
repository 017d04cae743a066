from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    database_url: str = "sqlite+aiosqlite:///./taskdb.sqlite"
    app_env: str = "dev"
    log_level: str = "INFO"

    # Remote extraction is disabled while the key is empty
    openrouter_api_key: str = ""
    openrouter_endpoint: str = "https://openrouter.ai/api/v1/chat/completions"
    openrouter_model: str = "tokyotech-llm/llama-3.1-swallow-8b-instruct-v0.3"
    openrouter_referer: str = "http://localhost:8000"
    openrouter_title: str = "Task Manager"
    extraction_timeout: float = 10.0

    model_config = SettingsConfigDict(env_file=".env", env_prefix="", case_sensitive=False)


settings = Settings()
