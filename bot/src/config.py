from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # LLM provider settings — must be set in .env
    LLM_PROVIDER: str = "openai"  # openai | anthropic | gemini | mistral
    LLM_API_KEY: str
    LLM_MODEL: str = ""  # empty = provider default
    LLM_BASE_URL: str | None = None  # OpenAI-compatible endpoint override
    LLM_TIMEOUT_SECONDS: float = 30.0
    LLM_TEMPERATURE: float = 0.7
    LLM_MAX_TOKENS: int = 1024

    DATABASE_URL: str
    ASSISTANT_NAME: str = "ChatGPT"
    HISTORY_WINDOW_SIZE: int = 50
    MIN_MESSAGE_LENGTH: int = 10

    API_SECRET: str | None = None  # unset = room routes are open
    CORS_ORIGINS: list[str] = ["*"]

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
