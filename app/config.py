from pydantic_settings import BaseSettings

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36"
)


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    log_level: str = "INFO"
    user_agent: str = DEFAULT_USER_AGENT
    fetch_timeout: float = 10.0
    max_redirects: int = 5
    window_size: int = 3
    cors_origins: list[str] = ["*"]
