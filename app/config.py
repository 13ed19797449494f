from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    access_token: str = ""  # empty disables the token check
    log_level: str = "INFO"
    browser_headless: bool = True
    fetch_timeout_ms: int = 45000
    user_agent: str = (
        "Mozilla/5.0 (Linux; Android 10; K) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/123.0.0.0 Mobile Safari/537.36"
    )
    accept_language: str = "en-US,en;q=0.9"
    cache_control: str = "s-maxage=180, stale-while-revalidate=600"
