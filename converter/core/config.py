from functools import lru_cache
from typing import List, Optional

from pydantic import AnyHttpUrl
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment with defaults.

    Environment variable mapping follows pydantic's rules (e.g., APP_NAME, DEBUG,
    EXCHANGE_API_KEY, EXCHANGE_API_BASE_URL, EXCHANGE_RATE_PROVIDER).
    """

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Basic app metadata
    app_name: str = "Currency Converter"
    debug: bool = False
    version: str = "0.1.0"

    # Exchange rate provider
    exchange_api_base_url: AnyHttpUrl = "https://v6.exchangerate-api.com/v6"  # type: ignore[assignment]
    exchange_api_key: str = "YOUR_EXCHANGE_RATE_API_KEY"
    # None leaves the socket default in place (no timeout)
    http_timeout_seconds: Optional[float] = None

    # Allowed: 'exchangerate-api' (live HTTP), 'static' (built-in fixed rates)
    exchange_rate_provider: str = "exchangerate-api"

    # Dropdown defaults
    default_from_currency: str = "USD"
    default_to_currencies: List[str] = ["NGN", "EUR"]

    def init_post_load(self) -> None:
        """Normalize and validate derived fields."""
        allowed = {"exchangerate-api", "static"}
        if self.exchange_rate_provider not in allowed:
            raise ValueError(
                f"Unsupported exchange_rate_provider '{self.exchange_rate_provider}'. Allowed: {allowed}"
            )
        if self.http_timeout_seconds is not None and self.http_timeout_seconds <= 0:
            raise ValueError("http_timeout_seconds must be positive when set")
        self.default_from_currency = self.default_from_currency.upper()
        self.default_to_currencies = [c.upper() for c in self.default_to_currencies]

    @property
    def api_root(self) -> str:
        """Provider base URL with the key appended, without trailing slash."""
        return f"{str(self.exchange_api_base_url).rstrip('/')}/{self.exchange_api_key}"


@lru_cache
def get_settings() -> Settings:
    settings = Settings()
    settings.init_post_load()
    return settings
