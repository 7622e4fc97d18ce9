from pydantic_settings import BaseSettings

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36"
)

# Rentals inside a bounding box around College Avenue campus
DEFAULT_LISTING_SEARCH_URL = (
    "https://www.zillow.com/new-brunswick-nj/rentals/?searchQueryState="
    "%7B%22pagination%22%3A%7B%7D%2C%22mapBounds%22%3A%7B%22west%22%3A-74.47"
    "%2C%22east%22%3A-74.43%2C%22south%22%3A40.48%2C%22north%22%3A40.50%7D%7D"
)


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    log_level: str = "INFO"
    browser_headless: bool = True
    navigation_timeout_ms: int = 30000
    user_agent: str = DEFAULT_USER_AGENT
    listing_search_url: str = DEFAULT_LISTING_SEARCH_URL
    scrape_on_startup: bool = True
    scrape_schedule_enabled: bool = True
    scrape_hour: int = 6
    scrape_minute: int = 0
    scrape_timezone: str = "America/New_York"
    cors_origins: list[str] = ["*"]
