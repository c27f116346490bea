"""
Configuration module for the Portfolio Chat Relay application.
Handles environment variables and application settings.
"""
import os
from dotenv import load_dotenv

load_dotenv()


class ConfigurationError(RuntimeError):
    """Raised when a required setting (e.g. the completion API key) is missing."""


class Config:
    """Application configuration class."""

    # API Keys
    GROQ_API_KEY: str = os.getenv("GROQ_API_KEY", "")

    # Completion API Configuration
    GROQ_API_URL: str = os.getenv("GROQ_API_URL", "https://api.groq.com/openai/v1")
    GROQ_MODEL: str = os.getenv("GROQ_MODEL", "llama-3.3-70b-versatile")
    TEMPERATURE: float = 0.7
    MAX_TOKENS: int = 1024

    # Application Settings
    APP_TITLE: str = "Portfolio Chat Relay"
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "3000"))
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", os.getenv("NODE_ENV", "development"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Persona
    PORTFOLIO_OWNER_NAME: str = os.getenv("PORTFOLIO_OWNER_NAME", "Roja Pinnamraju")
    PORTFOLIO_OWNER_TITLE: str = os.getenv("PORTFOLIO_OWNER_TITLE", "Software Engineer and AI enthusiast")

    # Site being harvested
    PORTFOLIO_URL: str = os.getenv("PORTFOLIO_URL", "")
    DEV_SITE_URL: str = os.getenv("DEV_SITE_URL", "http://localhost:5173")
    DEPLOYED_SITE_URL: str = os.getenv("DEPLOYED_SITE_URL", "https://rojapinnamraju-portfolio.netlify.app")
    PORTFOLIO_PAGES: tuple = ("about", "projects", "contact")

    # Harvesting
    HARVEST_MODE: str = os.getenv("HARVEST_MODE", "browser")
    SERVERLESS_HARVEST_MODE: str = os.getenv("SERVERLESS_HARVEST_MODE", "text")
    ROOT_SELECTOR: str = "#root"

    # Timeouts (in seconds)
    NAVIGATION_TIMEOUT: float = float(os.getenv("NAVIGATION_TIMEOUT", "30"))
    WEB_SCRAPING_TIMEOUT: float = 30.0
    COMPLETION_TIMEOUT: float = 60.0

    # Connection pooling
    MAX_CONCURRENT_SCRAPES: int = 5
    MAX_REDIRECTS: int = 5

    # Harvested content cache (0 disables it, every chat turn re-scrapes)
    CONTENT_CACHE_TTL: float = float(os.getenv("CONTENT_CACHE_TTL", "0"))

    @classmethod
    def is_production(cls) -> bool:
        """True when running against the deployed site."""
        return cls.ENVIRONMENT.lower() == "production"

    @classmethod
    def get_base_url(cls) -> str:
        """
        Get the origin the harvester scrapes.
        An explicit PORTFOLIO_URL wins; otherwise the environment decides
        between the local dev server and the deployed site.
        """
        if cls.PORTFOLIO_URL:
            return cls.PORTFOLIO_URL.rstrip("/")
        if cls.is_production():
            return cls.DEPLOYED_SITE_URL.rstrip("/")
        return cls.DEV_SITE_URL.rstrip("/")

    @classmethod
    def validate(cls) -> None:
        """Validate configuration and print warnings for missing API keys."""
        if not cls.GROQ_API_KEY:
            print("   WARNING: GROQ_API_KEY not found in .env file")
            print("   Chat requests will fail until it is set. Get a key from: https://console.groq.com/keys")

        if cls.HARVEST_MODE not in ("browser", "text"):
            print(f"   WARNING: unknown HARVEST_MODE '{cls.HARVEST_MODE}', expected 'browser' or 'text'")


Config.validate()
