# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Centralised settings — read from env vars once."""
import os


def _datacenter(api_key: str) -> str:
    # MailChimp API keys end with "-<dc>", e.g. "abc123-us6"
    if "-" in api_key:
        return api_key.rsplit("-", 1)[-1].strip()
    return "us1"


class Settings:
    SERVICE_NAME: str = os.getenv("SERVICE_NAME", "mailchimp-proxy")
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./mailchimp.db")
    MAILCHIMP_API_KEY: str = os.getenv("MAILCHIMP_API_KEY", "").strip()
    MAILCHIMP_API_URL: str = os.getenv(
        "MAILCHIMP_API_URL",
        f"https://{_datacenter(MAILCHIMP_API_KEY)}.api.mailchimp.com/3.0",
    ).rstrip("/")
    MAILCHIMP_TIMEOUT: float = float(os.getenv("MAILCHIMP_TIMEOUT", "10.0"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    POOL_RECYCLE: int = int(os.getenv("DB_POOL_RECYCLE", "300"))


settings = Settings()
