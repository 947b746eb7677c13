import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()

@dataclass
class Settings:
    # Application settings
    app_name: str = os.getenv("APP_NAME", "Library Catalog")
    app_version: str = os.getenv("APP_VERSION", "1.0.0")

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "WARNING").upper()

    # CLI output: plain | json | rich
    default_output_mode: str = os.getenv("DEFAULT_OUTPUT_MODE", "plain").lower()

    # Date used by the demo overdue report (YYYY-MM-DD)
    demo_today: str = os.getenv("DEMO_TODAY", "2025-11-20")


settings = Settings()
