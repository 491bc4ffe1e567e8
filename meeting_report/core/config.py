import os
from pathlib import Path
from typing import List
from dotenv import load_dotenv

# Load environment variables from .env file
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(dotenv_path=env_path)


def _env_flag(name: str, default: str) -> bool:
    return os.environ.get(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """Application settings loaded from environment variables."""
    
    def __init__(self):
        self.APP_NAME = os.environ.get("APP_NAME", "Meeting Report Exporter")
        self.ENV = os.environ.get("ENV", "development")
        self.LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
        
        # Dashboard origins allowed to call the export API
        self.CORS_ORIGINS: List[str] = [
            origin.strip()
            for origin in os.environ.get(
                "CORS_ORIGINS",
                "http://localhost:3000,http://127.0.0.1:3000"
            ).split(",")
            if origin.strip()
        ]
        
        # CSV export: TRUE keeps the dashboard's literal "\n" row separator,
        # FALSE writes real newlines
        self.CSV_LEGACY_LINE_TERMINATOR = _env_flag("CSV_LEGACY_LINE_TERMINATOR", "true")
        
        # HTML export: TRUE renders the summary through the markup parser,
        # FALSE emits one <p> per summary line
        self.HTML_STRUCTURED_SUMMARY = _env_flag("HTML_STRUCTURED_SUMMARY", "false")
    
    def __repr__(self):
        return (
            f"Settings(APP_NAME={self.APP_NAME}, ENV={self.ENV}, "
            f"LOG_LEVEL={self.LOG_LEVEL}, "
            f"CSV_LEGACY_LINE_TERMINATOR={self.CSV_LEGACY_LINE_TERMINATOR}, "
            f"HTML_STRUCTURED_SUMMARY={self.HTML_STRUCTURED_SUMMARY})"
        )


settings = Settings()
