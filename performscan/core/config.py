from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Literal, Optional
class Settings(BaseSettings):
    """Loads environment variables from .env file."""
    model_config = SettingsConfigDict(env_file='.env', env_file_encoding='utf-8', extra='ignore')

    LOG_LEVEL: str = "WARNING"
    # Rotating log file, disabled unless a path is given
    LOG_FILE: Optional[str] = None

    # Encoding used to decode COBOL sources; utf-8-sig drops a leading BOM
    # and undecodable bytes are replaced
    SOURCE_ENCODING: str = "utf-8-sig"

    # Default report format for the CLI: "text", "json" or "mermaid"
    OUTPUT_FORMAT: Literal["text", "json", "mermaid"] = "text"

# Create a single instance to be imported by other modules
settings = Settings()
