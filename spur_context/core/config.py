from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Directory of saved API responses scanned by the fixture loader.
    # A relative path resolves against the current working directory.
    FIXTURES_DIR: Path = Path("tests/fixtures")

    # Indentation for pretty JSON produced by the test helpers (None = compact)
    JSON_INDENT: int | None = 2

    class Config:
        env_prefix = "SPUR_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


settings = Settings()
