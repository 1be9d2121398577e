# aviation_codes/config.py
from pathlib import Path
from typing import Literal
from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

from aviation_codes.dataset.store import PACKAGE_DATA_DIR


class Settings(BaseSettings):
    # App
    APP_ENV: Literal["dev", "prod", "staging"] = "dev"

    # OpenFlights sources
    AIRPORTS_URL: str = "https://raw.githubusercontent.com/jpatokal/openflights/master/data/airports.dat"
    AIRLINES_URL: str = "https://raw.githubusercontent.com/jpatokal/openflights/master/data/airlines.dat"

    # Output of the build; empty means the packaged data/ directory
    DATA_DIR: str = ""

    # HTTP
    FETCH_CONNECT_TIMEOUT: float = 3.0
    FETCH_READ_TIMEOUT: float = 30.0
    FETCH_RETRY_BACKOFF_SECONDS: float = 1.5

    # ignore any extra keys
    model_config = SettingsConfigDict(extra="ignore")

    @property
    def data_dir(self) -> Path:
        return Path(self.DATA_DIR) if self.DATA_DIR else PACKAGE_DATA_DIR


def load_settings(env_file: str = ".env") -> Settings:
    # .env goes into os.environ first; variables already set win
    load_dotenv(env_file)
    return Settings()


settings = load_settings()
