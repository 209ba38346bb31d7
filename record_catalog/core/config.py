from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    APP_NAME: str = "record-catalog"
    ENV: str = "local"

    HOST: str = "127.0.0.1"
    PORT: int = 8080
    LOG_LEVEL: str = "INFO"

    # DB (DB_URL wins over the individual parts)
    DB_URL: str | None = None
    DB_USER: str = "root"
    DB_PASSWORD: str = ""
    DB_HOST: str = "127.0.0.1"
    DB_PORT: int = 3306
    DB_NAME: str = "recordings"
    DB_CONNECT_TIMEOUT_SEC: int = 5
    DB_READ_TIMEOUT_SEC: int = 10

    # Search
    SEARCH_TIMEOUT_SEC: float = 10.0
    SEARCH_MAX_WORKERS: int = 4

    # Tracks
    TRACKS_CSV_PATH: str = "data/tracks.csv"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def database_url(self) -> str:
        if self.DB_URL:
            return self.DB_URL
        return (
            f"mysql+pymysql://{self.DB_USER}:{self.DB_PASSWORD}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        )

settings = Settings()
