from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    MIN_HOME_DIR_UID: int = 0
    MAX_HOME_DIR_UID: int | None = None

    PASSWD_FILE: str = ""
    LOG_LEVEL: str = "WARNING"

    model_config = SettingsConfigDict(env_prefix="SHORTCWD_")

    def passwd_path(self) -> str | None:
        """Return the configured passwd file, or None to use the system database.

        Returns:
            The passwd file path if PASSWD_FILE is set, otherwise None
        """
        return self.PASSWD_FILE or None


@lru_cache
def get_settings() -> Settings:
    return Settings()
