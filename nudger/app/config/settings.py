"""Settings for the nudger service."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from nudger.app.core.log_policy import LogPolicy

DEFAULT_DRIVER_PATH = "/usr/lib/oracle/client/lib/libsqora.so.19.1"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Missing credentials are not validated here; they surface as a connect failure.
    dsn: str = Field("", validation_alias="DSN")
    database_user: str = Field("", validation_alias="USER")
    database_password: str = Field("", validation_alias="PASSWORD")

    log_policy: LogPolicy = Field(LogPolicy.NONE, validation_alias="LOG_POLICY")

    database_backend: str = Field("odbc", validation_alias="DATABASE_BACKEND")
    driver_path: str = Field(DEFAULT_DRIVER_PATH, validation_alias="DRIVER_PATH")
    # 0 leaves the login timeout to the driver.
    database_login_timeout_seconds: int = Field(0, validation_alias="DATABASE_LOGIN_TIMEOUT_SECONDS")
