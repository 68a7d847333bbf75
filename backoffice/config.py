"""Application configuration via Pydantic Settings.

NOTE: We explicitly map the .env variable names (API_URL, DATABASE_URL, etc.)
to avoid silent misconfiguration. An empty API_URL routes every call to the
local store.
"""

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings


class CompanyInfo(BaseModel):
    """Letterhead printed on invoices."""

    name: str = "Al Aksha Security Services"
    address: str = "Chattogram, Bangladesh"
    phone: str = "+880-1958-122300"
    email: str = "admin@al-aqsasecurity.com"


class Settings(BaseSettings):
    # Remote spreadsheet endpoint
    api_url: str = Field(default="", validation_alias="API_URL")
    remote_timeout: float = Field(default=10.0, validation_alias="REMOTE_TIMEOUT")

    # Local fallback store
    database_url: str = Field(
        default="sqlite+aiosqlite:///./al_aksha.db",
        validation_alias="DATABASE_URL",
    )

    # App
    app_name: str = Field(
        default="Al Aksha Security Management System", validation_alias="APP_NAME"
    )
    app_version: str = Field(default="1.1.0", validation_alias="APP_VERSION")
    debug: bool = Field(default=False, validation_alias="DEBUG")
    csv_data_path: str = Field(default="data", validation_alias="CSV_DATA_PATH")
    currency: str = Field(default="৳", validation_alias="CURRENCY")
    company: CompanyInfo = Field(default_factory=CompanyInfo)

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    @property
    def storage_mode(self) -> str:
        return "remote" if self.api_url else "local"


settings = Settings()
