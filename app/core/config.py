from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    project_name: str = "Great-Circle Distance API"
    api_v1_prefix: str = "/api/v1"

    # Debug flag
    debug: bool = Field(default=False, alias="DEBUG")

    # Reject latitude outside [-90, 90] and longitude outside [-180, 180].
    # When False, out-of-range values go straight into the haversine formula.
    validate_coordinate_ranges: bool = True

    # Decimal places for the human-readable "display" block of distance responses
    display_precision: int = Field(default=2, ge=0, le=10)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="forbid"
    )


settings = Settings()
