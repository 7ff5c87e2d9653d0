"""12-factor configuration adapter using environment variables and TOML config."""

import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Journey planner (Mobilités M OTP) configuration
    mobilites_base_url: str = Field(
        default="https://data.mobilites-m.fr/api",
        description="Base URL of the Mobilités M API (OTP router and stop index)",
    )
    mobilites_origin: str = Field(
        default="mobility-trip-planner",
        description="Value of the Origin header the Mobilités M API asks clients to send",
    )
    network_prefix: str = Field(
        default="SEM",
        description="Prefix of backend route ids (e.g. 'SEM' in 'SEM:C1')",
    )
    api_timeout: int = Field(default=10, description="Timeout for API requests in seconds")
    sleep_ms_between_calls: int = Field(
        default=500,
        description="Sleep time in milliseconds between the requests of a mode comparison",
    )

    # Geocoding configuration
    nominatim_url: str = Field(
        default="https://nominatim.openstreetmap.org/search",
        description="Nominatim search endpoint used to geocode place names",
    )
    address_api_url: str = Field(
        default="https://api-adresse.data.gouv.fr/search/",
        description="Address API endpoint used for autocomplete",
    )
    locality_suffix: str = Field(
        default=", Grenoble, France",
        description="Suffix appended to every geocoding query",
    )
    autocomplete_min_chars: int = Field(
        default=3, description="Minimum query length before autocomplete is requested"
    )
    autocomplete_limit: int = Field(default=5, description="Maximum autocomplete suggestions")
    user_agent: str = Field(
        default="mobility-trip-planner/0.1",
        description="User-Agent sent to public geocoding services",
    )

    # Environment feeds
    impact_co2_url: str = Field(
        default="https://impactco2.fr/api/v1/transport",
        description="Impact CO2 transport endpoint",
    )
    weather_url: str = Field(
        default="https://api.open-meteo.com/v1/forecast",
        description="Open-Meteo forecast endpoint",
    )
    air_quality_url: str = Field(
        default="https://air-quality-api.open-meteo.com/v1/air-quality",
        description="Open-Meteo air quality endpoint",
    )

    # Route to stop-list cache
    route_stop_cache_file: str = Field(
        default="route_stops_cache.json",
        description="JSON file persisting the stop list of each route",
    )

    # Display configuration
    timezone: str = Field(
        default="Europe/Paris",
        description="Timezone for displaying times (IANA timezone name)",
    )

    # Default trip preferences
    default_mode: str = Field(default="walking", description="Default transport mode")
    wheelchair: bool = Field(default=False, description="Prefer wheelchair-accessible routes")
    walk_speed: float | None = Field(default=None, description="Walking speed in m/s")
    bike_speed: float | None = Field(default=None, description="Cycling speed in m/s")
    safe_route: bool = Field(default=False, description="Prefer safe cycling routes")

    # Optional TOML config file with [preferences] and [api] tables
    config_file: str | None = Field(
        default=None,
        description="Path to TOML configuration file for preferences and API settings",
    )

    @field_validator("default_mode")
    @classmethod
    def validate_default_mode(cls, v: str) -> str:
        """Validate the default mode is one of the UI transport categories."""
        if v.lower() not in ("walking", "bicycle", "bus", "car"):
            raise ValueError("default_mode must be one of 'walking', 'bicycle', 'bus', 'car'")
        return v.lower()

    @field_validator("walk_speed", "bike_speed")
    @classmethod
    def validate_speed(cls, v: float | None) -> float | None:
        """Validate speeds are positive when set."""
        if v is not None and v <= 0:
            raise ValueError("speeds must be positive")
        return v

    def _load_toml_data(self) -> dict[str, Any]:
        """Load and parse the TOML file, updating preferences and API settings."""
        if not self.config_file:
            raise ValueError("config_file must be set to load preferences")

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

        preferences = toml_data.get("preferences", {})
        if "default_mode" in preferences:
            self.default_mode = self.validate_default_mode(preferences["default_mode"])
        if "wheelchair" in preferences:
            self.wheelchair = bool(preferences["wheelchair"])
        if "walk_speed" in preferences:
            self.walk_speed = self.validate_speed(preferences["walk_speed"])
        if "bike_speed" in preferences:
            self.bike_speed = self.validate_speed(preferences["bike_speed"])
        if "safe_route" in preferences:
            self.safe_route = bool(preferences["safe_route"])

        api_config = toml_data.get("api", {})
        if "sleep_ms_between_calls" in api_config:
            self.sleep_ms_between_calls = api_config["sleep_ms_between_calls"]
        if "timeout" in api_config:
            self.api_timeout = api_config["timeout"]

        return toml_data

    def load_file_overrides(self) -> None:
        """Apply the TOML file on top of the environment, if one is configured."""
        if self.config_file:
            self._load_toml_data()
