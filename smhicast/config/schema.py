"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

from smhicast.ingest.smhi_client import DEFAULT_USER_AGENT, SMHI_BASE_URL


class LocationConfig(BaseModel):
    model_config = {"extra": "forbid"}

    name: str
    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)


class ApiConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = SMHI_BASE_URL
    timeout_seconds: float = Field(default=10.0, gt=0.0)
    user_agent: str = DEFAULT_USER_AGENT


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    location: LocationConfig
    api: ApiConfig = ApiConfig()
