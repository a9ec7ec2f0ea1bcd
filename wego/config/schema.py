"""Configuration schema using Pydantic."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

DATA_DIR = Path(__file__).resolve().parent.parent / "data"

DEFAULT_IMAGE_BASE_URL = "https://api.unsplash.com/search/photos"
DEFAULT_DESCRIPTION_BASE_URL = "https://en.wikipedia.org/api/rest_v1/page/summary"
DEFAULT_PLACEHOLDER_IMAGE = (
    "https://images.unsplash.com/photo-1500530855697-b586d89ba3ee?auto=format&fit=crop&w=800&q=60"
)


class Base(BaseModel):
    """Base model accepting both camelCase and snake_case keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ImageSourceConfig(Base):
    """Photo search provider configuration."""

    api_key: str = ""
    base_url: str = DEFAULT_IMAGE_BASE_URL
    per_page: int = 6
    orientation: str | None = "landscape"
    timeout: float = 10.0


class DescriptionSourceConfig(Base):
    """Topic summary provider configuration."""

    base_url: str = DEFAULT_DESCRIPTION_BASE_URL
    timeout: float = 10.0
    max_chars: int = 150


class SourcesConfig(Base):
    images: ImageSourceConfig = Field(default_factory=ImageSourceConfig)
    descriptions: DescriptionSourceConfig = Field(default_factory=DescriptionSourceConfig)


class DataConfig(Base):
    """Static assets: the location index and the curated dataset."""

    locations_path: str = str(DATA_DIR / "locations.json")
    destinations_path: str = str(DATA_DIR / "destinations.json")


class SearchConfig(Base):
    debounce_ms: int = 300
    max_results: int = 6
    placeholder_image: str = DEFAULT_PLACEHOLDER_IMAGE
    details_url_template: str = "details.html?destination={name}"


class Config(Base):
    """Root configuration for wego."""

    sources: SourcesConfig = Field(default_factory=SourcesConfig)
    data: DataConfig = Field(default_factory=DataConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
