"""Configuration management."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

CURATOR_SYSTEM_PROMPT = """You are a professional news editor selecting the best matching image for a news article from a provided list of filenames.

Rules, in order:
1. If the article names a company or product and a filename carries that brand, pick it.
2. Otherwise pick the image that best matches the article's topic.
3. Use the article category as a tie-breaker.
4. If nothing fits, answer RANDOM.

Answer with the exact filename from the list, or RANDOM. No quotes, no markdown, no explanation."""

CURATOR_USER_PROMPT = """Article Title: "{title}"
Article Category: "{category}"

Available Images:
{images}

Select the BEST matching filename:"""


@dataclass
class CuratorConfig:
    """Semantic curator (LLM) settings."""
    enabled: bool = True
    model: str = "claude-3-5-haiku-latest"
    max_tokens: int = 50
    temperature: float = 0.3
    timeout: float = 5.0


@dataclass
class PathsConfig:
    """Path settings."""
    images_dir: Path = Path("public/assets/images/all")
    cache_dir: Path = Path(".cache/image-decisions")
    metadata_csv: Path = Path("image-master-table.csv")
    reports_dir: Path = Path("scripts/_reports")


@dataclass
class SelectionConfig:
    """Selection pipeline settings."""
    strict_empty_library: bool = False
    min_brand_safe_generic: int = 20
    use_metadata: bool = True


@dataclass
class PromptsConfig:
    """Prompts for the curator."""
    curator: dict = field(default_factory=lambda: {
        "system": CURATOR_SYSTEM_PROMPT,
        "user": CURATOR_USER_PROMPT,
    })


@dataclass
class Settings:
    """Application settings."""

    # API Keys (from environment only)
    anthropic_api_key: str = ""

    # Config sections
    curator: CuratorConfig = field(default_factory=CuratorConfig)
    paths: PathsConfig = field(default_factory=PathsConfig)
    selection: SelectionConfig = field(default_factory=SelectionConfig)
    prompts: PromptsConfig = field(default_factory=PromptsConfig)

    @property
    def curator_enabled(self) -> bool:
        """Curation needs both the switch and a key."""
        return self.curator.enabled and bool(self.anthropic_api_key)

    @property
    def curator_model(self) -> str:
        return self.curator.model

    @property
    def curator_timeout(self) -> float:
        return self.curator.timeout

    @property
    def images_dir(self) -> Path:
        return self.paths.images_dir

    @property
    def cache_dir(self) -> Path:
        return self.paths.cache_dir

    @property
    def metadata_csv(self) -> Optional[Path]:
        if not self.selection.use_metadata:
            return None
        return self.paths.metadata_csv

    @property
    def reports_dir(self) -> Path:
        return self.paths.reports_dir

    @property
    def strict_empty_library(self) -> bool:
        return self.selection.strict_empty_library


def load_config(config_path: Path = Path("config.yaml")) -> dict:
    """Load configuration from YAML file."""
    if not config_path.exists():
        return {}

    with open(config_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def get_settings(config_path: Path = Path("config.yaml")) -> Settings:
    """Get application settings from YAML config and environment."""
    config = load_config(config_path)

    settings = Settings(
        anthropic_api_key=os.getenv("ANTHROPIC_API_KEY", ""),
    )

    if "curator" in config:
        for key, value in config["curator"].items():
            setattr(settings.curator, key, value)

    if "paths" in config:
        for key, value in config["paths"].items():
            setattr(settings.paths, key, Path(value))

    if "selection" in config:
        for key, value in config["selection"].items():
            setattr(settings.selection, key, value)

    if "prompts" in config:
        settings.prompts = PromptsConfig(**config["prompts"])

    return settings
