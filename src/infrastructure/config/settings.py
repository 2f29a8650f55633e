"""
Configuration manager for search index builds.
Handles YAML-based settings with defaults for every key.
"""
import yaml
from pathlib import Path
from typing import Dict, List, Optional, Any
from dataclasses import dataclass, field, replace

from ...domain.entities.document import SourceType
from ...domain.services.index_builder import DEFAULT_MAX_PREFIX_LENGTH
from ...domain.services.text_processing import DEFAULT_EXCERPT_LENGTH, MIN_TOKEN_LENGTH

DEFAULT_CONFIG_PATH = Path("search_index.yaml")


@dataclass
class BuildSettings:
    """Settings for one index build."""
    content_root: Path = Path("src/content")
    output: Path = Path("dist/search-index.json")
    excerpt_max_length: int = DEFAULT_EXCERPT_LENGTH
    max_prefix_length: int = DEFAULT_MAX_PREFIX_LENGTH
    min_token_length: int = MIN_TOKEN_LENGTH
    fetch_workers: Optional[int] = None
    sources: List[SourceType] = field(default_factory=lambda: list(SourceType))

    def __post_init__(self):
        if self.excerpt_max_length < 0:
            raise ValueError("excerpt_max_length must be non-negative")
        if self.max_prefix_length < 2:
            raise ValueError("max_prefix_length must be at least 2")
        if self.min_token_length < 1:
            raise ValueError("min_token_length must be positive")
        if self.fetch_workers is not None and self.fetch_workers < 1:
            raise ValueError("fetch_workers must be positive")

    def with_overrides(self, **overrides) -> "BuildSettings":
        """Copy with every non-None override applied (CLI flags win over file values)."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


class SettingsManager:
    """Manages build settings from a YAML file."""

    def __init__(self, config_path: Optional[Path] = None):
        self._explicit = config_path is not None
        self.config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
        self._config_data = None

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from YAML file.

        A missing default file means "use defaults"; a missing file that was
        asked for explicitly is an error.
        """
        if self._config_data is None:
            if not self.config_path.exists():
                if self._explicit:
                    raise FileNotFoundError(f"Configuration file not found: {self.config_path}")
                self._config_data = {}
                return self._config_data

            with open(self.config_path, 'r', encoding='utf-8') as f:
                self._config_data = yaml.safe_load(f) or {}

            if not isinstance(self._config_data, dict):
                raise ValueError(f"Configuration must be a mapping: {self.config_path}")

        return self._config_data

    def get_defaults(self) -> Dict[str, Any]:
        """Get the raw settings mapping."""
        return dict(self._load_config())

    def get_sources(self) -> List[SourceType]:
        """Configured source types, always in concatenation order."""
        config = self._load_config()
        names = config.get('sources')
        if names is None:
            return list(SourceType)
        if not isinstance(names, (list, tuple)):
            raise ValueError(f"'sources' must be a list of source names, got {names!r}")

        valid = {st.value: st for st in SourceType}
        wanted = set()
        for name in names:
            if name not in valid:
                raise KeyError(f"Source '{name}' not found in configuration")
            wanted.add(valid[name])
        return [st for st in SourceType if st in wanted]

    def get_settings(self) -> BuildSettings:
        config = self._load_config()
        defaults = BuildSettings()
        return BuildSettings(
            content_root=Path(config.get('content_root', defaults.content_root)),
            output=Path(config.get('output', defaults.output)),
            excerpt_max_length=int(config.get('excerpt_max_length', defaults.excerpt_max_length)),
            max_prefix_length=int(config.get('max_prefix_length', defaults.max_prefix_length)),
            min_token_length=int(config.get('min_token_length', defaults.min_token_length)),
            fetch_workers=int(config['fetch_workers']) if config.get('fetch_workers') is not None else None,
            sources=self.get_sources(),
        )
