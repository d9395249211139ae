"""
Project information model.

ProjectInfo is gathered once per run (interactively or from a YAML file) and
drives which prompts the documentation generator builds.
"""

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Union

import yaml

from .constants import BRAIN_DUMP_SECTION, DEFAULT_DESCRIPTION, DEFAULT_LICENSE
from .errors import ConfigError


@dataclass(frozen=True)
class ProjectInfo:
    """Information about the project being documented."""
    name: str
    description: str = DEFAULT_DESCRIPTION
    author: str = ""
    license: str = DEFAULT_LICENSE
    sections: Mapping[str, Mapping[str, str]] = field(default_factory=dict)

    def __post_init__(self):
        # Read-only views so the info cannot change after creation
        frozen = {key: MappingProxyType(dict(values)) for key, values in self.sections.items()}
        object.__setattr__(self, "sections", MappingProxyType(frozen))

    @property
    def brain_dump(self) -> str:
        """Free-form brain dump text, or an empty string."""
        return (self.sections.get(BRAIN_DUMP_SECTION) or {}).get('content', '').strip()

    @property
    def is_staged(self) -> bool:
        """True when a brain dump is present and documents are generated in stages."""
        return bool(self.brain_dump)

    def section(self, key: str) -> Mapping[str, str]:
        """Return the section stored under key, or an empty mapping."""
        return self.sections.get(key) or {}

    def has_section(self, key: str) -> bool:
        return key in self.sections

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ProjectInfo':
        """Create from dictionary. A top-level 'brain_dump' key becomes the _brainDump section."""
        if not data.get('name'):
            raise ConfigError("Project info requires a 'name'")

        raw_sections = data.get('sections') or {}
        if not isinstance(raw_sections, dict):
            raise ConfigError("Project info 'sections' must be a mapping")

        sections: Dict[str, Dict[str, str]] = {}
        for key, values in raw_sections.items():
            if values is None:
                values = {}
            if not isinstance(values, dict):
                raise ConfigError(f"Section '{key}' must be a mapping of strings")
            sections[str(key)] = {str(k): "" if v is None else str(v) for k, v in values.items()}

        brain_dump = data.get('brain_dump')
        if brain_dump:
            sections[BRAIN_DUMP_SECTION] = {'content': str(brain_dump).strip()}

        return cls(
            name=str(data['name']),
            description=str(data.get('description') or DEFAULT_DESCRIPTION),
            author=str(data.get('author') or ''),
            license=str(data.get('license') or DEFAULT_LICENSE),
            sections=sections,
        )


def default_project_info(name: str) -> ProjectInfo:
    """Minimal project info used when nothing was collected."""
    return ProjectInfo(name=name)


def load_project_info(path: Union[str, Path]) -> ProjectInfo:
    """
    Load project info from a YAML file.

    Args:
        path: Path to a YAML mapping with name, description, author, license,
            sections and an optional brain_dump

    Returns:
        Parsed ProjectInfo

    Raises:
        ConfigError: If the file cannot be read or is not a valid mapping
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data: Optional[Any] = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read project info file {path}", cause=e)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in project info file {path}", cause=e)

    if not isinstance(data, dict):
        raise ConfigError(f"Project info file {path} must contain a mapping")

    return ProjectInfo.from_dict(data)
