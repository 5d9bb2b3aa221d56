"""
Configuration for namefully.

Two layers live here:

* ``Settings``: runtime settings read from ``config/namefully.yml`` (logging,
  debug flag and any named name-configurations). Loaded once and cached.
* ``Config``: a frozen value object describing how a name is parsed and
  rendered. Configs are merged or copied into new values, never shared
  mutably. Named configs are kept in an explicit ``ConfigRegistry``.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Optional, Type, TypeVar

import yaml

from namefully.types import NameOrder, Separator, Surname, Title

if TYPE_CHECKING:
    from namefully.parsing.parsers import Parser

CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "namefully.yml"

DEFAULT_NAME = "default"
COPY_ALIAS = "_copy"

E = TypeVar("E", bound=Enum)


# -----------------------------------------------------------------------------
# Runtime settings (yaml)
# -----------------------------------------------------------------------------

class Settings:
    def __init__(self, data: Dict[str, Any]):
        self.logging = data.get("logging") or {}
        self.configs = data.get("configs") or {}
        self.debug = bool(data.get("debug", False))


def load_settings(path: Optional[Path] = None) -> Settings:
    """Read settings from ``path`` (or the project default).

    An explicit path must exist; the default path falls back to empty settings
    so the package works when installed without the config directory.
    """
    settings_path = Path(path) if path is not None else CONFIG_PATH
    if not settings_path.exists():
        if path is not None:
            raise FileNotFoundError(f"Settings file not found: {settings_path}")
        return Settings({})

    with open(settings_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return Settings(data)


_settings_cache: Optional[Settings] = None


def get_settings() -> Settings:
    global _settings_cache
    if _settings_cache is None:
        _settings_cache = load_settings()
    return _settings_cache


# -----------------------------------------------------------------------------
# Name configuration
# -----------------------------------------------------------------------------

def coerce_enum(enum_cls: Type[E], value: Any) -> E:
    """Accept an enum member, its value ("lastName") or its name ("LAST_NAME")."""
    if isinstance(value, enum_cls):
        return value
    text = str(value).strip()
    for member in enum_cls:
        if text == member.value or text.upper() == member.name:
            return member
    raise ValueError(f"Unsupported {enum_cls.__name__} value: {value!r}")


@dataclass(frozen=True)
class Config:
    """How to treat a full name during its course.

    ``bypass`` is on by default: the character-class rules are skipped and
    only the structural checks (counts, required keys) apply.
    """

    name: str = DEFAULT_NAME
    ordered_by: NameOrder = NameOrder.FIRST_NAME
    separator: Separator = Separator.SPACE
    title: Title = Title.UK
    ending: bool = False
    bypass: bool = True
    surname: Surname = Surname.FATHER
    parser: Optional["Parser"] = None

    def merge(self, other: Optional["Config"] = None, **overrides: Any) -> "Config":
        """Combine this config with ``other`` and call-site overrides.

        ``other`` wins over ``self``; keyword overrides set to ``None`` are
        ignored and the rest win over both.
        """
        merged = self if other is None else other
        values = {k: v for k, v in overrides.items() if v is not None}
        return replace(merged, **values) if values else merged

    def copy_with(self, name: Optional[str] = None, **overrides: Any) -> "Config":
        """Copy under a new name (``<name>_copy`` by default)."""
        values = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, name=name or self.name + COPY_ALIAS, **values)

    def clone(self) -> "Config":
        return replace(self)

    def flipped(self) -> "Config":
        """Same config with the opposite name order."""
        order = NameOrder.LAST_NAME if self.ordered_by is NameOrder.FIRST_NAME else NameOrder.FIRST_NAME
        return replace(self, ordered_by=order)

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        for f in fields(self):
            if f.name == "parser":
                continue
            value = getattr(self, f.name)
            out[f.name] = value.value if isinstance(value, Enum) else value
        return out

    @classmethod
    def from_mapping(cls, name: str, data: Dict[str, Any]) -> "Config":
        """Build a config from a plain mapping such as a yaml section."""
        data = data or {}
        known = {f.name for f in fields(cls)} - {"name", "parser"}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown config option(s) for '{name}': {sorted(unknown)}")

        options: Dict[str, Any] = {}
        if "ordered_by" in data:
            options["ordered_by"] = coerce_enum(NameOrder, data["ordered_by"])
        if "separator" in data:
            options["separator"] = coerce_enum(Separator, data["separator"])
        if "title" in data:
            options["title"] = coerce_enum(Title, data["title"])
        if "surname" in data:
            options["surname"] = coerce_enum(Surname, data["surname"])
        if "ending" in data:
            options["ending"] = bool(data["ending"])
        if "bypass" in data:
            options["bypass"] = bool(data["bypass"])
        return cls(name=name, **options)


class ConfigRegistry:
    """Keyed store of named configurations.

    Construct one at startup and pass it around; nothing here is global.
    """

    def __init__(self, configs: Optional[Iterable[Config]] = None):
        self._configs: Dict[str, Config] = {}
        for config in configs or []:
            self.register(config)

    def __contains__(self, name: object) -> bool:
        return name in self._configs

    def __len__(self) -> int:
        return len(self._configs)

    def names(self) -> List[str]:
        return list(self._configs)

    def get(self, name: str = DEFAULT_NAME) -> Config:
        """Return the named config, creating one with default values if absent."""
        if name not in self._configs:
            self._configs[name] = Config(name=name)
        return self._configs[name]

    def register(self, config: Config) -> Config:
        self._configs[config.name] = config
        return config

    def inline(self, name: str = DEFAULT_NAME, **options: Any) -> Config:
        """Register (or replace) ``name`` with defaults plus ``options``."""
        values = {k: v for k, v in options.items() if v is not None}
        return self.register(Config(name=name, **values))

    def copy(self, config: Config, name: Optional[str] = None, **overrides: Any) -> Config:
        """Copy ``config`` under a name no other registered config uses."""
        copied = config.copy_with(name=self._unique_name(config, name or config.name + COPY_ALIAS), **overrides)
        return self.register(copied)

    def reset(self, name: str = DEFAULT_NAME) -> Config:
        return self.register(Config(name=name))

    def _unique_name(self, config: Config, name: str) -> str:
        while name == config.name or name in self._configs:
            name += COPY_ALIAS
        return name

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "ConfigRegistry":
        """Create a registry holding the ``configs`` section of the settings."""
        settings = settings or get_settings()
        registry = cls()
        for name, data in settings.configs.items():
            registry.register(Config.from_mapping(str(name), data or {}))
        return registry
