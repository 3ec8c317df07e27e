"""Load themes from YAML configuration files."""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Any

import yaml

from ..schema.decoder import HEX_COLOR_PATTERN
from ..schema.elements import ElementKind, FontWeight
from .theme import DEFAULT_COLOR, RoleStyle, Theme

logger = logging.getLogger(__name__)


class ThemeLoader:
    """Loads theme definitions from YAML files.

    YAML format:
    ```yaml
    name: default
    background: "#FFFFFF"
    roles:
      text:
        size: 10
      title:
        size: 16
        weight: bold
        color: "#222222"
    ```
    """

    def __init__(self, search_paths: list[Path] | None = None) -> None:
        """Initialize loader with search paths.

        Args:
            search_paths: Directories to search for theme YAML files.
                         Defaults to ['assets/themes/'] relative to project root.
        """
        if search_paths is None:
            project_root = Path(__file__).parent.parent.parent.parent
            self.search_paths = [project_root / "assets" / "themes"]
        else:
            self.search_paths = search_paths

        self._cache: dict[str, Theme] = {}

    def load(self, name: str) -> Theme:
        """Load a theme by name.

        Searches for {name}.yaml in search paths.

        Raises:
            FileNotFoundError: If theme YAML not found
            ValueError: If YAML format is invalid
        """
        if name in self._cache:
            return self._cache[name]

        yaml_path = self._find_yaml(name)
        if yaml_path is None:
            raise FileNotFoundError(
                f"Theme '{name}' not found in search paths: {self.search_paths}"
            )

        with open(yaml_path) as f:
            data = yaml.safe_load(f)

        theme = self.parse(data, default_name=name)
        self._cache[name] = theme
        logger.debug("Loaded theme %s from %s", theme.name, yaml_path)
        return theme

    def load_string(self, yaml_string: str) -> Theme:
        """Load a theme from a YAML string (not cached)."""
        return self.parse(yaml.safe_load(yaml_string))

    def _find_yaml(self, name: str) -> Path | None:
        """Find YAML file for theme name."""
        for search_path in self.search_paths:
            yaml_path = Path(search_path) / f"{name}.yaml"
            if yaml_path.exists():
                return yaml_path
        return None

    def parse(self, data: Any, default_name: str = "unnamed") -> Theme:
        """Parse a theme definition from YAML data."""
        if not isinstance(data, dict):
            raise ValueError(f"Theme definition must be a mapping, got {type(data).__name__}")

        roles_data = data.get("roles", {})
        if not isinstance(roles_data, dict):
            raise ValueError("Theme 'roles' must be a mapping")

        roles: dict[ElementKind, RoleStyle] = {}
        for role_name, role_def in roles_data.items():
            try:
                kind = ElementKind(role_name)
            except ValueError:
                raise ValueError(f"Unknown theme role: {role_name}") from None
            if not kind.is_text_like:
                raise ValueError(f"Theme role '{role_name}' has no text style")
            roles[kind] = self._parse_role(role_name, role_def)

        for kind in (ElementKind.TEXT, ElementKind.TITLE):
            if kind not in roles:
                raise ValueError(f"Theme is missing role: {kind.value}")

        background = data.get("background", "#FFFFFF")
        self._check_color(background, "background")

        return Theme(name=data.get("name", default_name), roles=roles, background=background)

    def _parse_role(self, role_name: str, role_def: Any) -> RoleStyle:
        if not isinstance(role_def, dict) or "size" not in role_def:
            raise ValueError(f"Theme role '{role_name}' must define a size")

        size = role_def["size"]
        if isinstance(size, bool) or not isinstance(size, (int, float)):
            raise ValueError(f"Theme role '{role_name}' has invalid size: {size!r}")
        if not math.isfinite(size) or size <= 0:
            raise ValueError(f"Theme role '{role_name}' has invalid size: {size!r}")

        weight = FontWeight(role_def.get("weight", FontWeight.NORMAL.value))
        color = role_def.get("color", DEFAULT_COLOR)
        self._check_color(color, f"{role_name}.color")

        return RoleStyle(size=float(size), weight=weight, color=color)

    def _check_color(self, color: Any, where: str) -> None:
        if not isinstance(color, str) or not HEX_COLOR_PATTERN.match(color):
            raise ValueError(f"Theme {where} must look like #RRGGBB, got {color!r}")

    def clear_cache(self) -> None:
        """Clear the theme cache."""
        self._cache.clear()
