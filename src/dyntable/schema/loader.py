"""Load table documents from files or strings."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from .decoder import DecodingError, decode_collection
from .elements import Collection

YAML_SUFFIXES = (".yaml", ".yml")


class DocumentLoader:
    """Loads table documents and decodes them into a Collection.

    Documents are JSON by default. Files ending in ``.yaml`` or ``.yml`` are
    read with PyYAML so hand-written fixtures can use YAML; the schema is the
    same either way.
    """

    def __init__(self, documents_dir: str | Path | None = None) -> None:
        """Initialize the loader.

        Args:
            documents_dir: Directory used to resolve bare document names.
                Defaults to 'assets/documents/' relative to the project root.
        """
        if documents_dir is None:
            project_root = Path(__file__).parent.parent.parent.parent
            self.documents_dir = project_root / "assets" / "documents"
        else:
            self.documents_dir = Path(documents_dir)

    def load(self, path: str | Path) -> Collection:
        """Load and decode a document file.

        Args:
            path: Path to the document

        Returns:
            Decoded Collection

        Raises:
            FileNotFoundError: If the file does not exist
            DecodingError: If the file is not a valid table document
        """
        path = Path(path)
        try:
            with open(path, encoding="utf-8") as f:
                text = f.read()
        except UnicodeDecodeError as e:
            raise DecodingError(f"document is not valid UTF-8: {e}") from e

        if path.suffix in YAML_SUFFIXES:
            return self.load_yaml_string(text)
        return self.load_string(text)

    def load_named(self, name: str) -> Collection:
        """Load a document by name from the documents directory."""
        for suffix in (".json",) + YAML_SUFFIXES:
            path = self.documents_dir / f"{name}{suffix}"
            if path.exists():
                return self.load(path)
        raise FileNotFoundError(f"Document '{name}' not found in {self.documents_dir}")

    def available(self) -> list[str]:
        """List document names found in the documents directory."""
        if not self.documents_dir.exists():
            return []
        names = {
            p.stem for p in self.documents_dir.iterdir()
            if p.suffix == ".json" or p.suffix in YAML_SUFFIXES
        }
        return sorted(names)

    def load_string(self, json_string: str | bytes) -> Collection:
        """Decode a document from a JSON string."""
        return decode_collection(parse_json(json_string))

    def load_yaml_string(self, yaml_string: str) -> Collection:
        """Decode a document from a YAML string."""
        try:
            data = yaml.safe_load(yaml_string)
        except yaml.YAMLError as e:
            raise DecodingError(f"document is not valid YAML: {e}") from e
        return decode_collection(data)


def parse_json(json_string: str | bytes) -> Any:
    """Parse JSON text, reporting syntax errors as DecodingError."""
    try:
        return json.loads(json_string)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DecodingError(f"document is not valid JSON: {e}") from e
