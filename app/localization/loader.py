"""Translation source loading.

Discovers translation files in a directory tree and parses them into a raw
nested configuration tree. Files are recognized by their stem ending in the
convention prefix, e.g. ``first.en.local.yaml`` or ``light.local.json``.
"""

import asyncio
import json
from pathlib import Path
from typing import Any, Dict, Mapping, Union

import yaml

from localization.logging import get_module_logger
from localization.merge import shallow_merge

logger = get_module_logger()

SUPPORTED_EXTENSIONS = (".yaml", ".yml", ".json")


def check_directory(location: Union[str, Path]) -> Path:
    """Resolve a location and ensure it is an existing directory.

    Args:
        location: Directory path, relative to the working directory or absolute.

    Returns:
        The resolved absolute Path.

    Raises:
        ValueError: If the location does not exist or is not a directory.
    """
    path = Path(location).expanduser().resolve()
    if not path.exists():
        raise ValueError(f"Localizations directory not found: {path}")
    if not path.is_dir():
        raise ValueError(f"Localizations location is not a directory: {path}")
    return path


class ConfigLoader:
    """Loader for YAML and JSON translation sources.

    Attributes:
        location: Directory to search, validated on construction.
        convention_prefix: Stem suffix marking a translation file.
    """

    def __init__(self, location: Union[str, Path], convention_prefix: str = "local"):
        self.location = check_directory(location)
        self.convention_prefix = convention_prefix

        logger.info(
            "initialized_config_loader",
            location=str(self.location),
            convention_prefix=convention_prefix,
        )

    def is_translation_file(self, path: Path) -> bool:
        return (
            path.is_file()
            and path.suffix.lower() in SUPPORTED_EXTENSIONS
            and path.stem.endswith(f".{self.convention_prefix}")
        )

    async def load(self) -> Dict[str, Any]:
        """Load the raw tree without blocking the event loop.

        Returns:
            Nested mapping keyed by file stem and directory name.
        """
        return await asyncio.to_thread(self.load_sync)

    def load_sync(self) -> Dict[str, Any]:
        """Load the raw tree.

        Returns:
            Nested mapping keyed by file stem and directory name.

        Raises:
            ValueError: If a file cannot be parsed.
        """
        tree = self._load_directory(self.location)
        logger.info(
            "loaded_translation_sources",
            location=str(self.location),
            entry_count=len(tree),
        )
        return tree

    def _load_directory(self, directory: Path) -> Dict[str, Any]:
        tree: Dict[str, Any] = {}

        for entry in sorted(directory.iterdir(), key=lambda p: p.name):
            if entry.is_dir():
                nested = self._load_directory(entry)
                if nested:
                    tree[entry.name] = nested
            elif self.is_translation_file(entry):
                data = self._parse_file(entry)
                if entry.stem in tree:
                    # Same stem in another format, e.g. first.en.local.json and .yaml
                    logger.warning(
                        "merged_duplicate_translation_stem",
                        stem=entry.stem,
                        file=str(entry),
                    )
                    data = self._merge_duplicate(tree[entry.stem], data, entry)
                tree[entry.stem] = data

        return tree

    def _merge_duplicate(self, existing: Any, data: Any, source_file: Path) -> Any:
        if not isinstance(existing, Mapping) or not isinstance(data, Mapping):
            raise ValueError(
                f"Cannot merge {source_file} into an entry of the same name: "
                "both must be mappings"
            )
        return shallow_merge(existing, data)

    def _parse_file(self, source_file: Path) -> Any:
        try:
            with open(source_file, "r", encoding="utf-8") as f:
                if source_file.suffix.lower() == ".json":
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            logger.error("translation_parse_error", file=str(source_file), error=str(e))
            raise ValueError(f"Failed to parse {source_file}: {e}") from e

        logger.debug("parsed_translation_file", file=str(source_file))
        return data if data is not None else {}


async def load_config(
    location: Union[str, Path], convention_prefix: str = "local"
) -> Dict[str, Any]:
    """Load the raw translation tree found under location."""
    return await ConfigLoader(location, convention_prefix=convention_prefix).load()
