"""Catalog loading interface and implementations.

Defines the contract for reading structured catalogs from disk and feeding
them to a Translator, with JSON and YAML implementations.
"""

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

from gettext_catalog.i18n.translator import Translator
from gettext_catalog.logging import get_module_logger

logger = get_module_logger()


class CatalogLoader(ABC):
    """Abstract base for catalog loaders.

    Catalog files are named ``<domain>.<locale>.<ext>`` (the locale part is
    informative, the catalog header decides the locale) or ``<locale>.<ext>``
    for catalogs of the translator's default domain.

    Attributes:
        catalog_dir: Directory containing catalog files.
    """

    patterns: Tuple[str, ...] = ()

    def __init__(self, catalog_dir: Path):
        """Initialize catalog loader.

        Args:
            catalog_dir: Path to directory with catalog files.

        Raises:
            ValueError: If catalog_dir does not exist.
        """
        self.catalog_dir = Path(catalog_dir)

        if not self.catalog_dir.exists():
            raise ValueError(f"Catalog directory not found: {self.catalog_dir}")

        logger.info(
            "initialized_catalog_loader",
            loader=type(self).__name__,
            catalog_dir=str(self.catalog_dir),
        )

    @abstractmethod
    def read(self, path: Path) -> Dict[str, Any]:
        """Parse one catalog file.

        Raises:
            ValueError: If the file cannot be parsed or is not a mapping.
        """

    def discover(self) -> List[Path]:
        """List catalog files in a stable order."""
        files = set()
        for pattern in self.patterns:
            files.update(self.catalog_dir.glob(pattern))
        return sorted(files)

    @staticmethod
    def domain_for(path: Path) -> Optional[str]:
        """Extract the domain from a file name ("shop.fr.json" -> "shop").

        Returns:
            The domain, or None when the name has no domain part.
        """
        parts = path.stem.split(".")
        return parts[0] if len(parts) >= 2 else None

    def load_into(self, translator: Translator) -> int:
        """Read every catalog file and hand it to translator.load_catalog().

        Args:
            translator: Translator to populate.

        Returns:
            Number of catalogs loaded.

        Raises:
            ValueError: If a file cannot be parsed.
            InvalidArgumentError: If a catalog lacks its header.
        """
        files = self.discover()
        for path in files:
            domain = self.domain_for(path)
            translator.load_catalog(self.read(path), domain)
            logger.info("catalog_loaded", file=str(path), domain=domain)

        if not files:
            logger.warning("no_catalog_files_found", catalog_dir=str(self.catalog_dir))
        return len(files)

    @staticmethod
    def _ensure_mapping(data: Any, path: Path) -> Dict[str, Any]:
        if not isinstance(data, dict):
            raise ValueError(f"Catalog {path} must contain a mapping")
        return data


class JSONCatalogLoader(CatalogLoader):
    """Loader for JSON catalogs, as written by the po2catalog converter."""

    patterns = ("*.json",)

    def read(self, path: Path) -> Dict[str, Any]:
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            logger.error("json_parse_error", file=str(path), error=str(e))
            raise ValueError(f"Failed to parse {path}: {e}") from e
        return self._ensure_mapping(data, path)


class YAMLCatalogLoader(CatalogLoader):
    """Loader for YAML catalogs with the same structure as the JSON ones."""

    patterns = ("*.yml", "*.yaml")

    def read(self, path: Path) -> Dict[str, Any]:
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error("yaml_parse_error", file=str(path), error=str(e))
            raise ValueError(f"Failed to parse {path}: {e}") from e
        return self._ensure_mapping(data, path)
