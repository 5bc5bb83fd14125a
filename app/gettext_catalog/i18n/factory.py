"""Factory functions for creating i18n components.

Provides a convenience function for initializing translators from the
library settings.
"""

from pathlib import Path
from typing import Optional

from gettext_catalog.configuration import settings
from gettext_catalog.i18n.loader import CatalogLoader, JSONCatalogLoader
from gettext_catalog.i18n.translator import Translator
from gettext_catalog.logging import get_module_logger

logger = get_module_logger()


def create_translator(
    catalog_dir: Optional[Path] = None,
    locale: Optional[str] = None,
    domain: Optional[str] = None,
    loader_class: type[CatalogLoader] = JSONCatalogLoader,
    preload: bool = True,
) -> Translator:
    """Create and configure a Translator instance.

    Args:
        catalog_dir: Directory of catalog files (default: I18N_CATALOG_DIR).
        locale: Active locale (default: I18N_DEFAULT_LOCALE).
        domain: Active domain (default: I18N_DEFAULT_DOMAIN).
        loader_class: CatalogLoader implementation reading the directory.
        preload: Whether to load every catalog immediately. Otherwise call
            translator.load_catalogs() when the catalogs are needed.

    Returns:
        Translator: Configured translator instance

    Raises:
        ValueError: If catalog_dir does not exist

    Usage:
        # Use defaults from the environment
        translator = create_translator()

        # YAML catalogs from a custom directory
        translator = create_translator(
            catalog_dir=Path("/srv/locales"),
            loader_class=YAMLCatalogLoader,
        )
    """
    if catalog_dir is None and settings.i18n.CATALOG_DIR:
        catalog_dir = Path(settings.i18n.CATALOG_DIR)

    loader = loader_class(catalog_dir) if catalog_dir is not None else None
    translator = Translator(
        locale=locale, domain=domain, settings=settings.i18n, loader=loader
    )

    if loader is None:
        logger.info("translator_created_without_catalogs")
        return translator

    if preload:
        count = translator.load_catalogs()
        logger.info(
            "translator_created_with_preload",
            catalog_dir=str(catalog_dir),
            catalog_count=count,
        )
    else:
        logger.info("translator_created_lazy", catalog_dir=str(catalog_dir))

    return translator
