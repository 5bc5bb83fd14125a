"""Feature-level fixtures for i18n system tests.

Provides catalog directories and translators preloaded with French data.
"""

import json

import pytest
import yaml

from tests.factories.i18n import (
    CTX,
    make_messages,
    make_structured_catalog,
    make_translator,
)


@pytest.fixture
def fr_translator():
    """Translator on "fr" with singular, plural and context entries."""
    return make_translator(
        locale="fr",
        plural_forms="nplurals=2; plural=n>1;",
        messages=make_messages(),
    )


@pytest.fixture
def temp_catalog_dir(tmp_path):
    """Create a directory with JSON catalogs.

    Returns a directory structure like:
    - messages.fr.json
    - shop.fr.json
    - de.json (default domain)
    """
    catalogs = {
        "messages.fr.json": make_structured_catalog(
            language="fr",
            plural_forms="nplurals=2; plural=n>1;",
            messages={
                "apple": "pomme",
                "There is %1 apple": ["Il y a %1 pomme", "Il y a %1 pommes"],
            },
        ),
        "shop.fr.json": make_structured_catalog(
            language="fr_FR.UTF-8",
            messages={"Cart": "Panier", f"menu{CTX}Open": "Ouvrir"},
        ),
        "de.json": make_structured_catalog(
            language="de",
            plural_forms="nplurals=2; plural=1;",
            messages={"apple": "Apfel"},
        ),
    }
    for name, data in catalogs.items():
        with open(tmp_path / name, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False)
    return tmp_path


@pytest.fixture
def temp_yaml_catalog_dir(tmp_path):
    """Create a directory with YAML catalogs (messages.fr.yml, shop.de.yaml)."""
    with open(tmp_path / "messages.fr.yml", "w", encoding="utf-8") as f:
        yaml.dump(
            make_structured_catalog(
                messages={"apple": "pomme", "%1 apple": ["%1 pomme", "%1 pommes"]}
            ),
            f,
            allow_unicode=True,
        )
    with open(tmp_path / "shop.de.yaml", "w", encoding="utf-8") as f:
        yaml.dump(
            make_structured_catalog(language="de", messages={"Cart": "Warenkorb"}),
            f,
            allow_unicode=True,
        )
    return tmp_path
