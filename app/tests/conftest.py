import pytest

from tests.factories.i18n import make_i18n_settings, make_translator


@pytest.fixture
def i18n_settings():
    """I18nSettings with the library defaults, ignoring the environment."""
    return make_i18n_settings()


@pytest.fixture
def translator():
    """Fresh Translator on the "en" locale and "messages" domain."""
    return make_translator()
