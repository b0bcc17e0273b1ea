"""Shared test fixtures."""
import pytest
import structlog
from numstr_format.config import Settings
from numstr_format.international.locale_defaults import build_format_spec
from numstr_format.models.schema import NumberFieldSpec, Justification


@pytest.fixture(autouse=True)
def _reset_structlog():
    """Undo setup_logging() so no test keeps logging to another test's captured stderr."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def mock_settings(monkeypatch):
    """Settings with the environment cleared of NUMSTR_ overrides."""
    for name in ("DEFAULT_LOCALE", "DEFAULT_CURRENCY", "DEFAULT_CURRENCY_VARIANT",
                 "DEFAULT_FIELD_LENGTH", "DEFAULT_JUSTIFICATION", "LOG_LEVEL"):
        monkeypatch.delenv(f"NUMSTR_{name}", raising=False)
    return Settings()


@pytest.fixture
def field_10():
    return NumberFieldSpec(length=10, justification=Justification.RIGHT)


@pytest.fixture
def us_currency_spec(field_10):
    return build_format_spec("US", variant="minus", field=field_10)


@pytest.fixture
def fr_currency_spec(field_10):
    return build_format_spec("FR", currency=True, field=field_10)
