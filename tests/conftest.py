import pytest

from src.common.settings import get_settings

SETTINGS_ENV_VARS = (
    "LOG_JSON",
    "LOG_LEVEL",
    "API_HOST",
    "API_PORT",
    "MASK_REGEX_MAX_LENGTH",
)


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def documented_cases():
    return [
        ({"tipo": "cpf", "campo": "12345678901"}, "123.456.789-01"),
        ({"tipo": "cnpj", "campo": "12345678000199"}, "12.345.678/0001-99"),
        ({"tipo": "numero", "campo": "1234567", "formato": "9.999.999"}, "1.234.567"),
        ({"tipo": "monetario", "campo": "123456", "formato": "R$ 9.999,99"}, "R$ 1.234,56"),
        ({"tipo": "monetario", "campo": "5", "formato": "R$ 9.999,99"}, "R$ 0,05"),
        ({"tipo": "regex", "campo": "2023-ABC", "formato": r"^\d{4}-[A-Z]{3}$"}, "2023-ABC"),
        ({"tipo": "regex", "campo": "2023-abc", "formato": r"^\d{4}-[A-Z]{3}$"}, ""),
        ({"tipo": "regex", "campo": "anything", "formato": "[unclosed"}, "anything"),
    ]
