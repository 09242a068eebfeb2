import pytest

from tosspay_connect.processors.registry import get_processor_by_name, register_processor, reset_registry
from tosspay_connect.processors.tosspayments.processor import TossPaymentsOptions, TossPaymentsProcessor
from tosspay_connect.settings import Settings, settings
from tosspay_connect.utils.errors import ConfigurationError


@pytest.fixture
def configured(monkeypatch):
    monkeypatch.setattr(settings, "TOSSPAYMENTS_SECRET_KEY", "test_sk_123")
    monkeypatch.setattr(settings, "TOSSPAYMENTS_API_VERSION", "2022-11-16")


@pytest.mark.parametrize("name", ["tosspayments", "TossPayments", " toss ", "toss_payments", "tosspay"])
def test_aliases_resolve_to_one_instance(configured, name):
    processor = get_processor_by_name(name)
    assert isinstance(processor, TossPaymentsProcessor)
    assert processor is get_processor_by_name("tosspayments")


@pytest.mark.parametrize("name", [None, "", "stripe"])
def test_unknown_names(configured, name):
    assert get_processor_by_name(name) is None


def test_missing_settings_raise_configuration_error(monkeypatch):
    monkeypatch.setattr(settings, "TOSSPAYMENTS_SECRET_KEY", None)
    with pytest.raises(ConfigurationError):
        get_processor_by_name("tosspayments")


def test_register_and_reset(processor, configured):
    register_processor("tosspayments", processor)
    assert get_processor_by_name("toss") is processor

    reset_registry()
    rebuilt = get_processor_by_name("toss")
    assert rebuilt is not processor
    assert isinstance(rebuilt, TossPaymentsProcessor)


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("TOSSPAYMENTS_SECRET_KEY", "env_sk")
    monkeypatch.setenv("TOSSPAYMENTS_API_VERSION", "2022-11-16")
    monkeypatch.setenv("TOSSPAYMENTS_DEBUG", "true")
    monkeypatch.setenv("TOSSPAYMENTS_TIMEOUT_SEC", "5")

    options = TossPaymentsOptions.from_settings(Settings())

    assert options.secret_key == "env_sk"
    assert options.debug is True
    assert options.timeout_sec == 5
    assert options.base_url == "https://api.tosspayments.com"
