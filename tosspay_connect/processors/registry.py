from typing import Callable, Dict, Optional
from ..settings import settings
from .base import PaymentProcessor
from .tosspayments.processor import TossPaymentsOptions, TossPaymentsProcessor

# Factories, built on first use so that a missing secret only fails the
# requests that need the processor, not the import.
_factories: Dict[str, Callable[[], PaymentProcessor]] = {
    "tosspayments": lambda: TossPaymentsProcessor(TossPaymentsOptions.from_settings(settings)),
}

_instances: Dict[str, PaymentProcessor] = {}

# Processor name aliases -> canonical registry keys
_aliases = {
    "toss": "tosspayments",
    "tosspay": "tosspayments",
    "toss_payments": "tosspayments",
    "toss-payments": "tosspayments",
}

def get_processor_by_name(name: Optional[str]) -> Optional[PaymentProcessor]:
    """May raise ConfigurationError when the processor can't be built from settings."""
    if not name:
        return None
    n = name.strip().lower()
    key = _aliases.get(n, n)
    if key not in _factories:
        return None
    if key not in _instances:
        _instances[key] = _factories[key]()
    return _instances[key]

def register_processor(name: str, processor: PaymentProcessor) -> None:
    _instances[name.strip().lower()] = processor
    _factories.setdefault(name.strip().lower(), lambda: processor)

def reset_registry() -> None:
    _instances.clear()
