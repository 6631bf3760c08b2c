"""Domain protocols (ports) package.

This package contains protocol definitions that the domain layer needs.
Infrastructure adapters implement these protocols without inheritance.

IMPORTANT: Re-exports are ONLY for protocols defined in this package.
Do NOT re-export from other domain subpackages (events, entities) to avoid
circular import risks.

Usage:
    from src.domain.protocols import KeyValueStoreProtocol, EventBusProtocol
"""

from src.domain.protocols.application_repository import ApplicationRepository
from src.domain.protocols.event_bus_protocol import (
    EventBusProtocol,
    EventHandler,
    Unsubscribe,
)
from src.domain.protocols.key_value_store_protocol import KeyValueStoreProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol

__all__ = [
    "ApplicationRepository",
    "EventBusProtocol",
    "EventHandler",
    "KeyValueStoreProtocol",
    "LoggerProtocol",
    "Unsubscribe",
]
