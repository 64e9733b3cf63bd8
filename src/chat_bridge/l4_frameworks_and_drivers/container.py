"""Dependency container — composition root for wiring all layers together."""

from __future__ import annotations

from chat_bridge.l1_entities.config import AppConfig
from chat_bridge.l2_use_cases.ports.config_loader import ConfigLoader
from chat_bridge.l2_use_cases.ports.transport import Transport
from chat_bridge.l2_use_cases.request_bridge import RequestBridge
from chat_bridge.l3_interface_adapters.controllers.chat_controller import ChatController
from chat_bridge.l3_interface_adapters.gateways.httpx_transport import HttpxTransport
from chat_bridge.l3_interface_adapters.gateways.yaml_config_loader import YamlConfigLoader
from chat_bridge.l4_frameworks_and_drivers.config import resolve_api_key


class DependencyContainer:
    """Creates and wires all concrete instances. Easy to override for testing."""

    def __init__(
        self,
        config: AppConfig,
        api_key: str | None = None,
        transport: Transport | None = None,
    ) -> None:
        self.config = config
        self.api_key = api_key if api_key is not None else resolve_api_key(config)

        self.transport: Transport = transport or HttpxTransport(timeout=config.transport.timeout)
        self.bridge = RequestBridge(self.transport)
        self.controller = ChatController(
            bridge=self.bridge,
            api_key=self.api_key,
            greeting=config.chat.greeting,
        )

    @staticmethod
    def config_loader() -> ConfigLoader:
        return YamlConfigLoader()
