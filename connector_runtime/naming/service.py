"""
Naming Service — binds resources under JNDI-style names.

The in-memory implementation stands in for the server's naming service;
anything providing publish/unpublish with NamingError on failure can be
plugged into the deployer instead.
"""

import logging
from typing import Any, Dict, List, Optional, Protocol

from pydantic import BaseModel

from connector_runtime.models.config import ConnectorRuntimeConfig

logger = logging.getLogger(__name__)


class NamingError(Exception):
    """Raised when a name cannot be bound or unbound."""
    pass


class ResourceInfo(BaseModel):
    """Key of a published resource: its name plus owning application/module."""

    name: str
    application: Optional[str] = None
    module: Optional[str] = None

    model_config = {"frozen": True}

    def __str__(self) -> str:
        return f"ResourceInfo[name={self.name}, application={self.application}, module={self.module}]"


class NamingService(Protocol):
    def publish(self, info: ResourceInfo, payload: Any, rebind: bool = True) -> None:
        ...

    def unpublish(self, info: ResourceInfo) -> None:
        ...


class InMemoryNamingService:
    """Dict-backed naming service."""

    def __init__(self):
        self._bindings: Dict[ResourceInfo, Any] = {}

    def publish(self, info: ResourceInfo, payload: Any, rebind: bool = True) -> None:
        if not rebind and info in self._bindings:
            raise NamingError(f"Name already bound: {info}")
        self._bindings[info] = payload
        logger.debug("Published %s", info)

    def unpublish(self, info: ResourceInfo) -> None:
        if info not in self._bindings:
            raise NamingError(f"Name not bound: {info}")
        del self._bindings[info]
        logger.debug("Unpublished %s", info)

    def lookup(self, info: ResourceInfo) -> Optional[Any]:
        return self._bindings.get(info)

    def is_bound(self, info: ResourceInfo) -> bool:
        return info in self._bindings

    def bindings(self) -> List[ResourceInfo]:
        return list(self._bindings)


def derive_resource_name(
    resource_id: Optional[str],
    name: str,
    config: Optional[ConnectorRuntimeConfig] = None,
) -> str:
    """
    Server-internal resource name of a mail session definition.

    Component and module scoped names are only unique within their owner,
    so they are qualified with the resource id first.
    """
    config = config or ConnectorRuntimeConfig()
    derived = name
    if resource_id and (
        name.startswith(config.comp_scope_prefix)
        or name.startswith(config.module_scope_prefix)
    ):
        derived = f"{resource_id}/{name}"
    return f"{config.mail_session_namespace}{derived}"
