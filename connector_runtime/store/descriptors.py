"""
Descriptor Store — the connector and application descriptors known to the runtime.

Updated by: rar deployment + application deployment
Queried by: Admin object lookups + Mail session (un)registration
"""

from typing import Dict, List, Optional

from connector_runtime.models.admin_object import ConnectorDescriptor
from connector_runtime.models.application import ApplicationDescriptor


class DescriptorStore:
    """
    In-memory descriptor store.
    Descriptors are parsed elsewhere; this only keeps them by name.
    """

    def __init__(self):
        self._connectors: Dict[str, ConnectorDescriptor] = {}
        self._applications: Dict[str, ApplicationDescriptor] = {}

    def upsert_connector(self, desc: ConnectorDescriptor) -> None:
        """Insert or replace a connector descriptor, keyed by rar name."""
        self._connectors[desc.name] = desc

    def get_connector(self, rar_name: str) -> Optional[ConnectorDescriptor]:
        return self._connectors.get(rar_name)

    def remove_connector(self, rar_name: str) -> bool:
        if rar_name in self._connectors:
            del self._connectors[rar_name]
            return True
        return False

    def list_connectors(self) -> List[ConnectorDescriptor]:
        return list(self._connectors.values())

    def upsert_application(self, application: ApplicationDescriptor) -> None:
        self._applications[application.app_name] = application

    def get_application(self, app_name: str) -> Optional[ApplicationDescriptor]:
        return self._applications.get(app_name)

    def remove_application(self, app_name: str) -> Optional[ApplicationDescriptor]:
        """Remove and return an application descriptor."""
        return self._applications.pop(app_name, None)

    def list_applications(self) -> List[ApplicationDescriptor]:
        return list(self._applications.values())

    def get_state_snapshot(self) -> dict:
        """Serializable snapshot of all known descriptors."""
        return {
            "connectors": [c.model_dump(mode="json") for c in self._connectors.values()],
            "applications": [a.model_dump(mode="json") for a in self._applications.values()],
        }
