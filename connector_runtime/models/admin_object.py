"""Admin objects as declared in a resource adapter's deployment descriptor."""

from typing import Dict, List, Optional

from pydantic import BaseModel

from connector_runtime.models.properties import (
    ConfigProperty,
    confidential_property_names,
    declared_properties,
)


class AdminObjectDefinition(BaseModel):
    """One `adminobject` entry of a connector descriptor."""

    interface_name: str                     # e.g., "jakarta.jms.Queue"
    class_name: Optional[str] = None        # Implementation class, may be absent
    config_properties: List[ConfigProperty] = []

    def declared_properties(self) -> Dict[str, Optional[str]]:
        return declared_properties(self.config_properties)

    def confidential_property_names(self) -> List[str]:
        return confidential_property_names(self.config_properties)


class ConnectorDescriptor(BaseModel):
    """The parsed descriptor of one deployed resource adapter (rar)."""

    name: str                               # rar name
    admin_objects: List[AdminObjectDefinition] = []
