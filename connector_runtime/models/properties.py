"""Config properties — declared name/value pairs of a resource definition."""

from typing import Dict, List, Optional, Protocol

from pydantic import BaseModel

# Resolved property name -> value mapping.
PropertyBag = Dict[str, str]


class ConfigProperty(BaseModel):
    """A single declared property (`config-property` / annotation attribute)."""

    name: str
    value: Optional[str] = None
    type: str = "java.lang.String"
    description: Optional[str] = None
    confidential: bool = False


class ConfiguredResource(Protocol):
    """Capability shared by admin objects and mail sessions for lookups."""

    interface_name: str
    class_name: Optional[str]
    config_properties: List[ConfigProperty]

    def declared_properties(self) -> Dict[str, Optional[str]]:
        ...

    def confidential_property_names(self) -> List[str]:
        ...


def declared_properties(config_properties: List[ConfigProperty]) -> Dict[str, Optional[str]]:
    """Name -> declared value; later declarations overwrite earlier ones."""
    declared: Dict[str, Optional[str]] = {}
    for prop in config_properties:
        declared[prop.name] = prop.value
    return declared


def confidential_property_names(config_properties: List[ConfigProperty]) -> List[str]:
    return [p.name for p in config_properties if p.confidential]
