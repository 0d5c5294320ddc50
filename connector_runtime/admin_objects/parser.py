"""
Admin Object Config Parser — JavaBean properties of a resource adapter's admin objects.

An admin object is identified within its connector descriptor by interface
name, optionally narrowed by implementation class. Its resolved properties
are the declared values where present, otherwise the defaults introspected
from the implementation class, otherwise "".
"""

import logging
from typing import List, Optional, Set

from connector_runtime.errors import InvalidArgumentError
from connector_runtime.models.admin_object import AdminObjectDefinition, ConnectorDescriptor
from connector_runtime.models.properties import PropertyBag
from connector_runtime.properties.introspection import BeanIntrospector, PropertyIntrospector
from connector_runtime.properties.merger import resolve_properties
from connector_runtime.registry import lookup

logger = logging.getLogger(__name__)


def _require_descriptor(desc: Optional[ConnectorDescriptor]) -> ConnectorDescriptor:
    if desc is None:
        raise InvalidArgumentError("Invalid arguments: connector descriptor is required")
    return desc


class AdminObjectConfigParser:
    """Resolves admin object definitions and their properties."""

    def __init__(self, introspector: Optional[PropertyIntrospector] = None):
        self.introspector = introspector or BeanIntrospector()

    def get_admin_object(
        self,
        desc: Optional[ConnectorDescriptor],
        interface_name: Optional[str],
        class_name: Optional[str] = None,
    ) -> Optional[AdminObjectDefinition]:
        desc = _require_descriptor(desc)
        return lookup.find_entity(desc.admin_objects, interface_name, class_name)

    def get_java_bean_props(
        self,
        desc: Optional[ConnectorDescriptor],
        interface_name: Optional[str],
        class_name: Optional[str] = None,
        rar_name: Optional[str] = None,
    ) -> Optional[PropertyBag]:
        """
        Resolved JavaBean properties of one admin object.

        Returns None when the descriptor declares no admin objects or the
        matching admin object has no implementation class. Raises
        ResourceNotFoundError when admin objects exist but none matches.
        """
        admin_object = self.get_admin_object(desc, interface_name, class_name)
        if admin_object is None:
            return None
        return resolve_properties(admin_object, self.introspector, rar_name or desc.name)

    def get_admin_object_interface_names(
        self, desc: Optional[ConnectorDescriptor]
    ) -> Optional[List[str]]:
        return lookup.list_interface_names(_require_descriptor(desc).admin_objects)

    def get_admin_object_class_names(
        self, desc: Optional[ConnectorDescriptor], interface_name: str
    ) -> Optional[Set[str]]:
        return lookup.list_class_names(_require_descriptor(desc).admin_objects, interface_name)

    def has_admin_object(
        self,
        desc: Optional[ConnectorDescriptor],
        interface_name: Optional[str],
        class_name: Optional[str],
    ) -> bool:
        return lookup.has_entity(_require_descriptor(desc).admin_objects, interface_name, class_name)

    def get_confidential_properties(
        self,
        desc: Optional[ConnectorDescriptor],
        rar_name: Optional[str],
        *key_fields: Optional[str],
    ) -> List[str]:
        """Confidential property names; key_fields is (interface_name[, class_name])."""
        if not key_fields or key_fields[0] is None:
            raise InvalidArgumentError("admin object interface must be specified")
        names = lookup.list_confidential_property_names(
            _require_descriptor(desc).admin_objects, *key_fields
        )
        logger.debug(
            "Admin object %s of rar [%s] has %d confidential properties",
            key_fields[0], rar_name, len(names),
        )
        return names
