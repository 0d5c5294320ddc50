"""Connector runtime data models."""

from connector_runtime.models.admin_object import AdminObjectDefinition, ConnectorDescriptor
from connector_runtime.models.application import (
    ApplicationDescriptor,
    BundleDescriptor,
    BundleType,
    ComponentDescriptor,
)
from connector_runtime.models.config import ConnectorRuntimeConfig
from connector_runtime.models.mail_session import MAIL_SESSION_INTERFACE, MailSessionDefinition
from connector_runtime.models.properties import ConfigProperty, ConfiguredResource, PropertyBag

__all__ = [
    "AdminObjectDefinition",
    "ApplicationDescriptor",
    "BundleDescriptor",
    "BundleType",
    "ComponentDescriptor",
    "ConfigProperty",
    "ConfiguredResource",
    "ConnectorDescriptor",
    "ConnectorRuntimeConfig",
    "MAIL_SESSION_INTERFACE",
    "MailSessionDefinition",
    "PropertyBag",
]
