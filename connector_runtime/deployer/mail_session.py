"""
Mail Session Deployer — registers mail session definitions of deployed applications.

Behavioral Contract:
- Walks every bundle of an application, its extension descriptors, EJBs,
  EJB interceptors and managed beans for mail session definitions
- Publishes each definition at most once (via the RegistrationTracker)
- A failure to publish one definition never aborts the rest of the batch
- Redeploy / enable / disable are not part of the mail session lifecycle
  and report OperationOutcome.UNSUPPORTED
"""

import logging
from enum import Enum
from typing import Any, Iterable, Iterator, List, Optional, Tuple

from pydantic import BaseModel

from connector_runtime.deployer.tracker import RegistrationTracker
from connector_runtime.models.application import (
    ApplicationDescriptor,
    BundleDescriptor,
    BundleType,
)
from connector_runtime.models.config import ConnectorRuntimeConfig
from connector_runtime.models.mail_session import MailSessionDefinition
from connector_runtime.naming.service import (
    NamingService,
    ResourceInfo,
    derive_resource_name,
)

logger = logging.getLogger(__name__)


class OperationOutcome(str, Enum):
    DONE = "done"
    UNSUPPORTED = "unsupported"


class MailSessionProperty(BaseModel):
    """Name/value pair in the shape of a config-bean `property` element."""

    name: str
    value: Optional[str] = None
    description: Optional[str] = None


class MailResourceView:
    """
    Read-only mail resource config bean backed by a MailSessionDefinition.

    This is what gets bound in the naming service, so consumers see the
    same shape as a mail resource configured by an administrator.
    """

    def __init__(self, definition: MailSessionDefinition, resource_name: str):
        self.definition = definition
        self.resource_name = resource_name

    @property
    def jndi_name(self) -> str:
        return self.resource_name

    @property
    def identity(self) -> str:
        return self.resource_name

    @property
    def store_protocol(self) -> Optional[str]:
        return self.definition.store_protocol

    @property
    def store_protocol_class(self) -> Optional[str]:
        if self.store_protocol is None:
            return None
        return self.definition.get_property(f"mail.{self.store_protocol}.class")

    @property
    def transport_protocol(self) -> Optional[str]:
        return self.definition.transport_protocol

    @property
    def transport_protocol_class(self) -> Optional[str]:
        if self.transport_protocol is None:
            return None
        return self.definition.get_property(f"mail.{self.transport_protocol}.class")

    @property
    def host(self) -> Optional[str]:
        return self.definition.host

    @property
    def user(self) -> Optional[str]:
        return self.definition.user

    @property
    def from_address(self) -> Optional[str]:
        return self.definition.from_address

    @property
    def description(self) -> Optional[str]:
        return self.definition.description

    @property
    def debug(self) -> str:
        return "true"

    @property
    def enabled(self) -> str:
        return "true"

    @property
    def object_type(self) -> Optional[str]:
        return None

    @property
    def deployment_order(self) -> Optional[str]:
        return None

    def properties(self) -> List[MailSessionProperty]:
        return [
            MailSessionProperty(name=name, value=value)
            for name, value in self.definition.declared_properties().items()
        ]

    def get_property(self, name: str) -> MailSessionProperty:
        return MailSessionProperty(name=name, value=self.definition.get_property(name))

    def get_property_value(self, name: str, default: Optional[str] = None) -> Optional[str]:
        value = self.definition.get_property(name)
        return value if value is not None else default

    def add_property(self, prop: MailSessionProperty):
        raise NotImplementedError("Not supported yet.")

    def lookup_property(self, name: str):
        raise NotImplementedError("Not supported yet.")

    def remove_property(self, name: str):
        raise NotImplementedError("Not supported yet.")

    def to_dict(self) -> dict:
        return {
            "jndi_name": self.jndi_name,
            "store_protocol": self.store_protocol,
            "store_protocol_class": self.store_protocol_class,
            "transport_protocol": self.transport_protocol,
            "transport_protocol_class": self.transport_protocol_class,
            "host": self.host,
            "user": self.user,
            "from": self.from_address,
            "description": self.description,
            "debug": self.debug,
            "enabled": self.enabled,
            "properties": [p.model_dump() for p in self.properties()],
        }


def iter_mail_sessions(bundle: BundleDescriptor) -> Iterator[MailSessionDefinition]:
    """Mail session definitions of one bundle (extension descriptors excluded)."""
    yield from bundle.mail_sessions

    if bundle.bundle_type == BundleType.EJB:
        for ejb in bundle.ejbs:
            yield from ejb.mail_sessions
        for interceptor in bundle.interceptors:
            yield from interceptor.mail_sessions

    for managed_bean in bundle.managed_beans:
        yield from managed_bean.mail_sessions


def iter_application_mail_sessions(
    application: ApplicationDescriptor,
) -> Iterator[MailSessionDefinition]:
    for bundle in application.bundles:
        yield from iter_mail_sessions(bundle)
        for extension in bundle.extension_descriptors:
            yield from iter_mail_sessions(extension)


class MailSessionDeployer:
    """Deploys mail session definitions found in applications."""

    def __init__(
        self,
        naming_service: NamingService,
        tracker: Optional[RegistrationTracker] = None,
        config: Optional[ConnectorRuntimeConfig] = None,
    ):
        self.naming_service = naming_service
        self.config = config or ConnectorRuntimeConfig()
        self.tracker = tracker or RegistrationTracker(naming_service, self.config)

    # --- Resource deployer contract ---

    def handles(self, resource: Any) -> bool:
        return isinstance(resource, MailSessionDefinition)

    def can_deploy(
        self,
        post_application_deployment: bool,
        all_resources: Iterable[Any],
        resource: Any,
    ) -> bool:
        """Mail sessions are only deployed before the application is."""
        return self.handles(resource) and not post_application_deployment

    def supports_dynamic_reconfiguration(self) -> bool:
        return False

    def proxy_classes_for_dynamic_reconfiguration(self) -> Tuple[type, ...]:
        return ()

    def validate_preserved_resource(self, old_app, new_app, resource, all_resources) -> None:
        pass

    def mail_resource_for(self, definition: MailSessionDefinition) -> MailResourceView:
        resource_name = derive_resource_name(definition.resource_id, definition.name, self.config)
        return MailResourceView(definition, resource_name)

    def deploy_resource(self, definition: MailSessionDefinition) -> OperationOutcome:
        """Bind the mail resource view under its derived resource name."""
        mail_resource = self.mail_resource_for(definition)
        self.naming_service.publish(
            ResourceInfo(name=mail_resource.jndi_name, application=definition.resource_id),
            mail_resource,
        )
        logger.debug("Mail-Session resource is deployed having resource-name [%s]", definition.name)
        return OperationOutcome.DONE

    def undeploy_resource(self, definition: MailSessionDefinition) -> OperationOutcome:
        mail_resource = self.mail_resource_for(definition)
        self.naming_service.unpublish(
            ResourceInfo(name=mail_resource.jndi_name, application=definition.resource_id)
        )
        logger.debug("Mail-Session resource is undeployed having resource-name [%s]", definition.name)
        return OperationOutcome.DONE

    def redeploy_resource(self, resource: Any) -> OperationOutcome:
        return OperationOutcome.UNSUPPORTED

    def enable_resource(self, resource: Any) -> OperationOutcome:
        return OperationOutcome.UNSUPPORTED

    def disable_resource(self, resource: Any) -> OperationOutcome:
        return OperationOutcome.UNSUPPORTED

    # --- Application registration ---

    def register_mail_sessions(self, application: ApplicationDescriptor) -> List[str]:
        """Publish every mail session of the application. Returns newly registered names."""
        registered = []
        for definition in iter_application_mail_sessions(application):
            payload = self.mail_resource_for(definition)
            if self.tracker.register_if_absent(application.app_name, definition, payload):
                registered.append(definition.name)
        logger.debug(
            "Registered %d mail-session(s) for application [%s]",
            len(registered), application.app_name,
        )
        return registered

    def unregister_mail_sessions(self, application: ApplicationDescriptor) -> List[str]:
        """Unpublish every deployed mail session of the application."""
        unregistered = []
        for definition in iter_application_mail_sessions(application):
            if self.tracker.unregister_if_deployed(application.app_name, definition):
                unregistered.append(definition.name)
        return unregistered
