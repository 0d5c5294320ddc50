"""
Registration Tracker — publishes each named resource at most once.

State per (application, name): Undeployed --register--> Deployed
--unregister--> Undeployed. Transitions into the current state are no-ops.

Not thread-safe for the same entity: the deployed check and the state
update are not atomic.
"""

import logging
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from connector_runtime.models.config import ConnectorRuntimeConfig
from connector_runtime.models.mail_session import MailSessionDefinition
from connector_runtime.naming.service import NamingError, NamingService, ResourceInfo

logger = logging.getLogger(__name__)


class DeploymentState(str, Enum):
    UNDEPLOYED = "undeployed"
    DEPLOYED = "deployed"


class RegistrationTracker:
    """Owns the deployed/undeployed state of published definitions."""

    def __init__(
        self,
        naming_service: NamingService,
        config: Optional[ConnectorRuntimeConfig] = None,
    ):
        self.naming_service = naming_service
        self.config = config or ConnectorRuntimeConfig()
        self._published: Dict[Tuple[str, str], ResourceInfo] = {}

    def is_eligible(self, name: str) -> bool:
        """Only application and global scoped names are published."""
        return name.startswith(self.config.app_scope_prefix) or name.startswith(
            self.config.global_scope_prefix
        )

    def state_of(self, app_name: str, definition: MailSessionDefinition) -> DeploymentState:
        if (app_name, definition.name) in self._published:
            return DeploymentState.DEPLOYED
        return DeploymentState.UNDEPLOYED

    def is_deployed(self, app_name: str, definition: MailSessionDefinition) -> bool:
        return self.state_of(app_name, definition) == DeploymentState.DEPLOYED

    def deployed_names(self, app_name: Optional[str] = None) -> List[str]:
        return [
            name for (app, name) in self._published
            if app_name is None or app == app_name
        ]

    def register_if_absent(
        self,
        app_name: str,
        definition: MailSessionDefinition,
        payload: Any,
    ) -> bool:
        """
        Publish a definition unless it already is.

        Returns True only if this call published it. Naming failures are
        logged and reported as False so a batch can continue.
        """
        if self.is_deployed(app_name, definition):
            return False

        if definition.name.startswith(self.config.app_scope_prefix):
            definition.resource_id = app_name

        if not self.is_eligible(definition.name):
            logger.debug(
                "Skipping mail-session [%s] of application [%s]: not application or global scoped",
                definition.name, app_name,
            )
            return False

        info = ResourceInfo(name=definition.name, application=app_name)
        try:
            self.naming_service.publish(info, payload, rebind=True)
        except NamingError as e:
            logger.warning(
                "exception while registering mail-session [%s] of application [%s]: %s",
                definition.name, app_name, e,
            )
            return False

        self._published[(app_name, definition.name)] = info
        return True

    def unregister_if_deployed(self, app_name: str, definition: MailSessionDefinition) -> bool:
        """
        Unpublish a deployed definition.

        The state is cleared even when unpublishing fails. Returns True if
        the unpublish succeeded, False on failure or when not deployed.
        """
        info = self._published.pop((app_name, definition.name), None)
        if info is None:
            return False

        try:
            self.naming_service.unpublish(info)
        except NamingError as e:
            logger.warning(
                "exception while unregistering mail-session [%s]: %s", definition.name, e
            )
            return False
        return True
