"""Runtime configuration for resource lookup and registration."""

from pydantic import BaseModel

from connector_runtime.models.mail_session import MAIL_SESSION_INTERFACE


class ConnectorRuntimeConfig(BaseModel):
    """Configuration for the registration tracker and mail session deployer."""

    app_scope_prefix: str = "java:app/"
    global_scope_prefix: str = "java:global/"
    module_scope_prefix: str = "java:module/"
    comp_scope_prefix: str = "java:comp/"
    mail_session_namespace: str = "__mailsession_definition/"
    mail_session_interface: str = MAIL_SESSION_INTERFACE
