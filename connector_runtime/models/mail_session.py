"""Mail session definitions discovered in deployed applications."""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from connector_runtime.models.properties import (
    ConfigProperty,
    confidential_property_names,
    declared_properties,
)

MAIL_SESSION_INTERFACE = "jakarta.mail.Session"


class MailSessionDefinition(BaseModel):
    """
    A `@MailSessionDefinition` / `<mail-session>` declaration.

    Carries no deployment state; whether it is published is tracked by the
    RegistrationTracker.
    """

    name: str                               # JNDI name, e.g., "java:app/mail/Session"
    interface_name: str = MAIL_SESSION_INTERFACE
    class_name: Optional[str] = None
    description: Optional[str] = None
    store_protocol: Optional[str] = None    # e.g., "imap"
    transport_protocol: Optional[str] = None  # e.g., "smtp"
    host: Optional[str] = None
    user: Optional[str] = None
    password: Optional[str] = None
    from_address: Optional[str] = Field(default=None, alias="from")
    config_properties: List[ConfigProperty] = []
    resource_id: Optional[str] = None       # Owning application / component id

    model_config = {"populate_by_name": True}

    def get_property(self, name: str) -> Optional[str]:
        return self.declared_properties().get(name)

    def declared_properties(self) -> Dict[str, Optional[str]]:
        return declared_properties(self.config_properties)

    def confidential_property_names(self) -> List[str]:
        return confidential_property_names(self.config_properties)
