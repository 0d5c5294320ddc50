"""Deployed application structure — where mail session definitions live."""

from enum import Enum
from typing import List

from pydantic import BaseModel

from connector_runtime.models.mail_session import MailSessionDefinition


class BundleType(str, Enum):
    WEB = "web"
    EJB = "ejb"
    APPCLIENT = "appclient"
    CONNECTOR = "connector"


class ComponentDescriptor(BaseModel):
    """An EJB, EJB interceptor or managed bean with its own JNDI environment."""

    name: str
    mail_sessions: List[MailSessionDefinition] = []


class BundleDescriptor(BaseModel):
    """A module of an application, or an extension descriptor of one."""

    name: str
    bundle_type: BundleType = BundleType.WEB
    mail_sessions: List[MailSessionDefinition] = []     # JNDI environment
    ejbs: List[ComponentDescriptor] = []
    interceptors: List[ComponentDescriptor] = []
    managed_beans: List[ComponentDescriptor] = []
    extension_descriptors: List["BundleDescriptor"] = []


class ApplicationDescriptor(BaseModel):
    app_name: str
    bundles: List[BundleDescriptor] = []


BundleDescriptor.model_rebuild()
