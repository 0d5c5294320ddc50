"""
Connector Runtime API — FastAPI endpoints.

Exposes the runtime's functionality via a REST API for:
- Connector descriptor management
- Admin object lookups and property resolution
- Application deployment (mail session registration)
- Naming service inspection
"""

from typing import List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from connector_runtime.admin_objects.parser import AdminObjectConfigParser
from connector_runtime.deployer.mail_session import MailSessionDeployer
from connector_runtime.errors import (
    IntrospectionError,
    InvalidArgumentError,
    ResourceNotFoundError,
)
from connector_runtime.models.admin_object import ConnectorDescriptor
from connector_runtime.models.application import ApplicationDescriptor
from connector_runtime.models.config import ConnectorRuntimeConfig
from connector_runtime.naming.service import InMemoryNamingService, NamingService
from connector_runtime.properties.introspection import PropertyIntrospector
from connector_runtime.store.descriptors import DescriptorStore


# --- Request/Response Models ---

class RegistrationResponse(BaseModel):
    app_name: str
    mail_sessions: List[str]


# --- Application Factory ---

def create_app(
    store: Optional[DescriptorStore] = None,
    introspector: Optional[PropertyIntrospector] = None,
    naming_service: Optional[NamingService] = None,
    config: Optional[ConnectorRuntimeConfig] = None,
) -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(
        title="Connector Runtime API",
        description="Admin object properties and mail session registration",
        version="0.1.0",
    )

    # Initialize components
    ds = store or DescriptorStore()
    parser = AdminObjectConfigParser(introspector)
    ns = naming_service or InMemoryNamingService()
    cfg = config or ConnectorRuntimeConfig()
    deployer = MailSessionDeployer(ns, config=cfg)

    # Store components on app state for access in endpoints
    app.state.store = ds
    app.state.parser = parser
    app.state.naming_service = ns
    app.state.deployer = deployer

    def _connector(rar_name: str) -> ConnectorDescriptor:
        desc = ds.get_connector(rar_name)
        if desc is None:
            raise HTTPException(404, "Connector not found")
        return desc

    # === CONNECTORS ===

    @app.post("/connectors")
    def register_connector(desc: ConnectorDescriptor):
        """Register a parsed connector descriptor."""
        ds.upsert_connector(desc)
        return {"status": "registered", "name": desc.name}

    @app.get("/connectors")
    def list_connectors():
        return [c.name for c in ds.list_connectors()]

    @app.delete("/connectors/{rar_name}")
    def remove_connector(rar_name: str):
        if not ds.remove_connector(rar_name):
            raise HTTPException(404, "Connector not found")
        return {"status": "removed", "name": rar_name}

    # === ADMIN OBJECTS ===

    @app.get("/connectors/{rar_name}/admin-objects/interfaces")
    def get_interface_names(rar_name: str):
        return parser.get_admin_object_interface_names(_connector(rar_name))

    @app.get("/connectors/{rar_name}/admin-objects/classes")
    def get_class_names(rar_name: str, interface: str):
        names = parser.get_admin_object_class_names(_connector(rar_name), interface)
        return sorted(names) if names is not None else None

    @app.get("/connectors/{rar_name}/admin-objects/exists")
    def has_admin_object(rar_name: str, interface: str, class_name: str):
        return {"exists": parser.has_admin_object(_connector(rar_name), interface, class_name)}

    @app.get("/connectors/{rar_name}/admin-objects/properties")
    def get_java_bean_props(rar_name: str, interface: str, class_name: Optional[str] = None):
        """Resolved JavaBean properties (null when there is nothing to resolve)."""
        try:
            return parser.get_java_bean_props(
                _connector(rar_name), interface, class_name, rar_name
            )
        except InvalidArgumentError as e:
            raise HTTPException(400, str(e))
        except ResourceNotFoundError as e:
            raise HTTPException(404, str(e))
        except IntrospectionError as e:
            raise HTTPException(422, str(e))

    @app.get("/connectors/{rar_name}/admin-objects/confidential")
    def get_confidential_properties(
        rar_name: str, interface: str, class_name: Optional[str] = None
    ):
        keys = [interface] if class_name is None else [interface, class_name]
        try:
            return parser.get_confidential_properties(_connector(rar_name), rar_name, *keys)
        except ResourceNotFoundError as e:
            raise HTTPException(404, str(e))

    # === APPLICATIONS ===

    @app.post("/applications", response_model=RegistrationResponse)
    def deploy_application(application: ApplicationDescriptor):
        """Record an application and register its mail sessions."""
        previous = ds.get_application(application.app_name)
        if previous is not None:
            deployer.unregister_mail_sessions(previous)
        ds.upsert_application(application)
        registered = deployer.register_mail_sessions(application)
        return RegistrationResponse(app_name=application.app_name, mail_sessions=registered)

    @app.delete("/applications/{app_name}", response_model=RegistrationResponse)
    def undeploy_application(app_name: str):
        application = ds.remove_application(app_name)
        if application is None:
            raise HTTPException(404, "Application not found")
        unregistered = deployer.unregister_mail_sessions(application)
        return RegistrationResponse(app_name=app_name, mail_sessions=unregistered)

    @app.get("/applications/{app_name}/mail-sessions")
    def get_deployed_mail_sessions(app_name: str):
        if ds.get_application(app_name) is None:
            raise HTTPException(404, "Application not found")
        return deployer.tracker.deployed_names(app_name)

    # === NAMING ===

    @app.get("/naming/bindings")
    def get_bindings():
        """Names currently bound in the in-memory naming service."""
        if not isinstance(ns, InMemoryNamingService):
            raise HTTPException(404, "Naming service does not expose its bindings")
        return [b.model_dump(mode="json") for b in ns.bindings()]

    @app.get("/state")
    def get_state():
        return ds.get_state_snapshot()

    return app


# Default application instance
app = create_app()
