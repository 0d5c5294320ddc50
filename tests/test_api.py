"""Tests for the FastAPI API endpoints."""

import pytest
from fastapi.testclient import TestClient

from connector_runtime.api.app import create_app
from connector_runtime.naming.service import InMemoryNamingService
from connector_runtime.store.descriptors import DescriptorStore


class StubIntrospector:
    def introspect(self, class_name, known_properties, rar_name=None):
        return {"Persistent": "false", "Name": "default"}


CONNECTOR = {
    "name": "jmsra",
    "admin_objects": [
        {
            "interface_name": "jakarta.jms.Queue",
            "class_name": "com.example.Queue",
            "config_properties": [
                {"name": "Name", "value": "orders"},
                {"name": "Password", "confidential": True},
            ],
        },
        {"interface_name": "jakarta.jms.Queue", "class_name": "com.example.OtherQueue"},
        {"interface_name": "com.example.Marker"},
    ],
}

APPLICATION = {
    "app_name": "shop",
    "bundles": [
        {
            "name": "shop-web",
            "mail_sessions": [
                {"name": "java:app/mail/Orders", "host": "smtp.example.com"},
                {"name": "java:comp/env/mail/Local"},
            ],
        },
        {
            "name": "shop-ejb",
            "bundle_type": "ejb",
            "ejbs": [{"name": "OrderBean", "mail_sessions": [{"name": "java:global/mail/Shared"}]}],
        },
    ],
}


@pytest.fixture
def client():
    """Create a test client with fresh components."""
    app = create_app(
        store=DescriptorStore(),
        introspector=StubIntrospector(),
        naming_service=InMemoryNamingService(),
    )
    return TestClient(app)


@pytest.fixture
def client_with_connector(client):
    client.post("/connectors", json=CONNECTOR)
    return client


class TestConnectorEndpoints:
    def test_register_and_list(self, client):
        response = client.post("/connectors", json=CONNECTOR)
        assert response.status_code == 200
        assert response.json()["name"] == "jmsra"
        assert client.get("/connectors").json() == ["jmsra"]

    def test_remove(self, client_with_connector):
        assert client_with_connector.delete("/connectors/jmsra").status_code == 200
        assert client_with_connector.delete("/connectors/jmsra").status_code == 404

    def test_invalid_descriptor(self, client):
        response = client.post("/connectors", json={"name": "bad", "admin_objects": [{}]})
        assert response.status_code == 422


class TestAdminObjectEndpoints:
    def test_interfaces(self, client_with_connector):
        response = client_with_connector.get("/connectors/jmsra/admin-objects/interfaces")
        assert response.json() == ["jakarta.jms.Queue", "jakarta.jms.Queue", "com.example.Marker"]

    def test_classes(self, client_with_connector):
        response = client_with_connector.get(
            "/connectors/jmsra/admin-objects/classes", params={"interface": "jakarta.jms.Queue"}
        )
        assert response.json() == ["com.example.OtherQueue", "com.example.Queue"]

    def test_exists(self, client_with_connector):
        response = client_with_connector.get(
            "/connectors/jmsra/admin-objects/exists",
            params={"interface": "jakarta.jms.Queue", "class_name": "com.example.OtherQueue"},
        )
        assert response.json() == {"exists": True}

    def test_properties(self, client_with_connector):
        response = client_with_connector.get(
            "/connectors/jmsra/admin-objects/properties", params={"interface": "jakarta.jms.Queue"}
        )
        assert response.status_code == 200
        assert response.json() == {"Name": "orders", "Password": "", "Persistent": "false"}

    def test_properties_without_class_is_null(self, client_with_connector):
        response = client_with_connector.get(
            "/connectors/jmsra/admin-objects/properties", params={"interface": "com.example.Marker"}
        )
        assert response.status_code == 200
        assert response.json() is None

    def test_properties_not_found(self, client_with_connector):
        response = client_with_connector.get(
            "/connectors/jmsra/admin-objects/properties", params={"interface": "jakarta.jms.Missing"}
        )
        assert response.status_code == 404
        assert "jakarta.jms.Missing" in response.json()["detail"]

    def test_unknown_connector(self, client):
        response = client.get("/connectors/nope/admin-objects/interfaces")
        assert response.status_code == 404

    def test_confidential(self, client_with_connector):
        response = client_with_connector.get(
            "/connectors/jmsra/admin-objects/confidential",
            params={"interface": "jakarta.jms.Queue", "class_name": "com.example.Queue"},
        )
        assert response.json() == ["Password"]


class TestApplicationEndpoints:
    def test_deploy_registers_mail_sessions(self, client):
        response = client.post("/applications", json=APPLICATION)
        assert response.status_code == 200
        assert response.json() == {
            "app_name": "shop",
            "mail_sessions": ["java:app/mail/Orders", "java:global/mail/Shared"],
        }

        bindings = client.get("/naming/bindings").json()
        assert {b["name"] for b in bindings} == {"java:app/mail/Orders", "java:global/mail/Shared"}

        deployed = client.get("/applications/shop/mail-sessions").json()
        assert deployed == ["java:app/mail/Orders", "java:global/mail/Shared"]

    def test_undeploy_unregisters(self, client):
        client.post("/applications", json=APPLICATION)
        response = client.delete("/applications/shop")
        assert response.status_code == 200
        assert len(response.json()["mail_sessions"]) == 2
        assert client.get("/naming/bindings").json() == []
        assert client.delete("/applications/shop").status_code == 404

    def test_state_snapshot(self, client):
        client.post("/applications", json=APPLICATION)
        state = client.get("/state").json()
        assert state["applications"][0]["app_name"] == "shop"
        assert state["connectors"] == []

    def test_redeploy_replaces_previous_mail_sessions(self, client):
        client.post("/applications", json={
            "app_name": "shop",
            "bundles": [{"name": "web", "mail_sessions": [{"name": "java:app/mail/A"}]}],
        })
        response = client.post("/applications", json={
            "app_name": "shop",
            "bundles": [{"name": "web", "mail_sessions": [{"name": "java:app/mail/B"}]}],
        })
        assert response.json()["mail_sessions"] == ["java:app/mail/B"]
        assert [b["name"] for b in client.get("/naming/bindings").json()] == ["java:app/mail/B"]

        client.delete("/applications/shop")
        assert client.get("/naming/bindings").json() == []


class TestDefaultIntrospector:
    def test_unloadable_class_is_unprocessable(self):
        client = TestClient(create_app(store=DescriptorStore(), naming_service=InMemoryNamingService()))
        client.post("/connectors", json={
            "name": "mailra",
            "admin_objects": [
                {"interface_name": "jakarta.mail.Session", "class_name": "no_such_module_xyz.Bar"},
            ],
        })
        response = client.get(
            "/connectors/mailra/admin-objects/properties",
            params={"interface": "jakarta.mail.Session"},
        )
        assert response.status_code == 422
        assert "no_such_module_xyz.Bar" in response.json()["detail"]
