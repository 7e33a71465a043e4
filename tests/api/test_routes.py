"""
HTTP-level tests: routing, status codes and the error envelope.

The app is used without its lifespan, so MongoDB is never initialized;
repository calls are monkeypatched where the routes reach them.
"""
import pytest
from unittest.mock import AsyncMock

from fastapi.testclient import TestClient

from conftest import RecordingDiscoveryBackend, make_account, make_hunt, make_synthesis
from hunting_engine.api.common.dependencies import get_entity_discovery, get_synthesis_client
from hunting_engine.api.common.errors import EXTERNAL_SERVICE_MESSAGE
from hunting_engine.api.hunting.routes import hunts as hunts_routes
from hunting_engine.api.hunting.routes import playbooks as playbooks_routes
from hunting_engine.api.main import app
from hunting_engine.errors import ExternalServiceError
from hunting_engine.services.discovery.entity_discovery import EntityDiscovery
from hunting_engine.services.hunting import hunt_orchestrator
from hunting_engine.services.playbooks import playbook_orchestrator

HUNT_ID = "65f000000000000000000001"


@pytest.fixture
def client():
    yield TestClient(app)
    app.dependency_overrides.clear()


def _use_collaborators(synthesis, discovery_backend=None):
    backend = discovery_backend or RecordingDiscoveryBackend({"US": ["Burger Co"], "UK": ["Chip Shop Ltd"]})
    app.dependency_overrides[get_synthesis_client] = lambda: synthesis
    app.dependency_overrides[get_entity_discovery] = lambda: EntityDiscovery(backend)


def _store_created_hunt(monkeypatch):
    async def fake_create_hunt(sub_channel, markets, focus_brands, max_accounts, accounts, hunt_result):
        return make_hunt(
            sub_channel=sub_channel,
            markets=list(markets),
            focusBrands=list(focus_brands),
            maxAccounts=max_accounts,
            accounts=list(accounts),
            huntResult=hunt_result,
        )

    mock = AsyncMock(side_effect=fake_create_hunt)
    monkeypatch.setattr(hunt_orchestrator, "create_hunt", mock)
    return mock


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_root_lists_endpoints(client):
    body = client.get("/").json()

    assert body["endpoints"]["hunts"]["create"] == "POST /api/hunts"


def test_unknown_route_is_404_envelope(client):
    response = client.get("/api/nothing-here")

    assert response.status_code == 404
    assert response.json()["message"] == "Route not found"


def test_create_hunt(client, monkeypatch, hunt_response_text):
    synthesis = make_synthesis(hunt_response_text)
    _use_collaborators(synthesis)
    create_hunt = _store_created_hunt(monkeypatch)

    response = client.post(
        "/api/hunts",
        json={"subChannel": "QSR", "markets": ["US", "UK"], "focusBrands": ["Pepsi"], "maxAccounts": 5},
    )

    assert response.status_code == 201
    body = response.json()
    assert body["id"] == HUNT_ID
    assert body["subChannel"] == "QSR"
    assert body["maxAccounts"] == 5
    assert body["huntResult"]["totalAccounts"] == len(body["accounts"]) == 3
    assert [s["step"] for s in body["accounts"][0]["steps"]] == list(range(1, 11))
    assert body["accounts"][0]["score"] == 100
    create_hunt.assert_awaited_once()


def test_create_hunt_validation_error(client, monkeypatch):
    synthesis = make_synthesis()
    _use_collaborators(synthesis)
    create_hunt = _store_created_hunt(monkeypatch)

    response = client.post("/api/hunts", json={"subChannel": "QSR", "markets": [], "focusBrands": ["Pepsi"]})

    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "ValidationError"
    assert [f["field"] for f in body["details"]["fields"]] == ["markets"]
    synthesis.complete.assert_not_awaited()
    create_hunt.assert_not_awaited()


def test_create_hunt_non_object_body_is_400(client):
    _use_collaborators(make_synthesis())

    response = client.post("/api/hunts", json=["QSR"])

    assert response.status_code == 400
    assert response.json()["error"] == "ValidationError"


def test_create_hunt_synthesis_failure_is_502(client, monkeypatch):
    _use_collaborators(make_synthesis(side_effect=ExternalServiceError("Synthesis call failed: 401 invalid key")))
    create_hunt = _store_created_hunt(monkeypatch)

    response = client.post("/api/hunts", json={"subChannel": "QSR", "markets": ["US"], "focusBrands": ["Pepsi"]})

    assert response.status_code == 502
    body = response.json()
    assert body["error"] == "ExternalServiceError"
    assert body["message"] == EXTERNAL_SERVICE_MESSAGE
    assert "invalid key" not in response.text
    create_hunt.assert_not_awaited()


def test_create_hunt_unparsable_response_is_502(client, monkeypatch):
    _use_collaborators(make_synthesis("no json here"))
    create_hunt = _store_created_hunt(monkeypatch)

    response = client.post("/api/hunts", json={"subChannel": "QSR", "markets": ["US"], "focusBrands": ["Pepsi"]})

    assert response.status_code == 502
    create_hunt.assert_not_awaited()


def test_list_hunts_with_pagination(client, monkeypatch):
    list_hunts = AsyncMock(return_value=([make_hunt(accounts=[make_account("A", 10)])], 7))
    monkeypatch.setattr(hunts_routes, "list_hunts", list_hunts)

    response = client.get("/api/hunts", params={"subChannel": "QSR", "limit": 1, "offset": 2})

    assert response.status_code == 200
    body = response.json()
    assert body["pagination"] == {"total": 7, "limit": 1, "offset": 2}
    assert body["data"][0]["accounts"][0]["name"] == "A"
    list_hunts.assert_awaited_once_with(sub_channel="QSR", limit=1, offset=2)


def test_list_hunts_rejects_bad_limit(client):
    response = client.get("/api/hunts", params={"limit": 0})

    assert response.status_code == 400
    assert response.json()["details"]["fields"][0]["field"] == "query.limit"


def test_get_and_delete_hunt(client, monkeypatch):
    monkeypatch.setattr(hunts_routes, "get_hunt_by_id", AsyncMock(return_value=make_hunt()))
    monkeypatch.setattr(hunts_routes, "delete_hunt_by_id", AsyncMock(return_value=True))

    assert client.get(f"/api/hunts/{HUNT_ID}").json()["id"] == HUNT_ID

    response = client.delete(f"/api/hunts/{HUNT_ID}")
    assert response.status_code == 200
    assert response.json() == {"message": "Hunt deleted successfully"}


def test_missing_hunt_is_404(client, monkeypatch):
    monkeypatch.setattr(hunts_routes, "get_hunt_by_id", AsyncMock(return_value=None))
    monkeypatch.setattr(hunts_routes, "delete_hunt_by_id", AsyncMock(return_value=False))

    for response in (client.get("/api/hunts/unknown"), client.delete("/api/hunts/unknown")):
        assert response.status_code == 404
        assert response.json() == {"error": "NotFound", "message": "Hunt not found", "details": None}


def test_unexpected_error_is_generic_500(monkeypatch):
    monkeypatch.setattr(hunts_routes, "list_hunts", AsyncMock(side_effect=RuntimeError("db exploded")))

    response = TestClient(app, raise_server_exceptions=False).get("/api/hunts")

    assert response.status_code == 500
    assert response.json()["message"] == "Internal server error"
    assert "exploded" not in response.text


def test_generate_playbook_versions(client, monkeypatch, fake_playbook_doc):
    monkeypatch.setattr(
        playbook_orchestrator,
        "get_recent_hunts_for_sub_channel",
        AsyncMock(return_value=[make_hunt(accounts=[make_account("Burger Co", 90)])]),
    )
    _use_collaborators(make_synthesis("# QSR v1", "# QSR v2"))

    first = client.post("/api/playbooks/QSR")
    second = client.post("/api/playbooks/QSR")

    assert first.status_code == second.status_code == 201
    assert first.json()["version"] == 1
    assert second.json()["version"] == 2
    assert second.json()["contentMd"] == "# QSR v2"


def test_generate_playbook_without_hunts_is_404(client, monkeypatch, fake_playbook_doc):
    monkeypatch.setattr(
        playbook_orchestrator,
        "get_recent_hunts_for_sub_channel",
        AsyncMock(return_value=[]),
    )
    _use_collaborators(make_synthesis())

    response = client.post("/api/playbooks/Cinemas")

    assert response.status_code == 404
    assert response.json()["message"] == "No hunts found for sub-channel: Cinemas"
    assert fake_playbook_doc.store == {}


def test_get_and_list_playbooks(client, monkeypatch):
    monkeypatch.setattr(playbooks_routes, "get_playbook_by_sub_channel", AsyncMock(return_value=None))
    monkeypatch.setattr(playbooks_routes, "list_playbooks", AsyncMock(return_value=[]))

    missing = client.get("/api/playbooks/QSR")
    assert missing.status_code == 404
    assert missing.json()["message"] == "No playbook found for sub-channel: QSR"

    assert client.get("/api/playbooks").json() == {"data": [], "total": 0}
