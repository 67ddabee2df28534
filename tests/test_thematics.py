"""Tests for the thematics proxy and :class:`ThematicsClient`."""
from unittest import mock

import grpc
import pytest

from tir_backend.services.thematics_client import LIST_THEMATICS_METHOD, ThematicsClient


class FakeThematicsClient:
    def __init__(self, result):
        self.result = result
        self.calls = []

    def list_thematics(self, account_id):
        self.calls.append(account_id)
        return self.result


@pytest.fixture()
def fake_client(app):
    fake = FakeThematicsClient({"success": True, "thematics": [{"id": 1, "name": "Forest"}]})
    app.extensions["thematics_client"] = fake
    return fake


def test_list_thematics(client, register, fake_client):
    user = register()

    resp = client.get("/thematics", headers={"x-access-token": user["apiKey"]})

    assert resp.status_code == 200
    assert resp.get_json() == {"thematics": [{"id": 1, "name": "Forest"}]}
    assert len(fake_client.calls) == 1


def test_list_thematics_requires_token(client, fake_client):
    assert client.get("/thematics").status_code == 401
    assert client.get("/thematics", headers={"x-access-token": "abc"}).status_code == 401
    assert fake_client.calls == []


def test_list_thematics_upstream_failure(client, register, fake_client):
    user = register()
    fake_client.result = {"success": False, "error": "Thematics service unavailable"}

    resp = client.get("/thematics", headers={"x-access-token": user["apiKey"]})

    assert resp.status_code == 502
    assert resp.get_json() == {
        "code": 502,
        "type": "BAD_GATEWAY",
        "message": "Thematics service unavailable",
    }


def test_client_success():
    client = ThematicsClient("localhost:50051", timeout=0.5)

    with mock.patch.object(client, "_call", return_value={"thematics": ["a", "b"]}) as call:
        result = client.list_thematics(7)

    assert result == {"success": True, "thematics": ["a", "b"]}
    call.assert_called_once_with(LIST_THEMATICS_METHOD, {"accountId": 7})


def test_client_rpc_error():
    client = ThematicsClient("localhost:50051", timeout=0.5)

    with mock.patch.object(client, "_call", side_effect=grpc.RpcError()):
        result = client.list_thematics(7)

    assert result == {"success": False, "error": "Thematics service unavailable"}


def test_client_malformed_response():
    client = ThematicsClient("localhost:50051", timeout=0.5)

    with mock.patch.object(client, "_call", return_value={"thematics": "nope"}):
        result = client.list_thematics(7)

    assert result["success"] is False


def test_client_unreachable_server():
    # Nothing listens on port 1; the deadline expires quickly
    client = ThematicsClient("localhost:1", timeout=0.1)

    result = client.list_thematics(7)

    assert result["success"] is False
