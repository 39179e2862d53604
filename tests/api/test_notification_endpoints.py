"""API tests for call and plain notification dispatch."""

from unittest.mock import AsyncMock, patch

from call_relay.platform.dispatch.core.protocols import SendResponse


def register(client, uid, token, role=None):
    body = {"uid": uid, "token": token}
    if role:
        body["role"] = role
    assert client.post("/register", json=body).status_code == 200


class TestSendCallEndpoint:

    def test_hint_counts_tokens(self, client):
        register(client, "u1", "tok-A")

        body = client.get("/send-call").json()

        assert body["ok"] is True
        assert body["registeredTokens"] == 1
        assert "patientName" in body["message"]

    def test_registered_doctor_gets_single_send(self, client, mock_transport):
        register(client, "d1", "tok-A", "doctor")

        response = client.post(
            "/send-call",
            json={"patientName": "Jane", "channelId": "room7", "doctorUid": "d1"},
        )

        assert response.status_code == 200
        assert response.json() == {
            "ok": True,
            "method": "single",
            "uid": "d1",
            "tokenPreview": "tok-A",
            "messageId": "projects/test/messages/single",
        }
        notification, destination = mock_transport.send.call_args.args
        assert destination == "tok-A"
        assert notification.body == "Jane is calling"
        assert notification.data["doctorUid"] == "d1"

    def test_target_uid_alias(self, client, mock_transport):
        register(client, "d1", "tok-A", "doctor")

        response = client.post(
            "/send-call",
            json={"patientName": "Jane", "roomId": "room7", "targetUid": "d1", "useTopic": True},
        )

        assert response.json()["method"] == "single"

    def test_broadcast_topic_alias(self, client, mock_transport):
        response = client.post(
            "/send-call",
            json={"patientName": "Jane", "roomId": "room7", "useBroadcastTopic": True},
        )

        assert response.status_code == 200
        assert response.json()["method"] == "topic"
        assert response.json()["topic"] == "doctors"

    def test_no_doctors_registered(self, client, mock_transport):
        register(client, "p1", "tok-P", "patient")

        response = client.post(
            "/send-call",
            json={"patientName": "Jane", "roomId": "room7", "targetRole": "doctor"},
        )

        assert response.status_code == 404
        error = response.json()["error"]
        assert error["code"] == "NoRecipientsError"
        assert "doctor" in error["message"]
        mock_transport.send_multicast.assert_not_called()

    def test_unregistered_target_falls_back_to_all_tokens(self, client, mock_transport):
        register(client, "u1", "tok-A")
        register(client, "u2", "tok-B")

        response = client.post(
            "/send-call",
            json={"patientName": "Jane", "channelId": "room7", "doctorUid": "ghost"},
        )

        assert response.json() == {
            "ok": True,
            "method": "tokens",
            "successCount": 2,
            "failureCount": 0,
            "errors": [],
        }

    def test_partial_failure_is_reported_with_200(self, client, mock_transport):
        register(client, "u1", "tok-A")
        register(client, "u2", "tok-B")
        mock_transport.send_multicast.side_effect = None
        mock_transport.send_multicast.return_value = [
            SendResponse(success=True, message_id="m1"),
            SendResponse(success=False, error_code="NOT_FOUND", error_message="unregistered"),
        ]

        response = client.post("/send-call", json={"patientName": "Jane", "channelId": "room7"})

        assert response.status_code == 200
        body = response.json()
        assert (body["successCount"], body["failureCount"]) == (1, 1)
        assert body["errors"] == [{"tokenPreview": "tok-B", "code": "NOT_FOUND", "message": "unregistered"}]

    def test_numeric_metadata_is_sent_as_strings(self, client, mock_transport):
        register(client, "d1", "tok-A")

        client.post(
            "/send-call",
            json={"patientName": "Jane", "channelId": "room7", "doctorUid": "d1", "age": 42, "submissionId": 7},
        )

        notification = mock_transport.send.call_args.args[0]
        assert notification.data["age"] == "42"
        assert notification.data["submissionId"] == "7"

    def test_missing_patient_name_is_rejected_before_registry_read(self, client, store):
        with patch.object(store, "lookup", new=AsyncMock()) as lookup, \
                patch.object(store, "all_destinations", new=AsyncMock()) as all_destinations:
            response = client.post("/send-call", json={"channelId": "room7", "doctorUid": "d1"})

        assert response.status_code == 400
        assert response.json()["error"]["details"] == {"field": "patientName"}
        lookup.assert_not_called()
        all_destinations.assert_not_called()

    def test_missing_channel_id(self, client):
        response = client.post("/send-call", json={"patientName": "Jane"})

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "ValidationError"

    def test_transport_error_is_generic_500(self, client, mock_transport):
        register(client, "d1", "tok-A")
        mock_transport.send.side_effect = RuntimeError("credentials for project xyz rejected")

        response = client.post(
            "/send-call",
            json={"patientName": "Jane", "channelId": "room7", "doctorUid": "d1"},
        )

        assert response.status_code == 500
        error = response.json()["error"]
        assert error["code"] == "TransportFailureError"
        assert error["message"] == "Push delivery failed"
        assert "xyz" not in response.text


class TestPlainNotificationEndpoints:

    def test_send_to_raw_token(self, client, mock_transport):
        response = client.post("/send", json={"token": "raw-token", "title": "Ping"})

        assert response.status_code == 200
        assert response.json() == {"ok": True, "messageId": "projects/test/messages/single"}
        notification = mock_transport.send.call_args.args[0]
        assert (notification.title, notification.body) == ("Ping", "Hello")

    def test_send_requires_token(self, client):
        response = client.post("/send", json={"title": "Ping"})
        assert response.status_code == 400

    def test_send_all_without_body(self, client, mock_transport):
        register(client, "u1", "tok-A")

        response = client.post("/send-all")

        assert response.status_code == 200
        assert response.json()["method"] == "tokens"
        assert response.json()["successCount"] == 1
        notification = mock_transport.send_multicast.call_args.args[0]
        assert notification.title == "Broadcast"

    def test_send_all_with_empty_registry(self, client):
        response = client.post("/send-all", json={"title": "Hi"})

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "NoRecipientsError"
