def test_ping_endpoint_returns_service_version(client):
    """
    Validate the public health endpoint payload.

    1. Call the ping endpoint.
    2. Parse the response payload returned by the backend.
    3. Validate the service name and version message.
    4. Validate the DB connectivity flag is true.
    """
    response = client.get("/api/v1/ping")
    assert response.status_code == 200

    payload = response.json()
    assert payload["message"] == "Dogshouseservice.Version1.0.1"
    assert payload["db_connected"] is True


def test_root_reports_running(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == {"message": "Dogshouseservice is running"}
