from unittest.mock import patch
from app.api.middleware import format_request_log

def test_format_short_line():
    line = format_request_log("GET", "/api/bookings", 200, 3)

    assert line == "GET /api/bookings 200 in 3ms"

def test_format_appends_body():
    line = format_request_log("GET", "/api/bookings", 200, 3, body="[]")

    assert line == "GET /api/bookings 200 in 3ms :: []"

def test_format_truncates_long_lines():
    body = '[{"id":1,"name":"Alice","email":"a@x.com","service":"Haircut","status":"pending"}]'

    line = format_request_log("GET", "/api/bookings", 200, 12, body=body, max_length=80)

    assert len(line) == 80
    assert line.endswith("…")
    assert line.startswith("GET /api/bookings 200 in 12ms :: [")

def test_api_requests_are_logged(client):
    with patch("app.api.middleware.logger") as mock_logger:
        response = client.get("/api/bookings")

    assert response.status_code == 200
    assert response.json() == []
    mock_logger.info.assert_called_once()
    line = mock_logger.info.call_args[0][0]
    assert line.startswith("GET /api/bookings 200 in ")
    assert line.endswith(":: []")

def test_rejections_are_logged_with_status(client):
    with patch("app.api.middleware.logger") as mock_logger:
        client.post("/api/bookings", json={"name": "Alice"})

    line = mock_logger.info.call_args[0][0]
    assert line.startswith("POST /api/bookings 400 in ")

def test_non_api_requests_are_not_logged(client):
    with patch("app.api.middleware.logger") as mock_logger:
        response = client.get("/health")

    assert response.status_code == 200
    mock_logger.info.assert_not_called()
