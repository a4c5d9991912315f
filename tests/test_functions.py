import base64
import json

from galaxy_api.functions import event_to_request, handler


def test_event_is_translated_to_request():
    request = event_to_request(
        {
            "httpMethod": "PATCH",
            "path": "/.netlify/functions/api/bookings/1/status",
            "body": base64.b64encode(b'{"status": "done"}').decode(),
            "isBase64Encoded": True,
            "queryStringParameters": {"a": "1"},
        }
    )

    assert request.method == "PATCH"
    assert request.json() == {"status": "done"}
    assert request.query == {"a": "1"}


def test_handler_returns_serialised_response(router):
    result = handler(
        {
            "httpMethod": "POST",
            "path": "/.netlify/functions/api/contacts",
            "body": json.dumps({"name": "C", "email": "c@x.com", "message": "Hi"}),
            "queryStringParameters": None,
        },
        None,
        router=router,
    )

    assert result["statusCode"] == 200
    assert result["headers"]["Content-Type"] == "application/json"
    assert json.loads(result["body"])["name"] == "C"


def test_handler_preflight(router):
    result = handler({"httpMethod": "OPTIONS", "path": "/api/bookings"}, None, router=router)

    assert result == {
        "statusCode": 200,
        "headers": result["headers"],
        "body": "",
    }
    assert result["headers"]["Access-Control-Allow-Origin"] == "*"


def test_handler_bad_base64_body_returns_500(router):
    result = handler(
        {
            "httpMethod": "POST",
            "path": "/api/bookings",
            "body": "%%%notb64",
            "isBase64Encoded": True,
        },
        None,
        router=router,
    )

    assert result["statusCode"] == 500
    assert result["headers"]["Access-Control-Allow-Origin"] == "*"
    body = json.loads(result["body"])
    assert body["message"] == "Internal server error"
    assert body["error"]


def test_handler_router_build_failure_returns_500(monkeypatch):
    from galaxy_api import functions

    def broken_router():
        raise RuntimeError("database unreachable")

    monkeypatch.setattr(functions, "get_router", broken_router)

    result = handler({"httpMethod": "GET", "path": "/api/bookings"}, None)

    assert result["statusCode"] == 500
    assert json.loads(result["body"]) == {
        "message": "Internal server error",
        "error": "database unreachable",
    }
