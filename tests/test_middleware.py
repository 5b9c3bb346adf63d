import logging

from userbench import HTTPException, UserBench
from userbench.middleware import AccessLogMiddleware, Middleware
from userbench.testclient import TestClient


def test_access_log(caplog):
    app = UserBench()
    app.add_middleware(AccessLogMiddleware())

    @app.get("/ping")
    def ping(): return {"pong": True}

    with caplog.at_level(logging.INFO, logger="userbench.access"):
        with TestClient(app) as client:
            r = client.get("/ping")
    assert r.status_code == 200
    assert any("GET /ping 200" in rec.getMessage() for rec in caplog.records)


def test_custom_middleware_order():
    app = UserBench()
    calls = []

    class MiddlewareA(Middleware):
        def before_request(self, request):
            calls.append("A-before")
            return request

        def after_request(self, request, response):
            calls.append("A-after")
            response.headers["x-response"] = response.headers.get("x-response", "") + "A"
            return response

    class MiddlewareB(Middleware):
        def before_request(self, request):
            calls.append("B-before")
            return request

        def after_request(self, request, response):
            calls.append("B-after")
            response.headers["x-response"] = response.headers.get("x-response", "") + "B"
            return response

    app.add_middleware(MiddlewareA())
    app.add_middleware(MiddlewareB())

    @app.get("/")
    def index(): return "ok"

    with TestClient(app) as client:
        r = client.get("/")
    assert r.status_code == 200
    assert calls == ["B-before", "A-before", "A-after", "B-after"]
    assert r.headers["x-response"] == "AB"


def test_http_exception_detail():
    app = UserBench()

    @app.get("/")
    def index(): raise HTTPException(403, "Forbidden")

    with TestClient(app) as client:
        r = client.get("/")
    assert r.status_code == 403
    assert r.json() == {"detail": "Forbidden"}


def test_exception_handler_override():
    app = UserBench()

    @app.get("/")
    def index(): raise HTTPException(400, "Bad data")

    @app.exception_handler(400)
    def handle_400(request, exc):
        return {"custom_error": True}, 418

    with TestClient(app) as client:
        r = client.get("/")
    assert r.status_code == 418
    assert r.json() == {"custom_error": True}


def test_unhandled_exception(caplog):
    app = UserBench()

    @app.get("/")
    def index():
        raise ValueError("Oops")

    with caplog.at_level(logging.ERROR, logger="userbench.errors"):
        with TestClient(app) as client:
            r = client.get("/")
    assert r.status_code == 500
    assert r.json() == {"detail": "An unexpected error occurred"}
    assert any(rec.exc_info for rec in caplog.records)


def test_unhandled_exception_debug():
    app = UserBench(debug=True)

    @app.get("/")
    def index():
        raise ValueError("Oops")

    with TestClient(app) as client:
        r = client.get("/")
    assert r.status_code == 500
    body = r.json()
    assert body["error"] == "ValueError"
    assert body["detail"] == "Oops"
    assert body["traceback"]


def test_handler_receives_request():
    app = UserBench()

    @app.get("/echo")
    def echo(request): return {"path": request.url.path}

    with TestClient(app) as client:
        assert client.get("/echo").json() == {"path": "/echo"}
