from userbench import UserBench
from userbench.testclient import TestClient


def test_users_endpoint(standard_client):
    r = standard_client.get("/users")
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("application/json")
    data = r.json()
    assert len(data) == 10_000
    assert [u["Id"] for u in data[:3]] == [1, 2, 3]
    assert data[0]["Email"] == "linda.lopez1@example.com"
    assert data[9]["IsActive"] is False


def test_users_identical_across_variants(standard_client, minimal_client):
    standard = standard_client.get("/users")
    minimal = minimal_client.get("/users")
    assert minimal.status_code == 200
    assert standard.json() == minimal.json()


def test_users_identical_across_calls(minimal_client):
    assert minimal_client.get("/users").text == minimal_client.get("/users").text


def test_benchmark_endpoint(standard_client):
    r = standard_client.get("/benchmark")
    assert r.status_code == 200
    data = r.json()
    assert set(data) == {"ExecutionTimeMs", "PrimesFound", "ProcessId", "WorkingSetMB"}
    assert data["PrimesFound"] == 78498
    assert data["ExecutionTimeMs"] >= 0
    assert data["WorkingSetMB"] > 0


def test_unknown_route_returns_json_404(standard_client):
    r = standard_client.get("/doesnotexist")
    assert r.status_code == 404
    assert r.json() == {"error": "Not Found", "detail": "No route found"}


def test_wrong_method_returns_405(standard_client):
    r = standard_client.post("/users")
    assert r.status_code == 405
    assert r.json()["error"] == "Method Not Allowed"


def test_path_params_passed_to_handler():
    app = UserBench()

    @app.get("/hello/{name}")
    def hello(name): return {"hello": name}

    @app.get("/users/{id:int}")
    def get_user(id, request): return {"id": id, "path": request.url.path}

    with TestClient(app) as client:
        assert client.get("/hello/bob").json() == {"hello": "bob"}
        assert client.get("/users/42").json() == {"id": 42, "path": "/users/42"}
    assert [p["name"] for p in app.openapi()["paths"]["/users/{id:int}"]["get"]["parameters"]] == ["id"]
