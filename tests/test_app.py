import pytest

from app import create_app
from config import Config


class PortalTestConfig(Config):
    TESTING = True
    ENV = "development"
    MAX_CONVERT_VALUE = 2 ** 53 - 1


@pytest.fixture
def client():
    app = create_app(PortalTestConfig)
    return app.test_client()


def test_health(client):
    res = client.get("/health")
    assert res.status_code == 200
    assert res.get_json() == {"status": "ok"}


class TestBreadcrumbsApi:
    def test_trail_marks_last_as_current(self, client):
        res = client.get("/api/breadcrumbs", query_string={"path": "/tools/binary-conversion"})
        assert res.status_code == 200
        assert res.get_json()["breadcrumbs"] == [
            {"href": "/", "label": "Home", "current": False},
            {"href": "/tools", "label": "Tools", "current": False},
            {"href": "/tools/binary-conversion", "label": "Binary Conversion", "current": True},
        ]

    def test_root_defaults_to_empty(self, client):
        assert client.get("/api/breadcrumbs").get_json() == {"breadcrumbs": []}


class TestConvertApi:
    def test_success(self, client):
        res = client.post("/api/convert", json={"text": "ff", "base": 16})
        assert res.status_code == 200
        assert res.get_json() == {
            "results": {"2": "11111111", "8": "377", "10": "255", "16": "ff"},
            "error": None,
            "code": None,
        }

    def test_base_as_string(self, client):
        res = client.post("/api/convert", json={"text": "101", "base": "2"})
        assert res.get_json()["results"]["10"] == "5"

    def test_empty_text(self, client):
        res = client.post("/api/convert", json={"text": "", "base": 10})
        assert res.status_code == 200
        assert res.get_json()["results"] == {"2": "", "8": "", "10": "", "16": ""}

    def test_invalid_digit(self, client):
        res = client.post("/api/convert", json={"text": "G", "base": 16})
        assert res.status_code == 422
        body = res.get_json()
        assert body["code"] == "InvalidDigitForBase"
        assert body["error"] == "Invalid character for Hexadecimal"

    def test_out_of_range_uses_configured_limit(self):
        class Small(PortalTestConfig):
            MAX_CONVERT_VALUE = 255

        client = create_app(Small).test_client()
        res = client.post("/api/convert", json={"text": "256", "base": 10})
        assert res.status_code == 422
        assert res.get_json()["code"] == "OutOfRange"

    def test_bad_base(self, client):
        res = client.post("/api/convert", json={"text": "1", "base": 7})
        assert res.status_code == 400
        assert res.get_json()["code"] == "UnsupportedBase"

    def test_missing_base(self, client):
        res = client.post("/api/convert", json={"text": "1"})
        assert res.status_code == 400
        assert res.get_json() == {"error": "base required"}

    def test_convert_to(self, client):
        res = client.post("/api/convert/to", json={"text": "101", "from": 2, "to": 16})
        assert res.get_json() == {"result": "0x5"}
        res = client.post("/api/convert/to", json={"text": "255", "from": 10, "to": 2, "prefixed": False})
        assert res.get_json() == {"result": "11111111"}

    def test_convert_to_invalid_digit(self, client):
        res = client.post("/api/convert/to", json={"text": "9", "from": 8, "to": 2})
        assert res.status_code == 422
        assert res.get_json()["code"] == "InvalidDigitForBase"


class TestSolveApi:
    def test_success(self, client):
        res = client.post("/api/solve", json={"equation": "2x + 3 = 7"})
        assert res.status_code == 200
        body = res.get_json()
        assert body["x"] == 2
        assert body["result"] == "x = 2"
        assert len(body["steps"]) == 3

    @pytest.mark.parametrize("equation,code", [
        ("3=5", "MissingVariable"),
        ("2x+3 7", "MissingEqualsSign"),
        ("0x+3=7", "ZeroCoefficient"),
        ("2x+three=7", "InvalidNumericLiteral"),
        ("x+x=2", "UnsupportedEquationForm"),
    ])
    def test_typed_errors(self, client, equation, code):
        res = client.post("/api/solve", json={"equation": equation})
        assert res.status_code == 422
        assert res.get_json()["code"] == code

    def test_missing_equation(self, client):
        res = client.post("/api/solve", json={})
        assert res.status_code == 400
        assert res.get_json() == {"error": "equation required"}

    def test_non_json_body(self, client):
        res = client.post("/api/solve", data="2x=4", content_type="text/plain")
        assert res.status_code == 400


def test_rate_limit_in_production():
    class Prod(PortalTestConfig):
        ENV = "production"
        RATE_LIMIT_PER_MINUTE = 2

    client = create_app(Prod).test_client()
    assert client.get("/health").status_code == 200
    assert client.get("/health").status_code == 200
    res = client.get("/health")
    assert res.status_code == 429
    assert res.get_json()["error"] == "rate_limited"


@pytest.mark.parametrize("url", ["/api/solve", "/api/convert", "/api/convert/to"])
@pytest.mark.parametrize("body", [[1, 2], "2x=4", 7])
def test_non_object_json_rejected(client, url, body):
    res = client.post(url, json=body)
    assert res.status_code == 400
    assert res.get_json() == {"error": "JSON object required"}


@pytest.mark.parametrize("prefixed", ["false", 0, None])
def test_convert_to_prefixed_must_be_bool(client, prefixed):
    res = client.post("/api/convert/to", json={"text": "5", "from": 10, "to": 2, "prefixed": prefixed})
    assert res.status_code == 400
    assert res.get_json() == {"error": "prefixed must be true or false"}


def test_convert_float_base_rejected(client):
    res = client.post("/api/convert", json={"text": "101", "base": 2.9})
    assert res.status_code == 400
    assert res.get_json()["code"] == "UnsupportedBase"


def test_rate_limiter_forgets_idle_clients(monkeypatch):
    class Prod(PortalTestConfig):
        ENV = "production"

    clock = [1000]
    monkeypatch.setattr("app.time", lambda: clock[0])
    flask_app = create_app(Prod)
    client = flask_app.test_client()
    store = flask_app.extensions['rate_limit']

    client.get("/health", environ_base={"REMOTE_ADDR": "10.0.0.1"})
    client.get("/health", environ_base={"REMOTE_ADDR": "10.0.0.2"})
    assert set(store) == {"10.0.0.1", "10.0.0.2"}

    clock[0] += 61
    client.get("/health", environ_base={"REMOTE_ADDR": "10.0.0.2"})
    assert set(store) == {"10.0.0.2"}
