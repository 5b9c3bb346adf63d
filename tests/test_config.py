import pytest

from userbench import Settings, UserBench, create_app
from userbench.cli import build_parser, main
from userbench.serialization import PrecompiledSerializer, ReflectionSerializer


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("HOST", "PORT", "DEBUG", "VARIANT", "LOG_LEVEL"):
        monkeypatch.delenv("USERBENCH_" + name, raising=False)


def test_defaults():
    settings = Settings.from_env({})
    assert settings == Settings()
    assert settings.port == 8000
    assert settings.variant == "standard"


def test_from_env():
    settings = Settings.from_env({
        "USERBENCH_HOST": "127.0.0.1",
        "USERBENCH_PORT": "5003",
        "USERBENCH_DEBUG": "true",
        "USERBENCH_VARIANT": "Minimal",
        "USERBENCH_LOG_LEVEL": "debug",
    })
    assert settings == Settings(host="127.0.0.1", port=5003, debug=True, variant="minimal", log_level="DEBUG")


def test_from_os_environ(monkeypatch):
    monkeypatch.setenv("USERBENCH_PORT", "9000")
    assert Settings.from_env().port == 9000


@pytest.mark.parametrize("env", [
    {"USERBENCH_PORT": "abc"},
    {"USERBENCH_PORT": "70000"},
    {"USERBENCH_VARIANT": "aot"},
    {"USERBENCH_DEBUG": "maybe"},
    {"USERBENCH_LOG_LEVEL": "loud"},
    {"USERBENCH_LOG_LEVEL": "warn"},
    {"USERBENCH_LOG_LEVEL": "notset"},
])
def test_invalid_values(env):
    with pytest.raises(ValueError):
        Settings.from_env(env)


def test_override_ignores_none():
    settings = Settings().override(port=9001, host=None)
    assert settings.port == 9001
    assert settings.host == "0.0.0.0"


def test_create_app_variants():
    assert isinstance(create_app("standard").serializer, ReflectionSerializer)
    minimal = create_app("minimal")
    assert isinstance(minimal.serializer, PrecompiledSerializer)
    assert minimal.openapi_url is None
    with pytest.raises(ValueError):
        create_app("native")


def test_cli_parser():
    args = build_parser().parse_args(["--variant", "minimal", "--port", "5001"])
    assert args.variant == "minimal"
    assert args.port == 5001
    assert args.debug is None
    assert args.reload is False


def test_cli_reload_passes_flags_to_child(monkeypatch):
    seen = {}
    monkeypatch.setattr("userbench.reload.run_with_reload", lambda argv: seen.setdefault("argv", argv))
    main(["--reload", "--variant", "minimal", "--port", "5002", "--debug"])
    assert seen["argv"] == [
        "--variant", "minimal", "--host", "0.0.0.0", "--port", "5002", "--log-level", "INFO", "--debug",
    ]


def test_cli_runs_selected_variant(monkeypatch):
    ran = {}

    def fake_run(self, host, port, log_level):
        ran.update(title=self.title, host=host, port=port)

    monkeypatch.setattr(UserBench, "run", fake_run)
    main(["--variant", "minimal", "--host", "127.0.0.1", "--port", "5003"])
    assert ran == {"title": "userbench-minimal", "host": "127.0.0.1", "port": 5003}


@pytest.mark.parametrize("level", ["critical", "error", "warning", "info", "debug", "trace"])
def test_server_log_levels_accepted(level):
    assert Settings.from_env({"USERBENCH_LOG_LEVEL": level}).log_level == level.upper()


def test_cli_no_debug_overrides_env(monkeypatch):
    monkeypatch.setenv("USERBENCH_DEBUG", "true")
    seen = {}
    monkeypatch.setattr("userbench.reload.run_with_reload", lambda argv: seen.setdefault("argv", argv))
    main(["--reload", "--no-debug"])
    assert seen["argv"][-1] == "--no-debug"
    assert build_parser().parse_args(["--no-debug"]).debug is False
