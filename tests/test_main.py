import main
from config import settings


def test_parse_args_defaults_to_settings():
    args = main.parse_args([])
    assert args.log is None
    assert args.log_level is None


def test_main_applies_command_line_overrides(monkeypatch, tmp_path):
    seen = {}
    monkeypatch.setattr(main, "bootstrap_logging", lambda **kwargs: seen.update(kwargs))
    monkeypatch.setattr(main, "shutdown_logging", lambda: None)
    monkeypatch.setattr(main, "_menu", lambda: seen.setdefault("menu", settings.DOTA_SERVER_LOG))
    monkeypatch.setattr(settings, "DOTA_SERVER_LOG", settings.DOTA_SERVER_LOG)
    monkeypatch.setattr(settings, "LOG_LEVEL", settings.LOG_LEVEL)
    log = str(tmp_path / "server_log.txt")

    assert main.main(["--log", log, "--log-level", "DEBUG"]) == 0
    assert seen["menu"] == log
    assert seen["level"] == "DEBUG"
