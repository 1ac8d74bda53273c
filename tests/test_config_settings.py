from urltally.config import Settings


def test_settings_defaults(monkeypatch):
	for name in ("URLTALLY_LOG_LEVEL", "URLTALLY_LOG_DIR", "URLTALLY_STRIP_WHITESPACE", "URLTALLY_RESULTS_PATH"):
		monkeypatch.delenv(name, raising=False)
	cfg = Settings(_env_file=None)
	assert cfg.log_level == "INFO"
	assert cfg.log_dir == "logs"
	assert cfg.strip_whitespace is True
	assert cfg.results_path == ""


def test_settings_from_env(monkeypatch):
	monkeypatch.setenv("URLTALLY_LOG_LEVEL", "DEBUG")
	monkeypatch.setenv("URLTALLY_STRIP_WHITESPACE", "false")
	cfg = Settings(_env_file=None)
	assert cfg.log_level == "DEBUG"
	assert cfg.strip_whitespace is False
