import json
import logging

from urltally.config import Settings
from urltally.logging_config import configure_from_settings, configure_logging
from urltally.utils.io import append_jsonl, read_url_lines


def test_read_url_lines_skips_blanks(tmp_path):
	p = tmp_path / "urls.txt"
	p.write_text(" https://a.com \n\n\t\nhttps://b.com\r\n", encoding="utf-8")
	assert list(read_url_lines(str(p))) == ["https://a.com", "https://b.com"]
	assert list(read_url_lines(str(p), strip=False)) == [" https://a.com ", "https://b.com"]


def test_append_jsonl_creates_dirs(tmp_path):
	p = tmp_path / "nested" / "out.jsonl"
	append_jsonl(str(p), {"a": 1})
	append_jsonl(str(p), {"a": 2})
	lines = p.read_text(encoding="utf-8").splitlines()
	assert [json.loads(line)["a"] for line in lines] == [1, 2]


def test_configure_logging_writes_file(tmp_path):
	configure_logging(level="debug", log_dir=str(tmp_path))
	logging.getLogger("urltally.test").debug("hello")
	for h in logging.getLogger().handlers:
		h.flush()
	assert "hello" in (tmp_path / "urltally.log").read_text(encoding="utf-8")
	assert logging.getLogger().level == logging.DEBUG


def test_configure_from_settings_flag_wins(tmp_path):
	cfg = Settings(_env_file=None, log_level="WARNING", log_dir=str(tmp_path / "logs"))
	assert configure_from_settings(cfg) == "WARNING"
	assert logging.getLogger().level == logging.WARNING
	assert configure_from_settings(cfg, "debug") == "DEBUG"
	assert logging.getLogger().level == logging.DEBUG
	assert (tmp_path / "logs" / "urltally.log").exists()
