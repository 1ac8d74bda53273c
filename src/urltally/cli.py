# urltally — CLI (Typer)
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import logging
from typing import Any, List, Optional

import typer
from rich import print
from rich.markup import escape

from .config import Settings
from .core.count import count_unique_urls, count_unique_urls_per_tld
from .core.normalize import try_normalize
from .logging_config import configure_from_settings
from .utils.io import append_jsonl, read_url_lines

app = typer.Typer(add_completion=False, no_args_is_help=True)

logger = logging.getLogger(__name__)


def _setup(log_level: Optional[str]) -> Settings:
	cfg = Settings()
	configure_from_settings(cfg, log_level)
	return cfg


def _collect(urls: Optional[List[str]], files: Optional[List[str]], cfg: Settings) -> List[str]:
	items = list(urls or [])
	for path in files or []:
		try:
			items.extend(read_url_lines(path, strip=cfg.strip_whitespace))
		except (OSError, UnicodeDecodeError) as e:
			raise typer.BadParameter(f"cannot read {path}: {e}", param_hint="--file")
	return items


def _record(cfg: Settings, jsonl: Optional[str], command: str, inputs: int, result: Any) -> None:
	target = jsonl or cfg.results_path
	if target:
		append_jsonl(target, {"command": command, "inputs": inputs, "result": result})
		logger.info("appended %s result to %s", command, target)


@app.command()
def count(
	urls: Optional[List[str]] = typer.Argument(None, help="URL(s) to count"),
	file: Optional[List[str]] = typer.Option(None, "--file", "-f", help="File with one URL per line ('-' for stdin)"),
	jsonl: Optional[str] = typer.Option(None, help="Append the result to this JSONL file"),
	log_level: Optional[str] = typer.Option(None, help="Log level"),
):
	"""Count distinct normalized URLs; invalid entries are ignored."""
	cfg = _setup(log_level)
	items = _collect(urls, file, cfg)
	n = count_unique_urls(items)
	logger.info("%d unique URLs among %d inputs", n, len(items))
	print(f"[bold]Unique URLs:[/bold] {n}")
	_record(cfg, jsonl, "count", len(items), n)


@app.command("count-tld")
def count_tld(
	urls: Optional[List[str]] = typer.Argument(None, help="URL(s) to count"),
	file: Optional[List[str]] = typer.Option(None, "--file", "-f", help="File with one URL per line ('-' for stdin)"),
	jsonl: Optional[str] = typer.Option(None, help="Append the result to this JSONL file"),
	log_level: Optional[str] = typer.Option(None, help="Log level"),
):
	"""Count distinct normalized URLs per top-level domain (last two labels)."""
	cfg = _setup(log_level)
	items = _collect(urls, file, cfg)
	per_tld = dict(sorted(count_unique_urls_per_tld(items).items()))
	logger.info("%d top-level domains among %d inputs", len(per_tld), len(items))
	print(per_tld)
	_record(cfg, jsonl, "count-tld", len(items), per_tld)


@app.command()
def normalize(
	urls: List[str] = typer.Argument(..., help="URL(s) to normalize"),
	log_level: Optional[str] = typer.Option(None, help="Log level"),
):
	"""Print the canonical form of each URL; exits 1 if any URL is invalid."""
	_setup(log_level)
	rejected = 0
	for url in urls:
		canonical = try_normalize(url)
		if canonical is None:
			rejected += 1
			print(f"[red]invalid[/red] {escape(url)}")
			continue
		print(f"{escape(url)} -> {escape(canonical)}")
	if rejected:
		logger.warning("%d of %d URLs rejected", rejected, len(urls))
		raise typer.Exit(code=1)


@app.command("print-config")
def print_config():
	"""Print effective configuration from environment."""
	cfg = Settings()
	print(cfg.model_dump())


def main():
	app()


if __name__ == "__main__":
	main()
