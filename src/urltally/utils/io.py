# urltally — IO helpers (URL list reading, JSONL writing)
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import json
import os
import sys
from typing import Any, Iterator


def ensure_dirs(*paths: str) -> None:
	for p in paths:
		if p:
			os.makedirs(p, exist_ok=True)


def read_url_lines(path: str, strip: bool = True) -> Iterator[str]:
	"""Yield one URL per non-blank line of `path` ("-" reads stdin)."""
	if path == "-":
		yield from _iter_lines(sys.stdin, strip)
		return
	with open(path, "r", encoding="utf-8") as f:
		yield from _iter_lines(f, strip)


def _iter_lines(f, strip: bool) -> Iterator[str]:
	for line in f:
		line = line.rstrip("\r\n")
		if strip:
			line = line.strip()
		if line.strip():
			yield line


def append_jsonl(path: str, obj: Any) -> None:
	ensure_dirs(os.path.dirname(path))
	with open(path, "a", encoding="utf-8") as f:
		f.write(json.dumps(obj, ensure_ascii=False) + "\n")
