# urltally — URL normalization: canonical form for deduplication
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

from typing import List, Optional

from .matcher import match_url, parse_url


DEFAULT_PORTS = {
	"http": "80",
	"https": "443",
}

# Percent codes treated as equivalent to their literal character.
RESERVED_CHARACTERS = {
	"20": " ",
	"21": "!",
	"22": '"',
	"23": "#",
	"24": "$",
	"25": "%",
	"26": "&",
	"27": "'",
	"28": "(",
	"29": ")",
	"2a": "*",
	"2b": "+",
	"2c": ",",
	"2d": "-",
	"2e": ".",
	"2f": "/",
	"3a": ":",
	"3b": ";",
	"3c": "<",
	"3d": "=",
	"3e": ">",
	"3f": "?",
	"40": "@",
	"5b": "[",
	"5c": "\\",
	"5d": "]",
	"5e": "^",
	"5f": "_",
	"60": "`",
	"7b": "{",
	"7c": "|",
	"7d": "}",
	"7e": "~",
}


def normalize_domain(domain: str) -> str:
	"""Lowercase and drop a leading "www." label."""
	domain = domain.lower()
	if domain.startswith("www."):
		domain = domain[len("www."):]
	return domain


def elide_default_port(scheme: Optional[str], port: Optional[str]) -> Optional[str]:
	"""Return None when `port` is the default for exactly this scheme, else the port."""
	if port and DEFAULT_PORTS.get(scheme or "") == port:
		return None
	return port or None


def resolve_dot_segments(path: str) -> str:
	"""Drop "." segments and let ".." pop the previous one; ".." at the root is ignored."""
	segments: List[str] = []
	for segment in path.split("/")[1:]:
		if segment == ".":
			continue
		if segment == "..":
			if segments:
				segments.pop()
			continue
		segments.append(segment)
	return "".join("/" + s for s in segments)


def sort_query(query: str) -> str:
	return "&".join(sorted(query.split("&")))


def reconcile_percent_encoding(text: str) -> str:
	"""Decode reserved %XX triplets in place and uppercase the rest.

	A decoded character is scanned again, so nested encodings such as
	"%2520" collapse all the way to a literal space.
	"""
	buf = list(text)
	i = 0
	while i < len(buf):
		if buf[i] == "%" and i + 2 < len(buf):
			code = (buf[i + 1] + buf[i + 2]).lower()
			char = RESERVED_CHARACTERS.get(code)
			if char is not None:
				buf[i:i + 3] = [char]
				continue
			buf[i + 1] = buf[i + 1].upper()
			buf[i + 2] = buf[i + 2].upper()
		i += 1
	return "".join(buf)


def normalize_url(url: str) -> str:
	"""Return the canonical form of `url`.

	Lowercases everything, trims trailing "?" and "/", strips "www.", elides
	default ports, resolves dot segments, sorts query parameters, drops the
	fragment and reconciles percent-encoding in the path and query.
	Raises InvalidURLError if the trimmed string is not an accepted URL.
	"""
	url = url.lower().rstrip("?/")
	parts = parse_url(url)

	prefix = ""
	if parts.scheme:
		prefix = f"{parts.scheme}://"
	prefix += normalize_domain(parts.domain)
	port = elide_default_port(parts.scheme, parts.port)
	if port:
		prefix += f":{port}"

	suffix = ""
	if parts.path:
		suffix += resolve_dot_segments(parts.path)
	if parts.query:
		suffix += "?" + sort_query(parts.query)

	return prefix + reconcile_percent_encoding(suffix)


def try_normalize(url: str) -> Optional[str]:
	"""Canonical form of `url`, or None if the raw string is rejected."""
	if match_url(url) is None:
		return None
	return normalize_url(url)


__all__ = [
	"DEFAULT_PORTS",
	"RESERVED_CHARACTERS",
	"normalize_domain",
	"elide_default_port",
	"resolve_dot_segments",
	"sort_query",
	"reconcile_percent_encoding",
	"normalize_url",
	"try_normalize",
]
