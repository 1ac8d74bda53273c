# urltally — URL matcher (grammar check and component split)
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import string
from typing import NamedTuple, Optional


_LETTERS = frozenset(string.ascii_letters)
_DIGITS = frozenset(string.digits)
_ALNUM = _LETTERS | _DIGITS
_LABEL_CHARS = _ALNUM | {"-"}
_DOMAIN_CHARS = _LABEL_CHARS | {"."}
_PATH_CHARS = _ALNUM | frozenset("%/^*()$@!_.-")
_QUERY_CHARS = _ALNUM | frozenset("^*()$@!_%=&.-")
_FRAGMENT_CHARS = _ALNUM | frozenset("^*()$@!_%&")


class InvalidURLError(ValueError):
	"""Raised when a string does not match the accepted URL grammar."""

	def __init__(self, url: str, position: int, reason: str) -> None:
		super().__init__(f"invalid URL {url!r} at offset {position}: {reason}")
		self.url = url
		self.position = position
		self.reason = reason


class ParsedURL(NamedTuple):
	"""Components captured from an accepted URL, undecoded and without delimiters.

	`path` keeps its leading slash. `query` is "" for a bare trailing "?".
	"""

	scheme: Optional[str]
	domain: str
	port: Optional[str]
	path: Optional[str]
	query: Optional[str]
	fragment: Optional[str]


def _scan(text: str, pos: int, allowed: frozenset) -> int:
	end = pos
	while end < len(text) and text[end] in allowed:
		end += 1
	return end


def _check_domain(url: str, domain: str, start: int) -> None:
	labels = domain.split(".")
	if len(labels) < 2:
		raise InvalidURLError(url, start, "domain needs at least two labels")
	offset = start
	for label in labels[:-1]:
		if not label:
			raise InvalidURLError(url, offset, "empty domain label")
		offset += len(label) + 1
	last = labels[-1]
	if len(last) < 2 or any(c not in _ALNUM for c in last):
		raise InvalidURLError(url, offset, "last domain label must be 2+ letters or digits")


def parse_url(url: str) -> ParsedURL:
	"""Split `url` into its components, raising InvalidURLError on any mismatch.

	Grammar: [scheme "://"] labels [":" port] [path] ["?" query] ["#" fragment],
	anchored at both ends.
	"""
	n = len(url)
	pos = 0

	scheme = None
	end = _scan(url, 0, _LETTERS)
	if end > 0 and url.startswith("://", end):
		scheme = url[:end]
		pos = end + 3

	# No later component may start with a domain character, so the domain is the whole run.
	end = _scan(url, pos, _DOMAIN_CHARS)
	domain = url[pos:end]
	_check_domain(url, domain, pos)
	pos = end

	port = None
	if pos < n and url[pos] == ":":
		end = _scan(url, pos + 1, _DIGITS)
		if end == pos + 1:
			raise InvalidURLError(url, pos + 1, "port needs at least one digit")
		port = url[pos + 1:end]
		pos = end

	path = None
	if pos < n and url[pos] == "/":
		end = _scan(url, pos + 1, _PATH_CHARS)
		path = url[pos:end]
		pos = end

	query = None
	if pos < n and url[pos] == "?":
		end = _scan(url, pos + 1, _QUERY_CHARS)
		query = url[pos + 1:end]
		pos = end

	fragment = None
	if pos < n and url[pos] == "#":
		end = _scan(url, pos + 1, _FRAGMENT_CHARS)
		if end == pos + 1:
			raise InvalidURLError(url, pos + 1, "empty fragment")
		fragment = url[pos + 1:end]
		pos = end

	if pos != n:
		raise InvalidURLError(url, pos, f"unexpected character {url[pos]!r}")

	return ParsedURL(scheme, domain, port, path, query, fragment)


def match_url(url: str) -> Optional[ParsedURL]:
	"""Return the parsed components, or None when `url` is rejected."""
	try:
		return parse_url(url)
	except InvalidURLError:
		return None


def is_valid_url(url: str) -> bool:
	return match_url(url) is not None


__all__ = [
	"InvalidURLError",
	"ParsedURL",
	"parse_url",
	"match_url",
	"is_valid_url",
]
