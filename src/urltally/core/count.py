# urltally — Unique URL counting, overall and per top-level domain
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import logging
from typing import Dict, Iterable, List, Set

from .matcher import match_url, parse_url
from .normalize import normalize_domain, normalize_url


logger = logging.getLogger(__name__)


def unique_urls(urls: Iterable[str]) -> Set[str]:
	"""Canonical forms of every accepted URL in `urls`; rejected entries are skipped."""
	unique: Set[str] = set()
	for url in urls:
		if match_url(url) is None:
			logger.debug("skipping invalid URL %r", url)
			continue
		unique.add(normalize_url(url))
	return unique


def count_unique_urls(urls: Iterable[str]) -> int:
	"""Number of distinct normalized URLs among the valid entries of `urls`."""
	return len(unique_urls(urls))


def top_level_domain(domain: str) -> str:
	"""Grouping key: the last two dot-separated labels of the normalized domain.

	>>> top_level_domain("www.Sub.Example.com")
	'example.com'
	"""
	labels = normalize_domain(domain).split(".")
	return ".".join(labels[-2:])


def group_by_tld(urls: Iterable[str]) -> Dict[str, List[str]]:
	"""Bucket raw URLs by top-level domain, keeping the original strings."""
	buckets: Dict[str, List[str]] = {}
	for url in urls:
		if not url:
			continue
		if match_url(url) is None:
			logger.debug("skipping invalid URL %r", url)
			continue
		parts = parse_url(url.lower())
		buckets.setdefault(top_level_domain(parts.domain), []).append(url)
	return buckets


def count_unique_urls_per_tld(urls: Iterable[str]) -> Dict[str, int]:
	"""Distinct normalized URL count for each top-level domain seen in `urls`."""
	return {tld: count_unique_urls(bucket) for tld, bucket in group_by_tld(urls).items()}


__all__ = [
	"unique_urls",
	"count_unique_urls",
	"top_level_domain",
	"group_by_tld",
	"count_unique_urls_per_tld",
]
