import pytest
from urltally.core.matcher import InvalidURLError, ParsedURL, is_valid_url, match_url, parse_url


def test_parse_all_components():
	p = parse_url("https://www.example.com:8080/a/b.html?x=1&y=2#top")
	assert p == ParsedURL("https", "www.example.com", "8080", "/a/b.html", "x=1&y=2", "top")


def test_parse_without_scheme():
	p = parse_url("example.com/path")
	assert p.scheme is None
	assert p.domain == "example.com"
	assert p.path == "/path"
	assert p.port is None and p.query is None and p.fragment is None


def test_empty_query_is_captured():
	assert parse_url("https://example.com?").query == ""


def test_punycode_label_passes_through():
	assert parse_url("https://xn--bcher-kva.ch").domain == "xn--bcher-kva.ch"


@pytest.mark.parametrize(
	"url",
	[
		"",
		"invalid-url",
		"https://localhost",
		"https://example.c",
		"https://example..com",
		"https://.example.com",
		"https://example.c-m",
		"https://example.com:",
		"https://example.com:80a",
		"https://example.com/a b",
		"https://example.com?a=/b",
		"https://example.com#",
		"https://example.com#section1?a=1",
		"https://user@example.com",
		"http://[::1]/",
		"1http://example.com",
	],
)
def test_rejected(url):
	assert match_url(url) is None
	assert not is_valid_url(url)
	with pytest.raises(InvalidURLError):
		parse_url(url)


def test_error_reports_position():
	with pytest.raises(InvalidURLError) as exc:
		parse_url("https://example.com/a b")
	assert exc.value.position == len("https://example.com/a")
	assert isinstance(exc.value, ValueError)


def test_other_schemes_are_accepted():
	assert parse_url("ftp://ftp.example.com").scheme == "ftp"
