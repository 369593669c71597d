from linkguard.checks.url_utils import extract_domain, extract_links, should_inspect


def test_extract_domain_strips_www_and_path() -> None:
    assert extract_domain("https://www.GitHub.com/login?next=/") == "github.com"


def test_extract_domain_adds_scheme() -> None:
    assert extract_domain("githib.com/path") == "githib.com"


def test_extract_domain_unparsable_is_empty() -> None:
    assert extract_domain("") == ""
    assert extract_domain("   ") == ""
    assert extract_domain("http://[::1") == ""


def test_punycode_is_decoded() -> None:
    assert extract_domain("http://xn--e1afmkfd.xn--p1ai") == "пример.рф"


def test_scope_links_skips_telegram_hosts() -> None:
    assert not should_inspect("https://t.me/somechannel", "links")
    assert should_inspect("https://t.me/somechannel", "all-links")
    assert should_inspect("https://githib.com", "links")
    assert should_inspect("githib.com", "links")


def test_scope_links_with_custom_origin() -> None:
    assert not should_inspect("https://www.example.com/a", "links", {"example.com"})
    assert should_inspect("https://www.example.com/a", "all-links", {"example.com"})


def test_only_http_links_are_inspected() -> None:
    assert not should_inspect("ftp://github.com/file", "all-links")
    assert not should_inspect("mailto://user@github.com", "all-links")
    assert not should_inspect("", "all-links")


def test_extract_links_from_text() -> None:
    text = "see https://githib.com/login, and paypa1.com. twice: https://githib.com/login"
    assert extract_links(text) == ["https://githib.com/login", "paypa1.com"]


def test_extract_links_keeps_domain_that_is_substring_of_url() -> None:
    text = "https://amazon.com.de/deal and mazon.com"
    assert extract_links(text) == ["https://amazon.com.de/deal", "mazon.com"]
