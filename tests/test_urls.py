from vttthumbs.urls import effective_base, page_base_url, resolve_url, source_directory


def test_qualified_references_are_unchanged():
    assert resolve_url("https://cdn.example.com/a.jpg", "//other/") == "https://cdn.example.com/a.jpg"
    assert resolve_url("//cdn.example.com/a.jpg", "https://x.org/") == "//cdn.example.com/a.jpg"
    assert resolve_url("data:image/png;base64,AAAA", "https://x.org/") == "data:image/png;base64,AAAA"


def test_protocol_relative_base_joins_with_one_slash():
    assert resolve_url("thumbs.jpg", "//cdn.example.com/video/") == "//cdn.example.com/video/thumbs.jpg"
    assert resolve_url("/thumbs.jpg", "//cdn.example.com/video//") == "//cdn.example.com/video/thumbs.jpg"


def test_scheme_base_trims_both_sides():
    assert resolve_url("/img/a.jpg/", "https://example.com/video/") == "https://example.com/video/img/a.jpg"


def test_unresolvable_base_returns_reference():
    assert resolve_url("a.jpg", "video/") == "a.jpg"
    assert resolve_url("a.jpg", "") == "a.jpg"


def test_source_directory():
    assert source_directory("https://example.com/v/thumbs.vtt") == "https://example.com/v/"
    assert source_directory("thumbs.vtt") == ""


def test_page_base_url():
    assert page_base_url("https://example.com:8080/watch/index.html?v=1") == "https://example.com:8080/watch/"
    assert page_base_url("http://example.com/") == "http://example.com/"
    assert page_base_url(None) == ""


def test_effective_base():
    assert effective_base("//cdn.example.com/v/thumbs.vtt") == "//cdn.example.com/v/"
    assert effective_base("assets/thumbs.vtt", "https://example.com/watch/page.html") == "https://example.com/watch/assets/"
    assert effective_base("thumbs.vtt") == ""


def test_page_base_url_keeps_ipv6_brackets():
    assert page_base_url("http://[::1]:8080/watch/p.html") == "http://[::1]:8080/watch/"
    assert resolve_url("t.vtt", page_base_url("http://[::1]/p.html")) == "http://[::1]/t.vtt"
