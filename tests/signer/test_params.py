"""Tests for signer/params.py."""

import itertools

import pytest

from signer.params import InvalidURLError, as_pairs, normalize_parameters, split_url


class TestAsPairs:
    """Tests for as_pairs."""

    def test_none_is_empty(self) -> None:
        assert as_pairs(None) == []

    def test_mapping(self) -> None:
        assert as_pairs({"a": "1", "b": "2"}) == [("a", "1"), ("b", "2")]

    def test_pairs_keep_order(self) -> None:
        assert as_pairs([("b", "2"), ("a", "1")]) == [("b", "2"), ("a", "1")]

    def test_sequence_values_expand(self) -> None:
        assert as_pairs({"a": ["e", "b"], "c": "d"}) == [("a", "e"), ("a", "b"), ("c", "d")]

    def test_non_string_values(self) -> None:
        assert as_pairs({"count": 10, "include_entities": True, "trim_user": False}) == [
            ("count", "10"),
            ("include_entities", "true"),
            ("trim_user", "false"),
        ]

    def test_bytes_values_kept_as_bytes(self) -> None:
        assert as_pairs([("q", "café".encode()), ("raw", b"\xff")]) == [("q", b"caf\xc3\xa9"), ("raw", b"\xff")]

    def test_bytes_and_text_normalize_alike(self) -> None:
        assert normalize_parameters({}, as_pairs([("q", "café".encode())])) == normalize_parameters({}, as_pairs([("q", "café")]))


class TestSplitUrl:
    """Tests for split_url."""

    def test_plain_url(self) -> None:
        assert split_url("https://api.twitter.com/1.1/statuses/update.json") == (
            "https://api.twitter.com/1.1/statuses/update.json",
            [],
        )

    def test_query_is_decoded_into_pairs(self) -> None:
        base_url, query = split_url("https://api.example.com/x?q=hello%20world&lang=en")
        assert base_url == "https://api.example.com/x"
        assert query == [("q", "hello world"), ("lang", "en")]

    def test_plus_in_query_is_space(self) -> None:
        _, query = split_url("https://api.example.com/x?q=hello+world")
        assert query == [("q", "hello world")]

    def test_blank_values_kept(self) -> None:
        _, query = split_url("https://api.example.com/x?a=&b")
        assert query == [("a", ""), ("b", "")]

    def test_repeated_query_names_kept(self) -> None:
        _, query = split_url("https://api.example.com/x?a=2&a=1")
        assert query == [("a", "2"), ("a", "1")]

    def test_fragment_dropped(self) -> None:
        assert split_url("https://example.com/path#section") == ("https://example.com/path", [])

    def test_scheme_and_host_lowercased(self) -> None:
        base_url, _ = split_url("HTTPS://API.Example.COM/Path")
        assert base_url == "https://api.example.com/Path"

    def test_default_ports_dropped(self) -> None:
        assert split_url("http://example.com:80/r")[0] == "http://example.com/r"
        assert split_url("https://example.com:443/r")[0] == "https://example.com/r"

    def test_non_default_port_kept(self) -> None:
        assert split_url("https://example.com:8443/r")[0] == "https://example.com:8443/r"
        assert split_url("http://example.com:443/r")[0] == "http://example.com:443/r"

    def test_empty_path_becomes_slash(self) -> None:
        assert split_url("https://example.com")[0] == "https://example.com/"

    def test_userinfo_dropped(self) -> None:
        assert split_url("https://user:pw@example.com/r")[0] == "https://example.com/r"

    def test_ipv6_host(self) -> None:
        assert split_url("http://[::1]:8080/r")[0] == "http://[::1]:8080/r"

    def test_non_ascii_path_percent_encoded(self) -> None:
        assert split_url("https://api.example.com/users/café.json")[0] == "https://api.example.com/users/caf%C3%A9.json"

    def test_existing_path_escapes_kept(self) -> None:
        assert split_url("https://api.example.com/a%20b/caf%C3%A9")[0] == "https://api.example.com/a%20b/caf%C3%A9"

    def test_internationalized_host_idna_encoded(self) -> None:
        assert split_url("https://bücher.example/x")[0] == "https://xn--bcher-kva.example/x"

    def test_encoded_base_url_is_stable(self) -> None:
        base_url, _ = split_url("https://Bücher.example:8443/café")
        assert split_url(base_url)[0] == base_url

    def test_query_must_decode_as_utf8(self) -> None:
        with pytest.raises(InvalidURLError, match="not valid UTF-8"):
            split_url("https://api.example.com/x?b=%FF")

    @pytest.mark.parametrize(
        "url",
        [
            "not a url",
            "example.com/path",
            "ftp://example.com/file",
            "https:///no-host",
            "http://[::1/broken",
            "https://example.com:port/r",
            "",
        ],
    )
    def test_malformed_urls_rejected(self, url: str) -> None:
        with pytest.raises(InvalidURLError) as exc_info:
            split_url(url)
        assert exc_info.value.url == url

    def test_invalid_url_error_is_value_error(self) -> None:
        assert issubclass(InvalidURLError, ValueError)


class TestNormalizeParameters:
    """Tests for normalize_parameters."""

    def test_sorted_by_name_then_value(self) -> None:
        assert normalize_parameters({}, [("b", "2"), ("a", "2"), ("a", "1")]) == "a=1&a=2&b=2"

    def test_merges_oauth_and_request_params(self) -> None:
        result = normalize_parameters({"oauth_nonce": "n", "oauth_consumer_key": "k"}, [("z", "1"), ("a", "2")])
        assert result == "a=2&oauth_consumer_key=k&oauth_nonce=n&z=1"

    def test_signature_excluded(self) -> None:
        result = normalize_parameters({"oauth_signature": "sig", "oauth_nonce": "n"})
        assert result == "oauth_nonce=n"

    def test_duplicates_not_merged(self) -> None:
        assert normalize_parameters({}, [("a", "x"), ("a", "x")]) == "a=x&a=x"

    def test_values_encoded_before_sorting(self) -> None:
        # "." < "/" as raw text, but "%2F" < "." once encoded
        result = normalize_parameters({}, [("k", "."), ("k", "/")])
        assert result == "k=%2F&k=."

    def test_space_and_tilde(self) -> None:
        assert normalize_parameters({}, [("a", "b c")]) == "a=b%20c"
        assert normalize_parameters({}, [("a", "b~c")]) == "a=b~c"

    def test_empty(self) -> None:
        assert normalize_parameters({}) == ""

    def test_order_independent(self) -> None:
        params = [("status", "hi there"), ("a", "2"), ("a", "1"), ("c", ""), ("b", "é")]
        oauth = {"oauth_nonce": "n", "oauth_timestamp": "1"}
        results = {normalize_parameters(oauth, list(perm)) for perm in itertools.permutations(params)}
        assert results == {"a=1&a=2&b=%C3%A9&c=&oauth_nonce=n&oauth_timestamp=1&status=hi%20there"}
