"""Tests for token URI scheme detection."""

from __future__ import annotations

import pytest

from tokenmeta.core.types import UriScheme
from tokenmeta.metadata.uri import classify_uri, gateway_url, ipfs_to_gateway, strip_scheme

GATEWAY = "https://gateway.test/ipfs/"


class TestClassifyUri:
    """Tests for classify_uri."""

    @pytest.mark.parametrize(
        "uri,expected",
        [
            ("data:application/json;base64,eyJ9", UriScheme.DATA_BASE64),
            ("data:application/json,%7B%7D", UriScheme.DATA_JSON),
            ("ipfs://QmHash/5.json", UriScheme.IPFS),
            ("https://api.example.com/token/5", UriScheme.HTTP),
            ("http://example.com/5.json", UriScheme.HTTP),
            ("data:text/plain,hello", UriScheme.HTTP),
            ("ar://abc", UriScheme.HTTP),
            ("", UriScheme.HTTP),
        ],
    )
    def test_classification(self, uri: str, expected: UriScheme):
        """Prefixes should map to schemes, anything else to HTTP."""
        assert classify_uri(uri) == expected

    def test_base64_checked_before_plain_json(self):
        """The base64 prefix is more specific and must win."""
        assert classify_uri("data:application/json;base64,e30=") == UriScheme.DATA_BASE64


class TestStripScheme:
    """Tests for strip_scheme."""

    @pytest.mark.parametrize(
        "uri,scheme,expected",
        [
            ("data:application/json;base64,e30=", UriScheme.DATA_BASE64, "e30="),
            ("data:application/json,%7B%7D", UriScheme.DATA_JSON, "%7B%7D"),
            ("ipfs://QmHash/5.json", UriScheme.IPFS, "QmHash/5.json"),
            ("https://example.com/5", UriScheme.HTTP, "https://example.com/5"),
        ],
    )
    def test_strip(self, uri: str, scheme: UriScheme, expected: str):
        """The prefix should be removed; HTTP URIs are kept whole."""
        assert strip_scheme(uri, scheme) == expected


class TestGatewayRewrite:
    """Tests for IPFS gateway URL construction."""

    def test_gateway_url(self):
        """Gateway URL should be the gateway followed by the CID."""
        assert gateway_url("Qm123", GATEWAY) == "https://gateway.test/ipfs/Qm123"

    def test_ipfs_rewritten(self):
        """ipfs:// references should be rewritten to the gateway."""
        assert ipfs_to_gateway("ipfs://Qmimg", GATEWAY) == "https://gateway.test/ipfs/Qmimg"

    def test_ipfs_path_kept(self):
        """Paths inside the CID directory should be kept."""
        assert ipfs_to_gateway("ipfs://Qmdir/1.png", GATEWAY) == "https://gateway.test/ipfs/Qmdir/1.png"

    @pytest.mark.parametrize(
        "url",
        [
            "https://cdn.example.com/5.png",
            "data:image/svg+xml;base64,PHN2Zy8+",
            "",
        ],
    )
    def test_other_urls_unchanged(self, url: str):
        """Non-IPFS references should pass through unchanged."""
        assert ipfs_to_gateway(url, GATEWAY) == url
