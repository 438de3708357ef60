"""
Unit tests for portal entry parameter parsing.
"""

import httpx
import pytest

from src.domain.value_objects.identification_method import IdentificationMethod
from src.wizard.entry import parse_entry_params


class TestParseEntryParams:
    def test_email(self):
        params = parse_entry_params("?email=marie%40example.com")

        assert params.method == IdentificationMethod.EMAIL
        assert params.value == "marie@example.com"
        assert params.has_identification is True
        assert params.admin_mode is False

    def test_phone(self):
        params = parse_entry_params("phone=0612345678")

        assert params.method == IdentificationMethod.PHONE
        assert params.value == "0612345678"

    def test_email_preferred_over_phone(self):
        params = parse_entry_params("phone=0612345678&email=marie%40example.com")

        assert params.method == IdentificationMethod.EMAIL

    @pytest.mark.parametrize("query", ["", "?", "email=&phone=", "ref=newsletter"])
    def test_no_identification(self, query):
        params = parse_entry_params(query)

        assert params.has_identification is False
        assert params.method is None

    @pytest.mark.parametrize(
        "query, expected",
        [("admin=true", True), ("admin=1", False), ("admin=TRUE", False), ("", False)],
    )
    def test_admin_mode(self, query, expected):
        assert parse_entry_params(query).admin_mode is expected

    def test_from_url(self):
        url = httpx.URL("https://support.example.com/?admin=true&phone=0612345678")

        params = parse_entry_params(url)

        assert params.admin_mode is True
        assert params.method == IdentificationMethod.PHONE

    def test_from_query_params(self):
        params = parse_entry_params(httpx.QueryParams({"email": " marie@example.com "}))

        assert params.value == "marie@example.com"
