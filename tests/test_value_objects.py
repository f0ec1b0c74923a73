"""Tests for RepositoryIdentity parsing and CredentialChain construction."""

from __future__ import annotations

import pytest

from readme_synth.domain.exceptions import CredentialChainEmptyError
from readme_synth.domain.value_objects import Credential, CredentialChain, RepositoryIdentity


class TestRepositoryIdentityParse:
    @pytest.mark.parametrize(
        ("url", "owner", "name"),
        [
            ("https://github.com/psf/requests", "psf", "requests"),
            ("https://github.com/psf/requests.git", "psf", "requests"),
            ("http://www.github.com/psf/requests/", "psf", "requests"),
            ("github.com/psf/requests", "psf", "requests"),
            ("https://github.com/psf/requests/tree/main/docs", "psf", "requests"),
            ("https://github.com/psf/requests?tab=readme", "psf", "requests"),
            ("  https://github.com/my-org/my.repo  ", "my-org", "my.repo"),
        ],
    )
    def test_extracts_owner_and_name(self, url: str, owner: str, name: str) -> None:
        assert RepositoryIdentity.parse(url) == RepositoryIdentity(owner=owner, name=name)

    @pytest.mark.parametrize(
        "url",
        [
            "",
            "https://github.com/",
            "https://github.com/psf",
            "https://github.com/psf/",
            "https://gitlab.com/psf/requests",
            "not a url",
            "https://github.com/psf/.git",
        ],
    )
    def test_returns_none_without_two_segments(self, url: str) -> None:
        assert RepositoryIdentity.parse(url) is None

    def test_non_string_input_returns_none(self) -> None:
        assert RepositoryIdentity.parse(None) is None
        assert RepositoryIdentity.parse(42) is None

    def test_full_name(self) -> None:
        assert RepositoryIdentity(owner="psf", name="requests").full_name == "psf/requests"


class TestCredentialChain:
    def test_drops_absent_entries_and_keeps_order(self) -> None:
        chain = CredentialChain.from_sources(
            [("A", "key-a"), ("B", None), ("C", "  "), ("D", "key-d")]
        )
        assert [c.source for c in chain] == ["A", "D"]
        assert [c.secret for c in chain] == ["key-a", "key-d"]
        assert len(chain) == 2

    def test_empty_chain_is_rejected(self) -> None:
        with pytest.raises(CredentialChainEmptyError):
            CredentialChain.from_sources([("A", None), ("B", "")])

    def test_direct_construction_with_no_credentials_is_rejected(self) -> None:
        with pytest.raises(CredentialChainEmptyError):
            CredentialChain(credentials=())

    def test_repr_hides_secret(self) -> None:
        credential = Credential(source="OPENAI_API_KEY", secret="sk-very-secret")
        assert "sk-very-secret" not in repr(credential)
        assert "sk-very-secret" not in str(credential)
        assert "OPENAI_API_KEY" in repr(credential)
