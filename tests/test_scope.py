# File: tests/test_scope.py
import dataclasses

import pytest

from site_distill.crawler.scope import ScopeRule


def test_host_scope_is_exact_by_default():
    scope = ScopeRule.from_seed("https://a.com/")
    assert scope.base_path is None
    assert scope.ignore_www is False
    assert scope.in_scope("https://a.com/anything/deep")
    assert scope.in_scope("http://a.com/plain-http")
    assert not scope.in_scope("https://other.com/page")
    assert not scope.in_scope("https://www.a.com/")
    assert not scope.in_scope("https://sub.a.com/")


def test_non_http_candidates_rejected():
    scope = ScopeRule.from_seed("https://a.com/")
    assert not scope.in_scope("mailto:team@a.com")
    assert not scope.in_scope("ftp://a.com/file")


def test_path_scope():
    scope = ScopeRule.from_seed("https://a.com/docs/", path_scoped=True)
    assert scope.base_path == "/docs/"
    assert scope.in_scope("https://a.com/docs/intro")
    assert scope.in_scope("https://a.com/docs")
    assert not scope.in_scope("https://a.com/blog/post")
    assert not scope.in_scope("https://a.com/documents/x")


def test_path_scope_gets_trailing_slash():
    scope = ScopeRule.from_seed("https://a.com/docs/guide", path_scoped=True)
    assert scope.base_path == "/docs/guide/"
    assert scope.in_scope("https://a.com/docs/guide/step-1")
    assert not scope.in_scope("https://a.com/docs/guidebook")


def test_path_scope_ignores_www_by_default():
    scope = ScopeRule.from_seed("https://www.a.com/docs/", path_scoped=True)
    assert scope.ignore_www is True
    assert scope.in_scope("https://a.com/docs/x")
    assert scope.in_scope("https://www.a.com/docs/y")


def test_ignore_www_can_be_forced():
    exact = ScopeRule.from_seed("https://a.com/docs/", path_scoped=True, ignore_www=False)
    assert not exact.in_scope("https://www.a.com/docs/x")
    loose = ScopeRule.from_seed("https://a.com/", ignore_www=True)
    assert loose.in_scope("https://www.a.com/x")


def test_scope_rule_is_immutable():
    scope = ScopeRule.from_seed("https://a.com/")
    with pytest.raises(dataclasses.FrozenInstanceError):
        scope.host = "b.com"  # type: ignore[misc]
