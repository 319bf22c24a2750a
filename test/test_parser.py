"""Tests for normalizing, parsing, and validating names"""
import pytest

import pubsuffix
from pubsuffix import Domain, Rule


@pytest.mark.parametrize("raw, expected", [
    ("example.com", "example.com"),
    ("  Example.COM  ", "example.com"),
    ("example.com.", "example.com"),
    ("\twww.Example.co.UK.\n", "www.example.co.uk"),
    ("com", "com"),
])
def test_normalize(raw, expected):
    assert pubsuffix.normalize(raw) == expected


@pytest.mark.parametrize("raw", [
    "example.com", " Example.com. ", "a.b.c.", "x", "ÉCOLE.fr",
])
def test_normalize_idempotent(raw):
    once = pubsuffix.normalize(raw)
    assert pubsuffix.normalize(once) == once


def test_normalize_only_folds_ascii():
    assert pubsuffix.normalize("ÉCOLE.FR") == "École.fr"


@pytest.mark.parametrize("raw, exc", [
    ("", pubsuffix.Blank),
    ("   ", pubsuffix.Blank),
    (".", pubsuffix.Blank),
    (".example.com", pubsuffix.LeadingSeparator),
    ("http://www.example.com", pubsuffix.SchemeLike),
    ("www.example.com/ftp://", pubsuffix.SchemeLike),
])
def test_normalize_invalid(raw, exc):
    with pytest.raises(exc):
        pubsuffix.normalize(raw)
    with pytest.raises(pubsuffix.DomainInvalid):
        pubsuffix.normalize(raw)


def test_normalize_non_string():
    assert pubsuffix.normalize(123) == "123"


@pytest.mark.parametrize("name, tld, sld, trd", [
    ("google.com", "com", "google", None),
    ("www.google.com", "com", "google", "www"),
    ("example.co.uk", "co.uk", "example", None),
    ("a.b.example.co.uk", "co.uk", "example", "a.b"),
    ("bar.foo.ck", "foo.ck", "bar", None),
    ("www.ck", "ck", "www", None),
    ("foo.www.ck", "ck", "www", "foo"),
    ("example.uk", "uk", "example", None),
    ("Google.COM.", "com", "google", None),
])
def test_parse(ck_rules, name, tld, sld, trd):
    domain = pubsuffix.parse(name, rule_list=ck_rules)
    assert (domain.tld, domain.sld, domain.trd) == (tld, sld, trd)


@pytest.mark.parametrize("name", ["com", "uk", "co.uk", "foo.ck", "test"])
def test_parse_bare_suffix_not_allowed(ck_rules, name):
    with pytest.raises(pubsuffix.DomainNotAllowed):
        pubsuffix.parse(name, rule_list=ck_rules)


def test_parse_unlisted_uses_rightmost_label(ck_rules):
    domain = pubsuffix.parse("www.example.test", rule_list=ck_rules)
    assert domain == Domain("test", "example", "www")


def test_parse_invalid(ck_rules):
    with pytest.raises(pubsuffix.SchemeLike):
        pubsuffix.parse("http://www.example.com", rule_list=ck_rules)
    with pytest.raises(pubsuffix.Blank):
        pubsuffix.parse("", rule_list=ck_rules)
    with pytest.raises(pubsuffix.LeadingSeparator):
        pubsuffix.parse(".example.com", rule_list=ck_rules)


def test_parse_no_rule(rule_list_factory):
    rules = rule_list_factory("com", default_rule=None)
    with pytest.raises(pubsuffix.DomainInvalid) as excinfo:
        pubsuffix.parse("example.test", rule_list=rules)
    assert not isinstance(excinfo.value, pubsuffix.DomainNotAllowed)


def test_parse_empty_rightmost_label(ck_rules):
    with pytest.raises(pubsuffix.DomainInvalid):
        pubsuffix.parse("example.com..", rule_list=ck_rules)


def test_parse_custom_default_rule(ck_rules):
    domain = pubsuffix.parse("a.b.example.test", rule_list=ck_rules,
                             default_rule=Rule.factory("*.test"))
    assert domain == Domain("example.test", "b", "a")


def test_parse_private(sample_rules):
    domain = pubsuffix.parse("foo.blogspot.com", rule_list=sample_rules)
    assert domain == Domain("blogspot.com", "foo")
    domain = pubsuffix.parse("foo.blogspot.com", rule_list=sample_rules,
                             ignore_private=True)
    assert domain == Domain("com", "blogspot", "foo")


def test_round_trip(sample_rules):
    name = "a.b.foo.city.kawasaki.jp"
    domain = pubsuffix.parse(name, rule_list=sample_rules)
    assert domain.trd + "." + domain.sld + "." + domain.tld == name
    assert domain == Domain("kawasaki.jp", "city", "a.b.foo")


def test_valid(ck_rules):
    assert pubsuffix.valid("google.com", rule_list=ck_rules)
    assert pubsuffix.valid("www.google.com", rule_list=ck_rules)
    assert pubsuffix.valid("example.tldnotlisted", rule_list=ck_rules)
    assert pubsuffix.valid("www.ck", rule_list=ck_rules)
    assert not pubsuffix.valid("foo.ck", rule_list=ck_rules)
    assert not pubsuffix.valid("com", rule_list=ck_rules)
    assert not pubsuffix.valid("http://www.example.com", rule_list=ck_rules)
    assert not pubsuffix.valid("", rule_list=ck_rules)


def test_valid_ignores_private_by_default(sample_rules):
    assert pubsuffix.valid("blogspot.com", rule_list=sample_rules)
    assert not pubsuffix.valid("blogspot.com", rule_list=sample_rules,
                               ignore_private=False)


def test_valid_no_rule(rule_list_factory):
    rules = rule_list_factory("com", default_rule=None)
    assert not pubsuffix.valid("example.test", rule_list=rules)


def test_registrable_domain(ck_rules):
    assert pubsuffix.registrable_domain("www.google.com",
                                        rule_list=ck_rules) == "google.com"
    assert pubsuffix.registrable_domain("a.b.example.co.uk",
                                        rule_list=ck_rules) == "example.co.uk"
    assert pubsuffix.registrable_domain("x.bar.foo.ck",
                                        rule_list=ck_rules) == "bar.foo.ck"
    assert pubsuffix.registrable_domain("co.uk", rule_list=ck_rules) is None


def test_registrable_domain_invalid(ck_rules, rule_list_factory):
    with pytest.raises(pubsuffix.SchemeLike):
        pubsuffix.registrable_domain("http://example.com",
                                     rule_list=ck_rules)
    rules = rule_list_factory("com", default_rule=None)
    with pytest.raises(pubsuffix.DomainInvalid):
        pubsuffix.registrable_domain("example.test", rule_list=rules)


def test_domain(ck_rules):
    assert pubsuffix.domain("www.google.com", rule_list=ck_rules) == \
        "google.com"
    assert pubsuffix.domain("www.ck", rule_list=ck_rules) == "www.ck"
    assert pubsuffix.domain("com", rule_list=ck_rules) is None
    assert pubsuffix.domain("http://www.google.com",
                            rule_list=ck_rules) is None


def test_decompose():
    rule = Rule.factory("co.uk")
    assert pubsuffix.decompose("co.uk", rule) == Domain("co.uk")
    assert pubsuffix.decompose("a.b.c.co.uk", rule) == \
        Domain("co.uk", "c", "a.b")


def test_uses_default_list(sample_rules):
    pubsuffix.set_default_list(sample_rules)
    assert pubsuffix.parse("foo.blogspot.com").tld == "blogspot.com"
    assert not pubsuffix.valid("co.uk")


def test_bundled_default_list(mocker, tmp_path):
    """With no cached list, the bundled snapshot is used"""
    mocker.patch('pubsuffix.configuration.DEFAULT_DATA_DIR', str(tmp_path))
    assert pubsuffix.parse("www.example.co.uk") == \
        Domain("co.uk", "example", "www")
    assert pubsuffix.domain("www.city.kawasaki.jp") == "city.kawasaki.jp"
    assert not pubsuffix.valid("foo.kawasaki.jp")


@pytest.mark.parametrize("name", ["a..com", "foo..ck", "x..example"])
def test_empty_registrable_label(ck_rules, name):
    with pytest.raises(pubsuffix.DomainInvalid):
        pubsuffix.parse(name, rule_list=ck_rules)
    with pytest.raises(pubsuffix.DomainInvalid):
        pubsuffix.registrable_domain(name, rule_list=ck_rules)
    assert not pubsuffix.valid(name, rule_list=ck_rules)
    assert pubsuffix.domain(name, rule_list=ck_rules) is None


def test_empty_label_in_subdomain_allowed(ck_rules):
    domain = pubsuffix.parse("a..example.com", rule_list=ck_rules)
    assert domain == Domain("com", "example", "a.")
