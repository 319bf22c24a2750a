#  pubsuffix - Domain name parser based on the Public Suffix List
#  Copyright (C) 2023 Dominick C. Pastore
#
#  This program is free software: you can redistribute it and/or modify
#  it under the terms of the GNU General Public License as published by
#  the Free Software Foundation, either version 3 of the License, or
#  (at your option) any later version.
#
#  This program is distributed in the hope that it will be useful,
#  but WITHOUT ANY WARRANTY; without even the implied warranty of
#  MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#  GNU General Public License for more details.
#
#  You should have received a copy of the GNU General Public License
#  along with this program.  If not, see <https://www.gnu.org/licenses/>.

"""Normalizing, matching, and decomposing domain names"""

from typing import Optional

from . import defaultlist
from .domainname import Domain
from .exceptions import (PublicSuffixException, DomainInvalid, Blank,
                         LeadingSeparator, SchemeLike, DomainNotAllowed)
from .rule import DOT, Rule, ascii_lower
from .rulelist import RuleList


def normalize(name) -> str:
    """Canonicalize a domain name: strip surrounding whitespace and one
    trailing dot, then lowercase

    :param name: The domain name or fully qualified domain name
    :raises Blank: if nothing is left
    :raises LeadingSeparator: if the name starts with a dot
    :raises SchemeLike: if the name looks like a URL
    :return: The normalized name
    """
    name = str(name).strip()
    if name.endswith(DOT):
        name = name[:-1]
    name = ascii_lower(name)

    if name == '':
        raise Blank("Name is blank")
    if name.startswith(DOT):
        raise LeadingSeparator(f"{name} starts with a dot")
    if '://' in name:
        raise SchemeLike(f"{name} is not expected to contain a scheme")
    return name


def _split(name: str, rule: Rule):
    """Decompose a normalized name with the given rule, rejecting names whose
    registrable label would be empty (e.g. ``a..com``)"""
    leftover, suffix = rule.decompose(name)
    if leftover and leftover[-1] == '':
        raise DomainInvalid(f"{name} has an empty label left of its public "
                            "suffix")
    return leftover, suffix


def decompose(name: str, rule: Rule) -> Domain:
    """Split a normalized name into a :class:`~pubsuffix.Domain` using the
    given (matching) rule. The ``sld`` and ``trd`` are ``None`` if the name
    is just a public suffix.

    :raises DomainInvalid: if the label left of the public suffix is empty
    """
    leftover, suffix = _split(name, rule)
    parts = list(leftover)
    sld = parts.pop() if parts else None
    trd = DOT.join(parts) if parts else None
    return Domain(suffix, sld, trd)


def _find_rule(name: str, rule_list: Optional[RuleList],
               default_rule: Optional[Rule],
               ignore_private: bool) -> Rule:
    """Find the prevailing rule for a normalized name, raising
    :exc:`DomainInvalid` if there is none"""
    if rule_list is None:
        rule_list = defaultlist.get_default_list()
    if default_rule is None:
        default_rule = rule_list.default_rule

    rule = rule_list.find(name, default=default_rule,
                          ignore_private=ignore_private)
    # A default rule is returned even when it does not match (e.g. the name
    # ends in an empty label)
    if rule is None or not rule.match(name):
        raise DomainInvalid(f"{name} is not a valid domain")
    return rule


def parse(name, *, rule_list: Optional[RuleList] = None,
          default_rule: Optional[Rule] = None,
          ignore_private: bool = False) -> Domain:
    """Parse a domain name into a :class:`~pubsuffix.Domain`

    :param name: The domain name or fully qualified domain name to parse
    :param rule_list: The :class:`~pubsuffix.RuleList` to search. Defaults to
                      the default list.
    :param default_rule: The rule to use if no rule matches. Defaults to the
                         list's default rule.
    :param ignore_private: Ignore rules from the private domains section
    :raises DomainInvalid: if the name is not a valid domain (or one of its
                           more specific subclasses if normalization fails)
    :raises DomainNotAllowed: if a rule matches the name but does not allow
                              it, e.g. the name is itself a public suffix
    """
    what = normalize(name)
    rule = _find_rule(what, rule_list, default_rule, ignore_private)

    result = decompose(what, rule)
    if result.sld is None:
        raise DomainNotAllowed(f"{what} is not allowed according to Registry "
                               "policy")
    return result


def valid(name, *, rule_list: Optional[RuleList] = None,
          default_rule: Optional[Rule] = None,
          ignore_private: bool = True) -> bool:
    """Check whether a name is a valid, allowed domain or subdomain. Never
    raises for invalid names.

    Unlike :func:`parse`, private domain rules are ignored by default.
    """
    try:
        what = normalize(name)
        rule = _find_rule(what, rule_list, default_rule, ignore_private)
        leftover, _ = _split(what, rule)
    except PublicSuffixException:
        return False
    return len(leftover) > 0


def registrable_domain(name, *, rule_list: Optional[RuleList] = None,
                       default_rule: Optional[Rule] = None,
                       ignore_private: bool = False) -> Optional[str]:
    """Get the registrable domain of a name: its public suffix plus one more
    label

    :raises DomainInvalid: if the name cannot be normalized, no rule
                           matches it, or the label left of the public
                           suffix is empty
    :return: The registrable domain, or ``None`` if the name is just a public
             suffix
    """
    what = normalize(name)
    rule = _find_rule(what, rule_list, default_rule, ignore_private)

    leftover, suffix = _split(what, rule)
    if not leftover:
        return None
    return leftover[-1] + DOT + suffix


def domain(name, **options) -> Optional[str]:
    """Parse a name and return its registrable domain, or ``None`` if the
    name is not valid for any reason

    :param options: Keyword options accepted by :func:`parse`
    """
    try:
        return parse(name, **options).domain
    except PublicSuffixException:
        return None
