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

"""Read-only, indexed collection of rules and the rule selection
algorithm"""

import logging
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from .rule import DEFAULT_RULE, DOT, STAR, Rule, RuleKind

log = logging.getLogger('pubsuffix')

# Sentinel so that find(default=None) can be told apart from no default given
_UNSET = object()


class RuleList:
    """An immutable collection of :class:`~pubsuffix.Rule`, indexed by
    rightmost label.

    To change the rules, build a new :class:`RuleList` and replace the old
    one. Lookups never modify the list, so one instance can be shared freely
    between threads.

    :param rules: The rules, in list order. Order only matters for breaking
                  ties between otherwise equal rules.
    :param default_rule: The rule returned by :meth:`find` when nothing
                         matches. Defaults to ``*``. May be ``None``, in which
                         case :meth:`find` returns ``None`` when nothing
                         matches.
    """

    def __init__(self, rules: Iterable[Rule] = (),
                 default_rule: Optional[Rule] = DEFAULT_RULE):
        #: All rules, in list order
        self._rules: Tuple[Rule, ...] = tuple(rules)

        #: The fallback rule for :meth:`find`
        self._default_rule: Optional[Rule] = default_rule

        #: Rules keyed on their rightmost label
        self._index: Dict[str, List[Rule]] = dict()

        #: Rules whose rightmost label is a wildcard. These can match any
        #: name, so they are checked on every lookup.
        self._catchall: List[Rule] = []

        for rule in self._rules:
            key = rule.labels[-1]
            if key == STAR:
                self._catchall.append(rule)
            else:
                self._index.setdefault(key, []).append(rule)

    @classmethod
    def parse(cls, text: str, private_domains: bool = True) -> 'RuleList':
        """Build a :class:`RuleList` from the text of a Public Suffix List

        :param text: The list contents
        :param private_domains: Whether to keep rules from the private domains
                                section
        """
        # Imported here because listfile builds RuleLists itself
        from .listfile import parse_rules
        return cls(parse_rules(text.splitlines(), private_domains))

    @property
    def default_rule(self) -> Optional[Rule]:
        return self._default_rule

    def __len__(self):
        return len(self._rules)

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules)

    def __contains__(self, rule):
        return rule in self._rules

    def __eq__(self, other):
        if not isinstance(other, RuleList):
            return NotImplemented
        return (self._rules == other._rules and
                self._default_rule == other._default_rule)

    def __repr__(self):
        return f"<RuleList with {len(self._rules)} rules>"

    def _candidates(self, labels: List[str]) -> Iterator[Rule]:
        """Yield the rules that could possibly match, in list order within
        each bucket"""
        yield from self._index.get(labels[-1], ())
        yield from self._catchall

    def select(self, name: str, ignore_private: bool = False) -> List[Rule]:
        """Find every rule matching the name

        :param name: The normalized name
        :param ignore_private: Skip rules from the private domains section
        :return: A list of all matching rules (in no guaranteed order)
        """
        labels = name.split(DOT)
        return [rule for rule in self._candidates(labels)
                if not (ignore_private and rule.private) and
                rule.matches(labels)]

    def find(self, name: str, default=_UNSET,
             ignore_private: bool = False) -> Optional[Rule]:
        """Find the rule that determines the public suffix of the name.

        Any matching exception rule takes precedence (the one with the fewest
        labels, should several match). Otherwise the matching rule with the
        most labels wins, with exact rules beating wildcard rules of the same
        length. Remaining ties go to the rule listed first.

        :param name: The normalized name
        :param default: Rule to return if no rule matches. If not given, the
                        list's :attr:`default_rule` is used.
        :param ignore_private: Skip rules from the private domains section
        :return: The prevailing :class:`~pubsuffix.Rule`, or the default
                 (which may be ``None``)
        """
        matches = self.select(name, ignore_private)
        if not matches:
            if default is _UNSET:
                default = self._default_rule
            log.debug("No rule matches %s, using default %r", name, default)
            return default

        exceptions = [r for r in matches if r.kind is RuleKind.EXCEPTION]
        if exceptions:
            # min() keeps the first of equal elements
            winner = min(exceptions, key=lambda r: r.length)
        else:
            # max() keeps the first of equal elements
            winner = max(matches, key=lambda r: (r.length,
                                                 r.kind is RuleKind.EXACT))
        log.debug("Rule %r prevails for %s", winner, name)
        return winner
