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

"""Public Suffix List rules and the per-kind matching logic"""

import enum
import string
from typing import Sequence, Tuple

DOT = '.'
BANG = '!'
STAR = '*'

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def ascii_lower(text: str) -> str:
    """Lowercase only the ASCII letters in ``text``. Other characters are left
    alone (no Unicode case folding)."""
    return text.translate(_ASCII_LOWER)


def _tail_equal(labels: Sequence[str], pattern: Sequence[str]) -> bool:
    """Check whether the rightmost ``len(pattern)`` labels equal the
    pattern"""
    if len(pattern) == 0:
        return True
    return tuple(labels[-len(pattern):]) == tuple(pattern)


class RuleKind(enum.Enum):
    """The three kinds of rule in the Public Suffix List"""
    EXACT = 'exact'
    WILDCARD = 'wildcard'
    EXCEPTION = 'exception'


class Rule:
    """Base class for a single Public Suffix List rule. Rules are immutable
    once created. Use :meth:`factory` to build the right subclass from list
    syntax (``co.uk``, ``*.ck``, ``!www.ck``).

    :param labels: The rule's labels, leftmost first, as they appear in the
                   list (without any leading ``!``)
    :param private: Whether the rule comes from the private domains section
                    of the list
    :raises ValueError: if the labels are not valid for this kind of rule
    """

    #: Which kind of rule this is. Set by each subclass.
    kind: RuleKind

    def __init__(self, labels: Sequence[str], private: bool = False):
        labels = tuple(ascii_lower(label) for label in labels)
        if len(labels) == 0:
            raise ValueError("A rule requires at least one label")
        self._labels: Tuple[str, ...] = labels
        self._private: bool = bool(private)

    @staticmethod
    def factory(text: str, private: bool = False) -> 'Rule':
        """Create a rule from its Public Suffix List representation

        :param text: The rule as written in the list, e.g. ``"*.ck"``
        :param private: Whether the rule is in the private domains section
        :raises ValueError: if the text is not a valid rule
        :return: An :class:`ExactRule`, :class:`WildcardRule`, or
                 :class:`ExceptionRule`
        """
        text = str(text).strip()
        if text == '':
            raise ValueError("Rule text is blank")
        if text.startswith(BANG):
            return ExceptionRule(text[1:].split(DOT), private)
        labels = text.split(DOT)
        if labels[0] == STAR:
            return WildcardRule(labels, private)
        return ExactRule(labels, private)

    @property
    def labels(self) -> Tuple[str, ...]:
        """The rule's labels, leftmost first"""
        return self._labels

    @property
    def private(self) -> bool:
        """Whether the rule comes from the private domains section"""
        return self._private

    @property
    def length(self) -> int:
        """Number of labels in the rule pattern. A name needs at least this
        many labels to match."""
        return len(self._labels)

    @property
    def suffix_length(self) -> int:
        """Number of rightmost labels of a matching name that make up its
        public suffix"""
        return len(self._labels)

    @property
    def value(self) -> str:
        """The rule as it would be written in the list"""
        return DOT.join(self._labels)

    def matches(self, labels: Sequence[str]) -> bool:
        """Check whether this rule matches a name

        :param labels: The normalized name, split into labels, leftmost first
        """
        raise NotImplementedError

    def match(self, name: str) -> bool:
        """Check whether this rule matches a normalized name"""
        return self.matches(name.split(DOT))

    def decompose(self, name: str) -> Tuple[Tuple[str, ...], str]:
        """Split a normalized name at the public suffix boundary defined by
        this rule

        :param name: The normalized name. Must match this rule.
        :raises ValueError: if the rule does not match the name
        :return: A tuple ``(leftover_labels, suffix)``, where
                 ``leftover_labels`` are the labels to the left of the public
                 suffix (leftmost first, possibly empty) and ``suffix`` is the
                 public suffix itself
        """
        labels = name.split(DOT)
        if not self.matches(labels):
            raise ValueError(f"Rule {self.value} does not match {name}")
        cut = len(labels) - self.suffix_length
        return tuple(labels[:cut]), DOT.join(labels[cut:])

    def __eq__(self, other):
        if not isinstance(other, Rule):
            return NotImplemented
        return (self.kind is other.kind and
                self._labels == other._labels and
                self._private == other._private)

    def __hash__(self):
        return hash((self.kind, self._labels, self._private))

    def __repr__(self):
        return (f"<{type(self).__name__} {self.value!r}"
                f"{' private' if self._private else ''}>")

    def __str__(self):
        return self.value


class ExactRule(Rule):
    """A rule whose labels must all match literally, e.g. ``co.uk``"""

    kind = RuleKind.EXACT

    def matches(self, labels: Sequence[str]) -> bool:
        if len(labels) < self.length:
            return False
        return _tail_equal(labels, self._labels)


class WildcardRule(Rule):
    """A rule whose leftmost label is ``*``, matching exactly one arbitrary
    non-empty label, e.g. ``*.ck``. The wildcard label is part of the public
    suffix."""

    kind = RuleKind.WILDCARD

    def __init__(self, labels: Sequence[str], private: bool = False):
        super().__init__(labels, private)
        if self._labels[0] != STAR:
            raise ValueError(f"Wildcard rule {self.value} must start with "
                             f"'{STAR}'")

    def matches(self, labels: Sequence[str]) -> bool:
        if len(labels) < self.length:
            return False
        if labels[len(labels) - self.length] == '':
            return False
        return _tail_equal(labels, self._labels[1:])


class ExceptionRule(Rule):
    """A rule that carves a specific name out of a wildcard rule, e.g.
    ``!www.ck``. It matches like an :class:`ExactRule`, but its leftmost label
    is not part of the public suffix."""

    kind = RuleKind.EXCEPTION

    def __init__(self, labels: Sequence[str], private: bool = False):
        super().__init__(labels, private)
        if len(self._labels) < 2:
            raise ValueError(f"Exception rule !{self.value} requires at least "
                             "two labels")

    @property
    def suffix_length(self) -> int:
        return len(self._labels) - 1

    @property
    def value(self) -> str:
        return BANG + DOT.join(self._labels)

    def matches(self, labels: Sequence[str]) -> bool:
        if len(labels) < self.length:
            return False
        return _tail_equal(labels, self._labels)


#: The rule that applies when no listed rule matches: the rightmost label of
#: any name is its public suffix
DEFAULT_RULE: Rule = WildcardRule((STAR,))
