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

import pytest

import pubsuffix
import pubsuffix.defaultlist
from doubles import SAMPLE_LIST


@pytest.fixture
def rule_list_factory():
    """Fixture creating a factory for :class:`~pubsuffix.RuleList` from rule
    text"""
    def factory(*rules, **kwargs):
        return pubsuffix.RuleList(
            [pubsuffix.Rule.factory(r) for r in rules], **kwargs
        )
    return factory


@pytest.fixture
def ck_rules(rule_list_factory):
    """Fixture with the com, uk, co.uk, *.ck, !www.ck rule list"""
    return rule_list_factory("com", "uk", "co.uk", "*.ck", "!www.ck")


@pytest.fixture
def sample_rules():
    """Fixture with :data:`SAMPLE_LIST` parsed, including private domains"""
    return pubsuffix.RuleList.parse(SAMPLE_LIST)


@pytest.fixture
def listfile_factory(tmp_path):
    """Fixture creating a factory for temporary list files"""
    count = 0

    def factory(contents: str):
        nonlocal count
        count += 1
        path = tmp_path / f"list_{count}.dat"
        with open(path, "w") as f:
            for line in contents.splitlines():
                print(line.strip(), file=f)
        return path
    return factory


@pytest.fixture(autouse=True)
def reset_default_list():
    """Make sure no test leaks a default list into another"""
    pubsuffix.defaultlist.set_default_list(None)
    yield
    pubsuffix.defaultlist.set_default_list(None)
