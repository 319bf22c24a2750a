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

"""All pubsuffix exceptions"""


class PublicSuffixException(Exception):
    """Base class for all pubsuffix exceptions"""


class DomainInvalid(PublicSuffixException):
    """Raised when a name is not a valid domain, either because it could not
    be normalized or because no rule applies to it"""


class Blank(DomainInvalid):
    """Raised when a name is empty after normalization"""


class LeadingSeparator(DomainInvalid):
    """Raised when a name starts with a dot"""


class SchemeLike(DomainInvalid):
    """Raised when a name contains a URL scheme delimiter (``://``). Callers
    must pass bare domain names, not URLs."""


class DomainNotAllowed(DomainInvalid):
    """Raised when a rule matches a name, but the rule does not allow it to
    be registered (e.g. the name is itself a public suffix)"""


class ConfigError(PublicSuffixException):
    """Raised when the configuration is malformed or has other errors"""


class ListError(PublicSuffixException):
    """Raised when a Public Suffix List cannot be read, fetched, or saved"""
