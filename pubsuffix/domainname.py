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

"""The result of parsing a domain name"""

from typing import Optional, Tuple

from .rule import DOT


class Domain:
    """A domain name split into its public suffix (``tld``), registrable
    label (``sld``), and remaining subdomain labels (``trd``).

    For ``www.example.co.uk``, ``tld`` is ``co.uk``, ``sld`` is ``example``,
    and ``trd`` is ``www``.

    :param tld: The public suffix
    :param sld: The label immediately left of the public suffix, if any
    :param trd: The remaining labels left of ``sld``, if any
    :raises ValueError: if ``trd`` is given without ``sld``
    """

    def __init__(self, tld: str, sld: Optional[str] = None,
                 trd: Optional[str] = None):
        if sld is None and trd is not None:
            raise ValueError("A domain with a subdomain part requires a "
                             "second level part")
        self._tld = tld
        self._sld = sld
        self._trd = trd

    @property
    def tld(self) -> str:
        return self._tld

    @property
    def sld(self) -> Optional[str]:
        return self._sld

    @property
    def trd(self) -> Optional[str]:
        return self._trd

    @property
    def name(self) -> str:
        """The full domain name"""
        return DOT.join(part for part in (self._trd, self._sld, self._tld)
                        if part is not None)

    @property
    def domain(self) -> Optional[str]:
        """The registrable domain (``sld`` plus ``tld``), or ``None`` if
        there is no ``sld``"""
        if self._sld is None:
            return None
        return self._sld + DOT + self._tld

    registrable_domain = domain

    @property
    def subdomain(self) -> Optional[str]:
        """The full name if it has a ``trd`` part, otherwise ``None``"""
        if self._trd is None:
            return None
        return self.name

    @property
    def is_domain(self) -> bool:
        return self._sld is not None

    @property
    def is_subdomain(self) -> bool:
        return self._trd is not None

    def to_tuple(self) -> Tuple[Optional[str], Optional[str], str]:
        """Return ``(trd, sld, tld)``"""
        return (self._trd, self._sld, self._tld)

    def __eq__(self, other):
        if not isinstance(other, Domain):
            return NotImplemented
        return self.to_tuple() == other.to_tuple()

    def __hash__(self):
        return hash(self.to_tuple())

    def __str__(self):
        return self.name

    def __repr__(self):
        return (f"Domain(tld={self._tld!r}, sld={self._sld!r}, "
                f"trd={self._trd!r})")
