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

"""pubsuffix, a domain name parser based on the `Public Suffix List`_

Top-level module, containing everything needed to parse and validate domain
names.

.. _Public Suffix List: https://publicsuffix.org/
"""

from .configuration import Config, read_file, read_file_from_path
from .defaultlist import get_default_list, set_default_list
from .domainname import Domain
from .exceptions import (PublicSuffixException, DomainInvalid, Blank,
                         LeadingSeparator, SchemeLike, DomainNotAllowed,
                         ConfigError, ListError)
from .parser import (normalize, decompose, parse, valid, registrable_domain,
                     domain)
from .rule import (Rule, RuleKind, ExactRule, WildcardRule, ExceptionRule,
                   DEFAULT_RULE)
from .rulelist import RuleList
from .version import __version__
