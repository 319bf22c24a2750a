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

"""The process-wide default :class:`~pubsuffix.RuleList`

The default list is loaded on first use and then shared. It is never
modified; :func:`set_default_list` replaces it wholesale.
"""

import logging
import os.path
import threading
from typing import Optional

from . import listfile
from .configuration import Config
from .rulelist import RuleList

log = logging.getLogger('pubsuffix.defaultlist')

#: Snapshot of the Public Suffix List shipped with the package
BUNDLED_LIST_PATH = os.path.join(os.path.dirname(__file__), 'data',
                                 'public_suffix_list.dat')

_lock = threading.Lock()
_default_list: Optional[RuleList] = None


def load_default_list(config: Optional[Config] = None) -> RuleList:
    """Load a rule list from the best available source: the configured
    ``listfile``, then the list cached by ``pubsuffix update``, then the
    bundled snapshot

    :param config: Finalized configuration. If ``None``, the defaults are
                   used.
    :raises ListError: if the chosen list file cannot be read
    """
    if config is None:
        config = Config().finalize()

    if config.listfile is not None:
        log.debug("Loading configured suffix list %s", config.listfile)
        return listfile.read_file_from_path(config.listfile,
                                            config.private_domains)

    if os.path.isfile(config.cached_list_path):
        log.debug("Loading cached suffix list %s", config.cached_list_path)
        return listfile.read_file_from_path(config.cached_list_path,
                                            config.private_domains)

    log.debug("No cached suffix list in %s, using bundled list",
              config.datadir)
    return listfile.read_file_from_path(BUNDLED_LIST_PATH,
                                        config.private_domains)


def get_default_list() -> RuleList:
    """Get the default rule list, loading it if necessary"""
    global _default_list
    with _lock:
        if _default_list is None:
            _default_list = load_default_list()
            log.debug("Loaded default suffix list with %d rules",
                      len(_default_list))
        return _default_list


def set_default_list(rule_list: Optional[RuleList]):
    """Replace the default rule list

    :param rule_list: The new default list. If ``None``, the next call to
                      :func:`get_default_list` loads it again.
    """
    global _default_list
    with _lock:
        _default_list = rule_list
