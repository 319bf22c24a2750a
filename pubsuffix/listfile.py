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

"""Reading, fetching, and caching Public Suffix List files"""

# List format (see https://publicsuffix.org/list/):
#
# // comment
# com
# *.ck
# !www.ck
# // ===BEGIN PRIVATE DOMAINS===
# blogspot.com
# // ===END PRIVATE DOMAINS===
#
# Each non-comment line holds one rule, which ends at the first whitespace.
# Rules between the BEGIN and END PRIVATE DOMAINS markers were submitted by
# private parties rather than registries.

import logging
import os
import os.path
import pathlib
import tempfile
from typing import Iterable, List, TextIO, Union

import requests

from .configuration import (USER_AGENT, DEFAULT_LIST_URL, CACHED_LIST_NAME)
from .exceptions import ListError
from .rule import Rule
from .rulelist import RuleList

log = logging.getLogger('pubsuffix.listfile')

COMMENT = '//'
BEGIN_PRIVATE = '===BEGIN PRIVATE DOMAINS==='
END_PRIVATE = '===END PRIVATE DOMAINS==='


def parse_rules(lines: Iterable[str],
                private_domains: bool = True) -> List[Rule]:
    """Parse the lines of a Public Suffix List into rules

    :param lines: The lines of the list
    :param private_domains: Whether to keep rules from the private domains
                            section. If ``False``, they are dropped entirely.
    :return: The rules, in list order
    """
    rules: List[Rule] = []
    in_private = False

    for lineno, line in enumerate(lines, start=1):
        line = line.strip()
        if line == '':
            continue
        if line.startswith(COMMENT):
            marker = line[len(COMMENT):].strip()
            if marker == BEGIN_PRIVATE:
                in_private = True
            elif marker == END_PRIVATE:
                in_private = False
            continue

        if in_private and not private_domains:
            continue

        text = line.split()[0]
        try:
            rules.append(Rule.factory(text, private=in_private))
        except ValueError as e:
            log.warning("Skipping malformed rule on line %d: %s", lineno, e)

    log.debug("Parsed %d rules", len(rules))
    return rules


def read_file(listfile: TextIO, private_domains: bool = True) -> RuleList:
    """Read a Public Suffix List from a file-like object

    :param listfile: File-like object to read the list from
    :param private_domains: Whether to keep rules from the private domains
                            section
    :raises ListError: if the file cannot be read or is not valid UTF-8
    """
    try:
        return RuleList(parse_rules(listfile, private_domains))
    except OSError as e:
        log.error("Could not read suffix list: %s", e.strerror)
        raise ListError("Could not read suffix list: %s" % e.strerror) from e
    except UnicodeDecodeError as e:
        log.error("Could not decode suffix list: %s", e)
        raise ListError("Could not decode suffix list: %s" % e) from e


def read_file_from_path(filename: Union[str, pathlib.Path],
                        private_domains: bool = True) -> RuleList:
    """Read a Public Suffix List from the named file or
    :class:`~pathlib.Path`

    :raises ListError: if the file cannot be opened or read, or is not
                       valid UTF-8
    """
    try:
        with open(filename, 'r', encoding='utf-8') as f:
            return read_file(f, private_domains)
    except OSError as e:
        log.error("Could not open suffix list %s: %s", filename, e.strerror)
        raise ListError("Could not open suffix list %s: %s" %
                        (filename, e.strerror)) from e


def fetch(url: str = DEFAULT_LIST_URL, timeout: float = 30) -> str:
    """Download a Public Suffix List

    :param url: Where to download the list from
    :param timeout: Request timeout in seconds
    :raises ListError: if the list could not be downloaded
    :return: The list contents
    """
    headers = {'User-Agent': USER_AGENT}
    log.info("Fetching suffix list from %s", url)
    try:
        r = requests.get(url, headers=headers, timeout=timeout)
    except requests.exceptions.RequestException as e:
        log.error("Could not fetch suffix list from %s: %s", url, e)
        raise ListError("Could not access %s: %s" % (url, e)) from e

    if r.status_code != 200:
        log.error("Could not fetch suffix list from %s: %d %s", url,
                  r.status_code, r.reason)
        raise ListError("Received HTTP %d when fetching %s" %
                        (r.status_code, url))

    r.encoding = 'utf-8'
    return r.text


def update(datadir: str, url: str = DEFAULT_LIST_URL,
           timeout: float = 30) -> str:
    """Download a Public Suffix List and store it in the data directory,
    replacing any previously cached list

    :param datadir: The data directory
    :param url: Where to download the list from
    :param timeout: Request timeout in seconds
    :raises ListError: if the list could not be downloaded, contained no
                       rules, or could not be saved
    :return: The path of the saved list
    """
    text = fetch(url, timeout)
    rules = parse_rules(text.splitlines())
    if not rules:
        log.error("Suffix list from %s contains no rules", url)
        raise ListError("Suffix list from %s contains no rules" % url)

    path = os.path.join(datadir, CACHED_LIST_NAME)
    try:
        os.makedirs(datadir, exist_ok=True)
        # Write to a temporary file first so readers never see a partial list
        fd, tmp_path = tempfile.mkstemp(dir=datadir, prefix='.suffixlist-')
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                f.write(text)
            os.replace(tmp_path, path)
        except OSError:
            os.unlink(tmp_path)
            raise
    except OSError as e:
        log.error("Could not write suffix list %s: %s", path, e.strerror)
        raise ListError("Could not write suffix list %s: %s" %
                        (path, e.strerror)) from e

    log.info("Saved %d rules to %s", len(rules), path)
    return path
