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

"""pubsuffix configuration parsing"""

import configparser
import os.path
import pathlib
import sys
from typing import Dict, Optional, TextIO, Union

if sys.version_info < (3, 10):
    from importlib_metadata import PackageNotFoundError, version
else:
    from importlib.metadata import PackageNotFoundError, version

from .exceptions import ConfigError


def _package_version() -> str:
    try:
        return version('pubsuffix')
    except PackageNotFoundError:
        from .version import __version__
        return __version__


USER_AGENT = f"pubsuffix/{_package_version()}"


DEFAULT_DATA_DIR = '/var/lib/pubsuffix'

DEFAULT_LIST_URL = 'https://publicsuffix.org/list/public_suffix_list.dat'

#: Name of the cached list file inside the data directory
CACHED_LIST_NAME = 'public_suffix_list.dat'

_BOOLEANS = {
    'true': True, 'yes': True, 'on': True, '1': True,
    'false': False, 'no': False, 'off': False, '0': False,
}


class Config:
    """pubsuffix configuration data

    :param main: Options from the ``[pubsuffix]`` section
    """

    def __init__(self, main: Optional[Dict[str, str]] = None):
        #: Dict containing the configuration (from the ``[pubsuffix]``
        #: section)
        self._main: Dict[str, str] = dict(main) if main is not None else {}

        #: Whether the config has been finalized yet
        self._finalized = False

    def _check_finalized(self):
        """Raise an exception if the config is not finalized"""
        if not self._finalized:
            raise ConfigError("Tried to access config before it was finalized")

    @property
    def main(self) -> Dict[str, str]:
        self._check_finalized()
        return self._main

    @property
    def datadir(self) -> str:
        return self.main['datadir']

    @property
    def listfile(self) -> Optional[str]:
        return self.main.get('listfile')

    @property
    def url(self) -> str:
        return self.main['url']

    @property
    def private_domains(self) -> bool:
        return _BOOLEANS[self.main['private_domains'].lower()]

    @property
    def logfile(self) -> str:
        return self.main['logfile']

    @logfile.setter
    def logfile(self, value: str):
        self.main['logfile'] = value

    @property
    def cached_list_path(self) -> str:
        """Where ``pubsuffix update`` stores the downloaded list"""
        return os.path.join(self.datadir, CACHED_LIST_NAME)

    def _fill_defaults(self):
        """Fill in defaults if they are not yet set"""
        self._main.setdefault('datadir', DEFAULT_DATA_DIR)
        self._main.setdefault('url', DEFAULT_LIST_URL)
        self._main.setdefault('private_domains', 'true')
        self._main.setdefault('logfile', 'stderr')

    def _validate(self):
        """Check option values

        :raises ConfigError: if any option is invalid
        """
        if not os.path.isabs(self._main['datadir']):
            raise ConfigError("Config option 'datadir' cannot be a relative "
                              "path")
        if self._main['private_domains'].lower() not in _BOOLEANS:
            raise ConfigError("Config option 'private_domains' must be a "
                              "boolean, not %s"
                              % self._main['private_domains'])
        if self._main['url'] == '':
            raise ConfigError("Config option 'url' cannot be empty")

    def finalize(self) -> 'Config':
        """Fill default values and validate the configuration. Calling it
        more than once has no further effect.

        :raises ConfigError: if the configuration is invalid
        :return: This config, for chaining
        """
        if self._finalized:
            return self

        self._fill_defaults()
        self._validate()

        self._finalized = True
        return self


def _process_config(config: configparser.ConfigParser) -> Config:
    """Process the given :class:`~configparser.ConfigParser` into a
    :class:`Config`

    :param config: The configuration to process
    :raises ConfigError: if the configuration is invalid
    :returns: the processed and validated configuration
    """
    # Note: ConfigParser already handles catching duplicate sections and
    #   duplicate keys

    main: Dict[str, str] = dict()

    for section in config.sections():
        if section == 'pubsuffix':
            main.update(config[section])
        else:
            raise ConfigError("Config section %s is not a pubsuffix section"
                              % section)

    return Config(main).finalize()


def read_file_from_path(filename: Union[str, pathlib.Path]) -> Config:
    """Read configuration from the named file or :class:`~pathlib.Path`

    :param filename: Filename or path to read from
    :raises ConfigError: if the config file cannot be read or is invalid
    :return: A finalized :class:`Config`
    """
    try:
        with open(filename, 'r') as f:
            return read_file(f)
    except OSError as e:
        raise ConfigError("Could not read config file %s: %s" %
                          (filename, e.strerror)) from e


def read_file(configfile: TextIO) -> Config:
    """Read configuration in from the named file

    :param configfile: Filelike object to read the config from
    :raises ConfigError: if the config file cannot be read or is invalid
    :return: A finalized :class:`Config`
    """
    config = configparser.ConfigParser()
    try:
        config.read_file(configfile)
    except configparser.Error as e:
        raise ConfigError("Error in config file: %s" % e) from e
    except OSError as e:
        raise ConfigError("Could not read config file: %s" % e.strerror
                          ) from e

    return _process_config(config)
