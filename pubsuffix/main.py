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

"""The ``pubsuffix`` command line tool"""

import argparse
import logging
import logging.handlers
import os.path
import sys

from . import configuration, defaultlist, listfile, parser
from .exceptions import ConfigError, ListError, PublicSuffixException

DEFAULT_CONFIG_FILE = '/etc/pubsuffix.conf'

log = logging.getLogger('pubsuffix')


def parse_args(argv):
    """Parse command line arguments

    :param argv: Either ``None`` or a list of arguments
    :returns: a :class:`argparse.Namespace` containing the parsed arguments
    """
    argparser = argparse.ArgumentParser(
        description="Domain name parser based on the Public Suffix List",
    )
    argparser.add_argument("-c", "--configfile", default=None,
                           help="Path to the config file (default: "
                                f"{DEFAULT_CONFIG_FILE}, if it exists)")
    argparser.add_argument("-d", "--debug-logs", action="store_true",
                           help="Increase verbosity of logging significantly")
    argparser.add_argument("-s", "--stderr", action="store_true",
                           help="Log to stderr instead of syslog or file")
    argparser.add_argument("--ignore-private", action="store_true",
                           help="Ignore rules from the private domains "
                                "section of the list")

    commands = argparser.add_subparsers(dest="command", required=True)
    for command, help_text in (
        ("parse", "Split names into tld, sld, and trd"),
        ("valid", "Check whether names are valid, registrable domains"),
        ("domain", "Print the registrable domain of each name"),
    ):
        subparser = commands.add_parser(command, help=help_text)
        subparser.add_argument("names", nargs="+", metavar="NAME",
                               help="Domain name")
    commands.add_parser("update", help="Download the current Public Suffix "
                                       "List into the data directory")
    return argparser.parse_args(argv)


def read_config(configfile):
    """Read the config file named on the command line, or the default config
    file if it exists, or fall back to the default configuration

    :raises ConfigError: if the config file cannot be read or is invalid
    """
    if configfile is None:
        if not os.path.exists(DEFAULT_CONFIG_FILE):
            return configuration.Config().finalize()
        configfile = DEFAULT_CONFIG_FILE
    return configuration.read_file_from_path(configfile)


def setup_logging(logfile: str, debug: bool):
    """Attach a handler to the ``pubsuffix`` logger

    :param logfile: ``'stderr'``, ``'syslog'``, or a file path
    :param debug: Whether to enable debug logs
    """
    if logfile == 'syslog':
        log_handler: logging.Handler = logging.handlers.SysLogHandler()
    elif logfile == 'stderr':
        log_handler = logging.StreamHandler()
    else:
        log_handler = logging.FileHandler(logfile)
    log.addHandler(log_handler)

    if debug:
        log.setLevel(logging.DEBUG)
    else:
        log.setLevel(logging.INFO)


def _show(part):
    return '-' if part is None else part


def run_names(command: str, names, ignore_private: bool) -> int:
    """Run the ``parse``, ``valid``, or ``domain`` command on each name

    :return: Exit status: 0 if every name succeeded, 1 otherwise
    """
    # Only override each operation's own default when asked
    options = {'ignore_private': True} if ignore_private else {}
    status = 0
    for name in names:
        if command == 'valid':
            is_valid = parser.valid(name, **options)
            print(name, "valid" if is_valid else "invalid")
            if not is_valid:
                status = 1
            continue

        try:
            result = parser.parse(name, **options)
        except PublicSuffixException as e:
            print(f"{name}: {e}", file=sys.stderr)
            status = 1
            if command == 'domain':
                print(_show(None))
            continue

        if command == 'parse':
            print(result.tld, _show(result.sld), _show(result.trd))
        else:
            print(result.domain)
    return status


def main(argv=None):
    """Main entry point when run as a standalone program

    :param argv: List of arguments. If ``None``, read :data:`sys.argv`.
    """
    args = parse_args(argv)
    try:
        conf = read_config(args.configfile)
    except ConfigError as e:
        print("Config error:", e, file=sys.stderr)
        sys.exit(2)

    if args.stderr:
        conf.logfile = 'stderr'
    setup_logging(conf.logfile, args.debug_logs)

    if args.command == 'update':
        try:
            listfile.update(conf.datadir, conf.url)
        except ListError:
            log.critical("Could not update the suffix list.")
            sys.exit(1)
        return

    try:
        defaultlist.set_default_list(defaultlist.load_default_list(conf))
    except ListError:
        log.critical("Could not load the suffix list.")
        sys.exit(1)

    status = run_names(args.command, args.names, args.ignore_private)
    if status != 0:
        sys.exit(status)


if __name__ == '__main__':
    main()
