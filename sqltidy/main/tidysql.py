# vim: set et sw=4 sts=4:

# Copyright 2012 Dave Hughes.
#
# This file is part of sqltidy.
#
# sqltidy is free software: you can redistribute it and/or modify it under the
# terms of the GNU General Public License as published by the Free Software
# Foundation, either version 3 of the License, or (at your option) any later
# version.
#
# sqltidy is distributed in the hope that it will be useful, but WITHOUT ANY
# WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS FOR
# A PARTICULAR PURPOSE.  See the GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with
# sqltidy.  If not, see <http://www.gnu.org/licenses/>.

import sys
import logging
import optparse
import configparser

import sqltidy
import sqltidy.main


class TidySqlUtility(sqltidy.main.Utility):
    """%prog [options] files...

    This utility reformats SQL for human consumption, placing each clause on
    its own line and indenting clause bodies, joins, logical operators and
    subqueries. Either specify the names of files containing the SQL to
    reformat, or specify - to indicate that stdin should be read. The
    reformatted SQL will be written to stdout in either case. The available
    command line options are listed below.
    """

    def __init__(self):
        super(TidySqlUtility, self).__init__()
        self.parser.set_defaults(config='', indent_size=None)
        self.parser.add_option(
            '-i', '--indent-size', dest='indent_size', type='int',
            help='specify the number of spaces per indent level (default=2)')
        self.parser.add_option(
            '-c', '--config', dest='config',
            help='specify the configuration file')

    def main(self, options, args):
        super(TidySqlUtility, self).main(options, args)
        if len(args) == 0:
            self.parser.error('you must specify at least one file to reformat')
        indent_size = 2
        if options.config:
            indent_size = self.process_config(options.config).get('indent_size', indent_size)
        if options.indent_size is not None:
            indent_size = options.indent_size
        if indent_size < 1:
            self.parser.error('the indent size must be a positive integer')
        formatter = sqltidy.Formatter(indent_size)
        done_stdin = False
        for sql_file in args:
            if sql_file == '-':
                if not done_stdin:
                    done_stdin = True
                    sql = sys.stdin.read()
                else:
                    raise IOError('Cannot read input from stdin multiple times')
            else:
                logging.info('Reformatting %s' % sql_file)
                with open(sql_file, 'r') as f:
                    sql = f.read()
            sys.stdout.write(formatter.format(sql))
            sys.stdout.write('\n')
            sys.stdout.flush()
        return 0

    def handle(self, type, value, tb):
        """Exception hook for non-debug mode."""
        if issubclass(type, sqltidy.Error):
            # For formatting errors, just output the message which should be
            # sufficient for the end user (no need to confuse them with a full
            # stack trace)
            logging.critical(str(value))
            return 3
        else:
            return super(TidySqlUtility, self).handle(type, value, tb)

    def process_config(self, config_file):
        """Reads and parses an Ini-style configuration file.

        The config_file parameter specifies a configuration filename to
        process. The routine parses the file looking for a section named
        [sqltidy]. The recognized options in this section will be returned as
        a dictionary to the caller (currently only indent_size).
        """
        config = configparser.ConfigParser()
        logging.info('Reading configuration file %s' % config_file)
        if not config.read(config_file):
            raise IOError('Unable to read configuration file %s' % config_file)
        if not 'sqltidy' in config.sections():
            logging.warning('The configuration file %s has no [sqltidy] section' % config_file)
            return {}
        result = {}
        if config.has_option('sqltidy', 'indent_size'):
            try:
                result['indent_size'] = config.getint('sqltidy', 'indent_size')
            except ValueError:
                raise optparse.OptionValueError(
                    'indent_size in %s must be an integer' % config_file)
        return result

main = TidySqlUtility()
