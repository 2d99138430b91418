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
import os
import glob
import shutil
import optparse
import logging
import textwrap
import traceback

import sqltidy

mswindows = sys.platform == 'win32'


class HelpFormatter(optparse.IndentedHelpFormatter):
    # Customize the width of help output
    def __init__(self):
        width = min(130, shutil.get_terminal_size()[0] - 2)
        optparse.IndentedHelpFormatter.__init__(
            self, max_help_position=width // 3, width=width)


class OptionParser(optparse.OptionParser):
    # Customize error handling to raise an exception (default simply prints an
    # error and terminates execution)
    def error(self, msg):
        raise optparse.OptParseError(msg)


class Utility(object):
    # This class is the abstract base class for each of the command line
    # utility classes. It provides some basic facilities like an option
    # parser, logging and exception handling

    def __init__(self, usage=None, version=None, description=None):
        super(Utility, self).__init__()
        self.wrapper = textwrap.TextWrapper()
        self.wrapper.width = min(130, shutil.get_terminal_size()[0] - 2)
        if usage is None:
            usage = self.__doc__.split('\n')[0]
        if version is None:
            version = '%%prog %s' % sqltidy.__version__
        if description is None:
            description = self.wrapper.fill('\n'.join(
                line.lstrip()
                for line in self.__doc__.split('\n')[1:]
                if line.lstrip()
            ))
        self.parser = OptionParser(
            usage=usage,
            version=version,
            description=description,
            formatter=HelpFormatter()
        )
        self.parser.set_defaults(
            debug=False,
            logfile='',
            loglevel=logging.WARNING
        )
        self.parser.add_option(
            '-q', '--quiet', dest='loglevel', action='store_const',
            const=logging.ERROR, help='produce less console output')
        self.parser.add_option(
            '-v', '--verbose', dest='loglevel', action='store_const',
            const=logging.INFO, help='produce more console output')
        self.parser.add_option(
            '-l', '--log-file', dest='logfile',
            help='log messages to the specified file')
        self.parser.add_option(
            '-D', '--debug', dest='debug', action='store_true',
            help='enables debug mode (runs under PDB)')

    def __call__(self, args=None):
        if args is None:
            args = sys.argv[1:]
        # Install the console handler first so that option errors are
        # reported through it
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(logging.Formatter('%(message)s'))
        console.setLevel(logging.WARNING)
        logging.getLogger().addHandler(console)
        handlers = [console]
        try:
            try:
                (options, args) = self.parser.parse_args(self.expand_args(args))
                console.setLevel(options.loglevel)
                if options.logfile:
                    logfile = logging.FileHandler(options.logfile)
                    logfile.setFormatter(logging.Formatter('%(asctime)s, %(levelname)s, %(message)s'))
                    logfile.setLevel(logging.DEBUG)
                    logging.getLogger().addHandler(logfile)
                    handlers.append(logfile)
            except (optparse.OptParseError, IOError):
                return self.handle(*sys.exc_info())
            if options.debug:
                console.setLevel(logging.DEBUG)
                logging.getLogger().setLevel(logging.DEBUG)
            else:
                logging.getLogger().setLevel(logging.INFO)
            if options.debug:
                import pdb
                return pdb.runcall(self.main, options, args)
            else:
                try:
                    return self.main(options, args) or 0
                except BaseException:
                    return self.handle(*sys.exc_info())
        finally:
            for handler in handlers:
                logging.getLogger().removeHandler(handler)
                handler.close()

    def expand_args(self, args):
        """Expands @response files and wildcards in the command line"""
        result = []
        for arg in args:
            if arg.startswith('@') and len(arg) > 1:
                arg = os.path.normcase(os.path.realpath(os.path.abspath(os.path.expanduser(arg[1:]))))
                try:
                    with open(arg, 'r') as resp_file:
                        for resp_arg in resp_file:
                            # Only strip the line break (whitespace is significant)
                            resp_arg = resp_arg.rstrip('\n')
                            # Only perform globbing on response file values for UNIX
                            if mswindows:
                                result.append(resp_arg)
                            else:
                                result.extend(self.glob_arg(resp_arg))
                except IOError as e:
                    raise optparse.OptionValueError(str(e))
            else:
                result.append(arg)
        # Perform globbing on everything for Windows
        if mswindows:
            result = [f for arg in result for f in self.glob_arg(arg)]
        return result

    def glob_arg(self, arg):
        """Performs shell-style globbing of arguments"""
        if set('*?[') & set(arg):
            args = glob.glob(os.path.normcase(os.path.realpath(os.path.abspath(os.path.expanduser(arg)))))
            if args:
                return args
        # Return the original parameter in the case where the parameter
        # contains no wildcards or globbing returns no results
        return [arg]

    def handle(self, type, value, tb):
        """Exception hook for non-debug mode."""
        if issubclass(type, (SystemExit, KeyboardInterrupt)):
            # Just ignore system exit and keyboard interrupt errors (after all,
            # they're user generated)
            return 130
        elif issubclass(type, IOError):
            # For simple errors like IOError just output the message which
            # should be sufficient for the end user (no need to confuse them
            # with a full stack trace)
            logging.critical(str(value))
            return 1
        elif issubclass(type, (optparse.OptParseError,)):
            # For option parser errors output the error along with a message
            # indicating how the help page can be displayed
            logging.critical(str(value))
            logging.critical('Try the --help option for more information.')
            return 2
        else:
            # Otherwise, log the stack trace and the exception into the log
            # file for debugging purposes
            for line in traceback.format_exception(type, value, tb):
                for s in line.rstrip().split('\n'):
                    logging.critical(s)
            return 1

    def main(self, options, args):
        pass
