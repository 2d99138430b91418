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

import sqltidy.main


def columnize(lines, separator='\t'):
    """Aligns the fields of lines into fixed-width columns.

    Each line in lines is stripped and split by separator (blank lines and
    trailing empty fields are dropped). Every field is
    padded to the width of the widest field in its column and followed by two
    spaces. Returns a list of the aligned lines (without line terminators).
    """
    rows = []
    for line in lines:
        row = line.strip().split(separator) if line.strip() else []
        # Trailing empty fields are dropped
        while row and not row[-1]:
            row.pop()
        rows.append(row)
    widths = []
    for row in rows:
        for index, field in enumerate(row):
            if index < len(widths):
                widths[index] = max(widths[index], len(field))
            else:
                widths.append(len(field))
    return [
        ''.join(field.ljust(widths[index]) + '  ' for index, field in enumerate(row))
        for row in rows
    ]


class ColumnizeUtility(sqltidy.main.Utility):
    """%prog [options]

    This utility reads tab-separated values on stdin (for example, query
    results copied from a database client) and writes them to stdout as
    fixed-width columns, suitable for pasting into documentation or a gist.
    """

    def __init__(self):
        super(ColumnizeUtility, self).__init__()
        self.parser.set_defaults(separator='\t')
        self.parser.add_option(
            '-s', '--separator', dest='separator',
            help='specify the field separator (default=tab)')

    def main(self, options, args):
        super(ColumnizeUtility, self).main(options, args)
        if args:
            self.parser.error('this utility takes no arguments; pipe input to stdin')
        if not options.separator:
            self.parser.error('the separator must not be blank')
        for line in columnize(sys.stdin, options.separator):
            sys.stdout.write(line + '\n')
        sys.stdout.flush()
        return 0

main = ColumnizeUtility()
