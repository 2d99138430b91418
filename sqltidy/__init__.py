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

"""Reformats SQL queries into a consistently indented layout."""

from sqltidy.tokenizer import (
    SECTION_KEYWORDS,
    OTHER_KEYWORDS,
    Error,
    Token,
    Tokenizer,
    tokenize,
    )
from sqltidy.formatter import (
    FormatError,
    UnbalancedSubqueryError,
    Formatter,
    format_sql,
    )

__version__ = '1.0.0'
