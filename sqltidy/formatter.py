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

"""Implements an indenting SQL formatter.

This unit takes the tokens produced by the tokenizer unit and lays them out
with one clause per line, indenting clause bodies, JOINs and logical operators
beneath their clause, and giving each subquery its own indentation baseline.
"""

import logging

from sqltidy.tokenizer import Error, Tokenizer

__all__ = [
    'FormatError',
    'UnbalancedSubqueryError',
    'Formatter',
    'format_sql',
]

# Sections whose argument stays on the same line as the keyword
INLINE_SECTIONS = set(['FROM', 'LIMIT', 'OFFSET'])


class FormatError(Error):
    """Raised when a formatting error is encountered."""
    pass


class UnbalancedSubqueryError(FormatError):
    """Raised when a subquery is closed which was never opened."""

    def __init__(self, index, token):
        """Initializes an instance of the exception.

        The parameters are as follows:
        index -- The position of the offending token in the token list
        token -- The offending token
        """
        self.index = index
        self.token = token
        FormatError.__init__(
            self, 'Unbalanced subquery: "%s" (token %d) closes a subquery '
            'which was never opened' % (token.content, index))


class Formatter(object):
    """Indenting SQL formatter.

    The class accepts input from the Tokenizer class, in the form of a list of
    Token tuples, and renders them as a string. To use the class simply pass
    such a list to the render method, or pass SQL source to the format method
    which will tokenize it first.

    The following option is available for customizing the output:

    indent_size  The number of spaces used for each level of indentation.
                 Defaults to 2.
    """

    def __init__(self, indent_size=2):
        super(Formatter, self).__init__()
        if isinstance(indent_size, bool) or not isinstance(indent_size, int):
            raise ValueError('indent_size must be an integer, not %r' % (indent_size,))
        if indent_size < 1:
            raise ValueError('indent_size must be positive')
        self.indent_size = indent_size
        self.tokenizer = Tokenizer()
        self.log = logging.getLogger(__name__)

    def format(self, sql):
        """Tokenizes and formats the SQL in sql, returning a string."""
        return self.render(self.tokenizer.parse(sql))

    def indent(self, level):
        return ' ' * level * self.indent_size

    def render(self, tokens):
        """Renders the list of tokens as indented SQL.

        Each token is handled according to the first of the following rules
        which applies to it:

        section     Starts a new line (unless it's the first token) at the
                    baseline of the current query. The content that follows
                    is indented one level deeper. All sections except FROM,
                    LIMIT and OFFSET are followed by a line break.
        sub_end     Starts a new line at the indentation of the line which
                    opened the subquery.
        keyword     Any other keyword except a parenthesis (JOINs, AND, OR)
                    starts a new line at the current indentation.
        line start  Content which follows a line break is indented to the
                    current indentation.
        other       All other tokens are output verbatim.

        Finally, a token which opens a subquery is followed by a line break,
        and establishes a new baseline one level deeper than the current
        indentation. Trailing whitespace is removed from every line.

        If a token closes a subquery which was never opened (only possible
        when the token list didn't come from the Tokenizer, which always
        balances them) UnbalancedSubqueryError is raised.
        """
        output = ''
        # Indentation levels that the sections of each open query return to
        baselines = [0]
        # Indentation level of the current hunk (including the baseline)
        indent_level = 0
        for index, token in enumerate(tokens):
            prepend_newline = False
            append_newline = False
            self.log.debug('%r', token)
            if token.is_section:
                self.log.debug('section')
                prepend_newline = index > 0
                indent_level = baselines[-1]
                hunk = self.indent(indent_level) + token.content
                indent_level += 1
                append_newline = token.content.upper() not in INLINE_SECTIONS
            elif token.sub_end:
                self.log.debug('end of subquery')
                if len(baselines) < 2:
                    raise UnbalancedSubqueryError(index, token)
                indent_level = baselines.pop() - 1
                prepend_newline = True
                hunk = self.indent(indent_level) + token.content
            elif token.is_keyword and token.content not in ('(', ')'):
                self.log.debug('non-parenthetical keyword')
                prepend_newline = True
                hunk = self.indent(indent_level) + token.content.lstrip()
            elif output.endswith('\n'):
                self.log.debug('preceded by newline')
                hunk = self.indent(indent_level) + token.content.lstrip()
            else:
                self.log.debug('default')
                hunk = token.content
            if token.sub_start:
                self.log.debug('start of subquery')
                append_newline = True
                baselines.append(indent_level + 1)
            # Remove trailing whitespace from lines
            if append_newline:
                hunk = hunk.rstrip()
            if prepend_newline:
                output = output.rstrip() + '\n'
            output += hunk
            if append_newline:
                output += '\n'
        return output


def format_sql(sql, indent_size=2):
    """Reformats the SQL in sql with indent_size spaces per indent level."""
    return Formatter(indent_size).format(sql)
