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

"""Implements a keyword-driven SQL tokenizer.

This unit splits SQL source into a flat list of tokens. Unlike a full lexer it
only recognizes the handful of keywords which drive the layout performed by
the formatter unit: the "section" keywords which introduce a clause (SELECT,
FROM, WHERE, etc.) and a few structural keywords (JOINs, parentheses, and the
logical operators AND and OR). Everything between two keywords is returned
verbatim as a single non-keyword token.

Tokenizer  -- The tokenizer class
tokenize() -- Convenience function wrapping Tokenizer().parse()
"""

import re
from collections import namedtuple

__all__ = [
    'SECTION_KEYWORDS',
    'OTHER_KEYWORDS',
    'Error',
    'Token',
    'Tokenizer',
    'tokenize',
]

# Keywords which introduce a clause of a query. The formatter starts each of
# these on a new line at the baseline of the enclosing query. Order matters:
# the alternation built from these lists is tried left to right

SECTION_KEYWORDS = [
    'SELECT',
    'FROM',
    'WHERE',
    'GROUP BY',
    'ORDER BY',
    'LIMIT',
    'OFFSET',
]

# Regular expressions for the structural keywords. AND and OR must have a
# space either side so they're not found within words like "anderson" or
# "door"

OTHER_KEYWORDS = [
    r'(?:(?:INNER|OUTER|LEFT)? ?JOIN)',
    r'\(',
    r'\)',
    r'(?<= )AND(?= )',
    r'(?<= )OR(?= )',
]

keyword_re = re.compile(
    '|'.join([re.escape(s) for s in SECTION_KEYWORDS] + OTHER_KEYWORDS),
    re.IGNORECASE)
subquery_re = re.compile(r'\s*SELECT', re.IGNORECASE)


class Error(Exception):
    """Base class for errors in this package."""
    pass


# Declare the Token namedtuple class
Token = namedtuple('Token', (
    'content',
    'is_keyword',
    'is_section',
    'sub_start',
    'sub_end',
    'is_last',
))


class Tokenizer(object):
    """Keyword-driven SQL tokenizer.

    Converts a string containing SQL into a list of tokens. See the parse()
    method for more information on the structure of tokens. The tokenizer
    holds no state between calls to parse(); a single instance may be used to
    tokenize any number of strings.
    """

    def parse(self, sql):
        """Parses the provided source into a list of tokens.

        This is the only public method of the tokenizer class. The method
        returns a list of 6-element tuples with the following structure:

            (content, is_keyword, is_section, sub_start, sub_end, is_last)

        The elements of the tuple can also be accessed by the names listed
        above (tokens are instances of the Token namedtuple class).

        The content element is the text of the token exactly as it appears in
        the source, including any whitespace. Leading and trailing whitespace
        is stripped from sql before tokenizing, but nothing else is altered,
        hence:

            tokens = Tokenizer().parse(sql)
            sql.strip() == ''.join(token.content for token in tokens)

        The remaining elements are flags:

            is_keyword  The token matched one of the recognized keywords
            is_section  The token is one of the SECTION_KEYWORDS
            sub_start   The token is an opening parenthesis followed by SELECT
                        (the start of a subquery)
            sub_end     The token is the closing parenthesis matching the
                        most recent, still open, subquery
            is_last     The token is the trailing text after the final
                        keyword

        The tokenizer never raises errors: text which isn't recognized as a
        keyword is simply returned as non-keyword content.
        """
        sql = sql.strip()
        tokens = []
        index = 0
        depth = 0
        # Parenthesis depths at which subqueries were opened
        subqueries = []
        while index < len(sql):
            match = keyword_re.search(sql, index)
            if not match:
                tokens.append(Token(sql[index:], False, False, False, False, True))
                break
            if match.start() > index:
                tokens.append(Token(sql[index:match.start()], False, False, False, False, False))
            keyword = match.group()
            index = match.end()
            sub_start = sub_end = False
            if keyword == '(':
                depth += 1
                # Peek at the unconsumed source; don't advance past it
                if subquery_re.match(sql, index):
                    subqueries.append(depth)
                    sub_start = True
            elif keyword == ')':
                if subqueries and subqueries[-1] == depth:
                    subqueries.pop()
                    sub_end = True
                depth -= 1
            tokens.append(Token(
                keyword,
                True,
                keyword.upper() in SECTION_KEYWORDS,
                sub_start,
                sub_end,
                False
            ))
        return tokens


def tokenize(sql):
    """Splits sql into a list of Token tuples. See Tokenizer.parse()."""
    return Tokenizer().parse(sql)
