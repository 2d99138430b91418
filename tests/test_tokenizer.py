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

from sqltidy.tokenizer import Token, Tokenizer, tokenize

def contents(sql):
    return [token.content for token in tokenize(sql)]

def test_find_tokens():
    assert contents('SELECT * FROM table WHERE basement = 1 ORDER BY roof') == [
        'SELECT', ' * ', 'FROM', ' table ', 'WHERE', ' basement = 1 ',
        'ORDER BY', ' roof']

def test_sections():
    tokens = tokenize('SELECT * FROM table WHERE basement = 1 ORDER BY roof')
    assert [token.is_section for token in tokens] == [
        True, False, True, False, True, False, True, False]

def test_keywords():
    tokens = tokenize('SELECT * FROM table WHERE basement = 1 ORDER BY roof')
    assert [token.is_keyword for token in tokens] == [
        True, False, True, False, True, False, True, False]

def test_last_token():
    tokens = tokenize('SELECT a FROM b')
    assert tokens[-1] == Token(' b', False, False, False, False, True)
    assert not any(token.is_last for token in tokens[:-1])

def test_no_last_token_after_keyword():
    tokens = tokenize('SELECT a FROM')
    assert tokens[-1].content == 'FROM'
    assert not any(token.is_last for token in tokens)

def test_or_not_door():
    assert contents('door or more') == ['door ', 'or', ' more']

def test_and_not_nand_or_anderson():
    assert contents('nand and anderson') == ['nand ', 'and', ' anderson']

def test_and_or_need_surrounding_spaces():
    assert contents('AND a') == ['AND a']
    assert contents('a OR') == ['a OR']
    assert contents('a=1 AND(b=2)') == ['a=1 AND', '(', 'b=2', ')']

def test_case_insensitive():
    tokens = tokenize('select a from b where c = 1 group by d order by e')
    assert [token.content for token in tokens if token.is_section] == [
        'select', 'from', 'where', 'group by', 'order by']

def test_joins():
    assert contents('a INNER JOIN b LEFT JOIN c OUTER JOIN d JOIN e') == [
        'a ', 'INNER JOIN', ' b ', 'LEFT JOIN', ' c ', 'OUTER JOIN', ' d',
        ' JOIN', ' e']
    tokens = tokenize('a inner join b')
    assert tokens[1].is_keyword
    assert not tokens[1].is_section

def test_subquery_boundaries():
    tokens = tokenize('SELECT (SELECT COUNT(*) FROM)')
    assert tokens[2].content == '('
    assert tokens[2].sub_start
    assert tokens[5].content == '('
    assert not tokens[5].sub_start
    assert tokens[7].content == ')'
    assert not tokens[7].sub_end
    assert tokens[10].content == ')'
    assert tokens[10].sub_end

def test_subquery_with_whitespace():
    tokens = tokenize('x IN (\n  select 1)')
    assert tokens[1].content == '('
    assert tokens[1].sub_start
    assert tokens[-1].content == ')'
    assert tokens[-1].sub_end

def test_nested_subqueries():
    tokens = tokenize('(SELECT (a) FROM (SELECT b) WHERE (c))')
    parens = [token for token in tokens if token.content in ('(', ')')]
    assert [(t.content, t.sub_start, t.sub_end) for t in parens] == [
        ('(', True, False),
        ('(', False, False),
        (')', False, False),
        ('(', True, False),
        (')', False, True),
        ('(', False, False),
        (')', False, False),
        (')', False, True),
    ]

def test_unbalanced_parens():
    # Unmatched parentheses are never an error
    assert contents('a) (SELECT b') == ['a', ')', ' ', '(', 'SELECT', ' b']
    tokens = tokenize('a) (SELECT b')
    assert not tokens[1].sub_end
    assert tokens[3].sub_start

def test_round_trip():
    for sql in (
        '  SELECT a, b FROM t WHERE x IN (SELECT y FROM u) AND z = 1  ',
        'count(*)',
        'SELECT\n\t*\nFROM foo\nORDER BY bar',
        'nothing to see here',
        'FROM t LEFT JOIN (select a from b where c = d) as q',
    ):
        assert ''.join(token.content for token in tokenize(sql)) == sql.strip()

def test_empty():
    assert tokenize('') == []
    assert tokenize('   \n ') == []

def test_tokenizer_reuse():
    tokenizer = Tokenizer()
    assert tokenizer.parse('(SELECT a') == tokenizer.parse('(SELECT a')
    assert not tokenizer.parse(')')[0].sub_end
