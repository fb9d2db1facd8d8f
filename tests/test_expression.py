import math

import pytest

from calcbot.equations import Expression, solve, to_postfix, InvalidExpression


@pytest.mark.parametrize('expression, expected', [
    ('2 + 2', 4.0),
    ('5.2 + (4 + 6) ', 15.2),
    ('4 / 5 ^ 3', 0.032),
    ('3 ^ 2 ^ 3', 6561.0),
    ('(3 + 4 )(5-2)  / 2', 10.5),
    ('sqrt(25) + 3 ^2 - 4 / ln(2)', 14 - 4 / math.log(2)),
    ('sin(30) + cos(60) * tg(45)/ 16 ^ (1 / 2)', 0.625),
    ('2 ^ 3 / log10(1000) + 1 / 16 ^ (1 / 2)', 8 / 3 + 0.25),
    (' 1 + 2 * 3 ^ 2 / (sqrt(4) - ln(e))', 19.0),
    ('-sin(45) * -cos(45) / (arcsin(0,5) + arccos(0,5))', 1 / math.pi),
    ('(3*4+5^(-(-(9^0.5))))', 137.0),
    ('2,5 * 2', 5.0),
    ('5 − 3', 2.0),
    ('2pi', 2 * math.pi),
    ('-2^2', -4.0),
])
def test_solve(expression, expected):
    assert solve(expression) == pytest.approx(expected)


def test_logarithm_with_coefficient_and_variable_base():
    assert solve('2 + log3a2(4 * 9)', 'a2 = 2') == pytest.approx(4.0)


def test_logarithm_with_malformed_base():
    with pytest.raises(InvalidExpression, match='Invalid base of logarithm'):
        solve('2 + log3a2n(4 * 9)', 'a2 = 2')


def test_unassigned_variable():
    with pytest.raises(InvalidExpression, match="No value for variable 'b'"):
        solve('(3*4+b^-((-9)^0.5))', 'a = 2')


@pytest.mark.parametrize('expression, variables', [
    ('2 + arcsin(5)', []),
    ('arccos(-2) * 6', []),
    ('5 + tg(270)', []),
    ('ctg(360)', []),
    (' ln(a)', ['a = -2']),
    ('log2(-8)', []),
    ('loga(9)', ['a = -9']),
    ('log1(9)', []),
    ('lg(-8)', []),
    ('sqrt(-4)', []),
    ('(-5)^0.5', []),
    ('50 / 0', []),
])
def test_math_errors(expression, variables):
    with pytest.raises(InvalidExpression):
        solve(expression, *variables)


@pytest.mark.parametrize('expression, variables', [
    ('(2 + 5)a', ['a = 7']),
    ('2.b + 2', ['b = 8']),
    ('(2 + 5)4', []),
    ('5.-4', []),
    ('3-*  54', []),
    ('4+*5', []),
    ('(/6 * 2)', []),
    ('5. ^4', []),
    ('a(6 + 7)', []),
    ('8(6 * 2)', []),
    ('24.(4 + 1)', []),
    ('(4 +6 -)', []),
    ('( 1 + 3 *)', []),
    ('() + 9', []),
    ('(4 + 5.)', []),
    ('a.5 + 1', ['a= 8']),
    ('(2 + 4).4', []),
    ('2..4 + 1', []),
    ('5a + 1 -', ['a = 7']),
    ('*3 / 9', []),
    ('2 +9 ^', []),
    ('5 + (7 + 2(', []),
    (') 5 * 3)', []),
    ('4 + 4.', []),
])
def test_invalid_expressions(expression, variables):
    with pytest.raises(InvalidExpression):
        solve(expression, *variables)


@pytest.mark.parametrize('expression', ['5 + (7 + 2(', ') 5 * 3)', '(1))('])
def test_invalid_parentheses(expression):
    with pytest.raises(InvalidExpression, match='Invalid parentheses'):
        to_postfix(expression)


def test_empty_expression():
    with pytest.raises(InvalidExpression, match='Expression cannot be empty'):
        solve('')


def test_extra_symbol():
    with pytest.raises(InvalidExpression, match="Extra symbol: '\\$'"):
        solve('2 $ 3')


@pytest.mark.parametrize('expression, assignments', [
    ('2^' + '9' * 400, []),
    ('sin(' + '9' * 400 + ')', []),
    ('tg(' + '9' * 400 + ')', []),
    ('10^200 * 10^200', []),
    ('2^(10^200 * 10^200)', []),
    ('x - x', ['x = 1e400']),
])
def test_too_large(expression, assignments):
    with pytest.raises(InvalidExpression, match='Result is too large'):
        solve(expression, *assignments)


def test_postfix():
    assert Expression('2 + 3 * 4').postfix == ['2', '3', '4', '*', '+']
    assert to_postfix('sin(30) * 2') == ['30', 'sin', '2', '*']


def test_postfix_is_a_copy():
    expr = Expression('1 + 2')
    expr.postfix.append('+')
    assert expr.postfix == ['1', '2', '+']


def test_repeated_evaluation():
    expr = Expression('x^2 + 2x')
    assert expr.evaluate('x = 3') == 15.0
    assert expr.evaluate('x = 3') == 15.0
    assert expr.evaluate('x = 4') == 24.0
    assert expr.evaluate(variables={'x': 1}) == 3.0


def test_idempotence():
    results = {solve('1+(-2+3*4+5^-sin(45*cos(a^b)))/7', 'a = 2', 'b = 8.3') for _ in range(5)}
    assert len(results) == 1


def test_assignments_override_variables():
    assert solve('a + b', 'b = 1', variables={'a': 2, 'b': 5}) == 3.0


def test_constant_assignment():
    assert solve('x + y', 'x = pi', 'y = -e') == pytest.approx(math.pi - math.e)


def test_repr():
    assert repr(Expression('1+1')) == "Expression('1+1')"
