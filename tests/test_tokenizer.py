import pytest

from calcbot.equations import tokenize, infix2postfix, evaluate_postfix, InvalidExpression
from calcbot.equations.tokenizer import ScanState


@pytest.mark.parametrize('expression, expected', [
    ('2+2', ['2', '+', '2']),
    ('12.75*x1', ['12.75', '*', 'x1']),
    ('-5+3', ['0', '-', '5', '+', '3']),
    ('2a', ['2', '*', 'a']),
    ('2pi', ['2', '*', 'pi']),
    ('.5+1', ['0.5', '+', '1']),
    ('2*.5', ['2', '*', '0.5']),
    ('(.5)', ['(', '0.5', ')']),
    ('(3+4)(5-2)/2', ['(', '3', '+', '4', ')', '*', '(', '5', '-', '2', ')', '/', '2']),
    ('(-x)', ['(', '0', '-', 'x', ')']),
    ('a*-b', ['a', '*', '(', '0', '-', 'b', ')']),
    ('a*-b+c', ['a', '*', '(', '0', '-', 'b', ')', '+', 'c']),
    ('a*-2b', ['a', '*', '(', '0', '-', '2', ')', '*', 'b']),
    ('5--3', ['5', '-', '(', '0', '-', '3', ')']),
    ('a*-(b+c)', ['a', '*', '(', '0', '-', '(', 'b', '+', 'c', ')', ')']),
    ('2^-sin(30)', ['2', '^', '(', '0', '-', 'sin', '(', '30', ')', ')']),
    ('log3a2(4*9)', ['log3a2', '(', '4', '*', '9', ')']),
    ('-(-(-x))', ['0', '-', '(', '0', '-', '(', '0', '-', 'x', ')', ')']),
    ('2*-(3*-(4))',
     ['2', '*', '(', '0', '-', '(', '3', '*', '(', '0', '-', '(', '4', ')', ')', ')', ')']),
])
def test_tokenize(expression, expected):
    assert tokenize(expression) == expected


@pytest.mark.parametrize('expression, message', [
    ('(2+5)a', 'No operator between parenthesis and operand'),
    ('(2+5)4', 'No operator between parenthesis and operand'),
    ('(2+4).4', 'No operator between parenthesis and operand'),
    ('8(6*2)', 'No operator between parenthesis and operand'),
    ('a(6+7)', "Unknown function 'a'"),
    ('2.b+2', 'Invalid usage of floating point'),
    ('5.-4', 'Invalid usage of floating point'),
    ('5.^4', 'Invalid usage of floating point'),
    ('24.(4+1)', 'Invalid usage of floating point'),
    ('(4+5.)', 'Invalid usage of floating point'),
    ('a.5+1', 'Invalid usage of floating point'),
    ('2..4+1', 'Invalid usage of floating point'),
    ('2.5.3', 'Invalid usage of floating point'),
    ('4+4.', 'Invalid usage of floating point'),
    ('3-*54', 'Invalid subtraction operands'),
    ('(4+6-)', 'Invalid subtraction operands'),
    ('4+*5', 'Sequence of operators, second of which is not minus'),
    ('(/6*2)', 'Operator after opening parenthesis'),
    ('*3/9', 'Operator at the beginning of the expression'),
    ('(1+3*)', 'Operator before closing parenthesis'),
    ('()+9', 'Empty parentheses'),
    ('5a+1-', 'Operator at the end of expression'),
    ('2+9^', 'Operator at the end of expression'),
    ('2:3', 'Unknown symbol: :'),
    ('sin+2', "Missing argument for function 'sin'"),
    ('2*log2', "Missing argument for function 'log2'"),
])
def test_tokenize_invalid(expression, message):
    with pytest.raises(InvalidExpression, match=message.replace('(', r'\(').replace('.', r'\.')):
        tokenize(expression)


def test_empty_expression():
    with pytest.raises(InvalidExpression, match='Expression cannot be empty'):
        tokenize('')


@pytest.mark.parametrize('expression, expected', [
    ('-(x)', -3.0),
    ('-(-(x))', 3.0),
    ('-(-(-(x)))', -3.0),
    ('-(-(-(-(x))))', 3.0),
    ('2*-(3)', -6.0),
    ('2*-(3*-(4))', 24.0),
    ('2*-(3*-(4*-(5)))', -120.0),
    ('2*-(3*-(4*-(5*-(6))))', 720.0),
    ('2*-x', -6.0),
    ('2*-sqrt(16)', -8.0),
    ('2*-sqrt(4*-(-4))', -8.0),
    ('2^-2', 0.25),
    ('2*--(3+4)', 14.0),
    ('2*--sin(30)', 1.0),
    ('(--(x+4))', 7.0),
    ('--x', 3.0),
])
def test_nested_negation_balances(expression, expected):
    tokens = tokenize(expression)
    assert tokens.count('(') == tokens.count(')')
    assert evaluate_postfix(infix2postfix(tokens), {'x': 3.0}) == pytest.approx(expected)


def test_scan_state_closes_groups_at_their_depth():
    state = ScanState('')
    state.negated_groups = [0, 2]
    state.depth = 2
    state.close_negated_groups()
    assert state.tokens == [')']
    assert state.negated_groups == [0]

    state.depth = 1
    state.close_negated_groups()
    assert state.tokens == [')']


def test_scan_state_flushes_token():
    state = ScanState('x1')
    state.numeric = False
    state.token = 'x1'
    state.flush()
    state.flush()
    assert state.tokens == ['x1']
    assert state.token == ''


def test_chained_negations_scope_the_whole_group():
    assert tokenize('2*--(3+4)') == [
        '2', '*', '(', '0', '-', '(', '0', '-', '(', '3', '+', '4', ')', ')', ')',
    ]
