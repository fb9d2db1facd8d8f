'''
Splits a validated infix expression into tokens

Implicit multiplication is written out (`2a` -> `2 * a`, `)(` -> `) * (`)
and every unary minus becomes a binary one (`-x` -> `0 - x`,
`a*-b` -> `a * ( 0 - b )`)
'''

import string

from . import table
from .errors import InvalidExpression


def _is_digit(ch):
    return ch != '' and ch in string.digits


def _is_letter(ch):
    return ch != '' and ch in string.ascii_letters


class ScanState:
    '''
    Everything the tokenizer carries from one character to the next

    negated_tokens counts minuses that close after the next token
    negated_groups holds the parenthesis depths at which the minuses
    applied to a parenthesized group close
    '''

    def __init__(self, expression):
        self.expression = expression
        self.tokens = []
        self.token = ''
        self.numeric = True
        self.depth = 0
        self.negated_tokens = 0
        self.negated_groups = []

    def char(self, i):
        '''
        Gets the character at i, or an empty string outside of the expression
        '''
        if 0 <= i < len(self.expression):
            return self.expression[i]
        return ''

    def emit(self, *tokens):
        self.tokens.extend(tokens)

    def flush(self):
        '''
        Moves the token being built to the output
        '''
        if not self.token:
            return
        if not self.numeric and table.is_function(self.token):
            raise InvalidExpression("Missing argument for function '{}'".format(self.token))
        self.tokens.append(self.token)
        self.token = ''

    def close_negated_tokens(self):
        while self.negated_tokens > 0:
            self.tokens.append(table.RIGHT_PARENTHESIS)
            self.negated_tokens -= 1

    def scope_negations_to_group(self):
        '''
        Pending minuses apply to the whole group about to open
        at the current depth instead of a single token
        '''
        while self.negated_tokens > 0:
            self.negated_tokens -= 1
            self.negated_groups.append(self.depth)

    def close_negated_groups(self):
        while self.negated_groups and self.negated_groups[-1] == self.depth:
            self.negated_groups.pop()
            self.tokens.append(table.RIGHT_PARENTHESIS)


def _digit(state, i):
    if not state.token:
        state.numeric = True
    state.token += state.char(i)


def _dot(state, i):
    prev, nxt = state.char(i - 1), state.char(i + 1)
    if not _is_digit(nxt):
        raise InvalidExpression('Invalid usage of floating point')

    if i == 0 or table.is_operator(prev) or prev == table.LEFT_PARENTHESIS:
        state.numeric = True
        state.token += '0' + table.DOT
    elif _is_digit(prev) and state.numeric and table.DOT not in state.token:
        state.token += table.DOT
    else:
        raise InvalidExpression('Invalid usage of floating point')


def _letter(state, i):
    if not state.token:
        state.numeric = False

    if state.numeric:
        # number followed by a name
        state.emit(state.token)
        state.token = ''
        state.close_negated_tokens()
        state.emit(table.MULTIPLICATION)
        state.numeric = False
    state.token += state.char(i)


def _minus(state, i):
    prev, nxt = state.char(i - 1), state.char(i + 1)
    if nxt == table.RIGHT_PARENTHESIS or (table.is_operator(nxt) and nxt != table.MINUS):
        raise InvalidExpression('Invalid subtraction operands')

    if i == 0 or prev == table.LEFT_PARENTHESIS:
        state.emit('0')
    elif table.is_operator(prev):
        # compound sign like a*-b, scoped by a synthetic parenthesis
        if nxt == table.LEFT_PARENTHESIS:
            state.scope_negations_to_group()
            state.negated_groups.append(state.depth)
        else:
            state.negated_tokens += 1
        state.emit(table.LEFT_PARENTHESIS, '0')
    else:
        state.flush()
        state.close_negated_tokens()
    state.emit(table.MINUS)


def _operator(state, i):
    ch = state.char(i)
    if i == len(state.expression) - 1:
        raise InvalidExpression('Operator at the end of expression')

    if ch == table.MINUS:
        _minus(state, i)
        return

    if i == 0:
        raise InvalidExpression('Operator at the beginning of the expression')
    if state.char(i - 1) == table.LEFT_PARENTHESIS:
        raise InvalidExpression('Operator after opening parenthesis')
    nxt = state.char(i + 1)
    if table.is_operator(nxt) and nxt != table.MINUS:
        raise InvalidExpression('Sequence of operators, second of which is not minus')

    state.flush()
    state.close_negated_tokens()
    state.emit(ch)


def _left_parenthesis(state, i):
    if state.token:
        if not state.numeric and table.is_function(state.token):
            state.emit(state.token)
            state.token = ''
            state.scope_negations_to_group()
        elif state.numeric:
            raise InvalidExpression('No operator between parenthesis and operand')
        else:
            raise InvalidExpression("Unknown function '{}'".format(state.token))

    state.emit(table.LEFT_PARENTHESIS)
    state.depth += 1


def _right_parenthesis(state, i):
    prev, nxt = state.char(i - 1), state.char(i + 1)
    if prev == table.LEFT_PARENTHESIS:
        raise InvalidExpression('Empty parentheses')
    if table.is_operator(prev):
        raise InvalidExpression('Operator before closing parenthesis')

    state.flush()
    state.close_negated_tokens()
    state.emit(table.RIGHT_PARENTHESIS)
    state.depth -= 1
    state.close_negated_groups()

    if nxt == table.LEFT_PARENTHESIS:
        state.emit(table.MULTIPLICATION)
    elif _is_digit(nxt) or _is_letter(nxt) or nxt == table.DOT:
        raise InvalidExpression('No operator between parenthesis and operand')


def tokenize(expression):
    '''
    Parses a validated infix expression into a list of string tokens
    '''
    if not expression:
        raise InvalidExpression('Expression cannot be empty')

    state = ScanState(expression)
    for i, ch in enumerate(expression):
        if _is_digit(ch):
            _digit(state, i)
        elif ch == table.DOT:
            _dot(state, i)
        elif _is_letter(ch):
            _letter(state, i)
        elif table.is_operator(ch):
            _operator(state, i)
        elif ch == table.LEFT_PARENTHESIS:
            _left_parenthesis(state, i)
        elif ch == table.RIGHT_PARENTHESIS:
            _right_parenthesis(state, i)
        else:
            raise InvalidExpression('Unknown symbol: {}'.format(ch))

    state.flush()
    state.close_negated_tokens()
    return state.tokens
