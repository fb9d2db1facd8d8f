'''
Static knowledge shared by every stage of the pipeline:
operators, functions, constants and the shape of names
'''

import enum
import math
import re
from collections import namedtuple

LEFT_PARENTHESIS = '('
RIGHT_PARENTHESIS = ')'
DOT = '.'
MINUS = '-'
MULTIPLICATION = '*'

# symbol: (precedence, right associative)
operators = {
    '+': (1, False),
    '-': (1, False),
    '*': (2, False),
    '/': (2, False),
    '^': (3, True),
}

FUNCTION_PRECEDENCE = 4

functions = [
    'sin', 'cos', 'tg', 'ctg',
    'arcsin', 'arccos', 'arctg', 'arcctg',
    'ln', 'lg', 'log',
    'sqrt', 'abs',
]

LOG_PREFIX = 'log'

constants = {
    'pi': math.pi,
    'e': math.e,
}

VariableName = namedtuple('VariableName', 'letters digits')
LogName = namedtuple('LogName', 'coefficient identifier')

_number = re.compile(r'[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?')
_variable_name = re.compile(r'([a-zA-Z]+)([0-9]*)')
_log_name = re.compile(r'log([0-9.]*)((?:[a-zA-Z]+[0-9]*)?)')


class Kind (enum.Enum):
    '''
    What a token is, as far as the table can tell
    '''
    OPERATOR = 1
    FUNCTION = 2
    CONSTANT = 3
    OPERAND = 4


def is_operator(token):
    return token in operators


def is_function(token):
    return token in functions or token.startswith(LOG_PREFIX)


def is_constant(token):
    return token in constants


def precedence(token):
    '''
    Gets the precedence of an operator, anything else binds like a function
    '''
    if token in operators:
        return operators[token][0]
    return FUNCTION_PRECEDENCE


def is_right_associative(token):
    return token in operators and operators[token][1]


def classify(token):
    '''
    Sorts a token into one of the table's kinds
    Numbers, variables and parentheses are all operands here
    '''
    if is_operator(token):
        return Kind.OPERATOR
    if is_function(token):
        return Kind.FUNCTION
    if is_constant(token):
        return Kind.CONSTANT
    return Kind.OPERAND


def is_number(token):
    '''
    Checks for a decimal literal, optionally signed and with an exponent
    '''
    return _number.fullmatch(token) is not None


def parse_variable_name(token):
    '''
    Splits a variable name into its letters and trailing digits
    Returns None when the token is not shaped like a variable
    '''
    match = _variable_name.fullmatch(token)
    if match is None:
        return None
    return VariableName(*match.groups())


def parse_log_name(token):
    '''
    Splits a logarithm name like `log3a2` into the coefficient of its base
    and the identifier multiplying it

    Either part is an empty string when absent
    Returns None when the name is not a logarithm
    '''
    match = _log_name.fullmatch(token)
    if match is None:
        return None
    return LogName(*match.groups())
