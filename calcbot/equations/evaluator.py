'''
Stack evaluation of postfix token lists
'''

import math
import operator

from . import functions
from . import table
from .errors import InvalidExpression, ArityError


def _divide(a, b):
    if b == 0:
        raise InvalidExpression('Division by zero')
    return a / b


def _power(a, b):
    if a < 0 and not float(b).is_integer():
        raise InvalidExpression("Root of negative number can't be calculated")
    if a == 0 and b < 0:
        raise InvalidExpression('Division by zero')
    try:
        return math.pow(a, b)
    except OverflowError:
        raise InvalidExpression('Result is too large') from None


operations = {
    '+': operator.add,
    '-': operator.sub,
    '*': operator.mul,
    '/': _divide,
    '^': _power,
}


def _lookup(name, variables):
    '''
    Gets the value of a log base name, variables shadow constants
    '''
    if variables and name in variables:
        return float(variables[name])
    if table.is_constant(name):
        return table.constants[name]
    raise InvalidExpression("No value for variable '{}'".format(name))


def log_base(function, variables=None):
    '''
    Works out the base of a logarithm from its name

    `log3a2` has the base 3 * a2, `loge` the base e, `log2` the base 2
    '''
    parts = table.parse_log_name(function)
    if parts is None or not (parts.coefficient or parts.identifier):
        raise InvalidExpression('Invalid base of logarithm')

    base = 1.0
    if parts.coefficient:
        if not table.is_number(parts.coefficient):
            raise InvalidExpression('Invalid base of logarithm')
        base *= float(parts.coefficient)
    if parts.identifier:
        base *= _lookup(parts.identifier, variables)
    return _finite(base)


def apply_function(function, value, variables=None):
    '''
    Applies a named function to a single operand
    '''
    if function.startswith(table.LOG_PREFIX):
        return functions.log(value, log_base(function, variables))
    if function not in functions.unary:
        raise InvalidExpression("Function '{}' is not supported".format(function))
    return functions.unary[function](value)


def _pop(stack, count, token):
    if len(stack) < count:
        raise ArityError('Not enough operands for {}'.format(token))
    values = stack[-count:]
    del stack[-count:]
    return values


def _finite(value):
    if not math.isfinite(value):
        raise InvalidExpression('Result is too large')
    return value


def evaluate_postfix(rpn, variables=None):
    '''
    Evaluates a postfix token list

    Variables maps names to values, constants are always available
    Every value pushed on the stack must be finite
    '''
    if not rpn:
        raise InvalidExpression('Tokens in postfix notation must be provided')

    stack = []

    for token in rpn:
        if table.is_number(token):
            value = float(token)
        elif table.is_operator(token):
            a, b = _pop(stack, 2, token)
            value = operations[token](a, b)
        elif table.is_function(token):
            value, = _pop(stack, 1, token)
            value = apply_function(token, value, variables)
        elif table.is_constant(token):
            value = table.constants[token]
        elif table.parse_variable_name(token) is not None:
            if not variables or token not in variables:
                raise InvalidExpression("No value for variable '{}'".format(token))
            value = float(variables[token])
        elif token in (table.LEFT_PARENTHESIS, table.RIGHT_PARENTHESIS):
            raise InvalidExpression("Unknown operator: {}".format(token))
        else:
            raise InvalidExpression('Invalid variable structure')
        stack.append(_finite(value))

    if len(stack) != 1:
        raise ArityError('Too many operands for operators in {}'.format(' '.join(rpn)))

    return float(stack[0])
