'''
Parses `name=value` assignments into a variable mapping
'''

from . import table
from .errors import InvalidExpression
from .validator import normalize


def parse_value(value):
    '''
    Converts a number or an optionally negated constant name to a float
    '''
    if table.is_number(value):
        return float(value)
    negative = value.startswith(table.MINUS)
    name = value[1:] if negative else value
    if not table.is_constant(name):
        raise InvalidExpression('Invalid variable value: {}'.format(value))
    return -table.constants[name] if negative else table.constants[name]


def parse_assignment(assignment):
    '''
    Splits `name = value` into the name and its float value
    '''
    if not isinstance(assignment, str):
        raise InvalidExpression('Variable must be provided as string')

    parts = normalize(assignment).split('=')
    if len(parts) != 2:
        raise InvalidExpression('Invalid variable {}'.format(parts[0]))

    name, value = parts
    if table.parse_variable_name(name) is None:
        raise InvalidExpression('Invalid variable name: {}'.format(name))
    return name, parse_value(value)


def parse_variables(assignments):
    '''
    Builds the variable mapping for a list of assignments, later names win
    '''
    return dict(parse_assignment(assignment) for assignment in assignments)
