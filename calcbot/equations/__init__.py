'''
Evaluation of mathematical expressions with named variables

    >>> solve('(3 + 4)(5 - 2) / 2')
    10.5
    >>> solve('x * y', 'x = 5', 'y = 3')
    15.0
'''

from .errors import InvalidExpression, ArityError
from .table import Kind, classify, precedence, is_right_associative
from .tokenizer import tokenize
from .converter import infix2postfix
from .evaluator import evaluate_postfix
from .validator import validate
from .parentheses import check_parentheses
from .variables import parse_assignment, parse_variables
from .expression import Expression, to_postfix, solve

__all__ = [
    'InvalidExpression', 'ArityError',
    'Kind', 'classify', 'precedence', 'is_right_associative',
    'tokenize', 'infix2postfix', 'evaluate_postfix',
    'validate', 'check_parentheses', 'parse_assignment', 'parse_variables',
    'Expression', 'to_postfix', 'solve',
]
