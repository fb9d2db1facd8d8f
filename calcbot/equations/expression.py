'''
Wires the pipeline together: validate, tokenize, convert, evaluate
'''

import logging

from .converter import infix2postfix
from .errors import InvalidExpression
from .evaluator import evaluate_postfix
from .parentheses import check_parentheses
from .tokenizer import tokenize
from .validator import validate
from .variables import parse_variables

logger = logging.getLogger(__name__)


def to_postfix(expression):
    '''
    Turns an infix expression into its postfix token list
    '''
    if not expression:
        raise InvalidExpression('Expression cannot be empty')
    if not check_parentheses(expression):
        raise InvalidExpression('Invalid parentheses')

    tokens = tokenize(validate(expression))
    rpn = infix2postfix(tokens)
    logger.debug('Compiled %r to %s', expression, ' '.join(rpn))
    return rpn


class Expression:
    '''
    An expression that can be evaluated repeatedly with different variables

    The postfix form is built on first use and kept for the next evaluations
    '''

    def __init__(self, expression):
        self.expression = expression
        self._postfix = None

    def __repr__(self):
        return 'Expression({!r})'.format(self.expression)

    @property
    def postfix(self):
        if self._postfix is None:
            self._postfix = to_postfix(self.expression)
        return list(self._postfix)

    def evaluate(self, *assignments, variables=None):
        '''
        Evaluates the expression

        [assignments] `name=value` strings
        [variables] a mapping of names to values,
            assignments override names it shares with them
        '''
        mapping = dict(variables or {})
        mapping.update(parse_variables(assignments))
        return evaluate_postfix(self.postfix, mapping)


def solve(expression, *assignments, variables=None):
    '''
    Evaluates an infix expression once
    '''
    return Expression(expression).evaluate(*assignments, variables=variables)
