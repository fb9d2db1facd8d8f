'''
Parenthesis balance check run before tokenizing
'''

from . import table
from .errors import InvalidExpression


def check_parentheses(expression):
    '''
    Checks that every `(` is closed and no `)` comes before its `(`
    '''
    if not expression:
        raise InvalidExpression('Expression cannot be empty')

    if expression.count(table.LEFT_PARENTHESIS) != expression.count(table.RIGHT_PARENTHESIS):
        return False

    stack = []
    for ch in expression:
        if ch == table.LEFT_PARENTHESIS:
            stack.append(ch)
        elif ch == table.RIGHT_PARENTHESIS:
            if not stack:
                return False
            stack.pop()

    return not stack
