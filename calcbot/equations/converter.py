'''
Shunting-Yard conversion of infix tokens into postfix order
'''

from . import table
from .errors import InvalidExpression


def infix2postfix(tokens):
    '''
    Converts an infix token list to a postfix token list

    Functions are held on the stack like a `(` and leave it
    as soon as anything of lower or equal precedence arrives
    '''
    if not tokens:
        raise InvalidExpression('Tokens must be provided')

    stack = []
    output = []

    for token in tokens:
        if table.is_operator(token):
            while (stack and stack[-1] != table.LEFT_PARENTHESIS and (
                    table.precedence(stack[-1]) > table.precedence(token) or
                    table.precedence(stack[-1]) == table.precedence(token) and
                    not table.is_right_associative(token))):
                output.append(stack.pop())
            stack.append(token)
        elif table.is_function(token) or token == table.LEFT_PARENTHESIS:
            stack.append(token)
        elif token == table.RIGHT_PARENTHESIS:
            while stack and stack[-1] != table.LEFT_PARENTHESIS:
                output.append(stack.pop())
            if not stack:
                raise InvalidExpression('Mismatched parentheses')
            stack.pop()
        else:
            output.append(token)

    while stack:
        if stack[-1] == table.LEFT_PARENTHESIS:
            raise InvalidExpression('Mismatched parentheses')
        output.append(stack.pop())

    return output
