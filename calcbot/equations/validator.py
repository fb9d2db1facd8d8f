'''
Normalizes raw input and rejects what the tokenizer never expects to see
'''

import re

from .errors import InvalidExpression

# raw text: replacement
replacements = {
    ' ': '',
    ',': '.',
    '\u2212': '-',
    '\u2013': '-',
}

error_patterns = [
    (re.compile(r'[^a-zA-Z0-9+\-*/:^().]'), 'Extra symbol: '),
    (re.compile(r'[-+*/:^]{3,}'), 'Consecutive operators: '),
]


def normalize(text):
    '''
    Drops spaces and replaces locale punctuation
    '''
    for old, new in replacements.items():
        text = text.replace(old, new)
    return text


def validate(expression):
    '''
    Returns the normalized expression, raises on illegal characters
    and runs of three or more operators
    '''
    if not expression:
        raise InvalidExpression('Expression cannot be empty')

    expression = normalize(expression)
    for pattern, message in error_patterns:
        match = pattern.search(expression)
        if match:
            raise InvalidExpression("{}'{}'".format(message, match.group(0)))
    return expression
