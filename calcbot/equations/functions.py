'''
Domain-checked math functions available to expressions

Trigonometric functions take their angles in degrees,
the inverse ones answer in radians
'''

import math

from .errors import InvalidExpression


def _remainder(angle):
    # angle modulo 180, always in [0, 180)
    return angle - 180 * math.floor(angle / 180.0)


def sin(angle):
    return math.sin(math.radians(angle))


def cos(angle):
    return math.cos(math.radians(angle))


def tg(angle):
    remainder = _remainder(angle)
    if remainder == 90.0 or remainder == -90.0:
        raise InvalidExpression('Tangent of {} degrees is undefined'.format(angle))
    return math.tan(math.radians(angle))


def ctg(angle):
    if _remainder(angle) == 0.0:
        raise InvalidExpression('Cotangent of {} degrees is undefined'.format(angle))
    return 1 / math.tan(math.radians(angle))


def arcsin(value):
    if abs(value) > 1:
        raise InvalidExpression('Arcsine of {} is undefined'.format(value))
    return math.asin(value)


def arccos(value):
    if abs(value) > 1:
        raise InvalidExpression('Arccosine of {} is undefined'.format(value))
    return math.acos(value)


def arctg(value):
    return math.atan(value)


def arcctg(value):
    return math.pi / 2 - math.atan(value)


def ln(value):
    if value <= 0:
        raise InvalidExpression('Natural logarithm of {} is undefined'.format(value))
    return math.log(value)


def lg(value):
    if value <= 0:
        raise InvalidExpression('Common logarithm of {} is undefined'.format(value))
    return math.log10(value)


def log(value, base):
    '''
    Logarithm of value in an arbitrary base
    '''
    if value <= 0:
        raise InvalidExpression('Logarithm of {} is undefined'.format(value))
    if base <= 0 or base == 1.0:
        raise InvalidExpression(
            'The base of the logarithmic function should be greater than 0 and not equal to 1')
    return math.log(value, base)


def sqrt(value):
    if value < 0:
        raise InvalidExpression('Even root of negative number is undefined')
    return math.sqrt(value)


def abs_(value):
    return abs(value)


# single argument functions by name, `log` is resolved separately
unary = {
    'sin': sin,
    'cos': cos,
    'tg': tg,
    'ctg': ctg,
    'arcsin': arcsin,
    'arccos': arccos,
    'arctg': arctg,
    'arcctg': arcctg,
    'ln': ln,
    'lg': lg,
    'sqrt': sqrt,
    'abs': abs_,
}
