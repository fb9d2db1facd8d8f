'''
Mathematical expression evaluator, and a discord bot serving it
'''

from .equations import solve, Expression, InvalidExpression

__all__ = ['solve', 'Expression', 'InvalidExpression']
