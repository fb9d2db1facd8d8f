'''
Exceptions raised while evaluating expressions
'''


class InvalidExpression (Exception):
    '''
    The expression or its variables can't be evaluated

    The first argument is the human readable reason
    '''

    def __init__(self, reason):
        super().__init__(reason)
        self.reason = reason

    def __str__(self):
        return str(self.reason)


class ArityError (Exception):
    '''
    A postfix sequence left the wrong number of operands on the stack

    Never caused by user input that went through the tokenizer
    '''
    pass
