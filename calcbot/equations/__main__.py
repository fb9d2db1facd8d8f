#!/usr/bin/env python3
'''
Evaluates an expression from the command line

    python -m calcbot.equations "2 + log3a2(4 * 9)" "a2=2"
'''

import sys

from . import solve, InvalidExpression


def main(argv):
    if argv:
        expression, assignments = argv[0], argv[1:]
    else:
        expression, assignments = input('Eq: '), []

    try:
        result = solve(expression, *assignments)
    except InvalidExpression as e:
        print('Error: {}'.format(e), file=sys.stderr)
        return 1

    print(result)
    return 0


def run():
    sys.exit(main(sys.argv[1:]))


if __name__ == '__main__':
    run()
