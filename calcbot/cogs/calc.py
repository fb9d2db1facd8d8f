from discord.ext import commands

from . import util
from ..equations import Expression, table
from ..model import format_number


def split_arguments(text):
    '''
    Splits `expression | a=1 | b=2` into the expression and its assignments
    '''
    parts = [part.strip() for part in util.strip_quotes(text.strip()).split('|')]
    return parts[0], [part for part in parts[1:] if part]


def calculate(text, saved=None, output=None):
    '''
    Evaluates a calc command's argument text

    Saved variables are overridden by the ones assigned inline
    Appends the steps to show to the output list
    '''
    if output is None:
        output = []
    expression, assignments = split_arguments(text)

    expr = Expression(expression)
    output.append('`{}`'.format(expression))
    if assignments:
        output.append('where `{}`'.format('`, `'.join(assignments)))

    result = expr.evaluate(*assignments, variables=saved)
    output.append('= {}'.format(format_number(result)))
    return result


class CalcCog (util.Cog):
    @commands.group('calc', aliases=['c', 'eval'], invoke_without_command=True)
    async def group(self, ctx, *, expression: str):
        '''
        Evaluates a mathematical expression
        Note: your saved variables are available by name

        Parameters:
        [expression*] the expression to evaluate
            Variables can be assigned after the expression, each after a pipe `|`
            e.x. `calc (a + b) / 2 | a = 5 | b = pi`

        Operations from highest precedence to lowest:

        f(x): any function below
        ^ : exponentiation
        * : multiplication
        / : division
        + : addition
        - : subtraction, also negates a number

        Two groups or a number and a name next to each other are multiplied
        e.x. `2a` or `(1 + 2)(3 + 4)`
        '''
        if ctx.guild:
            saved = util.get_variables(ctx.session, ctx.author.id, ctx.guild.id)
        else:
            saved = {}

        output = []
        calculate(expression, saved, output=output)
        await util.send_embed(ctx, author=ctx.author, description='\n'.join(output))

    @group.command()
    async def rpn(self, ctx, *, expression: str):
        '''
        Shows an expression in postfix (reverse polish) notation

        Parameters:
        [expression*] the expression to convert
        '''
        expression, _ = split_arguments(expression)
        postfix = Expression(expression).postfix
        await util.send_embed(ctx, description='`{}`'.format(' '.join(postfix)))

    @group.command(ignore_extra=False)
    async def functions(self, ctx):
        '''
        Lists the functions and constants expressions can use
        '''
        fields = [
            ('Functions', ', '.join(table.functions)),
            ('Logarithms', '`logN(x)` and `logNname(x)` take the base N * name, e.x. `log2(8)`, `loge(x)`'),
            ('Constants', ', '.join(table.constants)),
            ('Angles', 'sin, cos, tg and ctg take degrees'),
        ]
        await util.send_embed(ctx, fields=fields)


async def setup(bot):
    await bot.add_cog(CalcCog(bot))
