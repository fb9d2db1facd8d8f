from discord.ext import commands

from . import util
from .util import m
from ..equations import parse_assignment


class VariableCog (util.Cog):
    @commands.group('variable', aliases=['var'], invoke_without_command=True)
    @commands.guild_only()
    async def group(self, ctx):
        '''
        Manage the values you use in expressions
        '''
        raise util.invalid_subcommand(ctx)

    @group.command(aliases=['set', 'update'])
    async def add(self, ctx, *, assignment: str):
        '''
        Adds/updates a variable

        Parameters:
        [assignment*] `name = value`
            the value is a number or a constant, e.x. `x = 2,5` or `y = -pi`
        '''
        name, value = parse_assignment(util.strip_quotes(assignment))

        variable = util.sql_update(ctx.session, m.Variable, {
            'server': str(ctx.guild.id),
            'user': str(ctx.author.id),
            'name': name,
        }, {
            'value': value,
        })

        await ctx.send('{} now has {}'.format(ctx.author.display_name, str(variable)))

    @group.command()
    async def check(self, ctx, *, name: str):
        '''
        Checks the value of a variable

        Parameters:
        [name*] the name of the variable
        '''
        variable = self.get_variable(ctx, util.strip_quotes(name))
        await ctx.send(str(variable))

    @group.command(ignore_extra=False)
    async def list(self, ctx):
        '''
        Lists all of your variables
        '''
        variables = ctx.session.query(m.Variable)\
            .filter_by(server=str(ctx.guild.id), user=str(ctx.author.id))\
            .order_by(m.Variable.name)
        pages = util.item_paginator(variables, header="{}'s variables:".format(ctx.author.display_name))
        await util.send_pages(ctx, pages)

    @group.command(aliases=['delete'])
    async def remove(self, ctx, *, name: str):
        '''
        Deletes a variable

        Parameters:
        [name*] the name of the variable
        '''
        variable = self.get_variable(ctx, util.strip_quotes(name))

        ctx.session.delete(variable)
        ctx.session.commit()
        await ctx.send('{} no longer has {}'.format(ctx.author.display_name, str(variable)))

    @staticmethod
    def get_variable(ctx, name):
        variable = ctx.session.query(m.Variable)\
            .filter_by(server=str(ctx.guild.id), user=str(ctx.author.id), name=name).one_or_none()
        if variable is None:
            raise util.ItemNotFoundError(name)
        return variable


async def setup(bot):
    await bot.add_cog(VariableCog(bot))
