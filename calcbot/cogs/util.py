import discord
from discord.ext import commands

from .. import model as m


class BotError (Exception):
    pass


class ItemNotFoundError (BotError):
    def __init__(self, value=None):
        self.value = value


class Cog (commands.Cog):
    def __init__(self, bot):
        self.bot = bot


def get_variables(session, userid, server):
    '''
    Gets the saved variables of a user as a name: value dict
    '''
    variables = session.query(m.Variable)\
        .filter_by(user=str(userid), server=str(server))
    return {variable.name: variable.value for variable in variables}


def sql_update(session, type, keys, values):
    '''
    Updates a sql object
    '''
    obj = session.query(type)\
        .filter_by(**keys).one_or_none()
    if obj is not None:
        for value in values:
            setattr(obj, value, values[value])
    else:
        values = values.copy()
        values.update(keys)
        obj = type(**values)
        session.add(obj)

    session.commit()

    return obj


def item_paginator(items, header=None):
    paginator = commands.Paginator(prefix='', suffix='')
    if header:
        paginator.add_line(header)
    for item in items:
        paginator.add_line(str(item))
    return paginator


async def send_pages(ctx, paginator):
    '''
    Displays a set of pages
    '''
    for page in paginator.pages:
        await send_embed(ctx, description=page)


def invalid_subcommand(ctx):
    message = 'Command "{} {}" is not found'.format(ctx.invoked_with, ctx.message.content.split()[1])
    return commands.CommandNotFound(message)


def strip_quotes(arg):
    '''
    Strips quotes from arguments
    '''
    if len(arg) >= 2 and arg.startswith('"') and arg.endswith('"'):
        arg = arg[1:-1]
    return arg


async def send_embed(ctx, *, content=None, author=None, color=None, description=None, fields=None):
    '''
    Creates and sends an embed
    '''
    embed = discord.Embed()
    if description is not None:
        embed.description = description
    if author is not None:
        embed.color = author.color
        embed.set_author(name=author.display_name, icon_url=author.display_avatar.url)
    if color:
        embed.color = color
    if fields:
        for field in fields:
            embed.add_field(name=field[0], value=field[1], inline=field[2] if len(field) > 2 else False)
    await ctx.send(content=content, embed=embed)
