'''Calculator bot for discord

Evaluates mathematical expressions with functions, constants and your own saved variables

Note:
Any parameter value that has spaces in it needs to be wrapped in quotes "
Parameters marked with a * may omit the quotes

Certain commands are only usable by administrators
'''

import re
import logging
from collections import OrderedDict
from contextlib import closing

import discord
from discord.ext import commands
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.exc import IntegrityError

from . import model as m
from .cogs import util
from .equations import InvalidExpression

logger = logging.getLogger(__name__)

default_prefix = ';'


async def get_prefix(bot: commands.Bot, message: discord.Message):
    match = re.match(r'^({}\s+)'.format(re.escape(bot.user.mention)), message.content)
    if match:
        return match.group(1)
    if message.guild is None:
        return default_prefix
    with closing(bot.Session()) as session:
        item = session.get(m.Prefix, str(message.guild.id))
        prefix = default_prefix if item is None else item.prefix
    return prefix


intents = discord.Intents.default()
intents.message_content = True

bot = commands.Bot(
    command_prefix=get_prefix,
    description=__doc__,
    intents=intents)
delete_emoji = '❌'

extensions = [
    'calc',
    'variables',
]


@bot.event
async def setup_hook():
    '''
    Loads the command categories
    '''
    prefix = __package__ + '.cogs.'
    for extension in extensions:
        await bot.load_extension(prefix + extension)


@bot.event
async def on_ready():
    '''
    Sets up the bot
    '''
    logger.info('Logged in as %s (%s)', bot.user.name, bot.user.id)
    game = 'Type `@{} help` for command list'.format(bot.user.name)
    if bot.config['url']:
        game = bot.config['url'] + ' | ' + game
    await bot.change_presence(activity=discord.Game(name=game))


@bot.before_invoke
async def before_any_command(ctx):
    '''
    Set up database connection
    '''
    ctx.session = bot.Session()


@bot.after_invoke
async def after_any_command(ctx):
    '''
    Tear down database connection
    '''
    ctx.session.close()
    ctx.session = None


def is_my_delete_emoji(reaction):
    return reaction.me and reaction.count > 1 and str(reaction.emoji) == delete_emoji


@bot.event
async def on_raw_reaction_add(payload: discord.RawReactionActionEvent):
    if payload.user_id != bot.user.id and str(payload.emoji) == delete_emoji:
        channel = bot.get_channel(payload.channel_id)
        if channel is None:
            return
        message = await channel.fetch_message(payload.message_id)
        if discord.utils.find(is_my_delete_emoji, message.reactions):
            await message.delete()


def error_message(error: Exception):
    '''
    Gets the reply for an error raised by a command
    Returns None for errors the bot doesn't know how to explain
    '''
    if isinstance(error, commands.NoPrivateMessage):
        message = 'This command can only be used in a server'
    elif isinstance(error, commands.CheckFailure):
        message = 'Error: You do not meet the requirements to use this command'
    elif isinstance(error, commands.CommandNotFound):
        if error.args:
            message = error.args[0]
        else:
            message = 'Error: command not found'
    elif isinstance(error, commands.BadArgument):
        message = '{}\nSee the help text for valid parameters'.format(error)
    elif isinstance(error, commands.MissingRequiredArgument):
        message = 'Missing parameter: {}\nSee the help text for valid parameters'.format(error.param.name)
    elif isinstance(error, commands.TooManyArguments):
        message = 'Too many parameters\nSee the help text for valid parameters'
    elif isinstance(error, util.ItemNotFoundError):
        if error.value:
            message = "Couldn't find requested item: `{}`".format(error.value)
        else:
            message = "Couldn't find requested item"
    elif isinstance(error, InvalidExpression):
        message = 'Invalid expression: `{}`'.format(error)
    else:
        message = None
    return message


@bot.event
async def on_command_error(ctx, error: Exception):
    if isinstance(error, commands.CommandInvokeError):
        error = error.original

    message = error_message(error)
    if message is None:
        logger.error('Unexpected error in command %s', ctx.command, exc_info=error)
        message = 'Error: {}'.format(error)
        await ctx.send(message)
        raise error

    message += '\n(click {} below to delete this message)'.format(delete_emoji)
    msg = await ctx.send(message)
    await msg.add_reaction(delete_emoji)


# ----#-   Commands


@bot.command(ignore_extra=False)
@commands.guild_only()
@commands.has_permissions(administrator=True)
async def setprefix(ctx, prefix: str = default_prefix):
    '''
    Sets the prefix for the server

    Parameters:
    [prefix] the new prefix for the server
        leave blank to reset
    '''
    guild_id = str(ctx.guild.id)
    item = ctx.session.get(m.Prefix, guild_id)
    if prefix == default_prefix:
        if item is not None:
            ctx.session.delete(item)
    else:
        if item is None:
            item = m.Prefix(server=guild_id)
            ctx.session.add(item)
        item.prefix = prefix
    try:
        ctx.session.commit()
    except IntegrityError:
        ctx.session.rollback()
        raise Exception('Could not change prefix, an unknown error occured')
    else:
        await ctx.send('Prefix changed to `{}`'.format(prefix))


# ----#-


def load_config(session, defaults):
    '''
    Reads the configuration table, creating missing keys with their defaults
    '''
    config = OrderedDict(defaults)
    for name in config:
        key = session.get(m.Config, name)
        if key is not None:
            config[name] = key.value
        else:
            key = m.Config(name=name, value=config[name])
            session.add(key)
            session.commit()
    return config


def main(database: str):
    engine = create_engine(database)
    m.Base.metadata.create_all(engine)
    bot.Session = sessionmaker(bind=engine)
    with closing(bot.Session()) as session:
        bot.config = load_config(session, [
            ('token', None),
            ('url', None),
        ])

    if not bot.config['token']:
        raise RuntimeError('No bot token in the configuration table of {}'.format(database))

    bot.run(bot.config['token'], log_handler=None)
