#!/usr/bin/env python3

from sqlalchemy import (
    Column,
    String,
    Integer,
    Float,
)
from sqlalchemy.orm import declarative_base
from sqlalchemy.schema import Index


class Base:
    def dict(self):
        '''
        Returns a dict of the object
        Primarily for json serialization
        '''
        return {c.key: getattr(self, c.key) for c in self.__mapper__.column_attrs}


Base = declarative_base(cls=Base)


def format_number(value):
    '''
    Drops the fractional part of whole numbers for display
    '''
    if value.is_integer():
        return str(int(value))
    return str(value)


class Config (Base):
    '''
    Stores the configuration values for the application in key value pairs
    '''
    __tablename__ = 'configuration'

    name = Column(
        String(64),
        primary_key=True,
        doc="The setting's name")
    value = Column(
        'setting', String,
        doc="The setting's value")


class Prefix (Base):
    '''
    Stores the prefixes for servers
    '''
    __tablename__ = 'prefixes'

    server = Column(
        String(64),
        primary_key=True,
        doc='The server id for the prefix')
    prefix = Column(
        String(64),
        doc='The prefix for the server')


class Variable (Base):
    '''
    Values a user saved for their expressions on a server
    '''
    __tablename__ = 'variables'

    id = Column(
        Integer,
        primary_key=True,
        doc='An autonumber id')
    server = Column(
        String(64),
        nullable=False,
        doc='The server the variable is saved on')
    user = Column(
        String(64),
        nullable=False,
        doc='The id of the user owning the variable')
    name = Column(
        String(64),
        nullable=False,
        doc='Variable name, letters followed by optional digits')
    value = Column(
        Float,
        nullable=False, default=0.0,
        doc='The value of the variable')

    __table_args__ = (
        Index('_variable_index', server, user, name, unique=True),
    )

    def __str__(self):
        return '{}: {}'.format(self.name, format_number(self.value))
