"""envredis - load process environments from a Redis hash."""

__version__ = '0.2.0'
