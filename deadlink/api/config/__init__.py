"""Config API module."""

from .DeadLinkConfig import DeadLinkConfig
from .HttpConfig import HttpConfig
from .LogConfig import LogConfig
from .RuleConfig import RuleConfig

__all__ = ["DeadLinkConfig", "HttpConfig", "LogConfig", "RuleConfig"]
