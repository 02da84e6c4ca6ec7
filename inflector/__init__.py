from .exceptions import InvalidRuleError, FrozenInflectionsError, ConstantNotFoundError
from .inflections import Inflections, logger
from .inflector import Inflector
from .rules import Rule, Rules

__version__ = '0.1.0'
