import logging
from typing import Callable, FrozenSet, Iterable, Optional, Set, Union

from . import defaults
from .exceptions import FrozenInflectionsError
from .rules import Rules

logger = logging.getLogger('Inflector')


class Inflections:
    """
    The inflection rules used by an ``Inflector``.

    An instance is created with ``Inflections.build()``, which adds the default English
    rules, then lets the caller add custom rules, then freezes the instance. Since the
    custom rules are added after the default ones, they always win.

    Example::

        def customize(inflections):
            inflections.plural('virus', 'viruses')
            inflections.singular('thieves', 'thief')
            inflections.irregular('octopus', 'octopuses')
            inflections.uncountable('inflector')

        inflections = Inflections.build(customize)
    """

    def __init__(self):
        self._plurals = Rules()
        self._singulars = Rules()
        self._humans = Rules()
        self._acronyms = Rules()
        self._uncountables: Union[Set[str], FrozenSet[str]] = set()
        self._frozen = False

    @classmethod
    def build(cls, customize: Optional[Callable[['Inflections'], None]] = None) -> 'Inflections':
        """
        Create the default inflections, optionally customized.

        :param customize: A callable receiving the new instance before it is frozen.
        :return: The frozen inflections.
        :raises InvalidRuleError: If ``customize`` adds a rule that does not compile.
        """
        inflections = cls()
        defaults.seed(inflections)
        logger.debug(f'Default inflections: {len(inflections.plurals)} plural rules, '
                     f'{len(inflections.singulars)} singular rules, {len(inflections.uncountables)} uncountables')

        if customize is not None:
            customize(inflections)
            logger.debug(f'Custom inflections applied by {getattr(customize, "__qualname__", customize)!r}')

        inflections.freeze()
        return inflections

    @property
    def plurals(self) -> Rules:
        return self._plurals

    @property
    def singulars(self) -> Rules:
        return self._singulars

    @property
    def humans(self) -> Rules:
        return self._humans

    @property
    def acronyms(self) -> Rules:
        return self._acronyms

    @property
    def uncountables(self) -> Union[Set[str], FrozenSet[str]]:
        return self._uncountables

    def plural(self, rule, replacement: str):
        """
        Add a pluralization rule.

        :param rule: A regular expression, matched case-insensitive when given as a string.
        :param replacement: The replacement, which may refer to the groups of ``rule``.
        """
        self._add_rule(rule, replacement, self._plurals)

    def singular(self, rule, replacement: str):
        """Add a singularization rule, see ``plural``."""
        self._add_rule(rule, replacement, self._singulars)

    def irregular(self, singular: str, plural: str):
        """
        Add an irregular pair, used by both pluralization and singularization.

        :param singular: The singular form, e.g. ``'person'``.
        :param plural: The plural form, e.g. ``'people'``.
        """
        self._check_not_frozen()
        self._uncountables.discard(singular.lower())
        self._uncountables.discard(plural.lower())
        self._plurals.add_exact(singular, plural)
        self._singulars.add_exact(plural, singular)

    def uncountable(self, *words: Union[str, Iterable[str]]):
        """Add words that are the same in singular and plural, e.g. ``'money'``."""
        self._check_not_frozen()
        for word in words:
            if isinstance(word, str):
                self._uncountables.add(word.lower())
            else:
                self._uncountables.update(w.lower() for w in word)

    def human(self, rule, replacement: str):
        """Add a rule applied by ``humanize`` before the underscores are replaced."""
        self._check_not_frozen()
        self._humans.add(rule, replacement)

    def acronym(self, *words: Union[str, Iterable[str]]):
        """Add acronyms used by ``camelize``, e.g. ``'API'`` so ``api_key`` becomes ``APIKey``."""
        self._check_not_frozen()
        for word in words:
            for acronym in ([word] if isinstance(word, str) else word):
                self._acronyms.add_exact(acronym, acronym)

    def is_uncountable(self, word: str) -> bool:
        return word.lower() in self._uncountables

    def freeze(self):
        for rules in (self._plurals, self._singulars, self._humans, self._acronyms):
            rules.freeze()
        self._uncountables = frozenset(self._uncountables)
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def _add_rule(self, rule, replacement, rules: Rules):
        self._check_not_frozen()
        rules.add(rule, replacement)
        # an explicit rule for a word overrides the word being uncountable
        if isinstance(rule, str):
            self._uncountables.discard(rule.lower())
        self._uncountables.discard(replacement.lower())

    def _check_not_frozen(self):
        if self._frozen:
            raise FrozenInflectionsError('Inflections cannot be changed after they have been built')

    def __repr__(self):
        return (f'<{self.__class__.__name__} plurals={len(self._plurals)} singulars={len(self._singulars)} '
                f'humans={len(self._humans)} uncountables={len(self._uncountables)}>')
