import re
from types import MappingProxyType
from typing import Iterator, NamedTuple, Optional, Union

from .exceptions import InvalidRuleError, FrozenInflectionsError


class Rule(NamedTuple):
    pattern: re.Pattern
    replacement: str


def _check_template(pattern: re.Pattern, replacement: str):
    # an empty match with the same groups as pattern, so re parses and expands the template
    names = {index: name for name, index in pattern.groupindex.items()}
    groups = ''.join(f'(?P<{names[i]}>)' if i in names else '()' for i in range(1, pattern.groups + 1))
    re.match(groups, '').expand(replacement)


def compile_rule(pattern: Union[str, re.Pattern], replacement: str) -> Rule:
    """
    Compile and validate a rule.

    A string pattern is compiled case-insensitive, a compiled pattern is used as it is.

    :raises InvalidRuleError: If the pattern does not compile, or the replacement is not
        a valid template for the pattern.
    """
    if isinstance(pattern, str):
        try:
            pattern = re.compile(pattern, re.IGNORECASE)
        except re.error as e:
            raise InvalidRuleError(f'Invalid pattern {pattern!r}: {e}') from e
    elif not isinstance(pattern, re.Pattern):
        raise InvalidRuleError(f'A pattern must be a string or a compiled regular expression, not {type(pattern).__name__}')

    if isinstance(pattern.pattern, bytes):
        raise InvalidRuleError(f'A pattern must match strings, not bytes: {pattern.pattern!r}')

    if not isinstance(replacement, str):
        raise InvalidRuleError(f'The replacement for {pattern.pattern!r} must be a string, not {type(replacement).__name__}')

    try:
        _check_template(pattern, replacement)
    except (re.error, IndexError) as e:
        raise InvalidRuleError(f'Invalid replacement {replacement!r} for {pattern.pattern!r}: {e}') from e

    return Rule(pattern, replacement)


class Rules:
    """
    An ordered list of pattern rules plus a table of exact replacements.

    Exact replacements are looked up first. Pattern rules are then tried from the last
    added to the first, and only the first one that matches is applied, so a rule always
    shadows the overlapping rules added before it.
    """

    def __init__(self):
        self._rules = []
        self._exact = {}
        self._frozen = False

    def add(self, pattern: Union[str, re.Pattern], replacement: str):
        self._check_not_frozen()
        self._rules.append(compile_rule(pattern, replacement))

    def add_exact(self, word: str, replacement: str):
        self._check_not_frozen()
        self._exact[word.lower()] = replacement

    def get_exact(self, word: str, default: Optional[str] = None) -> Optional[str]:
        return self._exact.get(word, self._exact.get(word.lower(), default))

    def apply_to(self, word: str) -> str:
        """
        Return ``word`` transformed by the exact table or by the first matching rule.

        An exact replacement is capitalized when ``word`` starts with an uppercase letter.

        :param word: The word to transform.
        :return: The transformed word, or ``word`` itself when nothing matches.
        """
        exact = self.get_exact(word)
        if exact is not None:
            # keep the case of the first letter, e.g. Person -> People
            if word[:1].isupper():
                return exact[:1].upper() + exact[1:]
            return exact

        for rule in reversed(self._rules):
            result, count = rule.pattern.subn(rule.replacement, word, count=1)
            if count:
                return result

        return word

    def freeze(self):
        self._rules = tuple(self._rules)
        self._exact = MappingProxyType(self._exact)
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def exact(self):
        return self._exact

    def _check_not_frozen(self):
        if self._frozen:
            raise FrozenInflectionsError('Rules cannot be added after the inflections have been built')

    def __iter__(self) -> Iterator[Rule]:
        """Iterate the pattern rules in priority order, the last added first."""
        return reversed(self._rules)

    def __len__(self):
        return len(self._rules)

    def __repr__(self):
        return f'<{self.__class__.__name__} rules={len(self._rules)} exact={len(self._exact)}>'
