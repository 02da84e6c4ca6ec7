import builtins
import importlib
import re
from typing import Any, Callable, Optional

from .exceptions import ConstantNotFoundError
from .inflections import Inflections

ORDINALIZE_TH = (11, 12, 13)


class Inflector:
    """
    Derive plurals, singulars and naming conventions from words and identifiers.

    Every instance owns its rules, so differently customized inflectors can be used side
    by side. The rules cannot be changed after the instance is created.

    :param customize: An optional callable receiving the ``Inflections`` to customize.

    Example::

        inflector = Inflector(lambda inflections: inflections.plural('virus', 'viruses'))
        inflector.pluralize('virus')  # 'viruses'
    """

    def __init__(self, customize: Optional[Callable[[Inflections], None]] = None):
        self._inflections = Inflections.build(customize)

    @property
    def inflections(self) -> Inflections:
        return self._inflections

    def pluralize(self, word) -> str:
        """
        Pluralize a word.

        >>> Inflector().pluralize('book')
        'books'
        >>> Inflector().pluralize('money')
        'money'
        """
        word = str(word)
        if self.is_uncountable(word):
            return word
        return self._inflections.plurals.apply_to(word)

    def singularize(self, word) -> str:
        """
        Singularize a word.

        >>> Inflector().singularize('books')
        'book'
        """
        word = str(word)
        if self.is_uncountable(word):
            return word
        return self._inflections.singulars.apply_to(word)

    def is_uncountable(self, word) -> bool:
        """Return ``True`` if ``word`` is blank or has the same singular and plural form."""
        word = str(word)
        return word.isspace() or not word or self._inflections.is_uncountable(word)

    def humanize(self, word) -> str:
        """
        Turn an identifier into a phrase.

        The human rules are applied first, then a trailing ``_id`` is removed, the
        underscores become spaces and the first character is uppercased.

        >>> Inflector().humanize('dry_inflector')
        'Dry inflector'
        >>> Inflector().humanize('author_id')
        'Author'
        """
        result = self._inflections.humans.apply_to(str(word))
        if result.endswith('_id'):
            result = result[:-3]
        result = result.replace('_', ' ')
        return result[:1].upper() + result[1:]

    def camelize(self, word) -> str:
        """
        Camelize a word, using ``.`` as namespace separator.

        >>> Inflector().camelize('dry_inflector')
        'DryInflector'
        >>> Inflector().camelize('dry/inflector')
        'Dry.Inflector'
        >>> Inflector().camelize('api_key')
        'APIKey'
        """
        word = re.sub(r'^[a-z\d]*', lambda m: self._camelize_segment(m.group(0)), str(word))
        word = re.sub(r'(?:_|(/))([a-z\d]*)',
                      lambda m: (m.group(1) or '') + self._camelize_segment(m.group(2)),
                      word, flags=re.IGNORECASE)
        return word.replace('/', '.')

    def camelize_lower(self, word) -> str:
        """
        Camelize a word, keeping the first letter lowercase.

        >>> Inflector().camelize_lower('dry_inflector')
        'dryInflector'
        """
        word = str(word)
        head = re.match(r'[a-z\d]*', word, re.IGNORECASE).group(0)
        rest = self.camelize(word[len(head):])
        if self._inflections.acronyms.get_exact(head) is not None:
            head = head.lower()
        else:
            head = head[:1].lower() + head[1:]
        return head + rest

    def underscore(self, word) -> str:
        """
        >>> Inflector().underscore('dry-inflector')
        'dry_inflector'
        >>> Inflector().underscore('Dry.Inflector')
        'dry/inflector'
        """
        return self._underscorize(str(word).replace('.', '/'))

    def dasherize(self, word) -> str:
        return str(word).replace('_', '-')

    def demodulize(self, word) -> str:
        return str(word).split('.')[-1]

    def classify(self, word) -> str:
        """
        Return the class name for a table name, ignoring the schema prefix.

        >>> Inflector().classify('public.books')
        'Book'
        """
        return self.camelize(self.singularize(re.sub(r'.*\.', '', str(word))))

    def tableize(self, word) -> str:
        """
        Return the table name for a class name.

        >>> Inflector().tableize('BlogPost')
        'blog_posts'
        """
        return self.pluralize(self._underscorize(str(word).replace('.', '_')))

    def foreign_key(self, word) -> str:
        """
        >>> Inflector().foreign_key('blog.Message')
        'message_id'
        """
        return f'{self._underscorize(self.demodulize(word))}_id'

    def ordinalize(self, number: int) -> str:
        """
        >>> [Inflector().ordinalize(n) for n in (1, 2, 3, 11, 23, 100)]
        ['1st', '2nd', '3rd', '11th', '23rd', '100th']
        """
        abs_value = abs(number)

        if abs_value % 100 in ORDINALIZE_TH:
            return f'{number}th'

        suffix = {1: 'st', 2: 'nd', 3: 'rd'}.get(abs_value % 10, 'th')
        return f'{number}{suffix}'

    def constantize(self, name) -> Any:
        """
        Find the object with the given dotted name.

        Names without a module are looked up in ``builtins``.

        >>> Inflector().constantize('collections.OrderedDict')
        <class 'collections.OrderedDict'>

        :raises ConstantNotFoundError: If no module or attribute has that name.
        """
        name = str(name)
        parts = name.split('.')
        if not all(parts):
            raise ConstantNotFoundError(f'Invalid constant name "{name}"')

        # import the longest prefix that is a module, the rest are attributes
        obj = builtins
        attributes = parts
        for i in range(len(parts) - 1, 0, -1):
            try:
                obj = importlib.import_module('.'.join(parts[:i]))
            except ModuleNotFoundError:
                continue
            attributes = parts[i:]
            break

        for attribute in attributes:
            try:
                obj = getattr(obj, attribute)
            except AttributeError:
                raise ConstantNotFoundError(f'Constant "{name}" not found') from None

        return obj

    def _camelize_segment(self, segment: str) -> str:
        acronym = self._inflections.acronyms.get_exact(segment)
        if acronym is not None:
            return acronym
        return segment[:1].upper() + segment[1:]

    @staticmethod
    def _underscorize(word: str) -> str:
        word = re.sub(r'([A-Z]+)([A-Z][a-z])', r'\1_\2', word)
        word = re.sub(r'([a-z\d])([A-Z])', r'\1_\2', word)
        word = word.replace('-', '_')
        return word.lower()

    def __repr__(self):
        return f'<{self.__class__.__name__} {self._inflections!r}>'
