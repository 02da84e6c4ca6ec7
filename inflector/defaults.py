"""
Default English inflections.

The order of the rules matters: the rules added later win, so each list goes from the
most general rule to the most specific one.
"""

PLURALS = [
    (r'\Z', 's'),
    (r's\Z', 's'),
    (r'(ax|test)is\Z', r'\1es'),
    (r'(.*)us\Z', r'\1uses'),
    (r'(octop|vir|cact)us\Z', r'\1i'),
    (r'(octop|vir|cact)i\Z', r'\1i'),
    (r'(alias|status)\Z', r'\1es'),
    (r'(buffal|domin|ech|embarg|her|mosquit|potat|tomat)o\Z', r'\1oes'),
    (r'([ti])um\Z', r'\1a'),
    (r'([ti])a\Z', r'\1a'),
    (r'sis\Z', 'ses'),
    (r'(?:([^f])fe|([lr])f)\Z', r'\1\2ves'),
    (r'(hive|proof)\Z', r'\1s'),
    (r'([^aeiouy]|qu)y\Z', r'\1ies'),
    (r'(x|ch|ss|sh)\Z', r'\1es'),
    (r'(stoma|epo)ch\Z', r'\1chs'),
    (r'(matr|vert|ind)(?:ix|ex)\Z', r'\1ices'),
    (r'^([ml])ouse\Z', r'\1ice'),
    (r'^([ml])ice\Z', r'\1ice'),
    (r'^(ox)\Z', r'\1en'),
    (r'^(oxen)\Z', r'\1'),
    (r'(quiz)\Z', r'\1zes'),
]

SINGULARS = [
    (r's\Z', ''),
    (r'(ss)\Z', r'\1'),
    (r'(n)ews\Z', r'\1ews'),
    (r'([ti])a\Z', r'\1um'),
    (r'((a)naly|(b)a|(d)iagno|(p)arenthe|(p)rogno|(s)ynop|(t)he)(sis|ses)\Z', r'\1sis'),
    (r'(^analy)(sis|ses)\Z', r'\1sis'),
    (r'([^f])ves\Z', r'\1fe'),
    (r'(hive)s\Z', r'\1'),
    (r'(tive)s\Z', r'\1'),
    (r'([lr])ves\Z', r'\1f'),
    (r'([^aeiouy]|qu)ies\Z', r'\1y'),
    (r'(s)eries\Z', r'\1eries'),
    (r'(m)ovies\Z', r'\1ovie'),
    (r'(x|ch|ss|sh)es\Z', r'\1'),
    (r'^([ml])ice\Z', r'\1ouse'),
    (r'(bus)(es)?\Z', r'\1'),
    (r'(o)es\Z', r'\1'),
    (r'(shoe)s\Z', r'\1'),
    (r'(cris|ax|test)(is|es)\Z', r'\1is'),
    (r'(octop|vir|cact)(us|i)\Z', r'\1us'),
    (r'(alias|status)(es)?\Z', r'\1'),
    (r'^(ox)en\Z', r'\1'),
    (r'(vert|ind)ices\Z', r'\1ex'),
    (r'(matr)ices\Z', r'\1ix'),
    (r'(quiz)zes\Z', r'\1'),
    (r'(database)s\Z', r'\1'),
]

# singular -> plural
IRREGULARS = [
    ('person', 'people'),
    ('man', 'men'),
    ('woman', 'women'),
    ('human', 'humans'),
    ('child', 'children'),
    ('sex', 'sexes'),
    ('foot', 'feet'),
    ('tooth', 'teeth'),
    ('goose', 'geese'),
    ('forum', 'forums'),
]

UNCOUNTABLES = [
    'equipment', 'fish', 'grass', 'hovercraft', 'information', 'jeans', 'milk', 'money', 'moose',
    'deer', 'police', 'rain', 'rice', 'series', 'sheep', 'species', 'swiss',
]

ACRONYMS = ['API', 'CSRF']


def seed(inflections):
    for rule, replacement in PLURALS:
        inflections.plural(rule, replacement)

    for rule, replacement in SINGULARS:
        inflections.singular(rule, replacement)

    for singular, plural in IRREGULARS:
        inflections.irregular(singular, plural)

    inflections.uncountable(UNCOUNTABLES)
    inflections.acronym(ACRONYMS)
