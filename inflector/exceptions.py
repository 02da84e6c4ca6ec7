class InvalidRuleError(ValueError):
    pass


class FrozenInflectionsError(Exception):
    pass


class ConstantNotFoundError(NameError):
    pass
