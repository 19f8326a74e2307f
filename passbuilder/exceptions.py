"""
Custom exceptions for passbuilder.
"""


class PassBuilderException(Exception):
    """Base exception for passbuilder."""

    pass


class LengthOutOfRangeError(PassBuilderException, ValueError):
    """Password length bound is smaller than the number of categories in use."""

    def __init__(self, parameter: str, value: int, category_count: int, categories=None):
        self.parameter = parameter
        self.value = value
        self.category_count = category_count
        message = (
            f"{parameter}={value}: the password length cannot be less than "
            f"the number of character categories used: {category_count}"
        )
        if categories is not None:
            message += f" ({categories})"
        super().__init__(message)


class EmptyDictionaryError(PassBuilderException):
    """The character dictionary has no characters left to sample."""

    pass


class BuilderDisposedError(PassBuilderException):
    """Builder or random source used after disposal."""

    pass
