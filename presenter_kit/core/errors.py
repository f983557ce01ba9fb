"""Common exceptions."""

from typing import Optional


class PresenterError(Exception):
    """Base class for all presenter_kit errors."""

    def __init__(self, msg: Optional[str] = None):
        self.msg = msg
        super().__init__(msg)

    def __str__(self) -> str:
        return str(self.msg)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.msg}>"


class InvalidSubjectError(PresenterError, ValueError):
    """Presenter was built without a subject."""

    def __init__(self, presenter_name: str):
        self.presenter_name = presenter_name
        super().__init__(f"{presenter_name} requires a subject, got None.")


class NoSuchAttributeError(PresenterError, AttributeError):
    """Attribute is defined neither on the presenter nor on its subject."""

    def __init__(self, presenter_name: str, name: str):
        super().__init__(
            f"'{presenter_name}' object and its subject have no attribute '{name}'")
        # AttributeError.__init__ resets name, so assign afterwards
        self.presenter_name = presenter_name
        self.name = name


class ConfigurationError(PresenterError):
    """Setting contains a value the escaper cannot use."""

    def __init__(self, option: str, value: object, expected: str):
        super().__init__(
            f"Config option \"{option}\" has wrong value \"{value}\". {expected} expected.")
