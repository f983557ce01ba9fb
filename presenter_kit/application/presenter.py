"""
Presenter pattern - Application layer.

A presenter wraps a subject object. Attributes the presenter does not define
itself are looked up on the subject. Every value handed out, whether it comes
from the subject or from a method written on the presenter, goes through the
escaper before it reaches a template.

Example::

    class Map:
        def __init__(self, locations):
            self.locations = locations

        def location_names(self):
            return ", ".join(self.locations)

    class MapPresenter(Presenter):
        def count(self):
            return len(self.locations)

        def location_names(self):
            return self._original("location_names").upper()

    presenter = MapPresenter(Map(["Rome", "<b>Boston</b>"]))
    presenter.locations          # ['Rome', '&lt;b&gt;Boston&lt;&#x2F;b&gt;']
    presenter.count()            # 2
    presenter.location_names()   # 'ROME, &lt;B&gt;BOSTON&lt;&#x2F;B&gt;'
"""

import functools
import inspect
import logging
from typing import Any, Callable, FrozenSet, Optional

from presenter_kit.core import settings, InvalidSubjectError, NoSuchAttributeError
from presenter_kit.application.interfaces import Escaper
from presenter_kit.infrastructure.html_escaper import get_default_escaper


logger = logging.getLogger(__name__)

# Public names of the base class itself, never wrapped by autoescaping
RESERVED_NAMES = frozenset({"raw", "escaper", "autoescape_methods"})


def autoescape(func: Callable) -> Callable:
    """Wrap a presenter method so its return value is escaped."""
    if getattr(func, "__autoescaped__", False):
        return func

    @functools.wraps(func)
    def wrapper(self, *args, **kwargs):
        return self.escaper.escape(func(self, *args, **kwargs))

    wrapper.__autoescaped__ = True
    return wrapper


def _autoescape_getter(func: Callable, name: str) -> Callable:
    """Wrap a property getter so its value is escaped."""

    @functools.wraps(func)
    def getter(self):
        try:
            value = func(self)
        except AttributeError as e:
            # Python retries a failing descriptor through __getattr__,
            # which re-raises this error instead of asking the subject
            self.__dict__["_failed_member"] = (name, e)
            raise
        return self.escaper.escape(value)

    getter.__autoescaped__ = True
    return getter


def _autoescape_member(owner: type, name: str, member: Any) -> Optional[Any]:
    """
    Return an escaping replacement for a class member.

    None means the member is a plain value and stays as it is. Descriptors
    that cannot be wrapped raise TypeError, so no presenter output slips
    past the escaper.
    """
    if inspect.isfunction(member):
        return autoescape(member)

    if isinstance(member, property):
        if member.fget is None:
            return None
        return member.getter(_autoescape_getter(member.fget, name))

    if isinstance(member, functools.cached_property):
        cached = functools.cached_property(_autoescape_getter(member.func, name))
        cached.__set_name__(owner, name)
        return cached

    if isinstance(member, staticmethod) and inspect.isfunction(member.__func__):
        func = member.__func__

        @functools.wraps(func)
        def static_wrapper(*args, **kwargs):
            return owner.escaper.escape(func(*args, **kwargs))

        return staticmethod(static_wrapper)

    if isinstance(member, classmethod) and inspect.isfunction(member.__func__):
        func = member.__func__

        @functools.wraps(func)
        def class_wrapper(klass, *args, **kwargs):
            return klass.escaper.escape(func(klass, *args, **kwargs))

        return classmethod(class_wrapper)

    if isinstance(member, functools.partialmethod) and inspect.isfunction(member.func):
        return functools.partialmethod(autoescape(member.func), *member.args, **member.keywords)

    if hasattr(type(member), "__get__"):
        raise TypeError(
            f"{owner.__name__}.{name}: cannot autoescape {type(member).__name__} members")

    return None


def _is_forwardable_call(value: Any) -> bool:
    # Classes are handed out as values, not invoked on access
    return callable(value) and not isinstance(value, type)


class _SettingsEscaper:
    """Resolves to the escaper matching the current settings on every access."""

    def __get__(self, instance: Any, owner: type) -> Escaper:
        return get_default_escaper()


class Presenter:
    """
    Base class for presenters.

    Subclasses get escaping injected into every public method, property,
    cached property, static/class method and partial method they define.
    Use ``self._original(name, ...)`` or ``self._subject`` to reach the
    unescaped subject, and ``self.raw(value)`` to hand out a trusted value
    without escaping.

    ``escaper`` follows ``settings.apostrophe_entity`` unless a subclass
    assigns its own Escaper.
    """

    escaper = _SettingsEscaper()
    autoescape_methods: FrozenSet[str] = frozenset()

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)

        wrapped = set()
        for base in cls.__mro__[1:]:
            wrapped.update(getattr(base, "autoescape_methods", ()))

        for name, member in list(vars(cls).items()):
            if name.startswith("_") or name in RESERVED_NAMES:
                continue

            replacement = _autoescape_member(cls, name, member)
            if replacement is None:
                continue
            setattr(cls, name, replacement)
            wrapped.add(name)

        cls.autoescape_methods = frozenset(wrapped)

    def __init__(self, subject: Any):
        if subject is None:
            if not settings.allow_missing_subject:
                raise InvalidSubjectError(type(self).__name__)
            logger.warning(f"{type(self).__name__} built without a subject")

        object.__setattr__(self, "_subject", subject)

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "_subject" and "_subject" in self.__dict__:
            raise AttributeError(f"{type(self).__name__} cannot rebind its subject")
        object.__setattr__(self, name, value)

    def __delattr__(self, name: str) -> None:
        if name == "_subject":
            raise AttributeError(f"{type(self).__name__} cannot unbind its subject")
        object.__delattr__(self, name)

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup on the presenter fails
        if name.startswith("_"):
            raise NoSuchAttributeError(type(self).__name__, name)

        if any(name in vars(klass) for klass in type(self).__mro__):
            # A presenter member raised AttributeError, never fall back to the subject
            failed = self.__dict__.pop("_failed_member", None)
            if failed is not None and failed[0] == name:
                raise failed[1]
            raise NoSuchAttributeError(type(self).__name__, name)

        value = self._lookup(name)

        if _is_forwardable_call(value):
            logger.debug(f"{type(self).__name__} forwarding call '{name}' to subject")

            @functools.wraps(value)
            def forward(*args, **kwargs):
                return self.escaper.escape(value(*args, **kwargs))

            return forward

        logger.debug(f"{type(self).__name__} forwarding attribute '{name}' to subject")
        return self.escaper.escape(value)

    def __dir__(self):
        subject_names = [
            name for name in dir(self.__dict__.get("_subject"))
            if not name.startswith("_")
        ]
        return sorted(set(super().__dir__()) | set(subject_names))

    def __repr__(self) -> str:
        return f"<{type(self).__name__} subject={self.__dict__.get('_subject')!r}>"

    def _lookup(self, name: str) -> Any:
        """Fetch an attribute from the subject, unescaped."""
        subject = self.__dict__.get("_subject")
        try:
            return getattr(subject, name)
        except AttributeError:
            raise NoSuchAttributeError(type(self).__name__, name) from None

    def _original(self, name: str, *args, **kwargs) -> Any:
        """
        Return the subject's own, unescaped value for ``name``.

        Callables are invoked with the given arguments. This is how a
        presenter method builds on the subject's implementation of the
        method it overrides; the presenter method's result is escaped.
        """
        value = self._lookup(name)
        if _is_forwardable_call(value):
            return value(*args, **kwargs)
        if args or kwargs:
            raise TypeError(f"Subject attribute '{name}' is not callable")
        return value

    def raw(self, value: Any) -> Any:
        """Hand out a trusted value without escaping."""
        return self.escaper.raw(value)
