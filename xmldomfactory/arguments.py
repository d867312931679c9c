#
# Copyright (c), 2026, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
import os
import re
from collections.abc import Callable
from functools import partial
from typing import Any, cast, Generic, Optional, TypeVar, Union

from xmldomfactory.aliases import SchemaSourceType
from xmldomfactory.exceptions import XMLDomAttributeError, XMLDomTypeError, \
    XMLDomValueError, XMLDomConfigurationError
from xmldomfactory.names import XSD_NAMESPACE, XSD11_LANGUAGE
from xmldomfactory.translation import gettext as _

SCHEMA_LANGUAGES = frozenset((XSD_NAMESPACE, XSD11_LANGUAGE))

_REGEX_MODULE_NAME = re.compile(r'^[A-Za-z_]\w*(\.[A-Za-z_]\w*)*$')

T = TypeVar('T')


class Argument(Generic[T]):
    """
    A descriptor for positional and optional arguments. An argument can't be changed
    nor deleted. Arguments are validated with a sequence of validation functions that
    are called by the base *validated_value* method.
    """
    __slots__ = ('_name', '_default')

    _default: T
    _validators: tuple[Callable[['Argument[T]', T], None], ...] = ()

    def __set_name__(self, owner: type[Any], name: str) -> None:
        self._name = f'_{name}'

    def __str__(self) -> str:
        if hasattr(self, '_default'):
            return _('optional argument {!r}').format(self._name[1:])
        return _('argument {!r}').format(self._name[1:])

    def __get__(self, instance: Optional[Any], owner: type[Any]) -> T:
        try:
            return cast(T, getattr(instance, self._name))
        except AttributeError:
            try:
                return self._default
            except AttributeError:
                if instance is None:
                    msg = _("{} can't be accessed from {!r}").format(self, owner)
                else:
                    msg = _("{} of {!r} object has not been set").format(self, instance)
                raise XMLDomAttributeError(msg) from None

    def __set__(self, instance: Any, value: Any) -> None:
        if hasattr(instance, self._name):
            raise XMLDomAttributeError(_("can't change {}").format(self))
        setattr(instance, self._name, self.validated_value(value))

    def __delete__(self, instance: Any) -> None:
        raise XMLDomAttributeError(_("can't delete {}").format(self))

    def validated_value(self, value: Any) -> T:
        for validator in self._validators:
            validator(self, value)
        return cast(T, value)


class Option(Argument[T]):
    """
    A descriptor for handling optional arguments.

    :param default: The default value for the optional argument.
    """
    __slots__ = ()

    def __init__(self, *, default: T) -> None:
        self._default = default


###
# Validation helpers for arguments and options

def validate_type(attr: Argument[T], value: T,
                  types: Union[None, type[T], tuple[type[T], ...]] = None,
                  none: bool = False) -> None:
    """
    Base function for validating an argument type.

    :param attr: the argument to validate.
    :param value: the argument value to validate.
    :param types: the optional types to validate against.
    :param none: if `True` a None value is accepted.
    """
    if none and value is None or types is not None and isinstance(value, types):
        return None
    elif types is None:
        if none:
            raise XMLDomTypeError(
                _("invalid type {!r} for {}, must be None").format(type(value), attr)
            )
        return None
    elif none:
        msg = _("invalid type {!r} for {}, must be None or a {!r}")
    else:
        msg = _("invalid type {!r} for {}, must be a {!r}")

    raise XMLDomTypeError(msg.format(type(value), attr, types))


bool_validator = partial(validate_type, types=bool)
none_str_validator = partial(validate_type, types=str, none=True)


class BooleanOption(Option[bool]):
    __slots__ = ()
    _validators = (bool_validator,)


class SchemaSourceOption(Option[Optional[SchemaSourceType]]):
    """
    The schema source: None, a path, a URL, XML text, a file-like object or a
    schema instance. Other sources are left to be checked by the schema class.
    """
    __slots__ = ()

    def validated_value(self, value: Any) -> Optional[SchemaSourceType]:
        if value is None or isinstance(value, (str, os.PathLike)):
            return cast(Optional[SchemaSourceType], value)
        elif hasattr(value, 'read') or hasattr(value, 'iter_errors'):
            return cast(SchemaSourceType, value)

        msg = _("invalid type {!r} for {}, must be None, a path, a URL, "
                "a file-like object or a schema instance")
        raise XMLDomTypeError(msg.format(type(value), self))


class SchemaLanguageOption(Option[Optional[str]]):
    """
    The URI of the schema language. Unsupported languages are a configuration
    error, because the schema validation cannot be delegated.
    """
    __slots__ = ()
    _validators = (none_str_validator,)

    def validated_value(self, value: Any) -> Optional[str]:
        value = super().validated_value(value)
        if value is not None and value not in SCHEMA_LANGUAGES:
            msg = _("unsupported schema language {!r} for {}: must be one of {}")
            raise XMLDomConfigurationError(
                msg.format(value, self, tuple(sorted(SCHEMA_LANGUAGES)))
            )
        return value


class ImplementationOption(Option[Optional[str]]):
    """The dotted name of a SAX driver module."""
    __slots__ = ()
    _validators = (none_str_validator,)

    def validated_value(self, value: Any) -> Optional[str]:
        value = super().validated_value(value)
        if value is not None and _REGEX_MODULE_NAME.match(value) is None:
            msg = _("invalid value {!r} for {}: must be the dotted name of a module")
            raise XMLDomValueError(msg.format(value, self))
        return value
