#
# Copyright (c), 2026, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
"""SAX error handlers used by document builders."""
from typing import Optional
from xml.sax import SAXParseException
from xml.sax.handler import ErrorHandler

from xmldomfactory.aliases import ErrorHandlerType
from xmldomfactory.exceptions import XMLDomParseError
from xmldomfactory.logger import logger

__all__ = ['ErrorRouter', 'CollectingErrorHandler']


def as_parse_error(exception: SAXParseException) -> XMLDomParseError:
    if isinstance(exception, XMLDomParseError):
        return exception
    return XMLDomParseError.from_sax_exception(exception)


class ErrorRouter(ErrorHandler):
    """
    Routes the errors of a parse to an optional error handler. Without a
    handler warnings are logged and errors are raised. Fatal errors are
    always raised after the handler is notified, so a parse never ends
    with a partial document.

    :param handler: an optional object implementing the SAX `ErrorHandler` \
    interface.
    """
    def __init__(self, handler: Optional[ErrorHandlerType] = None) -> None:
        self.handler = handler

    def __repr__(self) -> str:
        return '%s(handler=%r)' % (self.__class__.__name__, self.handler)

    def warning(self, exception: SAXParseException) -> None:
        error = as_parse_error(exception)
        if self.handler is None:
            logger.warning("%s", error)
        else:
            self.handler.warning(error)

    def error(self, exception: SAXParseException) -> None:
        error = as_parse_error(exception)
        if self.handler is None:
            raise error
        logger.debug("route recoverable error to %r: %s", self.handler, error)
        self.handler.error(error)

    def fatalError(self, exception: SAXParseException) -> None:
        error = as_parse_error(exception)
        if self.handler is not None:
            self.handler.fatalError(error)
        if error is exception:
            raise error
        raise error from exception


class CollectingErrorHandler(ErrorHandler):
    """
    A SAX error handler that collects warnings and recoverable errors,
    letting the parse continue. Fatal errors are re-raised.
    """
    def __init__(self) -> None:
        self.warnings: list[SAXParseException] = []
        self.errors: list[SAXParseException] = []

    def __repr__(self) -> str:
        return '%s(warnings=%d, errors=%d)' % (
            self.__class__.__name__, len(self.warnings), len(self.errors)
        )

    def warning(self, exception: SAXParseException) -> None:
        self.warnings.append(exception)

    def error(self, exception: SAXParseException) -> None:
        self.errors.append(exception)

    def fatalError(self, exception: SAXParseException) -> None:
        raise exception

    def clear(self) -> None:
        self.warnings.clear()
        self.errors.clear()
