#
# Copyright (c), 2026, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
"""
This module contains the exception classes for the package.
"""
from typing import Any, Optional
from xml.sax import SAXParseException
from xml.sax.xmlreader import Locator

from elementpath.etree import etree_tostring


class XMLDomException(Exception):
    """Package's base exception class"""


class XMLDomAttributeError(XMLDomException, AttributeError):
    pass


class XMLDomTypeError(XMLDomException, TypeError):
    pass


class XMLDomValueError(XMLDomException, ValueError):
    pass


class XMLDomOSError(XMLDomException, OSError):
    """Raised when an XML source cannot be read."""


class XMLDomConfigurationError(XMLDomException, ValueError):
    """
    Raised when a document builder that satisfies the requested configuration
    cannot be created.
    """


class SourceLocation(Locator):
    """A static SAX locator, for reporting positions after the parse is ended."""

    def __init__(self, system_id: Optional[str] = None,
                 line_number: Optional[int] = None,
                 column_number: Optional[int] = None,
                 public_id: Optional[str] = None) -> None:
        self.system_id = system_id
        self.line_number = line_number
        self.column_number = column_number
        self.public_id = public_id

    def getColumnNumber(self) -> Optional[int]:
        return self.column_number

    def getLineNumber(self) -> Optional[int]:
        return self.line_number

    def getPublicId(self) -> Optional[str]:
        return self.public_id

    def getSystemId(self) -> Optional[str]:
        return self.system_id


class XMLDomParseError(XMLDomException, SAXParseException):
    """
    Raised when an XML source is not well-formed. It's also a SAX parse
    exception, so it can be passed to the methods of any SAX error handler.

    :param message: the error message.
    :param exception: the optional wrapped exception.
    :param locator: a SAX locator for the position of the error. If it's \
    a live locator, like a SAX reader, the position is read at creation time.
    """
    def __init__(self, message: str,
                 exception: Optional[BaseException] = None,
                 locator: Optional[Locator] = None) -> None:
        if locator is None:
            locator = SourceLocation()
        super().__init__(message, exception, locator)  # type: ignore[arg-type]

    @classmethod
    def from_sax_exception(cls, exception: SAXParseException) -> 'XMLDomParseError':
        """Creates an instance from a SAX parse exception, freezing its position."""
        location = SourceLocation(
            system_id=exception.getSystemId(),
            line_number=exception.getLineNumber(),
            column_number=exception.getColumnNumber(),
            public_id=exception.getPublicId(),
        )
        return cls(exception.getMessage(), exception.getException(), location)

    @property
    def message(self) -> str:
        return self.getMessage()

    @property
    def lineno(self) -> Optional[int]:
        return self.getLineNumber()

    @property
    def column(self) -> Optional[int]:
        return self.getColumnNumber()


class XMLDomForbidden(XMLDomParseError):
    """Raised when the parsing of an XML source is forbidden for safety reasons."""


class XMLDomValidationError(XMLDomParseError):
    """
    Raised when an XML document is not valid against the schema of the builder.

    :param error: the validation error reported by the schema.
    :param system_id: the system identifier of the validated source.
    """
    def __init__(self, error: Any, system_id: Optional[str] = None) -> None:
        self.error = error
        self.reason: Optional[str] = getattr(error, 'reason', None)
        self.path: Optional[str] = getattr(error, 'path', None)
        self.elem: Any = getattr(error, 'elem', None)

        if self.reason is not None:
            message = self.reason
        else:
            message = getattr(error, 'message', None) or str(error)

        location = SourceLocation(system_id, getattr(error, 'sourceline', None))
        super().__init__(message, error, location)

    def __str__(self) -> str:
        chunks = [super().__str__()]
        if self.path is not None:
            chunks.append(f'Path: {self.path}')
        if hasattr(self.elem, 'tag') and hasattr(self.elem, 'attrib'):
            chunks.append('Instance:\n\n{}'.format(
                etree_tostring(self.elem, indent='  ', max_lines=20)
            ))
        return '\n\n'.join(chunks)


__all__ = ['XMLDomException', 'XMLDomAttributeError', 'XMLDomTypeError',
           'XMLDomValueError', 'XMLDomOSError', 'XMLDomConfigurationError',
           'SourceLocation', 'XMLDomParseError', 'XMLDomForbidden',
           'XMLDomValidationError']
