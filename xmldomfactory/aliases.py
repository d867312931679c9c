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
Type aliases for static typing analysis. The schema class is imported only in a
type checking context, in a runtime context the schema source alias falls back
to `Any` for schema instances.
"""
import os
from typing import TYPE_CHECKING, Any, IO, Optional, Protocol, Union
from xml.sax import SAXParseException

__all__ = ['SourceType', 'TextSourceType', 'SchemaSourceType', 'LogLevelType',
           'ErrorHandlerType']

SourceType = Union[str, 'os.PathLike[str]', IO[bytes], IO[str]]
TextSourceType = Union[str, bytes]
LogLevelType = Optional[Union[str, int]]

if TYPE_CHECKING:
    from xmlschema import XMLSchemaBase

    SchemaSourceType = Union[str, 'os.PathLike[str]', IO[str], IO[bytes], XMLSchemaBase]
else:
    SchemaSourceType = Union[str, 'os.PathLike[str]', IO[str], IO[bytes], Any]


class ErrorHandlerType(Protocol):
    """The protocol of SAX error handlers, see `xml.sax.handler.ErrorHandler`."""

    def warning(self, exception: SAXParseException) -> Any: ...

    def error(self, exception: SAXParseException) -> Any: ...

    def fatalError(self, exception: SAXParseException) -> Any: ...
