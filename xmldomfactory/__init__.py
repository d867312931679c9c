#
# Copyright (c), 2026, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
from . import translation
from .exceptions import XMLDomException, XMLDomAttributeError, XMLDomTypeError, \
    XMLDomValueError, XMLDomOSError, XMLDomConfigurationError, XMLDomParseError, \
    XMLDomForbidden, XMLDomValidationError
from .names import XSD_NAMESPACE, XSD11_LANGUAGE, EXPAT_SAX_DRIVER, \
    SAFE_SAX_DRIVER, DEFAULT_SAX_DRIVER
from .logger import set_logging_level
from .settings import ParserConfiguration
from .handlers import ErrorRouter, CollectingErrorHandler
from .sources import DOMSource
from .factory import DocumentBuilderFactory, DocumentBuilder
from .documents import new_document_builder_factory, new_document_builder, \
    new_document, new_document_from_string, parse, new_dom_source

__version__ = '1.0.0'
__author__ = "Davide Brunato"
__contact__ = "brunato@sissa.it"
__copyright__ = "Copyright 2026, SISSA"
__license__ = "MIT"
__status__ = "Production/Stable"

__all__ = [
    'translation', 'XMLDomException', 'XMLDomAttributeError', 'XMLDomTypeError',
    'XMLDomValueError', 'XMLDomOSError', 'XMLDomConfigurationError',
    'XMLDomParseError', 'XMLDomForbidden', 'XMLDomValidationError',
    'XSD_NAMESPACE', 'XSD11_LANGUAGE', 'EXPAT_SAX_DRIVER', 'SAFE_SAX_DRIVER',
    'DEFAULT_SAX_DRIVER', 'set_logging_level', 'ParserConfiguration',
    'ErrorRouter', 'CollectingErrorHandler', 'DOMSource',
    'DocumentBuilderFactory', 'DocumentBuilder', 'new_document_builder_factory',
    'new_document_builder', 'new_document', 'new_document_from_string',
    'parse', 'new_dom_source',
]
