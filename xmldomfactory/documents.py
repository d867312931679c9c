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
Factory functions for document builders and shortcuts for parsing XML
files and strings to DOM documents.
"""
import os
from typing import Optional
from xml.dom import minidom

from xmldomfactory.aliases import SchemaSourceType, SourceType, TextSourceType, \
    ErrorHandlerType, LogLevelType
from xmldomfactory.factory import DocumentBuilderFactory, DocumentBuilder
from xmldomfactory.logger import logged
from xmldomfactory.names import XSD_NAMESPACE, DEFAULT_SAX_DRIVER
from xmldomfactory.sources import DOMSource

__all__ = ['new_document_builder_factory', 'new_document_builder', 'new_document',
           'new_document_from_string', 'parse', 'new_dom_source']


def new_document_builder_factory(schema: Optional[SchemaSourceType] = None,
                                 schema_language: Optional[str] = XSD_NAMESPACE,
                                 implementation: Optional[str] = DEFAULT_SAX_DRIVER,
                                 namespace_aware: bool = True,
                                 validating: bool = True,
                                 loglevel: LogLevelType = None) -> DocumentBuilderFactory:
    """
    Creates a document builder factory. With only the *schema* argument the factory
    builds namespace-aware XSD 1.0 validating builders that use the defused SAX
    driver of the package. Any option can be replaced, `None` means not set.

    :param schema: the schema source.
    :param schema_language: the URI of the schema language.
    :param implementation: the dotted name of the SAX driver module. The choice \
    is bound to the factory and never changes the default SAX driver of the process.
    :param namespace_aware: if `True` builders produce namespace-qualified DOM nodes.
    :param validating: if `True` builders validate documents against the schema.
    :param loglevel: for setting a different logging level for factory creation.
    """
    return DocumentBuilderFactory(
        schema_source=schema,
        schema_language=schema_language,
        implementation=implementation,
        namespace_aware=namespace_aware,
        validating=validating,
        loglevel=loglevel,
    )


@logged
def new_document_builder(schema: Optional[SchemaSourceType] = None,
                         loglevel: LogLevelType = None) -> DocumentBuilder:
    """
    Creates a document builder. With a schema the builder is created by the
    default validating factory of :meth:`new_document_builder_factory`,
    otherwise the builder is only namespace-aware and uses the default SAX
    driver of the process.

    :param schema: an optional schema source.
    :param loglevel: for setting a different logging level for builder creation.
    :raises XMLDomConfigurationError: if a builder cannot be created.
    """
    if schema is not None:
        factory = new_document_builder_factory(schema)
    else:
        factory = DocumentBuilderFactory(namespace_aware=True)
    return factory.new_document_builder()


def new_document(source: SourceType) -> minidom.Document:
    """
    Parses an XML file to a DOM document, using the builder returned
    by :meth:`new_document_builder` without arguments.

    :param source: a path or a file-like object.
    """
    return new_document_builder().parse(source)


def new_document_from_string(text: TextSourceType) -> minidom.Document:
    """
    Parses an XML string to a DOM document, using the builder returned
    by :meth:`new_document_builder` without arguments.

    :param text: a string or bytes containing XML data.
    """
    return new_document_builder().parse_string(text)


def parse(xml_file: SourceType,
          error_handler: Optional[ErrorHandlerType],
          schema: SchemaSourceType) -> minidom.Document:
    """
    Parses and validates an XML file, routing the warnings and the recoverable
    errors to an error handler. Validation errors don't stop the parse if the
    handler doesn't raise them.

    :param xml_file: a path or a file-like object.
    :param error_handler: a SAX error handler, `None` for raising errors.
    :param schema: the schema source used for validating the XML document. \
    Has to be a schema, the XML file name is not used as a schema location.
    :raises XMLDomConfigurationError: if the schema is `None` or cannot be built.
    """
    builder = new_document_builder_factory(schema).new_document_builder()
    builder.set_error_handler(error_handler)
    return builder.parse(xml_file)


def new_dom_source(xml_file: SourceType,
                   error_handler: Optional[ErrorHandlerType],
                   schema: SchemaSourceType) -> DOMSource:
    """
    Like :meth:`parse` but returns the document wrapped in a :class:`DOMSource`.
    """
    document = parse(xml_file, error_handler, schema)
    if isinstance(xml_file, (str, os.PathLike)):
        system_id: Optional[str] = os.fspath(xml_file)
    else:
        system_id = getattr(xml_file, 'name', None)
        if not isinstance(system_id, str):
            system_id = None
    return DOMSource(document, system_id)
