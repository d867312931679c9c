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
This module contains the document builder factory and the document builder.
"""
import io
import os
from typing import Any, Optional, Union
from xml.dom import minidom
from xml.sax import SAXNotRecognizedException, SAXNotSupportedException, \
    SAXParseException
from xml.sax.handler import property_lexical_handler
from xml.sax.xmlreader import InputSource

from xmlschema import XMLSchemaBase, XMLSchemaException

from xmldomfactory.aliases import SchemaSourceType, SourceType, TextSourceType, \
    ErrorHandlerType, LogLevelType
from xmldomfactory.exceptions import XMLDomException, XMLDomConfigurationError, \
    XMLDomOSError, XMLDomParseError, XMLDomTypeError, XMLDomValidationError, \
    SourceLocation
from xmldomfactory.dom import DOMTreeBuilder
from xmldomfactory.handlers import ErrorRouter
from xmldomfactory.logger import logger, logged
from xmldomfactory.sax import make_sax_parser
from xmldomfactory.settings import ParserConfiguration
from xmldomfactory.translation import gettext as _

__all__ = ['DocumentBuilderFactory', 'DocumentBuilder']


class DocumentBuilderFactory:
    """
    A factory of document builders. The configuration is validated at creation
    time and it's immutable, a new factory is needed for a different setup.

    :param schema_source: an optional schema source for validating documents.
    :param schema_language: the URI of the schema language, required with \
    a schema source.
    :param implementation: the optional dotted name of a SAX driver module. \
    Applies only to the builders created by this factory.
    :param namespace_aware: if `True` builders produce namespace-qualified \
    DOM nodes.
    :param validating: if `True` builders validate documents against the schema.
    :param loglevel: for setting a different logging level for factory creation.
    """
    @logged
    def __init__(self, schema_source: Optional[SchemaSourceType] = None,
                 schema_language: Optional[str] = None,
                 implementation: Optional[str] = None,
                 namespace_aware: bool = False,
                 validating: bool = False,
                 loglevel: LogLevelType = None) -> None:

        self.configuration = ParserConfiguration(
            schema_source=schema_source,
            schema_language=schema_language,
            implementation=implementation,
            namespace_aware=namespace_aware,
            validating=validating,
        )
        logger.debug("created %r", self)

    def __repr__(self) -> str:
        return '%s(schema_source=%r, schema_language=%r, implementation=%r, ' \
               'namespace_aware=%r, validating=%r)' % (
                   self.__class__.__name__, self.schema_source, self.schema_language,
                   self.implementation, self.namespace_aware, self.validating
               )

    @property
    def schema_source(self) -> Optional[SchemaSourceType]:
        return self.configuration.schema_source

    @property
    def schema_language(self) -> Optional[str]:
        return self.configuration.schema_language

    @property
    def implementation(self) -> Optional[str]:
        return self.configuration.implementation

    @property
    def namespace_aware(self) -> bool:
        return self.configuration.namespace_aware

    @property
    def validating(self) -> bool:
        return self.configuration.validating

    def load_schema(self) -> XMLSchemaBase:
        """Builds the schema instance for validating documents."""
        config = self.configuration
        schema_class = config.get_schema_class()

        if isinstance(config.schema_source, XMLSchemaBase):
            if not isinstance(config.schema_source, schema_class):
                msg = _("schema {!r} is not an instance of {!r}, required by "
                        "schema language {!r}")
                raise XMLDomConfigurationError(msg.format(
                    config.schema_source, schema_class, config.schema_language
                ))
            return config.schema_source

        try:
            return schema_class(config.schema_source)
        except (XMLSchemaException, OSError, ValueError) as err:
            msg = _("cannot build a schema from {!r}: {}")
            raise XMLDomConfigurationError(msg.format(config.schema_source, err)) from err

    def new_document_builder(self) -> 'DocumentBuilder':
        """
        Creates a new document builder. Each call repeats the SAX driver lookup
        and, for validating builders, builds the schema again.

        :raises XMLDomConfigurationError: if a builder that satisfies \
        the configuration cannot be created.
        """
        config = self.configuration
        schema = None

        if config.schema_source is not None:
            config.get_schema_class()  # checks that the schema language is set

        if config.validating:
            if config.schema_source is None:
                msg = _("DTD validation is not supported, a validating "
                        "builder requires a schema source")
                raise XMLDomConfigurationError(msg)
            schema = self.load_schema()
        elif config.schema_source is not None:
            logger.debug("schema %r ignored by a not validating factory", config.schema_source)

        return DocumentBuilder(
            implementation=config.implementation,
            namespace_aware=config.namespace_aware,
            schema=schema,
        )


class DocumentBuilder:
    """
    A document builder, that parses XML sources to DOM documents. It's usually
    created by a :class:`DocumentBuilderFactory` instance.

    :param implementation: the optional dotted name of a SAX driver module.
    :param namespace_aware: if `True` the builder produces namespace-qualified \
    DOM nodes.
    :param schema: an optional schema instance for validating parsed documents.
    :param error_handler: an optional SAX error handler.
    """
    error_handler: Optional[ErrorHandlerType] = None

    def __init__(self, implementation: Optional[str] = None,
                 namespace_aware: bool = False,
                 schema: Optional[XMLSchemaBase] = None,
                 error_handler: Optional[ErrorHandlerType] = None) -> None:
        if schema is not None and not isinstance(schema, XMLSchemaBase):
            msg = _("invalid type {!r} for schema, must be None or a {!r}")
            raise XMLDomTypeError(msg.format(type(schema), XMLSchemaBase))

        self.implementation = implementation
        self.namespace_aware = namespace_aware
        self.schema = schema
        self.set_error_handler(error_handler)

        # Create a SAX reader for checking the driver, parses use fresh readers
        make_sax_parser(implementation, namespace_aware)

    def __repr__(self) -> str:
        return '%s(implementation=%r, namespace_aware=%r, validating=%r)' % (
            self.__class__.__name__, self.implementation,
            self.namespace_aware, self.validating
        )

    @property
    def validating(self) -> bool:
        return self.schema is not None

    def set_error_handler(self, error_handler: Optional[ErrorHandlerType]) -> None:
        """
        Sets the SAX error handler for the next parses. Use `None` for restoring
        the default behaviour, that raises errors and logs warnings.
        """
        if error_handler is not None:
            for name in ('warning', 'error', 'fatalError'):
                if not callable(getattr(error_handler, name, None)):
                    msg = _("invalid error handler {!r}: missing {}() method")
                    raise XMLDomTypeError(msg.format(error_handler, name))
        self.error_handler = error_handler

    def new_document(self) -> minidom.Document:
        """Returns a new empty DOM document."""
        return minidom.getDOMImplementation().createDocument(None, None, None)

    def parse(self, source: SourceType) -> minidom.Document:
        """
        Parses an XML file to a DOM document.

        :param source: a path to a file or a file-like object.
        :raises XMLDomOSError: if the file cannot be read.
        :raises XMLDomParseError: if the XML data is not well-formed.
        :raises XMLDomValidationError: if the document is not valid and \
        there is no error handler for routing validation errors.
        """
        if isinstance(source, (str, os.PathLike)):
            path = os.fspath(source)
            logger.debug("parse XML file %r with %r", path, self)
            try:
                fp = open(path, 'rb')
            except OSError as err:
                raise XMLDomOSError(err.errno, err.strerror, err.filename) from err

            with fp:
                document = self._build_document(fp, path)
            self._validate(path, path)
            return document

        elif not hasattr(source, 'read'):
            msg = _("invalid type {!r} for source, must be a path or a file-like object")
            raise XMLDomTypeError(msg.format(type(source)))

        system_id = getattr(source, 'name', None)
        try:
            data = source.read()
        except OSError as err:
            raise XMLDomOSError(err.errno, err.strerror, system_id) from err

        logger.debug("parse XML data read from %r with %r", source, self)
        return self._parse_data(data, system_id if isinstance(system_id, str) else None)

    def parse_string(self, text: TextSourceType) -> minidom.Document:
        """
        Parses an XML string to a DOM document.

        :param text: a string or a bytes object containing XML data.
        :raises XMLDomParseError: if the XML data is not well-formed.
        :raises XMLDomValidationError: if the document is not valid and \
        there is no error handler for routing validation errors.
        """
        if not isinstance(text, (str, bytes)):
            msg = _("invalid type {!r} for text, must be a str or bytes")
            raise XMLDomTypeError(msg.format(type(text)))

        logger.debug("parse XML text with %r", self)
        return self._parse_data(text)

    def _parse_data(self, data: Union[str, bytes],
                    system_id: Optional[str] = None) -> minidom.Document:
        document = self._build_document(self._get_stream(data), system_id)
        self._validate(self._get_stream(data), system_id)
        return document

    @staticmethod
    def _get_stream(data: Union[str, bytes]) -> Union[io.StringIO, io.BytesIO]:
        if isinstance(data, str):
            return io.StringIO(data)
        return io.BytesIO(data)

    def _build_document(self, stream: Any, system_id: Optional[str]) -> minidom.Document:
        input_source = InputSource(system_id)
        if isinstance(stream, io.TextIOBase):
            input_source.setCharacterStream(stream)
        else:
            input_source.setByteStream(stream)

        handler = DOMTreeBuilder()
        parser = make_sax_parser(self.implementation, self.namespace_aware)
        parser.setContentHandler(handler)
        try:
            parser.setProperty(property_lexical_handler, handler)
        except (SAXNotRecognizedException, SAXNotSupportedException):
            logger.debug("SAX reader %r has no lexical handler, comments and "
                         "document type declaration are skipped", parser)
        parser.setErrorHandler(ErrorRouter(self.error_handler))

        try:
            parser.parse(input_source)
        except XMLDomException:
            raise
        except SAXParseException as err:
            raise XMLDomParseError.from_sax_exception(err) from err

        document = handler.document
        if document is None:
            raise XMLDomParseError(_("no element found"), locator=SourceLocation(system_id))

        document.normalize()
        return document  # type: ignore[no-any-return]

    def _validate(self, source: Any, system_id: Optional[str]) -> None:
        if self.schema is None:
            return

        router = ErrorRouter(self.error_handler)
        count = 0
        try:
            for error in self.schema.iter_errors(source):
                count += 1
                router.error(XMLDomValidationError(error, system_id))
        except XMLSchemaException as err:
            raise XMLDomParseError(str(err), err, SourceLocation(system_id)) from err

        logger.debug("validation of %r ended with %d errors", system_id, count)
