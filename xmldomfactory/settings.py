#
# Copyright (c), 2026, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
"""Parser configuration settings."""
import dataclasses as dc

from xmlschema import XMLSchema10, XMLSchema11, XMLSchemaBase

from xmldomfactory.exceptions import XMLDomConfigurationError
from xmldomfactory.names import XSD_NAMESPACE, XSD11_LANGUAGE
from xmldomfactory.translation import gettext as _
from xmldomfactory.arguments import BooleanOption, SchemaSourceOption, \
    SchemaLanguageOption, ImplementationOption

SCHEMA_CLASSES: dict[str, type[XMLSchemaBase]] = {
    XSD_NAMESPACE: XMLSchema10,
    XSD11_LANGUAGE: XMLSchema11,
}


@dc.dataclass
class ParserConfiguration:
    """
    Settings for building a document builder. Options are validated
    at creation time and cannot be changed after.
    """

    schema_source: SchemaSourceOption = SchemaSourceOption(default=None)
    """
    The schema used for validating parsed documents. Can be a path, a URL, XML text,
    a file-like object or an `xmlschema` schema instance. Used only by validating
    builders and requires a *schema_language*.
    """

    schema_language: SchemaLanguageOption = SchemaLanguageOption(default=None)
    """
    The URI of the schema language. Can be the XSD namespace for XSD 1.0
    schemas or 'http://www.w3.org/XML/XMLSchema/v1.1' for XSD 1.1 schemas.
    """

    implementation: ImplementationOption = ImplementationOption(default=None)
    """
    The dotted name of the SAX driver module to use, a module that provides
    a *create_parser* function. For default the driver is found by the SAX
    parser discovery of the standard library.
    """

    namespace_aware: BooleanOption = BooleanOption(default=False)
    """If `True` the parsed documents have namespace-qualified nodes."""

    validating: BooleanOption = BooleanOption(default=False)
    """If `True` the parsed documents are validated against the schema."""

    def get_schema_class(self) -> type[XMLSchemaBase]:
        """Returns the schema class for the configured schema language."""
        if self.schema_language is None:
            msg = _("schema source {!r} cannot be used without also setting "
                    "a schema language")
            raise XMLDomConfigurationError(msg.format(self.schema_source))
        return SCHEMA_CLASSES[self.schema_language]
