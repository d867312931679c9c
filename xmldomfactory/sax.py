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
SAX driver lookup and a defused expat SAX driver. This module is a SAX driver
itself, so its name can be used as the implementation of a document builder.
"""
import importlib
from types import ModuleType
from typing import Any, Optional
from xml.sax import make_parser, SAXNotRecognizedException, \
    SAXNotSupportedException, SAXReaderNotAvailable
from xml.sax import expatreader  # type: ignore[attr-defined, unused-ignore]
from xml.sax.handler import feature_namespaces
from xml.sax.xmlreader import XMLReader

from xmldomfactory.exceptions import XMLDomConfigurationError, XMLDomForbidden
from xmldomfactory.logger import logger
from xmldomfactory.translation import gettext as _

__all__ = ['SafeExpatParser', 'create_parser', 'load_sax_driver', 'make_sax_parser']


class SafeExpatParser(expatreader.ExpatParser):  # type: ignore[misc, unused-ignore]
    """
    An expat SAX reader that forbids entities processing. Forbidden content
    is reported to the fatalError() method of the error handler and raised.
    """

    def forbid(self, message: str) -> None:
        error = XMLDomForbidden(message, locator=self)
        self._err_handler.fatalError(error)
        raise error

    def forbid_entity_declaration(self, name, is_parameter_entity,  # type: ignore
                                  value, base, sysid, pubid, notation_name):
        self.forbid(_("Entities are forbidden (entity_name={!r})").format(name))

    def forbid_unparsed_entity_declaration(self, name, base,  # type: ignore
                                           sysid, pubid, notation_name):
        self.forbid(_("Unparsed entities are forbidden (entity_name={!r})").format(name))

    def forbid_external_entity_reference(self, context, base, sysid, pubid):  # type: ignore
        msg = _("External references are forbidden (system_id={!r}, "
                "public_id={!r})").format(sysid, pubid)
        self.forbid(msg)  # pragma: no cover

    def reset(self) -> None:
        super().reset()
        self._parser.EntityDeclHandler = self.forbid_entity_declaration
        self._parser.UnparsedEntityDeclHandler = self.forbid_unparsed_entity_declaration
        self._parser.ExternalEntityRefHandler = self.forbid_external_entity_reference


def create_parser(*args: Any, **kwargs: Any) -> SafeExpatParser:
    """The SAX driver entry point."""
    return SafeExpatParser(*args, **kwargs)


def load_sax_driver(name: str) -> ModuleType:
    """
    Imports a SAX driver module. Unlike `xml.sax.make_parser()` there is no
    fallback to other drivers if the requested driver is not available.

    :param name: the dotted name of the driver module.
    """
    try:
        module = importlib.import_module(name)
    except ImportError as err:
        msg = _("SAX driver {!r} not found: {}").format(name, err)
        raise XMLDomConfigurationError(msg) from err

    if not callable(getattr(module, 'create_parser', None)):
        msg = _("module {!r} is not a SAX driver, it has no create_parser() function")
        raise XMLDomConfigurationError(msg.format(name))
    return module


def make_sax_parser(implementation: Optional[str] = None,
                    namespace_aware: bool = False) -> XMLReader:
    """
    Creates a new SAX reader.

    :param implementation: the name of the SAX driver module. For default \
    the reader is provided by the discovery of `xml.sax.make_parser()`.
    :param namespace_aware: the value of the namespaces feature of the reader.
    """
    try:
        if implementation is None:
            parser = make_parser()
        else:
            parser = load_sax_driver(implementation).create_parser()
    except SAXReaderNotAvailable as err:
        msg = _("SAX driver {!r} is not available: {}")
        raise XMLDomConfigurationError(msg.format(implementation, err)) from err

    try:
        parser.setFeature(feature_namespaces, namespace_aware)
    except (SAXNotRecognizedException, SAXNotSupportedException) as err:
        msg = _("SAX reader {!r} cannot set namespace awareness to {!r}: {}")
        raise XMLDomConfigurationError(msg.format(parser, namespace_aware, err)) from err

    logger.debug("created SAX reader %r (namespace_aware=%r)", parser, namespace_aware)
    return parser
