#!/usr/bin/env python
#
# Copyright (c), 2026, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
"""Tests concerning parser configuration settings and option descriptors"""
import unittest
import io
import pathlib

from xmlschema import XMLSchema10, XMLSchema11

from xmldomfactory import XSD_NAMESPACE, XSD11_LANGUAGE, ParserConfiguration, \
    XMLDomAttributeError, XMLDomTypeError, XMLDomValueError, XMLDomConfigurationError
from xmldomfactory.arguments import Argument, Option, BooleanOption, \
    ImplementationOption, validate_type
from xmldomfactory.names import RELAXNG_NAMESPACE


class TestArguments(unittest.TestCase):

    def test_argument_descriptors(self):
        class A:
            a = Argument[int]()
            b = Option[int](default=1)
            c = BooleanOption(default=False)

        obj = A()
        with self.assertRaises(XMLDomAttributeError) as ctx:
            _ = obj.a
        self.assertIn("argument 'a' of", str(ctx.exception))
        self.assertIn("has not been set", str(ctx.exception))
        with self.assertRaises(XMLDomAttributeError) as ctx:
            _ = A.a
        self.assertIn("can't be accessed from", str(ctx.exception))

        self.assertEqual(obj.b, 1)
        self.assertEqual(A.b, 1)
        self.assertIs(obj.c, False)

        obj.a = 8
        self.assertEqual(obj.a, 8)
        with self.assertRaises(XMLDomAttributeError) as ctx:
            obj.a = 9
        self.assertEqual(str(ctx.exception), "can't change argument 'a'")
        with self.assertRaises(XMLDomAttributeError) as ctx:
            del obj.b
        self.assertEqual(str(ctx.exception), "can't delete optional argument 'b'")

        with self.assertRaises(XMLDomTypeError) as ctx:
            obj.c = 'yes'
        self.assertIn("invalid type <class 'str'> for optional argument 'c'",
                      str(ctx.exception))
        obj.c = True
        self.assertIs(obj.c, True)

    def test_validate_type(self):
        attr = Option[int](default=0)
        attr.__set_name__(object, 'x')

        self.assertIsNone(validate_type(attr, 1, int))
        self.assertIsNone(validate_type(attr, None, int, none=True))
        self.assertIsNone(validate_type(attr, 'a'))
        self.assertIsNone(validate_type(attr, None, none=True))

        with self.assertRaises(XMLDomTypeError) as ctx:
            validate_type(attr, 'a', int)
        self.assertIn("must be a <class 'int'>", str(ctx.exception))

        with self.assertRaises(XMLDomTypeError) as ctx:
            validate_type(attr, 'a', int, none=True)
        self.assertIn("must be None or a <class 'int'>", str(ctx.exception))

        with self.assertRaises(XMLDomTypeError) as ctx:
            validate_type(attr, 'a', none=True)
        self.assertIn("must be None", str(ctx.exception))

    def test_implementation_option(self):
        class A:
            implementation = ImplementationOption(default=None)

        self.assertIsNone(A().implementation)
        for name in ('xml.sax.expatreader', 'xmldomfactory.sax', 'driver', '_drv2'):
            obj = A()
            obj.implementation = name
            self.assertEqual(obj.implementation, name)

        for name in ('', 'xml/sax', 'xml..sax', '.sax', '2driver', 'xml.sax.'):
            with self.assertRaises(XMLDomValueError):
                A().implementation = name

        with self.assertRaises(XMLDomTypeError):
            A().implementation = b'xml.sax.expatreader'


class TestParserConfiguration(unittest.TestCase):

    def test_defaults(self):
        config = ParserConfiguration()
        self.assertIsNone(config.schema_source)
        self.assertIsNone(config.schema_language)
        self.assertIsNone(config.implementation)
        self.assertIs(config.namespace_aware, False)
        self.assertIs(config.validating, False)

    def test_options_are_set_once(self):
        config = ParserConfiguration(namespace_aware=True)
        self.assertIs(config.namespace_aware, True)

        with self.assertRaises(XMLDomAttributeError):
            config.namespace_aware = False
        with self.assertRaises(XMLDomAttributeError):
            config.validating = True
        with self.assertRaises(XMLDomAttributeError):
            del config.implementation
        self.assertIs(config.validating, False)

    def test_schema_source_option(self):
        schema = XMLSchema10('<xs:schema xmlns:xs="http://www.w3.org/2001/XMLSchema"/>')
        sources = (
            'items.xsd',
            pathlib.Path('items.xsd'),
            io.StringIO('<xs:schema xmlns:xs="http://www.w3.org/2001/XMLSchema"/>'),
            schema,
        )
        for source in sources:
            config = ParserConfiguration(schema_source=source)
            self.assertIs(config.schema_source, source)

        for source in (10, b'items.xsd', ['items.xsd']):
            with self.assertRaises(XMLDomTypeError):
                ParserConfiguration(schema_source=source)

    def test_schema_language_option(self):
        self.assertEqual(ParserConfiguration(schema_language=XSD_NAMESPACE).schema_language,
                         XSD_NAMESPACE)
        self.assertEqual(ParserConfiguration(schema_language=XSD11_LANGUAGE).schema_language,
                         XSD11_LANGUAGE)

        with self.assertRaises(XMLDomConfigurationError) as ctx:
            ParserConfiguration(schema_language=RELAXNG_NAMESPACE)
        self.assertIn("unsupported schema language", str(ctx.exception))
        self.assertIsInstance(ctx.exception, ValueError)

        with self.assertRaises(XMLDomTypeError):
            ParserConfiguration(schema_language=1)

    def test_get_schema_class(self):
        config = ParserConfiguration(schema_source='items.xsd', schema_language=XSD_NAMESPACE)
        self.assertIs(config.get_schema_class(), XMLSchema10)

        config = ParserConfiguration(schema_source='items.xsd', schema_language=XSD11_LANGUAGE)
        self.assertIs(config.get_schema_class(), XMLSchema11)

        config = ParserConfiguration(schema_source='items.xsd')
        with self.assertRaises(XMLDomConfigurationError) as ctx:
            config.get_schema_class()
        self.assertIn("without also setting a schema language", str(ctx.exception))


if __name__ == '__main__':
    import platform
    header_template = "Test xmldomfactory settings with Python {} on {}"
    header = header_template.format(platform.python_version(), platform.platform())
    print('{0}\n{1}\n{0}'.format("*" * len(header), header))

    unittest.main()
