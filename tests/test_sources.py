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
"""Tests concerning DOM sources"""
import unittest
from xml.dom import minidom
from xml.etree import ElementTree

from xmldomfactory import DOMSource, XMLDomTypeError
from xmldomfactory.sources import is_dom_node


class TestDOMSource(unittest.TestCase):

    def setUp(self):
        self.document = minidom.parseString('<root a="1"><child>text</child></root>')

    def test_is_dom_node(self):
        self.assertTrue(is_dom_node(self.document))
        self.assertTrue(is_dom_node(self.document.documentElement))
        self.assertFalse(is_dom_node(ElementTree.XML('<root/>')))
        self.assertFalse(is_dom_node('<root/>'))

    def test_initialization(self):
        source = DOMSource(self.document)
        self.assertIs(source.node, self.document)
        self.assertIsNone(source.system_id)
        self.assertTrue(repr(source).startswith('DOMSource(node=<xml.dom.minidom.Document'))
        self.assertTrue(repr(source).endswith('system_id=None)'))

        source = DOMSource(self.document.documentElement, 'file:///root.xml')
        self.assertEqual(source.system_id, 'file:///root.xml')

        with self.assertRaises(XMLDomTypeError):
            DOMSource('<root/>')
        with self.assertRaises(XMLDomTypeError):
            DOMSource(ElementTree.XML('<root/>'))

    def test_root(self):
        root = self.document.documentElement
        self.assertIs(DOMSource(self.document).root, root)
        self.assertIs(DOMSource(root).root, root)

        child = root.firstChild
        self.assertIs(DOMSource(child).root, child)

    def test_tostring(self):
        source = DOMSource(self.document)
        self.assertEqual(source.tostring(),
                         '<?xml version="1.0" ?><root a="1"><child>text</child></root>')
        self.assertEqual(source.tostring('utf-8'),
                         b'<?xml version="1.0" encoding="utf-8"?>'
                         b'<root a="1"><child>text</child></root>')

        source = DOMSource(self.document.documentElement)
        self.assertEqual(source.tostring(), '<root a="1"><child>text</child></root>')

    def test_to_etree(self):
        elem = DOMSource(self.document).to_etree()
        self.assertIsInstance(elem, ElementTree.Element)
        self.assertEqual(elem.tag, 'root')
        self.assertEqual(elem.attrib, {'a': '1'})
        self.assertEqual(elem[0].text, 'text')

        document = minidom.parseString('<a:root xmlns:a="http://example.com/ns"/>')
        elem = DOMSource(document).to_etree()
        self.assertEqual(elem.tag, '{http://example.com/ns}root')


if __name__ == '__main__':
    import platform
    header_template = "Test xmldomfactory DOM sources with Python {} on {}"
    header = header_template.format(platform.python_version(), platform.platform())
    print('{0}\n{1}\n{0}'.format("*" * len(header), header))

    unittest.main()
