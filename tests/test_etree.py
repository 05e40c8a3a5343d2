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
import unittest
import xml.etree.ElementTree as ElementTree

import lxml.etree as lxml_etree

from xmlvalue.exceptions import XMLParseError
from xmlvalue.etree import PARSER_OPTIONS, get_parser, parse_xml, copy_tree, \
    is_etree_element, is_lxml_etree_element, is_etree_document, \
    is_lxml_etree_document, etree_deep_equal, etree_deep_hash, etree_tostring


XML_WITH_NAMESPACES = '<pfa:root xmlns:pfa="http://xpath.test/nsa">\n' \
                      '  <pfb:elem xmlns:pfb="http://xpath.test/nsb"/>\n' \
                      '</pfa:root>'


class TestEtreeHelpers(unittest.TestCase):

    def test_shared_parser(self):
        parser = get_parser()
        self.assertIsInstance(parser, lxml_etree.XMLParser)
        self.assertIs(get_parser(), parser)
        self.assertIs(get_parser('utf-8'), get_parser('utf-8'))
        self.assertIsNot(get_parser('utf-8'), parser)
        self.assertFalse(PARSER_OPTIONS['recover'])

        with self.assertRaises(TypeError):
            PARSER_OPTIONS['recover'] = True  # type: ignore[index]

    def test_parse_xml(self):
        tree = parse_xml('<root><a>1</a></root>')
        self.assertTrue(is_lxml_etree_document(tree))
        self.assertEqual(tree.getroot().tag, 'root')

        tree = parse_xml(b'<root><a>1</a></root>')
        self.assertEqual(tree.getroot()[0].text, '1')

        tree = parse_xml(XML_WITH_NAMESPACES)
        self.assertEqual(tree.getroot().tag, '{http://xpath.test/nsa}root')

    def test_parse_xml_with_encoding_declaration(self):
        tree = parse_xml('<?xml version="1.0" encoding="UTF-8"?>\n<root>è</root>')
        self.assertEqual(tree.getroot().text, 'è')

        tree = parse_xml('<?xml version="1.0" encoding="ISO-8859-1"?>\n<root>è</root>')
        self.assertEqual(tree.getroot().text, 'è')

        tree = parse_xml('<?xml version="1.0" encoding="ISO-8859-1"?>\n<root>è</root>'
                         .encode('iso-8859-1'))
        self.assertEqual(tree.getroot().text, 'è')

    def test_parse_xml_keeps_cdata(self):
        tree = parse_xml('<root><![CDATA[<a> & <b>]]></root>')
        self.assertEqual(tree.getroot().text, '<a> & <b>')
        self.assertIn(b'<![CDATA[<a> & <b>]]>', lxml_etree.tostring(tree))

    def test_parse_not_well_formed_xml(self):
        with self.assertRaises(XMLParseError) as ctx:
            parse_xml('<bad><unclosed>')
        self.assertEqual(ctx.exception.code, 'err:FODC0006')
        self.assertIsInstance(ctx.exception.__cause__, lxml_etree.XMLSyntaxError)

        self.assertRaises(XMLParseError, parse_xml, '')
        self.assertRaises(XMLParseError, parse_xml, b'')
        self.assertRaises(XMLParseError, parse_xml, 'not xml')
        self.assertRaises(XMLParseError, parse_xml, '<a></b>')
        self.assertRaises(XMLParseError, parse_xml, '<a/><b/>')
        self.assertRaises(TypeError, parse_xml, None)

    def test_entities_are_not_expanded(self):
        xml_data = '<!DOCTYPE root [<!ENTITY e "expanded">]><root>&e;</root>'
        tree = parse_xml(xml_data)
        self.assertIn(b'&e;', lxml_etree.tostring(tree.getroot()))

    def test_copy_tree(self):
        root = lxml_etree.XML('<root><a>1</a></root>')
        tree = copy_tree(root)
        self.assertTrue(is_lxml_etree_document(tree))
        self.assertIsNot(tree.getroot(), root)
        root[0].text = '2'
        self.assertEqual(tree.getroot()[0].text, '1')

        tree = copy_tree(root.getroottree())
        self.assertEqual(tree.getroot()[0].text, '2')

        root = ElementTree.XML('<root><a>1</a></root>')
        tree = copy_tree(root)
        self.assertTrue(is_lxml_etree_document(tree))
        self.assertEqual(tree.getroot()[0].text, '1')

        tree = copy_tree(ElementTree.ElementTree(root))
        self.assertEqual(tree.getroot()[0].text, '1')

        self.assertRaises(XMLParseError, copy_tree, ElementTree.ElementTree())
        self.assertRaises(TypeError, copy_tree, '<root/>')

    def test_type_checks(self):
        lxml_root = lxml_etree.XML('<root/>')
        root = ElementTree.XML('<root/>')

        self.assertTrue(is_etree_element(root))
        self.assertTrue(is_etree_element(lxml_root))
        self.assertFalse(is_lxml_etree_element(root))
        self.assertTrue(is_lxml_etree_element(lxml_root))
        self.assertFalse(is_etree_element('<root/>'))

        self.assertTrue(is_etree_document(ElementTree.ElementTree(root)))
        self.assertTrue(is_etree_document(lxml_root.getroottree()))
        self.assertFalse(is_lxml_etree_document(ElementTree.ElementTree(root)))
        self.assertTrue(is_lxml_etree_document(lxml_root.getroottree()))
        self.assertFalse(is_etree_document(root))

    def test_deep_equal(self):
        e1 = lxml_etree.XML('<root a="1"><b>text</b>tail<!-- comment --><?pi data?></root>')
        e2 = lxml_etree.XML('<root a="1">\n  <b> text </b>\n  tail <!-- comment -->'
                            '<?pi data?>\n</root>')
        self.assertTrue(etree_deep_equal(e1, e2))
        self.assertEqual(etree_deep_hash(e1), etree_deep_hash(e2))

        e2 = lxml_etree.XML('<root a="2"><b>text</b>tail<!-- comment --><?pi data?></root>')
        self.assertFalse(etree_deep_equal(e1, e2))

        e2 = lxml_etree.XML('<root a="1"><b>text</b>other<!-- comment --><?pi data?></root>')
        self.assertFalse(etree_deep_equal(e1, e2))

        e2 = lxml_etree.XML('<root a="1"><b>text</b>tail<!-- comment --><?pj data?></root>')
        self.assertFalse(etree_deep_equal(e1, e2))

        e2 = lxml_etree.XML('<root a="1"><b>text</b>tail<!-- comment --></root>')
        self.assertFalse(etree_deep_equal(e1, e2))

        e2 = lxml_etree.XML('<root a="1"><c>text</c>tail<!-- comment --><?pi data?></root>')
        self.assertFalse(etree_deep_equal(e1, e2))

    def test_deep_equal_ignores_tail_of_compared_elements(self):
        root = lxml_etree.XML('<root><a>1</a>tail</root>')
        other = lxml_etree.XML('<a>1</a>')
        self.assertTrue(etree_deep_equal(root[0], other))
        self.assertFalse(etree_deep_equal(root[0], other, with_tail=True))
        self.assertEqual(etree_deep_hash(root[0]), etree_deep_hash(other))

    def test_deep_equal_with_namespaces(self):
        e1 = lxml_etree.XML('<a:root xmlns:a="urn:a"/>')
        e2 = lxml_etree.XML('<b:root xmlns:b="urn:a"/>')
        e3 = lxml_etree.XML('<a:root xmlns:a="urn:b"/>')
        self.assertTrue(etree_deep_equal(e1, e2))
        self.assertFalse(etree_deep_equal(e1, e3))

    def test_tostring(self):
        root = lxml_etree.XML('<root><a>1</a><b/></root>')
        self.assertEqual(etree_tostring(root), '<root>\n  <a>1</a>\n  <b/>\n</root>')
        self.assertEqual(etree_tostring(root, pretty_print=False), '<root><a>1</a><b/></root>')
        self.assertEqual(etree_tostring(root[0]), '<a>1</a>')
        self.assertEqual(etree_tostring(root[0], xml_declaration=True),
                         "<?xml version='1.0' encoding='UTF-8'?>\n<a>1</a>")

        self.assertEqual(etree_tostring(root.getroottree(), pretty_print=False),
                         "<?xml version='1.0' encoding='UTF-8'?>\n<root><a>1</a><b/></root>")
        self.assertEqual(etree_tostring(root.getroottree(), False, False),
                         '<root><a>1</a><b/></root>')

        root = lxml_etree.XML('<root>è</root>')
        self.assertEqual(etree_tostring(root.getroottree(), pretty_print=False),
                         "<?xml version='1.0' encoding='UTF-8'?>\n<root>è</root>")
        self.assertRaises(TypeError, etree_tostring, '<root/>')


if __name__ == '__main__':
    unittest.main()
