#
# Copyright (c), 2026, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
from typing import Optional, Union
from xml.dom import Node
from xml.etree import ElementTree

from xmldomfactory.exceptions import XMLDomTypeError
from xmldomfactory.translation import gettext as _

__all__ = ['DOMSource', 'is_dom_node']


def is_dom_node(obj: object) -> bool:
    return hasattr(obj, 'nodeType') and hasattr(obj, 'childNodes')


class DOMSource:
    """
    A holder for a DOM tree, to be used as the source of a transformation.

    :param node: a DOM document or element node.
    :param system_id: an optional system identifier, for resolving relative \
    URIs, usually the path or the URL of the parsed XML source.
    """
    def __init__(self, node: Node, system_id: Optional[str] = None) -> None:
        if not is_dom_node(node):
            msg = _("invalid type {!r} for DOM source node, must be a DOM node")
            raise XMLDomTypeError(msg.format(type(node)))
        self.node = node
        self.system_id = system_id

    def __repr__(self) -> str:
        return '%s(node=%r, system_id=%r)' % (
            self.__class__.__name__, self.node, self.system_id
        )

    @property
    def root(self) -> Node:
        """The root element of the source."""
        if self.node.nodeType == Node.DOCUMENT_NODE:
            return self.node.documentElement  # type: ignore[attr-defined]
        return self.node

    def tostring(self, encoding: Optional[str] = None) -> Union[str, bytes]:
        """Serializes the DOM tree. Returns bytes if an encoding is provided."""
        return self.node.toxml(encoding)  # type: ignore[attr-defined, no-any-return]

    def to_etree(self) -> ElementTree.Element:
        """Returns a copy of the root element as an ElementTree element."""
        return ElementTree.XML(self.root.toxml())  # type: ignore[attr-defined]
