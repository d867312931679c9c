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
SAX content and lexical handler for building minidom trees.
"""
from typing import Any, Optional
from xml.dom import Node, minidom, pulldom

__all__ = ['MinidomFactory', 'DOMTreeBuilder']


class MinidomFactory:
    """
    A document factory for minidom documents. Creates documents with a prefixed
    root element also without a namespace, as required by a not namespace-aware
    parsing where names are not qualified.
    """
    implementation = minidom.getDOMImplementation()

    def createDocument(self, namespaceURI: Optional[str],
                       qualifiedName: Optional[str],
                       doctype: Any) -> minidom.Document:
        if namespaceURI is not None or not qualifiedName or ':' not in qualifiedName:
            return self.implementation.createDocument(  # type: ignore[no-any-return]
                namespaceURI, qualifiedName, doctype
            )

        document = self.implementation.createDocument(None, None, doctype)
        document.appendChild(document.createElement(qualifiedName))
        return document  # type: ignore[no-any-return]


class DOMTreeBuilder(pulldom.SAX2DOM):
    """
    A SAX content and lexical handler that builds a complete minidom tree.
    Comments, processing instructions and the document type declaration
    that precede the root element are put in the document prolog. Comments
    and processing instructions of the DTD internal subset are skipped.
    """
    def __init__(self) -> None:
        super().__init__(documentFactory=MinidomFactory())
        self.prolog: list[tuple[int, tuple[Any, ...]]] = []
        self.in_dtd = False

    def processingInstruction(self, target: str, data: str) -> None:
        if self.in_dtd:
            return
        elif self.document is None:
            self.prolog.append((Node.PROCESSING_INSTRUCTION_NODE, (target, data)))
        else:
            super().processingInstruction(target, data)

    def comment(self, s: str) -> None:
        if self.in_dtd:
            return
        elif self.document is None:
            self.prolog.append((Node.COMMENT_NODE, (s,)))
        else:
            super().comment(s)

    ###
    # Lexical handler interface
    def startDTD(self, name: str, public_id: Optional[str],
                 system_id: Optional[str]) -> None:
        self.in_dtd = True
        if self.document is None:
            self.prolog.append((Node.DOCUMENT_TYPE_NODE, (name, public_id, system_id)))

    def endDTD(self) -> None:
        self.in_dtd = False

    def startCDATA(self) -> None:
        pass

    def endCDATA(self) -> None:
        pass

    def buildDocument(self, uri: Optional[str], tagname: str) -> Any:
        root = super().buildDocument(uri, tagname)
        document = self.document

        for node_type, args in self.prolog:
            if node_type == Node.PROCESSING_INSTRUCTION_NODE:
                node = document.createProcessingInstruction(*args)
            elif node_type == Node.COMMENT_NODE:
                node = document.createComment(*args)
            else:
                node = MinidomFactory.implementation.createDocumentType(*args)
                node.ownerDocument = document
                document.doctype = node
            document.insertBefore(node, root)

        self.prolog.clear()
        return root
