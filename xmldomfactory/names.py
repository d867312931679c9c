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
This module contains the names of the schema languages and of the SAX
drivers recognized by the package.
"""

###
# Schema languages
XSD_NAMESPACE = 'http://www.w3.org/2001/XMLSchema'
"URI of the XML Schema Definition namespace, identifies XSD 1.0 schemas"

XSD11_LANGUAGE = 'http://www.w3.org/XML/XMLSchema/v1.1'
"URI identifying XSD 1.1 schemas"

RELAXNG_NAMESPACE = 'http://relaxng.org/ns/structure/1.0'
"URI of RELAX NG schemas, recognized but not supported"

###
# SAX drivers
EXPAT_SAX_DRIVER = 'xml.sax.expatreader'
"The SAX driver of the standard library, based on pyexpat"

SAFE_SAX_DRIVER = 'xmldomfactory.sax'
"A defused expat SAX driver that forbids entity declarations"

DEFAULT_SAX_DRIVER = SAFE_SAX_DRIVER
"The SAX driver used by default by schema-aware document builders"
