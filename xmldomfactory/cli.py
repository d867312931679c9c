#
# Copyright (c), 2026, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
# mypy: ignore-errors
"""Command Line Interface"""
import sys
import os
import argparse
import logging

from xmldomfactory.exceptions import XMLDomException
from xmldomfactory.factory import DocumentBuilderFactory
from xmldomfactory.handlers import CollectingErrorHandler
from xmldomfactory.names import XSD_NAMESPACE, XSD11_LANGUAGE, DEFAULT_SAX_DRIVER
from xmldomfactory.logger import set_logging_level

PROGRAM_NAME = os.path.basename(sys.argv[0])

SCHEMA_LANGUAGES_MAP = {
    '1.0': XSD_NAMESPACE,
    '1.1': XSD11_LANGUAGE,
}


def xsd_version_number(value):
    if value not in SCHEMA_LANGUAGES_MAP:
        raise argparse.ArgumentTypeError("%r is not a valid XSD version" % value)
    return value


def get_loglevel(verbosity):
    if verbosity <= 0:
        return logging.ERROR
    elif verbosity == 1:
        return logging.WARNING
    elif verbosity == 2:
        return logging.INFO
    else:
        return logging.DEBUG


def parse():
    parser = argparse.ArgumentParser(prog=PROGRAM_NAME, add_help=True,
                                     description="parse a set of XML files.")
    parser.usage = "%(prog)s [OPTION]... [FILE]...\n" \
                   "Try '%(prog)s --help' for more information."
    parser.add_argument('-v', dest='verbosity', action='count', default=0,
                        help="increase output verbosity.")
    parser.add_argument('--schema', type=str, metavar='PATH',
                        help="path or URL to an XSD schema, enables validation.")
    parser.add_argument('--version', type=xsd_version_number, default='1.0',
                        help="XSD schema validator to use (default is 1.0).")
    parser.add_argument('--implementation', type=str, metavar='MODULE',
                        help="SAX driver module to use (default is the SAX driver "
                             "of the system without a schema or %r with a schema)."
                             % DEFAULT_SAX_DRIVER)
    parser.add_argument('--no-namespaces', dest='namespace_aware', action='store_false',
                        default=True, help="parse without namespace awareness.")
    parser.add_argument('files', metavar='[XML_FILE ...]', nargs='+',
                        help="XML files to be parsed.")

    args = parser.parse_args()
    set_logging_level(get_loglevel(args.verbosity))

    if args.schema is None:
        factory_kwargs = {}
        implementation = args.implementation
    else:
        factory_kwargs = {
            'schema_source': args.schema,
            'schema_language': SCHEMA_LANGUAGES_MAP[args.version],
            'validating': True,
        }
        implementation = args.implementation or DEFAULT_SAX_DRIVER

    try:
        builder = DocumentBuilderFactory(
            implementation=implementation,
            namespace_aware=args.namespace_aware,
            **factory_kwargs
        ).new_document_builder()
    except XMLDomException as err:
        sys.stderr.write(f"{err}\n")
        sys.exit(1)

    error_handler = CollectingErrorHandler()
    builder.set_error_handler(error_handler)

    tot_errors = 0
    for filepath in args.files:
        error_handler.clear()
        try:
            builder.parse(filepath)
        except XMLDomException as err:
            tot_errors += 1
            sys.stderr.write(f"{err}\n")
            continue
        else:
            if not error_handler.errors:
                status = 'valid' if builder.validating else 'well-formed'
                sys.stdout.write(f"{filepath} is {status}\n")
            else:
                tot_errors += len(error_handler.errors)
                sys.stderr.write(f"{filepath} is not valid\n")
                if args.verbosity > 0:
                    for error in error_handler.errors:
                        sys.stderr.write(f"{error}\n")

    sys.exit(tot_errors)
