#!/usr/bin/env python3
"""
wsdl_merge.py

Merge a WSDL file and all the XSD schemas it references (through xs:import
and xs:include, recursively) into a single self-contained WSDL file.

Usage:
    python wsdl_merge.py service.wsdl [service_merged.wsdl] [-v | -d]

Run `python wsdl_merge.py --help` for details.
"""

import argparse
import os
import sys

import requests

from merge_errors import MergeError
from schema_imports import MergeContext, process_imports
from schema_loader import load_document, save_document
from schema_paths import is_absolute_uri
from wsdl_types import create_or_find_types, verify_wsdl

VERSION = "1.3"


def merge(source, destination, debuglevel=0, session=None):
    """
    Merge the WSDL at `source` (path or absolute URI) with every schema it
    references and write the result to `destination`.

    Any failure raises a MergeError before anything is written.

    Args:
        source (str): Path or URI of the WSDL file.
        destination (str): Path of the merged WSDL file.
        debuglevel (int): 0 quiet, 1 progress, 2 debug.
        session (requests.Session): Session for remote documents. One is
            opened for the whole merge and closed afterwards when omitted.

    Returns:
        int: The number of schemas merged into <wsdl:types>.
    """
    if session is None:
        with requests.Session() as session:
            return merge(source, destination, debuglevel, session)

    wsdl = load_document(source, session)
    verify_wsdl(wsdl)
    types = create_or_find_types(wsdl)

    context = MergeContext(debuglevel, session)
    merged = process_imports(source, types, context)
    if debuglevel >= 2:
        print(f"DEBUG: {merged} schema(s) appended to <wsdl:types>")

    if debuglevel >= 1:
        print("Saving merged WSDL")
    save_document(wsdl, destination)
    return merged


def default_destination(source):
    base, ext = os.path.splitext(source)
    return f"{base}_merged{ext}"


def build_parser():
    parser = argparse.ArgumentParser(
        description=(
            "Loads the given WSDL file, recursively scans it for schema references "
            "and merges them into the original WSDL document. The result is written to disk."
        )
    )
    parser.add_argument("wsdlfile", help="Path to the WSDL file. Can be a URL.")
    parser.add_argument(
        "outputfile",
        nargs="?",
        help="Path to the merged WSDL file. Required if the input is a URL, "
        "defaults to <wsdlfile>_merged otherwise.",
    )

    # Debug flags
    group = parser.add_mutually_exclusive_group()
    group.add_argument("-v", "--verbose", action="store_true", help="Enable verbose mode (debuglevel=1).")
    group.add_argument("-d", "--debug", action="store_true", help="Enable debug mode (debuglevel=2).")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    # Set debug level
    debuglevel = 0
    if args.verbose:
        debuglevel = 1
    elif args.debug:
        debuglevel = 2

    print(f"WSDLMerge {VERSION}")

    source = args.wsdlfile
    destination = args.outputfile
    if is_absolute_uri(source):
        if destination is None:
            parser.print_usage(sys.stderr)
            print("Error: an output file is required when the WSDL is a URL.", file=sys.stderr)
            return 2
    else:
        if not os.path.isfile(source):
            print("Error: .wsdl file does not exist!", file=sys.stderr)
            return 1
        source = os.path.abspath(source)
        if destination is None:
            destination = default_destination(source)

    print(f"Processing: {source}")
    print(f"Will create: {destination}")

    try:
        merge(source, destination, debuglevel)
    except MergeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if debuglevel >= 1:
        print(f"INFO: Merged WSDL saved to: {destination}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
