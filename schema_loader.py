"""
schema_loader.py

Read WSDL and XSD documents from a local path, a file: URI or an http(s) URL,
and write the merged result back to disk.
"""

import os
from io import BytesIO

import requests
from lxml import etree

from merge_errors import LoadError
from schema_paths import is_remote, local_path


def make_parser():
    # Blank text is dropped so the merged tree can be re-indented on save
    return etree.XMLParser(remove_blank_text=True)


def fetch_document(url, session):
    """Download `url` through `session` and parse the response body."""
    try:
        response = session.get(url, allow_redirects=True)
        response.raise_for_status()
    except requests.RequestException as e:
        raise LoadError(url, e) from e

    try:
        return etree.parse(BytesIO(response.content), make_parser(), base_url=response.url or url)
    except etree.XMLSyntaxError as e:
        raise LoadError(url, e) from e


def load_document(location, session=None):
    """
    Parse the document at `location` and return its ElementTree.

    Remote URLs go through the requests `session` shared by the merge;
    everything else is read from the filesystem. Missing files, transport
    failures and malformed XML all raise LoadError.
    """
    if is_remote(location):
        return fetch_document(location, session)

    path = local_path(location)
    if not os.path.isfile(path):
        raise LoadError(location, "file not found")

    try:
        return etree.parse(path, make_parser())
    except (etree.XMLSyntaxError, OSError) as e:
        raise LoadError(location, e) from e


def save_document(tree, destination):
    # Serialize fully before the destination is opened
    data = etree.tostring(tree, pretty_print=True, xml_declaration=True, encoding="UTF-8")
    with open(destination, "wb") as f:
        f.write(data)
