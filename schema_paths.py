"""
schema_paths.py

Turn the schemaLocation of an <xs:import> or <xs:include> into the location
the loader should read, relative to the document that holds the reference.
Local paths are made absolute and stripped of "." and ".." segments so the
same file always yields the same registry key.
"""

import os
import re
from urllib.parse import urljoin, urlparse
from urllib.request import url2pathname

from merge_errors import UnresolvableImportError

REMOTE_SCHEMES = ("http", "https")


def is_absolute_uri(location):
    """
    True for a well-formed absolute URI such as "http://host/a.xsd" or
    "file:///tmp/a.xsd". Single-letter schemes are Windows drive letters
    ("C:\\schemas\\a.xsd") and count as paths.
    """
    if not location or any(ch.isspace() for ch in location):
        return False
    parsed = urlparse(location)
    if len(parsed.scheme) < 2:
        return False
    return bool(parsed.netloc or parsed.path)


def is_remote(location):
    return is_absolute_uri(location) and urlparse(location).scheme.lower() in REMOTE_SCHEMES


def local_path(location):
    """Filesystem path for a "file:" URI, or the location itself."""
    parsed = urlparse(location)
    if is_absolute_uri(location) and parsed.scheme.lower() == "file":
        return url2pathname(parsed.path)
    return location


def canonical_path(path):
    """Absolute path with "." and ".." resolved."""
    return os.path.abspath(os.path.normpath(path))


def resolve_location(location, referencing_location):
    """
    Resolve `location` as seen from the document at `referencing_location`.

    Absolute URIs come back unchanged. A relative reference made from a
    remote document is joined onto that document's URL. Anything else must
    name an existing file next to the referencing document.
    """
    if is_absolute_uri(location):
        return location

    if is_remote(referencing_location):
        # WCF services like to publish backslashes in relative references
        return urljoin(referencing_location, re.sub(r"\\|%5[cC]", "/", location))

    base_path = os.path.dirname(local_path(referencing_location))
    candidate = os.path.join(base_path, location)
    if not os.path.isfile(candidate):
        raise UnresolvableImportError(
            f"Schema '{location}' referenced from '{referencing_location}' not found at '{candidate}'."
        )
    return canonical_path(candidate)


def reference_details(element, referencing_location):
    """
    Return (namespace, location) for an <xs:import> or <xs:include> element.
    Either may be None when the attribute is absent.
    """
    namespace = element.get("namespace")
    schema_location = element.get("schemaLocation")
    if schema_location is None:
        return namespace, None
    return namespace, resolve_location(schema_location.strip(), referencing_location)
