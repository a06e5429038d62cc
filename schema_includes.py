"""
schema_includes.py

Inline <xs:include> directives: every include is replaced by the children of
the schema it points at, in their original order. Includes are not
deduplicated, each occurrence is loaded and inlined on its own.
"""

from merge_errors import UnresolvableImportError
from schema_loader import load_document
from schema_paths import reference_details
from wsdl_types import NSMAP


def process_includes(location, schema, context, expanding=None):
    """
    Replace the direct <xs:include> children of `schema`, whose relative
    references are resolved against `location`. Includes found in the
    included documents are expanded against their own location. An include
    leading back to a document already being expanded is dropped.

    Returns the number of includes removed.
    """
    expanding = (expanding or set()) | {location}
    # Snapshot before the tree is modified
    includes = list(schema.findall("xsd:include", NSMAP))
    count = 0

    for include in includes:
        _, include_location = reference_details(include, location)
        if include_location is None:
            raise UnresolvableImportError(f"<xs:include> without schemaLocation in '{location}'.")

        if include_location in expanding:
            if context.debuglevel >= 2:
                print(f"DEBUG: Dropping circular include of {include_location}")
            include.getparent().remove(include)
            count += 1
            continue

        if context.debuglevel >= 1:
            print(f"  + include file: {include_location}")

        included_root = load_document(include_location, context.session).getroot()
        process_includes(include_location, included_root, context, expanding)

        children = list(included_root)
        for child in reversed(children):
            include.addnext(child)
        include.getparent().remove(include)
        count += 1

    return count
