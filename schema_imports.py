"""
schema_imports.py

Recursively merge the schemas reachable through <xs:import>.

Every imported schema is loaded once per (namespace, location) pair, copied
into the WSDL, stripped of its external references and collected in a
registry whose insertion order (depth-first, left to right) becomes the
order of the <xs:schema> elements appended to <wsdl:types>.
"""

import copy
from collections import OrderedDict

from merge_errors import UnresolvableImportError
from schema_includes import process_includes
from schema_loader import load_document
from schema_paths import reference_details
from wsdl_types import NSMAP


class MergeContext:
    """State shared by one merge: the schema registry and output settings."""

    def __init__(self, debuglevel=0, session=None):
        self.schemas = OrderedDict()
        self.debuglevel = debuglevel
        self.session = session


def registry_key(namespace, location):
    return f"{namespace or ''}{{{location}}}"


def rewrite_imports(schema, depth):
    """
    Drop the external part of the <xs:import> children of `schema`.

    At depth 0 (a schema that was already inside the WSDL) the imports are
    removed altogether. Deeper schemas keep the import, and with it the
    namespace, but lose the schemaLocation.
    """
    for imp in list(schema.findall("xsd:import", NSMAP)):
        if depth == 0:
            schema.remove(imp)
        elif "schemaLocation" in imp.attrib:
            del imp.attrib["schemaLocation"]


def process_schema(location, schema, context, depth=0):
    """
    Merge every schema imported by `schema`, whose relative references are
    resolved against `location`, into `context.schemas`.

    `depth` is the depth of `schema` itself: 0 for a schema inside the WSDL,
    one more for each import followed to reach it. Every merged copy is
    rewritten for its own depth, `depth + 1`.

    Returns False when `schema` has no <xs:import> children.
    """
    imports = list(schema.findall("xsd:import", NSMAP))
    if not imports:
        return False

    child_depth = depth + 1
    for imp in imports:
        namespace, import_location = reference_details(imp, location)
        key = registry_key(namespace, import_location)
        if key in context.schemas:
            if context.debuglevel >= 2:
                print(f"DEBUG: Skipping already merged schema {key}")
            continue

        if import_location is None:
            raise UnresolvableImportError(
                f"<xs:import namespace=\"{namespace}\"> in '{location}' has no schemaLocation."
            )

        if context.debuglevel >= 1:
            print(f"Importing namespace: {namespace}")
            print(f"  from file: {import_location}")

        schema_document = load_document(import_location, context.session)
        new_schema = copy.deepcopy(schema_document.getroot())

        rewrite_imports(new_schema, child_depth)
        process_includes(import_location, new_schema, context)

        context.schemas[key] = new_schema

        process_schema(import_location, schema_document.getroot(), context, child_depth)

    return True


def process_imports(location, types, context):
    """
    Resolve the imports and then the includes of every <xs:schema> inside
    `types`, then append the merged schemas to it in discovery order.
    Imports brought in by an include are left as they are.
    """
    for schema in list(types.findall("xsd:schema", NSMAP)):
        if process_schema(location, schema, context, 0):
            rewrite_imports(schema, 0)
        process_includes(location, schema, context)

    for schema in context.schemas.values():
        types.append(schema)

    return len(context.schemas)
