"""
wsdl_types.py

Check that a parsed document is a WSDL and locate its <wsdl:types> element,
creating one when the document has none.
"""

from lxml import etree

from merge_errors import InvalidWsdlError, MissingTypesError

WSDL_NS = "http://schemas.xmlsoap.org/wsdl/"
XSD_NS = "http://www.w3.org/2001/XMLSchema"
NSMAP = {"wsdl": WSDL_NS, "xsd": XSD_NS}


def verify_wsdl(tree):
    root = tree.getroot()
    if root is None or root.tag != f"{{{WSDL_NS}}}definitions":
        raise InvalidWsdlError("Does not seem to be a WSDL file!")
    return root


def create_or_find_types(tree):
    """
    Return /wsdl:definitions/wsdl:types. When it is missing a new element is
    inserted right after the last top-level wsdl:import, or as the first
    child of <definitions> when there is no import.
    """
    root = tree.getroot()
    if root is None:
        raise MissingTypesError("definitions/types cannot be found nor created!")

    types = root.find("wsdl:types", NSMAP)
    if types is not None:
        return types

    # Created in place so it picks up the document's prefix for WSDL_NS
    types = etree.SubElement(root, f"{{{WSDL_NS}}}types")
    imports = root.findall("wsdl:import", NSMAP)
    if imports:
        imports[-1].addnext(types)
    else:
        root.insert(0, types)
    return types
