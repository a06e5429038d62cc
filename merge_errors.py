"""
merge_errors.py

Errors raised while merging a WSDL and its schemas. Every one of them aborts
the merge; nothing is written when one escapes merge().
"""


class MergeError(Exception):
    """Base class for all merge failures."""


class LoadError(MergeError):
    """A document could not be read, fetched or parsed."""

    def __init__(self, location, reason):
        super().__init__(f"Could not load '{location}': {reason}")
        self.location = location
        self.reason = reason


class InvalidWsdlError(MergeError):
    """The root element is not a WSDL <definitions>."""


class MissingTypesError(MergeError):
    """The <types> element is missing and cannot be created."""


class UnresolvableImportError(MergeError):
    """An import or include has no usable schemaLocation."""
