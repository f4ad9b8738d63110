"""Parentage configuration."""


class CONF:
    """
    Parentage configuration class.

    Attributes
    ----------
    parent_pointer_prefix: str
        metadata key prefix of the pointer stored on a child record
    children_pointer_prefix: str
        metadata key prefix of the pointer stored on a parent record
    key_separator: str
    display_field: str
        record field used as display label (sorting, parent choices, children lists)
    encoding: str
        default encoding used to read and write json files
    """

    parent_pointer_prefix = "parent-pointer"
    children_pointer_prefix = "children-pointer"
    key_separator = ":"
    display_field = "title"
    encoding = "utf-8"
