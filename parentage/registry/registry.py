"""Relationship registry module."""

import collections


class RelationshipRegistry:
    """
    Immutable mapping of child types to parent types.

    A relationship is named by its parent type: all child types declaring the same parent type share the same
    relationship name (it is the key of the parent pointer stored on child records).

    Parameters
    ----------
    relationships: typing.Iterable[typing.Tuple[str, str]]
        (child_type, parent_type) couples, in declaration order. Child types must be unique (checked by
        RelationshipDeclarations).
    """

    def __init__(self, relationships=()):
        self._parent_types = collections.OrderedDict(relationships)  # {child_type: parent_type, ...}
        self._child_types = collections.OrderedDict()  # {parent_type: (child_type, ...), ...}
        for child_type, parent_type in self._parent_types.items():
            self._child_types[parent_type] = self._child_types.get(parent_type, ()) + (child_type,)

    # python magic
    def __repr__(self):
        return f"<RelationshipRegistry: {len(self)} relationships>"

    def __str__(self):
        s = "RelationshipRegistry\n"
        for child_type, parent_type in self._parent_types.items():
            s += f"  {child_type} -> {parent_type}\n"
        return s

    def __len__(self):
        return len(self._parent_types)

    def __iter__(self):
        """
        Iterate through registered child types.

        Returns
        -------
        typing.Iterator[str]
        """
        return iter(self._parent_types)

    def __contains__(self, child_type):
        return child_type in self._parent_types

    def __eq__(self, other):
        if not isinstance(other, RelationshipRegistry):
            return NotImplemented
        return list(self.items()) == list(other.items())

    def items(self):
        """
        Iterate through (child_type, parent_type).

        Returns
        -------
        typing.Iterable[typing.Tuple[str, str]]
        """
        return self._parent_types.items()

    # explore
    def relationship_for(self, record_type):
        """
        Get the relationship (parent type) a record type is a child of.

        Parameters
        ----------
        record_type: str

        Returns
        -------
        str or None
            None if record_type is not a registered child type.
        """
        return self._parent_types.get(record_type)

    def is_parent_type(self, record_type):
        """
        Return whether some child type declared record_type as its parent type.

        Parameters
        ----------
        record_type: str

        Returns
        -------
        bool
        """
        return record_type in self._child_types

    def is_child_type(self, record_type):
        return record_type in self._parent_types

    def has_relationships(self, record_type):
        """
        Return whether record_type takes part in a relationship, on any side.

        Parameters
        ----------
        record_type: str

        Returns
        -------
        bool
        """
        return self.is_child_type(record_type) or self.is_parent_type(record_type)

    def child_types_of(self, parent_type):
        """
        Get child types declaring given parent type, in declaration order.

        Parameters
        ----------
        parent_type: str

        Returns
        -------
        tuple of str
        """
        return self._child_types.get(parent_type, ())
