"""
Relationship declarations are contributed by plugins, and resolved once into a relationship registry.

Workflow
--------
1. plugins contribute: declarations.add(child_type, parent_type) or @declarations.register
2. host resolves (at startup): registry = declarations.resolve()
3. registry is given to the relations manager, later resolve calls return the same registry
"""

import logging

from .registry import RelationshipRegistry
from ..exceptions import RelationshipDeclarationError

logger = logging.getLogger(__name__)


class RelationshipDeclarations:
    """
    Extensible source of relationship declarations.

    Parameters
    ----------
    relationships: dict or typing.Iterable[typing.Tuple[str, str]] or None
        initial {child_type: parent_type, ...} declarations, if any
    """

    def __init__(self, relationships=None):
        self._contributors = []
        self._registry = None  # resolved lazily, once

        if relationships is not None:
            relationships = dict(relationships)
            self.register(lambda: relationships.items())

    def __repr__(self):
        state = "resolved" if self.is_resolved() else "not resolved"
        return f"<RelationshipDeclarations: {len(self._contributors)} contributors, {state}>"

    def _check_not_resolved(self):
        if self._registry is not None:
            raise RelationshipDeclarationError(
                "relationships were already resolved, can't register new declarations")

    def register(self, contributor):
        """
        Register a contributor.

        Can be used as a decorator.

        Parameters
        ----------
        contributor: typing.Callable
            called without argument at resolution, must return an iterable of (child_type, parent_type)

        Returns
        -------
        contributor

        Examples
        --------
        @declarations.register
        def chapters():
            return [("chapter", "book")]
        """
        self._check_not_resolved()
        self._contributors.append(contributor)
        return contributor

    def add(self, child_type, parent_type):
        """
        Declare that child_type records belong to a parent_type record.

        Parameters
        ----------
        child_type: str
        parent_type: str
        """
        self.register(lambda: ((child_type, parent_type),))

    def is_resolved(self):
        return self._registry is not None

    def resolve(self):
        """
        Collect all contributions into a registry. Only the first call collects, next calls return the same registry.

        Returns
        -------
        RelationshipRegistry

        Raises
        ------
        RelationshipDeclarationError
            if a child type is declared with two different parent types
        """
        if self._registry is not None:
            return self._registry

        relationships = {}
        for contributor in self._contributors:
            for child_type, parent_type in contributor():
                current_parent_type = relationships.get(child_type)
                if current_parent_type is None:
                    relationships[child_type] = parent_type
                elif current_parent_type != parent_type:
                    raise RelationshipDeclarationError(
                        f"child type '{child_type}' can't belong to both '{current_parent_type}' "
                        f"and '{parent_type}'"
                    )

        self._registry = RelationshipRegistry(relationships.items())
        logger.debug(f"resolved {len(self._registry)} relationships")
        return self._registry
