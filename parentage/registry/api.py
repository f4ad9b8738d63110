"""Public api for parentage registry package."""
__all__ = ["RelationshipDeclarations", "RelationshipRegistry"]

from .declarations import RelationshipDeclarations
from .registry import RelationshipRegistry
