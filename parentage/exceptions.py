"""Parentage public exceptions."""

__all__ = ["RecordDoesNotExistError", "MultipleRecordsReturnedError", "RecordValidationError",
           "RelationshipDeclarationError"]


class RecordDoesNotExistError(Exception):
    """Record does not exist exception."""

    pass


class MultipleRecordsReturnedError(Exception):
    """Exception when more than one record is returned and only one was expected."""

    pass


class RecordValidationError(Exception):
    """Exception when a record can't be stored (duplicate id, missing type, ...)."""

    pass


class RelationshipDeclarationError(Exception):
    """Exception when relationship declarations are inconsistent or registered too late."""

    pass
