"""Domain errors that Protean does not model itself.

Input problems are reported with ``protean.exceptions.ValidationError`` and
missing records with ``protean.exceptions.ObjectNotFoundError``; the classes
below cover the remaining failure kinds of the printing domain.
"""


class PrintingError(Exception):
    """Base class carrying a ``{field: [messages]}`` payload like Protean errors."""

    def __init__(self, messages: dict):
        super().__init__(messages)
        self.messages = messages


class InvalidStateError(PrintingError):
    """The aggregate is in a state that forbids the requested change."""


class IntegrityError(PrintingError):
    """A related record the operation depends on could not be resolved."""


class DependencyFailure(PrintingError):
    """A downstream collaborator (store, mail transport) failed or timed out."""
