"""Exception types raised at the public call boundary."""

from __future__ import annotations


class InvalidInputError(ValueError):
    """Raised when an input cannot be analyzed.

    Covers non-numeric samples, empty or all-missing samples, confidence
    levels outside ``(0, 1)``, too few observations, non-positive sample
    sizes, and unknown option tags.

    Note:
        Subclasses ``ValueError`` so numeric callers that already guard with
        ``except ValueError`` keep working.
    """


InvalidInput = InvalidInputError
