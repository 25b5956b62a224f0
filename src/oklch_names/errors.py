"""Exception types raised by oklch-names."""


class OklchNamesError(Exception):
    """Base class for all oklch-names errors."""


class MalformedPalette(OklchNamesError, ValueError):
    """Raise when a palette source cannot be read or is not a list of color records."""


class EditRejected(OklchNamesError, ValueError):
    """Raise when a document refuses an edit list (bad bounds or overlapping spans)."""


class TransactionFailed(OklchNamesError):
    """Raise when the host fails to commit an edit transaction."""
