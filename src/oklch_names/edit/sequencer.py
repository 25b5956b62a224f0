"""Apply a planned op list to a document in one atomic commit."""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

from oklch_names.core.document import TextDocument
from oklch_names.edit.ops import EditOp, order_ops
from oklch_names.errors import EditRejected, TransactionFailed

log = logging.getLogger(__name__)


@runtime_checkable
class EditHost(Protocol):
    """
    Whatever owns the buffer and can commit a multi-edit transaction.

    ``commit`` must be all-or-nothing: it either applies every op and
    returns True, or leaves the document unchanged (returning False or
    raising EditRejected).
    """

    def commit(self, document: TextDocument, ops: list[EditOp]) -> bool:
        ...


class DocumentHost:
    """Commits straight into an in-memory TextDocument."""

    def commit(self, document: TextDocument, ops: list[EditOp]) -> bool:
        document.apply_edits(ops)
        return True


class EditSequencer:
    """
    Operation-agnostic applier.

    Orders ops back to front (descending start) and hands them to the host
    as a single transaction. Disjointness is guaranteed by how the planner
    builds ops; the sequencer does no overlap resolution of its own.
    """

    def __init__(self, host: EditHost | None = None):
        self.host = host or DocumentHost()

    def apply(self, document: TextDocument, ops: list[EditOp] | tuple[EditOp, ...]) -> bool:
        """
        Commit ops to document.

        Returns:
            True if edits were committed, False if there was nothing to apply

        Raises:
            TransactionFailed: if the host rejected the transaction
        """
        if not ops:
            return False

        ordered = order_ops(list(ops))
        try:
            committed = self.host.commit(document, ordered)
        except EditRejected as e:
            log.error("Edit transaction rejected: %s", e)
            raise TransactionFailed(f"Edit transaction rejected: {e}") from e

        if not committed:
            log.error("Host refused %d edits", len(ordered))
            raise TransactionFailed(f"Host refused to apply {len(ordered)} edits")

        log.debug("Committed %d edits", len(ordered))
        return True
