"""Status document ingestion."""

from __future__ import annotations

import logging

from pywatsoncc.ingestion.normalize import variable_id
from pywatsoncc.models.status import StatusSnapshot

_logger = logging.getLogger(__name__)


def build_variable_patch(namespace: str, snapshot: StatusSnapshot) -> dict[str, str]:
    """Map every status field to its namespaced variable identifier.

    One entry per field in the snapshot; nothing else is produced, so
    applying the patch leaves unrelated variables untouched.  Keys that
    sanitize to the same identifier collapse into one entry; the field
    that comes last in the document wins.
    """
    patch: dict[str, str] = {}
    sources: dict[str, str] = {}
    for key, value in snapshot.values.items():
        target = variable_id(namespace, key)
        previous = sources.get(target)
        if previous is not None:
            _logger.debug("Status fields %r and %r both map to %s; keeping %r", previous, key, target, key)
        sources[target] = key
        patch[target] = value
    return patch
