"""
Bulk Transition Result Value Object
Per-item outcome of a bulk status update
"""
from dataclasses import dataclass, field
from typing import Dict, Set
from uuid import UUID


@dataclass
class BulkTransitionResult:
    """Succeeded ids and failed ids with their failure code

    Every requested id ends up in exactly one of the two collections.
    """

    succeeded: Set[UUID] = field(default_factory=set)
    failed: Dict[UUID, str] = field(default_factory=dict)

    def record_success(self, application_id: UUID) -> None:
        self.failed.pop(application_id, None)
        self.succeeded.add(application_id)

    def record_failure(self, application_id: UUID, reason: str) -> None:
        self.succeeded.discard(application_id)
        self.failed[application_id] = reason
