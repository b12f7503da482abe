"""
Bulk Coordinator Implementation
N independent transactions with aggregated results.
"""
from typing import Iterable, Optional, Union
from uuid import UUID

from loguru import logger

from core.config import settings
from core.exceptions import DomainException, ValidationException
from application.services.lifecycle import parse_transition_target
from domain.enums import ApplicationStatus
from domain.value_objects import Actor, BulkTransitionResult
from .interfaces import IBulkCoordinator, ItemTransition


class BulkCoordinator(IBulkCoordinator):
    """Runs an item transition per id and records success or failure code"""

    def __init__(self, item_transition: ItemTransition, max_items: Optional[int] = None):
        """
        Args:
            item_transition: single-application operation; must commit or
                roll back on its own so items never share a transaction
            max_items: upper bound on ids per call (defaults to settings)
        """
        self.item_transition = item_transition
        self.max_items = max_items or settings.BULK_MAX_APPLICATIONS

    async def bulk_transition(
        self,
        application_ids: Iterable[UUID],
        new_status: Union[ApplicationStatus, str],
        actor: Actor
    ) -> BulkTransitionResult:
        # Duplicates collapse, first occurrence keeps its position
        ids = list(dict.fromkeys(application_ids))
        if not ids:
            raise ValidationException("application_ids", "at least one application id is required")
        if len(ids) > self.max_items:
            raise ValidationException(
                "application_ids",
                f"at most {self.max_items} applications per bulk update"
            )

        status = parse_transition_target(new_status)

        logger.info(f"Bulk transition of {len(ids)} applications to {status.value} by {actor}")

        result = BulkTransitionResult()
        for application_id in ids:
            try:
                await self.item_transition(application_id, status, actor)
            except DomainException as e:
                logger.info(f"Bulk item {application_id} failed: {e.code} ({e})")
                result.record_failure(application_id, e.code)
            else:
                result.record_success(application_id)

        logger.info(
            f"Bulk transition to {status.value} done: "
            f"{len(result.succeeded)} succeeded, {len(result.failed)} failed"
        )
        return result
