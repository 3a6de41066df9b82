"""
Repository for processed webhook events (redelivery dedupe).
"""

from typing import Optional

from google.api_core.exceptions import AlreadyExists, GoogleAPIError
from google.cloud.firestore import SERVER_TIMESTAMP, AsyncClient
from pydantic import BaseModel

from common.core.exceptions import StorageError
from common.core.otel_axiom_exporter import trace_span
from common.repositories.base import BaseRepository


class ProcessedWebhookEvent(BaseModel):
    id: str
    event: Optional[str] = None


class WebhookEventRepository(BaseRepository[ProcessedWebhookEvent]):
    """One document per provider event id that has been accepted."""

    def __init__(
        self, client: AsyncClient, collection_name: str = "razorpayWebhookEvents"
    ):
        super().__init__(client, collection_name, ProcessedWebhookEvent)

    @trace_span
    async def record(self, event_id: str, event_type: Optional[str]) -> bool:
        """
        Record an event id once it has been processed.

        Returns:
            True if the id was new, False if it had already been recorded
        """
        try:
            await self.collection.document(event_id).create(
                {"event": event_type, "processedAt": SERVER_TIMESTAMP}
            )
        except AlreadyExists:
            return False
        except GoogleAPIError as e:
            raise StorageError(f"Failed to record webhook event {event_id}") from e
        return True

    @trace_span
    async def exists(self, event_id: str) -> bool:
        """Check whether an event id has already been processed."""
        try:
            snapshot = await self.collection.document(event_id).get()
        except GoogleAPIError as e:
            raise StorageError(f"Failed to read webhook event {event_id}") from e
        return snapshot.exists
