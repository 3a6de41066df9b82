"""
Repository for creator entitlements stored on application documents.
"""

from typing import List

from google.api_core.exceptions import GoogleAPIError
from google.cloud.firestore import AsyncClient
from google.cloud.firestore_v1.base_query import FieldFilter

from common.core.exceptions import StorageError
from common.core.otel_axiom_exporter import trace_span
from common.repositories.base import BaseRepository
from packages.billing.models.domain.entitlement import (
    Entitlement,
    EntitlementUpdateModel,
)


class EntitlementRepository(BaseRepository[Entitlement]):
    """Repository for the entitlement fields of creator applications."""

    def __init__(
        self,
        client: AsyncClient,
        collection_name: str = "creatorApplications",
        user_field: str = "userId",
    ):
        super().__init__(client, collection_name, Entitlement)
        self.user_field = user_field

    @trace_span
    async def find_by_user_id(self, user_id: str, limit: int = 2) -> List[Entitlement]:
        """
        Get application records whose user field equals ``user_id``.

        The default limit of 2 is enough to tell a unique match from an
        ambiguous one without reading every duplicate.
        """
        query = self.collection.where(
            filter=FieldFilter(self.user_field, "==", user_id)
        ).limit(limit)
        try:
            snapshots = await query.get()
        except GoogleAPIError as e:
            raise StorageError(f"Failed to query {self.collection_name}") from e

        entitlements = []
        for snapshot in snapshots:
            # The user field name is configurable, the model always reads userId
            entitlement = self._snapshot_to_domain(snapshot, userId=user_id)
            if entitlement is not None:
                entitlements.append(entitlement)
        return entitlements

    @trace_span
    async def update_subscription(
        self, document_id: str, update_data: EntitlementUpdateModel
    ) -> None:
        """Write subscription status and expiry to one application document."""
        try:
            await self.collection.document(document_id).update(
                update_data.model_dump(by_alias=True)
            )
        except GoogleAPIError as e:
            raise StorageError(
                f"Failed to update {self.collection_name}/{document_id}"
            ) from e
