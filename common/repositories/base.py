from typing import Any, Dict, Generic, Optional, Type, TypeVar

from google.cloud.firestore import AsyncClient, AsyncCollectionReference
from pydantic import BaseModel

DomainModelType = TypeVar("DomainModelType", bound=BaseModel)


class BaseRepository(Generic[DomainModelType]):
    """
    Base repository over one Firestore collection.

    Documents are mapped to domain models by merging the document id into the
    document data, so domain models declare an ``id`` field plus the
    (aliased) document fields they care about.

    Example:
        repo = EntitlementRepository(client, "creatorApplications")
        matches = await repo.find_by_user_id("uid")
    """

    def __init__(
        self,
        client: AsyncClient,
        collection_name: str,
        domain_class: Type[DomainModelType],
    ):
        self.client = client
        self.collection_name = collection_name
        self.domain_class = domain_class

    @property
    def collection(self) -> AsyncCollectionReference:
        return self.client.collection(self.collection_name)

    def _snapshot_to_domain(
        self, snapshot: Any, **known_fields: Any
    ) -> Optional[DomainModelType]:
        """
        Convert a document snapshot to the domain model.

        ``known_fields`` (keyed by document field name) override stored values,
        e.g. the value a query already matched on.
        """
        data: Optional[Dict[str, Any]] = snapshot.to_dict()
        if data is None:
            return None
        return self.domain_class.model_validate(
            {**data, **known_fields, "id": snapshot.id}
        )
