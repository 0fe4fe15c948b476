"""Study resources store."""

from studydesk.schemas.resources import (
    Resource,
    ResourceCreate,
    ResourceRating,
    ResourceStats,
    ResourceUpdate,
)
from studydesk.services.search import ALL, filter_resources
from studydesk.services.search import subject_options as resource_subject_options
from studydesk.services.storage import RESOURCES_KEY
from studydesk.services.stores.base import CollectionStore, Payload, validate_input


class ResourceStore(CollectionStore[Resource]):
    """Resources, newest first."""

    key = RESOURCES_KEY
    kind = "Resource"
    record_type = Resource

    def create(self, data: Payload) -> Resource:
        """Add an unrated resource. Title, URL and subject are required."""
        payload = validate_input(ResourceCreate, data)
        return self._insert(Resource(**payload.model_dump()))

    def update(self, resource_id: str, patch: Payload) -> Resource:
        """Edit title, description, url, subject or tags. Rating is left alone."""
        return self._merge(resource_id, ResourceUpdate, patch)

    def rate(self, resource_id: str, rating: int) -> Resource:
        """Set the star rating directly to 1-5."""
        value = validate_input(ResourceRating, {"rating": rating}).rating
        index = self._index(resource_id)
        self._items[index] = self._items[index].model_copy(update={"rating": value})
        self._persist()
        return self._items[index]

    def filter(
        self,
        search: str = "",
        subject: str | None = ALL,
        type: str | None = ALL,
    ) -> list[Resource]:
        return filter_resources(self._items, search, subject=subject, type=type)

    def subject_options(self) -> list[str]:
        return resource_subject_options(self._items)

    def compute_stats(self) -> ResourceStats:
        return ResourceStats(
            total=len(self._items),
            high_rated=sum(1 for r in self._items if r.rating >= 4),
            videos=sum(1 for r in self._items if r.type == "video"),
            subjects=len({r.subject for r in self._items}),
        )
