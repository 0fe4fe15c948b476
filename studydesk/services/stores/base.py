"""Shared machinery for the in-memory collections and their persisted mirror."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from studydesk.errors import NotFoundError, ValidationError
from studydesk.schemas.base import BaseSchema
from studydesk.services.storage import LocalStorage

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseSchema)
SchemaT = TypeVar("SchemaT", bound=BaseModel)

Payload = BaseModel | Mapping[str, Any]


def validate_input(schema: type[SchemaT], data: Payload) -> SchemaT:
    """
    Convert user-entered data into a typed schema at the store boundary.

    Pydantic errors are reported as a ValidationError naming the fields.
    """
    if isinstance(data, BaseModel) and not isinstance(data, schema):
        data = data.model_dump(exclude_unset=True)
    try:
        return schema.model_validate(data)
    except PydanticValidationError as e:
        raise ValidationError.from_pydantic(e, schema) from None


class CollectionStore(Generic[RecordT]):
    """
    One collection, owned exclusively by this store.

    Every mutation finishes with a full-collection save under the store's key.
    A failed save leaves the in-memory change in place.
    """

    key: ClassVar[str]
    kind: ClassVar[str]
    record_type: ClassVar[type[BaseSchema]]
    # Newest-first collections insert at the front; the rest append
    newest_first: ClassVar[bool] = True

    def __init__(self, storage: LocalStorage, seed: Sequence[Payload] | None = None):
        self._storage = storage
        self._items: list[RecordT] = self._load(seed or ())

    # =========================================================================
    # READ
    # =========================================================================

    def list(self) -> list[RecordT]:
        """The collection in its maintained order."""
        return list(self._items)

    def get(self, item_id: str) -> RecordT:
        return self._items[self._index(item_id)]

    def __len__(self) -> int:
        return len(self._items)

    # =========================================================================
    # WRITE
    # =========================================================================

    def delete(self, item_id: str) -> RecordT:
        """
        Remove a record. Unknown ids raise NotFoundError and leave the
        collection untouched. Confirming the deletion is the caller's job.
        """
        removed = self._items.pop(self._index(item_id))
        self._persist()
        logger.info("Deleted %s %s", self.kind, item_id)
        return removed

    def _insert(self, record: RecordT) -> RecordT:
        if self.newest_first:
            self._items.insert(0, record)
        else:
            self._items.append(record)
        self._persist()
        logger.info("Created %s %s", self.kind, record.id)
        return record

    def _merge(self, item_id: str, patch_schema: type[BaseModel], patch: Payload) -> RecordT:
        """Validate a partial update and replace the record with the merged result."""
        index = self._index(item_id)
        changes = validate_input(patch_schema, patch).model_dump(
            exclude_unset=True, exclude_none=True
        )
        merged = validate_input(self.record_type, {**self._items[index].model_dump(), **changes})
        self._items[index] = merged
        self._persist()
        logger.debug("Updated %s %s: %s", self.kind, item_id, sorted(changes))
        return merged

    def _persist(self) -> bool:
        return self._storage.save(self.key, [item.to_document() for item in self._items])

    # =========================================================================
    # INTERNALS
    # =========================================================================

    def _index(self, item_id: str) -> int:
        for i, item in enumerate(self._items):
            if item.id == item_id:
                return i
        raise NotFoundError(self.kind, item_id)

    def _load(self, seed: Sequence[Payload]) -> list[RecordT]:
        """
        Read the stored collection, falling back to the seed records.

        Seeds apply only when nothing is stored yet. Stored entries that no
        longer validate are skipped.
        """
        raw = self._storage.load(self.key, None)
        if raw is None:
            return [validate_input(self.record_type, item) for item in seed]

        if not isinstance(raw, list):
            logger.warning("Ignoring stored %r: expected a list, got %s", self.key, type(raw).__name__)
            return [validate_input(self.record_type, item) for item in seed]

        items: list[RecordT] = []
        seen: set[str] = set()
        for entry in raw:
            try:
                record = self.record_type.model_validate(entry)
            except PydanticValidationError:
                logger.warning("Skipping invalid %s entry in %r", self.kind, self.key)
                continue
            if record.id in seen:
                logger.warning("Skipping duplicate %s id %s", self.kind, record.id)
                continue
            seen.add(record.id)
            items.append(record)
        return items
