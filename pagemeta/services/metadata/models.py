"""Data models for head metadata."""
from typing import Dict, Iterator, List, Optional, Union

TagValue = Union[str, int, float]
TagRecord = Dict[str, TagValue]


class TagTable:
    """Per-request collection of tag records grouped by element type.

    Each tag type maps record ids to records. Adding a record under an id
    that already exists for the type replaces the earlier record in place.
    """

    def __init__(self):
        self._types: Dict[str, Dict[str, TagRecord]] = {}

    def set(self, tag_type: str, record_id: str, record: TagRecord) -> None:
        """Store ``record`` under ``tag_type`` and ``record_id``."""
        self._types.setdefault(tag_type, {})[record_id] = record

    def get(self, tag_type: str, record_id: str) -> Optional[TagRecord]:
        return self._types.get(tag_type, {}).get(record_id)

    def types(self) -> List[str]:
        return list(self._types.keys())

    def records(self, tag_type: str) -> List[TagRecord]:
        return list(self._types.get(tag_type, {}).values())

    def find(self, attribute: str, value: TagValue) -> List[TagRecord]:
        """Return every record whose ``attribute`` equals ``value``."""
        return [
            record
            for records in self._types.values()
            for record in records.values()
            if record.get(attribute) == value
        ]

    def to_dict(self) -> Dict[str, Dict[str, TagRecord]]:
        """Copy of the table as plain dictionaries."""
        return {
            tag_type: {record_id: dict(record) for record_id, record in records.items()}
            for tag_type, records in self._types.items()
        }

    def __contains__(self, tag_type: object) -> bool:
        return tag_type in self._types

    def __iter__(self) -> Iterator[str]:
        return iter(self._types)

    def __len__(self) -> int:
        return sum(len(records) for records in self._types.values())
