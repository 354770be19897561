"""Serialize accumulated tag records into head markup."""
from typing import Any, Dict, List, Tuple

from markupsafe import escape

from pagemeta.services.metadata.constants import META_CONSTANTS
from pagemeta.services.metadata.models import TagRecord, TagTable


def _meta_sort_key(record: TagRecord) -> Tuple[str, str]:
    # Full key breaks prefix ties, so og:image:width sorts ahead of og:image
    # and several images on one page are not kept grouped.
    key = str(record.get("property") or record.get("name") or "")
    return key.split(":")[0], key


def _ordered_records(table: TagTable, tag_type: str) -> List[TagRecord]:
    records = table.records(tag_type)
    if tag_type == META_CONSTANTS.META_TYPE:
        # sorted() keeps insertion order for equal keys, reverse included
        records = sorted(records, key=_meta_sort_key, reverse=True)
    return records


def render_tag(tag_type: str, record: TagRecord) -> str:
    """Render one record as a self-closing tag, attributes in descending order."""
    parts = [f"<{tag_type}"]
    for key in sorted(record.keys(), reverse=True):
        if key == META_CONSTANTS.ID_ATTRIBUTE:
            continue
        parts.append(f' {key}="{escape(str(record[key]))}"')
    parts.append(" />")
    return "".join(parts)


def render_tags(table: TagTable) -> str:
    """Render every record in ``table``.

    Tag types come out in ascending order. ``meta`` records are ordered by
    the prefix of their ``property`` (or ``name``) descending, then by the
    full value descending.
    """
    return "".join(
        render_tag(tag_type, record)
        for tag_type in sorted(table.types())
        for record in _ordered_records(table, tag_type)
    )


def append_to_head(table: TagTable, render: Dict[str, Any]) -> None:
    """``view.compile`` pre-hook: append the rendered tags to the page head."""
    page = render.setdefault("page", {})
    page["head"] = page.get("head", "") + render_tags(table)
