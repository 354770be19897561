"""Head metadata service: tag accumulation and rendering."""
from pagemeta.services.metadata.models import TagRecord, TagTable
from pagemeta.services.metadata.constants import META_CONSTANTS
from pagemeta.services.metadata.builder import MetaBuilder, truncate_description
from pagemeta.services.metadata.renderer import append_to_head, render_tag, render_tags

__all__ = [
    "TagRecord",
    "TagTable",
    "META_CONSTANTS",
    "MetaBuilder",
    "truncate_description",
    "append_to_head",
    "render_tag",
    "render_tags",
]
