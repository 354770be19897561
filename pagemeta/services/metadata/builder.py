"""Request-scoped builder for HTML head metadata."""
import re
import uuid
from typing import Any, Callable, Dict, Optional, Union

from pagemeta.exceptions import ValidationError
from pagemeta.services.metadata.constants import META_CONSTANTS
from pagemeta.services.metadata.models import TagRecord, TagTable, TagValue

Translate = Callable[[str], str]

_TAG_TYPE_RE = re.compile(META_CONSTANTS.TAG_TYPE_PATTERN)
_ATTRIBUTE_NAME_RE = re.compile(META_CONSTANTS.ATTRIBUTE_NAME_PATTERN)


def _identity(text: str) -> str:
    return text


def truncate_description(text: str, max_length: int = META_CONSTANTS.DESCRIPTION_MAX_LENGTH) -> str:
    """Cut ``text`` down to at most ``max_length`` characters on a word boundary.

    The first ``max_length`` characters are split on spaces and the last
    (possibly partial) word is dropped.
    """
    if len(text) <= max_length:
        return text
    words = text[:max_length].split(" ")
    return " ".join(words[:-1])


def _check_text(value: Any, field: str) -> str:
    if not isinstance(value, str):
        raise ValidationError(f"{field} must be a string, got {type(value).__name__}")
    return value


def _check_value(value: Any, field: str) -> TagValue:
    # bool is an int subclass but never a sensible attribute value
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        raise ValidationError(f"{field} must be a string or number, got {type(value).__name__}")
    return value


class MetaBuilder:
    """Accumulates tag records for one request.

    Every method returns the builder itself so calls can be chained::

        meta.title("Pricing").description(text).og("type", "website")

    Args:
        translate: Callable applied to titles and keywords before they are stored
        description_max_length: Word-boundary cut-off for descriptions
        twitter_card: Card type used by ``defaults``
    """

    def __init__(
        self,
        translate: Optional[Translate] = None,
        description_max_length: int = META_CONSTANTS.DESCRIPTION_MAX_LENGTH,
        twitter_card: str = META_CONSTANTS.DEFAULT_TWITTER_CARD,
    ):
        self.table = TagTable()
        self.translate = translate or _identity
        self.description_max_length = description_max_length
        self.twitter_card = twitter_card
        self.page_title: Optional[str] = None

    # ------------------------------------------------------------------
    # Raw records
    # ------------------------------------------------------------------

    def meta(self, opts: Dict[str, Any], tag_type: str = META_CONSTANTS.META_TYPE) -> "MetaBuilder":
        """Add or overwrite a tag record.

        ``opts`` holds the tag attributes. Its ``id`` picks the record slot;
        without one a fresh unique id is generated. The reserved types
        ``title``, ``image`` and ``description`` are routed to the matching
        builder method using ``opts["content"]`` (``opts["url"]`` also works
        for images).

        Raises:
            ValidationError: If ``tag_type`` or an attribute name is not a plain
                name, ``opts`` is not a dict, or an attribute value is not a
                string or number
        """
        if not isinstance(tag_type, str) or not _TAG_TYPE_RE.fullmatch(tag_type):
            raise ValidationError(f"Tag type must be a plain element name, got {tag_type!r}")
        if not isinstance(opts, dict):
            raise ValidationError(f"Tag options must be a dict, got {type(opts).__name__}")

        if tag_type in META_CONSTANTS.RESERVED_TYPES:
            return self._delegate(tag_type, opts)

        record: TagRecord = {}
        for key, value in opts.items():
            if key == META_CONSTANTS.ID_ATTRIBUTE:
                continue
            if not isinstance(key, str) or not _ATTRIBUTE_NAME_RE.fullmatch(key):
                raise ValidationError(f"Invalid tag attribute name: {key!r}")
            record[key] = _check_value(value, f"Attribute '{key}'")

        if not record:
            raise ValidationError("Tag record needs at least one attribute besides 'id'")

        record_id = opts.get(META_CONSTANTS.ID_ATTRIBUTE)
        if record_id is None:
            record_id = str(uuid.uuid4())
        elif not isinstance(record_id, str) or not record_id:
            raise ValidationError(f"Tag id must be a non-empty string, got {record_id!r}")

        record[META_CONSTANTS.ID_ATTRIBUTE] = record_id
        self.table.set(tag_type, record_id, record)
        return self

    def meta_value(self, name: str, content: TagValue) -> "MetaBuilder":
        """Add ``<meta name="<name>" content="<content>" />``.

        ``title``, ``image`` and ``description`` are routed to their builder
        methods.
        """
        _check_text(name, "Meta name")
        if name in META_CONSTANTS.RESERVED_TYPES:
            return self._delegate(name, {"content": content})
        return self.meta({"name": name, "content": content})

    def _delegate(self, tag_type: str, opts: Dict[str, Any]) -> "MetaBuilder":
        if tag_type == META_CONSTANTS.TITLE_TYPE:
            return self.title(opts.get("content"))
        if tag_type == META_CONSTANTS.DESCRIPTION_TYPE:
            return self.description(opts.get("content"))
        url = opts.get("url", opts.get("content"))
        return self.image(url, opts.get("width"), opts.get("height"))

    # ------------------------------------------------------------------
    # Prefixed shorthands
    # ------------------------------------------------------------------

    def og(self, name: str, content: TagValue, id: Optional[str] = None) -> "MetaBuilder":
        """Add an Open Graph ``og:<name>`` property."""
        _check_text(name, "Open Graph name")
        return self.meta({
            "id": id,
            "content": content,
            "property": f"{META_CONSTANTS.OPEN_GRAPH_PREFIX}:{name}",
        })

    def article(self, name: str, content: TagValue, id: Optional[str] = None) -> "MetaBuilder":
        """Add an ``article:<name>`` property."""
        _check_text(name, "Article name")
        return self.meta({
            "id": id,
            "content": content,
            "property": f"{META_CONSTANTS.ARTICLE_PREFIX}:{name}",
        })

    def twitter(self, name: str, content: TagValue, id: Optional[str] = None) -> "MetaBuilder":
        """Add a Twitter Card ``twitter:<name>`` tag."""
        _check_text(name, "Twitter name")
        return self.meta({
            "id": id,
            "name": f"{META_CONSTANTS.TWITTER_PREFIX}:{name}",
            "content": content,
        })

    # ------------------------------------------------------------------
    # Page level fields
    # ------------------------------------------------------------------

    def title(self, text: str) -> "MetaBuilder":
        """Set the page title and its Open Graph, itemprop and Twitter records."""
        title = self.translate(_check_text(text, "Title"))
        self.page_title = title

        self.og("title", title, META_CONSTANTS.OG_TITLE_ID)
        self.meta({
            "id": META_CONSTANTS.TITLE_ID,
            "content": title,
            "itemprop": "name",
        })
        return self.twitter("title", title, META_CONSTANTS.TWITTER_TITLE_ID)

    def description(self, text: str) -> "MetaBuilder":
        """Set the page description, cut to the description limit on a word boundary."""
        description = truncate_description(_check_text(text, "Description"), self.description_max_length)

        self.og("description", description, META_CONSTANTS.OG_DESCRIPTION_ID)
        self.meta({
            "id": META_CONSTANTS.DESCRIPTION_ID,
            "name": "description",
            "content": description,
            "itemprop": "description",
        })
        return self.twitter("description", description, META_CONSTANTS.TWITTER_DESCRIPTION_ID)

    def keywords(self, text: str) -> "MetaBuilder":
        """Set the page keywords."""
        keywords = self.translate(_check_text(text, "Keywords"))

        self.og("keywords", keywords, META_CONSTANTS.OG_KEYWORDS_ID)
        return self.meta({
            "id": META_CONSTANTS.KEYWORDS_ID,
            "content": keywords,
            "itemprop": "name",
        })

    def image(
        self,
        url: str,
        width: Optional[Union[int, str]] = None,
        height: Optional[Union[int, str]] = None,
    ) -> "MetaBuilder":
        """Add a page image with optional pixel dimensions."""
        _check_text(url, "Image url")
        if not url:
            raise ValidationError("Image url cannot be empty")

        self.og("image", url)
        if width:
            self.og("image:width", _check_value(width, "Image width"))
        if height:
            self.og("image:height", _check_value(height, "Image height"))

        self.og("image:url", url)
        self.og("image:secure_url", url)
        self.meta({
            "content": url,
            "itemprop": "image",
        })
        return self.twitter("image", url)

    def defaults(self, url: str, locale: str, site_title: str) -> "MetaBuilder":
        """Populate the records every page starts with."""
        self.title(site_title)
        self.og("url", url, META_CONSTANTS.OG_URL_ID)
        self.og("locale", locale, META_CONSTANTS.OG_LOCALE_ID)
        self.twitter("card", self.twitter_card, META_CONSTANTS.TWITTER_CARD_ID)
        return self.twitter("site", site_title, META_CONSTANTS.TWITTER_SITE_ID)
