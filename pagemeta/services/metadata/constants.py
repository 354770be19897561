"""Constants for the head metadata builder and renderer."""


class META_CONSTANTS:
    """Constants for tag accumulation and rendering."""

    # Tag types
    META_TYPE = "meta"
    TITLE_TYPE = "title"
    IMAGE_TYPE = "image"
    DESCRIPTION_TYPE = "description"

    # Types handled by a dedicated builder method instead of a raw record
    RESERVED_TYPES = {TITLE_TYPE, IMAGE_TYPE, DESCRIPTION_TYPE}

    # Names allowed for tag types and attribute keys written into the head
    TAG_TYPE_PATTERN = r"^[A-Za-z][A-Za-z0-9-]*$"
    ATTRIBUTE_NAME_PATTERN = r"^[A-Za-z][A-Za-z0-9:_.-]*$"

    # Attribute never written to the page
    ID_ATTRIBUTE = "id"

    # Character limits for SEO content
    DESCRIPTION_MAX_LENGTH = 160

    # Attribute prefixes
    OPEN_GRAPH_PREFIX = "og"
    ARTICLE_PREFIX = "article"
    TWITTER_PREFIX = "twitter"

    # Fixed record ids so repeated calls overwrite instead of piling up
    TITLE_ID = "title"
    DESCRIPTION_ID = "description"
    KEYWORDS_ID = "keywords"
    OG_TITLE_ID = "og:title"
    OG_DESCRIPTION_ID = "og:description"
    OG_KEYWORDS_ID = "og:keywords"
    OG_URL_ID = "og:url"
    OG_LOCALE_ID = "og:locale"
    TWITTER_TITLE_ID = "twitter:title"
    TWITTER_DESCRIPTION_ID = "twitter:description"
    TWITTER_CARD_ID = "twitter:summary"
    TWITTER_SITE_ID = "twitter:site"

    DEFAULT_TWITTER_CARD = "summary"
