"""Field tables for the five JSON Feed entity kinds.

Keys marked ``since=VERSION_1_1`` are only permitted when validating
against revision 1.1 or later.
"""

from .fields import EntitySchema, FieldKind, FieldSpec
from .version import VERSION_1_1


S = FieldKind.STRING


AUTHOR = EntitySchema(
    kind="Author",
    fields=(
        FieldSpec("name", S, doc="The optional author's name."),
        FieldSpec("url", S, doc="An optional URL for a site which represents the author."),
        FieldSpec("avatar", S, doc="An optional URL for an image which represents the author."),
    ),
    one_of=(("name", "url", "avatar"),),
)


HUB = EntitySchema(
    kind="Hub",
    fields=(
        FieldSpec("type", S, attr="hub_type", required=True,
                  doc="The required protocol which is used to subscribe with."),
        FieldSpec("url", S, required=True,
                  doc="A required hub type specific URL which is used to subscribe with."),
    ),
)


ATTACHMENT = EntitySchema(
    kind="Attachment",
    fields=(
        FieldSpec("url", S, required=True, doc="The required URL for the attachment."),
        FieldSpec("mime_type", S, required=True, doc="The required MIME type (e.g. image/png)."),
        FieldSpec("title", S, doc=(
            "An optional title for the attachment.\n\n"
            "Attachments with the same title are alternative representations "
            "of the same resource."
        )),
        FieldSpec("size_in_bytes", FieldKind.UNSIGNED_INTEGER, doc="The optional size of the attachment in bytes."),
        FieldSpec("duration_in_seconds", FieldKind.UNSIGNED_INTEGER,
                  doc="The optional duration of the attachment in seconds."),
    ),
)


ITEM = EntitySchema(
    kind="Item",
    fields=(
        FieldSpec("id", S, required=True, doc=(
            "A required unique identifier for an item.\n\n"
            "Only JSON strings are accepted. JSON Feed 1.0 tolerated values "
            "coercible to strings (e.g. numbers); read those through as_map()."
        )),
        FieldSpec("url", S, doc="The optional URL which the item represents."),
        FieldSpec("external_url", S, doc="An optional related external URL to the item."),
        FieldSpec("title", S, doc="An optional title for the item."),
        FieldSpec("content_html", S, doc="An optional HTML string representing the content."),
        FieldSpec("content_text", S, doc="An optional plain text string representing the content."),
        FieldSpec("summary", S, doc="An optional summary of the item."),
        FieldSpec("image", S, doc="An optional URL of an image representing the item."),
        FieldSpec("banner_image", S, doc="An optional URL of a banner image representing the item."),
        FieldSpec("date_published", S, doc="The date the item was published, in RFC 3339 format."),
        FieldSpec("date_modified", S, doc="The date the item was modified, in RFC 3339 format."),
        FieldSpec("author", FieldKind.OBJECT, target="Author",
                  doc="An optional author. Deprecated in favor of ``authors`` as of 1.1."),
        FieldSpec("authors", FieldKind.OBJECT_ARRAY, target="Author", since=VERSION_1_1,
                  doc="An optional array of authors."),
        FieldSpec("tags", FieldKind.STRING_ARRAY, doc="An optional array of plain text tags."),
        FieldSpec("language", S, since=VERSION_1_1,
                  doc="The optional language of the item, as an RFC 5646 tag."),
        FieldSpec("attachments", FieldKind.OBJECT_ARRAY, target="Attachment",
                  doc="An optional array of relevant resources for the item."),
    ),
    one_of=(("content_html", "content_text"),),
)


FEED = EntitySchema(
    kind="Feed",
    fields=(
        FieldSpec("version", S, required=True, doc=(
            "The required URL formatted version identifier.\n\n"
            "Identifies which revision of JSON Feed the document claims to comply with."
        )),
        FieldSpec("title", S, required=True, doc="The required name of the feed."),
        FieldSpec("home_page_url", S, doc="The optional URL of the resource which the feed describes."),
        FieldSpec("feed_url", S, doc="The optional URL of the feed itself."),
        FieldSpec("description", S, doc="An optional description of the feed."),
        FieldSpec("user_comment", S, doc="An optional description of the purpose of the feed."),
        FieldSpec("next_url", S, doc="The optional URL of the next page of the feed."),
        FieldSpec("icon", S, doc="An optional URL of a large icon for the feed."),
        FieldSpec("favicon", S, doc="An optional URL of a small icon for the feed."),
        FieldSpec("author", FieldKind.OBJECT, target="Author",
                  doc="An optional author. Deprecated in favor of ``authors`` as of 1.1."),
        FieldSpec("authors", FieldKind.OBJECT_ARRAY, target="Author", since=VERSION_1_1,
                  doc="An optional array of authors."),
        FieldSpec("language", S, since=VERSION_1_1,
                  doc="The optional language of the feed, as an RFC 5646 tag."),
        FieldSpec("expired", FieldKind.BOOLEAN, doc="Whether the feed will never be updated again."),
        FieldSpec("hubs", FieldKind.OBJECT_ARRAY, target="Hub",
                  doc="An optional array of subscription endpoints for update notifications."),
        FieldSpec("items", FieldKind.OBJECT_ARRAY, target="Item", required=True,
                  doc="The required array of items."),
    ),
)


SCHEMAS = {schema.kind: schema for schema in (AUTHOR, HUB, ATTACHMENT, ITEM, FEED)}
