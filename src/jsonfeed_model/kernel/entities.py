"""JSON Feed entity types.

Every entity kind comes in three flavors sharing the same typed accessors:
the owned type (``Feed``), a shared read-only view (``FeedRef``) and a
mutable view (``FeedMut``). Nested getters return views into the parent's
data; nested setters consume owned entities.

The underlying data is not guaranteed to be a valid JSON Feed; call
``is_valid(version)`` to check.
"""

from typing import Optional

from .fields import read_str
from .schema import ATTACHMENT, AUTHOR, FEED, HUB, ITEM
from .version import Version
from .views import MutView, Owned, RefView, bind_fields


# Leaves first: nested getters resolve their target classes by kind.

@bind_fields(AUTHOR)
class Author(Owned):
    """An author of a feed or an item in the feed.

    A valid Author has at least one of ``name``, ``url`` or ``avatar``.
    """
    __slots__ = ()


@bind_fields(AUTHOR)
class AuthorRef(RefView):
    """An Author borrowed read-only from a parent document."""
    __slots__ = ()


@bind_fields(AUTHOR)
class AuthorMut(MutView):
    """An Author borrowed mutably from a parent document."""
    __slots__ = ()


@bind_fields(HUB)
class Hub(Owned):
    """A subscription endpoint for feed update notifications.

    A valid Hub has both ``type`` and ``url``.
    """
    __slots__ = ()


@bind_fields(HUB)
class HubRef(RefView):
    __slots__ = ()


@bind_fields(HUB)
class HubMut(MutView):
    __slots__ = ()


@bind_fields(ATTACHMENT)
class Attachment(Owned):
    """A relevant resource for an Item.

    A valid Attachment has both ``url`` and ``mime_type``.
    """
    __slots__ = ()


@bind_fields(ATTACHMENT)
class AttachmentRef(RefView):
    __slots__ = ()


@bind_fields(ATTACHMENT)
class AttachmentMut(MutView):
    __slots__ = ()


@bind_fields(ITEM)
class Item(Owned):
    """A single object (blog post, story, episode) in the feed.

    A valid Item has an ``id`` and at least one of ``content_html`` or
    ``content_text``.
    """
    __slots__ = ()


@bind_fields(ITEM)
class ItemRef(RefView):
    """An Item borrowed read-only from a parent document."""
    __slots__ = ()


@bind_fields(ITEM)
class ItemMut(MutView):
    """An Item borrowed mutably from a parent document."""
    __slots__ = ()


class _DeclaredVersion:
    __slots__ = ()

    def declared_version(self) -> Optional[Version]:
        """The ``version`` field as a Version, or None when absent.

        Raises TypeMismatchError when ``version`` is not a string.
        """
        value = read_str(self._map(), "version")
        return None if value is None else Version(value)


@bind_fields(FEED)
class Feed(_DeclaredVersion, Owned):
    """A list of items with associated metadata.

    Owns its JSON object; ``as_map``, ``as_map_mut`` and ``into_inner``
    give access to the object itself, including extension keys.

    A valid Feed has a ``version`` accepted by the target revision, a
    ``title`` and an ``items`` list of valid items.

    Example:
        >>> feed = Feed()
        >>> feed.set_version(Version.V1_1)
        >>> feed.set_title("Lorem ipsum")
        >>> feed.set_items([])
        >>> feed.is_valid(Version.V1_1)
        True
    """
    __slots__ = ()


@bind_fields(FEED)
class FeedRef(_DeclaredVersion, RefView):
    """A Feed borrowed read-only."""
    __slots__ = ()


@bind_fields(FEED)
class FeedMut(_DeclaredVersion, MutView):
    """A Feed borrowed mutably."""
    __slots__ = ()
