"""Typed views, field tables and validation for JSON Feed documents."""

from .entities import (
    Attachment,
    AttachmentMut,
    AttachmentRef,
    Author,
    AuthorMut,
    AuthorRef,
    Feed,
    FeedMut,
    FeedRef,
    Hub,
    HubMut,
    HubRef,
    Item,
    ItemMut,
    ItemRef,
)
from .errors import BorrowError, DecodeError, JsonFeedError, TypeMismatchError
from .version import VERSION_1, VERSION_1_1, Version, VersionKind

__all__ = [
    "Attachment",
    "AttachmentMut",
    "AttachmentRef",
    "Author",
    "AuthorMut",
    "AuthorRef",
    "Feed",
    "FeedMut",
    "FeedRef",
    "Hub",
    "HubMut",
    "HubRef",
    "Item",
    "ItemMut",
    "ItemRef",
    "BorrowError",
    "DecodeError",
    "JsonFeedError",
    "TypeMismatchError",
    "VERSION_1",
    "VERSION_1_1",
    "Version",
    "VersionKind",
]
