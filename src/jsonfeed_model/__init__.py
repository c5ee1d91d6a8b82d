"""jsonfeed_model: typed views and validation for JSON Feed documents."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("jsonfeed-model")
except PackageNotFoundError:
    __version__ = "dev"

# Public API exports
from jsonfeed_model.api import (
    from_reader,
    from_slice,
    from_str,
    from_value,
    to_bytes,
    to_string,
    to_value,
    to_writer,
    validate,
)
from jsonfeed_model.codes import ValidationCode
from jsonfeed_model.contracts import ValidationIssue, ValidationReport
from jsonfeed_model.kernel.entities import (
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
from jsonfeed_model.kernel.errors import BorrowError, DecodeError, JsonFeedError, TypeMismatchError
from jsonfeed_model.kernel.fields import EXTENSION_PREFIX, FieldKind
from jsonfeed_model.kernel.validate import (
    is_valid_attachment,
    is_valid_author,
    is_valid_feed,
    is_valid_hub,
    is_valid_item,
)
from jsonfeed_model.kernel.version import VERSION_1, VERSION_1_1, Version, VersionKind

__all__ = [
    "__version__",
    # Decode / encode
    "from_reader",
    "from_slice",
    "from_str",
    "from_value",
    "to_bytes",
    "to_string",
    "to_value",
    "to_writer",
    # Validation
    "validate",
    "is_valid_attachment",
    "is_valid_author",
    "is_valid_feed",
    "is_valid_hub",
    "is_valid_item",
    "ValidationCode",
    "ValidationIssue",
    "ValidationReport",
    # Entities
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
    # Errors
    "BorrowError",
    "DecodeError",
    "JsonFeedError",
    "TypeMismatchError",
    # Versions and field kinds
    "EXTENSION_PREFIX",
    "FieldKind",
    "VERSION_1",
    "VERSION_1_1",
    "Version",
    "VersionKind",
]
