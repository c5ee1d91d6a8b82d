"""Structural and revision compliance checks.

Validation is driven by the field tables in ``schema``:

1. An unrecognized target revision never validates anything.
2. Required fields must be present with the right shape.
3. Optional fields, when present, must type-check.
4. Nested entities are validated recursively against their own tables.
5. Every key must be permitted for the target revision, or be an
   extension key (leading underscore).

For Feed, the declared ``version`` must also be accepted by the target:
a 1.0 feed validates against 1.0 and 1.1, a 1.1 feed only against 1.1.

All functions here are pure and never raise for malformed documents.
"""

import logging
from typing import Any, List, Mapping, Optional, Union

from jsonfeed_model.codes import ValidationCode
from jsonfeed_model.contracts import ValidationIssue, ValidationReport

from .errors import TypeMismatchError
from .fields import EntitySchema, FieldKind, FieldSpec, is_extension_key, read_field, read_str
from .schema import ATTACHMENT, AUTHOR, FEED, HUB, ITEM, SCHEMAS
from .version import Version


logger = logging.getLogger(__name__)

TargetVersion = Union[Version, str]


def _pointer(path: str, token: Union[str, int]) -> str:
    """Append a reference token to a JSON pointer (RFC 6901)."""
    token = str(token).replace("~", "~0").replace("/", "~1")
    return f"{path}/{token}"


def _coerce_target(target: Any) -> Optional[Version]:
    if isinstance(target, (Version, str)):
        return Version.parse(target)
    return None


def _check_declared_version(mapping: Mapping[str, Any], target: Version, path: str) -> List[ValidationIssue]:
    """Feed only: the declared revision must be accepted by the target."""
    try:
        declared = read_str(mapping, "version")
    except TypeMismatchError:
        return []  # Already reported as a field type mismatch
    if declared is None:
        return []  # Already reported as a missing required field
    declared_version = Version(declared)
    if not declared_version.is_known:
        return [ValidationIssue(
            code=ValidationCode.UNKNOWN_DECLARED_VERSION.value,
            message=f"Declared version '{declared}' is not a recognized JSON Feed revision",
            path=_pointer(path, "version"),
            key="version",
        )]
    if not target.accepts(declared_version):
        return [ValidationIssue(
            code=ValidationCode.INCOMPATIBLE_DECLARED_VERSION.value,
            message=f"A feed declaring '{declared}' cannot validate against '{target}'",
            path=_pointer(path, "version"),
            key="version",
        )]
    return []


_EXTRA_CHECKS = {
    FEED.kind: _check_declared_version,
}


def _check_nested(spec: FieldSpec, value: Any, target: Version, path: str) -> List[ValidationIssue]:
    nested_schema = SCHEMAS[spec.target]
    field_path = _pointer(path, spec.key)
    if spec.kind is FieldKind.OBJECT:
        return _check_entity(value, nested_schema, target, field_path)
    issues: List[ValidationIssue] = []
    for index, element in enumerate(value):
        issues.extend(_check_entity(element, nested_schema, target, _pointer(field_path, index)))
    return issues


def _check_entity(
    mapping: Mapping[str, Any],
    schema: EntitySchema,
    target: Version,
    path: str,
) -> List[ValidationIssue]:
    """Collect issues for one entity; ``target`` is known to be recognized."""
    issues: List[ValidationIssue] = []
    present = set()

    for spec in schema.fields:
        try:
            value = read_field(mapping, spec)
        except TypeMismatchError as e:
            issues.append(ValidationIssue(
                code=ValidationCode.TYPE_MISMATCH.value,
                message=str(e),
                path=_pointer(path, spec.key),
                key=spec.key,
            ))
            continue

        if value is None:
            if spec.required:
                issues.append(ValidationIssue(
                    code=ValidationCode.MISSING_REQUIRED_FIELD.value,
                    message=f"{schema.kind} requires '{spec.key}'",
                    path=path,
                    key=spec.key,
                ))
            continue

        present.add(spec.key)
        if spec.is_nested:
            issues.extend(_check_nested(spec, value, target, path))

    for group in schema.one_of:
        if not present.intersection(group):
            names = ", ".join(f"'{key}'" for key in group)
            issues.append(ValidationIssue(
                code=ValidationCode.MISSING_ONE_OF.value,
                message=f"{schema.kind} requires at least one of {names}",
                path=path,
            ))

    extra_check = _EXTRA_CHECKS.get(schema.kind)
    if extra_check is not None:
        issues.extend(extra_check(mapping, target, path))

    permitted = schema.permitted_keys(target)
    for key in mapping:
        if key in permitted or is_extension_key(key):
            continue
        issues.append(ValidationIssue(
            code=ValidationCode.UNKNOWN_KEY.value,
            message=f"'{key}' is not a {schema.kind} key in {target} and is not an extension key",
            path=_pointer(path, key),
            key=key,
        ))

    return issues


def validate_document(
    mapping: Mapping[str, Any],
    schema: EntitySchema,
    target_version: TargetVersion,
) -> ValidationReport:
    """Validate a raw document against an entity schema and target revision.

    Returns:
        ValidationReport whose ``ok`` is True iff the document complies.
    """
    target = _coerce_target(target_version)
    if target is None or not target.is_known:
        issues = [ValidationIssue(
            code=ValidationCode.UNSUPPORTED_TARGET_VERSION.value,
            message=f"'{target_version}' is not a recognized JSON Feed revision",
        )]
    else:
        issues = _check_entity(mapping, schema, target, "")

    issues.sort(key=lambda issue: (issue.path, issue.code))
    if issues:
        logger.debug("%s is not valid against %s: %d issue(s)", schema.kind, target_version, len(issues))
    return ValidationReport(
        ok=not issues,
        entity=schema.kind,
        target_version=str(target_version),
        issues=issues,
    )


def validate_feed(mapping: Mapping[str, Any], target_version: TargetVersion) -> ValidationReport:
    return validate_document(mapping, FEED, target_version)


def validate_item(mapping: Mapping[str, Any], target_version: TargetVersion) -> ValidationReport:
    return validate_document(mapping, ITEM, target_version)


def validate_author(mapping: Mapping[str, Any], target_version: TargetVersion) -> ValidationReport:
    return validate_document(mapping, AUTHOR, target_version)


def validate_hub(mapping: Mapping[str, Any], target_version: TargetVersion) -> ValidationReport:
    return validate_document(mapping, HUB, target_version)


def validate_attachment(mapping: Mapping[str, Any], target_version: TargetVersion) -> ValidationReport:
    return validate_document(mapping, ATTACHMENT, target_version)


def is_valid_feed(mapping: Mapping[str, Any], target_version: TargetVersion) -> bool:
    """Whether a feed document complies with ``target_version``."""
    return validate_feed(mapping, target_version).ok


def is_valid_item(mapping: Mapping[str, Any], target_version: TargetVersion) -> bool:
    return validate_item(mapping, target_version).ok


def is_valid_author(mapping: Mapping[str, Any], target_version: TargetVersion) -> bool:
    return validate_author(mapping, target_version).ok


def is_valid_hub(mapping: Mapping[str, Any], target_version: TargetVersion) -> bool:
    return validate_hub(mapping, target_version).ok


def is_valid_attachment(mapping: Mapping[str, Any], target_version: TargetVersion) -> bool:
    return validate_attachment(mapping, target_version).ok
