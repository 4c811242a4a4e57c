"""Merge-patch helper shared by the project and task update paths."""

from typing import Any

from pydantic import BaseModel


def merge_patch_values(patch: BaseModel) -> dict[str, Any]:
    """Return the fields of ``patch`` that should overwrite stored values.

    Absent fields, ``None`` and empty strings are dropped: an empty string
    cannot be used to blank out a field, it means "no change".
    """
    values = patch.model_dump(exclude_unset=True)
    return {field: value for field, value in values.items() if value is not None and value != ""}


def apply_merge_patch(entity: Any, patch: BaseModel) -> set[str]:
    """Copy the effective patch values onto ``entity``. Returns the fields written."""
    changes = merge_patch_values(patch)
    for field, value in changes.items():
        setattr(entity, field, getattr(value, "value", value))
    return set(changes)
