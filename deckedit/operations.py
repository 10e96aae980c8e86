"""Edit operation models and the JSON transport shape they travel in.

Operations usually arrive as a model tool call, e.g.::

    {"operations": [
        {"type": "deleteSlide", "slideIndex": 2},
        {"type": "searchReplace", "search": "2023", "replace": "2024"}
    ]}

Field names follow the camelCase wire format; the models also accept the
snake_case attribute names when built from Python.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, StrictInt, TypeAdapter

logger = logging.getLogger(__name__)


class _Operation(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid", frozen=True)


class SearchReplace(_Operation):
    type: Literal["searchReplace"] = "searchReplace"
    search: str
    replace: str


class ReplaceSlide(_Operation):
    type: Literal["replaceSlide"] = "replaceSlide"
    slide_index: StrictInt = Field(alias="slideIndex")
    new_html: str = Field(alias="newHtml")


class InsertSlide(_Operation):
    type: Literal["insertSlide"] = "insertSlide"
    after_index: StrictInt = Field(alias="afterIndex")
    html: str


class DeleteSlide(_Operation):
    type: Literal["deleteSlide"] = "deleteSlide"
    slide_index: StrictInt = Field(alias="slideIndex")


EditOperation = Annotated[
    Union[SearchReplace, ReplaceSlide, InsertSlide, DeleteSlide],
    Field(discriminator="type"),
]


class EditBatch(BaseModel):
    """Tool-call input: an ordered list of operations."""

    operations: list[EditOperation]


_OPERATION_ADAPTER: TypeAdapter[Any] = TypeAdapter(EditOperation)


def parse_operation(data: Mapping[str, Any]) -> SearchReplace | ReplaceSlide | InsertSlide | DeleteSlide:
    """Validate a single wire-shaped operation."""
    return _OPERATION_ADAPTER.validate_python(dict(data))


def parse_operations(data: Any) -> list[EditOperation]:
    """Validate a batch given as a bare list or as ``{"operations": [...]}``."""
    if isinstance(data, Mapping):
        return EditBatch.model_validate(data).operations
    if isinstance(data, list):
        return EditBatch.model_validate({"operations": data}).operations
    raise ValueError(
        f"Operations must be a JSON list or an object with an 'operations' list, "
        f"got {type(data).__name__}"
    )


def load_operations(path: Path) -> list[EditOperation]:
    """Load and validate an operation batch from a JSON file."""
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    operations = parse_operations(data)
    logger.debug("Loaded %d operation(s) from %s", len(operations), path)
    return operations


def dump_operations(operations: list[EditOperation]) -> list[dict[str, Any]]:
    """Serialize operations back to the camelCase wire format."""
    return [op.model_dump(by_alias=True) for op in operations]


def describe_operation(op: EditOperation) -> str:
    """One-line, user-facing description of what *op* does."""
    if isinstance(op, SearchReplace):
        snippet = op.search[:30]
        if len(op.search) > 30:
            snippet += "..."
        return f'Replaced text: "{snippet}"'
    if isinstance(op, ReplaceSlide):
        return f"Updated slide {op.slide_index}"
    if isinstance(op, InsertSlide):
        if op.after_index == -1:
            return "Added new slide at the beginning"
        return f"Added new slide after slide {op.after_index}"
    if isinstance(op, DeleteSlide):
        return f"Removed slide {op.slide_index}"
    return "Applied edit"
