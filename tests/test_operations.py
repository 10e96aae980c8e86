"""Tests for deckedit.operations — operation decoding and descriptions."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from deckedit.operations import (
    DeleteSlide,
    InsertSlide,
    ReplaceSlide,
    SearchReplace,
    describe_operation,
    dump_operations,
    load_operations,
    parse_operation,
    parse_operations,
)

WIRE_BATCH = [
    {"type": "searchReplace", "search": "2023", "replace": "2024"},
    {"type": "replaceSlide", "slideIndex": 1, "newHtml": "<section class=\"slide\"></section>"},
    {"type": "insertSlide", "afterIndex": -1, "html": "<section class=\"slide\"></section>"},
    {"type": "deleteSlide", "slideIndex": 2},
]


class TestParseOperations:
    def test_bare_list(self):
        ops = parse_operations(WIRE_BATCH)
        assert [type(op) for op in ops] == [SearchReplace, ReplaceSlide, InsertSlide, DeleteSlide]

    def test_tool_call_object(self):
        ops = parse_operations({"operations": WIRE_BATCH})
        assert len(ops) == 4
        assert ops[1].slide_index == 1
        assert ops[2].after_index == -1

    def test_order_preserved(self):
        ops = parse_operations([
            {"type": "deleteSlide", "slideIndex": 3},
            {"type": "deleteSlide", "slideIndex": 0},
        ])
        assert [op.slide_index for op in ops] == [3, 0]

    def test_unknown_type_rejected(self):
        with pytest.raises(ValidationError):
            parse_operations([{"type": "moveSlide", "slideIndex": 1}])

    def test_missing_field_rejected(self):
        with pytest.raises(ValidationError):
            parse_operations([{"type": "replaceSlide", "slideIndex": 1}])

    def test_extra_field_rejected(self):
        with pytest.raises(ValidationError):
            parse_operations([{"type": "deleteSlide", "slideIndex": 1, "force": True}])

    def test_fractional_index_rejected(self):
        with pytest.raises(ValidationError):
            parse_operations([{"type": "deleteSlide", "slideIndex": 1.5}])

    def test_boolean_index_rejected(self):
        with pytest.raises(ValidationError):
            parse_operations([{"type": "deleteSlide", "slideIndex": True}])

    def test_numeric_string_index_rejected(self):
        with pytest.raises(ValidationError):
            parse_operations([{"type": "replaceSlide", "slideIndex": "1", "newHtml": ""}])

    def test_boolean_after_index_rejected(self):
        with pytest.raises(ValidationError):
            parse_operations([{"type": "insertSlide", "afterIndex": False, "html": ""}])

    def test_integral_float_index_rejected(self):
        with pytest.raises(ValidationError):
            parse_operations([{"type": "deleteSlide", "slideIndex": 1.0}])

    def test_object_without_operations_rejected(self):
        with pytest.raises(ValidationError):
            parse_operations({"ops": []})

    def test_scalar_rejected(self):
        with pytest.raises(ValueError, match="got str"):
            parse_operations("deleteSlide")

    def test_validation_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_operation({"type": "deleteSlide"})


class TestModels:
    def test_snake_case_construction(self):
        op = ReplaceSlide(slide_index=0, new_html="<section></section>")
        assert op.type == "replaceSlide"

    def test_frozen(self):
        op = DeleteSlide(slide_index=0)
        with pytest.raises(ValidationError):
            op.slide_index = 1

    def test_dump_uses_wire_names(self):
        assert dump_operations(parse_operations(WIRE_BATCH)) == WIRE_BATCH


class TestLoadOperations:
    def test_load_from_file(self, tmp_path):
        p = tmp_path / "ops.json"
        p.write_text(json.dumps({"operations": WIRE_BATCH}))
        ops = load_operations(p)
        assert isinstance(ops[-1], DeleteSlide)

    def test_invalid_json(self, tmp_path):
        p = tmp_path / "ops.json"
        p.write_text("{not json")
        with pytest.raises(ValueError):
            load_operations(p)


class TestDescribeOperation:
    def test_short_search(self):
        op = SearchReplace(search="2023", replace="2024")
        assert describe_operation(op) == 'Replaced text: "2023"'

    def test_long_search_truncated(self):
        op = SearchReplace(search="x" * 40, replace="")
        assert describe_operation(op) == 'Replaced text: "' + "x" * 30 + '..."'

    def test_replace_slide(self):
        assert describe_operation(ReplaceSlide(slide_index=4, new_html="")) == "Updated slide 4"

    def test_insert_at_beginning(self):
        op = InsertSlide(after_index=-1, html="")
        assert describe_operation(op) == "Added new slide at the beginning"

    def test_insert_after(self):
        op = InsertSlide(after_index=2, html="")
        assert describe_operation(op) == "Added new slide after slide 2"

    def test_delete(self):
        assert describe_operation(DeleteSlide(slide_index=0)) == "Removed slide 0"
