"""Tests for decoding POST /api/workflow bodies into request variants."""

from __future__ import annotations

import pytest

from doccat.core.exceptions import BadRequestError, InvalidActionError
from doccat.models.workflow import (
    SaveDraftRequest,
    SubmitRequest,
    ValidateRequest,
    WorkflowStep,
    decode_workflow_request,
)


class TestDecode:
    def test_save_draft_variant(self):
        req = decode_workflow_request({
            "documentId": "doc_001",
            "action": "save_draft",
            "step": "B",
            "belongingRating": 3,
        })
        assert isinstance(req, SaveDraftRequest)
        assert req.document_id == "doc_001"
        assert req.step == WorkflowStep.B
        assert req.belonging_rating == 3

    def test_submit_variant(self):
        req = decode_workflow_request({"documentId": "doc_001", "action": "submit"})
        assert isinstance(req, SubmitRequest)
        assert req.missing_fields() == ["belongingRating", "selectedCategory", "selectedTags"]

    def test_validate_variant_accepts_any_step_string(self):
        req = decode_workflow_request({"documentId": "doc_001", "action": "validate", "step": "Z"})
        assert isinstance(req, ValidateRequest)
        assert req.step == "Z"

    def test_category_object_reduced_to_id(self):
        req = decode_workflow_request({
            "documentId": "doc_001",
            "action": "submit",
            "selectedCategory": {"id": "operational", "name": "Operational"},
        })
        assert req.selected_category == "operational"

    def test_custom_tags_use_camel_case(self):
        req = decode_workflow_request({
            "documentId": "doc_001",
            "action": "save_draft",
            "customTags": [{"id": "custom_1", "name": "Mine", "riskLevel": 2}],
        })
        assert req.custom_tags[0].risk_level == 2


class TestDecodeErrors:
    @pytest.mark.parametrize("body", [
        {"action": "save_draft"},
        {"documentId": "doc_001"},
        {"documentId": "", "action": "submit"},
    ])
    def test_missing_required_fields(self, body):
        with pytest.raises(BadRequestError, match="Missing required fields"):
            decode_workflow_request(body)

    def test_unknown_action(self):
        with pytest.raises(InvalidActionError):
            decode_workflow_request({"documentId": "doc_001", "action": "publish"})

    def test_non_object_body(self):
        with pytest.raises(BadRequestError):
            decode_workflow_request(["doc_001"])

    def test_wrongly_typed_field(self):
        with pytest.raises(BadRequestError) as info:
            decode_workflow_request({
                "documentId": "doc_001", "action": "save_draft", "selectedTags": "authorship",
            })
        assert info.value.details
        assert not isinstance(info.value, InvalidActionError)
