"""Tests for search_push.models covering response parsing.

Run with coverage:
    pytest tests/test_models.py --maxfail=1 -v --cov=search_push.models --cov-report=term-missing
"""

from types import SimpleNamespace

from search_push.models import BatchConfiguration, ClientResponse, FailedItem, SubmissionOutcome


def test_failed_item_from_mapping_and_string():
    item = FailedItem.from_raw({"title": "T", "url": "U", "error": "E", "extra": 1})
    assert (item.title, item.url, item.error) == ("T", "U", "E")
    assert item.item["extra"] == 1

    bare = FailedItem.from_raw("https://kth.se")
    assert bare.url == "https://kth.se" and bare.title is None


def test_outcome_from_accepted_response():
    outcome = SubmissionOutcome.from_response(
        ClientResponse(201, {"stored": 1, "total": 2, "failed": [{"url": "b"}]}), "stored"
    )
    assert not outcome.rejected
    assert outcome.accepted == 1 and outcome.total == 2
    assert [item.url for item in outcome.failed] == ["b"]


def test_outcome_without_failed_list_has_no_failures():
    outcome = SubmissionOutcome.from_response(ClientResponse(200, {"removed": 3, "total": 3}), "removed")
    assert outcome.failed == () and outcome.accepted == 3


def test_outcome_from_rejected_or_malformed_response():
    assert SubmissionOutcome.from_response(ClientResponse(400), "stored").rejected
    assert SubmissionOutcome.from_response(SimpleNamespace(status_code="200"), "stored").rejected
    assert SubmissionOutcome.from_response(object(), "stored").status_code is None

    text_body = SubmissionOutcome.from_response(ClientResponse(200, "ok"), "stored")
    assert not text_body.rejected and text_body.accepted is None


def test_batch_configuration_defaults():
    config = BatchConfiguration()
    assert config.log is None and config.client is None and config.paths is None
    assert config.batch_size == 10


def test_outcome_with_non_list_failed_is_unreadable():
    outcome = SubmissionOutcome.from_response(ClientResponse(200, {"stored": 1, "failed": "oops"}), "stored")
    assert outcome.readable is False and outcome.rejected
    assert outcome.status_code == 200 and outcome.failed == ()

    tupled = SubmissionOutcome.from_response(ClientResponse(200, {"failed": ({"url": "a"},)}), "stored")
    assert tupled.readable and [item.url for item in tupled.failed] == ["a"]
