# SPDX-License-Identifier: Apache-2.0
"""Unit tests for reclassifying upstream failures."""

from __future__ import annotations

import pytest

from avconnect.domain import (
    ConnectorError,
    DataError,
    InvalidArgumentError,
    NotFoundError,
    OtherError,
    UnsupportedError,
)
from avconnect.infrastructure.error_classifier import NOT_FOUND_PHRASES, ErrorClassifier
from avconnect.infrastructure.vendor import CONNECTOR_NAME


@pytest.fixture
def classifier():
    return ErrorClassifier()


@pytest.mark.parametrize("text", ["No data", "NO DATA for symbol", "nO dAtA"])
def test_no_data_in_any_casing_is_not_found(classifier, text):
    result = classifier.normalize(ConnectorError("someone-else", text), "quote for IBM")
    assert isinstance(result, NotFoundError)
    assert result.what == "quote for IBM"


@pytest.mark.parametrize("phrase", NOT_FOUND_PHRASES)
def test_every_phrase_matches(classifier, phrase):
    error = ConnectorError(CONNECTOR_NAME, f"Upstream says: {phrase.upper()}.")
    assert isinstance(classifier.normalize(error, "history for X"), NotFoundError)


def test_invalid_api_call_message(classifier):
    message = (
        "Invalid API call. Please retry or visit the documentation "
        "(https://www.alphavantage.co/documentation/) for TIME_SERIES_DAILY."
    )
    assert isinstance(classifier.normalize(ConnectorError("x", message), "h"), NotFoundError)


def test_unrelated_connector_error_is_unchanged(classifier):
    error = ConnectorError("someone-else", "rate limit reached")
    assert classifier.normalize(error, "search") is error


def test_untyped_failure_becomes_connector_error(classifier):
    result = classifier.normalize(RuntimeError("socket closed unexpectedly"), "search")
    assert isinstance(result, ConnectorError)
    assert result.connector == CONNECTOR_NAME
    assert result.message == "socket closed unexpectedly"


def test_untyped_failure_matching_vocabulary(classifier):
    result = classifier.normalize(RuntimeError("Unknown symbol ZZZZ"), "quote for ZZZZ")
    assert isinstance(result, NotFoundError)


def test_other_error_is_treated_as_untyped(classifier):
    result = classifier.normalize(OtherError("boom"), "search")
    assert isinstance(result, ConnectorError)
    assert result.message == "boom"
    assert isinstance(classifier.normalize(OtherError("no matches"), "search"), NotFoundError)


@pytest.mark.parametrize(
    "error",
    [
        InvalidArgumentError("no data"),
        UnsupportedError("not found"),
        DataError("no data"),
        NotFoundError("quote for IBM"),
    ],
)
def test_other_canonical_kinds_pass_through(classifier, error):
    assert classifier.normalize(error, "anything") is error


def test_custom_vocabulary():
    classifier = ErrorClassifier(connector_name="custom", phrases=("Gone Fishing",))
    assert isinstance(classifier.normalize(RuntimeError("gone fishing"), "x"), NotFoundError)
    assert classifier.normalize(RuntimeError("no data"), "x").connector == "custom"
