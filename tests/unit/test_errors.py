# Elastic License 2.0
# Copyright (c) 2025 sliptonic
# SPDX-License-Identifier: Elastic-2.0

"""
Unit tests for the error taxonomy.
"""
import pytest

from bcryptkit.errors import (
    BcryptError,
    EncodingFailureError,
    HashFailureError,
    InvalidCostError,
    InvalidHashError,
    InvalidSaltError,
)


@pytest.mark.unit
@pytest.mark.parametrize("error_class,message", [
    (InvalidCostError, "Bcrypt error: Cost should be between 4 and 31"),
    (InvalidSaltError, "Bcrypt error: Provided salt has incorrect format"),
    (InvalidHashError, "Bcrypt error: Invalid hash formatting"),
    (HashFailureError, "Bcrypt error: Unable to compute hash"),
    (EncodingFailureError, "Bcrypt error: Unable to base64-encode salt"),
])
def test_default_messages(error_class, message):
    error = error_class()
    
    assert isinstance(error, BcryptError)
    assert str(error) == message


@pytest.mark.unit
def test_custom_message_keeps_prefix():
    assert str(InvalidCostError("cost 99")) == "Bcrypt error: cost 99"


@pytest.mark.unit
def test_input_errors_are_value_errors():
    assert issubclass(InvalidCostError, ValueError)
    assert issubclass(InvalidSaltError, ValueError)
    assert issubclass(InvalidHashError, ValueError)
    assert not issubclass(HashFailureError, ValueError)
