"""Test public API surface - ensure imports work correctly and no side effects."""

import types


def test_root_exports():
    import phcformat

    for name in phcformat.__all__:
        assert hasattr(phcformat, name), name


def test_api_exports_core_functions():
    from phcformat.api import encode, decode, check

    assert isinstance(encode, types.FunctionType)
    assert isinstance(decode, types.FunctionType)
    assert isinstance(check, types.FunctionType)


def test_root_and_api_are_the_same_objects():
    import phcformat
    from phcformat import api
    from phcformat.kernel.decoder import decode
    from phcformat.kernel.encoder import encode

    assert phcformat.encode is api.encode is encode
    assert phcformat.decode is api.decode is decode
    assert phcformat.FormatViolation is api.FormatViolation


def test_violation_codes_are_strings():
    from phcformat import ViolationCode

    assert ViolationCode.TOO_MANY_FIELDS == "TOO_MANY_FIELDS"
    assert all(isinstance(code.value, str) for code in ViolationCode)


def test_import_does_not_configure_logging():
    import logging
    import phcformat  # noqa: F401

    assert not logging.getLogger("phcformat").handlers
