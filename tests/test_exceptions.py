"""Tests for custom exception hierarchy."""

from hi_client.exceptions import (
    AtLeastOneOfRequiredMissingError,
    ConfigurationError,
    ForbiddenFieldPresentError,
    HIClientError,
    InvalidDateTimeError,
    InvalidIdentifierLengthError,
    MissingRequiredFieldError,
    SearchValidationError,
    ServiceError,
    ServiceFaultError,
    ServiceTransportError,
    UnexpectedServiceResponseError,
    Violation,
)


class TestExceptionHierarchy:
    """Test exception inheritance chain."""

    def test_hi_client_error_is_exception(self) -> None:
        assert isinstance(HIClientError("test"), Exception)

    def test_validation_errors_are_value_errors(self) -> None:
        for err in (
            MissingRequiredFieldError("search.familyName"),
            ForbiddenFieldPresentError("search.history"),
            AtLeastOneOfRequiredMissingError(("a", "b")),
            InvalidIdentifierLengthError("identifier", 36, 3),
            InvalidDateTimeError("search.dateOfBirth", "x"),
        ):
            assert isinstance(err, SearchValidationError)
            assert isinstance(err, HIClientError)
            assert isinstance(err, ValueError)

    def test_service_errors(self) -> None:
        for err in (
            ServiceFaultError("fault"),
            ServiceTransportError("down", status_code=503),
            UnexpectedServiceResponseError("empty"),
        ):
            assert isinstance(err, ServiceError)
            assert not isinstance(err, SearchValidationError)

    def test_configuration_error_is_hi_client_error(self) -> None:
        assert isinstance(ConfigurationError("test"), HIClientError)


class TestValidationErrorDetails:
    """Test field paths, violation kinds and messages."""

    def test_missing_required(self) -> None:
        err = MissingRequiredFieldError("search.familyName")
        assert err.field == "search.familyName"
        assert err.violation == Violation.REQUIRED
        assert str(err) == "search.familyName is required"

    def test_forbidden(self) -> None:
        err = ForbiddenFieldPresentError("search.history")
        assert err.violation == Violation.NOT_ALLOWED
        assert err.violation.value == "NotAllowed"

    def test_at_least_one(self) -> None:
        err = AtLeastOneOfRequiredMissingError(["x.streetNumber", "x.lotNumber"])
        assert err.fields == ("x.streetNumber", "x.lotNumber")
        assert err.violation.value == "AtLeastOneRequired"
        assert str(err) == "at least one of x.streetNumber, x.lotNumber is required"

    def test_identifier_length(self) -> None:
        err = InvalidIdentifierLengthError("identifier", 36, 5)
        assert (err.expected, err.actual) == (36, 5)
        assert "36" in str(err)

    def test_fault_keeps_code_and_messages(self) -> None:
        err = ServiceFaultError("Bad request", code="soap:Client", service_messages=["m"])
        assert err.code == "soap:Client"
        assert err.service_messages == ["m"]
        assert str(err) == "Bad request"
