from iota.common.span import Span
from iota.errors import IotaError, ParseError, ReductionLimitExceeded, ScanError


def test_scan_error_string_includes_snippet() -> None:
    err = ScanError("[@] is an invalid symbol in the syntax", Span.at(1), "i@i", character="@")
    assert str(err) == "scan error: [@] is an invalid symbol in the syntax @ 1:2: '@'"


def test_parse_error_without_source() -> None:
    err = ParseError("trailing tokens", Span(1, 2))
    assert str(err) == "parse error: trailing tokens @ 1:2"


def test_error_without_span() -> None:
    err = ReductionLimitExceeded("no normal form within 3 steps", steps=3)
    assert str(err) == "reduce error: no normal form within 3 steps"


def test_phases_share_a_base() -> None:
    for err in (ScanError("x"), ParseError("x"), ReductionLimitExceeded("x")):
        assert isinstance(err, IotaError)
    assert {ScanError.phase, ParseError.phase, ReductionLimitExceeded.phase} == {
        "scan",
        "parse",
        "reduce",
    }
