import pytest

from request_chain import cli as cli_module
from request_chain.diagnostics import DiagnosticSink
from request_chain.models import Request
from request_chain.orchestrator import Orchestrator


def test_default_run_handles_with_qiwi_and_exits(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli_module.main([])

    assert excinfo.value.code == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "Age validation passed.",
        "Country validation passed.",
        "Name validation passed.",
        "Processing payment request via QIWI.",
    ]


def test_underage_run_exits_before_dispatch(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["--age", "18"])

    assert excinfo.value.code == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["Age validation FAILED.", "Request did not reach a handler."]


def test_unknown_payment_returns_normally(capsys: pytest.CaptureFixture[str]) -> None:
    cli_module.main(["--payment", "Unknown"])

    out = capsys.readouterr().out.splitlines()
    assert out[-1] == "Request was not processed: no handler found."
    assert len(out) == 4


def test_configuration_error_exits_non_zero(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    def broken_build(request: Request, sink: DiagnosticSink) -> Orchestrator:
        orch = Orchestrator(request, sink)
        orch.add_handlers(object())
        return orch

    monkeypatch.setattr(cli_module, "build_orchestrator", broken_build)

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main([])

    assert excinfo.value.code == 1
    assert capsys.readouterr().out == "Error building the handler chain.\n"


def test_default_request_matches_reference_record() -> None:
    assert cli_module.default_request() == {
        "name": "John",
        "country": "Poland",
        "age": "25",
        "payment": "QIWI",
    }
