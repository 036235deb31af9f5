import pytest
from shell import ShellError
from prompts import OperatorAbort, RetryLimitExceeded
from pipeline import run_pipeline, STEPS
from steps.result import StepResult, StepStatus

ADAPTERS = [
    {"ifIndex": 7, "Name": "Ethernet0", "InterfaceDescription": "vmxnet3",
     "Status": "Up", "Virtual": False},
]
ZONES = [{"Id": "UTC", "DisplayName": "(UTC) Coordinated Universal Time"}]


def _host(shell):
    return (shell.on("Get-NetAdapter", ADAPTERS)
                 .on("MachineName", "WIN-ABC\n")
                 .on("Get-WindowsFeature", "False\n")
                 .on("Get-TimeZone -ListAvailable", ZONES))


def test_full_run_in_order(ctx, shell, settings, operator):
    _host(shell)
    op = operator(["y", "7", "192.168.1.10", "255.255.255.0", "192.168.1.1",
                   "192.168.1.2", "WEB-01", "1"])
    results = run_pipeline(ctx, op, shell, settings)
    assert [r.step for r in results] == [title for title, _ in STEPS]
    assert all(r.status is StepStatus.OK for r in results)
    assert shell.commands[-1][-1] == "192.168.1.1"
    assert op.said("info", "Step 1/5: Static IP configuration")

def test_no_adapters_aborts_remaining_steps(ctx, shell, settings, operator):
    shell.on("Get-NetAdapter", [])
    op = operator(["y"])
    results = run_pipeline(ctx, op, shell, settings)
    assert len(results) == 1
    assert results[0].status is StepStatus.FATAL
    assert not shell.ran("Rename-Computer")
    assert not shell.ran("Set-TimeZone")
    assert not shell.ran("Enable-PSRemoting")
    assert op.said("error", "Setup aborted")

def test_unsupported_mask_aborts_remaining_steps(ctx, shell, settings, operator):
    _host(shell)
    op = operator(["y", "7", "192.168.1.10", "255.255.0.255", "192.168.1.1", "192.168.1.2"])
    results = run_pipeline(ctx, op, shell, settings)
    assert len(results) == 1
    assert results[0].message == "Unsupported subnet mask: 255.255.0.255"
    assert not shell.ran("Rename-Computer")

def test_partial_apply_continues_with_later_steps(ctx, shell, settings, operator):
    _host(shell).on("Set-DnsClientServerAddress", ShellError("cmd", "DNS down", 1))
    op = operator(["y", "7", "192.168.1.10", "255.255.255.0", "192.168.1.1",
                   "192.168.1.2", "WEB-01", "1"])
    results = run_pipeline(ctx, op, shell, settings)
    assert [r.status for r in results] == [
        StepStatus.FAILED, StepStatus.OK, StepStatus.OK, StepStatus.OK, StepStatus.OK,
    ]
    assert shell.ran("Rename-Computer")
    assert shell.ran("Set-TimeZone -Id 'UTC'")
    assert shell.commands[-1][-1] == "192.168.1.1"

def test_declined_static_ip_pings_fallback(ctx, shell, settings, operator):
    _host(shell)
    results = run_pipeline(ctx, operator(["n", "WEB-01", "1"]), shell, settings)
    assert results[0].status is StepStatus.SKIPPED
    assert shell.commands[-1][-1] == "8.8.8.8"

def _raising(exc):
    def step(ctx, operator, shell, settings):
        raise exc
    return step

def _ok(ctx, operator, shell, settings):
    return StepResult.ok("done")

@pytest.mark.parametrize("exc, fragment", [
    (OperatorAbort("Hostname"), "Aborted by operator"),
    (RetryLimitExceeded("Hostname", 3), "Hostname"),
    (RuntimeError("boom"), "Unexpected error: boom"),
])
def test_step_exceptions_become_fatal(ctx, shell, settings, operator, exc, fragment):
    steps = [("First", _raising(exc)), ("Second", _ok)]
    results = run_pipeline(ctx, operator([]), shell, settings, steps=steps)
    assert len(results) == 1
    assert results[0].step == "First"
    assert results[0].status is StepStatus.FATAL
    assert fragment in results[0].message

def test_failed_step_does_not_stop_run(ctx, shell, settings, operator):
    def failing(ctx, operator, shell, settings):
        return StepResult.failed("nope")
    op = operator([])
    results = run_pipeline(ctx, op, shell, settings, steps=[("A", failing), ("B", _ok)])
    assert [r.step for r in results] == ["A", "B"]
    assert op.said("warning", "nope")
    assert op.said("success", "done")
