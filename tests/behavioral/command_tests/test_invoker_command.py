import pytest
from behavioral.command.invoker_command import Command, ComplexCommand, Invoker, Receiver, SimpleCommand


class CountingCommand(Command):
    def __init__(self): super().__init__("Counting"); self.calls = 0

    def execute(self):
        self.calls += 1
        return f"count={self.calls}"


@pytest.mark.unit
def test_simple_command_acts_on_its_own():
    assert SimpleCommand("Say Hi!").execute().endswith("(Say Hi!)")


@pytest.mark.unit
def test_complex_command_delegates_to_receiver_in_order():
    receiver = Receiver()
    out = ComplexCommand(receiver, "Send email", "Save report").execute()
    assert receiver.journal == [
        "Receiver: Working on (Send email).",
        "Receiver: Also working on (Save report).",
    ]
    assert out.splitlines()[1:] == receiver.journal


@pytest.mark.unit
def test_invoker_runs_start_then_work_then_finish():
    start, finish = CountingCommand(), CountingCommand()
    inv = Invoker()
    inv.set_on_start(start)
    inv.set_on_finish(finish)
    trace = inv.do_something_important()
    assert start.calls == 1 and finish.calls == 1
    assert trace.index("count=1") < trace.index("Invoker: ...doing something really important...")
    assert trace[-1] == "count=1"


@pytest.mark.unit
def test_invoker_without_commands_still_does_its_work():
    trace = Invoker().do_something_important()
    assert trace == [
        "Invoker: Does anybody want something done before I begin?",
        "Invoker: ...doing something really important...",
        "Invoker: Does anybody want something done after I finish?",
    ]
