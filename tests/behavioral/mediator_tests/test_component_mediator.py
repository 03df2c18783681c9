import pytest
from behavioral.mediator.component_mediator import Component1, Component2, ConcreteMediator, MediatorError


@pytest.fixture
def wired():
    c1, c2 = Component1(), Component2()
    return c1, c2, ConcreteMediator(c1, c2)


@pytest.mark.unit
def test_mediator_attaches_itself_to_both_components(wired):
    c1, c2, mediator = wired
    assert c1.mediator is mediator and c2.mediator is mediator


@pytest.mark.unit
def test_event_a_triggers_c(wired):
    c1, _, mediator = wired
    c1.do_a()
    assert mediator.journal == [
        "Component 1 does A.",
        "Mediator reacts on A and triggers following operations:",
        "Component 2 does C.",
    ]


@pytest.mark.unit
def test_event_d_triggers_b_then_c(wired):
    _, c2, mediator = wired
    c2.do_d()
    assert mediator.journal == [
        "Component 2 does D.",
        "Mediator reacts on D and triggers following operations:",
        "Component 1 does B.",
        "Component 2 does C.",
    ]


@pytest.mark.unit
def test_events_b_and_c_are_ignored(wired):
    c1, c2, mediator = wired
    c1.do_b()
    c2.do_c()
    assert mediator.journal == ["Component 1 does B.", "Component 2 does C."]


@pytest.mark.unit
def test_component_without_mediator_raises():
    with pytest.raises(MediatorError):
        Component1().do_a()


@pytest.mark.unit
def test_failed_notify_leaves_no_journal_entry():
    c1 = Component1()
    with pytest.raises(MediatorError):
        c1.do_b()
    assert c1.journal == []


@pytest.mark.unit
def test_existing_component2_entries_survive_wiring():
    c1 = Component1(journal=["earlier 1"])
    c2 = Component2(journal=["earlier 2"])
    mediator = ConcreteMediator(c1, c2)
    assert mediator.journal == ["earlier 1", "earlier 2"]
    assert c2.journal is c1.journal
    c2.do_c()
    assert mediator.journal[-1] == "Component 2 does C."
