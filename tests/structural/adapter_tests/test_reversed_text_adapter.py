import pytest
from structural.adapter.reversed_text_adapter import Adaptee, Adapter, Target, client_code


@pytest.mark.unit
def test_client_works_with_plain_target():
    assert client_code(Target()) == "Target: The default target's behavior."


@pytest.mark.unit
def test_adapter_translates_adaptee_output():
    adapter = Adapter(Adaptee())
    assert isinstance(adapter, Target)
    assert client_code(adapter) == "Adapter: (TRANSLATED) Special behavior of the Adaptee."


@pytest.mark.unit
def test_adapter_uses_the_wrapped_adaptee():
    class LoudAdaptee(Adaptee):
        def specific_request(self): return "!IH"

    assert Adapter(LoudAdaptee()).request() == "Adapter: (TRANSLATED) HI!"
