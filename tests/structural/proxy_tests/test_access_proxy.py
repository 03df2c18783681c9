import logging

import pytest
from structural.proxy.access_proxy import Proxy, RealSubject, Subject, client_code


@pytest.mark.unit
def test_proxy_forwards_and_logs_access(caplog):
    proxy = Proxy(RealSubject())
    assert isinstance(proxy, Subject)
    with caplog.at_level(logging.INFO, logger="structural.proxy.access_proxy"):
        assert client_code(proxy) == "RealSubject: Handling request."
    assert len(proxy.access_log) == 1
    assert proxy.real_subject.calls == 1
    assert "Logging the time of request" in caplog.text


@pytest.mark.unit
def test_proxy_keeps_its_own_copy_of_the_subject():
    real = RealSubject()
    proxy = Proxy(real)
    proxy.request()
    assert proxy.real_subject is not real
    assert real.calls == 0


@pytest.mark.unit
def test_denied_access_does_not_reach_real_subject():
    proxy = Proxy(RealSubject(), access_check=lambda: False)
    assert proxy.request() is None
    assert proxy.real_subject.calls == 0
    assert proxy.access_log == []
