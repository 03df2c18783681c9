"""
reversed_text_adapter.py — Object adapter over an incompatible interface.

The client only understands `Target.request()`. The Adaptee does something
useful but speaks backwards through `specific_request()`. The Adapter wraps
an Adaptee and translates its output into the Target interface.
"""

from typing import Optional

__all__ = ["Target", "Adaptee", "Adapter", "client_code"]


class Target:
    """Domain-specific interface used by the client code."""

    def request(self) -> str:
        return "Target: The default target's behavior."


class Adaptee:
    """Useful behavior behind an interface the client cannot use directly."""

    def specific_request(self) -> str:
        return ".eetpadA eht fo roivaheb laicepS"


class Adapter(Target):
    """
    Makes an Adaptee usable wherever a Target is expected.

    :param adaptee: Wrapped adaptee; a fresh one is created when omitted.
    """

    def __init__(self, adaptee: Optional[Adaptee] = None) -> None:
        self._adaptee = adaptee if adaptee is not None else Adaptee()

    def request(self) -> str:
        return f"Adapter: (TRANSLATED) {self._adaptee.specific_request()[::-1]}"


def client_code(target: Target) -> str:
    return target.request()


if __name__ == "__main__":
    print("Client: I can work just fine with the Target objects:")
    print(client_code(Target()))

    adaptee = Adaptee()
    print("\nClient: The Adaptee class has a weird interface. See, I don't understand it:")
    print(f"Adaptee: {adaptee.specific_request()}")

    print("\nClient: But I can work with it via the Adapter:")
    print(client_code(Adapter(adaptee)))
