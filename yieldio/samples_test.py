from .drain import drain
from .drain import take
from .exceptions import ComputationError
from .samples import accumulate
from .samples import alphanumerics
from .samples import echo
from .samples import relay
from .step import Step


def test_alphanumerics_spell_out_characters():
    assert "".join(map(chr, drain(alphanumerics()))) == (
        "0123456789"
        "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
        "abcdefghijklmnopqrstuvwxyz"
    )


def test_echo_doubles_sent_values():
    computation = echo()
    assert computation.advance() == Step(2, False)
    assert computation.advance(5) == Step(10, False)
    assert computation.advance() == Step(10, False)


def test_accumulate_recovers_from_injected_errors():
    computation = accumulate()
    assert computation.advance() == Step(0, False)
    assert computation.advance(4) == Step(4, False)
    assert computation.inject_error(ComputationError("nope")) == Step(
        "error: nope", False
    )
    assert computation.advance(1) == Step(5, False)


def test_relay_yields_what_countdown_returned():
    assert drain(relay(2)) == [2, 1, "liftoff"]


def test_echo_keeps_last_value_when_nothing_is_sent():
    assert take(echo(3), 2) == [6, 6]
