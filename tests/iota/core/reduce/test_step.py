import pytest

from iota.core.ast import App, Iota, K, S, Term, mk_app
from iota.core.pretty import unparse
from iota.core.reduce.step import is_normal, step
from iota.surface.parse import parse_term


@pytest.mark.parametrize(
    "x",
    [Iota(), S(), App(Iota(), Iota()), parse_term("*i*i*ii")],
)
def test_iota_expands_any_argument(x: Term) -> None:
    assert step(App(Iota(), x)) == App(App(x, S()), K())


def test_k_discards() -> None:
    a = App(Iota(), Iota())
    b = App(Iota(), App(Iota(), Iota()))
    assert step(mk_app(K(), a, b)) == a


def test_s_distributes() -> None:
    a, b, c = App(Iota(), Iota()), K(), S()
    assert step(mk_app(S(), a, b, c)) == App(App(a, c), App(b, c))


def test_root_rule_beats_reducible_argument() -> None:
    arg = App(Iota(), Iota())
    assert step(App(Iota(), arg)) == App(App(arg, S()), K())


def test_left_subterm_reduced_before_right() -> None:
    left = App(Iota(), Iota())
    right = App(Iota(), Iota())
    term = App(left, right)
    assert step(term) == App(App(App(Iota(), S()), K()), right)


def test_right_subterm_reduced_when_left_is_normal() -> None:
    term = App(S(), App(Iota(), Iota()))
    assert step(term) == App(S(), App(App(Iota(), S()), K()))


def test_reduces_deep_inside() -> None:
    term = App(App(S(), K()), App(K(), App(Iota(), K())))
    assert step(term) == App(App(S(), K()), App(K(), App(App(K(), S()), K())))


@pytest.mark.parametrize(
    "term",
    [Iota(), S(), K(), App(S(), K()), App(App(S(), K()), App(K(), K())), App(K(), S())],
)
def test_normal_forms_stay_normal(term: Term) -> None:
    assert step(term) is None
    assert step(term) is None
    assert is_normal(term)


def test_step_is_deterministic() -> None:
    term = parse_term("**i*ii*i*ii")
    assert step(term) == step(term)
    assert step(term) is not None


def test_reduces_deeply_nested_left_spine() -> None:
    term = parse_term("*" * 3000 + "i" * 3001)
    reduced = step(term)
    assert reduced is not None
    assert unparse(reduced) == "* " * 2999 + "* * i S K " + "i " * 2999


def test_deeply_nested_normal_form() -> None:
    term = S()
    for _ in range(5000):
        term = App(K(), term)
    assert step(term) is None
