import pytest

from iota.combinators import I_TERM, K_TERM, S_TERM, SOURCES
from iota.core.ast import App, Iota, K, S, Term, mk_app
from iota.core.reduce import normalize, trace
from iota.surface.parse import parse_term


@pytest.mark.parametrize(
    "name, term", [("I", I_TERM), ("K", K_TERM), ("S", S_TERM)]
)
def test_sources_spell_the_terms(name: str, term: Term) -> None:
    assert parse_term(SOURCES[name]) == term


def test_identity() -> None:
    result = trace(App(I_TERM, Iota()))
    assert result.complete
    assert len(result) == 6
    assert result.last == Iota()


def test_constant() -> None:
    assert normalize(mk_app(K_TERM, K(), S()), max_steps=200) == K()


def test_substitution() -> None:
    # S K K x = x
    assert normalize(mk_app(S_TERM, K(), K(), Iota()), max_steps=200) == Iota()
