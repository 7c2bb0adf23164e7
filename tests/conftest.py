import os
import sys

import pytest

# Ensure the `src/` directory is on sys.path so we can import `jurisrank` package
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
SRC_DIR = os.path.join(PROJECT_ROOT, "src")
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)


class FakeClock:
    def __init__(self, start: float = 1_000.0):
        self.t = start

    def __call__(self) -> float:
        return self.t

    def advance(self, seconds: float) -> None:
        self.t += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def lexicon():
    from jurisrank.lexicon import default_lexicon
    return default_lexicon()


@pytest.fixture
def horas_extras_corpus():
    return [
        {
            "tribunal": "TST",
            "tipoProcesso": "IRR",
            "numero": "10",
            "keywords": ["horas extras"],
            "tese": "Horas extras habituais integram a remuneracao para todos os efeitos.",
        },
        {
            "tribunal": "STJ",
            "tipoProcesso": "Acordao",
            "numero": "77",
            "keywords": ["dano moral"],
            "tese": "Dano moral. Indenizacao devida em caso de ofensa a honra do trabalhador.",
        },
    ]
