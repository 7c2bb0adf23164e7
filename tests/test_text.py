import pytest

from jurisrank.text import expand_phrase, expand_synonyms, normalize, remove_accents, stem, tokenize


@pytest.mark.parametrize("raw,expected", [
    ("Rescisão Indireta", "rescisao indireta"),
    ("  Horas-Extras!!  ", "horas extras"),
    ("Súmula nº 338 do TST", "sumula n 338 do tst"),
    ("AÇÃO\tCIVIL\n PÚBLICA", "acao civil publica"),
])
def test_normalize(raw, expected):
    assert normalize(raw) == expected


@pytest.mark.parametrize("raw", ["Equiparação Salarial", "  ", "FGTS (40%)", "já é", "orientação jurisprudencial 394"])
def test_normalize_idempotent(raw):
    once = normalize(raw)
    assert normalize(once) == once


def test_normalize_odd_input():
    assert normalize("") == ""
    assert normalize(None) == ""
    assert normalize(42) == ""
    assert remove_accents(None) == ""


def test_tokenize_drops_short_tokens_and_stopwords(lexicon):
    assert tokenize("A rescisão do contrato de trabalho", 3, lexicon.stopwords) == ["rescisao", "contrato", "trabalho"]
    assert tokenize("FGTS e IR", 2, lexicon.stopwords) == ["fgts", "ir"]
    assert tokenize("ferias ferias", 3) == ["ferias", "ferias"]
    assert tokenize(None) == []


@pytest.mark.parametrize("word,expected", [
    ("horas", "hora"),
    ("Férias", "feria"),
    ("jornadas", "jornada"),
    ("pagamentos", "paga"),
    ("indenização", "indeniza"),
    ("estabilidade", "estabili"),
    ("trabalhador", "trabalhad"),
])
def test_stem(word, expected):
    assert stem(word) == expected


def test_stem_leaves_short_words():
    assert stem("ou") == "ou"
    assert stem("") == ""


def test_expand_synonyms_adds_whole_entry(lexicon):
    out = expand_synonyms(["horas"], lexicon.synonyms)
    for expected in ("horas", "horas extras", "sobrejornada", "hora extra", "horas in itinere", "tempo de deslocamento"):
        assert expected in out
    assert out == sorted(set(out))


def test_expand_synonyms_matches_synonym_side(lexicon):
    out = expand_synonyms(["gravidez"], lexicon.synonyms)
    assert "gestante" in out
    assert "licenca maternidade" in out


def test_expand_synonyms_is_one_hop(lexicon):
    out = expand_synonyms(["dispensa"], lexicon.synonyms)
    assert "rescisao" in out
    assert "falta grave" in out
    # reachable only through a second hop (falta grave -> rescisao indireta)
    assert "falta grave do empregador" not in out


def test_expand_synonyms_order_independent(lexicon):
    a = expand_synonyms(["ferias", "fgts"], lexicon.synonyms)
    b = expand_synonyms(["fgts", "ferias"], lexicon.synonyms)
    assert a == b


def test_expand_phrase(lexicon):
    out = expand_phrase("horas extras habituais", lexicon.synonyms)
    assert "sobrejornada" in out
    assert "tempo de deslocamento" not in out
    both = expand_phrase("horas", lexicon.synonyms)
    assert "horas extras" in both and "horas in itinere" in both


def test_expand_phrase_without_entry(lexicon):
    assert expand_phrase("pagamento de salario", lexicon.synonyms) == []
    assert expand_phrase("", lexicon.synonyms) == []
