import pytest

from jurisrank.retrieval import MAX_CANDIDATES, PrecedentScorer, free_text_boost, topic_boost
from jurisrank.retrieval.filters import apply_filters
from jurisrank.schemas import Precedent, SearchFilters


def P(**kw):
    return Precedent.model_validate(kw)


def free_text(term, **kw):
    return SearchFilters(search_term=term, **kw)


@pytest.mark.parametrize("record,expected", [
    (dict(tribunal="TST", tipoProcesso="IRR"), 500),
    (dict(tribunal="STF", tipoProcesso="ADI"), 500),
    (dict(tribunal="TRT8", tipoProcesso="IAC"), 450),
    (dict(tribunal="STF", tipoProcesso="Súmula"), 100),
    (dict(tribunal="TST", tipoProcesso="OJ"), 100),
    (dict(tribunal="STF", tipoProcesso="Acordao"), 50),
    (dict(tribunal="TST"), 50),
    (dict(tribunal="TRT8", tipoProcesso="RO"), 30),
    (dict(tribunal="STJ"), 5),
    (dict(tribunal="TRT3"), 0),
    (dict(), 0),
])
def test_free_text_boost(record, expected):
    assert free_text_boost(P(**record)) == expected


@pytest.mark.parametrize("record,expected", [
    (dict(tribunal="TST", tipoProcesso="IncJulgRREmbRep"), 500),
    (dict(tribunal="TST", tipoProcesso="IAC"), 500),
    (dict(tribunal="TST", category="IRR - Recursos Repetitivos"), 500),
    (dict(tribunal="STF", tipoProcesso="ADI"), 480),
    (dict(tribunal="STF", category="Repercussão Geral"), 480),
    (dict(tribunal="TRT3", orgao="TRT da 3a Regiao", tipoProcesso="IRDR"), 450),
    (dict(tribunal="STF", tipoProcesso="Súmula"), 80),
    (dict(tribunal="TST", tipoProcesso="Sumula"), 70),
    (dict(tribunal="TST", tipoProcesso="OJ"), 70),
    (dict(tribunal="STF"), 15),
    (dict(tribunal="STJ"), 12),
    (dict(tribunal="TST"), 10),
    (dict(tribunal="TRT3", orgao="TRT da 3a Regiao"), 0),
])
def test_topic_boost(record, expected):
    assert topic_boost(P(**record)) == expected


def test_apply_filters():
    records = [
        P(id="1", tribunal="TST", tipoProcesso="IncJulgRREmbRep"),
        P(id="2", tribunal="TST", tipoProcesso="Súmula"),
        P(id="3", tribunal="STF", tipoProcesso="RR"),
        P(id="4", tribunal="TST", tipoProcesso="IRR", status="Cancelada"),
        P(id="5", tribunal="TST"),
    ]
    assert [p.id for p in apply_filters(records, SearchFilters())] == ["1", "2", "3", "5"]
    assert [p.id for p in apply_filters(records, SearchFilters(tipo=["IRR"]))] == ["1", "3"]
    assert [p.id for p in apply_filters(records, SearchFilters(tipo=["IRR"], tribunal=["TST"]))] == ["1"]
    assert [p.id for p in apply_filters(records, SearchFilters(tipo=["Súmula"]))] == ["2"]


class TestTopicMode:
    def test_hierarchy_breaks_equal_text_scores(self):
        text = dict(keywords=["horas extras"], tese="Horas extras habituais integram o salario.")
        corpus = [
            P(id="stj", tribunal="STJ", tipoProcesso="Acordao", **text),
            P(id="stf", tribunal="STF", tipoProcesso="ADI", **text),
            P(id="tst", tribunal="TST", tipoProcesso="IRR", **text),
        ]
        out = PrecedentScorer().find_precedents(corpus, "Horas extras")
        assert [r.id for r in out] == ["tst", "stf", "stj"]
        assert out[0].score - out[1].score == 20
        assert out[1].score - out[2].score == 468

    def test_weighted_field_score(self):
        record = P(id="p", tribunal="TRT3", keywords=["prescricao"], tese="Prescricao quinquenal aplicavel")
        out = PrecedentScorer().find_precedents([record], "Prescrição")
        assert len(out) == 1
        # keywords 3x20, thesis 2x10, keyword stems 2x15, thesis stems 2x8
        assert out[0].score == 126
        assert out[0].similarity == pytest.approx(0.126)

    def test_context_terms_add_light_weight(self):
        record = P(id="p", tribunal="TRT3", tese="Atraso reiterado no pagamento")
        out = PrecedentScorer().find_precedents([record], "zzzz", "atraso reiterado salarios")
        assert [r.score for r in out] == [6]

    def test_unrelated_record_is_dropped_even_with_boost(self, horas_extras_corpus):
        corpus = [P(**r) for r in horas_extras_corpus]
        out = PrecedentScorer().find_precedents(corpus, "Horas Extras")
        assert [r.tribunal for r in out] == ["TST"]
        assert out[0].score > 500

    def test_keywords_as_delimited_string(self):
        record = P(id="p", tribunal="TRT3", keywords="sobrejornada; banco de horas")
        out = PrecedentScorer().find_precedents([record], "Horas extras")
        assert len(out) == 1 and out[0].score > 0

    def test_sparse_record_does_not_fail(self):
        out = PrecedentScorer().find_precedents([P(id="x", tribunal="TST")], "Horas extras")
        assert out == []

    def test_invalid_status_excluded(self):
        record = P(id="p", tribunal="TST", tipoProcesso="IRR", status="Revogada", keywords=["horas extras"])
        assert PrecedentScorer().find_precedents([record], "Horas extras") == []

    def test_stopword_only_topic(self):
        record = P(id="p", tribunal="TST", tese="de para com")
        assert PrecedentScorer().find_precedents([record], "de o a", "") == []

    def test_candidates_capped(self):
        corpus = [P(id=str(i), tribunal="TST", keywords=["ferias"]) for i in range(MAX_CANDIDATES + 5)]
        out = PrecedentScorer().find_precedents(corpus, "Férias")
        assert len(out) == MAX_CANDIDATES
        # stable for equal scores
        assert [r.id for r in out[:3]] == ["0", "1", "2"]


class TestFreeTextMode:
    def test_exact_terms(self):
        record = P(id="x", tribunal="TST", tipoProcesso="Súmula", tese="O vale transporte é devido.")
        out = PrecedentScorer().find_precedents([record], "ignored", filters=free_text("vale transporte"))
        assert [r.score for r in out] == [160]

    def test_minimum_match_gate(self):
        corpus = [
            P(id="two", tribunal="TST", tipoProcesso="Súmula", tese="O vale transporte é devido."),
            P(id="one", tribunal="TST", tipoProcesso="Súmula", tese="Empresa deve fornecer EPI."),
        ]
        out = PrecedentScorer().find_precedents(corpus, "", filters=free_text("vale transporte empresa publica"))
        assert [r.id for r in out] == ["two"]
        assert out[0].score == 160

    def test_stem_match(self):
        record = P(id="x", tribunal="STJ", tese="O pagamento das férias em dobro.")
        out = PrecedentScorer().find_precedents([record], "", filters=free_text("pagamentos"))
        assert [r.score for r in out] == [20]

    def test_phrase_synonym_bypasses_gate(self):
        record = P(id="x", tribunal="TRT3", tese="A sobrejornada habitual integra o salario")
        out = PrecedentScorer().find_precedents([record], "", filters=free_text("horas extras bancario gerente"))
        assert [r.score for r in out] == [20]

    def test_no_searchable_terms(self):
        record = P(id="x", tribunal="TST", tese="ir ao trabalho")
        assert PrecedentScorer().find_precedents([record], "Horas", filters=free_text("ir ao")) == []

    def test_filters_apply(self):
        corpus = [
            P(id="tst", tribunal="TST", tipoProcesso="IRR", tese="vale transporte"),
            P(id="stf", tribunal="STF", tipoProcesso="ADI", tese="vale transporte"),
        ]
        out = PrecedentScorer().find_precedents(corpus, "", filters=free_text("vale transporte", tribunal=["STF"]))
        assert [r.id for r in out] == ["stf"]

    def test_hierarchy_breaks_equal_boosts(self):
        text = dict(tese="vale transporte devido")
        corpus = [
            P(id="stf", tribunal="STF", tipoProcesso="ADI", **text),
            P(id="stj", tribunal="STJ", tipoProcesso="Acordao", **text),
            P(id="tst", tribunal="TST", tipoProcesso="IRR", **text),
        ]
        out = PrecedentScorer().find_precedents(corpus, "", filters=free_text("vale transporte"))
        assert [(r.id, r.score) for r in out] == [("tst", 560), ("stf", 560), ("stj", 65)]

    def test_long_search_term(self):
        record = P(id="x", tribunal="TST", tese="O vale transporte é devido.")
        out = PrecedentScorer().find_precedents([record], "", filters=free_text("vale transporte " * 50))
        assert [r.id for r in out] == ["x"]


def test_search_filters_accept_missing_values():
    f = SearchFilters.model_validate({"tipo": None, "tribunal": "TST", "searchTerm": None})
    assert f.tipo == [] and f.tribunal == ["TST"]
    assert not f.is_free_text
    assert SearchFilters.model_validate({"tipo": ["IRR", None]}).tipo == ["IRR"]


def test_partly_malformed_record_is_scored():
    record = P(id="a", tribunal="TST", tipoProcesso="IRR", keywords=["horas extras", None], tese="horas extras", titulo=7)
    out = PrecedentScorer().find_precedents([record], "Horas extras")
    assert [r.id for r in out] == ["a"]
