"""Exception hierarchy for the precedent ranker."""


class JurisRankError(RuntimeError):
    pass


class LexiconLoadError(JurisRankError):
    pass


class CorpusLoadError(JurisRankError):
    pass


class RerankError(JurisRankError):
    """Raised by rerankers when the relevance judgment cannot be used."""


__all__ = ['JurisRankError', 'LexiconLoadError', 'CorpusLoadError', 'RerankError']
