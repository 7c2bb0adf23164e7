"""
Run a precedent search against a local corpus JSON and print the ranking.
Shows the raw lexical candidates with --explain (no LLM, no cache).
"""
import sys
import json
import argparse
import logging

from jurisrank.corpus import JsonCorpusStore
from jurisrank.engine import PrecedentSearchEngine
from jurisrank.errors import JurisRankError
from jurisrank.lexicon import default_lexicon, load_lexicon
from jurisrank.retrieval import PrecedentScorer
from jurisrank.schemas import SearchFilters

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("search_precedents")

def main():
    parser = argparse.ArgumentParser(description="Search precedents in a corpus JSON file")
    parser.add_argument("corpus", type=str, help="Path to the corpus JSON")
    parser.add_argument("topic", type=str, nargs="?", default="", help="Topic title")
    parser.add_argument("--context", type=str, default="", help="Narrative summary for the topic")
    parser.add_argument("--query", type=str, help="Free-text query (switches to free-text mode)")
    parser.add_argument("--tipo", action="append", default=[], help="Allowed type (repeatable, IRR = any binding type)")
    parser.add_argument("--tribunal", action="append", default=[], help="Allowed court (repeatable)")
    parser.add_argument("--lexicon", type=str, help="Custom lexicon YAML")
    parser.add_argument("--explain", action="store_true", help="Print all lexical candidates with scores")
    args = parser.parse_args()

    try:
        lexicon = load_lexicon(args.lexicon) if args.lexicon else default_lexicon()
        store = JsonCorpusStore(args.corpus)
        filters = SearchFilters(tipo=args.tipo, tribunal=args.tribunal, search_term=args.query)
        if args.explain:
            ranked = PrecedentScorer(lexicon).find_precedents(store.load(), args.topic, args.context, filters)
            for r in ranked:
                print(f"{r.score:5d}  {r.tribunal or '-':5} {r.tipo_processo or '-':10} {r.numero or ''}  {(r.titulo or r.holding())[:70]}")
            return
        results = PrecedentSearchEngine(store, lexicon=lexicon).search(args.topic, args.context, filters)
        print(json.dumps([r.public_dict() for r in results], indent=2, ensure_ascii=False))
    except JurisRankError as e:
        logger.error(f"Search failed: {e}")
        sys.exit(1)

if __name__ == "__main__":
    main()
