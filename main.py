import sys
from typing import List, TextIO

from littlesearch.globals import DEFAULT_REPORT_PATH
from littlesearch.index import LittleSearchEngine

USAGE = "usage: python main.py [--html] DOCS_FILE NOISE_WORDS_FILE [KW1 KW2]"


def _print_progress(doc_count: int, doc_file: str, kws: dict) -> None:
    if doc_count <= 3:
        total = sum(occ.frequency for occ in kws.values())
        print(
            f"\tIndexed document #{doc_count}: {doc_file} "
            f"({total} keywords, {len(kws)} unique)"
        )
    elif doc_count % 100 == 0:
        print(f"\tIndexed {doc_count} documents")


def build_index(
    docs_file: str, noise_words_file: str, extract_html: bool = False
) -> LittleSearchEngine:
    # prints for visiblity
    print("[1/2] Indexing documents...")
    print(f"\tNoise words file: {noise_words_file}")
    print(f"\tDocument list: {docs_file}")
    engine = LittleSearchEngine(extract_html=extract_html)
    engine.make_index(docs_file, noise_words_file, on_document=_print_progress)
    print(
        f"\tCompleted indexing {len(engine.documents)} documents "
        f"({len(engine.noise_words)} noise words loaded)\n"
    )

    print("[2/2] Computing analytics...")
    return engine


def _normalize_query(engine: LittleSearchEngine, word: str) -> str:
    # words that are not keywords can never be in the index
    keyword = engine.get_keyword(word)
    return keyword if keyword is not None else ""


def run_query(engine: LittleSearchEngine, kw1: str, kw2: str) -> List[str]:
    results = engine.top5search(
        _normalize_query(engine, kw1), _normalize_query(engine, kw2)
    )
    if not results:
        print(f"No documents match '{kw1}' or '{kw2}'")
    for rank, doc in enumerate(results, start=1):
        print(f"{rank}. {doc}")
    return results


def query_loop(engine: LittleSearchEngine, stream: TextIO | None = None) -> None:
    if stream is None:
        stream = sys.stdin
    print("Enter two keywords per line (empty line to quit)")
    for line in stream:
        words = line.split()
        if not words:
            break
        if len(words) != 2:
            print("Please enter exactly two keywords")
            continue
        run_query(engine, words[0], words[1])


def main(args: List[str]) -> int:
    extract_html = bool(args) and args[0] == "--html"
    if extract_html:
        args = args[1:]
    if len(args) not in (2, 4):
        print(USAGE, file=sys.stderr)
        return 2

    # prints for visiblity
    print("=" * 60)
    print("Little Search Engine: Keyword Index Builder")
    print("=" * 60 + "\n")

    try:
        engine = build_index(args[0], args[1], extract_html)
    except FileNotFoundError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    engine.stats().print_and_write(DEFAULT_REPORT_PATH)
    print(f"Analytics saved to: {DEFAULT_REPORT_PATH}")
    print("=" * 60)

    if len(args) == 4:
        run_query(engine, args[2], args[3])
    else:
        query_loop(engine)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
