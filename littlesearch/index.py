import os
from dataclasses import dataclass
from typing import Callable, Iterable

from littlesearch.doc_loading import iter_document_paths, iter_words, load_noise_words
from littlesearch.globals import MAX_RESULTS
from littlesearch.keywords import KeywordFilter
from littlesearch.search import top5_search


@dataclass
class Occurrence:
    # one occurrence: keyword's frequency in a single document
    document: str
    frequency: int

    def __str__(self) -> str:
        return f"({self.document},{self.frequency})"


def insert_last_occurrence(occs: list[Occurrence]) -> list[int] | None:
    """Moves the last occurrence into place in a list sorted by descending frequency.

    occs[0 .. n-2] must already be in order. The spot is found by binary search
    over that prefix; the new occurrence lands ahead of any equal-frequency
    entries it stops on. Returns the midpoints the search visited, or None when
    the list has fewer than two occurrences.
    """
    if len(occs) < 2:
        return None
    mids: list[int] = []
    low = 0
    high = len(occs) - 2
    target = occs[-1].frequency
    while low <= high:
        mid = (low + high) // 2
        mids.append(mid)
        if occs[mid].frequency > target:
            low = mid + 1
        elif occs[mid].frequency < target:
            high = mid - 1
        else:
            break

    last = occs.pop()
    mid = mids[-1]
    if target >= occs[mid].frequency:
        occs.insert(mid, last)
    else:
        occs.insert(mid + 1, last)
    return mids


@dataclass
class IndexStats:
    num_docs: int
    num_keywords: int
    num_occurrences: int
    num_noise_words: int

    def print_and_write(self, path: str) -> None:
        analytics = (
            f"Index analytics:\n"
            f"  Number of indexed documents: {self.num_docs}\n"
            f"  Number of unique keywords:   {self.num_keywords}\n"
            f"  Total keyword occurrences:   {self.num_occurrences}\n"
            f"  Noise words loaded:          {self.num_noise_words}\n"
        )
        print(analytics)
        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(analytics)


class LittleSearchEngine:
    # keyword index: keyword (str) -> occurrences sorted by descending frequency
    def __init__(self, noise_words: Iterable[str] = (), extract_html: bool = False):
        self.keywords_index: dict[str, list[Occurrence]] = {}
        self.keyword_filter = KeywordFilter(noise_words)
        self.extract_html = extract_html
        self.documents: list[str] = []

    @property
    def noise_words(self) -> set[str]:
        return self.keyword_filter.noise_words

    def set_noise_words(self, noise_words: Iterable[str]) -> None:
        # the noise words are fixed once the first document is indexed
        if self.documents:
            raise RuntimeError("noise words cannot change after indexing has started")
        self.keyword_filter = KeywordFilter(noise_words)

    def get_keyword(self, word: str | None) -> str | None:
        return self.keyword_filter.get_keyword(word)

    def make_index(
        self,
        docs_file: str,
        noise_words_file: str,
        on_document: Callable[[int, str, dict[str, Occurrence]], None] | None = None,
    ) -> None:
        # noise words first, then every listed document in order
        self.set_noise_words(load_noise_words(noise_words_file))
        for doc_count, doc_file in enumerate(iter_document_paths(docs_file), start=1):
            kws = self.index_document(doc_file)
            if on_document is not None:
                on_document(doc_count, doc_file, kws)

    def index_document(self, doc_file: str) -> dict[str, Occurrence]:
        kws = self.load_keywords(doc_file)
        self.merge_keywords(kws)
        self.documents.append(doc_file)
        return kws

    def load_keywords(self, doc_file: str | None) -> dict[str, Occurrence]:
        if doc_file is None:
            raise FileNotFoundError("no document path given")
        kws: dict[str, Occurrence] = {}
        for word in iter_words(doc_file, self.extract_html):
            keyword = self.get_keyword(word)
            if keyword is None:
                continue
            if keyword in kws:
                kws[keyword].frequency += 1
            else:
                kws[keyword] = Occurrence(doc_file, 1)
        return kws

    def merge_keywords(self, kws: dict[str, Occurrence]) -> None:
        for keyword, occurrence in kws.items():
            occs = self.keywords_index.get(keyword)
            if occs is None:
                self.keywords_index[keyword] = [occurrence]
                continue
            occs.append(occurrence)
            insert_last_occurrence(occs)

    def get_occurrences(self, keyword: str) -> list[Occurrence]:
        # copy so callers cannot reorder the index
        return list(self.keywords_index.get(keyword, []))

    def top5search(self, kw1: str, kw2: str) -> list[str]:
        return top5_search(self.keywords_index, kw1, kw2, MAX_RESULTS)

    def stats(self) -> IndexStats:
        return IndexStats(
            num_docs=len(self.documents),
            num_keywords=len(self.keywords_index),
            num_occurrences=sum(len(occs) for occs in self.keywords_index.values()),
            num_noise_words=len(self.noise_words),
        )

    def __len__(self) -> int:
        return len(self.keywords_index)
