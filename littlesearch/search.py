from typing import TYPE_CHECKING

from littlesearch.globals import MAX_RESULTS

if TYPE_CHECKING:
    from littlesearch.index import Occurrence


def merge_occurrences(
    occs1: list["Occurrence"], occs2: list["Occurrence"]
) -> list["Occurrence"]:
    """Unions two occurrence lists, keeping the larger occurrence per document.

    Survivors of the first list come first in their original order, followed
    by the occurrences taken from the second list in its order. A second-list
    occurrence only replaces a first-list one when its frequency is strictly
    larger, so ties go to the first keyword.
    """
    best: dict[str, "Occurrence"] = {}
    primary: list["Occurrence"] = []
    for occ in occs1:
        primary.append(occ)
        best[occ.document] = occ

    secondary: list["Occurrence"] = []
    for occ in occs2:
        current = best.get(occ.document)
        if current is not None and current.frequency >= occ.frequency:
            continue
        secondary.append(occ)
        best[occ.document] = occ

    # drop first-list entries that were beaten by the second list
    primary = [occ for occ in primary if best[occ.document] is occ]
    return primary + secondary


def rank_documents(candidates: list["Occurrence"]) -> list[str]:
    # stable insertion: each doc goes before the first strictly lower frequency
    ranked: list["Occurrence"] = []
    for occ in candidates:
        pos = len(ranked)
        for i, other in enumerate(ranked):
            if other.frequency < occ.frequency:
                pos = i
                break
        ranked.insert(pos, occ)
    return [occ.document for occ in ranked]


def top5_search(
    keywords_index: dict[str, list["Occurrence"]],
    kw1: str,
    kw2: str,
    limit: int = MAX_RESULTS,
) -> list[str]:
    # unknown keywords count as empty occurrence lists
    occs1 = keywords_index.get(kw1, [])
    occs2 = keywords_index.get(kw2, [])
    candidates = merge_occurrences(occs1, occs2)
    if not candidates:
        return []
    return rank_documents(candidates)[:limit]
