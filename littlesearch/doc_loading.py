import os
import warnings
from typing import Iterator

from bs4 import BeautifulSoup, XMLParsedAsHTMLWarning
from nltk.tokenize import WhitespaceTokenizer

from littlesearch.globals import HTML_SUFFIXES, SKIP_TAGS

# suppress BeautifulSoup XML warnings for xhtml documents
warnings.filterwarnings("ignore", category=XMLParsedAsHTMLWarning)

_tokenizer = WhitespaceTokenizer()


def read_text(path: str, extract_html: bool = False) -> str:
    """Returns the raw text of a document.

    With extract_html set, html files are reduced to their visible text first.
    """
    if path is None:
        raise FileNotFoundError("no document path given")
    with open(path, "r", encoding="utf-8", errors="ignore") as f:
        text = f.read()
    if extract_html and os.path.splitext(path)[1].lower() in HTML_SUFFIXES:
        return extract_text(text)
    return text


def extract_text(html_text: str) -> str:
    # visible text only, chunks joined by whitespace so words never fuse
    if not html_text:
        return ""
    soup = BeautifulSoup(html_text, "lxml")
    for tag in soup.find_all(list(SKIP_TAGS)):
        tag.decompose()
    return soup.get_text(" ")


def split_words(text: str) -> list[str]:
    return _tokenizer.tokenize(text)


def iter_words(path: str, extract_html: bool = False) -> Iterator[str]:
    """Yields every whitespace-delimited token of a document"""
    for word in split_words(read_text(path, extract_html)):
        yield word


def load_noise_words(path: str) -> set[str]:
    with open(path, "r", encoding="utf-8", errors="ignore") as f:
        return {word.lower() for word in split_words(f.read())}


def iter_document_paths(path: str) -> Iterator[str]:
    # one document path per line (any whitespace separates entries)
    with open(path, "r", encoding="utf-8", errors="ignore") as f:
        paths = split_words(f.read())
    for p in paths:
        yield p
