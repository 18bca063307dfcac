from typing import Iterable


def has_embedded_punctuation(word: str) -> bool:
    # true if a letter shows up anywhere after the first non-letter
    for i, c in enumerate(word):
        if not c.isalpha():
            return any(ch.isalpha() for ch in word[i + 1 :])
    return False


def strip_trailing(word: str) -> str:
    # cut at the first non-letter and lowercase what is left
    for i, c in enumerate(word):
        if not c.isalpha():
            return word[:i].lower()
    return word.lower()


class KeywordFilter:
    """Decides which raw words count as keywords.

    A keyword is a word that, after its trailing run of non-letters is cut
    off, is made only of letters and is not a noise word. Matching is case
    insensitive; keywords come back lower case.
    """

    def __init__(self, noise_words: Iterable[str] = ()):
        self.noise_words: set[str] = {w.lower() for w in noise_words}

    def is_noise_word(self, word: str) -> bool:
        return word in self.noise_words

    def get_keyword(self, word: str | None) -> str | None:
        if word is None:
            return None
        if has_embedded_punctuation(word):
            return None
        keyword = strip_trailing(word)
        if not keyword or self.is_noise_word(keyword):
            return None
        return keyword
