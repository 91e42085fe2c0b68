"""Word tokenizer: runs of Unicode letters."""
from itertools import groupby
from typing import Iterator, List, Tuple

MIN_WORD_LENGTH = 2


def iter_tokens(text: str) -> Iterator[Tuple[int, str]]:
    """Yield (offset, word) for each run of letters in text.

    Anything that is not a letter (digits, punctuation, whitespace,
    combining marks) ends a run. Runs shorter than MIN_WORD_LENGTH are
    skipped.
    """
    for is_letter, group in groupby(enumerate(text), key=lambda item: item[1].isalpha()):
        if not is_letter:
            continue
        chars = list(group)
        if len(chars) < MIN_WORD_LENGTH:
            continue
        yield chars[0][0], ''.join(c for _, c in chars)


def tokenize(text: str) -> List[Tuple[int, str]]:
    return list(iter_tokens(text))


def has_digit(word: str) -> bool:
    return any(c.isdigit() for c in word)
