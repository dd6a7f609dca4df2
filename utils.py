import re
from typing import IO, Iterator

DELIMITERS = "-@!#$%&*()[]{}\".,;:~`?<>+=_/|"
DEFAULT_CHUNK_SIZE = 100000

_SPLIT_RE = re.compile(r"[\s" + re.escape(DELIMITERS) + r"]+")
_WORD_RE = re.compile(r"[A-Za-z']+")


def normalize(token: str) -> str:
    """Lowercases ASCII tokens; non-ASCII tokens are returned unchanged."""
    return token.lower() if token.isascii() else token


def tokenize(text: str) -> list[str]:
    """
    Split on whitespace and the delimiter set, then normalize case.
    Returns every token, including ones that are not words.
    """
    return [normalize(tok) for tok in _SPLIT_RE.split(text) if tok]


def is_word(token: str) -> bool:
    """True if the token is made only of ASCII letters and apostrophes."""
    return _WORD_RE.fullmatch(token) is not None


def tokenize_stream(file: IO[str], chunk_size: int = DEFAULT_CHUNK_SIZE) -> Iterator[str]:
    """
    Yields tokens from an open text file, reading `chunk_size` characters at a time.
    A token cut off at the end of a chunk is held back and joined with the next one.
    """
    if chunk_size <= 0:
        raise ValueError("chunk_size must be a positive integer.")

    pending = ""
    while True:
        chunk = file.read(chunk_size)
        if not chunk:
            break
        tokens = _SPLIT_RE.split(pending + chunk)
        # the last piece may continue in the next chunk
        pending = tokens.pop()
        for tok in tokens:
            if tok:
                yield normalize(tok)

    if pending:
        yield normalize(pending)
