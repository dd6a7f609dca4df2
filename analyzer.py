import os
import logging
from typing import IO, Iterable, List, Optional

from tqdm import tqdm

from ordered_counter import Entry, OrderedCounter
from utils import DEFAULT_CHUNK_SIZE, is_word, tokenize, tokenize_stream

logger = logging.getLogger(__name__)

REPORT_HEADER = "WORD : FREQUENCY"


class _ProgressReader:
    """Wraps a text file so every read() advances a tqdm bar by the bytes consumed."""

    def __init__(self, file: IO[str], progress: tqdm, encoding: str) -> None:
        self._file = file
        self._progress = progress
        self._encoding = encoding

    def read(self, size: int = -1) -> str:
        chunk = self._file.read(size)
        self._progress.update(len(chunk.encode(self._encoding, errors="replace")))
        return chunk


class FrequencyAnalyzer:
    """
    Counts word frequencies in a text and exposes them in alphabetical order.

    Every token seen is counted towards `total_words`; only tokens made of
    letters and apostrophes are inserted into the ordered counter.

    Attributes:
        counter (OrderedCounter):
            The word -> count tree. Supplied by the caller or created empty.

        total_words (int):
            Number of tokens read, valid words or not.

        chunk_size (int):
            Number of characters read from a file at a time.

        encoding (str):
            Encoding used to read input files and write reports.
    """

    def __init__(self,
                 counter: Optional[OrderedCounter] = None,
                 chunk_size: int = DEFAULT_CHUNK_SIZE,
                 encoding: str = "utf-8",
                 show_progress: bool = True) -> None:
        if chunk_size <= 0:
            raise ValueError("chunk_size must be a positive integer.")
        self.counter: OrderedCounter = counter if counter is not None else OrderedCounter()
        self.total_words: int = 0
        self.chunk_size: int = chunk_size
        self.encoding: str = encoding
        self.show_progress: bool = show_progress
        self._entries: Optional[List[Entry]] = None

    @property
    def unique_words(self) -> int:
        return self.counter.size()

    def analyze_file(self, path: str) -> None:
        """
        Reads `path` and adds its words to the counter.

        Args:
            path (str): The text file to analyze.

        Raises:
            FileNotFoundError: If `path` does not exist.
            OSError: If the file cannot be opened or read.
        """
        if not os.path.isfile(path):
            raise FileNotFoundError(f"The specified file does not exist: {path}")

        logger.info("Analyzing '%s'...", path)
        file_size = os.path.getsize(path)
        before = self.total_words

        with open(path, "r", encoding=self.encoding, errors="replace") as file, \
                tqdm(total=file_size, unit="B", unit_scale=True,
                     desc="Reading", disable=not self.show_progress) as progress:
            self._consume(tokenize_stream(_ProgressReader(file, progress, self.encoding), self.chunk_size))

        if self.unique_words == 0:
            logger.warning("No valid words found in '%s'.", path)
        logger.info("Finished '%s': %d tokens, %d unique words so far.",
                    path, self.total_words - before, self.unique_words)

    def analyze_text(self, text: str) -> None:
        """Adds the words of an in-memory string to the counter."""
        self._consume(tokenize(text))

    def _consume(self, tokens: Iterable[str]) -> None:
        self._entries = None
        for token in tokens:
            self.total_words += 1
            if is_word(token):
                self.counter.insert_or_increment(token)

    def entries(self) -> List[Entry]:
        """
        Returns all entries in ascending alphabetical order.
        The list is built once and reused until more text is analyzed.
        """
        if self._entries is None:
            self._entries = self.counter.to_sorted_sequence()
        return self._entries

    def write_report(self, path: str) -> None:
        """
        Writes the alphabetical frequency report to `path`.

        The first line is the header `WORD : FREQUENCY`, followed by one
        `<word> : <count>` line per word.

        Raises:
            OSError: If the file cannot be created or written.
        """
        with open(path, "w", encoding=self.encoding) as out:
            out.write(REPORT_HEADER + "\n")
            for entry in self.entries():
                out.write(f"{entry.key} : {entry.count}\n")
        logger.info("Wrote %d entries to '%s'.", len(self.entries()), path)
