import os
import sys
import codecs
import logging
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv

from analyzer import FrequencyAnalyzer
from ranking import FrequencyRanker
from ordered_counter import Entry
from utils import DEFAULT_CHUNK_SIZE

QUIT_COMMAND = "q"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def _positive_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got '{raw}'.")
    if value <= 0:
        raise ValueError(f"{name} must be a positive integer, got {value}.")
    return value


def load_config() -> Dict[str, Any]:
    """
    Reads settings from the environment (and a .env file, if present).

    Raises:
        ValueError: If a numeric setting, the encoding or the log level is invalid.
    """
    load_dotenv()
    encoding = os.getenv("WORDFREQ_ENCODING", "utf-8")
    try:
        codecs.lookup(encoding)
    except LookupError:
        raise ValueError(f"WORDFREQ_ENCODING is not a valid encoding: '{encoding}'.")

    log_level_name = os.getenv("WORDFREQ_LOG_LEVEL", "WARNING").upper()
    log_level = logging.getLevelName(log_level_name)
    if not isinstance(log_level, int):
        raise ValueError(f"WORDFREQ_LOG_LEVEL is not a valid logging level: '{log_level_name}'.")

    return {
        "top_k": _positive_int("WORDFREQ_TOP_K", FrequencyRanker.DEFAULT_K),
        "chunk_size": _positive_int("WORDFREQ_CHUNK_SIZE", DEFAULT_CHUNK_SIZE),
        "encoding": encoding,
        "log_level": log_level,
        "show_progress": os.getenv("WORDFREQ_PROGRESS", "1").strip().lower() not in ("0", "false", "no"),
    }


def print_ranking(title: str, entries: List[Entry]) -> None:
    print(title)
    for position, entry in enumerate(entries, start=1):
        print(f"\t{position}) {entry.key}: {entry.count}")
    print()


def query_loop(ranker: FrequencyRanker) -> None:
    """
    Asks for words until the user enters 'q' (or closes the input).
    Each whitespace-separated word on a line is looked up on its own.
    """
    while True:
        try:
            line = input(f"Enter a word to get its frequency (enter '{QUIT_COMMAND}' to quit): ")
        except (KeyboardInterrupt, EOFError):
            print()
            return
        for word in line.split():
            if word == QUIT_COMMAND:
                return
            print(f"The word '{word}' appears {ranker.frequency(word)} times.\n")


def run_application(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv if argv is None else argv
    if len(argv) > 1:
        print("Error Usage Syntax: <exe>", file=sys.stderr)
        return 2

    try:
        config = load_config()
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(level=config["log_level"], format=LOG_FORMAT)

    try:
        input_path = input("Please enter the text file you would like to analyze: ").strip()
    except (KeyboardInterrupt, EOFError):
        print("\nNo input file given.", file=sys.stderr)
        return 1

    analyzer = FrequencyAnalyzer(chunk_size=config["chunk_size"],
                                 encoding=config["encoding"],
                                 show_progress=config["show_progress"])
    try:
        analyzer.analyze_file(input_path)
    except OSError as e:
        logger.debug("Failed to read input: %s", e)
        print("File error. Please ensure you entered the input file name correctly.", file=sys.stderr)
        return 1

    print(f"Total # of words: {analyzer.total_words}")
    print(f"Total # of unique words: {analyzer.unique_words}")

    ranker = FrequencyRanker(analyzer.entries(), analyzer.counter)
    query_loop(ranker)

    k = config["top_k"]
    print_ranking(f"{k} most frequently used words in this text: ", ranker.most_frequent(k))
    print_ranking(f"{k} least frequently used words in this text: ", ranker.least_frequent(k))

    try:
        output_path = input("If you would like to output the frequency analysis to a file, "
                            f"enter the file name, else enter '{QUIT_COMMAND}': ").strip()
    except (KeyboardInterrupt, EOFError):
        print()
        output_path = QUIT_COMMAND

    if output_path and output_path != QUIT_COMMAND:
        try:
            analyzer.write_report(output_path)
        except OSError as e:
            logger.debug("Failed to write report: %s", e)
            print("File error. Please ensure you entered the output file name correctly.", file=sys.stderr)
            return 1
        print("Content, arranged alphabetically, successfully outputted to the file!")

    return 0


if __name__ == "__main__":
    sys.exit(run_application())
