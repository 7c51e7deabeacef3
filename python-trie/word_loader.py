import logging
from pathlib import Path
from typing import Any, Callable, Iterable, Iterator, List, Optional, TextIO

from trie import Trie

logger = logging.getLogger(__name__)


def split_words(text: str) -> List[str]:
    """Split text into whitespace-delimited words, dropping empty fields."""
    return text.split()


def iter_words(stream: TextIO) -> Iterator[str]:
    """Yield words from a text stream one line at a time."""
    for line in stream:
        yield from split_words(line)


def load_words_from_file(path, encoding: str = "utf-8") -> List[str]:
    """
    Read every whitespace-delimited word from a file.

    Args:
        path: Path of the words file.
        encoding: Text encoding of the file.

    Returns:
        list[str]: Words in file order, duplicates kept.

    Raises:
        OSError: If the file cannot be opened or read.
        UnicodeDecodeError: If the file is not valid text in `encoding`.
    """
    path = Path(path)
    try:
        with path.open("r", encoding=encoding) as f:
            words = list(iter_words(f))
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Could not load words from {path}: {e}")
        raise
    logger.info(f"Loaded {len(words)} words from {path}")
    return words
def build_trie(words: Iterable[str], payload: Any = None, trie: Optional[Trie] = None,
               payload_for: Optional[Callable[[str], Any]] = None) -> Trie:
    """
    Insert words into a trie.

    Args:
        words: Words to insert.
        payload: Value stored with every word, stored as is.
        trie: Existing trie to fill. A new one is created when omitted.
        payload_for: Callable taking a word and returning its payload.
            Takes precedence over `payload` when given.

    Returns:
        Trie: The filled trie.
    """
    if trie is None:
        trie = Trie()
    inserted = 0
    for word in words:
        trie.insert(word, payload_for(word) if payload_for is not None else payload)
        inserted += 1
    logger.info(f"Inserted {inserted} words ({trie.count_words()} distinct)")
    return trie
