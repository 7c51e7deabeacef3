import logging
import os
import threading
from typing import Any, Dict, Optional

from fastapi import FastAPI, HTTPException

from trie import Trie
from word_loader import build_trie, load_words_from_file

WORDS_FILE = os.environ.get("TRIE_WORDS_FILE")
HOST = os.environ.get("TRIE_API_HOST", "0.0.0.0")
PORT = int(os.environ.get("TRIE_API_PORT", "8000"))
MAX_PREFIX_LENGTH = 1000

logger = logging.getLogger(__name__)

app = FastAPI(title="Trie Autocomplete API", version="0.1.0")
# the trie is not thread-safe and sync endpoints run in a threadpool
app.state.lock = threading.Lock()


def get_trie() -> Trie:
    if not hasattr(app.state, "trie"):
        app.state.trie = Trie()
    return app.state.trie


@app.on_event("startup")
def load_words():
    # a missing or unreadable words file aborts startup
    if WORDS_FILE:
        app.state.trie = build_trie(load_words_from_file(WORDS_FILE))


def pairs_to_json(pairs):
    return [{"word": word, "payload": payload} for word, payload in sorted(pairs, key=lambda p: p[0])]


@app.get("/health")
def health():
    return {"ok": True}


@app.get("/api/words")
def all_words():
    with app.state.lock:
        pairs = get_trie().get_all_words()
    return {"count": len(pairs), "words": pairs_to_json(pairs)}


@app.get("/api/words/{word}")
def search_word(word: str):
    with app.state.lock:
        payload, found = get_trie().search(word)
    return {"word": word, "found": found, "payload": payload}


@app.put("/api/words/{word}")
def insert_word(word: str, data: Optional[Dict[str, Any]] = None):
    payload = (data or {}).get("payload")
    with app.state.lock:
        get_trie().insert(word, payload)
    logger.debug(f"Inserted {word!r}")
    return {"ok": True, "word": word}


@app.delete("/api/words/{word}")
def delete_word(word: str):
    with app.state.lock:
        deleted = get_trie().delete(word)
    return {"word": word, "deleted": deleted}


@app.get("/api/autocomplete")
def autocomplete(prefix: str = "", limit: int = 50):
    if len(prefix) > MAX_PREFIX_LENGTH:
        raise HTTPException(status_code=400, detail=f"prefix longer than {MAX_PREFIX_LENGTH} characters")
    limit = max(1, min(limit, 500))
    with app.state.lock:
        pairs = get_trie().autocomplete(prefix)
    return {"prefix": prefix, "results": pairs_to_json(pairs)[:limit]}


@app.get("/api/count")
def count():
    with app.state.lock:
        return {"count": get_trie().count_words()}


@app.post("/api/clear")
def clear():
    with app.state.lock:
        get_trie().clear()
    logger.info("Trie cleared")
    return {"ok": True}


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(level=os.environ.get("TRIE_LOG_LEVEL", "INFO").upper(),
                        format='%(asctime)s %(levelname)s: %(message)s')
    uvicorn.run(app, host=HOST, port=PORT)
