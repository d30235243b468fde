"""Buffer scanner: finds words completing a prefix around the cursor."""
import logging
from typing import Tuple

from cyclecomplete.candidates import CandidateStore, MatchType
from cyclecomplete.matcher import match_fuzzy_forward

logger = logging.getLogger(__name__)


def search_window(length: int, pos: int, distance_limit_kb: int) -> Tuple[int, int]:
    """Return the [start, end) range to scan, clamped to the buffer."""
    if distance_limit_kb > 0:
        radius = distance_limit_kb * 1024
        return max(pos - radius, 0), min(pos + radius, length)
    # no limit
    return 0, length


def find_words(buffer, prefix: str, pos: int, store: CandidateStore,
               config, fuzzy: bool = False) -> int:
    """Run one scan pass over the buffer. Returns the number of new candidates.

    The exact pass looks for the whole prefix at word starts. The fuzzy
    pass only anchors on the first prefix character and then checks each
    word with match_fuzzy_forward().
    """
    source_start, source_end = search_window(
        buffer.get_length(), pos, config.distance_limit_kb)

    if fuzzy:
        pattern = prefix[:1]
        match_type = MatchType.FUZZY_FORWARD
    else:
        pattern = prefix
        match_type = MatchType.EXACT

    num_matches = 0
    limit = config.candidates_limit
    search_from = source_start

    match_start = buffer.find_text(pattern, search_from, source_end,
                                   word_start_only=True, match_case=not fuzzy)
    while source_start <= match_start < source_end:
        match_end = buffer.word_end(match_start + len(pattern))
        match = buffer.get_text_range(match_start, match_end)
        if not fuzzy or match_fuzzy_forward(prefix, match):
            if store.upsert(match, abs(match_start - pos), match_type):
                num_matches += 1
        if num_matches == limit:
            break
        search_from = match_end
        match_start = buffer.find_text(pattern, search_from, source_end,
                                       word_start_only=True, match_case=not fuzzy)

    logger.debug("%s pass for %r in [%d, %d): %d new candidate(s)",
                 "Fuzzy" if fuzzy else "Exact", prefix,
                 source_start, source_end, num_matches)
    return num_matches


def find_candidates(buffer, prefix: str, word: str, pos: int, config) -> CandidateStore:
    """Collect, rank and finalize the candidates for prefix."""
    trailing = word if config.remove_trailing_word_part else prefix
    store = CandidateStore(current_word=word, trailing_text=trailing)

    # exact prefix matching first, fuzzy only if needed or wanted
    if not find_words(buffer, prefix, pos, store, config) \
            or not config.skip_fuzzy_if_exact:
        find_words(buffer, prefix, pos, store, config, fuzzy=True)

    if store:
        store.sort(config.sort_order, config.skip_fuzzy_if_exact)
        store.finalize()
    return store
