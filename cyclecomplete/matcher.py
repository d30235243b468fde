"""Word matching predicates used by the buffer scanner."""


def is_word_char(char: str, extra_chars: str = "") -> bool:
    """Letters, digits and underscore, plus any host-configured extras."""
    return char.isalnum() or char == "_" or char in extra_chars


def match_fuzzy_forward(pattern: str, word: str) -> bool:
    """Check that every character of pattern occurs in word, in order.

    Both sides are case-folded. Each pattern character is searched for
    after the position of the previous hit, so the scan never moves back.
    """
    haystack = word.casefold()
    pos = 0
    for char in pattern.casefold():
        pos = haystack.find(char, pos)
        if pos < 0:
            return False
        pos += 1
    return True
