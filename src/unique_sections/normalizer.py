"""Canonical comparison keys for section headers.

Two headers are considered the same section when their keys are equal. In
strict mode the key is the header itself. Otherwise the following are treated
as equivalent:

- All whitespace and punctuation (" SEE ALSO", "SEE,ALSO:")
- Case ("Name", "NAME")
- Sets of words separated by AND ("COPYRIGHT AND LICENSE", "LICENSE AND COPYRIGHT")
- Plurals of single-word headers ("AUTHOR", "AUTHORS")

The rules compose, so "Authors; and Contributors" matches " CONTRIBUTORS AND AUTHOR".
A multi-word header such as "DISCLAIMER OF WARRANTY" is never singularized.

Singular forms come from the inflect library. Rare irregular plurals may not
resolve the way a reader expects; hopefully nobody needs a section called OCTOPI.
"""

import re

import inflect

from .constants import AND_SEPARATOR

NON_WORD_RUN = re.compile(r"\W+")
NON_WORD = re.compile(r"\W")
AND_DELIMITER = re.compile(re.escape(AND_SEPARATOR), re.IGNORECASE)

# Shared inflection engine, read-only after construction
inflector = inflect.engine()


def _singular_candidate(word: str) -> str | None:
    # singular_noun strips a trailing S from any word, so only trust a
    # candidate that pluralizes back to the word it came from
    singular = inflector.singular_noun(word)
    if singular is False:
        return None
    singular = singular.upper()
    if not singular or inflector.plural_noun(singular).upper() != word:
        return None
    return singular


def singularize(word: str) -> str:
    """Return the singular form of a single upper-case word.

    The result is a fixed point: singularizing it again returns it unchanged.

    Args:
        word: A single token, no whitespace

    Returns:
        The singular form, or the word unchanged if it is already singular

    Example:
        >>> singularize("GLASSES")
        'GLASS'
        >>> singularize("GLASS")
        'GLASS'
    """
    if not word:
        return word
    path = [word]
    while True:
        singular = _singular_candidate(path[-1])
        if singular is None:
            return path[-1]
        if singular in path:
            # Forms that singularize into each other share their smallest member
            return min(path[path.index(singular) :])
        path.append(singular)


def _segment_key(segment: str) -> str:
    # Phrases keep their plurals intact
    if NON_WORD.search(segment):
        return segment
    return singularize(segment)


def normalize(header: str, strict: bool = False) -> str:
    """Compute the canonical key of a header.

    Args:
        header: Raw header text
        strict: If True, only identical headers share a key

    Returns:
        Canonical key used to group equivalent headers
    """
    if strict:
        return header

    text = NON_WORD_RUN.sub(" ", header).strip().upper()
    segments = [_segment_key(s) for s in AND_DELIMITER.split(text)]
    return AND_SEPARATOR.join(sorted(segments))
