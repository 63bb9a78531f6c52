"""
Algorithm selection.

`stem` is the single entry point most callers need: it picks the
stemmer for the named algorithm and stems one word with it.  The
stemmers keep no state between calls, so one instance per algorithm is
shared by every caller.
"""

from rulestem.lancaster import LancasterStemmer
from rulestem.porter import PorterStemmer
from rulestem.snowball import SnowballStemmer

ALGORITHMS = ('porter', 'snowball', 'lancaster')

_STEMMERS = {
    'porter': PorterStemmer(),
    'snowball': SnowballStemmer('english'),
    'lancaster': LancasterStemmer(),
}


def get_stemmer(algorithm='porter'):
    """Return the shared stemmer for `algorithm`.

    :raise ValueError: If the algorithm is not one of ALGORITHMS.
    """
    try:
        return _STEMMERS[algorithm.lower()]
    except (KeyError, AttributeError):
        raise ValueError(
            "Unknown stemming algorithm {0!r}; expected one of {1}".format(
                algorithm, ', '.join(ALGORITHMS)))


def stem(word, algorithm='porter'):
    """
    Stem a single word.

    The word is lower-cased first; words shorter than three characters
    come back unchanged apart from that.

        >>> stem('caresses')
        'caress'
        >>> stem('national', 'snowball')
        'nation'
        >>> stem('maximum', 'lancaster')
        'maxim'
    """
    stemmer = get_stemmer(algorithm)
    if not word:
        return word
    return stemmer.stem(word)
