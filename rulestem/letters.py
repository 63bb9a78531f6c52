"""
Letter classification shared by the suffix-stripping stemmers.

A consonant is a letter other than A, E, I, O or U, and other than Y
in vowel position.  Y is a consonant when it starts the word or when it
follows a consonant; otherwise it is a vowel.  The class of a letter only
ever depends on the letter before it, so a word is classified left to
right without any look-ahead.

The Snowball stemmer writes consonant-Y as an upper case ``Y`` while it
works; that marker is always a consonant.

Any other character (digits, hyphens, apostrophes, non-ASCII letters) is
neither a vowel nor a consonant.
"""

VOWELS = frozenset('aeiou')
CONSONANTS = frozenset('bcdfghjklmnpqrstvwxz')


def is_consonant(word, i):
    """is_consonant(word, i) is TRUE <=> word[i] is a consonant."""
    if i < 0 or i >= len(word):
        return False
    char = word[i]
    if char == 'Y':
        return True
    if char != 'y':
        return char in CONSONANTS
    # Every y in a run of y's shares the class of the letter before the run.
    start = i
    while start > 0 and word[start - 1] == 'y':
        start -= 1
    return start == 0 or is_consonant(word, start - 1)


def is_vowel(word, i):
    """is_vowel(word, i) is TRUE <=> word[i] is a vowel."""
    if i < 0 or i >= len(word):
        return False
    char = word[i]
    if char in VOWELS:
        return True
    return char == 'y' and not is_consonant(word, i)


def cv_pattern(word):
    """Returns a string of 'c', 'v' and '-' classifying each character

    e.g. 'falafel' becomes 'cvcvcvc',
         'architecture' becomes 'vcccvcvccvcv'
    """
    pattern = []
    for i in range(len(word)):
        if is_consonant(word, i):
            pattern.append('c')
        elif is_vowel(word, i):
            pattern.append('v')
        else:
            pattern.append('-')
    return ''.join(pattern)


def contains_vowel(stem):
    """contains_vowel(stem) is TRUE <=> stem contains a vowel"""
    for i in range(len(stem)):
        if is_vowel(stem, i):
            return True
    return False


def ends_double_consonant(word):
    """*d - the word ends with a double consonant (e.g. -TT, -SS)."""
    return (
        len(word) >= 2 and
        word[-1] == word[-2] and
        is_consonant(word, len(word) - 1)
    )


def ends_cvc(word):
    """*o - the word ends cvc, where the second c is not W, X or Y
    (e.g. -WIL, -HOP).
    """
    return (
        len(word) >= 3 and
        is_consonant(word, len(word) - 3) and
        is_vowel(word, len(word) - 2) and
        is_consonant(word, len(word) - 1) and
        word[-1] not in ('w', 'x', 'y', 'Y')
    )
