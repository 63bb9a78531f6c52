"""
Measure and R1/R2 regions.

These are the two yardsticks the stemmers use to decide whether a stem
is long enough to lose a suffix.  Porter's algorithm gates its rules on
the measure of the stem, the Porter2 (Snowball) algorithm on whether the
suffix lies inside region R1 or R2 of the word.

Neither value is ever cached: a word changes shape with every rule that
fires, so callers recompute on the current word each time.
"""

from rulestem.letters import cv_pattern, is_consonant, is_vowel


def measure(stem):
    """Returns the 'measure' of stem, per definition in the paper

    From the paper:

        A consonant will be denoted by c, a vowel by v. A list
        ccc... of length greater than 0 will be denoted by C, and a
        list vvv... of length greater than 0 will be denoted by V.
        Any word, or part of a word, therefore has the form

            [C](VC){m}[V].

        m will be called the \\measure\\ of any word or word part when
        represented in this form. The case m = 0 covers the null
        word. Here are some examples:

            m=0    TR,  EE,  TREE,  Y,  BY.
            m=1    TROUBLE,  OATS,  TREES,  IVY.
            m=2    TROUBLES,  PRIVATE,  OATEN,  ORRERY.
    """
    # Every 'vc' in the pattern closes one VC group of the reduced form.
    return cv_pattern(stem).count('vc')


def region_start(word, start=0):
    """Index just past the first vowel followed by a consonant at or
    after `start`, or len(word) if there is none.
    """
    for i in range(start, len(word) - 1):
        if is_vowel(word, i) and is_consonant(word, i + 1):
            return i + 2
    return len(word)


def r1(word):
    """Start of R1: the region after the first non-vowel following a vowel.

        >>> r1('beautiful')
        5
    """
    return region_start(word)


def r2(word):
    """Start of R2: R1 taken again inside R1.

        >>> r2('beautiful')
        7
    """
    return region_start(word, r1(word))


def in_r1(word, suffix):
    return len(word) - len(suffix) >= r1(word)


def in_r2(word, suffix):
    return len(word) - len(suffix) >= r2(word)


def ends_short_syllable(word):
    """Porter2 short syllable test.

    A short syllable is either a vowel followed by a non-vowel other
    than w, x or Y and preceded by a non-vowel, or a vowel at the
    beginning of the word followed by a non-vowel.
    """
    length = len(word)
    if length == 2:
        return is_vowel(word, 0) and not is_vowel(word, 1)
    return (
        length >= 3 and
        not is_vowel(word, length - 3) and
        is_vowel(word, length - 2) and
        not is_vowel(word, length - 1) and
        word[-1] not in ('w', 'x', 'y', 'Y')
    )


def is_short_word(word):
    """A word is short if it ends in a short syllable and R1 is null."""
    return ends_short_syllable(word) and r1(word) == len(word)
