"""
Snowball (Porter2) stemmer for English.

The Porter2 algorithm is Martin Porter's revision of his original
stemmer, published as part of the Snowball project:

    http://snowball.tartarus.org/algorithms/english/stemmer.html

It runs the same kind of staged pipeline as the Porter stemmer, with an
extra step 0 for apostrophes, a few more suffixes, and rules gated on the
R1 and R2 regions of the word instead of on its measure.

Before the steps run, a leading apostrophe is dropped and every
consonant-y is written as ``Y``; the marker is turned back into ``y`` at
the end.
"""

from rulestem.api import MIN_WORD_LENGTH, StemmerI
from rulestem.engine import run_stages
from rulestem.letters import (
    contains_vowel, ends_double_consonant, is_consonant, is_vowel,
)
from rulestem.regions import ends_short_syllable, in_r1, in_r2, is_short_word
from rulestem.rules import CONTAINS_VOWEL, CUSTOM, IN_R1, IN_R2, Rule, Stage

LANGUAGES = ('english',)

# Letters that may precede a -li suffix removed in step 2.
VALID_LI_ENDINGS = frozenset('cdeghkmnrt')

# Doubled consonants undoubled after -ed/-ing; l, s and z stay doubled.
UNDOUBLED_CONSONANTS = 'bcdfghjkmnpqrtvwxyY'


def _r1(suffix, replacement=''):
    return Rule(suffix, replacement, IN_R1)


def _r2(suffix, replacement=''):
    return Rule(suffix, replacement, IN_R2)


def _i_or_ie(word, stem):
    # ties -> tie, cries -> cri
    return len(stem) > 1


def _vowel_before_previous_letter(word, stem):
    # gas -> gas, gaps -> gap, kiwis -> kiwi
    return contains_vowel(stem[:-1])


def _y_after_non_vowel(word, stem):
    # cry -> cri, by -> by, say -> say
    return len(stem) > 1 and not is_vowel(stem, len(stem) - 1)


STEP_0 = (
    Rule("'s'", ''),
    Rule("'s", ''),
    Rule("'", ''),
)

STEP_1A = (
    Rule('sses', 'ss'),
    Rule('ied', 'i', CUSTOM, _i_or_ie),
    Rule('ied', 'ie'),
    Rule('ies', 'i', CUSTOM, _i_or_ie),
    Rule('ies', 'ie'),
    Rule('us', 'us'),
    Rule('ss', 'ss'),
    Rule('s', '', CUSTOM, _vowel_before_previous_letter),
)

STEP_1B_TIDY = (
    Rule('at', 'ate'),
    Rule('bl', 'ble'),
    Rule('iz', 'ize'),
) + tuple(
    Rule(letter * 2, letter, CUSTOM,
         lambda word, stem: ends_double_consonant(word))
    for letter in UNDOUBLED_CONSONANTS
) + (
    Rule('', 'e', CUSTOM, lambda word, stem: is_short_word(stem)),
)

STEP_1B = (
    _r1('eedly', 'ee'),
    _r1('eed', 'ee'),
    # Outside R1 the -eed words are left alone.
    Rule('eedly', 'eedly'),
    Rule('eed', 'eed'),
    Rule('ingly', '', CONTAINS_VOWEL, then=STEP_1B_TIDY),
    Rule('edly', '', CONTAINS_VOWEL, then=STEP_1B_TIDY),
    Rule('ing', '', CONTAINS_VOWEL, then=STEP_1B_TIDY),
    Rule('ed', '', CONTAINS_VOWEL, then=STEP_1B_TIDY),
)

STEP_1C = (
    Rule('y', 'i', CUSTOM, _y_after_non_vowel),
    Rule('Y', 'i', CUSTOM, _y_after_non_vowel),
)

STEP_2 = (
    _r1('ization', 'ize'),
    _r1('ational', 'ate'),
    _r1('fulness', 'ful'),
    _r1('ousness', 'ous'),
    _r1('iveness', 'ive'),
    _r1('tional', 'tion'),
    _r1('biliti', 'ble'),
    _r1('lessli', 'less'),
    _r1('entli', 'ent'),
    _r1('ation', 'ate'),
    _r1('alism', 'al'),
    _r1('aliti', 'al'),
    _r1('ousli', 'ous'),
    _r1('iviti', 'ive'),
    _r1('fulli', 'ful'),
    _r1('enci', 'ence'),
    _r1('anci', 'ance'),
    _r1('abli', 'able'),
    _r1('izer', 'ize'),
    _r1('ator', 'ate'),
    _r1('alli', 'al'),
    _r1('bli', 'ble'),
    Rule('ogi', 'og', CUSTOM,
         lambda word, stem: in_r1(word, 'ogi') and stem.endswith('l')),
    Rule('li', '', CUSTOM,
         lambda word, stem: (in_r1(word, 'li') and
                             stem[-1:] in VALID_LI_ENDINGS)),
)

STEP_3 = (
    _r1('ational', 'ate'),
    _r1('tional', 'tion'),
    _r1('alize', 'al'),
    _r1('icate', 'ic'),
    _r1('iciti', 'ic'),
    _r2('ative'),
    _r1('ical', 'ic'),
    _r1('ness'),
    _r1('ful'),
)

STEP_4 = (
    _r2('al'),
    _r2('ance'),
    _r2('ence'),
    _r2('er'),
    _r2('ic'),
    _r2('able'),
    _r2('ible'),
    _r2('ant'),
    _r2('ement'),
    _r2('ment'),
    _r2('ent'),
    Rule('ion', '', CUSTOM,
         lambda word, stem: in_r2(word, 'ion') and stem[-1:] in ('s', 't')),
    _r2('ism'),
    _r2('ate'),
    _r2('iti'),
    _r2('ous'),
    _r2('ive'),
    _r2('ize'),
)

STEP_5A = (
    _r2('e'),
    Rule('e', '', CUSTOM,
         lambda word, stem: (in_r1(word, 'e') and
                             not ends_short_syllable(stem))),
)

STEP_5B = (
    Rule('ll', 'l', CUSTOM, lambda word, stem: in_r2(word, 'l')),
)

STAGES = (
    Stage('0', STEP_0),
    Stage('1a', STEP_1A),
    Stage('1b', STEP_1B),
    Stage('1c', STEP_1C),
    Stage('2', STEP_2),
    Stage('3', STEP_3),
    Stage('4', STEP_4),
    Stage('5a', STEP_5A),
    Stage('5b', STEP_5B),
)


def mark_consonant_ys(word):
    """Writes every consonant-y of the word as 'Y'."""
    return ''.join(
        'Y' if char == 'y' and is_consonant(word, i) else char
        for i, char in enumerate(word)
    )


class SnowballStemmer(StemmerI):
    """
    The English Snowball (Porter2) stemmer.

        >>> SnowballStemmer('english').stem('national')
        'nation'

    :param language: The language whose stemmer should be used.
                     Only 'english' is available.
    :type language: str
    :raise ValueError: If there is no stemmer for the language.
    """

    languages = LANGUAGES
    stages = STAGES

    def __init__(self, language='english'):
        if language not in self.languages:
            raise ValueError("The language '{0}' is not supported.".format(
                language))
        self.language = language

    def stem(self, word):
        word = word.lower()

        if len(word) < MIN_WORD_LENGTH:
            return word

        if word.startswith("'"):
            word = word[1:]
        word = mark_consonant_ys(word)
        word = run_stages(word, self.stages)

        return word.replace('Y', 'y')

    def __repr__(self):
        return '<SnowballStemmer: {0}>'.format(self.language)
