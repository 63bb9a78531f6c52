"""
Porter Stemmer

This is the Porter stemming algorithm, expressed as a set of rule tables
run by the generic staged executor.  It follows the algorithm presented in

Porter, M. "An algorithm for suffix stripping." Program 14.3 (1980): 130-137.

only differing from it at the points marked --DEPARTURE-- below.

For the reference version of the Porter algorithm, see

    http://www.tartarus.org/~martin/PorterStemmer/
"""

from rulestem.api import MIN_WORD_LENGTH, StemmerI
from rulestem.engine import run_stages
from rulestem.letters import ends_cvc, ends_double_consonant
from rulestem.regions import measure
from rulestem.rules import CONTAINS_VOWEL, CUSTOM, MEASURE_ABOVE, Rule, Stage


def _m_gt_0(suffix, replacement):
    return Rule(suffix, replacement, MEASURE_ABOVE, 0)


def _m_gt_1(suffix):
    return Rule(suffix, '', MEASURE_ABOVE, 1)


# Step 1a
#
#     SSES -> SS                         caresses  ->  caress
#     IES  -> I                          ponies    ->  poni
#                                        ties      ->  ti
#     SS   -> SS                         caress    ->  caress
#     S    ->                            cats      ->  cat
STEP_1A = (
    Rule('sses', 'ss'),
    Rule('ies', 'i'),
    Rule('ss', 'ss'),
    Rule('s', ''),
)

# Tidying up after the second or third rule of step 1b:
#
#     AT -> ATE                       conflat(ed)  ->  conflate
#     BL -> BLE                       troubl(ed)   ->  trouble
#     IZ -> IZE                       siz(ed)      ->  size
#     (*d and not (*L or *S or *Z))
#        -> single letter
#                                     hopp(ing)    ->  hop
#                                     tann(ed)     ->  tan
#                                     fall(ing)    ->  fall
#                                     hiss(ing)    ->  hiss
#                                     fizz(ed)     ->  fizz
#     (m=1 and *o) -> E               fail(ing)    ->  fail
#                                     fil(ing)     ->  file
#
# The -E is put back on -AT, -BL and -IZ, so that the suffixes -ATE, -BLE
# and -IZE can be recognised later. This E may be removed in step 4.
STEP_1B_TIDY = (
    Rule('at', 'ate'),
    Rule('bl', 'ble'),
    Rule('iz', 'ize'),
) + tuple(
    Rule(letter * 2, letter, CUSTOM,
         lambda word, stem: ends_double_consonant(word))
    for letter in 'bcdfghjkmnpqrtvwxy'
) + (
    Rule('', 'e', CUSTOM,
         lambda word, stem: measure(stem) == 1 and ends_cvc(stem)),
)

# Step 1b
#
#     (m>0) EED -> EE                    feed      ->  feed
#                                        agreed    ->  agree
#     (*v*) ED  ->                       plastered ->  plaster
#                                        bled      ->  bled
#     (*v*) ING ->                       motoring  ->  motor
#                                        sing      ->  sing
STEP_1B = (
    _m_gt_0('eed', 'ee'),
    # -EED with m=0 stays as it is rather than falling through to -ED.
    Rule('eed', 'eed'),
    Rule('ed', '', CONTAINS_VOWEL, then=STEP_1B_TIDY),
    Rule('ing', '', CONTAINS_VOWEL, then=STEP_1B_TIDY),
)

# Step 1c
#
#     (*v*) Y -> I                    happy        ->  happi
#                                     sky          ->  sky
STEP_1C = (
    Rule('y', 'i', CONTAINS_VOWEL),
)

# Step 2
STEP_2 = (
    _m_gt_0('ational', 'ate'),        # relational     ->  relate
    _m_gt_0('tional', 'tion'),        # conditional    ->  condition
                                      # rational       ->  rational
    _m_gt_0('enci', 'ence'),          # valenci        ->  valence
    _m_gt_0('anci', 'ance'),          # hesitanci      ->  hesitance
    _m_gt_0('izer', 'ize'),           # digitizer      ->  digitize
    _m_gt_0('abli', 'able'),          # conformabli    ->  conformable
    _m_gt_0('alli', 'al'),            # radicalli      ->  radical
    _m_gt_0('entli', 'ent'),          # differentli    ->  different
    _m_gt_0('eli', 'e'),              # vileli         ->  vile
    _m_gt_0('ousli', 'ous'),          # analogousli    ->  analogous
    _m_gt_0('ization', 'ize'),        # vietnamization ->  vietnamize
    _m_gt_0('ation', 'ate'),          # predication    ->  predicate
    _m_gt_0('ator', 'ate'),           # operator       ->  operate
    _m_gt_0('alism', 'al'),           # feudalism      ->  feudal
    _m_gt_0('iveness', 'ive'),        # decisiveness   ->  decisive
    _m_gt_0('fulness', 'ful'),        # hopefulness    ->  hopeful
    _m_gt_0('ousness', 'ous'),        # callousness    ->  callous
    _m_gt_0('aliti', 'al'),           # formaliti      ->  formal
    _m_gt_0('iviti', 'ive'),          # sensitiviti    ->  sensitive
    _m_gt_0('biliti', 'ble'),         # sensibiliti    ->  sensible
    # --DEPARTURE--
    # Not in the paper; added to the reference implementation later.
    _m_gt_0('logi', 'log'),           # analogi        ->  analog
)

# Step 3
STEP_3 = (
    _m_gt_0('icate', 'ic'),           # triplicate     ->  triplic
    _m_gt_0('ative', ''),             # formative      ->  form
    _m_gt_0('alize', 'al'),           # formalize      ->  formal
    _m_gt_0('iciti', 'ic'),           # electriciti    ->  electric
    _m_gt_0('ical', 'ic'),            # electrical     ->  electric
    _m_gt_0('ful', ''),               # hopeful        ->  hope
    _m_gt_0('ness', ''),              # goodness       ->  good
)

# Step 4
#
# The suffixes are now removed. All that remains is a little tidying up.
STEP_4 = (
    _m_gt_1('al'),                    # revival        ->  reviv
    _m_gt_1('ance'),                  # allowance      ->  allow
    _m_gt_1('ence'),                  # inference      ->  infer
    _m_gt_1('er'),                    # airliner       ->  airlin
    _m_gt_1('ic'),                    # gyroscopic     ->  gyroscop
    _m_gt_1('able'),                  # adjustable     ->  adjust
    _m_gt_1('ible'),                  # defensible     ->  defens
    _m_gt_1('ant'),                   # irritant       ->  irrit
    _m_gt_1('ement'),                 # replacement    ->  replac
    _m_gt_1('ment'),                  # adjustment     ->  adjust
    _m_gt_1('ent'),                   # dependent      ->  depend
    # (m>1 and (*S or *T)) ION ->     adoption       ->  adopt
    Rule('ion', '', CUSTOM,
         lambda word, stem: measure(stem) > 1 and stem[-1:] in ('s', 't')),
    _m_gt_1('ou'),                    # homologou      ->  homolog
    _m_gt_1('ism'),                   # communism      ->  commun
    _m_gt_1('ate'),                   # activate       ->  activ
    _m_gt_1('iti'),                   # angulariti     ->  angular
    _m_gt_1('ous'),                   # homologous     ->  homolog
    _m_gt_1('ive'),                   # effective      ->  effect
    _m_gt_1('ize'),                   # bowdlerize     ->  bowdler
)

# Step 5a
#
#     (m>1) E     ->                  probate        ->  probat
#                                     rate           ->  rate
#     (m=1 and not *o) E ->           cease          ->  ceas
STEP_5A = (
    _m_gt_1('e'),
    Rule('e', '', CUSTOM,
         lambda word, stem: measure(stem) == 1 and not ends_cvc(stem)),
)

# Step 5b
#
#     (m > 1 and *d and *L) -> single letter
#                             controll       ->  control
#                             roll           ->  roll
#
# The measure is taken on the word without its final l, which is the
# same as the measure of the whole word.
STEP_5B = (
    Rule('ll', 'l', CUSTOM,
         lambda word, stem: measure(word[:-1]) > 1),
)

STAGES = (
    Stage('1a', STEP_1A),
    Stage('1b', STEP_1B),
    Stage('1c', STEP_1C),
    Stage('2', STEP_2),
    Stage('3', STEP_3),
    Stage('4', STEP_4),
    Stage('5a', STEP_5A),
    Stage('5b', STEP_5B),
)


class PorterStemmer(StemmerI):
    """
    A word stemmer based on the Porter stemming algorithm.

        Porter, M. \"An algorithm for suffix stripping.\"
        Program 14.3 (1980): 130-137.

        >>> PorterStemmer().stem('caresses')
        'caress'

    The Porter Stemmer requires that all tokens have string types.
    """

    stages = STAGES

    def stem(self, word):
        stem = word.lower()

        # --DEPARTURE--
        # Strings of length 1 or 2 don't go through the stemming process,
        # although no mention is made of this in the published algorithm.
        if len(stem) < MIN_WORD_LENGTH:
            return stem

        return run_stages(stem, self.stages)

    def __repr__(self):
        return '<PorterStemmer>'
