"""
Suffix rules and the interpreter that applies them.

A rule is plain data: the suffix to remove, the string to put in its
place, and the condition under which that is allowed.  The condition is
a tag, optionally with a payload in `argument`:

    ALWAYS          unconditional
    CONTAINS_VOWEL  the stem contains a vowel                  (*v*)
    MEASURE_ABOVE   measure(stem) > argument                   (m>n)
    IN_R1           the suffix lies inside region R1
    IN_R2           the suffix lies inside region R2
    CUSTOM          argument(word, stem) returns True

Here `word` is the word before the rule is applied and `stem` is the
word with the suffix cut off, before the replacement is added.

A rule may carry a follow-up table in `then`; the first possible rule of
that table is applied once, straight after the rule itself fires.
"""

from collections import namedtuple

from rulestem.letters import contains_vowel
from rulestem.regions import in_r1, in_r2, measure

ALWAYS = 'always'
CONTAINS_VOWEL = 'contains-vowel'
MEASURE_ABOVE = 'measure-above'
IN_R1 = 'in-r1'
IN_R2 = 'in-r2'
CUSTOM = 'custom'

CONDITIONS = frozenset([
    ALWAYS, CONTAINS_VOWEL, MEASURE_ABOVE, IN_R1, IN_R2, CUSTOM,
])


class Rule(namedtuple('Rule', [
        'suffix', 'replacement', 'condition', 'argument',
        'min_stem_length', 'then'])):
    __slots__ = ()

    def __new__(cls, suffix, replacement, condition=ALWAYS, argument=None,
                min_stem_length=0, then=None):
        return super(Rule, cls).__new__(
            cls, suffix, replacement, condition, argument,
            min_stem_length, then
        )

    def __repr__(self):
        return '<Rule -%s -> -%s (%s)>' % (
            self.suffix, self.replacement, self.condition
        )


Stage = namedtuple('Stage', ['name', 'rules'])


class CannotReplaceSuffix(Exception):
    pass


def check_condition(word, stem, rule):
    """Evaluates the condition of `rule` for `word` cut down to `stem`."""
    condition = rule.condition
    if condition == ALWAYS:
        return True
    if condition == CONTAINS_VOWEL:
        return contains_vowel(stem)
    if condition == MEASURE_ABOVE:
        return measure(stem) > rule.argument
    if condition == IN_R1:
        return in_r1(word, rule.suffix)
    if condition == IN_R2:
        return in_r2(word, rule.suffix)
    if condition == CUSTOM:
        return bool(rule.argument(word, stem))
    raise ValueError("Unknown rule condition {0!r}".format(condition))


def replace_suffix_if(word, rule):
    """If `rule` applies to `word`, replace its suffix, else raise

    The rule applies when the word is strictly longer than the suffix,
    ends with it, leaves a stem of at least `min_stem_length` letters,
    and the rule's condition holds.
    """
    suffix = rule.suffix
    if len(word) <= len(suffix) or not word.endswith(suffix):
        raise CannotReplaceSuffix("word does not end with suffix")
    stem = word[:len(word) - len(suffix)]
    if len(stem) < rule.min_stem_length:
        raise CannotReplaceSuffix("stem too short")
    if not check_condition(word, stem, rule):
        raise CannotReplaceSuffix("condition not met")
    return stem + rule.replacement


def find_first_possible_rule(word, rules):
    """Returns (rule, new_word) for the first rule that applies

    If no rule applies, returns (None, word).
    """
    for rule in rules:
        try:
            return rule, replace_suffix_if(word, rule)
        except CannotReplaceSuffix:
            pass

    return None, word


def apply_first_possible_rule(word, rules):
    """Applies the first applicable rule of `rules` to the word

    If that rule has a follow-up table, the first applicable rule of the
    follow-up table is applied to the result as well.
    """
    rule, word = find_first_possible_rule(word, rules)
    if rule is not None and rule.then:
        word = apply_first_possible_rule(word, rule.then)
    return word
