"""
A word stemmer based on the Lancaster (Paice/Husk) stemming algorithm.

    Paice, Chris D. "Another Stemmer." ACM SIGIR Forum 24.3 (1990): 56-61.

Unlike the Porter family, the Lancaster stemmer has no stages.  A single
rule table is scanned from the top; the first rule that applies is
applied and the scan starts over on the new word.  Stemming stops when
no rule applies.  This makes it considerably more aggressive than the
Porter stemmer.
"""

import re

from rulestem.api import MIN_WORD_LENGTH, StemmerI
from rulestem.engine import MAX_ITERATIONS, run_to_fixpoint
from rulestem.letters import contains_vowel, is_consonant
from rulestem.rules import ALWAYS, CONTAINS_VOWEL, Rule

# Every Lancaster rule must leave at least this many letters.
MIN_STEM_LENGTH = 2


def _rules(*triples):
    return tuple(
        Rule(suffix, replacement,
             CONTAINS_VOWEL if condition == 'v' else ALWAYS,
             min_stem_length=MIN_STEM_LENGTH)
        for suffix, replacement, condition in triples
    )


# (suffix, replacement, condition): 'v' means the stem must contain a vowel.
# Earlier rules win; the table is scanned from the top after every change.
DEFAULT_RULES = _rules(
    # Doubled letters and simple endings
    ('ia', '', 'v'),
    ('a', '', 'v'),
    ('bb', 'b', ''),
    ('cy', 'c', ''),
    ('dd', 'd', ''),
    ('ee', 'e', ''),
    ('ff', 'f', ''),
    ('gg', 'g', ''),
    ('gh', 'h', ''),
    ('ic', '', 'v'),
    ('ied', 'y', 'v'),
    ('ier', 'y', 'v'),
    ('ies', 'y', 'v'),
    ('ily', 'y', 'v'),
    ('ing', '', 'v'),
    ('iingly', '', 'v'),
    ('ingly', '', 'v'),
    ('inly', '', 'v'),
    ('ion', '', 'v'),
    ('ly', '', 'v'),
    ('mm', 'm', ''),
    ('nn', 'n', ''),
    ('pp', 'p', ''),
    ('rr', 'r', ''),
    ('ss', 's', ''),
    ('tt', 't', ''),
    ('ui', 'u', 'v'),
    ('us', '', 'v'),
    ('vv', 'v', ''),
    ('zz', 'z', ''),

    # Derivational suffixes
    ('al', '', 'v'),
    ('ance', '', 'v'),
    ('ant', '', 'v'),
    ('ary', '', 'v'),
    ('ate', '', 'v'),
    ('ed', '', 'v'),
    ('ence', '', 'v'),
    ('ent', '', 'v'),
    ('ery', '', 'v'),
    ('ful', '', 'v'),
    ('ible', '', 'v'),
    ('ical', '', 'v'),
    ('ify', '', 'v'),
    ('ine', '', 'v'),
    ('ise', '', 'v'),
    ('ish', '', 'v'),
    ('ism', '', 'v'),
    ('ist', '', 'v'),
    ('ite', '', 'v'),
    ('ity', '', 'v'),
    ('ive', '', 'v'),
    ('ize', '', 'v'),
    ('less', '', 'v'),
    ('ment', '', 'v'),
    ('ness', '', 'v'),
    ('ous', '', 'v'),
    ('ship', '', 'v'),
    ('sion', '', 'v'),
    ('tion', '', 'v'),
    ('um', '', 'v'),
    ('ure', '', 'v'),
    ('y', '', 'v'),

    # Compound endings
    ('able', '', 'v'),
    ('age', '', 'v'),
    ('ally', '', 'v'),
    ('ation', '', 'v'),
    ('ative', '', 'v'),
    ('ator', '', 'v'),
    ('atory', '', 'v'),
    ('edly', '', 'v'),
    ('edness', '', 'v'),
    ('eer', '', 'v'),
    ('ency', '', 'v'),
    ('ently', '', 'v'),
    ('er', '', 'v'),
    ('es', '', 'v'),
    ('est', '', 'v'),
    ('fully', '', 'v'),
    ('ibly', '', 'v'),
    ('ically', '', 'v'),
    ('ional', '', 'v'),
    ('ionally', '', 'v'),
    ('ioned', '', 'v'),
    ('ioner', '', 'v'),
    ('ioning', '', 'v'),
    ('ions', '', 'v'),
    ('ious', '', 'v'),
    ('iously', '', 'v'),
    ('ised', '', 'v'),
    ('iser', '', 'v'),
    ('ises', '', 'v'),
    ('ising', '', 'v'),
    ('istic', '', 'v'),
    ('istically', '', 'v'),
    ('ists', '', 'v'),
    ('ited', '', 'v'),
    ('itely', '', 'v'),
    ('ites', '', 'v'),
    ('iting', '', 'v'),
    ('ition', '', 'v'),
    ('itional', '', 'v'),
    ('itionally', '', 'v'),
    ('itions', '', 'v'),
    ('itive', '', 'v'),
    ('itively', '', 'v'),
    ('ively', '', 'v'),
    ('iveness', '', 'v'),
    ('ivity', '', 'v'),
    ('ized', '', 'v'),
    ('izer', '', 'v'),
    ('izers', '', 'v'),
    ('izes', '', 'v'),
    ('izing', '', 'v'),
    ('lessly', '', 'v'),
    ('lessness', '', 'v'),
    ('mental', '', 'v'),
    ('mentally', '', 'v'),
    ('mented', '', 'v'),
    ('menting', '', 'v'),
    ('ments', '', 'v'),
    ('nesses', '', 'v'),
    ('ously', '', 'v'),
    ('ousness', '', 'v'),
    ('ships', '', 'v'),
    ('sional', '', 'v'),
    ('sionally', '', 'v'),
    ('sioned', '', 'v'),
    ('sioner', '', 'v'),
    ('sioning', '', 'v'),
    ('sions', '', 'v'),
    ('tional', '', 'v'),
    ('tionally', '', 'v'),
    ('tioned', '', 'v'),
    ('tioner', '', 'v'),
    ('tioning', '', 'v'),
    ('tions', '', 'v'),
    ('tious', '', 'v'),
    ('tiously', '', 'v'),
    ('ured', '', 'v'),
    ('ures', '', 'v'),
    ('uring', '', 'v'),
)

_valid_suffix = re.compile(r'^[a-z]+$')


def tidy_ending(word):
    """Final touches once no rule applies any more

    A trailing -e goes if the rest of a word longer than three letters
    has a vowel; otherwise a trailing -y after a consonant becomes -i.
    """
    if len(word) > 3 and word.endswith('e') and contains_vowel(word[:-1]):
        word = word[:-1]
    if (len(word) > 3 and word.endswith('y') and
            is_consonant(word, len(word) - 2)):
        word = word[:-1] + 'i'
    return word


class LancasterStemmer(StemmerI):
    """
    Lancaster Stemmer

        >>> st = LancasterStemmer()
        >>> st.stem('maximum')
        'maxim'
        >>> st.stem('running')
        'run'
        >>> st.stem('owed')
        'ow'

    :param rule_tuple: Rules to use instead of `DEFAULT_RULES`; either
        `Rule` instances or (suffix, replacement, condition) triples with
        'v' or '' as condition.
        Rule instances must keep a min_stem_length of at least 2.
    :param max_iterations: Ceiling on the number of rule applications.
    """

    default_rule_tuple = DEFAULT_RULES

    def __init__(self, rule_tuple=None, max_iterations=MAX_ITERATIONS):
        if rule_tuple:
            self._rule_tuple = self.parse_rules(rule_tuple)
        else:
            self._rule_tuple = self.default_rule_tuple
        if max_iterations < 1:
            raise ValueError(
                "max_iterations must be positive, got {0}".format(
                    max_iterations))
        self.max_iterations = max_iterations

    @staticmethod
    def parse_rules(rule_tuple):
        """Validate a set of rules and return them as a tuple of Rules."""
        rules = []
        for rule in rule_tuple:
            if not isinstance(rule, Rule):
                try:
                    suffix, replacement, condition = rule
                except (TypeError, ValueError):
                    raise ValueError("The rule {0!r} is invalid".format(rule))
                if condition not in ('v', ''):
                    raise ValueError("The rule {0!r} is invalid".format(rule))
                rule = _rules((suffix, replacement, condition))[0]
            if (not _valid_suffix.match(rule.suffix) or
                    rule.suffix == rule.replacement or
                    rule.min_stem_length < MIN_STEM_LENGTH or
                    rule.condition not in (ALWAYS, CONTAINS_VOWEL)):
                raise ValueError("The rule {0!r} is invalid".format(rule))
            rules.append(rule)
        return tuple(rules)

    @property
    def rules(self):
        return self._rule_tuple

    def stem(self, word):
        """Stem a word using the Lancaster stemmer."""
        # Lower-case the word, since all the rules are lower-cased
        word = word.lower()

        if len(word) < MIN_WORD_LENGTH:
            return word

        return run_to_fixpoint(
            word, self._rule_tuple, self.max_iterations, finish=tidy_ending
        )

    def __repr__(self):
        return '<LancasterStemmer>'
