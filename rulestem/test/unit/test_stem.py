# -*- coding: utf-8 -*-
import random
import string
import unittest

from rulestem import (
    ALGORITHMS, LancasterStemmer, PorterStemmer, SnowballStemmer, StemmerI,
    get_stemmer, stem,
)
from rulestem import porter
from rulestem.rules import Rule, apply_first_possible_rule


def random_words(count, seed=1980, max_length=12):
    rng = random.Random(seed)
    return [
        ''.join(rng.choice(string.ascii_lowercase)
                for _ in range(rng.randint(1, max_length)))
        for _ in range(count)
    ]


class PorterTest(unittest.TestCase):

    def setUp(self):
        self.stemmer = PorterStemmer()

    def test_paper_examples(self):
        """Examples from "An algorithm for suffix stripping" that survive
        all of the steps unchanged."""
        examples = {
            'caresses': 'caress',
            'ponies': 'poni',
            'ties': 'ti',
            'caress': 'caress',
            'cats': 'cat',
            'feed': 'feed',
            'plastered': 'plaster',
            'motoring': 'motor',
            'sing': 'sing',
            'hopping': 'hop',
            'filing': 'file',
            'happy': 'happi',
            'sky': 'sky',
            'electrical': 'electr',
            'adoption': 'adopt',
            'probate': 'probat',
            'rate': 'rate',
            'cease': 'ceas',
            'roll': 'roll',
        }
        for word, expected in examples.items():
            our_stem = self.stemmer.stem(word)
            assert our_stem == expected, (
                "%s should stem to %s but got %s" % (word, expected, our_stem)
            )

    def test_later_steps_continue_stage_results(self):
        # Step 1b alone gives 'agree', step 5a then drops the -e.
        assert apply_first_possible_rule('agreed', porter.STEP_1B) == 'agree'
        assert self.stemmer.stem('agreed') == 'agre'

        # Step 2 alone gives 'relate', step 5a then drops the -e.
        assert apply_first_possible_rule('relational', porter.STEP_2) == 'relate'
        assert self.stemmer.stem('relational') == 'relat'

    def test_multi_step_words(self):
        assert self.stemmer.stem('generalizations') == 'gener'
        assert self.stemmer.stem('conflated') == 'conflat'
        assert self.stemmer.stem('controlling') == 'control'

    def test_step_1b_tidy_only_after_ed_or_ing(self):
        # Tidy-up applies after -ing ...
        assert apply_first_possible_rule('hopping', porter.STEP_1B) == 'hop'
        # ... but not after -eed.
        assert apply_first_possible_rule('agreed', porter.STEP_1B) == 'agree'
        # -eed with m=0 must not fall through to -ed.
        assert apply_first_possible_rule('feed', porter.STEP_1B) == 'feed'

    def test_ion_needs_s_or_t(self):
        assert apply_first_possible_rule('adoption', porter.STEP_4) == 'adopt'
        assert apply_first_possible_rule('communion', porter.STEP_4) == 'communion'

    def test_lower_cases_and_skips_short_words(self):
        assert self.stemmer.stem('CARESSES') == 'caress'
        assert self.stemmer.stem('is') == 'is'
        assert self.stemmer.stem('Is') == 'is'

    def test_is_a_stemmer(self):
        assert isinstance(self.stemmer, StemmerI)
        assert self.stemmer.stem_words(['cats', 'ponies']) == ['cat', 'poni']
        assert repr(self.stemmer) == '<PorterStemmer>'


class SnowballTest(unittest.TestCase):

    def setUp(self):
        self.stemmer = SnowballStemmer('english')

    def test_english(self):
        examples = {
            'national': 'nation',
            'ties': 'tie',
            'cries': 'cri',
            'caresses': 'caress',
            'cats': 'cat',
            'gas': 'gas',
            'kiwis': 'kiwi',
            'running': 'run',
            'hopping': 'hop',
            'hoped': 'hope',
            'feed': 'feed',
            'agreed': 'agre',
            'happy': 'happi',
        }
        for word, expected in examples.items():
            our_stem = self.stemmer.stem(word)
            assert our_stem == expected, (
                "%s should stem to %s but got %s" % (word, expected, our_stem)
            )

    def test_doubled_consonants_after_ed_or_ing(self):
        assert self.stemmer.stem('trekking') == 'trek'
        assert self.stemmer.stem('revving') == 'rev'
        assert self.stemmer.stem('hopping') == 'hop'
        # l, s and z stay doubled.
        assert self.stemmer.stem('falling') == 'fall'
        assert self.stemmer.stem('hissing') == 'hiss'

    def test_apostrophes(self):
        assert self.stemmer.stem("dog's") == 'dog'
        assert self.stemmer.stem("dogs'") == 'dog'
        assert self.stemmer.stem("'cats") == 'cat'

    def test_short_strings_bug(self):
        assert self.stemmer.stem("y's") == 'y'

    def test_consonant_y_marker_is_removed(self):
        assert 'Y' not in self.stemmer.stem('yearly')
        assert self.stemmer.stem('Happy') == 'happi'

    def test_unsupported_language(self):
        with self.assertRaises(ValueError):
            SnowballStemmer('german')

    def test_repr(self):
        assert repr(self.stemmer) == '<SnowballStemmer: english>'


class LancasterTest(unittest.TestCase):

    def setUp(self):
        self.stemmer = LancasterStemmer()

    def test_default_rules(self):
        assert self.stemmer.stem('maximum') == 'maxim'
        assert self.stemmer.stem('running') == 'run'
        assert self.stemmer.stem('owed') == 'ow'
        assert self.stemmer.stem('provision') == 'provis'

    def test_tidy_ending(self):
        assert self.stemmer.stem('stone') == 'ston'
        assert self.stemmer.stem('spry') == 'spri'

    def test_custom_rules(self):
        st_custom = LancasterStemmer(rule_tuple=(('ness', '', 'v'),))
        assert st_custom.stem('kindness') == 'kind'
        assert len(st_custom.rules) == 1

    def test_invalid_rules(self):
        for rule_tuple in [
            (('NESS', '', ''),),
            (('ness', '', 'x'),),
            (('ness',),),
            (('', 'e', ''),),
            (('ss', 'ss', ''),),
            (Rule('ness', '', min_stem_length=0),),
        ]:
            with self.assertRaises(ValueError):
                LancasterStemmer(rule_tuple=rule_tuple)

    def test_rule_instances_keep_stem_floor(self):
        st_custom = LancasterStemmer(
            rule_tuple=(Rule('ness', '', min_stem_length=2),))
        assert st_custom.stem('kindness') == 'kind'

    def test_invalid_ceiling(self):
        with self.assertRaises(ValueError):
            LancasterStemmer(max_iterations=0)

    def test_cycle_stops_at_ceiling(self):
        stemmer = LancasterStemmer(
            rule_tuple=(('ab', 'ba', ''), ('ba', 'ab', '')),
            max_iterations=5,
        )
        with self.assertLogs('rulestem.engine', level='DEBUG'):
            result = stemmer.stem('xxab')
        assert result in ('xxab', 'xxba')


class FacadeTest(unittest.TestCase):

    def test_algorithms(self):
        assert ALGORITHMS == ('porter', 'snowball', 'lancaster')
        assert isinstance(get_stemmer('porter'), PorterStemmer)
        assert isinstance(get_stemmer('Snowball'), SnowballStemmer)
        assert isinstance(get_stemmer('lancaster'), LancasterStemmer)
        assert get_stemmer('porter') is get_stemmer('porter')

    def test_unknown_algorithm(self):
        with self.assertRaises(ValueError):
            stem('running', 'lovins')
        with self.assertRaises(ValueError):
            get_stemmer(None)
        with self.assertRaises(ValueError):
            stem('', 'lovins')

    def test_scenarios(self):
        assert stem('caresses', 'porter') == 'caress'
        assert stem('ponies', 'porter') == 'poni'
        assert stem('plastered', 'porter') == 'plaster'
        assert stem('national', 'snowball') == 'nation'
        assert stem('ties', 'snowball') == 'tie'
        assert stem('maximum', 'lancaster') == 'maxim'

    def test_default_is_porter(self):
        assert stem('relational') == 'relat'

    def test_empty_and_short_words(self):
        for algorithm in ALGORITHMS:
            assert stem('', algorithm) == ''
            assert stem('a', algorithm) == 'a'
            assert stem('ox', algorithm) == 'ox'
            assert stem('OX', algorithm) == 'ox'

    def test_non_letters_are_tolerated(self):
        for algorithm in ALGORITHMS:
            for word in ('x-rays', 'mp3s', "rock'n'roll", 'naïveté'):
                assert isinstance(stem(word, algorithm), str)


class PropertyTest(unittest.TestCase):

    words = random_words(2000) + [
        'caresses', 'ponies', 'agreed', 'plastered', 'relational',
        'national', 'maximum', 'generalizations', 'happiness', 'yearly',
        'syzygy', 'yyyyyyy', 'crying', 'spryly', 'oaten', 'orrery',
    ]

    def test_case_insensitive(self):
        for algorithm in ALGORITHMS:
            for word in self.words:
                assert stem(word.upper(), algorithm) == stem(word, algorithm)

    def test_short_words_unchanged(self):
        for algorithm in ALGORITHMS:
            for word in self.words:
                if len(word) < 3:
                    assert stem(word, algorithm) == word

    def test_restemming_never_grows(self):
        for algorithm in ALGORITHMS:
            for word in self.words:
                once = stem(word, algorithm)
                assert len(stem(once, algorithm)) <= len(once), (
                    "%s: %s -> %s" % (algorithm, word, once)
                )

    def test_lancaster_reaches_fixpoint(self):
        for word in self.words:
            once = stem(word, 'lancaster')
            assert stem(once, 'lancaster') == once, (
                "%s -> %s -> %s" % (word, once, stem(once, 'lancaster'))
            )

    def test_stems_never_longer_than_word(self):
        for algorithm in ALGORITHMS:
            for word in self.words:
                assert len(stem(word, algorithm)) <= len(word)
