"""
Rule-based English stemmers.

Three suffix-stripping algorithms, each reducing one word to an
approximate root without any dictionary:

    porter      Porter (1980), the classic five-step stemmer
    snowball    Porter2, the revised English stemmer of the Snowball project
    lancaster   Paice/Husk, an iterative and more aggressive stemmer

    >>> from rulestem import stem
    >>> stem('relational')
    'relat'
    >>> stem('hopping', 'snowball')
    'hop'
"""

from rulestem.api import StemmerI
from rulestem.dispatch import ALGORITHMS, get_stemmer, stem
from rulestem.lancaster import LancasterStemmer
from rulestem.porter import PorterStemmer
from rulestem.snowball import SnowballStemmer

__all__ = [
    'ALGORITHMS',
    'LancasterStemmer',
    'PorterStemmer',
    'SnowballStemmer',
    'StemmerI',
    'get_stemmer',
    'stem',
]
