"""
Interface shared by all stemmers.
"""

from abc import ABCMeta, abstractmethod

# Words shorter than this are returned as they are.
MIN_WORD_LENGTH = 3


class StemmerI(metaclass=ABCMeta):
    """
    A processing interface for removing morphological affixes from
    words.  This process is known as stemming.
    """

    @abstractmethod
    def stem(self, token):
        """
        Strip affixes from the token and return the stem.

        :param token: The token that should be stemmed.
        :type token: str
        """

    def stem_words(self, tokens):
        """Stem each token of an iterable, returning a list of stems."""
        return [self.stem(token) for token in tokens]
