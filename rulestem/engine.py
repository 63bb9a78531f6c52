"""
The two rule executors.

`run_stages` drives the Porter-style algorithms: a fixed sequence of
stages, each applying at most one rule before handing the word on.

`run_to_fixpoint` drives the Lancaster algorithm: one table scanned
from the top again and again until nothing applies any more.
"""

import logging

from rulestem.rules import apply_first_possible_rule, find_first_possible_rule

logger = logging.getLogger(__name__)

# Hard ceiling on rule applications in one run_to_fixpoint call.
MAX_ITERATIONS = 100


def run_stages(word, stages):
    for stage in stages:
        stemmed = apply_first_possible_rule(word, stage.rules)
        if stemmed != word:
            logger.debug("Step %s: %r -> %r", stage.name, word, stemmed)
        word = stemmed
    return word


def run_to_fixpoint(word, rules, max_iterations=MAX_ITERATIONS, finish=None):
    """Applies rules to `word` until none of them applies

    Each iteration scans `rules` from the top and applies the first rule
    that is possible, then starts over with the new word.  When no rule
    is possible, `finish` (if given) gets a chance to tidy the word; if
    it changes anything the scanning resumes, so the result is always a
    fixpoint of both the table and `finish`.

    After `max_iterations` changes the loop gives up and returns the
    word as it stands.
    """
    for _ in range(max_iterations):
        rule, stemmed = find_first_possible_rule(word, rules)
        if rule is None and finish is not None:
            stemmed = finish(word)
        if stemmed == word:
            return word
        word = stemmed

    logger.debug(
        "Stopped stemming %r after %d iterations", word, max_iterations
    )
    return word
