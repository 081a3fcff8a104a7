"""
Compose the sentence of every trial and locate its target word.

Example structure: 'Amelia chose fi ze truck and fi je street too'

    person  verb  [DOM]  object1  connective  [adverb]  [DOM]  object2  [adverb]

The additive adverb ('too') follows the second object, the adversative one
('not') precedes it. How an object is written depends on the condition and
on the language:

    grammatical                 DOM + article noun  (Mini-Norwegian: DOM + nounarticle)
    DOM violation               article noun        (Mini-Norwegian: nounarticle)
    article location violation  DOM + articlenoun   (every language)

EEG triggers are time-locked to the first word after the DOM morpheme, or,
when the morpheme is missing, to the first word of the object.
"""

from dataclasses import dataclass
from enum import Enum

import pandas as pd

from config import (
    GRAMMATICAL, DOM_VIOLATION, ARTICLE_LOCATION_VIOLATION,
    SUFFIXED_ARTICLE_LANGUAGES, ADDITIVE, ADVERSATIVE
)
from errors import MissingLexicalItemError
from lexicon import Lexicon, is_blank


class Condition(Enum):
    GRAMMATICAL = GRAMMATICAL
    DOM_VIOLATION = DOM_VIOLATION
    ARTICLE_LOCATION_VIOLATION = ARTICLE_LOCATION_VIOLATION


class ArticlePlacement(Enum):
    SEPARATE = "separate"
    SUFFIXED = "suffixed"

    @classmethod
    def for_language(cls, language: str) -> "ArticlePlacement":
        if language in SUFFIXED_ARTICLE_LANGUAGES:
            return cls.SUFFIXED
        return cls.SEPARATE


class WrapupFormat(Enum):
    ADDITIVE = ADDITIVE
    ADVERSATIVE = ADVERSATIVE


@dataclass(frozen=True)
class CompositionRule:
    dom_marked: bool
    fused_article: bool


WORD_FIELDS = [
    "person", "verb", "article_noun1", "noun1", "conjunction",
    "article_wrapup_noun", "wrapup_noun", "wrapup_adverb",
]

RULES = {
    Condition.GRAMMATICAL: CompositionRule(dom_marked=True, fused_article=False),
    Condition.DOM_VIOLATION: CompositionRule(dom_marked=False, fused_article=False),
    Condition.ARTICLE_LOCATION_VIOLATION: CompositionRule(dom_marked=True, fused_article=True),
}


def object_tokens(article: str, noun: str, placement: ArticlePlacement,
                  fused: bool) -> list:
    if fused:
        return [article + noun]
    if placement is ArticlePlacement.SUFFIXED:
        return [noun + article]
    return [article, noun]


def target_position(rule: CompositionRule) -> int:
    """1-based slot of the target word: after person, verb and DOM."""
    return 3 + int(rule.dom_marked)


def to_sentence(words: list) -> str:
    text = " ".join(words) + "."
    return text[:1].upper() + text[1:]


def compose(row, dom_morpheme: str, placement: ArticlePlacement) -> dict:
    """Sentence, target location and target word of one trial."""
    rule = RULES[Condition(row["grammaticality"])]
    wrapup_format = WrapupFormat(row["wrapup_format"])

    missing = [field for field in WORD_FIELDS if is_blank(row[field])]
    if rule.dom_marked and is_blank(dom_morpheme):
        missing.append("DOM_morpheme")
    if missing:
        raise MissingLexicalItemError(
            f"Trial {row['verb_noun_ID']} ({row['grammaticality']}) is missing {missing}."
        )

    dom = [dom_morpheme] if rule.dom_marked else []

    clause1 = dom + object_tokens(row["article_noun1"], row["noun1"],
                                  placement, rule.fused_article)
    clause2 = dom + object_tokens(row["article_wrapup_noun"], row["wrapup_noun"],
                                  placement, rule.fused_article)

    words = [row["person"], row["verb"]] + clause1 + [row["conjunction"]]
    if wrapup_format is WrapupFormat.ADVERSATIVE:
        words += [row["wrapup_adverb"]] + clause2
    else:
        words += clause2 + [row["wrapup_adverb"]]

    sentence = to_sentence(words)
    position = target_position(rule)

    return {
        "sentence": sentence,
        "target_word_location": f"word{position}",
        "target_word": sentence.split(" ")[position - 1],
    }


def function_words(row, lexicon: Lexicon) -> dict:
    """Articles, connective and adverb that go with one trial."""
    return {
        "article_noun1": lexicon.article(row["noun1_gender"], row["number"]),
        "article_wrapup_noun": lexicon.article(row["wrapup_noun_gender"], row["number"]),
        "conjunction": lexicon.connective(row["wrapup_format"]),
        "wrapup_adverb": lexicon.wrapup_adverb(row["wrapup_format"]),
    }


def compose_sentences(df: pd.DataFrame, lexicon: Lexicon, language: str) -> pd.DataFrame:
    """Add function words, `sentence`, `target_word_location` and `target_word`."""
    placement = ArticlePlacement.for_language(language)
    dom_morpheme = lexicon.dom_morpheme()

    words = pd.DataFrame(
        [function_words(row, lexicon) for _, row in df.iterrows()],
        index=df.index
    )
    df = pd.concat([df, words], axis=1)

    composed = pd.DataFrame(
        [compose(row, dom_morpheme, placement) for _, row in df.iterrows()],
        index=df.index
    )
    return pd.concat([df, composed], axis=1)
