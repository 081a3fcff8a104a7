"""Exception hierarchy for the stimulus generator."""


class StimulusError(Exception):
    """Base exception for all stimulus generation errors."""


class ConfigurationError(StimulusError):
    """The item pool or parameters cannot produce a valid stimulus set."""


class ConditionTilingError(ConfigurationError):
    """Condition sequence length does not divide the number of trials."""


class WrapupPoolError(ConfigurationError):
    """No eligible wrap-up noun is left for a trial."""


class TriggerRangeError(ConfigurationError):
    """Trigger codes ran past the allowed range."""


class MissingLexicalItemError(ConfigurationError):
    """A lexical lookup found nothing (e.g. no article for a gender)."""


class AmbiguousLexicalItemError(ConfigurationError):
    """A lexical lookup found more than one distinct value."""
