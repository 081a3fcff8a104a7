"""
Configuration for the differential object marking stimulus generator.
"""

import os
from dotenv import load_dotenv

load_dotenv()

# SEED
# Every random draw derives from this value: wrap-up nouns use SEED + row,
# persons use SEED once per run.
SEED = 123

# MATERIALS
MATERIALS_VERSION = os.getenv("MATERIALS_VERSION", "1.0.0")
STUDY_SITE = os.getenv("STUDY_SITE", "UiT")
LANGUAGES = ["Mini-English", "Mini-Norwegian"]

# Languages that append the article to the noun as one word
SUFFIXED_ARTICLE_LANGUAGES = {"Mini-Norwegian"}

# Item selection
SESSION_COLUMN = "Session_3"
NOUN_SESSION_COLUMN = "Session_2"
INCLUDED = "included"
SHARED_LANGUAGE = "both"

# CONDITIONS
GRAMMATICAL = "grammatical"
DOM_VIOLATION = "DOM violation"
ARTICLE_LOCATION_VIOLATION = "article location violation"

CONDITION_SEQUENCE = [GRAMMATICAL, DOM_VIOLATION, ARTICLE_LOCATION_VIOLATION]

CONDITION_TRIGGERS = {
    GRAMMATICAL: 101,
    DOM_VIOLATION: 102,
    ARTICLE_LOCATION_VIOLATION: 103
}

# Responses are entered with the mouse
GRAMMATICAL_RESPONSE = "left_button"
UNGRAMMATICAL_RESPONSE = "right_button"

GRAMMATICAL_PROPERTY = "differential object marking"
GRAMMATICAL_PROPERTY_TRIGGER = 2
SESSION_LABEL = "Session 3"
NUMBER = "singular"

# Wrap-up clause: additive ("and ... too") or adversative ("but not ...")
ADDITIVE = "additive"
ADVERSATIVE = "adversative"
WRAPUP_FORMATS = [ADDITIVE, ADVERSATIVE]

# EEG TRIGGERS
TARGET_TRIGGER_RANGE = (40, 99)
SENTENCE_TRIGGER_RANGE = (110, 253)

# WORD TIMING (ms)
BASE_DURATION = 250
BASE_LENGTH = 3
LETTER_INCREASE = 35
TRIGGER_LAG = 40
MAX_WORDS = 10

# BALANCE CHECK
BALANCE_COLUMNS = ["noun1_gender", "number", "person", "verb", "noun1", "wrapup_noun"]

# PATHS
DATA_DIR = "data"
LEXICON_PATH = os.getenv("LEXICON_PATH", os.path.join(DATA_DIR, "stimuli.csv"))
OUTPUT_DIR = os.getenv("OUTPUT_DIR", "session_materials/Session 3/stimuli/experiment")
RESULTS_DIR = "results"
