"""Weighted lexical/orthographic pattern tables for heuristic language scoring.

Each language maps to a tuple of ``(compiled regex, weight)`` pairs. Patterns
run against NFC-normalized, lower-cased text and every match adds the weight
to that language's score. Weights follow the reliability of the signal:

    SCRIPT > DIACRITIC > CONSTRUCTION > FUNCTION_WORD > ENDING

To support a new language add a Language member, its code in models.py and a
rule list here.
"""
import re
from typing import Dict, Tuple

from models import Language

# --- Weights ---
SCRIPT = 5          # writing system or letters no other supported language uses
DIACRITIC = 4       # diacritics shared by at most two supported languages
CONSTRUCTION = 3    # contractions, elisions, idiomatic multi-word constructions
FUNCTION_WORD = 2   # articles, pronouns, prepositions, auxiliaries
ENDING = 1          # derivational/inflectional suffixes


def _words(*words: str) -> str:
    return r"\b(?:" + "|".join(words) + r")\b"


def _endings(*suffixes: str) -> str:
    return r"\w{2,}(?:" + "|".join(suffixes) + r")\b"


# Function words shared by several Romance/Germanic languages ("de", "que",
# "la", "en", "a", "un", "in", "is") are left out: they cannot separate the
# candidates and only invite ties.
_RULES = {
    Language.ENGLISH: [
        (_words("the", "and", "of", "to", "it", "that", "with", "for", "at", "by", "but", "from",
                "this", "you", "are", "be", "have", "has", "not", "an", "who", "what", "they", "we",
                "he", "she", "his", "her", "its", "my", "your", "their", "when", "there",
                "every", "never", "before"), FUNCTION_WORD),
        (r"\w+n't\b", CONSTRUCTION),
        (r"\w+'(?:s|re|ve|ll|d|m)\b", CONSTRUCTION),
        (_words("going to", "used to", "kind of", "a lot of", "as well as"), CONSTRUCTION),
        (_endings("ing", "ly", "ness", "tion"), ENDING),
    ],
    Language.SPANISH: [
        (r"[ñ¿¡]", SCRIPT),
        (_words("el", "los", "las", "del", "al", "lo", "una", "es", "con", "pero", "muy", "más",
                "y", "su", "sus", "hay", "cuando", "donde", "también", "está", "están", "nada",
                "quien", "mucho", "ese", "esa", "esto"), FUNCTION_WORD),
        (_words("hay que", "lo que", "por qué", "sin embargo", "a veces", "tener que"), CONSTRUCTION),
        (r"\w+(?:arse|erse|irse)\b", CONSTRUCTION),
        (_endings("ción", "dad", "mente", "ísimo"), ENDING),
    ],
    Language.PORTUGUESE: [
        (r"[ãõ]", DIACRITIC),
        (r"ç", DIACRITIC),
        (_words("não", "uma", "um", "com", "os", "do", "da", "dos", "das", "no", "na", "em", "é",
                "são", "mas", "mais", "você", "eu", "ele", "ela", "muito", "isso", "pelo", "pela",
                "ao", "onde"), FUNCTION_WORD),
        (_words("num", "numa", "dum", "duma", "nesse", "nessa", "neste", "nesta", "disso",
                "daquele", "tem que", "a gente"), CONSTRUCTION),
        (_endings("ção", "ções", "mente", "inho", "inha"), ENDING),
    ],
    Language.FRENCH: [
        (r"œ", SCRIPT),
        (r"[èëîïùûÿ]", DIACRITIC),
        (r"ç", DIACRITIC),
        (_words("le", "les", "des", "du", "est", "avec", "pour", "une", "dans", "sur", "pas", "ne",
                "je", "il", "elle", "nous", "vous", "ils", "ce", "qui", "au", "aux", "et", "sont",
                "leur", "chez"), FUNCTION_WORD),
        (r"\b(?:l|d|j|qu|n|c|s|m|t)'\w+", CONSTRUCTION),
        (_words("est-ce que", "il y a", "ne pas"), CONSTRUCTION),
        (_endings("tion", "eux", "euse", "aux", "oire"), ENDING),
    ],
    Language.GERMAN: [
        (r"[äöüß]", SCRIPT),
        (_words("der", "die", "das", "und", "ist", "nicht", "ein", "eine", "einen", "mit", "von",
                "zu", "auf", "für", "sich", "auch", "dem", "den", "ich", "wir", "sind", "oder",
                "aber", "wie", "nur", "noch", "wer", "kein", "keine"), FUNCTION_WORD),
        (_words("es gibt", "gibt es", "nicht mehr", "zum", "zur", "im", "beim", "vom", "ins"), CONSTRUCTION),
        (_endings("ung", "keit", "heit", "lich", "schaft", "chen"), ENDING),
    ],
    Language.DUTCH: [
        (r"ij", CONSTRUCTION),
        (_words("het", "een", "van", "niet", "zijn", "ook", "maar", "voor", "naar", "bij", "dat",
                "ik", "hij", "zij", "wij", "op", "uit", "nog", "wel", "geen", "dan", "wat",
                "heeft", "hebben", "wordt"), FUNCTION_WORD),
        (_words("er is", "er zijn", "aan het", "om te"), CONSTRUCTION),
        (_endings("heid", "lijk", "tje", "aar"), ENDING),
    ],
    Language.JAPANESE: [
        (r"[\u3040-\u309f]", SCRIPT),   # hiragana
        (r"[\u30a0-\u30ff]", SCRIPT),   # katakana
        (r"[\u4e00-\u9faf]", SCRIPT),   # kanji
        (r"(?:です|ます|ません|でした|ました)", CONSTRUCTION),
    ],
    Language.VIETNAMESE: [
        (r"[ăđơưạảấầẩẫậắằẳẵặẹẻẽếềểễệỉịọỏốồổỗộớờởỡợụủứừửữựỳỵỷỹĩũ]", SCRIPT),
        (_words("và", "của", "là", "có", "không", "những", "người", "một", "cho", "với", "được",
                "này", "trong", "các", "đã", "sẽ", "thì", "mà"), FUNCTION_WORD),
        (_words("có thể", "như thế", "bao giờ", "không có"), CONSTRUCTION),
    ],
}

PATTERN_SETS: Dict[Language, Tuple[Tuple[re.Pattern, int], ...]] = {
    lang: tuple((re.compile(pattern), weight) for pattern, weight in rules)
    for lang, rules in _RULES.items()
}

# Markers strong enough to overrule the external detector for a confusable pair
DISTINCTIVE_MARKERS: Dict[Language, Tuple[re.Pattern, ...]] = {
    lang: tuple(regex for regex, weight in rules if weight >= CONSTRUCTION)
    for lang, rules in PATTERN_SETS.items()
}
