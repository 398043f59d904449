"""
Ordered suffix tables for the Russian stemmer.

A group is a tuple of one or two suffix tuples. When a group holds two, the
suffixes of the first one only match right after "а" or "я", the second one
is tried without that condition. Inside a tuple the first suffix that matches
wins, so the order below is significant.
"""

PRECEDING_VOWELS = ("а", "я")

ADJECTIVE = (
    "ее",
    "ие",
    "ые",
    "ое",
    "ими",
    "ыми",
    "ей",
    "ий",
    "ый",
    "ой",
    "ем",
    "им",
    "ым",
    "ом",
    "его",
    "ого",
    "ему",
    "ому",
    "их",
    "ых",
    "ую",
    "юю",
    "ая",
    "яя",
    "ою",
    "ею",
)

PARTICIPLE_AFTER_VOWEL_PREFIXES = ("ем", "нн", "вш", "ющ", "щ")
PARTICIPLE_PREFIXES = ("ивш", "ывш", "ующ")

PERFECTIVE_GERUND = (
    ("в", "вши", "вшись"),
    ("ив", "ивши", "ившись", "ыв", "ывши", "ывшись"),
)

REFLEXIVE = (("ся", "сь"),)

# participle endings are always followed by an adjective ending
PARTICIPLE = (
    tuple(p + a for p in PARTICIPLE_AFTER_VOWEL_PREFIXES for a in ADJECTIVE),
    tuple(p + a for p in PARTICIPLE_PREFIXES for a in ADJECTIVE),
)

ADJECTIVAL = (ADJECTIVE,)

VERB = (
    (
        "ла",
        "на",
        "ете",
        "йте",
        "ли",
        "й",
        "л",
        "ем",
        "н",
        "ло",
        "но",
        "ет",
        "ют",
        "ны",
        "ть",
        "ешь",
        "нно",
    ),
    (
        "ила",
        "ыла",
        "ена",
        "ейте",
        "уйте",
        "ите",
        "или",
        "ыли",
        "ей",
        "уй",
        "ил",
        "ыл",
        "им",
        "ым",
        "ен",
        "ило",
        "ыло",
        "ено",
        "ят",
        "ует",
        "уют",
        "ит",
        "ыт",
        "ены",
        "ить",
        "ыть",
        "ишь",
        "ую",
        "ю",
    ),
)

NOUN = (
    (
        "а",
        "ев",
        "ов",
        "ие",
        "ье",
        "е",
        "иями",
        "ями",
        "ами",
        "еи",
        "ии",
        "и",
        "ией",
        "ей",
        "ой",
        "ий",
        "й",
        "иям",
        "ям",
        "ием",
        "ем",
        "ам",
        "ом",
        "о",
        "у",
        "ах",
        "иях",
        "ях",
        "ы",
        "ь",
        "ию",
        "ью",
        "ю",
        "ия",
        "ья",
        "я",
    ),
)

TRAILING_I = (("и",),)

DERIVATIONAL = (("ост", "ость"),)

NN = (("нн",),)

SUPERLATIVE = (("ейш", "ейше"),)

SOFT_SIGN = (("ь",),)
