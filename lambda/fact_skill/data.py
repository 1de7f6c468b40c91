"""
Localized strings for the Thrissur Facts Alexa Skill.

The table is organized by locale. Regional locales only override the keys
that differ from the base ``en`` bundle; every other key falls back to it.
"""

DEFAULT_LOCALE = "en"

# Keys every locale must be able to resolve
REQUIRED_KEYS = (
    "SKILL_NAME",
    "GET_FACT_MESSAGE",
    "HELP_MESSAGE",
    "HELP_REPROMPT",
    "FALLBACK_MESSAGE",
    "FALLBACK_REPROMPT",
    "ERROR_MESSAGE",
    "STOP_MESSAGE",
    "FACTS",
)

# ============================================================================
# English
# ============================================================================

EN_DATA = {
    "SKILL_NAME": "Thrissur Facts",
    "GET_FACT_MESSAGE": "Here's your fact about Thrissur: ",
    "HELP_MESSAGE": (
        "You can say tell me a Thrissur fact, or, you can say exit... "
        "What can I help you with?"
    ),
    "HELP_REPROMPT": "What can I help you with?",
    "FALLBACK_MESSAGE": (
        "The Thrissur Facts skill can't help you with that.  "
        "It can help you discover facts about Thrissur if you say tell me a Thrissur fact. "
        "What can I help you with?"
    ),
    "FALLBACK_REPROMPT": "What can I help you with?",
    "ERROR_MESSAGE": "Sorry, an error occurred.",
    "STOP_MESSAGE": "Goodbye!",
    "FACTS": (
        "Thrissur is known to be as Cultural City in Kerala",
        "Thrissur Pooram is a festival in Thrissur which is referred as festival of festivals",
        "Thrissur has many cultural and historical sites",
        "Thrissur is famous for Art",
        "Pulikali is one of the famous event during Onam at Thrissur",
        (
            "The city is built around a 65-acre  hillock called the Thekkinkadu Maidan "
            "which seats the Vadakkumnathan temple."
        ),
        "The City is widely acclaimed as the land of elephant lovers.",
        (
            "The cuisine of Thrissur is linked to its history, geography, demography and "
            "culture. Rice is the staple food. Achappam,Kuzhalappam and Pazham Pori are "
            "common snacks. Vellayappam, a kind of rice hopper is another dish which is "
            "special to the city."
        ),
        (
            "Asias tallest church, the Our Lady of Dolours Syro-Malabar Catholic Basilica "
            "(Puthan Pally), Our Lady of Lourdes Syro-Malabar Catholic Metropolitan "
            "Cathedral which has an underground shrine, is a masterpiece of architecture."
        ),
        (
            "Guruvayoor, located 30 kms from Thrissur, is one of the most famous Hindu "
            "pilgrim centers in Kerala."
        ),
        (
            "Athirappilly waterfalls in Chalakkudy, Thrissur is one of the most popular "
            "tourism destinations in Kerala. Located right at the entrance of Sholayar "
            "ranges, the waterfalls at Athirappilly has soothing melodious rhythmic sounds "
            "that makes it so relaxing and rejuvenating."
        ),
        (
            "Chavakkad Beach is where you can hang out and watch the waves crashing "
            "against the rocks. It’s absolutely peaceful, quiet and you can blissfully "
            "enjoy the sunset sitting on the golden sands . The beach lies on the coast "
            "of Arabian Sea and is just 6 kilometers from Guruvayoor temple."
        ),
        (
            "Punnathur Kotta is an elephant sanctuary, located just three kilometres away "
            "from the Guruvayoor temple. You can head to the sanctuary after visiting the "
            "temple or sit in sweet surrender at the temple premises."
        ),
        (
            "Shakthan Thampuran Palace is one of the most impressive palaces in Kerala. "
            "You can walk around the well-maintained museum and its grounds, as those "
            "would help you draw insight into the annals of the ruling dynasty and "
            "erstwhile princely states of a bygone era."
        ),
        "Vazhachal Falls in Chalakudy,Thrissur is one of famous water falls at thrissur",
        (
            "Vazhachal is the only place in the Western Ghats where four endangered "
            "hornbill species are seen."
        ),
    ),
}

# ============================================================================
# Regional overrides
# ============================================================================

EN_AU_DATA = {"SKILL_NAME": "Thrissur Facts"}

EN_CA_DATA = {"SKILL_NAME": "Thrissur Facts"}

EN_GB_DATA = {"SKILL_NAME": "Thrissur Facts"}

EN_IN_DATA = {"SKILL_NAME": "Thrissur Facts"}

# The US listing title is published with a leading space
EN_US_DATA = {"SKILL_NAME": " Thrissur Facts"}

LANGUAGE_STRINGS = {
    "en": EN_DATA,
    "en-AU": EN_AU_DATA,
    "en-CA": EN_CA_DATA,
    "en-GB": EN_GB_DATA,
    "en-IN": EN_IN_DATA,
    "en-US": EN_US_DATA,
}
