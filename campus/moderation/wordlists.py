"""Default word lists and patterns for the local moderation stages.

All keywords are lower-case and matched on word boundaries, so multi-word
phrases are allowed. Duplicates across groups are harmless; the loader
de-duplicates while preserving order.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Blocked keywords (hard block)
# ---------------------------------------------------------------------------

PROFANITY = (
    "fuck", "shit", "bitch", "asshole", "bastard", "damn", "crap", "dick",
    "pussy", "cunt", "motherfucker", "fucking", "slut", "whore", "prick",
    "wank", "bollocks", "piss", "twat", "fuck you", "die bitch",
)

SLURS = (
    "nigger", "nigga", "chink", "gook", "spic", "wetback", "faggot", "fag",
    "dyke", "tranny", "retard", "mongoloid", "kike", "yid", "paki",
    "towelhead", "sandnigger", "jap", "cripple", "invalid", "cretin",
)

VIOLENCE = (
    "kill", "murder", "shoot", "stab", "bomb", "blow up", "execute",
    "slaughter", "massacre", "hang", "lynch", "beat up", "attack", "assault",
    "burn", "rape", "kidnap", "decapitate", "torture", "mutilate",
    "you're dead", "i'll kill you", "kill you", "explode", "assassinate",
    "threaten", "threat",
)

HARASSMENT = (
    "idiot", "stupid", "dumb", "moron", "imbecile", "loser", "worthless",
    "pathetic", "ugly", "fat", "disgusting", "repulsive", "scum", "trash",
    "garbage", "useless", "incompetent", "fool", "clown", "joke", "pitiful",
    "sad", "failure", "hopeless", "desperate", "weak", "coward", "chicken",
    "scared", "afraid", "terrified", "fearful", "harassment", "bully", "fail",
)

HATE = (
    "hate", "hate speech", "racist", "sexist", "nazi", "slur", "animals",
    "filth", "vermin", "pest", "parasite", "leech", "freak", "monster",
    "beast", "savage", "barbarian", "primitive", "inferior", "superior",
    "pure", "impure", "defile", "contaminate", "pollute",
)

SEXUAL = (
    "sex", "sexual", "blowjob", "handjob", "cum", "orgasm", "dildo",
    "vibrator", "porn", "pornography", "nude", "naked", "erection", "penis",
    "vagina", "anal", "oral", "masturbation", "gangbang", "fetish", "bdsm",
    "incest", "bestiality", "necrophilia", "pedophile", "pedophilia",
    "underage", "child porn", "obscene", "explicit", "adult", "mature",
    "intimate", "private", "bedroom", "bed", "sleep", "night", "touch",
    "feel", "kiss", "hug", "love", "romance", "relationship",
)

EXTREMISM = (
    "jihad", "terrorist", "terrorism", "isis", "al qaeda", "bomb-making",
    "martyrdom", "holy war", "recruit fighters", "radicalize", "join isis",
    "kill infidels",
)

SELF_HARM = (
    "suicide", "kill myself", "kill yourself", "end it all", "cut myself",
    "slit wrists", "overdose", "hang myself", "jump off", "no reason to live",
    "i want to die", "no point", "pointless", "meaningless", "despair",
    "self harm", "bleed", "die", "death", "dead", "gone", "over", "finished",
    "done", "enough", "can't take it", "can't handle",
)

DRUGS = (
    "weed", "marijuana", "cocaine", "heroin", "meth", "crack", "lsd",
    "shrooms", "ecstasy", "mdma", "drug dealing", "buy drugs", "sell drugs",
    "fentanyl", "narcotics", "trafficking", "smuggling", "cartel",
)

ACADEMIC_DISHONESTY = (
    "pay someone to do", "buy assignment", "sell answers", "exam leak",
    "cheat sheet", "get someone to write", "plagiarize", "copy-paste",
    "essay mill", "contract cheating",
)

SENSITIVE_TOPICS = (
    "child abuse", "sexual assault", "genocide", "holocaust denial",
    "school shooting", "bomb threat", "removed",
)

SPAM = (
    "click this", "click here", "click this link", "free money", "win money",
    "earn money", "make money", "quick cash", "fast cash", "easy money",
    "rich", "millionaire", "billionaire", "credit card", "bank account",
    "password", "login", "sign up", "register", "subscribe", "buy now",
    "limited time", "act now", "don't miss", "exclusive", "secret", "hidden",
    "revealed",
)

GENERALIZATIONS = (
    "nobody likes", "everyone hates", "no one cares", "nobody wants",
    "everyone knows", "everybody thinks", "should be banned",
    "should be removed", "should be deleted", "should be killed",
    "should be destroyed", "should be eliminated",
)

BLOCKED_KEYWORDS: tuple[str, ...] = (
    PROFANITY
    + SLURS
    + VIOLENCE
    + HARASSMENT
    + HATE
    + SEXUAL
    + EXTREMISM
    + SELF_HARM
    + DRUGS
    + ACADEMIC_DISHONESTY
    + SENSITIVE_TOPICS
    + SPAM
    + GENERALIZATIONS
)

# ---------------------------------------------------------------------------
# Sentiment scoring
# ---------------------------------------------------------------------------

# Each occurrence adds one point to the toxicity score.
NEGATIVE_WORDS: tuple[str, ...] = (
    # insults and hate
    "fuck you", "kill yourself", "die bitch", "you're dead", "i'll kill you",
    "nazi", "terrorist", "slur", "hate", "stupid", "idiot", "dumb",
    "worthless", "disgusting", "animals", "removed", "obscene",
    # harassment
    "you're such a", "you are a", "you're a", "you are such", "you're such",
    "hope you", "wish you", "want you to", "should be", "deserve to",
    # self-harm
    "end it all", "no point", "pointless", "meaningless", "hopeless",
    "despair", "desperate", "suicide", "kill myself", "self harm",
    # spam
    "click this", "free money", "win money", "earn money", "make money",
    "quick cash", "fast cash", "easy money", "credit card", "bank account",
    # generalizations
    "nobody likes", "everyone hates", "should be banned",
    "should be removed", "should be killed",
)

# ---------------------------------------------------------------------------
# Harmful phrase patterns (case-insensitive regular expressions)
# ---------------------------------------------------------------------------

HARMFUL_PATTERNS: tuple[str, ...] = (
    # hate speech
    r"\b(all|every|nobody|everyone|no one)\s+[a-z]+\s+(are|is|likes|hates|wants|knows|thinks)\b",
    r"\b(should be|deserve to|hope you|wish you|want you to)\s+(banned|removed|killed|destroyed|eliminated|fail|die)\b",
    # harassment
    r"\b(you're|you are)\s+(such a|a)\s+(worthless|useless|stupid|idiot|dumb|pathetic|loser)\b",
    # self-harm
    r"\b(end it all|no point|pointless|meaningless|hopeless|despair|desperate)\b",
    r"\b(can't take it|can't handle|can't deal|can't cope)\b",
    # spam
    r"\b(click this|click here|free money|win money|earn money|make money)\b",
    r"\b(credit card|bank account|password|login|sign up|register)\b",
    # sexual / explicit
    r"\b(obscene|sexual|porn|nude|naked|explicit|adult|mature)\b",
    r"\b(intimate|private|bedroom|bed|sleep|night|touch|feel)\b",
)
