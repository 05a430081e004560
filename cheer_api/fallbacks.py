"""Curated static content served when every provider for a kind fails.

The tables are built once at import and never mutated. Every pool holds at
least one entry so the pickers below cannot fail.
"""

import random
from typing import Dict, List, Tuple

from cheer_api.models import Joke, JokeType, Quote, Riddle, Song, Verse

FALLBACK_QUOTES: Tuple[Quote, ...] = (
    Quote(text="You are allowed to be soft today."),
    Quote(text="One small step is still a step."),
    Quote(text="Breathe. You are safe."),
    Quote(text="You are loved, loudly and daily."),
    Quote(text="Rest is still love."),
)

FALLBACK_VERSES: Tuple[Verse, ...] = (
    Verse(
        reference="Psalm 34:18",
        text="The Lord is near to the brokenhearted and saves the crushed in spirit.",
    ),
    Verse(
        reference="Isaiah 41:10",
        text="Fear not, for I am with you; be not dismayed, for I am your God.",
    ),
    Verse(
        reference="Matthew 11:28",
        text="Come to me, all who labor and are heavy laden, and I will give you rest.",
    ),
    Verse(
        reference="Philippians 4:13",
        text="I can do all things through him who strengthens me.",
    ),
)

FALLBACK_JOKES: Dict[JokeType, Tuple[str, ...]] = {
    JokeType.DAD: (
        "I’m reading a book about anti‑gravity. It’s impossible to put down.",
        "Why don’t eggs tell jokes? They’d crack each other up.",
        "I used to play piano by ear, but now I use my hands.",
    ),
    JokeType.FUNNY: (
        "I told my computer I needed a break. It said, “No problem, I’ll go to sleep.”",
        "Why did the scarecrow win an award? Because he was outstanding in his field.",
        "I tried to catch fog yesterday. Mist.",
    ),
    JokeType.NERDY: (
        "There are 10 kinds of people: those who understand binary and those who don’t.",
        "A SQL query walks into a bar and asks, “Can I join you?”",
        "I would tell you a UDP joke, but you might not get it.",
    ),
    JokeType.HR: (
        "HR rule #1: If you didn’t document it, it didn’t happen.",
        "Out‑of‑office message: I’m currently avoiding meetings and thriving.",
        "Performance review: exceeds expectations in snack consumption.",
    ),
}

FALLBACK_RIDDLES: Tuple[Riddle, ...] = (
    Riddle(question="What has a heart that doesn’t beat?", answer="An artichoke."),
    Riddle(question="What gets wetter the more it dries?", answer="A towel."),
    Riddle(question="What has keys but can’t open locks?", answer="A piano."),
)

# Checked in order; the first keyword found in the query wins.
SONG_FALLBACKS: Tuple[Tuple[str, Tuple[Song, ...]], ...] = (
    ("adele", (
        Song(artist="Adele", title="Easy On Me"),
        Song(artist="Adele", title="Hello"),
        Song(artist="Adele", title="Hold On"),
    )),
    ("stormzy", (
        Song(artist="Stormzy", title="Blinded By Your Grace, Pt. 2"),
        Song(artist="Stormzy", title="Big For Your Boots"),
        Song(artist="Stormzy", title="Hide & Seek"),
    )),
    ("raye", (
        Song(artist="RAYE", title="Escapism."),
        Song(artist="RAYE", title="Oscar Winning Tears."),
    )),
    ("lucas graham", (
        Song(artist="Lucas Graham", title="7 Years"),
        Song(artist="Lucas Graham", title="Love Someone"),
    )),
    ("gospel", (
        Song(artist="Kirk Franklin", title="I Smile"),
        Song(artist="Maverick City Music", title="Jireh"),
        Song(artist="Tasha Cobbs Leonard", title="Break Every Chain"),
    )),
    ("worship", (
        Song(artist="Hillsong United", title="Oceans (Where Feet May Fail)"),
        Song(artist="Elevation Worship", title="Do It Again"),
    )),
)

DEFAULT_SONGS: Tuple[Song, ...] = (
    Song(artist="Adele", title="Easy On Me"),
    Song(artist="Stormzy", title="Blinded By Your Grace, Pt. 2"),
    Song(artist="Lucas Graham", title="7 Years"),
)


def pick_quote() -> Quote:
    return random.choice(FALLBACK_QUOTES)


def quote_list() -> List[Quote]:
    return list(FALLBACK_QUOTES)


def pick_verse(ref: str) -> Verse:
    """Return the curated verse for ``ref`` if there is one, else any verse."""
    wanted = " ".join(ref.split()).lower()
    matches = [v for v in FALLBACK_VERSES if v.reference.lower() == wanted]
    return random.choice(matches or FALLBACK_VERSES)


def song_pool(query: str) -> Tuple[Song, ...]:
    # TODO: fold diacritics as well once a non-ASCII keyword is added.
    q = query.lower()
    for keyword, songs in SONG_FALLBACKS:
        if keyword in q:
            return songs
    return DEFAULT_SONGS


def pick_song(query: str) -> Song:
    return random.choice(song_pool(query))


def pick_joke(joke_type: JokeType) -> Joke:
    pool = FALLBACK_JOKES.get(joke_type, FALLBACK_JOKES[JokeType.DAD])
    return Joke(text=random.choice(pool))


def pick_riddle() -> Riddle:
    return random.choice(FALLBACK_RIDDLES)
