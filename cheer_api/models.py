"""Response models for the cheer API."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel


class JokeType(str, Enum):
    """Joke variants served by /joke."""

    DAD = "dad"
    FUNNY = "funny"
    NERDY = "nerdy"
    HR = "hr"
    RIDDLE = "riddle"

    @classmethod
    def parse(cls, value: Optional[str]) -> "JokeType":
        """Case-insensitive lookup; anything unrecognised behaves as dad."""
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            return cls.DAD


class Quote(BaseModel):
    text: str
    author: Optional[str] = None


class Verse(BaseModel):
    reference: str
    text: str


class Song(BaseModel):
    artist: str
    title: str


class Joke(BaseModel):
    text: str


class Riddle(BaseModel):
    question: str
    answer: str


class Health(BaseModel):
    ok: bool = True


class ErrorEnvelope(BaseModel):
    error: str
