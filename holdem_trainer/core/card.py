"""
Card and deck helpers for Texas Hold'em.

A deck is a plain list of cards. Dealing always pops from the tail of the
list, so the last card of a freshly shuffled deck is the first one dealt.
"""

from __future__ import annotations
import random
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import List, Optional, Sequence, Tuple

from holdem_trainer.core.errors import DeckExhausted


class Suit(Enum):
    """Card suits, valued by their display symbol."""
    SPADES = "♠"
    HEARTS = "♥"
    DIAMONDS = "♦"
    CLUBS = "♣"


class Rank(IntEnum):
    """Card ranks valued 2 (lowest) to 14 (Ace)."""
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14


# Deck construction order
SUITS: Tuple[Suit, ...] = (Suit.SPADES, Suit.HEARTS, Suit.DIAMONDS, Suit.CLUBS)
RANKS: Tuple[Rank, ...] = tuple(Rank)

RANK_CHARS = {
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "T",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.ACE: "A",
}

# PokerStars hand histories use lower-case suit letters
SUIT_CHARS = {
    Suit.SPADES: "s",
    Suit.HEARTS: "h",
    Suit.DIAMONDS: "d",
    Suit.CLUBS: "c",
}

CHAR_TO_RANK = {v: k for k, v in RANK_CHARS.items()}
CHAR_TO_RANK["10"] = Rank.TEN
CHAR_TO_SUIT = {v: k for k, v in SUIT_CHARS.items()}
SYMBOL_TO_SUIT = {s.value: s for s in Suit}


@dataclass(frozen=True)
class Card:
    """
    An immutable playing card.

    Cards can be created from:
    - Rank and Suit enums: Card(Rank.ACE, Suit.SPADES)
    - String notation: Card.from_string("As") or Card.from_string("A♠")
    """
    rank: Rank
    suit: Suit

    @classmethod
    def from_string(cls, s: str) -> Card:
        """
        Create a card from string notation.

        Accepts "As", "Td", "10h" (rank + suit letter) and "A♠", "K♥"
        (rank + suit symbol).
        """
        s = s.strip()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank_part, suit_part = s[:-1].upper(), s[-1]
        if rank_part not in CHAR_TO_RANK:
            raise ValueError(f"Invalid rank: {rank_part}")

        if suit_part.lower() in CHAR_TO_SUIT:
            suit = CHAR_TO_SUIT[suit_part.lower()]
        elif suit_part in SYMBOL_TO_SUIT:
            suit = SYMBOL_TO_SUIT[suit_part]
        else:
            raise ValueError(f"Invalid suit: {suit_part}")

        return cls(CHAR_TO_RANK[rank_part], suit)

    @property
    def short_str(self) -> str:
        """PokerStars notation such as 'As', 'Td'."""
        return f"{RANK_CHARS[self.rank]}{SUIT_CHARS[self.suit]}"

    @property
    def color(self) -> str:
        """Return 'red' for hearts/diamonds, 'black' for clubs/spades."""
        return "red" if self.suit in (Suit.HEARTS, Suit.DIAMONDS) else "black"

    def __repr__(self) -> str:
        return f"Card({self.short_str})"

    def __str__(self) -> str:
        return f"{RANK_CHARS[self.rank]}{self.suit.value}"

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "rank": RANK_CHARS[self.rank],
            "suit": self.suit.value,
            "text": str(self),
            "color": self.color,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Card:
        return cls(CHAR_TO_RANK[data["rank"]], SYMBOL_TO_SUIT[data["suit"]])


def make_deck() -> List[Card]:
    """Build the 52 cards in a fixed order: suits ♠ ♥ ♦ ♣, ranks 2 to A."""
    return [Card(rank, suit) for suit in SUITS for rank in RANKS]


def shuffle(cards: Sequence[Card], rng: Optional[random.Random] = None) -> List[Card]:
    """
    Return a uniformly shuffled copy of ``cards``.

    ``random.shuffle`` is a tail-first Fisher-Yates pass; the input is
    never touched.
    """
    result = list(cards)
    (rng or random).shuffle(result)
    return result


def draw(deck: Sequence[Card], count: int, what: str = "cards") -> Tuple[List[Card], List[Card]]:
    """
    Pop ``count`` cards from the tail of the deck.

    Returns:
        Tuple of (cards in pop order, remaining deck)

    Raises:
        DeckExhausted: If fewer than ``count`` cards remain.
    """
    if count > len(deck):
        raise DeckExhausted(count, len(deck), what)
    remaining = list(deck)
    dealt = [remaining.pop() for _ in range(count)]
    return dealt, remaining


def parse_cards(cards_str: str) -> List[Card]:
    """
    Parse several cards from a string.

    Accepts "As Kh Td" (space separated) or "AsKhTd" (two characters each).
    """
    cards_str = cards_str.strip()
    if not cards_str:
        return []
    if " " in cards_str:
        return [Card.from_string(s) for s in cards_str.split()]
    if len(cards_str) % 2:
        raise ValueError(f"Cannot parse cards: {cards_str}")
    return [Card.from_string(cards_str[i:i + 2]) for i in range(0, len(cards_str), 2)]


def cards_to_str(cards: Sequence[Card]) -> str:
    """Join cards in PokerStars notation, e.g. 'Ah Kd 7c'."""
    return " ".join(c.short_str for c in cards)
