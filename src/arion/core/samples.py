"""Built-in sample deck of general-knowledge flashcards."""

from datetime import date

from arion.core.deck import Deck
from arion.core.models import Flashcard

SAMPLE_CARDS = (
    ("What is the capital of France?", "Paris"),
    ('Who wrote "To Kill a Mockingbird"?', "Harper Lee"),
    ("What is the chemical symbol for gold?", "Au"),
    ("What year did World War II end?", "1945"),
    ("Who painted the Mona Lisa?", "Leonardo da Vinci"),
    ("What is the powerhouse of the cell?", "Mitochondria"),
    ("What is the tallest mountain in the world?", "Mount Everest"),
    ("Who invented the telephone?", "Alexander Graham Bell"),
    ("What is the largest planet in our solar system?", "Jupiter"),
    ("What is the chemical formula for water?", "H2O"),
    ("What is the process of plants making their food called?", "Photosynthesis"),
    ("Who discovered penicillin?", "Alexander Fleming"),
    ("What is the longest river in the world?", "The Nile"),
    ("What is the main component of the Earth's atmosphere?", "Nitrogen"),
    ("Who developed the theory of relativity?", "Albert Einstein"),
    ("What is the largest ocean on Earth?", "Pacific Ocean"),
    ('Who wrote "Romeo and Juliet"?', "William Shakespeare"),
    ("What is the capital of Japan?", "Tokyo"),
    ("What is the chemical symbol for silver?", "Ag"),
    ("What is the freezing point of water in Fahrenheit?", "32 degrees Fahrenheit"),
    ("What is the largest mammal on Earth?", "Blue whale"),
    ("Who was the first woman to win a Nobel Prize?", "Marie Curie"),
    ("What is the largest desert in the world?", "Antarctica"),
    ("What is the chemical formula for glucose?", "C6H12O6"),
)


def sample_deck(today: date | None = None) -> Deck:
    """A fresh deck of sample cards, all due ``today``."""
    if today is None:
        today = date.today()
    return Deck(Flashcard(front=front, back=back, review_date=today) for front, back in SAMPLE_CARDS)
