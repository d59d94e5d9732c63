"""Default EQ battery: paired positive/reversed statements plus single statements."""
from __future__ import annotations

from typing import List

from .config import LIKERT_LABELS
from .types import Option, Question

# (pair id, positive, reversed, module, submodule, category)
BASE_PAIRS: tuple[tuple[str, str, str, str, str, str], ...] = (
    ("awareness1", "I am aware of my emotions as soon as I feel them.",
     "I often do not notice my emotions until much later.",
     "Goleman", "Self-Awareness", "Self-Awareness"),
    ("regulate1", "I remain calm when facing stressful situations.",
     "I often lose my temper when things are stressful.",
     "Goleman", "Self-Regulation", "Stress Management"),
    ("empathy1", "I consider other people's feelings when making decisions.",
     "I rarely think about others' emotions when deciding.",
     "Goleman", "Empathy", "Empathy"),
    ("manage1", "I can manage my emotions to achieve my goals.",
     "My emotions often get in the way of what I want to accomplish.",
     "MSCEIT", "Managing Emotions", "Management"),
    ("use1", "I use my feelings to prioritize important tasks.",
     "My feelings rarely help me decide what's important.",
     "MSCEIT", "Using Emotions", "Facilitation"),
    ("express1", "I feel confident expressing my ideas to others.",
     "I find it difficult to share my thoughts and feelings.",
     "EQ-i 2.0", "Self-Expression", "Self-Expression"),
    ("optimism1", "I remain optimistic in challenging situations.",
     "I tend to expect the worst when challenges arise.",
     "EQ-i 2.0", "Stress Management", "Optimism"),
    ("collab1", "I collaborate effectively with my team members.",
     "Working with others often slows me down.",
     "EQ-i 2.0", "Interpersonal", "Collaboration"),
    ("adapt1", "I adapt quickly to unexpected changes.",
     "I struggle to adjust when things change suddenly.",
     "Goleman", "Self-Regulation", "Adaptability"),
    ("perceive1", "I can accurately read emotions in facial expressions.",
     "I often misinterpret people's facial expressions.",
     "MSCEIT", "Perceiving Emotions", "Perception"),
)

# (text, module, submodule, category)
SINGLES: tuple[tuple[str, str, str, str], ...] = (
    ("I motivate myself to pursue long-term goals.", "Goleman", "Motivation", "Motivation"),
    ("I keep working toward a goal after setbacks.", "Goleman", "Motivation", "Motivation"),
    ("I praise others when they perform well.", "Goleman", "Social Skills", "Leadership"),
    ("I can settle disagreements between colleagues.", "Goleman", "Social Skills", "Conflict"),
    ("I notice how my mood affects my work.", "Goleman", "Self-Awareness", "Self-Awareness"),
    ("I listen closely when someone shares a problem.", "Goleman", "Empathy", "Empathy"),
    ("I can explain complex feelings clearly to others.", "EQ-i 2.0", "Self-Expression", "Self-Expression"),
    ("I know my strengths and weaknesses.", "EQ-i 2.0", "Self-Perception", "Self-Regard"),
    ("I feel good about who I am.", "EQ-i 2.0", "Self-Perception", "Self-Regard"),
    ("I think through consequences before acting on impulse.", "EQ-i 2.0", "Decision Making", "Impulse Control"),
    ("I weigh facts and feelings when solving problems.", "EQ-i 2.0", "Decision Making", "Problem Solving"),
    ("I keep good relationships with people I work with.", "EQ-i 2.0", "Interpersonal", "Relationships"),
    ("I handle pressure without losing focus.", "EQ-i 2.0", "Stress Management", "Stress Tolerance"),
    ("I stay focused on tasks even when distracted by emotions.", "MSCEIT", "Using Emotions", "Facilitation"),
    ("I can tell when a friend is upset before they say so.", "MSCEIT", "Perceiving Emotions", "Perception"),
    ("I understand why my feelings change from one moment to the next.", "MSCEIT", "Understanding Emotions", "Understanding"),
    ("I can predict how a piece of news will make someone feel.", "MSCEIT", "Understanding Emotions", "Understanding"),
    ("I can calm myself down after being upset.", "MSCEIT", "Managing Emotions", "Management"),
    ("I help others feel better when they are down.", "MSCEIT", "Managing Emotions", "Management"),
    ("I can lift a team's mood when morale is low.", "Goleman", "Social Skills", "Leadership"),
)


def likert_options(reversed_: bool = False) -> List[Option]:
    """Five-point agreement scale, values 1..5. Reversed items score from the top down."""
    n = len(LIKERT_LABELS)
    step = 100.0 / (n - 1)
    out = []
    for i, label in enumerate(LIKERT_LABELS):
        score = (n - 1 - i) * step if reversed_ else i * step
        out.append(Option(label=label, value=i + 1, score=score))
    return out


def build_default_battery() -> List[Question]:
    items: List[Question] = []
    for pid, pos, neg, module, sub, cat in BASE_PAIRS:
        items.append(Question(
            id=f"{pid}_pos", text=pos, type="likert", module=module, submodule=sub,
            category=cat, options=likert_options(), inconsistency_pair_id=pid, is_reversed=False,
        ))
        items.append(Question(
            id=f"{pid}_rev", text=neg, type="likert", module=module, submodule=sub,
            category=cat, options=likert_options(reversed_=True), inconsistency_pair_id=pid, is_reversed=True,
        ))
    for idx, (text, module, sub, cat) in enumerate(SINGLES, start=1):
        items.append(Question(
            id=f"single{idx:02d}", text=text, type="likert", module=module, submodule=sub,
            category=cat, options=likert_options(),
        ))
    return items
