"""DSPy signatures for intent classification.

Uses Pydantic types for structured output and rich descriptions to guide the LLM.
"""

from typing import Literal

import dspy
from pydantic import BaseModel, Field


class UtteranceAnalysis(BaseModel):
    """Structured reading of one user utterance."""

    intent: Literal["ordering_pizza", "cancel", "help", "none"] = Field(
        description="What the user wants to do"
    )
    pizza_name: str | None = Field(default=None, description="Pizza the user mentions, if any")
    pizza_pieces: int | None = Field(
        default=None, description="Number of pieces the user mentions, if any"
    )
    confidence: float = Field(default=1.0, ge=0.0, le=1.0)


class ClassifyUtterance(dspy.Signature):
    """Classify a message sent to a pizza ordering assistant.

    RULES:
    1. "ordering_pizza" when the user wants to order or mentions wanting a pizza
    2. "cancel" when the user wants to stop or abandon what is going on
    3. "help" when the user asks what the assistant can do or needs help
    4. "none" for anything else, including bare answers like "2" or "Margherita"
    5. Extract pizza_name and pizza_pieces whenever they are mentioned,
       regardless of the intent
    """

    utterance: str = dspy.InputField(desc="User's message")
    result: UtteranceAnalysis = dspy.OutputField(desc="Intent and extracted values")
