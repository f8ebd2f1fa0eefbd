"""Configuration models for the ordering bot."""

from pydantic import BaseModel, Field

from pizzabot.config.settings import SettingsConfig


class SlotAliasesConfig(BaseModel):
    """Entity names that may carry each slot, highest priority first.

    Providers name the same entity differently; the first alias present in a
    classifier result wins.
    """

    pizza_name: list[str] = Field(
        default_factory=lambda: ["pizza_name", "pizza_name:pizza_name", "PizzaName"]
    )
    pizza_pieces: list[str] = Field(
        default_factory=lambda: ["number", "wit$number:number", "PizzaPieces"]
    )


class IntentAliasesConfig(BaseModel):
    """Provider intent names mapped onto the bot's intents."""

    ordering: list[str] = Field(
        default_factory=lambda: ["ordering_pizza", "OrderingPizza", "Ordering"]
    )
    cancel: list[str] = Field(default_factory=lambda: ["cancel", "Cancel"])
    help: list[str] = Field(default_factory=lambda: ["help", "Help"])


class MessagesConfig(BaseModel):
    """User-facing texts."""

    pizza_name_prompt: str = "What pizza do you take?"
    pizza_pieces_prompt: str = "How many pieces?"
    order_summary: str = "Your order: {name} {pieces}"
    canceled: str = "Ok. I canceled the last activity."
    nothing_to_cancel: str = "I have nothing to cancel."
    help_ack: str = "Happy to help."
    help_text: str = "I order pizzas, give help or cancel what I am doing."
    not_understood: str = "I don't understand what you are saying."
    nlu_unavailable: str = "Sorry, I could not understand that right now. Please try again."


class BotConfig(BaseModel):
    """Main configuration model."""

    version: str = "1.0"
    settings: SettingsConfig = Field(default_factory=SettingsConfig)
    slots: SlotAliasesConfig = Field(default_factory=SlotAliasesConfig)
    intents: IntentAliasesConfig = Field(default_factory=IntentAliasesConfig)
    messages: MessagesConfig = Field(default_factory=MessagesConfig)
    welcome_card: str | None = Field(
        default=None, description="Path to a welcome card JSON overriding the packaged one"
    )
