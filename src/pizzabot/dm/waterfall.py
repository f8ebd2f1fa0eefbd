"""Waterfall step sequencer.

A sequence is an ordered list of steps driven as an explicit state machine.
The resume token is the frame itself: sequence id, step index and status
are all persisted, so a sequence suspended waiting for an answer picks up
at the same step on the next turn.
"""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, Literal

from pizzabot.core.constants import SequenceStatus
from pizzabot.core.errors import DialogStackError
from pizzabot.core.types import DialogFrame
from pizzabot.dm.context import TurnContext
from pizzabot.validation import ValidatorRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StepOutcome:
    """What a step asks the sequencer to do next."""

    kind: Literal["next", "prompt", "jump", "end"]
    prompt: str | None = None
    target: str | None = None
    result: Any = None

    @classmethod
    def next(cls) -> "StepOutcome":
        return cls(kind="next")

    @classmethod
    def ask(cls, prompt: str) -> "StepOutcome":
        return cls(kind="prompt", prompt=prompt)

    @classmethod
    def jump(cls, target: str) -> "StepOutcome":
        return cls(kind="jump", target=target)

    @classmethod
    def end(cls, result: Any = None) -> "StepOutcome":
        return cls(kind="end", result=result)


StepHandler = Callable[[TurnContext, DialogFrame], Awaitable[StepOutcome]]
ValueHandler = Callable[[TurnContext, Any], None]


@dataclass
class WaterfallStep:
    """One step of a sequence.

    Steps that prompt must name a validator and a value handler: the answer
    to the prompt is validated on resume and, once accepted, handed to
    `on_value` before the sequence advances.
    """

    name: str
    run: StepHandler
    validator: str | None = None
    on_value: ValueHandler | None = None


class WaterfallSequence:
    """Ordered steps executed one after another across turns."""

    def __init__(self, sequence_id: str, steps: list[WaterfallStep]) -> None:
        if not steps:
            raise ValueError(f"Sequence '{sequence_id}' has no steps")
        self.sequence_id = sequence_id
        self.steps = steps

    def index_of(self, step_name: str) -> int:
        for i, step in enumerate(self.steps):
            if step.name == step_name:
                return i
        raise DialogStackError(f"Sequence '{self.sequence_id}' has no step '{step_name}'")

    async def begin(self, ctx: TurnContext, frame: DialogFrame) -> Any:
        """Start the sequence from its first step."""
        frame.step_index = 0
        frame.prompt = None
        return await self._run(ctx, frame)

    async def resume(self, ctx: TurnContext, frame: DialogFrame, reply: str) -> Any:
        """Feed the user's reply to the step the frame is waiting on.

        A frame that is not waiting (it was suspended under a child frame)
        re-runs its current step instead, without consuming the reply. So
        does a waiting step that no longer asks its question, because the
        slot was filled from entities earlier in the turn.
        """
        if frame.status != SequenceStatus.waiting_for_input:
            return await self._run(ctx, frame)

        step = self.steps[frame.step_index]
        if step.validator is None or step.on_value is None:
            raise DialogStackError(
                f"Step '{step.name}' of '{self.sequence_id}' is waiting but cannot take input"
            )

        # The slot may have been filled from entities since the question was asked
        current = await step.run(ctx, frame)
        if current.kind != "prompt":
            frame.status = SequenceStatus.running
            frame.prompt = None
            return await self._run(ctx, frame, current)

        outcome = ValidatorRegistry.validate(step.validator, reply)
        if not outcome.valid:
            logger.debug(
                f"Answer to '{step.name}' rejected",
                extra={"sequence": self.sequence_id, "step": step.name},
            )
            if outcome.message:
                await ctx.send(outcome.message)
            await self.reprompt(ctx, frame)
            return None

        step.on_value(ctx, outcome.value)
        frame.step_index += 1
        frame.prompt = None
        return await self._run(ctx, frame)

    async def reprompt(self, ctx: TurnContext, frame: DialogFrame) -> None:
        """Re-send the pending question without consuming input."""
        if frame.status == SequenceStatus.waiting_for_input and frame.prompt:
            await ctx.send(frame.prompt)

    async def on_cancel(self, ctx: TurnContext, frame: DialogFrame) -> None:
        """Hook run when the frame is cancelled."""
        frame.status = SequenceStatus.cancelled

    async def _run(
        self, ctx: TurnContext, frame: DialogFrame, outcome: StepOutcome | None = None
    ) -> Any:
        while True:
            if outcome is None:
                if frame.step_index >= len(self.steps):
                    frame.status = SequenceStatus.completed
                    return None

                step = self.steps[frame.step_index]
                frame.status = SequenceStatus.running
                outcome = await step.run(ctx, frame)

            match outcome.kind:
                case "next":
                    frame.step_index += 1
                case "jump":
                    frame.step_index = self.index_of(str(outcome.target))
                case "prompt":
                    frame.status = SequenceStatus.waiting_for_input
                    frame.prompt = outcome.prompt
                    await ctx.send(str(outcome.prompt))
                    return None
                case "end":
                    frame.status = SequenceStatus.completed
                    frame.prompt = None
                    return outcome.result
            outcome = None
