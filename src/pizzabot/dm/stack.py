"""Dialog stack management.

Frames live in the explicit TurnState handle; the stack only knows how to
drive the sequences they point at.
"""

import logging
from collections.abc import Iterable
from typing import Any

from pizzabot.core.constants import DialogTurnStatus, SequenceStatus
from pizzabot.core.errors import DialogStackError, UnknownDialogStatusError
from pizzabot.core.types import DialogFrame, DialogTurnResult
from pizzabot.dm.context import TurnContext
from pizzabot.dm.waterfall import WaterfallSequence

logger = logging.getLogger(__name__)

_TURN_STATUS = {
    SequenceStatus.waiting_for_input: DialogTurnStatus.waiting,
    SequenceStatus.completed: DialogTurnStatus.complete,
    SequenceStatus.cancelled: DialogTurnStatus.cancelled,
}


class DialogStack:
    """Per-conversation LIFO of active sequences.

    `continue_dialog` always targets the top frame, and only the top frame
    may be waiting for input.
    """

    def __init__(self, sequences: Iterable[WaterfallSequence] = ()) -> None:
        self._sequences: dict[str, WaterfallSequence] = {}
        for sequence in sequences:
            self.add(sequence)

    def add(self, sequence: WaterfallSequence) -> None:
        if sequence.sequence_id in self._sequences:
            raise DialogStackError(f"Sequence '{sequence.sequence_id}' already registered")
        self._sequences[sequence.sequence_id] = sequence

    def find(self, sequence_id: str) -> WaterfallSequence:
        try:
            return self._sequences[sequence_id]
        except KeyError:
            raise DialogStackError(f"Unknown sequence '{sequence_id}'") from None

    def active_frame(self, ctx: TurnContext) -> DialogFrame | None:
        frames = ctx.state.dialog.frames
        return frames[-1] if frames else None

    async def push(
        self,
        ctx: TurnContext,
        sequence_id: str,
        options: dict[str, Any] | None = None,
    ) -> DialogTurnResult:
        """Push a new frame and begin its sequence."""
        sequence = self.find(sequence_id)
        parent = self.active_frame(ctx)
        if parent is not None and parent.status == SequenceStatus.waiting_for_input:
            # Suspended under the child; re-asks its question when resumed
            parent.status = SequenceStatus.running

        frame = DialogFrame(sequence_id=sequence_id, options=options or {})
        ctx.state.dialog.frames.append(frame)
        logger.debug(
            f"Pushed '{sequence_id}'",
            extra={"frame_id": frame.frame_id, "depth": len(ctx.state.dialog.frames)},
        )

        result = await sequence.begin(ctx, frame)
        return self._turn_result(frame, result)

    async def continue_dialog(self, ctx: TurnContext, reply: str) -> DialogTurnResult:
        """Route the reply to the top frame.

        Returns:
            `empty` when nothing is active, otherwise the frame's outcome.
        """
        frame = self.active_frame(ctx)
        if frame is None:
            return DialogTurnResult(status=DialogTurnStatus.empty)

        sequence = self.find(frame.sequence_id)
        result = await sequence.resume(ctx, frame, reply)
        return self._turn_result(frame, result)

    def pop(self, ctx: TurnContext) -> DialogFrame:
        """Remove the top frame."""
        frames = ctx.state.dialog.frames
        if not frames:
            raise DialogStackError("Cannot pop from empty dialog stack")
        frame = frames.pop()
        logger.debug(f"Popped '{frame.sequence_id}'", extra={"frame_id": frame.frame_id})
        return frame

    async def cancel_all(self, ctx: TurnContext) -> bool:
        """Cancel every frame, top first.

        Returns:
            True if anything was active.
        """
        frames = ctx.state.dialog.frames
        if not frames:
            return False

        while frames:
            frame = frames.pop()
            await self.find(frame.sequence_id).on_cancel(ctx, frame)
            logger.debug(f"Cancelled '{frame.sequence_id}'", extra={"frame_id": frame.frame_id})
        return True

    async def reprompt(self, ctx: TurnContext) -> bool:
        """Re-send the top frame's pending question.

        Returns:
            True if a question was pending.
        """
        frame = self.active_frame(ctx)
        if frame is None or frame.status != SequenceStatus.waiting_for_input:
            return False
        await self.find(frame.sequence_id).reprompt(ctx, frame)
        return True

    @staticmethod
    def _turn_result(frame: DialogFrame, result: Any) -> DialogTurnResult:
        status = _TURN_STATUS.get(frame.status)
        if status is None:
            raise UnknownDialogStatusError(
                f"Sequence '{frame.sequence_id}' stopped in status '{frame.status.value}'"
            )
        return DialogTurnResult(status=status, result=result)
