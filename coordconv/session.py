"""
Interactive conversion session.

The session is a small state machine driven by a blocking "read one line"
callable:

    AWAITING_FIRST_INPUT -> AWAITING_SECOND_INPUT -> AWAITING_FORMAT_CHOICE -> DONE

A decimal pair on the first line skips AWAITING_SECOND_INPUT. The values read
so far live in an immutable SessionContext that each step returns a new copy
of. Invalid input re-asks the same question; "exit" or end of input finishes
the session without output.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Optional

from coordconv.coordinate import Coordinate
from coordconv.coordinates import FormatError, parse_decimal, parse_decimal_pair, parse_single
from coordconv.detector import detect_notation, is_single_decimal
from coordconv.messages import Messages
from coordconv.session_config import FlowMode, SessionConfig, get_default_config
from coordconv.types import Axis, Degrees, Notation

logger = logging.getLogger(__name__)

EXIT_COMMAND = "exit"

ReadLine = Callable[[str], Optional[str]]
"""Show a prompt and return the next input line, or None at end of input."""

Write = Callable[[str], None]
"""Print one line of output."""


class SessionState(str, Enum):
    AWAITING_FIRST_INPUT = "awaiting_first_input"
    AWAITING_SECOND_INPUT = "awaiting_second_input"
    AWAITING_FORMAT_CHOICE = "awaiting_format_choice"
    DONE = "done"


class OutputChoice(str, Enum):
    """Output notation tokens accepted at the format prompt."""

    DECIMAL = "decimal"
    DMS = "dms"
    COMPACT = "compact"
    ALL = "all"

    @property
    def notations(self) -> tuple[Notation, ...]:
        if self is OutputChoice.ALL:
            return tuple(Notation)
        return (Notation(self.value),)


@dataclass(frozen=True)
class SessionContext:
    """Values collected so far in one session.

    Attributes:
        state: Current state of the session
        lat: Parsed latitude, once known
        lon: Parsed longitude, once known
        first_notation: Notation detected for the first input line
    """

    state: SessionState = SessionState.AWAITING_FIRST_INPUT
    lat: Optional[Degrees] = None
    lon: Optional[Degrees] = None
    first_notation: Optional[Notation] = None

    @property
    def coordinate(self) -> Coordinate:
        if self.lat is None or self.lon is None:
            raise RuntimeError(f"Coordinate not complete in state {self.state.value}")
        return Coordinate(lat=self.lat, lon=self.lon)


@dataclass(frozen=True)
class FirstInput:
    """Result of reading the first input line."""

    notation: Notation
    lat: Degrees
    lon: Optional[Degrees] = None


class PromptFlow(ABC):
    """Strategy deciding how latitude and longitude are asked for."""

    @abstractmethod
    def first_prompt(self, messages: Messages) -> str:
        pass

    @abstractmethod
    def read_first(self, text: str) -> FirstInput:
        """Parse the first line; lon is set when the line held both axes.

        Raises:
            FormatError: If the line is not accepted
        """
        pass

    @abstractmethod
    def read_second(self, text: str, first_notation: Notation) -> Degrees:
        """Parse the longitude line.

        Raises:
            FormatError: If the line is not accepted
        """
        pass

    def second_prompt(self, messages: Messages, first_notation: Optional[Notation]) -> str:
        if first_notation is Notation.DMS:
            return messages.longitude_dms_prompt
        if first_notation is Notation.COMPACT:
            return messages.longitude_compact_prompt
        return messages.longitude_prompt


class CombinedFlow(PromptFlow):
    """One line may hold both axes; otherwise the longitude follows in the same notation."""

    def first_prompt(self, messages: Messages) -> str:
        return messages.coordinate_prompt

    def read_first(self, text: str) -> FirstInput:
        notation = detect_notation(text)
        if notation is Notation.DECIMAL:
            lat, lon = parse_decimal_pair(text)
            return FirstInput(notation, lat, lon)
        return FirstInput(notation, parse_single(text, notation, Axis.LATITUDE))

    def read_second(self, text: str, first_notation: Notation) -> Degrees:
        return parse_single(text, first_notation, Axis.LONGITUDE)


class SplitFlow(PromptFlow):
    """Latitude and longitude on separate prompts, each detected on its own.

    A single decimal number is accepted at either prompt. A decimal pair at the
    latitude prompt supplies both axes; at the longitude prompt it is rejected.
    """

    def first_prompt(self, messages: Messages) -> str:
        return messages.latitude_prompt

    def read_first(self, text: str) -> FirstInput:
        if is_single_decimal(text):
            return FirstInput(Notation.DECIMAL, parse_decimal(text))
        notation = detect_notation(text)
        if notation is Notation.DECIMAL:
            lat, lon = parse_decimal_pair(text)
            return FirstInput(notation, lat, lon)
        return FirstInput(notation, parse_single(text, notation, Axis.LATITUDE))

    def read_second(self, text: str, first_notation: Notation) -> Degrees:
        if is_single_decimal(text):
            return parse_decimal(text)
        notation = detect_notation(text)
        if notation is Notation.DECIMAL:
            raise FormatError(text, notation, "Expected a single longitude value")
        return parse_single(text, notation, Axis.LONGITUDE)


FLOWS: dict[FlowMode, PromptFlow] = {
    FlowMode.COMBINED: CombinedFlow(),
    FlowMode.SPLIT: SplitFlow(),
}


class ConversionSession:
    """Line-oriented converter session.

    Example:
        >>> lines = iter(["34.03,-118.81", "decimal"])
        >>> session = ConversionSession(lambda prompt: next(lines, None), print)
        >>> session.run().state
        Input coordinate (decimal): 34.03, -118.81
        Decimal: 34.030000, -118.810000
        <SessionState.DONE: 'done'>
    """

    def __init__(self, read_line: ReadLine, write: Write, config: Optional[SessionConfig] = None):
        self.config = config or get_default_config()
        self.flow = FLOWS[self.config.flow]
        self.messages = self.config.messages
        self._read_line = read_line
        self._write = write

    def prompt_for(self, context: SessionContext) -> str:
        """Question text (followed by the input marker) for the context's state."""
        if context.state is SessionState.AWAITING_FIRST_INPUT:
            question = self.flow.first_prompt(self.messages)
        elif context.state is SessionState.AWAITING_SECOND_INPUT:
            question = self.flow.second_prompt(self.messages, context.first_notation)
        elif context.state is SessionState.AWAITING_FORMAT_CHOICE:
            question = self.messages.format_prompt
        else:
            raise RuntimeError("Session is already done")
        return f"{question}\n{self.messages.prompt_marker}"

    def run(self) -> SessionContext:
        """Ask questions until the session is done or input ends."""
        context = SessionContext()
        while context.state is not SessionState.DONE:
            line = self._read_line(self.prompt_for(context))
            if line is None:
                logger.debug("End of input in state %s", context.state.value)
                return replace(context, state=SessionState.DONE)
            context = self.step(context, line)
        return context

    def step(self, context: SessionContext, line: str) -> SessionContext:
        """Handle one input line and return the next context.

        A FormatError is reported with the format help and leaves the context
        unchanged so the same question is asked again.
        """
        text = line.strip()
        if text.lower() == EXIT_COMMAND:
            logger.debug("Exit requested in state %s", context.state.value)
            return replace(context, state=SessionState.DONE)

        try:
            if context.state is SessionState.AWAITING_FIRST_INPUT:
                next_context = self._handle_first_input(context, text)
            elif context.state is SessionState.AWAITING_SECOND_INPUT:
                next_context = self._handle_second_input(context, text)
            elif context.state is SessionState.AWAITING_FORMAT_CHOICE:
                next_context = self._handle_format_choice(context, text)
            else:
                raise RuntimeError("Session is already done")
        except FormatError as e:
            logger.info("Rejected input %r: %s", e.text, e)
            self._write(self.messages.error.format(message=e))
            self._write(self.messages.help_block())
            return context

        logger.debug("State %s -> %s", context.state.value, next_context.state.value)
        return next_context

    def _handle_first_input(self, context: SessionContext, text: str) -> SessionContext:
        first = self.flow.read_first(text)
        if first.lon is not None:
            return self._coordinate_read(replace(context, first_notation=first.notation), first.lat, first.lon)
        return replace(
            context,
            state=SessionState.AWAITING_SECOND_INPUT,
            lat=first.lat,
            first_notation=first.notation,
        )

    def _handle_second_input(self, context: SessionContext, text: str) -> SessionContext:
        lon = self.flow.read_second(text, context.first_notation)
        return self._coordinate_read(context, context.lat, lon)

    def _coordinate_read(self, context: SessionContext, lat: Degrees, lon: Degrees) -> SessionContext:
        if self.config.echo_decimal:
            self._write(self.messages.echo_decimal.format(lat=lat, lon=lon))
        return replace(context, state=SessionState.AWAITING_FORMAT_CHOICE, lat=lat, lon=lon)

    def _handle_format_choice(self, context: SessionContext, text: str) -> SessionContext:
        try:
            choice = OutputChoice(text.lower())
        except ValueError:
            self._write(self.messages.invalid_choice)
            return replace(context, state=SessionState.DONE)

        for result in context.coordinate.render_lines(choice.notations):
            self._write(result)
        return replace(context, state=SessionState.DONE)
