"""Interactive single-operation calculator working on text streams."""
from typing import TextIO

from pydantic import BaseModel, ConfigDict, Field

from arithmetic_toolkit.common.logger import logger
from arithmetic_toolkit.common.models import ComputationResult, EquationRequest, ParseResult
from arithmetic_toolkit.common.parser import OPERATORS, TokenReader, parse_number


class CalculatorEngine(BaseModel):
    """
    Prompt for an equation on a stream, compute it and write the outcome.

    Protocol:
        1. Prompt for the equation label and read one token (unused)
        2. Prompt for and read the first operand
        3. Prompt for and read the operator symbol
        4. Prompt for and read the second operand
        5. Write the result, or one of the error messages

    Domain and input errors are written to the output stream, never raised.
    """

    # Make the Pydantic instance immutable (read-only), the engine holds no state across calls
    model_config = ConfigDict(frozen=True)

    equation_prompt: str = Field(default="Type your equation\n", description="Prompt for the equation label")
    first_prompt: str = Field(default="Enter first number: ", description="Prompt for the first operand")
    operator_prompt: str = Field(
        default="Enter operation(+, -, /, *): ", description="Prompt for the operator symbol"
    )
    second_prompt: str = Field(default="Enter second number: ", description="Prompt for the second operand")

    division_by_zero_error: str = Field(default="Error: Division by zero!")
    invalid_operation_error: str = Field(default="Error: Invalid operation!")
    invalid_number_error: str = Field(default="Error: Invalid number!")

    def evaluate(self, request: EquationRequest) -> ComputationResult:
        """
        Apply the request's operator to its operands.

        :param EquationRequest request: Parsed equation

        :return: Value of the operation, or the matching error message
        :rtype: ComputationResult
        """
        operation = OPERATORS.get(request.operator)
        if operation is None:
            return ComputationResult(error=self.invalid_operation_error)

        # Exact comparison, no epsilon
        if request.operator == "/" and request.second == 0:
            return ComputationResult(error=self.division_by_zero_error)

        return ComputationResult(value=operation(request.first, request.second))

    def _prompt(self, out: TextIO, text: str) -> None:
        out.write(text)
        out.flush()

    def _read_operand(self, reader: TokenReader, out: TextIO, prompt: str) -> ParseResult:
        self._prompt(out, prompt)
        parsed = parse_number(reader.next_token())
        if not parsed.ok:
            logger.warning(f"🔢❌ Rejected operand: {parsed.reason}")
        return parsed

    def run(self, input_stream: TextIO, output_stream: TextIO) -> ComputationResult:
        """
        Run one interactive calculation.

        A malformed or missing operand stops the session right away with the
        invalid number message; nothing more is read or prompted.

        :param TextIO input_stream: Stream holding the label, operands and operator
        :param TextIO output_stream: Stream receiving prompts and the outcome

        :return: The outcome that was written to the output stream
        :rtype: ComputationResult
        """
        reader = TokenReader(input_stream)

        self._prompt(output_stream, self.equation_prompt)
        label = reader.next_token() or ""

        first = self._read_operand(reader, output_stream, self.first_prompt)
        if not first.ok:
            return self._finish(output_stream, ComputationResult(error=self.invalid_number_error))

        self._prompt(output_stream, self.operator_prompt)
        # A missing operator token falls through to the invalid operation branch
        symbol = reader.next_token() or ""

        second = self._read_operand(reader, output_stream, self.second_prompt)
        if not second.ok:
            return self._finish(output_stream, ComputationResult(error=self.invalid_number_error))

        request = EquationRequest(label=label, first=first.value, operator=symbol, second=second.value)
        logger.info(f"🧮 Evaluating {request.first} {request.operator} {request.second} ({request.label!r})")
        return self._finish(output_stream, self.evaluate(request))

    def _finish(self, out: TextIO, result: ComputationResult) -> ComputationResult:
        if result.ok:
            logger.info(f"🧮✅ Result: {result.value}")
        else:
            logger.info(f"🧮❌ {result.error}")
        # No trailing newline, the caller decides how the line ends
        self._prompt(out, result.render())
        return result


_DEFAULT_ENGINE = CalculatorEngine()


def calculate(input_stream: TextIO, output_stream: TextIO) -> ComputationResult:
    """
    Run one interactive calculation with the default prompts and messages.

    :param TextIO input_stream: Stream to read tokens from
    :param TextIO output_stream: Stream to write prompts and the outcome to

    :return: The outcome that was written to the output stream
    :rtype: ComputationResult
    """
    return _DEFAULT_ENGINE.run(input_stream, output_stream)
