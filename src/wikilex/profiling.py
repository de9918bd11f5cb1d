"""Opt-in tokenize metrics.

Inside ``profiled_tokenize()`` every ``tokenize()`` call reports how much
source it read, how many tokens it produced and how many characters the
state machine had to read a second time. Pushbacks are bounded by the source
length, so ``pushback_ratio`` stays within ``[0, 1]``; markup dense with
lone pipes, brackets and failed tag names pushes it up.

Outside a profiled block ``get_tokenize_accumulator()`` is None and
``tokenize()`` records nothing.

Example:
    from wikilex import tokenize
    from wikilex.profiling import profiled_tokenize

    with profiled_tokenize() as metrics:
        for page in pages:
            tokenize(page)

    print(metrics.summary())
    # {"total_ms": 4.1, "tokenize_calls": 12, "pushback_ratio": 0.03, ...}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class TokenizeAccumulator:
    """Running totals over the tokenize() calls of one profiled block.

    Attributes:
        start_time: perf_counter() value when the block was entered.
        source_length: Characters read, summed over calls.
        token_count: Tokens produced, summed over calls.
        pushback_count: Characters read twice, summed over calls.
        tokenize_calls: Number of calls recorded.

    """

    start_time: float = field(default_factory=perf_counter)
    source_length: int = 0
    token_count: int = 0
    pushback_count: int = 0
    tokenize_calls: int = 0

    def record_tokenize(self, source_length: int, token_count: int, pushback_count: int) -> None:
        self.tokenize_calls += 1
        self.source_length += source_length
        self.token_count += token_count
        self.pushback_count += pushback_count

    @property
    def total_duration_ms(self) -> float:
        """Milliseconds since the block was entered."""
        return (perf_counter() - self.start_time) * 1000

    @property
    def pushback_ratio(self) -> float:
        """Pushbacks per source character (0.0 when nothing was read)."""
        if not self.source_length:
            return 0.0
        return self.pushback_count / self.source_length

    @property
    def tokens_per_call(self) -> float:
        if not self.tokenize_calls:
            return 0.0
        return self.token_count / self.tokenize_calls

    def summary(self) -> dict[str, Any]:
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "tokenize_calls": self.tokenize_calls,
            "source_length": self.source_length,
            "token_count": self.token_count,
            "pushback_count": self.pushback_count,
            "pushback_ratio": round(self.pushback_ratio, 4),
            "tokens_per_call": round(self.tokens_per_call, 2),
        }


_accumulator: ContextVar[TokenizeAccumulator | None] = ContextVar(
    "tokenize_accumulator",
    default=None,
)


def get_tokenize_accumulator() -> TokenizeAccumulator | None:
    """Return the active accumulator, or None outside profiled_tokenize()."""
    return _accumulator.get()


@contextmanager
def profiled_tokenize() -> Iterator[TokenizeAccumulator]:
    """Collect tokenize metrics for the duration of the with block.

    Blocks nest: the innermost accumulator receives the calls, and the
    outer one is active again once the inner block exits.
    """
    acc = TokenizeAccumulator()
    reset_token: Token[TokenizeAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(reset_token)
