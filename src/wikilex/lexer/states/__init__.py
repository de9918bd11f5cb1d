"""States of the tokenizer FSM.

Each module holds one family of states:

states/
├── base.py       # BaseState, Transition, StateHost
├── text.py       # TextState (default state and dispatch)
├── quote.py      # QuoteState (bold / italic)
├── angle.py      # '<' states: start tag, end tag, comment opener
├── brackets.py   # '{', '}', '[', ']', '|' markers
└── runs.py       # dash, hash and space runs
"""

from wikilex.lexer.states.angle import (
    CommentStartState,
    EndTagState,
    OpenAngleState,
    StartTagState,
)
from wikilex.lexer.states.base import BaseState, StateHost, Transition
from wikilex.lexer.states.brackets import (
    BraceCloseState,
    BraceOpenState,
    BracketCloseState,
    BracketOpenState,
    PipeState,
)
from wikilex.lexer.states.quote import QuoteState, split_quote_run
from wikilex.lexer.states.runs import DashRunState, HashRunState, SpaceRunState
from wikilex.lexer.states.text import TextState

__all__ = [
    "BaseState",
    "BraceCloseState",
    "BraceOpenState",
    "BracketCloseState",
    "BracketOpenState",
    "CommentStartState",
    "DashRunState",
    "EndTagState",
    "HashRunState",
    "OpenAngleState",
    "PipeState",
    "QuoteState",
    "SpaceRunState",
    "StartTagState",
    "StateHost",
    "TextState",
    "Transition",
    "split_quote_run",
]
