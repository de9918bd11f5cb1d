"""Source location tracking for tokens.

Provides SourceLocation for reporting where a token came from.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Source location of a token.

    Lines and columns are 1-indexed; offsets are 0-indexed indices into
    the source string, ``end_offset`` exclusive.

    Examples:
            >>> loc = SourceLocation(lineno=3, col_offset=5)
            >>> str(loc)
            '3:5'

            >>> loc = SourceLocation(3, 5, source_file="Main_Page.wiki")
            >>> str(loc)
            'Main_Page.wiki:3:5'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    end_offset: int = 0
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for log and error messages."""
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    def span_to(self, end: SourceLocation) -> SourceLocation:
        """Create a new location spanning from this location to end."""
        return SourceLocation(
            lineno=self.lineno,
            col_offset=self.col_offset,
            offset=self.offset,
            end_offset=end.end_offset or end.offset,
            source_file=self.source_file,
        )
