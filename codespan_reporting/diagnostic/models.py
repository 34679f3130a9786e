# Pydantic data models for diagnostics: Severity, LabelStyle, Label, Diagnostic.

import copy
from enum import Enum
from typing import Any, Generic, Iterable, List, Optional, Sequence, TypeVar

import rich.repr
from pydantic import BaseModel, Field, field_validator

from codespan_reporting.diagnostic.ranges import ByteRange, to_byte_range

# Opaque key into a file database owned by the renderer. Only equality and repr
# are needed in general; Diagnostic.with_file also copies it once per label.
FileId = TypeVar("FileId")
NewFileId = TypeVar("NewFileId")


class Severity(str, Enum):
    """
    Escalation level of a diagnostic.

    Ordered by declaration: HELP < NOTE < WARNING < ERROR < BUG.
    """

    HELP = "help"
    NOTE = "note"
    WARNING = "warning"
    ERROR = "error"
    BUG = "bug"

    @property
    def rank(self) -> int:
        return list(type(self)).index(self)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank >= other.rank


class LabelStyle(str, Enum):
    """Whether a label marks the primary cause or supporting context."""

    PRIMARY = "primary"
    SECONDARY = "secondary"

    @property
    def rank(self) -> int:
        return 1 if self is LabelStyle.PRIMARY else 0

    def outranks(self, other: "LabelStyle") -> bool:
        return self.rank > other.rank

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, LabelStyle):
            return NotImplemented
        return self.rank < other.rank

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, LabelStyle):
            return NotImplemented
        return self.rank > other.rank


class Label(BaseModel, Generic[FileId]):
    """
    An underlined region of code attached to a diagnostic.

    ``range`` is a byte range into the file identified by ``file_id``; it is
    stored as given, even when it is inverted or past the end of the file.
    ``message`` should be a single line and may be empty.
    """

    style: LabelStyle
    file_id: FileId
    range: ByteRange
    message: str = ""

    model_config = {"arbitrary_types_allowed": True}

    @field_validator("range", mode="before")
    @classmethod
    def _coerce_range(cls, value: Any) -> Any:
        if isinstance(value, (range, slice, tuple, list)):
            return to_byte_range(value)
        return value

    @classmethod
    def new(cls, style: LabelStyle, file_id: FileId, range: Any) -> "Label[FileId]":
        """Create a label; ``range`` is anything to_byte_range() accepts."""
        return cls(style=style, file_id=file_id, range=to_byte_range(range))

    @classmethod
    def primary(cls, file_id: FileId, range: Any) -> "Label[FileId]":
        return cls.new(LabelStyle.PRIMARY, file_id, range)

    @classmethod
    def secondary(cls, file_id: FileId, range: Any) -> "Label[FileId]":
        return cls.new(LabelStyle.SECONDARY, file_id, range)

    # Anonymous labels carry None as a placeholder file id until with_file().

    @classmethod
    def new_anon(cls, style: LabelStyle, range: Any) -> "Label[None]":
        return cls.new(style, None, range)

    @classmethod
    def primary_anon(cls, range: Any) -> "Label[None]":
        return cls.new_anon(LabelStyle.PRIMARY, range)

    @classmethod
    def secondary_anon(cls, range: Any) -> "Label[None]":
        return cls.new_anon(LabelStyle.SECONDARY, range)

    @property
    def is_primary(self) -> bool:
        return self.style is LabelStyle.PRIMARY

    def with_message(self, message: Any) -> "Label[FileId]":
        """Set the message. The old message (if any) is discarded."""
        self.message = str(message)
        return self

    def with_file(self, file_id: NewFileId) -> "Label[NewFileId]":
        """Return a copy of this label pointing at ``file_id`` instead."""
        return Label(
            style=self.style,
            file_id=file_id,
            range=self.range.model_copy(),
            message=self.message,
        )

    def __rich_repr__(self) -> rich.repr.Result:
        yield "style", self.style
        yield "file_id", self.file_id
        yield "range", (self.range.start, self.range.end)
        yield "message", self.message, ""


class Diagnostic(BaseModel, Generic[FileId]):
    """
    A single reportable condition: severity, code, summary, labels and notes.

    Built with one of the severity factories and the ``with_*`` methods, which
    update the diagnostic in place and return it so calls can be chained.
    ``with_code``/``with_message`` replace; ``with_labels``/``with_notes``
    append.

    The order of ``labels`` carries no meaning; renderers sort them by source
    position. The order of ``notes`` is kept as given.
    """

    severity: Severity
    code: Optional[str] = None
    message: str = ""
    labels: List[Label[FileId]] = Field(default_factory=list)
    notes: List[str] = Field(default_factory=list)

    model_config = {"arbitrary_types_allowed": True}

    @classmethod
    def new(cls, severity: Severity) -> "Diagnostic[FileId]":
        return cls(severity=severity)

    @classmethod
    def bug(cls) -> "Diagnostic[FileId]":
        return cls.new(Severity.BUG)

    @classmethod
    def error(cls) -> "Diagnostic[FileId]":
        return cls.new(Severity.ERROR)

    @classmethod
    def warning(cls) -> "Diagnostic[FileId]":
        return cls.new(Severity.WARNING)

    @classmethod
    def note(cls) -> "Diagnostic[FileId]":
        return cls.new(Severity.NOTE)

    @classmethod
    def help(cls) -> "Diagnostic[FileId]":
        return cls.new(Severity.HELP)

    def with_code(self, code: Any) -> "Diagnostic[FileId]":
        """Set the code. The old code (if any) is discarded."""
        self.code = str(code)
        return self

    def with_message(self, message: Any) -> "Diagnostic[FileId]":
        """Set the message. The old message (if any) is discarded."""
        self.message = str(message)
        return self

    def with_labels(self, labels: Sequence[Label[FileId]]) -> "Diagnostic[FileId]":
        """Append labels after the existing ones. The caller's list is not modified."""
        self.labels.extend(labels)
        return self

    def with_labels_iter(self, labels: Iterable[Label[FileId]]) -> "Diagnostic[FileId]":
        """Like with_labels() but accepts any iterable, e.g. a generator."""
        for label in labels:
            self.labels.append(label)
        return self

    def with_notes(self, notes: Sequence[Any]) -> "Diagnostic[FileId]":
        """Append notes after the existing ones. Notes may span several lines."""
        self.notes.extend(str(note) for note in notes)
        return self

    def with_notes_iter(self, notes: Iterable[Any]) -> "Diagnostic[FileId]":
        for note in notes:
            self.notes.append(str(note))
        return self

    def with_file(self, file_id: NewFileId) -> "Diagnostic[NewFileId]":
        """
        Return a new diagnostic with every label pointing at ``file_id``.

        Meant for diagnostics built from anonymous labels that all concern a
        single file. Each label gets its own shallow copy of ``file_id``; the
        receiver is left as it was.
        """
        return Diagnostic(
            severity=self.severity,
            code=self.code,
            message=self.message,
            labels=[label.with_file(copy.copy(file_id)) for label in self.labels],
            notes=list(self.notes),
        )

    @property
    def primary_labels(self) -> List[Label[FileId]]:
        return [label for label in self.labels if label.style is LabelStyle.PRIMARY]

    @property
    def secondary_labels(self) -> List[Label[FileId]]:
        return [label for label in self.labels if label.style is LabelStyle.SECONDARY]

    @property
    def position(self) -> Optional[int]:
        """
        Start offset of the earliest label within the highest style present.

        Primary labels win whenever there is at least one; otherwise the
        secondary labels are used. None if the diagnostic has no labels.
        Only the offset is reported, so labels that tie on style and start
        are indistinguishable here.
        """
        if not self.labels:
            return None
        top = max(label.style.rank for label in self.labels)
        return min(label.range.start for label in self.labels if label.style.rank == top)

    def __rich_repr__(self) -> rich.repr.Result:
        yield "severity", self.severity
        yield "code", self.code, None
        yield "message", self.message, ""
        yield "labels", self.labels, []
        yield "notes", self.notes, []
