"""Tests for Diagnostic: factories, builder semantics, with_file, position."""

import pytest
from rich.pretty import pretty_repr

from codespan_reporting.diagnostic.models import Diagnostic, Label, LabelStyle, Severity


@pytest.mark.parametrize(
    "factory, severity",
    [
        (Diagnostic.bug, Severity.BUG),
        (Diagnostic.error, Severity.ERROR),
        (Diagnostic.warning, Severity.WARNING),
        (Diagnostic.note, Severity.NOTE),
        (Diagnostic.help, Severity.HELP),
    ],
)
def test_factories(factory, severity):
    diag = factory()
    assert diag == Diagnostic.new(severity)
    assert diag.severity is severity
    assert diag.code is None
    assert diag.message == ""
    assert diag.labels == []
    assert diag.notes == []


def test_unused_variable_scenario():
    diag = (
        Diagnostic.warning()
        .with_message("unused variable")
        .with_labels([Label.primary("file_a", range(10, 14)).with_message("`x` never read")])
        .with_notes(["consider removing it"])
    )
    assert diag.severity is Severity.WARNING
    assert diag.code is None
    assert diag.message == "unused variable"
    assert len(diag.labels) == 1
    label = diag.labels[0]
    assert label.style is LabelStyle.PRIMARY
    assert label.file_id == "file_a"
    assert (label.range.start, label.range.end) == (10, 14)
    assert label.message == "`x` never read"
    assert diag.notes == ["consider removing it"]


def test_message_and_code_replace():
    diag = Diagnostic.error().with_message("a").with_message("b").with_code("E1").with_code("E2")
    assert diag.message == "b"
    assert diag.code == "E2"


def test_labels_append():
    a = Label.primary(0, (0, 1))
    b = Label.secondary(0, (2, 3))
    diag = Diagnostic.error().with_labels([a]).with_labels([b])
    assert diag.labels == [a, b]


def test_labels_iter_accepts_generator():
    diag = Diagnostic.error().with_labels([Label.primary(0, (0, 1))])
    diag.with_labels_iter(Label.secondary(0, (i, i + 1)) for i in range(3))
    assert [label.range.start for label in diag.labels] == [0, 0, 1, 2]


def test_with_labels_does_not_consume_caller_list():
    labels = [Label.primary(0, (0, 1))]
    Diagnostic.error().with_labels(labels)
    assert len(labels) == 1


def test_notes_append_in_order():
    diag = (
        Diagnostic.note()
        .with_notes(["first", "second\nspans lines"])
        .with_notes_iter(iter(["third"]))
    )
    assert diag.notes == ["first", "second\nspans lines", "third"]


def test_builder_returns_same_object():
    diag = Diagnostic.help()
    assert diag.with_message("m") is diag
    assert diag.with_labels([]) is diag


def test_with_file_rebinds_every_label():
    diag = (
        Diagnostic.error()
        .with_code("E0308")
        .with_message("mismatched types")
        .with_labels(
            [
                Label.primary_anon((10, 12)).with_message("expected `i32`"),
                Label.secondary_anon((0, 4)).with_message("declared here"),
            ]
        )
        .with_notes(["expected type `i32`"])
    )
    rebound = diag.with_file("main.rs")

    assert all(label.file_id == "main.rs" for label in rebound.labels)
    assert [(l.style, l.range, l.message) for l in rebound.labels] == [
        (l.style, l.range, l.message) for l in diag.labels
    ]
    assert rebound.severity is diag.severity
    assert rebound.code == diag.code
    assert rebound.message == diag.message
    assert rebound.notes == diag.notes
    # the anonymous diagnostic is left alone
    assert all(label.file_id is None for label in diag.labels)


def test_with_file_copies_file_id_per_label():
    file_id = ["shared"]
    diag = Diagnostic.error().with_labels([Label.primary_anon((0, 1)), Label.primary_anon((2, 3))])
    rebound = diag.with_file(file_id)
    assert rebound.labels[0].file_id == file_id
    assert rebound.labels[0].file_id is not rebound.labels[1].file_id


def test_position_prefers_primary():
    diag = Diagnostic.error().with_labels(
        [
            Label.secondary(0, (1, 2)),
            Label.primary(0, (30, 35)),
            Label.primary(0, (20, 25)),
            Label.secondary(0, (0, 1)),
        ]
    )
    assert diag.position == 20


def test_position_falls_back_to_secondary():
    diag = Diagnostic.error().with_labels([Label.secondary(0, (9, 10)), Label.secondary(0, (4, 6))])
    assert diag.position == 4


def test_position_without_labels():
    assert Diagnostic.error().position is None


def test_primary_and_secondary_views():
    p = Label.primary(0, (5, 6))
    s = Label.secondary(0, (1, 2))
    diag = Diagnostic.error().with_labels([s, p])
    assert diag.primary_labels == [p]
    assert diag.secondary_labels == [s]


def test_diagnostic_equality():
    def build():
        return Diagnostic.error().with_message("m").with_labels([Label.primary(1, (0, 1))])

    assert build() == build()
    assert build() != build().with_notes(["extra"])


def test_rich_repr_omits_defaults():
    text = pretty_repr(Diagnostic.warning().with_message("unused"))
    assert "Diagnostic(" in text
    assert "unused" in text
    assert "code" not in text
    assert "notes" not in text
