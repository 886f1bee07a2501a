"""
Tests for the Document line buffer and indent/block tracking.
"""
import pytest

from stencil.components.emitter import DiagnosticKind, Document
from stencil.errors import DocumentSealedError


def test_line_indentation_and_terminator(document):
    """Test that lines pick up the current depth and optional terminator."""
    document.line("a")
    document.push_indent()
    document.line("b", terminate=True)
    document.line("c", indent=False)
    document.line("d", indent_offset=-1)

    assert document.text == "a\n\tb;\nc\nd\n"


def test_negative_indent_offset_is_clamped(document):
    """Test that an offset driving depth below zero emits no indentation."""
    document.line("label:", indent_offset=-3)
    assert document.text == "label:\n"
    assert document.is_consistent


def test_blank_line_has_no_indentation(document):
    document.push_indent()
    document.line()
    assert document.text == "\n"


def test_blank_line_makes_document_non_empty(document):
    assert document.is_empty
    document.line()
    assert not document.is_empty


def test_custom_indent_unit():
    document = Document("out.h", indent_unit="    ")
    document.start_block()
    document.line("x", terminate=True)
    document.end_block()
    assert document.text == "{\n    x;\n}\n"


@pytest.mark.parametrize("depth", [1, 2, 5])
def test_balanced_blocks_restore_state(document, depth):
    """Test that nested balanced blocks leave no open blocks or indentation."""
    for level in range(depth):
        document.start_block()
        document.line(f"level{level}", terminate=True)
    for _ in range(depth):
        document.end_block()

    assert document.block_count == 0
    assert document.indent_depth == 0
    assert document.is_consistent
    lines = document.text.splitlines()
    assert lines[2 * depth - 1] == "\t" * depth + f"level{depth - 1};"
    assert lines[-1] == "}"


def test_block_without_indent(document):
    document.start_block(indent=False)
    document.line("x")
    document.end_block(unindent=False, terminate=True)

    assert document.text == "{\nx\n};\n"
    assert document.indent_depth == 0
    assert document.block_count == 0


def test_end_block_without_open_block_is_recorded(document):
    """Test that an unmatched close still emits output and records a mismatch."""
    document.end_block()
    document.end_block(unindent=False)

    assert document.block_count == 0
    assert document.text == "}\n}\n"
    kinds = [d.kind for d in document.diagnostics]
    assert DiagnosticKind.BLOCK_MISMATCH in kinds
    assert kinds.count(DiagnosticKind.BLOCK_MISMATCH) == 2
    assert not document.is_consistent


def test_pop_indent_underflow_is_noop(document):
    document.pop_indent()

    assert document.indent_depth == 0
    assert [d.kind for d in document.diagnostics] == [DiagnosticKind.INDENT_UNDERFLOW]
    assert document.diagnostics[0].line_number == 1

    # Still usable afterwards
    document.line("still here")
    assert document.text == "still here\n"


def test_diagnostics_are_copies(document):
    document.pop_indent()
    document.diagnostics.clear()
    assert len(document.diagnostics) == 1


def test_same_operations_produce_identical_text():
    def emit(doc):
        doc.line("struct A")
        doc.start_block()
        doc.line("int32 B", terminate=True)
        doc.end_block(terminate=True)
        return doc.text

    assert emit(Document("a.h")) == emit(Document("a.h"))


def test_sealed_document_rejects_emission(document):
    document.line("x")
    document.seal()

    assert document.sealed
    with pytest.raises(DocumentSealedError):
        document.line("y")
    assert document.text == "x\n"
