# stencil/components/emitter/declarations.py
"""
Declaration-level emission primitives.

The builder composes comments, reflection annotations, members and
class/struct scaffolding out of ``Document`` lines and blocks. It never
raises for structural problems; those surface as Document diagnostics.
"""
from typing import FrozenSet, Iterable, Optional

from stencil.constants import (
    CLASS_ANNOTATION, DEFAULT_PROJECT_NAME, DEFAULT_RESERVED_NAMES,
    DEFAULT_STRUCT_SPECIFIERS, FUNCTION_ANNOTATION, GENERATED_BODY_MARKER,
    LOCALIZED_TEXT_TYPE, PROPERTY_ANNOTATION, STRUCT_ANNOTATION,
    TEXT_RESOLVER_FUNCTION,
)
from stencil.components.emitter.document import Document
from stencil.components.emitter.naming import export_macro_token, split_name


class DeclarationBuilder:
    """
    Emits declarations into a Document.

    Args:
        document: The Document to append to
        project_name: Project the export macro is derived from
        reserved_names: Localized-text property names that get no accessor
        localized_text_type: Type name that triggers accessor generation
    """

    def __init__(
        self,
        document: Document,
        project_name: str = DEFAULT_PROJECT_NAME,
        reserved_names: Optional[Iterable[str]] = None,
        localized_text_type: str = LOCALIZED_TEXT_TYPE
    ):
        self.document = document
        self.project_name = project_name
        self.reserved_names: FrozenSet[str] = frozenset(
            DEFAULT_RESERVED_NAMES if reserved_names is None else reserved_names
        )
        self.localized_text_type = localized_text_type

    # ----------------------------------------------------------- passthrough

    def line(self, text: str = "", terminate: bool = False, indent: bool = True, indent_offset: int = 0) -> None:
        self.document.line(text, terminate, indent, indent_offset)

    def blank_line(self) -> None:
        self.document.line()

    def start_block(self, indent: bool = True) -> None:
        self.document.start_block(indent)

    def end_block(self, unindent: bool = True, terminate: bool = False) -> None:
        self.document.end_block(unindent, terminate)

    # ------------------------------------------------------------ primitives

    def comment(self, text: str) -> None:
        self.line(f"/** {text} */")

    def access_modifier(self, text: str) -> None:
        """Emit ``public:``-style labels at the level of the enclosing header."""
        label = text if text.endswith(":") else f"{text}:"
        self.line(label, indent_offset=-1)

    def annotation(self, kind: str, specifiers: str = "") -> None:
        self.line(f"{kind}({specifiers})")

    def property_annotation(self, specifiers: str = "") -> None:
        self.annotation(PROPERTY_ANNOTATION, specifiers)

    def function_annotation(self, specifiers: str = "") -> None:
        self.annotation(FUNCTION_ANNOTATION, specifiers)

    def export_macro(self) -> str:
        return export_macro_token(self.project_name)

    # ---------------------------------------------------------- declarations

    def declaration(
        self,
        type_name: str,
        name: str,
        default_value: Optional[str] = None,
        comment: Optional[str] = None,
        annotated: bool = False,
        annotation_specifiers: str = ""
    ) -> None:
        """
        Emit a member declaration ``type name [= default];``.

        Annotated localized-text members whose name is not reserved also get a
        read accessor that resolves the text through the owning object.
        """
        if comment:
            self.comment(comment)

        if annotated:
            self.property_annotation(annotation_specifiers)

        statement = f"{type_name} {name}"
        if default_value:
            statement += f" = {default_value}"
        self.line(statement, terminate=True)

        if annotated and self.wants_localized_accessor(type_name, name):
            self._localized_accessor(type_name, name)

    def wants_localized_accessor(self, type_name: str, name: str) -> bool:
        return type_name == self.localized_text_type and name not in self.reserved_names

    def _localized_accessor(self, type_name: str, name: str) -> None:
        label = f"Get {split_name(name)} (Localized)"
        self.function_annotation(f'BlueprintPure, meta=(DisplayName="{label}")')
        self.line(f"{type_name} Get{name}() {{ return {TEXT_RESOLVER_FUNCTION}({name}); }}")

    # ------------------------------------------------------ types and scopes

    def start_class(
        self,
        name: str,
        comment: Optional[str] = None,
        annotated: bool = False,
        class_specifiers: str = ""
    ) -> None:
        if comment:
            self.comment(comment)
        if annotated:
            self.annotation(CLASS_ANNOTATION, class_specifiers)
        self._open_type("class", name, annotated)

    def start_struct(
        self,
        name: str,
        comment: Optional[str] = None,
        annotated: bool = False
    ) -> None:
        if comment:
            self.comment(comment)
        if annotated:
            self.annotation(STRUCT_ANNOTATION, DEFAULT_STRUCT_SPECIFIERS)
        self._open_type("struct", name, annotated)

    def _open_type(self, keyword: str, name: str, annotated: bool) -> None:
        macro = self.export_macro() if annotated else ""
        self.line(" ".join(part for part in (keyword, macro, name) if part))
        self.start_block(indent=True)
        if annotated:
            self.line(GENERATED_BODY_MARKER)
            self.blank_line()

    def end_struct(self, inline_declaration: Optional[str] = None) -> None:
        """
        Close a class or struct.

        With ``inline_declaration`` the close is followed by ``name;`` for the
        anonymous-struct-with-instance idiom instead of ``};``.
        """
        self.end_block(unindent=True, terminate=not inline_declaration)
        if inline_declaration:
            self.line(inline_declaration, terminate=True)

    def end_class(self) -> None:
        self.end_struct()
