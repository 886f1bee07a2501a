# stencil/components/generation/generator.py
"""
Header generator driving the emitter from a GenerationSchema.
"""
import json
import sys
from pathlib import Path
from typing import List, Optional, Union

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from pydantic import BaseModel, Field

from stencil.components.emitter.declarations import DeclarationBuilder
from stencil.components.emitter.document import Document
from stencil.components.emitter.models import CommitResult
from stencil.components.emitter.persistence import PersistenceGate
from stencil.components.emitter.validation import check_balanced
from stencil.components.generation.models import FileSpec, GenerationSchema, TypeSpec
from stencil.config import EmitterConfig
from stencil.errors import PersistenceError, StencilError
from stencil.utils.logging import get_logger

logger = get_logger(__name__)


class FileFailure(BaseModel):
    path: Path = Field(..., description="Target path")
    stage: str = Field(..., description="Commit stage that failed")
    error: str = Field(..., description="Error message")


class GenerationReport(BaseModel):
    """Outcome of a generation run."""
    results: List[CommitResult] = Field(default_factory=list, description="Committed files")
    failures: List[FileFailure] = Field(default_factory=list, description="Files that could not be committed")

    @property
    def written(self) -> List[CommitResult]:
        return [r for r in self.results if r.written]

    @property
    def skipped(self) -> List[CommitResult]:
        return [r for r in self.results if not r.written]

    @property
    def success(self) -> bool:
        return not self.failures


def load_schema(path: Union[str, Path]) -> GenerationSchema:
    """
    Load a generation schema from a ``.toml`` or ``.json`` file.

    Raises:
        StencilError: If the file cannot be read or parsed
    """
    path = Path(path)
    try:
        if path.suffix.lower() == ".json":
            data = json.loads(path.read_text(encoding="utf-8"))
        else:
            with open(path, "rb") as f:
                data = tomllib.load(f)
    except (OSError, ValueError) as e:
        # JSONDecodeError and TOMLDecodeError are both ValueErrors
        raise StencilError(f"Could not load schema {path}: {e}") from e

    return GenerationSchema.model_validate(data)


class HeaderGenerator:
    """
    Renders FileSpecs into Documents and commits them.

    Args:
        gate: Persistence gate used for committing
        project_name: Project the export macro is derived from
        emitter_config: Lexical settings; defaults when omitted
    """

    def __init__(
        self,
        gate: PersistenceGate,
        project_name: str,
        emitter_config: Optional[EmitterConfig] = None
    ):
        self.gate = gate
        self.project_name = project_name
        self.emitter_config = emitter_config or EmitterConfig()

    def render(self, file_spec: FileSpec, root: Union[str, Path] = ".") -> Document:
        """Build the Document for one file without committing it."""
        document = Document(Path(root) / file_spec.path, indent_unit=self.emitter_config.indent_unit)
        builder = DeclarationBuilder(
            document,
            project_name=self.project_name,
            reserved_names=self.emitter_config.reserved_names,
            localized_text_type=self.emitter_config.localized_text_type
        )

        builder.line("#pragma once")
        builder.blank_line()
        if file_spec.includes:
            for include in file_spec.includes:
                builder.line(f'#include "{include}"')
            builder.blank_line()

        for index, type_spec in enumerate(file_spec.types):
            if index:
                builder.blank_line()
            self._render_type(builder, type_spec)

        valid, error = check_balanced(document.text)
        if not valid:
            logger.warning(f"Generated {document.path} looks malformed: {error}")

        return document

    def _render_type(self, builder: DeclarationBuilder, type_spec: TypeSpec) -> None:
        name = f"{type_spec.name} : public {type_spec.parent}" if type_spec.parent else type_spec.name

        if type_spec.kind == "class":
            builder.start_class(name, type_spec.comment, type_spec.annotated, type_spec.specifiers)
        else:
            builder.start_struct(name, type_spec.comment, type_spec.annotated)

        if type_spec.access:
            builder.access_modifier(type_spec.access)

        for member in type_spec.members:
            builder.declaration(
                member.type,
                member.name,
                member.default,
                member.comment,
                member.annotated,
                member.specifiers
            )

        builder.end_struct(type_spec.inline_declaration)

    def generate(self, schema: GenerationSchema, root: Union[str, Path] = ".") -> GenerationReport:
        """
        Render and commit every file of a schema.

        A file that fails to commit is reported and the run continues with the
        remaining files.
        """
        report = GenerationReport()
        for file_spec in schema.files:
            document = self.render(file_spec, root)
            try:
                report.results.append(self.gate.commit(document))
            except PersistenceError as e:
                logger.error(f"Skipping {e.path}: {e}")
                report.failures.append(FileFailure(path=e.path, stage=e.stage, error=str(e)))

        logger.info(
            f"Generation finished: {len(report.written)} written, "
            f"{len(report.skipped)} unchanged, {len(report.failures)} failed"
        )
        return report
