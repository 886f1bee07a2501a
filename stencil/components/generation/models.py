# stencil/components/generation/models.py
"""
Data models for schema-driven generation.

A schema lists the files to generate; each file lists the classes and
structs it declares together with their members.
"""
from typing import List, Literal, Optional

from pydantic import BaseModel, Field


class MemberSpec(BaseModel):
    """Model for a single member declaration."""
    type: str = Field(..., description="Declared type, e.g. int32 or FText")
    name: str = Field(..., description="Member name")
    default: Optional[str] = Field(None, description="Default value expression")
    comment: Optional[str] = Field(None, description="Documentation comment")
    annotated: bool = Field(False, description="Whether to emit a property annotation")
    specifiers: str = Field("", description="Annotation specifiers, passed through verbatim")


class TypeSpec(BaseModel):
    """Model for a class or struct declaration."""
    kind: Literal["class", "struct"] = Field("class", description="Declaration keyword")
    name: str = Field(..., description="Type name")
    parent: Optional[str] = Field(None, description="Public base type")
    comment: Optional[str] = Field(None, description="Documentation comment")
    annotated: bool = Field(False, description="Whether to emit a reflection annotation and generated body")
    specifiers: str = Field("", description="Class annotation specifiers")
    access: Optional[str] = Field(None, description="Access label emitted before the members, e.g. public")
    inline_declaration: Optional[str] = Field(None, description="Instance name declared right after the closing brace")
    members: List[MemberSpec] = Field(default_factory=list, description="Member declarations")


class FileSpec(BaseModel):
    """Model for one generated file."""
    path: str = Field(..., description="Path relative to the output root")
    includes: List[str] = Field(default_factory=list, description="Headers to include")
    types: List[TypeSpec] = Field(default_factory=list, description="Types declared in the file")


class GenerationSchema(BaseModel):
    """Model for a complete generation run."""
    project: Optional[str] = Field(None, description="Project name overriding the configured one")
    files: List[FileSpec] = Field(default_factory=list, description="Files to generate")
