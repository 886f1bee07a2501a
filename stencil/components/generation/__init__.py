# stencil/components/generation/__init__.py
"""Schema-driven header generation."""
from stencil.components.generation.models import FileSpec, GenerationSchema, MemberSpec, TypeSpec
from stencil.components.generation.generator import GenerationReport, HeaderGenerator, load_schema

__all__ = [
    'FileSpec', 'GenerationSchema', 'MemberSpec', 'TypeSpec',
    'GenerationReport', 'HeaderGenerator', 'load_schema',
]
