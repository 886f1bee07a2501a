# stencil/components/emitter/naming.py
"""
Naming helpers for generated declarations.
"""
from stencil.constants import EXPORT_MACRO_SUFFIX


def split_name(name: str, separator: str = " ") -> str:
    """
    Insert a separator before every interior uppercase letter.

    ``"DisplayName"`` becomes ``"Display Name"``. No separator is added
    where one is already present, so splitting twice is a no-op.
    """
    result = []
    for i, char in enumerate(name):
        if i > 0 and char.isupper() and name[i - 1] != separator:
            result.append(separator)
        result.append(char)
    return "".join(result)


def export_macro_token(project_name: str) -> str:
    """Return the export macro for a project, e.g. ``MYGAME_API``."""
    return f"{project_name.upper()}{EXPORT_MACRO_SUFFIX}"
