# stencil/components/emitter/validation.py
"""
Lexical sanity checks for generated output.
"""
from typing import Tuple

BRACKET_PAIRS = [('(', ')'), ('[', ']'), ('{', '}')]


def check_balanced(content: str) -> Tuple[bool, str]:
    """
    Check that brackets are balanced and never close before they open.

    This is a lexical check only; string literals are not special-cased.
    
    Args:
        content: Generated source text
        
    Returns:
        Tuple of (is_valid, error_message)
    """
    for opening, closing in BRACKET_PAIRS:
        depth = 0
        for line_number, line in enumerate(content.splitlines(), start=1):
            for char in line:
                if char == opening:
                    depth += 1
                elif char == closing:
                    depth -= 1
                    if depth < 0:
                        return False, f"Unexpected '{closing}' on line {line_number}"
        if depth != 0:
            return False, f"Unmatched brackets: {opening}{closing} ({depth} left open)"
    
    return True, ""
