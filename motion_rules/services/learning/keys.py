"""
Composite rule keys.

Extraction (writer) and enforcement/application (readers) must build the
same string for the same element or scene pair, so both go through here.
"""

from typing import Union

Number = Union[int, float]


def _format_dimension(value: Number) -> str:
    # 800.0 and 800 must produce the same key
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def element_key(element_type: str, width: Number, height: Number) -> str:
    """Key for size-specific element rules: "{type}_{width}x{height}"."""
    return f"{element_type}_{_format_dimension(width)}x{_format_dimension(height)}"


def transition_key(from_scene: str, to_scene: str) -> str:
    """Key for scene-pair transition rules: "{from}_to_{to}"."""
    return f"{from_scene}_to_{to_scene}"
