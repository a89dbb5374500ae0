"""Render and write the generated throttler modules."""

import json
from importlib import resources
from pathlib import Path
from typing import Dict, Iterable, List, Sequence

THROTTLER_NAMES_MODULE = "throttler_names.py"
THROTTLER_NAMES_STUB = "throttler_names.pyi"
DECORATORS_MODULE = "decorators.py"
DECORATORS_STUB = "decorators.pyi"


def load_template(name: str) -> str:
    """Read a bundled template from ``codegen/templates``."""
    return (
        resources.files("selective_throttler.codegen")
        .joinpath("templates", f"{name}.tmpl")
        .read_text(encoding="utf-8")
    )


def render_template(name: str, values: Dict[str, str]) -> str:
    """Fill the ``{{KEY}}`` placeholders of a template."""
    content = load_template(name)
    for key, value in values.items():
        content = content.replace("{{" + key + "}}", value)
    return content


def render_names_tuple(names: Sequence[str]) -> str:
    """Render names as a tuple literal, one name per line."""
    if not names:
        return "()"
    lines = ["("]
    lines.extend(f"    {json.dumps(name)}," for name in names)
    lines.append(")")
    return "\n".join(lines)


def render_name_type(names: Sequence[str]) -> str:
    """Render the ``ThrottlerName`` alias for the names stub."""
    if not names:
        return "str"
    return "Literal[" + ", ".join(json.dumps(name) for name in names) + "]"


def render_artifacts(names: Iterable[str]) -> Dict[str, str]:
    """Render every generated file for a set of throttler names.

    Names are sorted and deduplicated, so the same input always renders
    byte-identical output.

    Args:
        names: Discovered throttler names

    Returns:
        Mapping of file name to file content
    """
    ordered = sorted(set(names))
    values = {
        "ALL_THROTTLER_NAMES": render_names_tuple(ordered),
        "THROTTLER_NAME_TYPE": render_name_type(ordered),
    }
    return {
        file_name: render_template(file_name, values)
        for file_name in (
            THROTTLER_NAMES_MODULE,
            DECORATORS_MODULE,
            DECORATORS_STUB,
            THROTTLER_NAMES_STUB,
        )
    }


def write_artifacts(artifacts: Dict[str, str], output_dir: Path) -> List[Path]:
    """Write rendered files, creating ``output_dir`` if needed.

    Files whose content is already identical are left untouched.

    Returns:
        Paths of every artifact (written or unchanged)

    Raises:
        OSError: If the directory or a file cannot be written
    """
    output_dir.mkdir(parents=True, exist_ok=True)

    paths = []
    for file_name, content in artifacts.items():
        path = output_dir / file_name
        if not (path.is_file() and path.read_text(encoding="utf-8") == content):
            path.write_text(content, encoding="utf-8")
        paths.append(path)
    return paths


def emit(names: Iterable[str], output_dir: Path) -> List[Path]:
    """Render and write the generated modules for ``names``."""
    return write_artifacts(render_artifacts(names), output_dir)


__all__ = [
    "DECORATORS_MODULE",
    "DECORATORS_STUB",
    "THROTTLER_NAMES_MODULE",
    "THROTTLER_NAMES_STUB",
    "emit",
    "render_artifacts",
    "write_artifacts",
]
