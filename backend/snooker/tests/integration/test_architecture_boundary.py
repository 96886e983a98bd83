"""Architectural boundary tests enforcing layer dependency rules.

Layer dependency direction (allowed):
  server → logic
  server → shared

Forbidden (runtime imports):
  logic → server
  logic → starlette / pydantic_settings
"""

import ast
from pathlib import Path

_SNOOKER_ROOT = Path(__file__).resolve().parents[2]


def _collect_runtime_import_targets(source_dir: Path) -> list[tuple[str, int, str]]:
    """Parse all .py files and return (filename, lineno, module) for runtime imports.

    Skip imports inside `if TYPE_CHECKING:` blocks.
    """
    results: list[tuple[str, int, str]] = []
    for py_file in source_dir.rglob("*.py"):
        tree = ast.parse(py_file.read_text(), filename=str(py_file))
        type_checking_ranges = _find_type_checking_ranges(tree)
        for node in ast.walk(tree):
            if not isinstance(node, (ast.Import, ast.ImportFrom)):
                continue
            if any(start <= node.lineno <= end for start, end in type_checking_ranges):
                continue
            if isinstance(node, ast.Import):
                results.extend((py_file.name, node.lineno, alias.name) for alias in node.names)
            elif node.module is not None:
                results.append((py_file.name, node.lineno, node.module))
    return results


def _find_type_checking_ranges(tree: ast.Module) -> list[tuple[int, int]]:
    ranges: list[tuple[int, int]] = []
    for node in ast.walk(tree):
        if isinstance(node, ast.If) and isinstance(node.test, ast.Name) and node.test.id == "TYPE_CHECKING":
            start = node.lineno
            end = max(child.lineno for child in ast.walk(node) if hasattr(child, "lineno"))
            ranges.append((start, end))
    return ranges


def test_logic_does_not_import_server():
    """snooker.logic must not import from snooker.server (one-way dependency)."""
    violations = [
        f"{name}:{lineno} {module}"
        for name, lineno, module in _collect_runtime_import_targets(_SNOOKER_ROOT / "logic")
        if module.startswith("snooker.server")
    ]
    assert violations == [], f"snooker.logic imports from snooker.server: {violations}"


def test_logic_is_framework_free():
    """The rules engine must stay usable without the HTTP stack."""
    forbidden = ("starlette", "uvicorn", "pydantic_settings")
    violations = [
        f"{name}:{lineno} {module}"
        for name, lineno, module in _collect_runtime_import_targets(_SNOOKER_ROOT / "logic")
        if module.split(".")[0] in forbidden
    ]
    assert violations == [], f"snooker.logic imports web/config frameworks: {violations}"
