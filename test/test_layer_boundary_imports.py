import ast
import unittest
from pathlib import Path


def _iter_py_files(root: Path) -> list[Path]:
    return sorted(
        p
        for p in root.rglob("*.py")
        if "__pycache__" not in p.parts
    )


def _find_forbidden_imports(py_file: Path, forbidden_roots: tuple[str, ...]) -> list[str]:
    """
    Static guardrail: enforce layer boundaries regardless of installed optional deps.

    We use AST parsing (not regex) to avoid false positives from comments/strings.
    """
    try:
        tree = ast.parse(py_file.read_text(encoding="utf-8"), filename=str(py_file))
    except SyntaxError as exc:
        return [f"SyntaxError while parsing {py_file}: {exc}"]

    offenders: list[str] = []

    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                name = alias.name
                if name.split(".")[0] in forbidden_roots:
                    offenders.append(f"import {name}")
        elif isinstance(node, ast.ImportFrom):
            # Relative import (module=None) is always within the package boundary.
            if node.module is None:
                continue
            mod = node.module
            if mod.split(".")[0] in forbidden_roots:
                offenders.append(f"from {mod} import ...")

    return offenders


class TestLayerBoundaryImports(unittest.TestCase):
    def _assert_no_imports(self, layer: str, forbidden: tuple[str, ...]) -> None:
        repo_root = Path(__file__).resolve().parents[1]
        layer_root = repo_root / "backend" / layer
        self.assertTrue(layer_root.exists(), msg=f"Expected layer dir: {layer_root}")

        violations: list[str] = []
        for py_file in _iter_py_files(layer_root):
            offenders = _find_forbidden_imports(py_file, forbidden)
            if offenders:
                violations.append(f"{py_file.relative_to(repo_root)}: {offenders}")

        self.assertFalse(
            violations,
            msg=(
                f"`backend/{layer}` must not import {', '.join(forbidden)}.\n"
                + "\n".join(violations)
            ),
        )

    def test_domain_is_pure(self) -> None:
        self._assert_no_imports(
            "domain",
            ("application", "infrastructure", "server", "config", "aiohttp", "fastapi"),
        )

    def test_application_does_not_import_adapters_or_server(self) -> None:
        self._assert_no_imports("application", ("infrastructure", "server", "aiohttp", "fastapi"))

    def test_infrastructure_does_not_import_server(self) -> None:
        self._assert_no_imports("infrastructure", ("server", "config"))


if __name__ == "__main__":
    unittest.main()
