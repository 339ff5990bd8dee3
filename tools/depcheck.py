from __future__ import annotations

import argparse
import ast
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Sequence

# The domain layer stays plain Python: no frameworks, no outer layers.
DOMAIN_FORBIDDEN = frozenset(
    {
        "pydantic",
        "sqlalchemy",
        "redis",
        "opentelemetry",
        "prometheus_client",
        "fdash.application",
        "fdash.infrastructure",
        "fdash.tools",
        "fdash.bootstrap",
    }
)

DEFAULT_DOMAIN_PATH = Path(__file__).resolve().parents[1] / "src" / "fdash" / "domain"


@dataclass(frozen=True)
class ImportViolation:
    file_path: Path
    line: int
    module: str

    def render(self) -> str:
        return f"{self.file_path}:{self.line} -> {self.module}"


def _python_files(root: Path) -> Iterator[Path]:
    if root.is_file():
        if root.suffix == ".py":
            yield root
        return
    if root.is_dir():
        yield from sorted(root.rglob("*.py"))


def _is_forbidden(module: str, forbidden: Iterable[str]) -> bool:
    return any(module == name or module.startswith(f"{name}.") for name in forbidden)


def _imported_modules(tree: ast.AST) -> Iterator[tuple[int, str]]:
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                yield node.lineno, alias.name
        elif isinstance(node, ast.ImportFrom) and node.module and node.level == 0:
            yield node.lineno, node.module


def scan_file(file_path: Path, forbidden: Iterable[str] = DOMAIN_FORBIDDEN) -> list[ImportViolation]:
    tree = ast.parse(file_path.read_text(encoding="utf-8"), filename=str(file_path))
    names = tuple(forbidden)
    return [
        ImportViolation(file_path=file_path, line=line, module=module)
        for line, module in _imported_modules(tree)
        if _is_forbidden(module, names)
    ]


def find_violations(
    paths: Sequence[Path],
    forbidden: Iterable[str] = DOMAIN_FORBIDDEN,
) -> list[ImportViolation]:
    names = tuple(forbidden)
    violations: list[ImportViolation] = []
    for path in paths:
        for file_path in _python_files(path):
            violations.extend(scan_file(file_path, names))
    return sorted(violations, key=lambda v: (str(v.file_path), v.line))


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Keep src/fdash/domain free of framework and outer-layer imports."
    )
    parser.add_argument(
        "--path",
        action="append",
        default=[],
        help="Path to scan (repeatable). Defaults to src/fdash/domain.",
    )
    parser.add_argument(
        "--forbid",
        action="append",
        default=[],
        help="Extra module to forbid (repeatable).",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    scan_paths = [Path(item) for item in args.path] or [DEFAULT_DOMAIN_PATH]
    forbidden = DOMAIN_FORBIDDEN | set(args.forbid)

    violations = find_violations(scan_paths, forbidden)
    if not violations:
        print("depcheck passed")
        return 0

    print(f"depcheck failed: {len(violations)} forbidden import(s)")
    for violation in violations:
        print(violation.render())
    return 1


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
