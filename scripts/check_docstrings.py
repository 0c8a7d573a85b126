"""Check that public functions are documented and that docstring code blocks are properly closed."""

import ast
import re
from pathlib import Path
from typing import NamedTuple, TypeGuard

import rich
import rich.table
import rich.text

import tagunion as tu
from tagunion import option, result

SRC_DIR = Path().joinpath("src", "tagunion")
CODE_BLOCK_PATTERN = re.compile(r"^```(\w*)", re.MULTILINE)


class DocstringError(NamedTuple):
    """Error found in a docstring."""

    file_path: Path
    func_name: str
    line_no: int
    error_line_no: int
    errors: list[str]


class ErrorDetail(NamedTuple):
    """Detail of an error with its line number."""

    line_no: int
    message: str


def _check_file(file_path: Path) -> list[DocstringError]:
    try:
        tree = ast.parse(file_path.read_text(encoding="utf-8"))
    except SyntaxError:
        return []

    found = (
        _process_node(file_path, node)
        for node in ast.walk(tree)
        if _is_documentable(node)
    )
    return [error.value for error in found if option.is_some(error)]


def _is_documentable(
    node: ast.AST,
) -> TypeGuard[ast.FunctionDef | ast.AsyncFunctionDef]:
    return isinstance(node, (ast.FunctionDef, ast.AsyncFunctionDef))


def _is_public(node: ast.FunctionDef | ast.AsyncFunctionDef) -> bool:
    return not node.name.startswith("_")


def _process_node(
    file_path: Path, node: ast.FunctionDef | ast.AsyncFunctionDef
) -> tu.Option[DocstringError]:
    def _to_error(details: list[ErrorDetail]) -> DocstringError:
        return DocstringError(
            file_path=file_path,
            func_name=node.name,
            line_no=node.lineno,
            error_line_no=details[0].line_no,
            errors=[detail.message for detail in details],
        )

    docstring = ast.get_docstring(node)
    if docstring is None:
        if _is_public(node):
            return option.some(
                _to_error([ErrorDetail(node.lineno, "Missing docstring")])
            )
        return option.none()

    checked = _check_code_blocks(docstring, node.lineno)
    match checked:
        case tu.Err(details):
            return option.some(_to_error(details))
        case _:
            return option.none()


def _check_code_blocks(
    docstring: str, start_line: int
) -> tu.Result[None, list[ErrorDetail]]:
    """Check that all code blocks in docstring are properly closed."""
    marker = "```"
    errors: list[ErrorDetail] = []
    stack: list[tuple[int, str]] = []
    for line_num, line in enumerate(docstring.split("\n")):
        match = CODE_BLOCK_PATTERN.search(line.strip())
        if not match:
            continue
        if line.strip() != marker:
            stack.append((line_num + 1, match.group(1) or "plaintext"))
        elif stack:
            stack.pop()
        else:
            errors.append(
                ErrorDetail(
                    start_line + line_num,
                    "Closing block ``` without matching opening",
                )
            )
    errors.extend(
        ErrorDetail(start_line + idx - 1, f"Unclosed ```{lang} block")
        for idx, lang in stack
    )
    return result.err(errors) if errors else result.ok(None)


def main() -> None:
    """Check all docstrings in the project."""
    rich.print(
        rich.text.Text(
            "Checking docstrings for properly closed code blocks...", style="cyan bold"
        )
    )
    files = sorted(SRC_DIR.rglob("*.py"))
    rich.print(f"Checking {len(files)} py files...")
    all_errors = [error for path in files for error in _check_file(path)]

    if not all_errors:
        rich.print(rich.text.Text("[OK] No issues found!", style="green"))
        return

    table = rich.table.Table(title="Issues Found", show_header=True)
    table.add_column("File", style="cyan")
    table.add_column("Function", style="magenta")
    table.add_column("Error", style="red")
    for error in all_errors:
        table.add_row(
            f"{error.file_path.relative_to(Path())}:{error.error_line_no}",
            error.func_name,
            "\n".join(error.errors),
        )
    rich.print(table)
    rich.print(
        rich.text.Text(f"\n[FAILED] Found {len(all_errors)} issue(s)", style="red")
    )
    raise SystemExit(1)


if __name__ == "__main__":
    main()
