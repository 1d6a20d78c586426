import argparse
import json
import sys
from typing import Any

from fsedit.container import container


def _load_arguments(args: argparse.Namespace) -> dict[str, Any]:
    raw = args.args
    if args.args_file:
        with open(args.args_file, "r", encoding="utf-8") as f:
            raw = f.read()
    if not raw:
        return {}
    data = json.loads(raw)
    if not isinstance(data, dict):
        raise ValueError("Tool arguments must be a JSON object")
    return data


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="fsedit-tools",
        description="Invoke one 'files.*' tool and print its JSON result.",
    )
    parser.add_argument(
        "name",
        help="Tool name (e.g. files.edit), or 'list' to show the available tools",
    )
    parser.add_argument(
        "--args",
        default=None,
        help='Tool arguments as a JSON object, e.g. \'{"path": "a.txt"}\'',
    )
    parser.add_argument(
        "--args-file",
        default=None,
        help="Read the tool arguments from a JSON file instead",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Pretty print output (JSON and diff) with colors",
    )

    args = parser.parse_args(argv)
    tools = container.get_files_tools_handler()

    if args.name == "list":
        result: Any = tools.available_tools()
    else:
        try:
            arguments = _load_arguments(args)
        except (OSError, ValueError) as e:
            print(f"Invalid tool arguments: {e}", file=sys.stderr)
            return 2
        try:
            result = json.loads(tools.dispatch(args.name, arguments))
        except ValueError as e:
            print(str(e), file=sys.stderr)
            return 2

    if args.pretty:
        from rich import box
        from rich.console import Console
        from rich.panel import Panel
        from rich.syntax import Syntax

        console = Console(soft_wrap=True)
        diff = result.pop("diff", "") if isinstance(result, dict) else ""
        console.print_json(data=result)
        if diff:
            console.print(
                Panel(
                    Syntax(diff, "diff"),
                    title="diff",
                    box=box.ROUNDED,
                    border_style="magenta",
                    expand=True,
                )
            )
    else:
        print(json.dumps(result, ensure_ascii=False, indent=2))

    if isinstance(result, dict) and (
        result.get("success") is False or result.get("status") == "error"
    ):
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
