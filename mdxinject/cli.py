from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from .config.load import find_config, read_yaml_map
from .config.model import TransformOptions
from .errors import InjectUserError
from .resolvers.base import ResolveContext
from .resolvers.default import DefaultModuleResolver
from .transform import CodeInjector
from .tree.jsonic import dump_tree, load_tree
from .version import tool_version


def _setup_logging(verbose: bool) -> None:
    if os.environ.get("MDXINJECT_DEBUG"):
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING
    log = logging.getLogger("mdxinject")
    log.setLevel(level)
    if not log.handlers:
        h = logging.StreamHandler(sys.stderr)
        h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        log.addHandler(h)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="mdxinject",
        description="Inject imported source code into MDX component props",
        add_help=True,
    )
    p.add_argument("-v", "--version", action="version", version=f"%(prog)s {tool_version()}")
    p.add_argument("--verbose", action="store_true", help="log every injection to stderr")
    sub = p.add_subparsers(dest="cmd", required=True)

    # Shared between inject/resolve
    def add_common(sp: argparse.ArgumentParser) -> None:
        sp.add_argument(
            "--config",
            metavar="FILE",
            help="YAML config (default: nearest mdxinject.yaml above the document or cwd)",
        )
        sp.add_argument(
            "--ext",
            action="append",
            metavar=".EXT",
            help="extension to probe, in order (can be given several times)",
        )
        sp.add_argument("--doc", metavar="PATH", help="path of the MDX document the tree came from")

    sp_inject = sub.add_parser("inject", help="transform an mdast JSON tree")
    sp_inject.add_argument("tree", help="mdast JSON file, or - for stdin")
    add_common(sp_inject)
    target = sp_inject.add_mutually_exclusive_group()
    target.add_argument("--component", metavar="NAME", help="exact component name to inject into")
    target.add_argument("--pattern", metavar="REGEX", help="regex selecting component names")
    sp_inject.add_argument("--prop", metavar="NAME", help="prop name for the injected code (default: code)")
    sp_inject.add_argument("--resolver", metavar="MODULE:ATTR", help="custom module resolver function")
    sp_inject.add_argument("-o", "--output", metavar="FILE", help="write result here instead of stdout")
    sp_inject.add_argument("--report", action="store_true", help="print the injection report instead of the tree")

    sp_resolve = sub.add_parser("resolve", help="show the file an import specifier resolves to")
    sp_resolve.add_argument("specifier", help="import path as written in the document, e.g. ./foo")
    add_common(sp_resolve)

    return p


def _config_map(ns: argparse.Namespace) -> tuple[Dict[str, Any], Optional[Path]]:
    if ns.config:
        path = Path(ns.config)
        if not path.is_file():
            raise InjectUserError(f"Config file not found: {path}")
    else:
        path = find_config(Path(ns.doc) if ns.doc else Path.cwd())
    if path is None:
        return {}, None
    return read_yaml_map(path), path.parent


def _options(ns: argparse.Namespace, *, require_target: bool = True) -> TransformOptions:
    raw, base_dir = _config_map(ns)

    if getattr(ns, "component", None):
        raw["component_to_inject"] = ns.component
    elif getattr(ns, "pattern", None):
        raw["component_to_inject"] = {"pattern": ns.pattern}
    if getattr(ns, "prop", None):
        raw["prop_name"] = ns.prop
    if getattr(ns, "resolver", None):
        raw["module_resolver"] = ns.resolver
    if ns.ext:
        raw["extensions"] = list(ns.ext)
    if not require_target and not raw.get("component_to_inject"):
        # `resolve` does not match components; any placeholder target will do
        raw["component_to_inject"] = "*"

    return TransformOptions.from_dict(raw, base_dir=base_dir)


def _read_tree_text(arg: str) -> str:
    if arg == "-":
        return sys.stdin.read()
    path = Path(arg)
    if not path.is_file():
        raise InjectUserError(f"Tree file not found: {path}")
    return path.read_text(encoding="utf-8")


def _cmd_inject(ns: argparse.Namespace) -> int:
    opts = _options(ns)
    try:
        tree = load_tree(_read_tree_text(ns.tree))
    except (ValueError, TypeError) as e:
        raise InjectUserError(f"Invalid document tree: {e}") from e

    injector = CodeInjector(opts)
    report = injector.run(tree, ns.doc)

    if ns.report:
        text = json.dumps(report.model_dump(mode="json"), ensure_ascii=False, indent=2) + "\n"
    else:
        text = dump_tree(tree)

    if ns.output:
        Path(ns.output).write_text(text, encoding="utf-8")
    else:
        sys.stdout.write(text)
    return 0


def _cmd_resolve(ns: argparse.Namespace) -> int:
    opts = _options(ns, require_target=False)
    doc = Path(ns.doc) if ns.doc else opts.file_path
    path = DefaultModuleResolver().resolve(ns.specifier, ResolveContext(options=opts, document_path=doc))
    sys.stdout.write(f"{path}\n")
    return 0


def main(argv: list[str] | None = None) -> int:
    ns = _build_parser().parse_args(argv)
    _setup_logging(ns.verbose)

    try:
        if ns.cmd == "inject":
            return _cmd_inject(ns)
        if ns.cmd == "resolve":
            return _cmd_resolve(ns)
    except InjectUserError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return 2

    return 2


if __name__ == "__main__":
    raise SystemExit(main())
