"""
The injection pass.

For every top-level component element whose name matches the configured
target, the name referenced by its first child is looked up in the
document's imports, the import is resolved to a file, and the formatted
file content is appended to the element as an attribute.

Per component the outcome is one of:
  • not matched: node untouched;
  • matched, unresolved: no first child, no import binding, or the custom
    resolver declined; node untouched, no error;
  • matched, injected: attribute appended;
  • matched, resolution failed: ModuleResolutionError/FormatError raised,
    the whole document fails.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from .config.model import TransformOptions
from .formatting import CodeFormatter, PrettierFormatter, parser_for_path
from .imports.table import ImportTable, build_import_table
from .inject import set_attribute
from .matcher import component_matches, first_child_name
from .report import InjectionRecord, InjectionReport
from .resolvers.base import ModuleResolver, ResolveContext, read_module
from .resolvers.custom import CallableModuleResolver
from .resolvers.default import DefaultModuleResolver
from .tree.filter import filter_nodes
from .tree.model import JsxElement, Root

logger = logging.getLogger(__name__)

PathArg = Union[str, Path, None]


class CodeInjector:
    """
    Configured injector; call it once per document.

    Holds no per-document state: the import table is rebuilt on every call.
    """

    def __init__(
        self,
        options: TransformOptions,
        *,
        resolver: Optional[ModuleResolver] = None,
        formatter: Optional[CodeFormatter] = None,
    ):
        self.options = options
        if resolver is None:
            if options.module_resolver is not None:
                resolver = CallableModuleResolver(options.module_resolver)
            else:
                resolver = DefaultModuleResolver()
        self.resolver = resolver
        self.formatter = formatter or PrettierFormatter(options.formatter)

    def __call__(self, tree: Root, file_path: PathArg = None) -> Root:
        self.run(tree, file_path)
        return tree

    def run(self, tree: Root, file_path: PathArg = None) -> InjectionReport:
        """
        Transform `tree` in place and describe what happened to each matched component.

        Args:
            tree: Document root
            file_path: Path of the document; overrides `options.file_path`

        Returns:
            InjectionReport with one record per matched component
        """
        doc_path = Path(file_path) if file_path is not None else self.options.file_path
        context = ResolveContext(options=self.options, document_path=doc_path)
        report = InjectionReport(
            document=str(doc_path) if doc_path is not None else None,
            prop_name=self.options.prop_name,
        )

        nodes = filter_nodes(tree.children)
        table: Optional[ImportTable] = None
        for node in nodes:
            if not isinstance(node, JsxElement):
                continue
            if not component_matches(node.name, self.options.component_to_inject):
                continue
            if table is None:
                table = build_import_table(nodes)
            report.records.append(self._process(node, table, context))

        return report

    def _process(self, node: JsxElement, table: ImportTable, context: ResolveContext) -> InjectionRecord:
        reference = first_child_name(node)
        specifier = table.lookup(reference)
        if specifier is None:
            logger.debug("<%s>: no import bound to %r, left untouched", node.name, reference)
            return InjectionRecord(component=node.name, reference=reference, state="unresolved")

        path = self.resolver.resolve(specifier, context)
        if path is None:
            logger.debug("<%s>: resolver declined '%s', left untouched", node.name, specifier)
            return InjectionRecord(
                component=node.name, reference=reference, specifier=specifier, state="unresolved",
            )

        source = read_module(path, specifier)
        fmt = self.options.formatter
        parser = parser_for_path(path, fmt.parser) if fmt.infer_parser else fmt.parser
        code = self.formatter.format(source, parser)

        set_attribute(node, self.options.prop_name, code)
        logger.info("Injected %s into <%s %s=...>", path, node.name, self.options.prop_name)
        return InjectionRecord(
            component=node.name,
            reference=reference,
            specifier=specifier,
            resolved_path=str(path),
            state="injected",
        )


def transform(
    options: Union[TransformOptions, Mapping[str, Any], None] = None,
    *,
    resolver: Optional[ModuleResolver] = None,
    formatter: Optional[CodeFormatter] = None,
    **overrides: Any,
) -> CodeInjector:
    """
    Plugin factory.

    `options` may be a TransformOptions, a config mapping (as in the YAML
    file) or omitted in favour of keyword arguments. Fails with ConfigError
    before any document is seen if no component target is given.
    """
    if options is None:
        opts = TransformOptions(**overrides)
    elif isinstance(options, TransformOptions):
        opts = options.with_overrides(**overrides) if overrides else options
    else:
        opts = TransformOptions.from_dict({**options})
        if overrides:
            opts = opts.with_overrides(**overrides)
    return CodeInjector(opts, resolver=resolver, formatter=formatter)


__all__ = ["CodeInjector", "transform"]
